"""SnipDeck command line interface."""
