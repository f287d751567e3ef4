"""Data models for outlines, snippets, settings and selection state."""
