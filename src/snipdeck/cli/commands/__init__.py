"""Click commands for the snipdeck CLI."""
