"""Menu actions for mongodock - container lifecycle, databases, users."""
