"""mongodock - interactive manager for a local MongoDB Docker container."""
