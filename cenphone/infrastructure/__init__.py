"""Infrastructure layer - logging, password hashing and database lifecycle."""
