"""Sample users, categories and products used when no data directory is given."""
