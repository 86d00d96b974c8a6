"""Integration tests against in-memory and file-backed SQLite stores."""
