"""Unit tests: one module at a time, with fakes in place of the database."""
