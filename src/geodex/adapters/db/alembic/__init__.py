"""Alembic migration scripts for the GEODEX record store."""
