"""SQLAlchemy record store: engine, schema, mappings and migrations."""
