"""Domain layer: record types persisted by the record store."""
