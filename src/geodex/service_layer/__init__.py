"""Service layer: messages, query composition and handlers."""
