"""Infrastructure layer - database, event bus, adapters and logging."""
