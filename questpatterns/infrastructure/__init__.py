"""Infrastructure layer - adapters, narrative sinks, registries and logging."""
