"""Domain layer: models, exceptions and pure services."""
