"""Pure domain services."""
