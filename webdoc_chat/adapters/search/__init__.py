"""Web lookup adapters."""
