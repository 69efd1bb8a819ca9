"""Port abstractions."""
