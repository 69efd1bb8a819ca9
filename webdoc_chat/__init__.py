"""WebDoc Chat - chat backend augmented with web lookups and uploaded PDFs."""

__version__ = "1.0.0"
