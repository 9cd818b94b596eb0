"""Scene document loading."""
