"""User settings schema and persistence."""
