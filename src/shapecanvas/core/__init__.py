"""Value types, color registry and error taxonomy."""
