"""Domain models for the client registry."""
