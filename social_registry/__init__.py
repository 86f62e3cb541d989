"""In-memory client registry for a social-network simulation."""

__version__ = "1.0.0"
