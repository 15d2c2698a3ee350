"""Core runtime helpers (logging)."""
