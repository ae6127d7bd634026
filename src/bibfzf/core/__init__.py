"""Core pipeline: configuration, bibliography loading, and entry actions."""
