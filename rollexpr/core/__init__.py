"""Core infrastructure: results, configuration and logging."""
