"""JSON web API for rollexpr."""
