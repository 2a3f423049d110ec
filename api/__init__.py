"""API package - HTTP routes, dependencies and middleware."""
