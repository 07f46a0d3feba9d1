"""HTTP API for the garden layout module."""
