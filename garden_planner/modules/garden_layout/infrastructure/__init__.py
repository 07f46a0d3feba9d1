"""Infrastructure layer for the garden layout module: persistence adapters."""
