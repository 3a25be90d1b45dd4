"""Infrastructure layer: Python host adapters and ambient environment."""
