"""Core domain: models, static data, services."""
