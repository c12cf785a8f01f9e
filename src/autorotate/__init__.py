"""Rotating image catalog for ownable entities."""
