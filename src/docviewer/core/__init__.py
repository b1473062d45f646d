"""Manifest, resolution, rendering and navigation."""
