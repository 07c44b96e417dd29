"""Renderers — plain unified markers, Rich terminal, JSON."""
