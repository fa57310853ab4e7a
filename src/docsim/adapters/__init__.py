"""Adapters layer - console I/O around the application."""
