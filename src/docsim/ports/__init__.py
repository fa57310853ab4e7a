"""Ports layer - protocols between the application and its adapters."""
