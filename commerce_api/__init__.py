"""Layered commerce backend: entity stores, validation services and HTTP routes."""

__version__ = "1.0.0"
