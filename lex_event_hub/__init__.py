"""Lexington Event Hub: community event listings for Lexington, KY."""
__version__ = "1.0.0"
