"""Loyalty points and benefit transaction history service."""

__version__ = "1.0.0"
