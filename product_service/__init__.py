"""Algonquin pet store product service."""

__version__ = "0.1.0"
