"""Puget Sound ferry departures and conditions."""

__version__ = "0.1.0"
