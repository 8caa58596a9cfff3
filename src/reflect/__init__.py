"""Reflect stablecoin quote and transaction API."""

__version__ = "0.1.0"
