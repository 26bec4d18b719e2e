"""Markup Bridge - legacy color codes and tag markup, reconciled."""

__version__ = "0.1.0"
