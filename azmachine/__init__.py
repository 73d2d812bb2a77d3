"""Helpers for cluster machines on Azure: naming, response decoding, scale-from-zero annotations and resource services."""

__version__ = "0.1.0"