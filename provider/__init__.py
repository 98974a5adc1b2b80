"""Emby proxy provider service — exposes the Emby item aggregator over HTTP."""

__version__ = "0.1.0"
