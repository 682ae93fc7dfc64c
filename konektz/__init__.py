"""Konektz API - user accounts and two-party direct messaging."""

__version__ = "1.0.0"
