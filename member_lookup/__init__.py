"""Membership verification lookup against the member directory API."""

__version__ = "0.1.0"
