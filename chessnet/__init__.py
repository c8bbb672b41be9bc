"""Networked two-player chess: board logic, a pygame client and a relay server."""

__version__ = "0.1.0"