"""Price Watch backend API.

Tracks products a user wants to watch, records price snapshots and
compares them against a target price.
"""

__version__ = "1.0.0"
