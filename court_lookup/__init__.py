"""
Court case lookup service with an append-only query log.
"""

__version__ = "0.1.0"
