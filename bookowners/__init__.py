"""
Book Owners API.

Fetches book owners from the upstream book owners API and groups their
books into Child and Adult categories.
"""

__version__ = "1.0.0"
