"""
Query core for the family history site: dataset loading, search and
categorical filters, and relationship resolution.
"""

__version__ = "0.1.0"
