"""
Shopstats
Read-only sales, inventory and review analytics over an e-commerce dataset.
"""

__version__ = "0.1.0"
