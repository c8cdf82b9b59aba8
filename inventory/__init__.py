"""Inventory listings: correlated vs pre-aggregated flattening of item relations."""

__version__ = "1.0.0"
