"""IT asset, warranty and maintenance tracking: dashboard and report aggregation."""

__version__ = "0.1.0"
