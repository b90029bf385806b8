"""Console manager for a small shop's employees, stock, orders and reports."""

__version__ = "1.0.0"