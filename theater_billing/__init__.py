"""
Theater Billing - Invoice Statement Engine

Computes billing statements for theater invoices. Each performance is priced
and awarded volume credits according to its play type, then totals are
aggregated and rendered as a plain-text statement.
"""

__version__ = "0.1.0"
__author__ = "Theater Billing Team"
