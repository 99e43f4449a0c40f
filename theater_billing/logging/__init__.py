"""
Logging configuration and utilities for the billing system.
"""
from .config import configure_logging, get_billing_logger, get_logger

__all__ = ["configure_logging", "get_billing_logger", "get_logger"]
