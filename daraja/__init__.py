"""
M-Pesa Daraja API client for Django

A reusable client for Safaricom's Daraja API: STK push, B2B, B2C,
reversals, balance and status queries, and C2B URL registration.
"""

__version__ = "0.1.0"

from .client import DarajaClient
from .config import DarajaConfig, base_url_for
from .constants import Environment
from .services.base import OperationResult

__all__ = [
    'DarajaClient',
    'DarajaConfig',
    'Environment',
    'OperationResult',
    'base_url_for',
]
