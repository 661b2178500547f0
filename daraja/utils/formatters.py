"""
Data formatting utilities for Daraja payment operations.
"""

import base64
from datetime import datetime
from decimal import Decimal
from typing import Optional, Union

from ..constants import TIMESTAMP_FORMAT


def format_timestamp(moment: Optional[datetime] = None) -> str:
    """
    Format a timestamp the way STK push requests expect it.

    Args:
        moment: Time to format (defaults to now)

    Returns:
        Timestamp string (e.g., "20240131235959")
    """
    return (moment or datetime.now()).strftime(TIMESTAMP_FORMAT)


def generate_password(shortcode: str, passkey: str, timestamp: str) -> str:
    """
    Build the STK push password.

    Args:
        shortcode: Business shortcode
        passkey: Lipa Na M-Pesa Online passkey
        timestamp: Timestamp sent alongside the password

    Returns:
        base64(shortcode + passkey + timestamp)
    """
    raw = f"{shortcode}{passkey}{timestamp}".encode('utf-8')
    return base64.b64encode(raw).decode('utf-8')


def format_amount(amount: Union[int, float, Decimal, str]) -> str:
    """
    Format amount the way the gateway expects it: whole shillings as a string.

    Args:
        amount: Amount to format

    Returns:
        Formatted amount string (e.g., "1000")
    """
    return str(int(Decimal(str(amount))))


def format_currency(amount: Union[int, float, Decimal, str], currency: str = "KES") -> str:
    """
    Format amount with currency symbol.

    Args:
        amount: Amount to format
        currency: Currency code

    Returns:
        Formatted string (e.g., "KES 1,000.00")
    """
    try:
        amount = Decimal(str(amount))
        # Format with thousand separators
        formatted = f"{amount:,.2f}"
        return f"{currency} {formatted}"
    except (ArithmeticError, ValueError, TypeError):
        return f"{currency} 0.00"
