"""
Utility modules for Daraja API operations.
"""

from .http_client import HTTPClient
from .validators import (
    validate_phone_number,
    validate_amount,
    validate_account_reference
)
from .formatters import (
    format_timestamp,
    generate_password,
    format_amount,
    format_currency
)

__all__ = [
    'HTTPClient',
    'validate_phone_number',
    'validate_amount',
    'validate_account_reference',
    'format_timestamp',
    'generate_password',
    'format_amount',
    'format_currency',
]
