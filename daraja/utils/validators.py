"""
Validation utilities for Daraja payment operations.
"""

import re
from decimal import Decimal, InvalidOperation
from typing import Optional
from ..constants import KENYA_COUNTRY_CODE, PHONE_NUMBER_LENGTH
from ..exceptions import InvalidPhoneNumberError, InvalidAmountError, ValidationError


def validate_phone_number(phone: str, country_code: str = KENYA_COUNTRY_CODE) -> str:
    """
    Validate and format a Safaricom phone number (MSISDN).

    Args:
        phone: Phone number to validate
        country_code: Expected country code (default: 254 for Kenya)

    Returns:
        Validated phone number in format: 2547XXXXXXXX or 2541XXXXXXXX

    Raises:
        InvalidPhoneNumberError: If phone number is invalid
    """
    if not phone:
        raise InvalidPhoneNumberError("Phone number is required")

    # Remove all non-digit characters (this also drops a leading +)
    phone = re.sub(r'\D', '', str(phone))

    # Handle different formats
    if phone.startswith('0'):
        # Convert 0712345678 to 254712345678
        phone = country_code + phone[1:]
    elif not phone.startswith(country_code):
        # Assume it's missing country code
        phone = country_code + phone

    # Validate length
    if len(phone) != PHONE_NUMBER_LENGTH:
        raise InvalidPhoneNumberError(
            f"Phone number must be {PHONE_NUMBER_LENGTH} digits including country code. "
            f"Got: {phone} ({len(phone)} digits)"
        )

    # Safaricom subscriber ranges start with 7 or 1 after the country code
    if phone[len(country_code)] not in ('7', '1'):
        raise InvalidPhoneNumberError(
            f"Phone number must start with {country_code}7 or {country_code}1. Got: {phone}"
        )

    return phone


def validate_amount(amount, min_amount: int = 1, max_amount: Optional[int] = None) -> int:
    """
    Validate a payment amount.

    M-Pesa only moves whole shillings, so fractional amounts are rejected.

    Args:
        amount: Amount to validate
        min_amount: Minimum allowed amount (default: 1 KES)
        max_amount: Maximum allowed amount (optional)

    Returns:
        Validated amount as int

    Raises:
        InvalidAmountError: If amount is invalid
    """
    try:
        value = Decimal(str(amount))
    except (InvalidOperation, ValueError, TypeError):
        raise InvalidAmountError(f"Invalid amount format: {amount}")

    if not value.is_finite():
        raise InvalidAmountError(f"Invalid amount format: {amount}")

    if value <= 0:
        raise InvalidAmountError(f"Amount must be greater than zero. Got: {amount}")

    if value != value.to_integral_value():
        raise InvalidAmountError(f"Amount must be a whole number. Got: {amount}")

    if value < min_amount:
        raise InvalidAmountError(
            f"Amount must be at least {min_amount}. Got: {amount}"
        )

    if max_amount and value > max_amount:
        raise InvalidAmountError(
            f"Amount must not exceed {max_amount}. Got: {amount}"
        )

    return int(value)


def validate_account_reference(reference: str, max_length: int = 12) -> str:
    """
    Validate an STK push account reference.

    Args:
        reference: Account reference to validate
        max_length: Maximum allowed length (gateway limit is 12)

    Returns:
        Validated account reference

    Raises:
        ValidationError: If reference is invalid
    """
    if not reference:
        raise ValidationError("Account reference is required")

    reference = str(reference).strip()

    if not reference:
        raise ValidationError("Account reference cannot be empty")

    if len(reference) > max_length:
        raise ValidationError(
            f"Account reference too long. Maximum {max_length} characters. "
            f"Got: {len(reference)} characters"
        )

    return reference
