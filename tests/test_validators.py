from __future__ import annotations

import pytest

from daraja.exceptions import InvalidAmountError, InvalidPhoneNumberError, ValidationError
from daraja.utils.formatters import format_amount, format_currency, generate_password
from daraja.utils.validators import (
    validate_account_reference, validate_amount, validate_phone_number,
)


@pytest.mark.parametrize("phone", [
    "0712345678",
    "+254712345678",
    "254712345678",
    "712345678",
    "0712-345-678",
])
def test_validate_phone_number_formats(phone):
    assert validate_phone_number(phone) == "254712345678"


def test_validate_phone_number_accepts_new_prefix():
    assert validate_phone_number("0110123456") == "254110123456"


@pytest.mark.parametrize("phone", ["", "07123", "0912345678", "25471234567890"])
def test_validate_phone_number_rejects(phone):
    with pytest.raises(InvalidPhoneNumberError):
        validate_phone_number(phone)


@pytest.mark.parametrize("amount,expected", [(1, 1), ("250", 250), (70000.0, 70000)])
def test_validate_amount(amount, expected):
    assert validate_amount(amount) == expected


@pytest.mark.parametrize("amount", [0, -5, "1.5", "abc", "NaN", None])
def test_validate_amount_rejects(amount):
    with pytest.raises(InvalidAmountError):
        validate_amount(amount)


def test_validate_amount_maximum():
    with pytest.raises(InvalidAmountError):
        validate_amount(250001, max_amount=250000)


def test_validate_account_reference():
    assert validate_account_reference("  INV-001 ") == "INV-001"
    with pytest.raises(ValidationError):
        validate_account_reference("A-REFERENCE-THAT-IS-TOO-LONG")
    with pytest.raises(ValidationError):
        validate_account_reference("   ")


def test_generate_password():
    # Published sandbox example for shortcode 174379
    passkey = "bfb279f9aa9bdbcf158e97dd71a467cd2e0c893059b10f78e6b72ada1ed2c919"
    password = generate_password("174379", passkey, "20160216165627")
    assert password == (
        "MTc0Mzc5YmZiMjc5ZjlhYTliZGJjZjE1OGU5N2RkNzFhNDY3Y2QyZTBjODkzMDU5YjEwZjc4ZTZiNzJhZGExZWQyYzkxOTIwMTYwMjE2MTY1NjI3"
    )


def test_format_helpers():
    assert format_amount("100") == "100"
    assert format_currency(1500) == "KES 1,500.00"
    assert format_currency("oops") == "KES 0.00"
