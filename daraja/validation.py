"""
C2B validation result codes and response shaping.

A business that registers a validation URL receives a ValidationRequest for
every incoming payment and must answer with a ValidationResponse accepting
or rejecting it.
"""

from dataclasses import dataclass
from enum import Enum

from .schemas import Payload, gateway_field


class ResultCode(str, Enum):
    """Validation result codes defined by the gateway."""
    INVALID_MSISDN = "C2B00011"
    INVALID_ACCOUNT = "C2B00012"
    INVALID_AMOUNT = "C2B00013"
    INVALID_KYC = "C2B00014"
    INVALID_SHORTCODE = "C2B00015"
    OTHER_ERROR = "C2B00016"


RESULT_CODE_DESCRIPTIONS = {
    ResultCode.INVALID_MSISDN: "Invalid MSISDN",
    ResultCode.INVALID_ACCOUNT: "Invalid Account Number",
    ResultCode.INVALID_AMOUNT: "Invalid Amount",
    ResultCode.INVALID_KYC: "Invalid KYC Details",
    ResultCode.INVALID_SHORTCODE: "Invalid Shortcode",
    ResultCode.OTHER_ERROR: "Other Error",
}

ACCEPTED = "Accepted"
REJECTED = "Rejected"


def get_result_desc(code: str) -> str:
    """Get the description of a result code, or "" if the code is unknown."""
    try:
        return RESULT_CODE_DESCRIPTIONS[ResultCode(code)]
    except ValueError:
        return ""


@dataclass
class ValidationResponse(Payload):
    result_code: str = gateway_field('ResultCode')
    result_desc: str = gateway_field('ResultDesc')


@dataclass
class ValidationRequest(Payload):
    transaction_type: str = gateway_field('TransactionType')
    trans_id: str = gateway_field('TransID')
    trans_time: str = gateway_field('TransTime')
    trans_amount: str = gateway_field('TransAmount')
    business_short_code: str = gateway_field('BusinessShortCode')
    bill_ref_number: str = gateway_field('BillRefNumber')
    invoice_number: str = gateway_field('InvoiceNumber', omitempty=True)
    org_account_balance: str = gateway_field('OrgAccountBalance', omitempty=True)
    third_party_trans_id: str = gateway_field('ThirdPartyTransID', omitempty=True)
    msisdn: str = gateway_field('MSISDN')
    first_name: str = gateway_field('FirstName', omitempty=True)
    middle_name: str = gateway_field('MiddleName', omitempty=True)
    last_name: str = gateway_field('LastName', omitempty=True)

    def to_response(self, result_code: str, accept: bool) -> ValidationResponse:
        """
        Answer this validation request.

        Args:
            result_code: Code to return ("0" to accept, or a ResultCode)
            accept: Whether the payment is accepted

        Returns:
            ValidationResponse with ResultDesc "Accepted" or "Rejected"
        """
        return ValidationResponse(
            result_code=str(result_code.value if isinstance(result_code, ResultCode) else result_code),
            result_desc=ACCEPTED if accept else REJECTED,
        )
