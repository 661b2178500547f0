"""
Request and response payloads for the Daraja API.

Each field declares the gateway key it is sent/received under. Keys are
reproduced exactly as the gateway spells them, misspellings included
(``RecieverIdentifierType``, ``OriginatorCoversationID``). All values are
strings, amounts and shortcodes included.
"""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Type, TypeVar

from .constants import CommandID, ResponseType
from .exceptions import DeserializationError

P = TypeVar('P', bound='Payload')


def gateway_field(key: str, default: str = "", omitempty: bool = False):
    """Declare a payload field serialized under ``key``."""
    return field(default=default, metadata={'key': key, 'omitempty': omitempty})


@dataclass
class Payload:
    """
    Base class for every typed request/response record.

    ``to_dict`` and ``from_dict`` translate between attribute names and
    gateway keys. Unknown keys are ignored on decode and missing keys keep
    their defaults.
    """

    def to_dict(self) -> Dict[str, Any]:
        data = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if f.metadata.get('omitempty') and not value:
                continue
            data[f.metadata.get('key', f.name)] = value
        return data

    @classmethod
    def from_dict(cls: Type[P], data: Any) -> P:
        """
        Build a payload from decoded JSON.

        Args:
            data: Decoded JSON value

        Returns:
            Payload instance

        Raises:
            DeserializationError: If data is not an object, or a field holds
                an object, array or boolean where a string is expected
        """
        if not isinstance(data, dict):
            raise DeserializationError(
                f"Cannot decode {type(data).__name__} into {cls.__name__}: expected a JSON object",
                response_data=data
            )

        values = {}
        for f in fields(cls):
            key = f.metadata.get('key', f.name)
            value = data.get(key)
            if value is None:
                continue
            if isinstance(value, (dict, list, bool)):
                raise DeserializationError(
                    f"Cannot decode {type(value).__name__} into {cls.__name__}.{f.name} ({key})",
                    response_data=data
                )
            # The gateway sends some numeric values unquoted
            values[f.name] = value if isinstance(value, str) else str(value)
        return cls(**values)


# Authentication

@dataclass
class AuthResponse(Payload):
    access_token: str = gateway_field('access_token')
    expires_in: str = gateway_field('expires_in')


# Shared response shape for asynchronous (result URL) requests

@dataclass
class ConversationResponse(Payload):
    originator_conversation_id: str = gateway_field('OriginatorConversationID')
    conversation_id: str = gateway_field('ConversationID')
    response_code: str = gateway_field('ResponseCode')
    response_description: str = gateway_field('ResponseDescription')


# Business to business

@dataclass
class B2BPaymentRequest(Payload):
    initiator: str = gateway_field('Initiator')
    security_credential: str = gateway_field('SecurityCredential')
    command_id: str = gateway_field('CommandID', CommandID.BUSINESS_PAY_BILL.value)
    sender_identifier_type: str = gateway_field('SenderIdentifierType')
    receiver_identifier_type: str = gateway_field('RecieverIdentifierType')
    amount: str = gateway_field('Amount')
    party_a: str = gateway_field('PartyA')
    party_b: str = gateway_field('PartyB')
    account_reference: str = gateway_field('AccountReference')
    remarks: str = gateway_field('Remarks')
    queue_timeout_url: str = gateway_field('QueueTimeOutURL')
    result_url: str = gateway_field('ResultURL')


@dataclass
class B2BPaymentResponse(ConversationResponse):
    pass


# Business to customer

@dataclass
class B2CPaymentRequest(Payload):
    initiator_name: str = gateway_field('InitiatorName')
    security_credential: str = gateway_field('SecurityCredential')
    command_id: str = gateway_field('CommandID', CommandID.BUSINESS_PAYMENT.value)
    amount: str = gateway_field('Amount')
    party_a: str = gateway_field('PartyA')
    party_b: str = gateway_field('PartyB')
    remarks: str = gateway_field('Remarks')
    queue_timeout_url: str = gateway_field('QueueTimeOutURL')
    result_url: str = gateway_field('ResultURL')
    occasion: str = gateway_field('Occasion')


@dataclass
class B2CPaymentResponse(ConversationResponse):
    pass


# Reversal

@dataclass
class ReversalRequest(Payload):
    initiator: str = gateway_field('Initiator')
    security_credential: str = gateway_field('SecurityCredential')
    command_id: str = gateway_field('CommandID', CommandID.TRANSACTION_REVERSAL.value)
    transaction_id: str = gateway_field('TransactionID')
    amount: str = gateway_field('Amount')
    receiver_party: str = gateway_field('ReceiverParty')
    receiver_identifier_type: str = gateway_field('RecieverIdentifierType')
    result_url: str = gateway_field('ResultURL')
    queue_timeout_url: str = gateway_field('QueueTimeOutURL')
    remarks: str = gateway_field('Remarks')
    occasion: str = gateway_field('Occasion')


@dataclass
class ReversalResponse(ConversationResponse):
    pass


# Transaction status

@dataclass
class TransactionStatusRequest(Payload):
    initiator: str = gateway_field('Initiator')
    security_credential: str = gateway_field('SecurityCredential')
    command_id: str = gateway_field('CommandID', CommandID.TRANSACTION_STATUS_QUERY.value)
    transaction_id: str = gateway_field('TransactionID')
    party_a: str = gateway_field('PartyA')
    identifier_type: str = gateway_field('IdentifierType')
    result_url: str = gateway_field('ResultURL')
    queue_timeout_url: str = gateway_field('QueueTimeOutURL')
    remarks: str = gateway_field('Remarks')
    occasion: str = gateway_field('Occasion')


@dataclass
class TransactionStatusResponse(ConversationResponse):
    pass


# Account balance

@dataclass
class AccountBalanceRequest(Payload):
    initiator: str = gateway_field('Initiator')
    security_credential: str = gateway_field('SecurityCredential')
    command_id: str = gateway_field('CommandID', CommandID.ACCOUNT_BALANCE.value)
    party_a: str = gateway_field('PartyA')
    identifier_type: str = gateway_field('IdentifierType')
    remarks: str = gateway_field('Remarks')
    queue_timeout_url: str = gateway_field('QueueTimeOutURL')
    result_url: str = gateway_field('ResultURL')


@dataclass
class AccountBalanceResponse(ConversationResponse):
    pass


# C2B URL registration and simulation

@dataclass
class RegisterURLRequest(Payload):
    short_code: str = gateway_field('ShortCode')
    response_type: str = gateway_field('ResponseType', ResponseType.COMPLETED.value)
    confirmation_url: str = gateway_field('ConfirmationURL')
    validation_url: str = gateway_field('ValidationURL')


@dataclass
class RegisterURLResponse(Payload):
    originator_conversation_id: str = gateway_field('OriginatorConversationID')
    originator_coversation_id: str = gateway_field('OriginatorCoversationID')
    response_code: str = gateway_field('ResponseCode')
    response_description: str = gateway_field('ResponseDescription')


@dataclass
class C2BSimulateRequest(Payload):
    short_code: str = gateway_field('ShortCode')
    command_id: str = gateway_field('CommandID', CommandID.CUSTOMER_PAY_BILL_ONLINE.value)
    amount: str = gateway_field('Amount')
    msisdn: str = gateway_field('Msisdn')
    bill_ref_number: str = gateway_field('BillRefNumber')


@dataclass
class C2BSimulateResponse(Payload):
    originator_coversation_id: str = gateway_field('OriginatorCoversationID')
    response_code: str = gateway_field('ResponseCode')
    response_description: str = gateway_field('ResponseDescription')


# Lipa Na M-Pesa Online (STK push)

@dataclass
class StkPushRequest(Payload):
    business_short_code: str = gateway_field('BusinessShortCode')
    password: str = gateway_field('Password')
    timestamp: str = gateway_field('Timestamp')
    transaction_type: str = gateway_field('TransactionType', CommandID.CUSTOMER_PAY_BILL_ONLINE.value)
    amount: str = gateway_field('Amount')
    party_a: str = gateway_field('PartyA')
    party_b: str = gateway_field('PartyB')
    phone_number: str = gateway_field('PhoneNumber')
    callback_url: str = gateway_field('CallBackURL')
    account_reference: str = gateway_field('AccountReference')
    transaction_desc: str = gateway_field('TransactionDesc')


@dataclass
class StkPushResponse(Payload):
    merchant_request_id: str = gateway_field('MerchantRequestID')
    checkout_request_id: str = gateway_field('CheckoutRequestID')
    response_code: str = gateway_field('ResponseCode')
    response_description: str = gateway_field('ResponseDescription')
    customer_message: str = gateway_field('CustomerMessage')


@dataclass
class StkPushQueryRequest(Payload):
    business_short_code: str = gateway_field('BusinessShortCode')
    password: str = gateway_field('Password')
    timestamp: str = gateway_field('Timestamp')
    checkout_request_id: str = gateway_field('CheckoutRequestID')


@dataclass
class StkPushQueryResponse(Payload):
    response_code: str = gateway_field('ResponseCode')
    response_description: str = gateway_field('ResponseDescription')
    merchant_request_id: str = gateway_field('MerchantRequestID')
    checkout_request_id: str = gateway_field('CheckoutRequestID')
    result_code: str = gateway_field('ResultCode')
    result_desc: str = gateway_field('ResultDesc')
