"""
Payment service for Lipa Na M-Pesa Online (STK push) payments.
Handles push initiation and status queries.
"""

import logging
from datetime import datetime
from typing import Optional, Union

from ..constants import APIEndpoints, CommandID
from ..exceptions import ConfigurationError, ValidationError
from ..schemas import (
    StkPushQueryRequest, StkPushQueryResponse,
    StkPushRequest, StkPushResponse,
)
from ..utils.formatters import format_amount, format_timestamp, generate_password
from ..utils.validators import (
    validate_account_reference, validate_amount, validate_phone_number
)
from .base import BaseService, OperationResult

logger = logging.getLogger(__name__)


class PaymentService(BaseService):
    """
    Service for customer checkout payments.
    Sends an STK push prompt to the customer's phone and queries its outcome.
    """

    def _credentials(self, moment: Optional[datetime] = None):
        """Return (shortcode, timestamp, password) built from the configuration."""
        if not self.config.shortcode or not self.config.passkey:
            raise ConfigurationError(
                "A shortcode and passkey are required for STK push requests."
            )
        timestamp = format_timestamp(moment)
        password = generate_password(self.config.shortcode, self.config.passkey, timestamp)
        return self.config.shortcode, timestamp, password

    def lipa_na_mpesa_online(self, request: StkPushRequest) -> OperationResult:
        """
        Send a prepared STK push request.

        Args:
            request: STK push request

        Returns:
            OperationResult wrapping an StkPushResponse
        """
        return self._call(
            APIEndpoints.STK_PUSH, request, StkPushRequest, StkPushResponse,
            "Initiating STK push for account reference: {0.account_reference}"
        )

    def stk_push(
        self,
        phone_number: str,
        amount: Union[int, str],
        account_reference: str,
        transaction_desc: str,
        callback_url: str,
        transaction_type: str = CommandID.CUSTOMER_PAY_BILL_ONLINE.value,
        moment: Optional[datetime] = None
    ) -> OperationResult:
        """
        Build and send an STK push request from the client configuration.

        Args:
            phone_number: Customer phone number (07XX, +2547XX or 2547XX)
            amount: Amount in whole shillings
            account_reference: Reference shown to the customer (max 12 chars)
            transaction_desc: Short description of the payment
            callback_url: URL that receives the payment result
            transaction_type: CustomerPayBillOnline or CustomerBuyGoodsOnline
            moment: Time used for the request timestamp (defaults to now)

        Returns:
            OperationResult wrapping an StkPushResponse

        Raises:
            ValidationError: If input validation fails
            ConfigurationError: If shortcode or passkey is not configured
        """
        try:
            validated_phone = validate_phone_number(phone_number)
            validated_amount = validate_amount(amount)
            validated_reference = validate_account_reference(account_reference)
        except ValidationError as e:
            logger.error(f"Validation failed: {str(e)}")
            raise

        if not callback_url:
            raise ValidationError("Callback URL is required")

        shortcode, timestamp, password = self._credentials(moment)

        request = StkPushRequest(
            business_short_code=shortcode,
            password=password,
            timestamp=timestamp,
            transaction_type=transaction_type,
            amount=format_amount(validated_amount),
            party_a=validated_phone,
            party_b=shortcode,
            phone_number=validated_phone,
            callback_url=callback_url,
            account_reference=validated_reference,
            transaction_desc=transaction_desc,
        )
        return self.lipa_na_mpesa_online(request)

    def query_stk_push(
        self,
        request: Union[StkPushQueryRequest, str],
        moment: Optional[datetime] = None
    ) -> OperationResult:
        """
        Query the outcome of an STK push.

        Args:
            request: Prepared query request, or the CheckoutRequestID of the
                push, in which case the request is built from configuration
            moment: Time used for the request timestamp (defaults to now)

        Returns:
            OperationResult wrapping an StkPushQueryResponse
        """
        if isinstance(request, str):
            shortcode, timestamp, password = self._credentials(moment)
            request = StkPushQueryRequest(
                business_short_code=shortcode,
                password=password,
                timestamp=timestamp,
                checkout_request_id=request,
            )

        return self._call(
            APIEndpoints.STK_PUSH_QUERY, request,
            StkPushQueryRequest, StkPushQueryResponse,
            "Querying STK push status for {0.checkout_request_id}"
        )
