"""
Transfer service for Daraja business payments.
Handles B2B transfers, B2C disbursements and reversals.
"""

from ..constants import APIEndpoints
from ..schemas import (
    B2BPaymentRequest, B2BPaymentResponse,
    B2CPaymentRequest, B2CPaymentResponse,
    ReversalRequest, ReversalResponse,
)
from .base import BaseService, OperationResult


class TransferService(BaseService):
    """
    Service for money movement initiated by the business.
    All three operations are asynchronous on the gateway side: the final
    outcome is delivered to the request's ResultURL.
    """

    def b2b_payment_request(self, request: B2BPaymentRequest) -> OperationResult:
        """
        Transfer funds from this business to another shortcode.

        Args:
            request: B2B payment request

        Returns:
            OperationResult wrapping a B2BPaymentResponse
        """
        return self._call(
            APIEndpoints.B2B_PAYMENT, request, B2BPaymentRequest, B2BPaymentResponse,
            "Initiating B2B payment of {0.amount} to {0.party_b}"
        )

    def b2c_payment_request(self, request: B2CPaymentRequest) -> OperationResult:
        """
        Disburse funds from this business to a customer.

        Args:
            request: B2C payment request

        Returns:
            OperationResult wrapping a B2CPaymentResponse
        """
        return self._call(
            APIEndpoints.B2C_PAYMENT, request, B2CPaymentRequest, B2CPaymentResponse,
            "Initiating B2C payment of {0.amount} ({0.command_id})"
        )

    def reverse_transaction(self, request: ReversalRequest) -> OperationResult:
        """Reverse a completed transaction by its M-Pesa transaction ID."""
        return self._call(
            APIEndpoints.REVERSAL, request, ReversalRequest, ReversalResponse,
            "Requesting reversal of transaction {0.transaction_id}"
        )
