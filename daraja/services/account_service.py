"""
Account service for Daraja account operations.
Handles balance and transaction status queries and C2B URL registration.
"""

from ..constants import APIEndpoints
from ..exceptions import ConfigurationError
from ..schemas import (
    AccountBalanceRequest, AccountBalanceResponse,
    C2BSimulateRequest, C2BSimulateResponse,
    RegisterURLRequest, RegisterURLResponse,
    TransactionStatusRequest, TransactionStatusResponse,
)
from .base import BaseService, OperationResult


class AccountService(BaseService):
    """
    Service for account-related operations.
    """

    def query_account_balance(self, request: AccountBalanceRequest) -> OperationResult:
        """
        Request the account balance of a shortcode.

        The balance itself is posted to the request's ResultURL; the
        synchronous response only acknowledges the request.

        Args:
            request: Account balance request

        Returns:
            OperationResult wrapping an AccountBalanceResponse
        """
        return self._call(
            APIEndpoints.ACCOUNT_BALANCE, request,
            AccountBalanceRequest, AccountBalanceResponse,
            "Querying account balance for {0.party_a}"
        )

    def query_transaction_status(self, request: TransactionStatusRequest) -> OperationResult:
        """
        Query the status of a transaction by its M-Pesa transaction ID.

        Args:
            request: Transaction status request

        Returns:
            OperationResult wrapping a TransactionStatusResponse
        """
        return self._call(
            APIEndpoints.TRANSACTION_STATUS, request,
            TransactionStatusRequest, TransactionStatusResponse,
            "Querying status of transaction {0.transaction_id}"
        )

    def register_urls(self, request: RegisterURLRequest) -> OperationResult:
        """
        Register the C2B validation and confirmation URLs for a shortcode.

        Args:
            request: URL registration request

        Returns:
            OperationResult wrapping a RegisterURLResponse
        """
        return self._call(
            APIEndpoints.REGISTER_URL, request,
            RegisterURLRequest, RegisterURLResponse,
            "Registering C2B URLs for shortcode {0.short_code}"
        )

    def simulate_c2b(self, request: C2BSimulateRequest) -> OperationResult:
        """
        Simulate a customer payment to a shortcode. Sandbox only.

        Args:
            request: C2B simulation request

        Returns:
            OperationResult wrapping a C2BSimulateResponse
        """
        if not self.config.is_sandbox:
            return self._failure(C2BSimulateResponse, 0, [ConfigurationError(
                "C2B simulation is only available in the sandbox environment"
            )])

        return self._call(
            APIEndpoints.C2B_SIMULATE, request,
            C2BSimulateRequest, C2BSimulateResponse,
            "Simulating C2B payment of {0.amount} to {0.short_code}"
        )
