"""
Daraja API client.
"""

import logging
from concurrent.futures import Future

from .config import DarajaConfig
from .services.account_service import AccountService
from .services.auth_service import AuthResult, AuthService, Session
from .services.payment_service import PaymentService
from .services.transfer_service import TransferService
from .utils.http_client import HTTPClient

logger = logging.getLogger(__name__)


class DarajaClient:
    """
    Main client for the Daraja API.

    One client owns one access token; every operation refreshes it when it
    has expired. Operations return an OperationResult of
    (response, status_code, success, errors) and never raise on gateway,
    network or decoding failures.

    Example:
        config = DarajaConfig(
            consumer_key="...",
            consumer_secret="...",
            shortcode="174379",
            passkey="...",
        )
        with DarajaClient(config) as client:
            result = client.stk_push(
                phone_number="0712345678",
                amount=10,
                account_reference="INV-001",
                transaction_desc="Invoice 001",
                callback_url="https://example.com/mpesa/callback",
            )
            if result.success:
                print(result.response.checkout_request_id)
    """

    def __init__(self, config: DarajaConfig):
        self.config = config
        self.http_client = HTTPClient()
        self.auth_service = AuthService(config, self.http_client)

        self.payments = PaymentService(config, self.http_client, self.auth_service)
        self.transfers = TransferService(config, self.http_client, self.auth_service)
        self.accounts = AccountService(config, self.http_client, self.auth_service)

        logger.debug(f"Daraja client created for {config.environment.value} ({config.base_url})")

    @classmethod
    def from_settings(cls) -> "DarajaClient":
        """Create a client configured from Django settings."""
        return cls(DarajaConfig.from_settings())

    @property
    def session(self) -> Session:
        return self.auth_service.session

    # Authentication

    def authorize(self) -> AuthResult:
        return self.auth_service.authorize()

    def is_authorized(self) -> bool:
        """True when the token has expired; see AuthService.is_authorized."""
        return self.auth_service.is_authorized()

    def requires_reauthorization(self) -> bool:
        return self.auth_service.requires_reauthorization()

    def refresh_async(self) -> "Future[AuthResult]":
        return self.auth_service.refresh_async()

    # Business operations

    def b2b_payment_request(self, request):
        return self.transfers.b2b_payment_request(request)

    def b2c_payment_request(self, request):
        return self.transfers.b2c_payment_request(request)

    def reverse_transaction(self, request):
        return self.transfers.reverse_transaction(request)

    def lipa_na_mpesa_online(self, request):
        return self.payments.lipa_na_mpesa_online(request)

    def stk_push(self, *args, **kwargs):
        return self.payments.stk_push(*args, **kwargs)

    def query_stk_push(self, request, moment=None):
        return self.payments.query_stk_push(request, moment=moment)

    def query_account_balance(self, request):
        return self.accounts.query_account_balance(request)

    def query_transaction_status(self, request):
        return self.accounts.query_transaction_status(request)

    def register_urls(self, request):
        return self.accounts.register_urls(request)

    def simulate_c2b(self, request):
        return self.accounts.simulate_c2b(request)

    def close(self):
        """Stop background work and close the HTTP session."""
        self.auth_service.close()
        self.http_client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
