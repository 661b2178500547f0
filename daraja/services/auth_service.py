"""
Authentication service for the Daraja API.
Handles token generation and in-memory caching.
"""

import logging
import re
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from datetime import datetime, timedelta, timezone
from typing import List, Optional, Tuple

from ..config import DarajaConfig
from ..constants import APIEndpoints
from ..exceptions import (
    AuthenticationError, DarajaException, DeserializationError, TransportError
)
from ..schemas import AuthResponse
from ..utils.http_client import HTTPClient

logger = logging.getLogger(__name__)

# Expiry of a session that has never been authorized
NEVER = datetime.min.replace(tzinfo=timezone.utc)

AuthResult = Tuple[bool, List[DarajaException]]

# Signed decimal integer, nothing else
EXPIRES_IN_PATTERN = re.compile(r'[+-]?[0-9]+')


def _now() -> datetime:
    return datetime.now(timezone.utc)


class Session:
    """
    Bearer token and its UTC expiry.

    Reads and writes of the pair are atomic; a token is never observed
    together with another token's expiry.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._access_token = ""
        self._expiry = NEVER

    @property
    def access_token(self) -> str:
        with self._lock:
            return self._access_token

    @property
    def expiry(self) -> datetime:
        with self._lock:
            return self._expiry

    def snapshot(self) -> Tuple[str, datetime]:
        """Return (access_token, expiry) as one consistent pair."""
        with self._lock:
            return self._access_token, self._expiry

    def update(self, access_token: str, expiry: datetime):
        with self._lock:
            self._access_token = access_token
            self._expiry = expiry.astimezone(timezone.utc)

    def requires_reauthorization(self) -> bool:
        """True once the current time is past the expiry (or never authorized)."""
        return _now() > self.expiry


class AuthService:
    """
    Service for managing Daraja access tokens.

    One instance owns one Session. Refreshes are serialized so that
    concurrent operations on the same client request at most one token.
    """

    def __init__(
        self,
        config: DarajaConfig,
        http_client: HTTPClient,
        session: Optional[Session] = None
    ):
        self.config = config
        self.http_client = http_client
        self.session = session or Session()
        self._refresh_lock = threading.Lock()
        self._executor = None
        self._executor_lock = threading.Lock()

    def authorize(self) -> AuthResult:
        """
        Exchange the consumer key/secret for a new access token.

        The session is only updated on success; on any failure the previous
        token and expiry are left as they were.

        Returns:
            Tuple of (success, errors)
        """
        logger.info("Generating new Daraja access token")
        url = self.config.get_full_url(APIEndpoints.GENERATE_TOKEN)

        try:
            response = self.http_client.send(
                'GET',
                url,
                auth=(self.config.consumer_key, self.config.consumer_secret)
            )
        except TransportError as e:
            logger.warning(f"Token request failed: {e.message}")
            return False, [e]

        # Taken before parsing so parse time does not shorten the validity window
        received_at = _now()

        if response.status_code != 200:
            logger.warning(f"Token request rejected with status {response.status_code}")
            return False, [AuthenticationError(
                f"Token generation failed with status {response.status_code}",
                error_code=response.status_code,
                response_data=response.text
            )]

        try:
            payload = AuthResponse.from_dict(response.json())
        except DeserializationError as e:
            logger.error(f"Failed to decode token response: {e.message}")
            return False, [e]
        except ValueError as e:
            logger.error(f"Failed to parse token response: {str(e)}")
            return False, [DeserializationError(
                f"Failed to parse token response: {str(e)}",
                error_code=response.status_code,
                response_data=response.text
            )]

        if not EXPIRES_IN_PATTERN.fullmatch(payload.expires_in):
            logger.error(f"Token response has invalid expires_in: {payload.expires_in!r}")
            return False, [DeserializationError(
                f"Invalid expires_in value: {payload.expires_in!r}",
                error_code=response.status_code,
                response_data=response.text
            )]

        expires_in = int(payload.expires_in)

        if not payload.access_token:
            return False, [AuthenticationError(
                "Token generation failed: No token in response",
                error_code=response.status_code,
                response_data=response.text
            )]

        expiry = received_at + timedelta(seconds=expires_in)
        self.session.update(payload.access_token, expiry)

        logger.info(f"Successfully generated new token, expires at {expiry.isoformat()}")
        return True, []

    def requires_reauthorization(self) -> bool:
        return self.session.requires_reauthorization()

    def is_authorized(self) -> bool:
        """
        Legacy name for requires_reauthorization().

        Returns True when the token has already expired (or was never
        obtained), i.e. when a new token is needed.
        """
        return self.session.requires_reauthorization()

    def ensure_authorized(self) -> AuthResult:
        """
        Refresh the token if it has expired.

        Staleness is re-checked under the refresh lock, so callers that
        queued behind a refresh reuse its token.

        Returns:
            Tuple of (success, errors); (True, []) if the token is still fresh
        """
        with self._refresh_lock:
            if not self.session.requires_reauthorization():
                logger.debug("Using cached token")
                return True, []
            logger.info("Token expired or missing, refreshing")
            return self.authorize()

    def _locked_authorize(self) -> AuthResult:
        with self._refresh_lock:
            return self.authorize()

    def refresh_async(self) -> "Future[AuthResult]":
        """
        Refresh the token in the background.

        Returns:
            Future resolving to (success, errors). It may be joined with
            result() or cancelled while still queued.
        """
        with self._executor_lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=1, thread_name_prefix='daraja-auth'
                )
            return self._executor.submit(self._locked_authorize)

    def close(self):
        """Stop the background refresh worker, waiting for a running refresh."""
        with self._executor_lock:
            if self._executor is not None:
                self._executor.shutdown(wait=True)
                self._executor = None
