"""
HTTP client for Daraja API communication.
"""

import logging
from typing import Dict, List, Optional, Tuple, Type, TypeVar

import requests

from daraja.constants import DEFAULT_TIMEOUT
from daraja.exceptions import DarajaException, DeserializationError, TransportError
from daraja.schemas import Payload

logger = logging.getLogger(__name__)

T = TypeVar('T', bound=Payload)


class HTTPClient:
    """
    HTTP client wrapper for Daraja API requests.
    Performs single JSON exchanges and decodes them into payload types.
    There is no retry: a failed exchange is reported to the caller as-is.
    """

    def __init__(self, timeout: int = DEFAULT_TIMEOUT):
        """
        Initialize HTTP client.

        Args:
            timeout: Request timeout in seconds
        """
        self.timeout = timeout
        self.session = requests.Session()

    def _log_request(self, method: str, url: str, headers: Dict, data: Optional[str] = None):
        """Log API request details."""
        logger.info(f"Daraja API Request: {method} {url}")
        logger.debug(f"Headers: {self._sanitize_headers(headers)}")
        if data:
            logger.debug(f"Payload: {data}")

    def _log_response(self, response: requests.Response):
        """Log API response details."""
        logger.info(f"Daraja API Response: {response.status_code}")
        logger.debug(f"Response: {response.text}")

    def _sanitize_headers(self, headers: Dict) -> Dict:
        """Remove sensitive data from headers for logging."""
        sanitized = headers.copy()
        if 'Authorization' in sanitized:
            scheme = sanitized['Authorization'].split(' ', 1)[0]
            sanitized['Authorization'] = f'{scheme} ***'
        return sanitized

    def send(
        self,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        data: Optional[str] = None,
        auth: Optional[Tuple[str, str]] = None
    ) -> requests.Response:
        """
        Send a single request.

        Args:
            method: HTTP method
            url: Absolute URL
            headers: Request headers
            data: Pre-serialized request body
            auth: Basic auth (username, password) pair

        Returns:
            Response object from requests

        Raises:
            TransportError: If the request could not be completed
        """
        headers = headers or {}
        if auth:
            # requests builds the header itself; mask it in the log anyway
            self._log_request(method, url, {**headers, 'Authorization': 'Basic'}, data)
        else:
            self._log_request(method, url, headers, data)

        try:
            response = self.session.request(
                method,
                url,
                data=data,
                headers=headers,
                auth=auth,
                timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.error(f"Daraja API request failed: {method} {url}: {str(e)}")
            raise TransportError(f"{method} {url} failed: {str(e)}")

        self._log_response(response)
        return response

    def execute(
        self,
        method: str,
        url: str,
        token: str,
        response_type: Type[T],
        body: Optional[str] = None
    ) -> Tuple[int, T, List[DarajaException]]:
        """
        Perform one JSON exchange and decode the response.

        Args:
            method: "GET" or "POST"
            url: Absolute endpoint URL
            token: Bearer token, or empty for unauthenticated requests
            response_type: Payload subclass to decode the body into
            body: Pre-serialized JSON body (POST)

        Returns:
            Tuple of (status code, decoded payload, errors). The status is 0
            when the request never completed. On any error the payload is
            a default ``response_type()``.

        Raises:
            TypeError: If response_type is not a Payload subclass
        """
        if not (isinstance(response_type, type) and issubclass(response_type, Payload)):
            raise TypeError(
                f"response_type must be a Payload subclass, got {response_type!r}"
            )

        headers = {'Content-Type': 'application/json'}
        if token:
            headers['Authorization'] = f'Bearer {token}'

        try:
            response = self.send(method, url, headers=headers, data=body)
        except TransportError as e:
            return 0, response_type(), [e]

        try:
            result = response_type.from_dict(response.json())
        except DeserializationError as e:
            logger.error(f"Unexpected response shape from {url}: {e.message}")
            return response.status_code, response_type(), [e]
        except ValueError as e:
            logger.error(f"Failed to parse API response from {url}: {str(e)}")
            error = DeserializationError(
                f"Failed to parse API response: {str(e)}",
                error_code=response.status_code,
                response_data=response.text
            )
            return response.status_code, response_type(), [error]

        return response.status_code, result, []

    def close(self):
        """Close the session."""
        self.session.close()
