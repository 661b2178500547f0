"""
Shared request template for Daraja business operations.
"""

import json
import logging
from typing import Any, List, NamedTuple, Type

from ..config import DarajaConfig
from ..exceptions import APIError, DarajaException, SerializationError
from ..schemas import Payload
from ..utils.http_client import HTTPClient
from .auth_service import AuthService

logger = logging.getLogger(__name__)


class OperationResult(NamedTuple):
    """
    Outcome of a business operation.

    ``success`` is True only when ``errors`` is empty, which in turn means
    the gateway answered with a 2xx status and a well-formed body. When it
    is False, ``response`` is a default instance of the response type.
    ``status_code`` is 0 if no request reached the gateway.
    """
    response: Any
    status_code: int
    success: bool
    errors: List[DarajaException]


class BaseService:
    """
    Base for services that call authenticated Daraja endpoints.
    """

    def __init__(self, config: DarajaConfig, http_client: HTTPClient, auth_service: AuthService):
        self.config = config
        self.http_client = http_client
        self.auth_service = auth_service

    def _failure(self, response_type: Type[Payload], status_code: int,
                 errors: List[DarajaException]) -> OperationResult:
        return OperationResult(response_type(), status_code, False, errors)

    def _call(
        self,
        endpoint: str,
        request: Payload,
        request_type: Type[Payload],
        response_type: Type[Payload],
        description: str = ""
    ) -> OperationResult:
        """
        Run one authenticated POST exchange.

        Args:
            endpoint: API endpoint path
            request: Request payload
            request_type: Payload type the request must be an instance of
            response_type: Payload type to decode the response into
            description: Log message, formatted with the request as {0}

        Returns:
            OperationResult
        """
        operation = response_type.__name__

        if not isinstance(request, request_type):
            logger.error(f"{operation}: expected {request_type.__name__}, got {type(request).__name__}")
            return self._failure(response_type, 0, [SerializationError(
                f"Expected {request_type.__name__}, got {type(request).__name__}"
            )])

        if description:
            logger.info(description.format(request))

        # A failed refresh stops the operation; the request would only be rejected
        authorized, auth_errors = self.auth_service.ensure_authorized()
        if not authorized:
            logger.error(f"{operation}: re-authorization failed, request not sent")
            return self._failure(response_type, 0, auth_errors)

        try:
            body = json.dumps(request.to_dict())
        except (TypeError, ValueError) as e:
            logger.error(f"{operation}: failed to serialize request: {str(e)}")
            return self._failure(response_type, 0, [SerializationError(
                f"Failed to serialize {request_type.__name__}: {str(e)}"
            )])

        status_code, response, errors = self.http_client.execute(
            'POST',
            self.config.get_full_url(endpoint),
            self.auth_service.session.access_token,
            response_type,
            body=body
        )

        if status_code and not 200 <= status_code < 300:
            errors = errors + [APIError(
                f"API request failed with status {status_code}",
                error_code=status_code
            )]

        if errors:
            logger.error(f"{operation} failed: {'; '.join(str(e) for e in errors)}")
            return self._failure(response_type, status_code, errors)

        return OperationResult(response, status_code, True, [])
