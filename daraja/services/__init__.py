"""
Service modules for Daraja API operations.
"""

from .auth_service import AuthService, Session
from .base import OperationResult
from .payment_service import PaymentService
from .transfer_service import TransferService
from .account_service import AccountService

__all__ = [
    'AuthService',
    'Session',
    'OperationResult',
    'PaymentService',
    'TransferService',
    'AccountService',
]
