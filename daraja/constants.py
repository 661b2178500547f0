"""
Constants and enums for Daraja API operations.
"""

from enum import Enum


class Environment(str, Enum):
    """Daraja deployment environments."""
    SANDBOX = "sandbox"
    PRODUCTION = "production"


class CommandID(str, Enum):
    """Common Daraja command identifiers."""
    BUSINESS_PAY_BILL = "BusinessPayBill"
    BUSINESS_BUY_GOODS = "BusinessBuyGoods"
    BUSINESS_PAYMENT = "BusinessPayment"
    SALARY_PAYMENT = "SalaryPayment"
    PROMOTION_PAYMENT = "PromotionPayment"
    ACCOUNT_BALANCE = "AccountBalance"
    TRANSACTION_STATUS_QUERY = "TransactionStatusQuery"
    TRANSACTION_REVERSAL = "TransactionReversal"
    CUSTOMER_PAY_BILL_ONLINE = "CustomerPayBillOnline"
    CUSTOMER_BUY_GOODS_ONLINE = "CustomerBuyGoodsOnline"


class ResponseType(str, Enum):
    """Default action when a registered validation URL is unreachable."""
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


# Base hosts per environment
BASE_URLS = {
    Environment.SANDBOX: "https://sandbox.safaricom.co.ke",
    Environment.PRODUCTION: "https://api.safaricom.co.ke",
}


# API Endpoints
class APIEndpoints:
    """Daraja API endpoints."""
    GENERATE_TOKEN = "/oauth/v1/generate?grant_type=client_credentials"

    # C2B endpoints
    REGISTER_URL = "/mpesa/c2b/v1/registerurl"
    C2B_SIMULATE = "/mpesa/c2b/v1/simulate"

    # Lipa Na M-Pesa Online endpoints
    STK_PUSH = "/mpesa/stkpush/v1/processrequest"
    STK_PUSH_QUERY = "/mpesa/stkpushquery/v1/query"

    # Business payment endpoints
    B2B_PAYMENT = "/mpesa/b2b/v1/paymentrequest"
    B2C_PAYMENT = "/mpesa/b2c/v1/paymentrequest"
    REVERSAL = "/mpesa/reversal/v1/request"

    # Account endpoints
    ACCOUNT_BALANCE = "/mpesa/accountbalance/v1/query"
    TRANSACTION_STATUS = "/mpesa/transactionstatus/v1/query"


# Phone number settings
KENYA_COUNTRY_CODE = "254"
PHONE_NUMBER_LENGTH = 12  # Including country code (2547XXXXXXXX)

# STK push timestamp format (YYYYMMDDHHMMSS)
TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"

# Default settings
DEFAULT_ENVIRONMENT = Environment.SANDBOX
DEFAULT_TIMEOUT = 30  # seconds
