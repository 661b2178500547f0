from __future__ import annotations

import json

import pytest

from daraja.exceptions import DeserializationError
from daraja.schemas import (
    AccountBalanceRequest, AccountBalanceResponse,
    B2CPaymentRequest, B2CPaymentResponse,
    RegisterURLRequest, RegisterURLResponse, ReversalRequest,
)


def test_account_balance_request_uses_gateway_keys():
    request = AccountBalanceRequest(
        initiator="testapi",
        security_credential="Safaricom999!*!",
        party_a="600000",
        identifier_type="4",
        remarks="balance",
        queue_timeout_url="https://example.com/timeout",
        result_url="https://example.com/result",
    )

    assert json.loads(json.dumps(request.to_dict())) == {
        "Initiator": "testapi",
        "SecurityCredential": "Safaricom999!*!",
        "CommandID": "AccountBalance",
        "PartyA": "600000",
        "IdentifierType": "4",
        "Remarks": "balance",
        "QueueTimeOutURL": "https://example.com/timeout",
        "ResultURL": "https://example.com/result",
    }


def test_b2c_request_and_mirrored_response():
    request = B2CPaymentRequest(
        initiator_name="testapi",
        security_credential="cred",
        command_id="SalaryPayment",
        amount="1500",
        party_a="600000",
        party_b="254708374149",
        remarks="salary",
        queue_timeout_url="https://example.com/timeout",
        result_url="https://example.com/result",
        occasion="May",
    )
    sent = json.loads(json.dumps(request.to_dict()))
    assert sent["InitiatorName"] == "testapi"
    assert sent["CommandID"] == "SalaryPayment"
    assert sent["PartyB"] == "254708374149"
    assert sent["Occasion"] == "May"

    body = json.dumps({
        "OriginatorConversationID": "5118-111210482-1",
        "ConversationID": "AG_20230420_2010759fd5662ef6d054",
        "ResponseCode": "0",
        "ResponseDescription": "Accept the service request successfully.",
    })
    response = B2CPaymentResponse.from_dict(json.loads(body))

    assert response == B2CPaymentResponse(
        originator_conversation_id="5118-111210482-1",
        conversation_id="AG_20230420_2010759fd5662ef6d054",
        response_code="0",
        response_description="Accept the service request successfully.",
    )
    assert response.to_dict() == json.loads(body)


def test_register_url_request_defaults_to_completed():
    data = RegisterURLRequest(short_code="600000").to_dict()

    assert data["ResponseType"] == "Completed"
    assert RegisterURLRequest(response_type="Cancelled").to_dict()["ResponseType"] == "Cancelled"


def test_gateway_misspellings_are_kept():
    assert "RecieverIdentifierType" in ReversalRequest().to_dict()
    response = RegisterURLResponse.from_dict({"OriginatorCoversationID": "abc", "ResponseCode": "0"})
    assert response.originator_coversation_id == "abc"
    assert response.originator_conversation_id == ""


def test_from_dict_ignores_unknown_and_missing_keys():
    response = AccountBalanceResponse.from_dict({"ResponseCode": "0", "requestId": "x"})

    assert response.response_code == "0"
    assert response.conversation_id == ""


def test_from_dict_stringifies_numbers():
    response = AccountBalanceResponse.from_dict({"ResponseCode": 0})

    assert response.response_code == "0"


@pytest.mark.parametrize("data", [
    "not an object",
    ["ResponseCode"],
    {"ResponseCode": {"nested": True}},
    {"ResponseCode": True},
])
def test_from_dict_rejects_wrong_shapes(data):
    with pytest.raises(DeserializationError):
        AccountBalanceResponse.from_dict(data)
