from __future__ import annotations

import pytest

from chat_adapters.errors import (
    AdapterError,
    ErrorCode,
    MalformedRequestError,
    MissingCredentialError,
    ParseError,
    ProviderError,
    StreamSetupError,
    classify_status,
)


@pytest.mark.parametrize(
    "status,category",
    [
        (401, "auth"),
        (403, "auth"),
        (404, "not_found"),
        (429, "rate_limit"),
        (418, "client_error"),
        (503, "unavailable"),
        (599, "server_error"),
        (302, "unknown"),
        (None, "unknown"),
    ],
)
def test_classify_status(status, category):
    assert classify_status(status) == category  # nosec B101


def test_each_error_has_its_code_and_shares_base():
    pairs = [
        (MissingCredentialError(), ErrorCode.MISSING_CREDENTIAL),
        (MalformedRequestError(), ErrorCode.MALFORMED_REQUEST),
        (ProviderError(), ErrorCode.PROVIDER_ERROR),
        (ParseError(), ErrorCode.PARSE_ERROR),
        (StreamSetupError(), ErrorCode.STREAM_SETUP),
    ]
    for err, code in pairs:
        assert isinstance(err, AdapterError)  # nosec B101
        assert isinstance(err, Exception)  # nosec B101
        assert err.code is code  # nosec B101


def test_provider_error_keeps_status_and_body():
    body = {"error": {"message": "bad key"}}
    err = ProviderError(message="nope", adapter_kind="openai", status=401, body=body)
    assert err.status == 401 and err.body is body  # nosec B101
    assert err.category == "auth"  # nosec B101
    assert "openai" in str(err) and "provider_error" in str(err)  # nosec B101


def test_errors_are_raisable():
    with pytest.raises(AdapterError) as ei:
        raise ParseError(message="bad shape", adapter_kind="gemini", body="x")
    assert ei.value.body == "x"  # nosec B101
