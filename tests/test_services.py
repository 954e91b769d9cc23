"""Tests for the endpoint services.

Copyright (c) 2025 twofactor contributors. All rights reserved.
"""

import json

import httpx
import pytest

from twofactor.models import QrCode, SecretKey


async def test_password_status(client, mock_responses):
    mock_responses.get("/user/confirmed-password-status").mock(
        return_value=httpx.Response(200, json={"confirmed": False})
    )

    status = await client.password.status()

    assert status.confirmed is False


async def test_enrollment_details(
    client, mock_responses, sample_qr_code, sample_secret_key, sample_recovery_codes
):
    mock_responses.get("/user/two-factor-qr-code").mock(
        return_value=httpx.Response(200, json=sample_qr_code)
    )
    mock_responses.get("/user/two-factor-secret-key").mock(
        return_value=httpx.Response(200, json=sample_secret_key)
    )
    mock_responses.get("/user/two-factor-recovery-codes").mock(
        return_value=httpx.Response(200, json=sample_recovery_codes)
    )

    qr_code = await client.two_factor.qr_code()
    secret_key = await client.two_factor.secret_key()
    codes = await client.two_factor.recovery_codes()

    assert qr_code == QrCode(svg=sample_qr_code["svg"])
    assert secret_key == SecretKey(secret_key="JBSWY3DPEHPK3PXP")
    assert codes == sample_recovery_codes


async def test_enable_disable_and_regenerate_use_the_right_verbs(client, mock_responses):
    enable = mock_responses.post("/user/two-factor-authentication").mock(
        return_value=httpx.Response(200)
    )
    disable = mock_responses.delete("/user/two-factor-authentication").mock(
        return_value=httpx.Response(200)
    )
    regenerate = mock_responses.post("/user/two-factor-recovery-codes").mock(
        return_value=httpx.Response(200)
    )

    await client.two_factor.enable()
    await client.two_factor.regenerate_recovery_codes()
    await client.two_factor.disable()

    assert enable.call_count == 1
    assert regenerate.call_count == 1
    assert disable.call_count == 1


async def test_confirm_posts_code(client, mock_responses):
    route = mock_responses.post("/user/confirmed-two-factor-authentication").mock(
        return_value=httpx.Response(200)
    )

    await client.two_factor.confirm("654321")

    assert json.loads(route.calls.last.request.content) == {"code": "654321"}


async def test_login_verify_posts_only_the_given_code(client, mock_responses):
    route = mock_responses.post("/two-factor-challenge").mock(
        return_value=httpx.Response(204)
    )

    await client.login.verify(code="123456")
    await client.login.verify(code="", recovery_code="abcdef-ghijkl")

    first, second = (json.loads(call.request.content) for call in route.calls)
    assert first == {"code": "123456"}
    assert second == {"recovery_code": "abcdef-ghijkl"}


@pytest.mark.parametrize(
    "kwargs",
    [{}, {"code": "123456", "recovery_code": "abcdef-ghijkl"}],
)
async def test_login_verify_needs_exactly_one_code(client, kwargs):
    with pytest.raises(ValueError, match="exactly one"):
        await client.login.verify(**kwargs)
