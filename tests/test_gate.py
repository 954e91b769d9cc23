"""Tests for the password confirmation gate.

Copyright (c) 2025 twofactor contributors. All rights reserved.
"""

import json

import httpx
import pytest

from twofactor import GateDecision, PasswordConfirmationGate
from twofactor.exceptions import NetworkError, SubmissionInProgressError
from twofactor.gate import GENERIC_FAILURE_NOTICE

STATUS = "/user/confirmed-password-status"
CONFIRM = "/user/confirm-password"


class Recorder:
    """Guarded action that remembers how often it ran."""

    def __init__(self, value="done"):
        self.calls = 0
        self.value = value

    async def __call__(self):
        self.calls += 1
        return self.value


@pytest.fixture
def gate(client):
    return PasswordConfirmationGate(client)


async def test_fresh_confirmation_runs_action_without_prompt(gate, mock_responses):
    mock_responses.get(STATUS).mock(
        return_value=httpx.Response(200, json={"confirmed": True})
    )
    confirm = mock_responses.post(CONFIRM)
    action = Recorder()

    result = await gate.guard(action)

    assert result.invoked is True
    assert result.decision is GateDecision.CONFIRMED
    assert result.value == "done"
    assert action.calls == 1
    assert gate.state.open is False
    assert not confirm.called


async def test_stale_confirmation_opens_dialog_and_parks_action(gate, mock_responses):
    mock_responses.get(STATUS).mock(
        return_value=httpx.Response(200, json={"confirmed": False})
    )
    action = Recorder()

    result = await gate.guard(action)

    assert result.invoked is False
    assert result.decision is GateDecision.PASSWORD_REQUIRED
    assert gate.state.open is True
    assert gate.state.focus_password is True
    assert gate.has_pending_action
    assert action.calls == 0


async def test_wrong_password_keeps_dialog_open(
    gate, mock_responses, sample_password_error
):
    mock_responses.get(STATUS).mock(
        return_value=httpx.Response(200, json={"confirmed": False})
    )
    mock_responses.post(CONFIRM).mock(
        return_value=httpx.Response(422, json=sample_password_error)
    )
    action = Recorder()

    await gate.guard(action)
    result = await gate.submit("wrong-password")

    assert result.confirmed is False
    assert result.error == "These credentials do not match our records."
    assert gate.state.error == "These credentials do not match our records."
    assert gate.state.open is True
    assert gate.state.submitting is False
    assert gate.state.focus_password is True
    assert action.calls == 0


async def test_correct_password_closes_dialog_and_runs_action(gate, mock_responses):
    mock_responses.get(STATUS).mock(
        return_value=httpx.Response(200, json={"confirmed": False})
    )
    confirm = mock_responses.post(CONFIRM).mock(return_value=httpx.Response(201))
    action = Recorder(value=42)

    await gate.guard(action)
    result = await gate.submit("secret")

    assert result.confirmed is True
    assert result.value == 42
    assert action.calls == 1
    assert json.loads(confirm.calls.last.request.content) == {"password": "secret"}
    assert gate.state.open is False
    assert gate.state.password == ""
    assert not gate.has_pending_action


async def test_submit_while_pending_is_rejected(gate, mock_responses):
    confirm = mock_responses.post(CONFIRM)
    gate.state.open = True
    gate.state.submitting = True

    with pytest.raises(SubmissionInProgressError):
        await gate.submit("secret")

    assert not confirm.called


async def test_close_drops_parked_action(gate, mock_responses):
    mock_responses.get(STATUS).mock(
        return_value=httpx.Response(200, json={"confirmed": False})
    )
    mock_responses.post(CONFIRM).mock(return_value=httpx.Response(201))
    action = Recorder()

    await gate.guard(action)
    gate.close()
    result = await gate.submit("secret")

    assert result.confirmed is True
    assert action.calls == 0


async def test_second_action_is_rejected_while_one_is_parked(gate, mock_responses):
    status = mock_responses.get(STATUS).mock(
        return_value=httpx.Response(200, json={"confirmed": False})
    )
    mock_responses.post(CONFIRM).mock(return_value=httpx.Response(201))
    first = Recorder("first")
    second = Recorder("second")

    await gate.guard(first)

    with pytest.raises(SubmissionInProgressError):
        await gate.guard(second)

    assert status.call_count == 1
    result = await gate.submit("secret")
    assert result.value == "first"
    assert first.calls == 1
    assert second.calls == 0


async def test_prompt_is_asked_again_after_rejection(
    gate, mock_responses, sample_password_error
):
    mock_responses.get(STATUS).mock(
        return_value=httpx.Response(200, json={"confirmed": False})
    )
    mock_responses.post(CONFIRM).mock(
        side_effect=[
            httpx.Response(422, json=sample_password_error),
            httpx.Response(201),
        ]
    )
    answers = iter(["wrong", "secret"])
    seen_errors = []
    action = Recorder()

    def prompt(state):
        seen_errors.append(state.error)
        return next(answers)

    result = await gate.guard(action, prompt=prompt)

    assert result.invoked is True
    assert action.calls == 1
    assert seen_errors == [None, "These credentials do not match our records."]


async def test_cancelled_prompt_never_runs_action(gate, mock_responses):
    mock_responses.get(STATUS).mock(
        return_value=httpx.Response(200, json={"confirmed": False})
    )
    confirm = mock_responses.post(CONFIRM)
    action = Recorder()

    async def prompt(state):
        return None

    result = await gate.guard(action, prompt=prompt)

    assert result.invoked is False
    assert action.calls == 0
    assert gate.state.open is False
    assert not confirm.called


async def test_network_failure_surfaces_notice(gate, mock_responses):
    mock_responses.get(STATUS).mock(side_effect=httpx.ConnectError("refused"))
    action = Recorder()

    with pytest.raises(NetworkError):
        await gate.guard(action)

    assert gate.state.notice == GENERIC_FAILURE_NOTICE
    assert action.calls == 0


async def test_custom_labels(client):
    gate = PasswordConfirmationGate(client, title="Confirm Access", button="Continue")

    assert gate.state.title == "Confirm Access"
    assert gate.state.button == "Continue"
    assert gate.state.content.startswith("For your security")
