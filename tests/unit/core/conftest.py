"""Shared fixtures for core tests.

Provides a scripted in-memory transport so executor and client behaviour can
be tested without sockets.
"""

# pylint: disable=redefined-outer-name

from collections.abc import Callable

import pytest

from httputils.core.models import PreparedRequest, Response


class ScriptedTransport:
    """Transport double that replays a script of outcomes.

    Each `send()` consumes the next outcome: a `Response` is returned, an
    exception is raised. The last outcome repeats once the script runs out.
    """

    def __init__(self, *outcomes: Response | BaseException) -> None:
        self.outcomes = list(outcomes) or [Response(200)]
        self.sent: list[PreparedRequest] = []
        self.closed = False

    @property
    def calls(self) -> int:
        return len(self.sent)

    def send(self, prepared: PreparedRequest) -> Response:
        self.sent.append(prepared)
        outcome = self.outcomes.pop(0) if len(self.outcomes) > 1 else self.outcomes[0]
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    def close(self) -> None:
        self.closed = True


class EchoTransport(ScriptedTransport):
    """Answers 200 with the request body it was sent."""

    def send(self, prepared: PreparedRequest) -> Response:
        self.sent.append(prepared)
        return Response(200, prepared.body or "")


@pytest.fixture
def scripted_transport() -> Callable[..., ScriptedTransport]:
    """Factory for ScriptedTransport instances.

    Returns:
        Callable taking the outcomes to replay.
    """
    return ScriptedTransport


@pytest.fixture
def echo_transport() -> EchoTransport:
    return EchoTransport()
