"""Ports to the bot host, plus in-memory implementations.

The plugin never talks to the runtime directly: the ignore list reads
and writes through a ``VarStore`` and replies go out through a
``MessagingGateway``. ``watchbot.extism_host`` binds both to the Extism
PDK; the in-memory versions here back local runs and tests.
"""

from __future__ import annotations

import json
import logging
from typing import Optional, Protocol

from watchbot.errors import DependencyUnavailable
from watchbot.events import HandlerResult, OutgoingMessage, OutgoingReaction

logger = logging.getLogger(__name__)


class VarStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...


class MessagingGateway(Protocol):
    def send_message(self, message: OutgoingMessage) -> HandlerResult: ...

    def react(self, reaction: OutgoingReaction) -> HandlerResult: ...

    def watch_message(self, message_id: str) -> HandlerResult: ...


def check_result(operation: str, result: HandlerResult) -> HandlerResult:
    """Raise DependencyUnavailable if a host call reported failure."""
    if not result.ok:
        logger.error("%s returned errorCode=%s", operation, result.error_code)
        raise DependencyUnavailable(operation, error_code=result.error_code)
    return result


def call_host(operation, fn, payload) -> HandlerResult:
    """Call a host function and decode its JSON reply.

    Anything that goes wrong, from the call raising to a reply that is
    not a result object, becomes DependencyUnavailable.
    """
    try:
        raw = fn(payload)
    except Exception as e:
        logger.error("Host call %s raised: %s", operation, e)
        raise DependencyUnavailable(operation, str(e)) from e

    if not raw:
        return HandlerResult()
    try:
        return HandlerResult.from_json(json.loads(raw))
    except (TypeError, ValueError) as e:
        logger.error("Host call %s returned %r", operation, raw)
        raise DependencyUnavailable(operation, f"bad reply: {e}") from e


class MemoryVarStore:
    """Dict-backed variable store."""

    def __init__(self, initial=None):
        self.values = dict(initial or {})
        self.writes = 0

    def get(self, key):
        return self.values.get(key)

    def set(self, key, value):
        self.values[key] = value
        self.writes += 1


class RecordingGateway:
    """Gateway that records every call instead of sending anything.

    Set ``fail_on`` to an operation name (``"send_message"``, ``"react"``
    or ``"watch_message"``) to make that call report ``errorCode=-1``.
    """

    def __init__(self, fail_on=None):
        self.fail_on = fail_on
        self.messages = []
        self.reactions = []
        self.watched = []
        self._next_id = 1000

    @property
    def calls(self):
        return len(self.messages) + len(self.reactions) + len(self.watched)

    def _result(self, operation):
        if operation == self.fail_on:
            return HandlerResult(error_code=-1)
        self._next_id += 1
        return HandlerResult(error_code=0, id=str(self._next_id))

    def send_message(self, message):
        result = self._result("send_message")
        if result.ok:
            self.messages.append(message)
        return result

    def react(self, reaction):
        result = self._result("react")
        if result.ok:
            self.reactions.append(reaction)
        return result

    def watch_message(self, message_id):
        result = self._result("watch_message")
        if result.ok:
            self.watched.append(message_id)
        return result
