"""Event and outgoing payload types exchanged with the bot host.

Incoming events arrive as a JSON object with a ``kind`` discriminator.
Each kind the plugin understands gets its own dataclass so a handler can
never see, say, a ``watch:reference`` event without a message.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from watchbot.errors import InvalidEvent

CONTENT = "content"
WATCH_REFERENCE = "watch:reference"
WATCH_REACTION_ADDED = "watch:reaction:added"
WATCH_REACTION_REMOVED = "watch:reaction:removed"
HTTP_RESPONSE = "http:response"


@dataclass(frozen=True)
class IncomingMessage:
    id: str
    content: str = ""
    author: Any = None
    reference: Optional[str] = None


@dataclass(frozen=True)
class IncomingReaction:
    with_: str
    message: IncomingMessage
    from_: Optional[str] = None


@dataclass(frozen=True)
class IncomingResponse:
    id: str
    status: int
    body: Any = ""
    headers: dict = field(default_factory=dict)


@dataclass(frozen=True)
class ContentEvent:
    channel: str
    message: IncomingMessage
    kind: str = CONTENT


@dataclass(frozen=True)
class ReferenceEvent:
    channel: str
    message: IncomingMessage
    kind: str = WATCH_REFERENCE


@dataclass(frozen=True)
class ReactionAddedEvent:
    channel: str
    reaction: IncomingReaction
    kind: str = WATCH_REACTION_ADDED


@dataclass(frozen=True)
class ReactionRemovedEvent:
    channel: str
    reaction: IncomingReaction
    kind: str = WATCH_REACTION_REMOVED


@dataclass(frozen=True)
class ResponseEvent:
    channel: str
    response: IncomingResponse
    kind: str = HTTP_RESPONSE


@dataclass(frozen=True)
class UnknownEvent:
    kind: str
    channel: str = ""


Event = Union[
    ContentEvent,
    ReferenceEvent,
    ReactionAddedEvent,
    ReactionRemovedEvent,
    ResponseEvent,
    UnknownEvent,
]


@dataclass(frozen=True)
class OutgoingMessage:
    message: str
    channel: Optional[str] = None
    reply: Optional[str] = None

    def to_json(self) -> dict:
        # unset fields are omitted, not sent as null
        data = {"message": self.message}
        if self.channel is not None:
            data["channel"] = self.channel
        if self.reply is not None:
            data["reply"] = self.reply
        return data


@dataclass(frozen=True)
class OutgoingReaction:
    message_id: str
    with_: str

    def to_json(self) -> dict:
        return {"messageId": self.message_id, "with": self.with_}


@dataclass(frozen=True)
class HandlerResult:
    """Result of a host call, or of handling an event.

    An ``error_code`` of zero is success; negative numbers are failures.
    """

    error_code: int = 0
    id: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error_code >= 0

    @classmethod
    def from_json(cls, obj) -> "HandlerResult":
        if not isinstance(obj, dict):
            raise ValueError(f"expected a result object, got {type(obj).__name__}")
        code = obj.get("errorCode", 0)
        result_id = obj.get("id")
        try:
            error_code = int(code) if code is not None else 0
        except TypeError:
            raise ValueError(f"errorCode must be a number, got {code!r}") from None
        return cls(
            error_code=error_code,
            id=str(result_id) if result_id not in (None, "") else None,
        )

    def to_json(self) -> dict:
        data = {"errorCode": self.error_code}
        if self.id is not None:
            data["id"] = self.id
        return data


def _message_id(value, where):
    if value is None or value == "":
        raise InvalidEvent(f"{where}: missing message id")
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise InvalidEvent(f"{where}: message id must be a string")
    return str(value)


def _parse_message(obj, where) -> IncomingMessage:
    if not isinstance(obj, dict):
        raise InvalidEvent(f"{where}: expected a message object")
    reference = obj.get("reference")
    return IncomingMessage(
        id=_message_id(obj.get("id"), where),
        content=obj.get("content") or "",
        author=obj.get("author"),
        reference=str(reference) if reference not in (None, "") else None,
    )


def _parse_reaction(obj, where) -> IncomingReaction:
    if not isinstance(obj, dict):
        raise InvalidEvent(f"{where}: expected a reaction object")
    emoji = obj.get("with")
    if not isinstance(emoji, str):
        raise InvalidEvent(f"{where}: reaction has no emoji")
    return IncomingReaction(
        with_=emoji,
        message=_parse_message(obj.get("message"), f"{where}.message"),
        from_=obj.get("from"),
    )


def _parse_response(obj, where) -> IncomingResponse:
    if not isinstance(obj, dict):
        raise InvalidEvent(f"{where}: expected a response object")
    try:
        status = int(obj.get("status"))
    except (TypeError, ValueError):
        raise InvalidEvent(f"{where}: response has no status") from None
    return IncomingResponse(
        id=str(obj.get("id", "")),
        status=status,
        body=obj.get("body", ""),
        headers=obj.get("headers") or {},
    )


def parse_event(data) -> Event:
    """Decode a host event from a JSON string or an already-decoded dict."""
    if isinstance(data, (str, bytes)):
        try:
            data = json.loads(data)
        except ValueError as e:
            raise InvalidEvent(f"event is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise InvalidEvent("event must be a JSON object")

    kind = data.get("kind")
    if not isinstance(kind, str) or not kind:
        raise InvalidEvent("event has no kind")
    channel = data.get("channel") or ""

    if kind == CONTENT:
        return ContentEvent(channel, _parse_message(data.get("message"), kind))
    if kind == WATCH_REFERENCE:
        return ReferenceEvent(channel, _parse_message(data.get("message"), kind))
    if kind == WATCH_REACTION_ADDED:
        return ReactionAddedEvent(channel, _parse_reaction(data.get("reaction"), kind))
    if kind == WATCH_REACTION_REMOVED:
        return ReactionRemovedEvent(channel, _parse_reaction(data.get("reaction"), kind))
    if kind == HTTP_RESPONSE:
        return ResponseEvent(channel, _parse_response(data.get("response"), kind))
    return UnknownEvent(kind, channel)
