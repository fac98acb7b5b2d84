"""Turn one host event into replies, reactions and watch registrations."""

from __future__ import annotations

import logging

from watchbot.config import PluginConfig
from watchbot.events import (
    ContentEvent,
    HandlerResult,
    OutgoingMessage,
    OutgoingReaction,
    ReactionAddedEvent,
    ReferenceEvent,
)
from watchbot.host import check_result
from watchbot.ignore import IgnoreListFilter

logger = logging.getLogger(__name__)


class EventRouter:
    """Dispatch events for the watch plugin.

    ``content``
        Watch the triggering message so replies and reactions come back.
    ``watch:reference``
        Reply with ``config.reply_text`` unless the message is ignored.
    ``watch:reaction:added``
        On the shush token, acknowledge with ``config.ack_token`` and add
        the message to the ignore list.

    Anything else is accepted and dropped. Failed host calls raise
    ``DependencyUnavailable`` and abort the event.
    """

    def __init__(self, ignore: IgnoreListFilter, gateway, config: PluginConfig = None):
        self.ignore = ignore
        self.gateway = gateway
        self.config = config or PluginConfig()

    @classmethod
    def create(cls, store, gateway, config: PluginConfig = None) -> "EventRouter":
        config = config or PluginConfig()
        ignore = IgnoreListFilter(
            store,
            key=config.ignore_key,
            match=config.match,
            max_entries=config.max_entries,
        )
        return cls(ignore, gateway, config)

    def route(self, event) -> HandlerResult:
        if isinstance(event, ContentEvent):
            return self._on_content(event)
        if isinstance(event, ReferenceEvent):
            return self._on_reference(event)
        if isinstance(event, ReactionAddedEvent):
            return self._on_reaction_added(event)

        logger.debug("Ignoring %s event", event.kind)
        return HandlerResult()

    def _on_content(self, event: ContentEvent) -> HandlerResult:
        message_id = event.message.id
        logger.debug("Watching message %s", message_id)
        result = check_result("watchMessage", self.gateway.watch_message(message_id))
        return HandlerResult(id=result.id)

    def _on_reference(self, event: ReferenceEvent) -> HandlerResult:
        message_id = event.message.id
        if self.ignore.is_ignored(message_id):
            logger.debug("Message %s is ignored, not replying", message_id)
            return HandlerResult()

        reply = OutgoingMessage(
            message=self.config.reply_text,
            channel=event.channel or None,
            reply=message_id,
        )
        result = check_result("sendMessage", self.gateway.send_message(reply))
        logger.debug("Replied to %s in %s", message_id, event.channel)
        return HandlerResult(id=result.id)

    def _on_reaction_added(self, event: ReactionAddedEvent) -> HandlerResult:
        reaction = event.reaction
        if reaction.with_ != self.config.shush_token:
            logger.debug("Reaction %s is not a shush, dropping", reaction.with_)
            return HandlerResult()

        message_id = reaction.message.id
        ack = OutgoingReaction(message_id=message_id, with_=self.config.ack_token)
        result = check_result("react", self.gateway.react(ack))
        # written last so a failed ack leaves the list untouched
        self.ignore.add_ignored(message_id)
        return HandlerResult(id=result.id)
