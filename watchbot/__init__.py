"""Watch plugin - replies to references and honours shush reactions."""

from watchbot.config import PluginConfig
from watchbot.errors import DependencyUnavailable, InvalidEvent, WatchbotError
from watchbot.events import parse_event
from watchbot.ignore import IgnoreListFilter
from watchbot.router import EventRouter

__all__ = [
    "DependencyUnavailable",
    "EventRouter",
    "IgnoreListFilter",
    "InvalidEvent",
    "PluginConfig",
    "WatchbotError",
    "parse_event",
]
