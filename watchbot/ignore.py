"""Ignore list: message ids the plugin must not auto-reply to.

The list lives in a single host variable as a run of ``"<id>:"`` tokens,
e.g. ``"9:42:"``. Two match modes are supported:

``exact``
    The stored string is split into tokens and an id is ignored only if
    it equals one of them. Adding an id that is already present is a
    no-op.

``substring``
    An id is ignored if ``"<id>:"`` occurs anywhere in the stored string,
    and every add appends. This is the historical behaviour; note that
    ``"12"`` is then considered ignored once ``"112"`` has been added.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from watchbot.config import MATCH_MODES
from watchbot.errors import DependencyUnavailable

logger = logging.getLogger(__name__)

SEPARATOR = ":"


def encode(ids) -> str:
    return "".join(f"{i}{SEPARATOR}" for i in ids)


def decode(raw: str) -> List[str]:
    return [token for token in raw.split(SEPARATOR) if token]


class IgnoreListFilter:
    def __init__(self, store, key="ignore", match="exact", max_entries: Optional[int] = None):
        if match not in MATCH_MODES:
            raise ValueError(f"match must be one of {', '.join(MATCH_MODES)}, got {match!r}")
        self.store = store
        self.key = key
        self.match = match
        self.max_entries = max_entries

    def _load(self) -> str:
        try:
            raw = self.store.get(self.key)
        except DependencyUnavailable:
            raise
        except Exception as e:
            logger.error("Failed to read %r: %s", self.key, e)
            raise DependencyUnavailable("var_get", str(e)) from e
        return raw or ""

    def _save(self, raw: str) -> None:
        try:
            self.store.set(self.key, raw)
        except DependencyUnavailable:
            raise
        except Exception as e:
            logger.error("Failed to write %r: %s", self.key, e)
            raise DependencyUnavailable("var_set", str(e)) from e

    @staticmethod
    def _check_id(message_id) -> str:
        message_id = str(message_id)
        if not message_id:
            raise ValueError("message id must not be empty")
        if SEPARATOR in message_id:
            raise ValueError(f"message id must not contain {SEPARATOR!r}: {message_id!r}")
        return message_id

    def is_ignored(self, message_id) -> bool:
        message_id = str(message_id)
        # such ids can never have been stored
        if not message_id or SEPARATOR in message_id:
            return False
        raw = self._load()
        if self.match == "substring":
            return f"{message_id}{SEPARATOR}" in raw
        return message_id in decode(raw)

    def add_ignored(self, message_id) -> None:
        message_id = self._check_id(message_id)
        raw = self._load()

        if self.match == "substring":
            # append-only log, duplicates and all
            ids = None
            raw = f"{raw}{message_id}{SEPARATOR}"
        else:
            ids = decode(raw)
            if message_id in ids:
                logger.debug("Message %s already ignored", message_id)
                return
            ids.append(message_id)

        if self.max_entries is not None:
            if ids is None:
                ids = decode(raw)
            if len(ids) > self.max_entries:
                logger.debug("Dropping %d oldest ignore entries", len(ids) - self.max_entries)
                ids = ids[-self.max_entries:]

        if ids is not None:
            raw = encode(ids)
        self._save(raw)
        logger.info("Ignoring replies to message %s", message_id)

    def entries(self) -> List[str]:
        return decode(self._load())
