"""Plugin configuration.

Values come from the plugin's config map (set when the plugin is
installed on the host). Every key is optional.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Optional

MATCH_MODES = ("exact", "substring")

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

# config key -> PluginConfig field
CONFIG_KEYS = {
    "reply_text": "reply_text",
    "shush_token": "shush_token",
    "ack_token": "ack_token",
    "ignore_key": "ignore_key",
    "ignore_match": "match",
    "ignore_max_entries": "max_entries",
    "log_level": "log_level",
}


@dataclass(frozen=True)
class PluginConfig:
    reply_text: str = "i know you are but what am i"
    shush_token: str = "\U0001f92b"  # 🤫
    ack_token: str = "\u2714\ufe0f"  # ✔️
    ignore_key: str = "ignore"
    match: str = "exact"
    max_entries: Optional[int] = None
    log_level: str = "INFO"

    def __post_init__(self):
        if self.match not in MATCH_MODES:
            raise ValueError(
                f"ignore_match must be one of {', '.join(MATCH_MODES)}, got {self.match!r}"
            )
        if self.max_entries is not None and self.max_entries < 1:
            raise ValueError("ignore_max_entries must be a positive integer")
        if not self.ignore_key:
            raise ValueError("ignore_key must not be empty")

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Optional[str]]) -> "PluginConfig":
        kwargs = {}
        for key, field_name in CONFIG_KEYS.items():
            raw = mapping.get(key)
            if raw is None or not str(raw).strip():
                continue
            value = str(raw).strip()
            if field_name == "max_entries":
                try:
                    kwargs[field_name] = int(value)
                except ValueError:
                    raise ValueError(
                        f"ignore_max_entries must be a positive integer, got {value!r}"
                    ) from None
            elif field_name == "match":
                kwargs[field_name] = value.lower()
            else:
                kwargs[field_name] = value
        return cls(**kwargs)

    @classmethod
    def from_extism(cls) -> "PluginConfig":
        """Read configuration through the Extism PDK."""
        import extism

        return cls.from_mapping({key: extism.Config.get_str(key) for key in CONFIG_KEYS})


_configured = False


def configure_logging(level="INFO"):
    """Install a basic log format once per plugin instance."""
    global _configured
    if not _configured:
        logging.basicConfig(format=LOG_FORMAT)
        _configured = True
    logging.getLogger("watchbot").setLevel(
        getattr(logging, str(level).upper(), logging.INFO)
    )
