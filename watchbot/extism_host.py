"""Extism PDK bindings for the host ports.

Only importable inside the plugin runtime, where ``extism`` is the
Python PDK. Host functions take and return JSON strings.
"""

import json

import extism

from watchbot.host import call_host

HOST_MODULE = "extism:host/user"


@extism.import_fn(HOST_MODULE, "sendMessage")
def _send_message(message: str) -> str: ...


@extism.import_fn(HOST_MODULE, "react")
def _react(reaction: str) -> str: ...


@extism.import_fn(HOST_MODULE, "watchMessage")
def _watch_message(message_id: str) -> str: ...


class ExtismVarStore:
    """Plugin variables, kept by the host between calls."""

    def get(self, key):
        return extism.Var.get_str(key)

    def set(self, key, value):
        extism.Var.set(key, value)


class ExtismGateway:
    def send_message(self, message):
        return call_host("sendMessage", _send_message, json.dumps(message.to_json()))

    def react(self, reaction):
        return call_host("react", _react, json.dumps(reaction.to_json()))

    def watch_message(self, message_id):
        return call_host("watchMessage", _watch_message, message_id)
