"""Watch plugin - talks back to replies, goes quiet when shushed."""

import json
import logging

import extism

from watchbot.config import PluginConfig, configure_logging
from watchbot.events import parse_event
from watchbot.extism_host import ExtismGateway, ExtismVarStore
from watchbot.router import EventRouter

logger = logging.getLogger("watchbot.plugin")


@extism.plugin_fn
def handle():
    """Handle one incoming event and report the result to the host."""
    try:
        config = PluginConfig.from_extism()
        configure_logging(config.log_level)

        # Read input event
        event = parse_event(extism.input_str())

        router = EventRouter.create(ExtismVarStore(), ExtismGateway(), config)
        result = router.route(event)
    except Exception:
        logger.exception("Failed to handle event")
        raise

    extism.output_str(json.dumps(result.to_json()))
