import json
import logging

from heartcheck.core.config import settings

logger = logging.getLogger("heartcheck.debug")


def log_debug(event: str, data: dict):
    """
    Logs structured debug info if AI_DEBUG_MODE is enabled.
    """
    if not settings.AI_DEBUG_MODE:
        return

    logger.info("[DEBUG] %s:\n%s", event, json.dumps(data, indent=2, default=str))
