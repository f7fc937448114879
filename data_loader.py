"""
Configuration loading for the panelbeating assistant.
Brand settings come from config.json, deployment settings from the
environment (a local .env file is picked up too).
"""

import json
import logging
import os
from typing import Dict

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

CONFIG_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "config.json")

DEFAULT_CONFIG = {
    "STORE_NAME": "De Jongh’s Panelbeating Centre",
    "TAGLINE": "Trusted family-run panel beating and spray painting since 1989",
    "WELCOME_MESSAGE": {
        "en": "Welcome! I’m your assistant for De Jongh’s Panelbeating Centre. How can I help today?",
        "af": "Welkom! Ek is jou assistent vir De Jongh’s Paneelklop Sentrum. Hoe kan ek help vandag?",
    },
    "HISTORY_LIMIT": 12,
    "MAX_ATTACHMENTS": 3,
}


def load_config(path: str = CONFIG_PATH) -> Dict:
    """Load brand config from JSON, falling back to the built-in defaults"""
    cfg = dict(DEFAULT_CONFIG)
    try:
        with open(path, "r", encoding="utf-8") as f:
            cfg.update(json.load(f))
    except (FileNotFoundError, json.JSONDecodeError) as e:
        logger.warning("Could not load config from %s: %s", path, e)
    return cfg


def load_settings() -> Dict:
    """Server and client settings from environment variables"""
    load_dotenv()

    host = os.environ.get("CHAT_HOST", "127.0.0.1")
    port = int(os.environ.get("CHAT_PORT", "7860"))
    return {
        "host": host,
        "port": port,
        "api_url": os.environ.get("CHAT_API_URL", f"http://{host}:{port}/api/chat"),
        "log_level": os.environ.get("LOG_LEVEL", "INFO").upper(),
    }
