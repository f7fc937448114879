"""
Reply builder for the De Jongh's Panelbeating Centre assistant.
Classifies the latest customer message and answers from the canned
bilingual reply table. No state is kept between calls.
"""

import logging
from typing import Dict, List, Optional

from intents import detect_language, get_intent
from models import AgentInput, AgentOutput, Message
from replies import chips, text

logger = logging.getLogger(__name__)


ESTIMATE_FIELDS = ["vehicleMakeModel", "vehicleYear", "damageType", "damageLocation", "photos"]
BOOKING_FIELDS = ["fullName", "phone", "preferredDate", "vehicleMakeModel", "notes"]
STATUS_FIELDS = ["jobRef", "vehicleReg"]

# intent -> (reply key, action, fields requested, suggestion chips)
RESPONSES: Dict[str, tuple] = {
    "greeting":   ("greeting",   "general_info",   None,            ["chip_estimate", "chip_services", "chip_book"]),
    "services":   ("services",   "list_services",  None,            ["chip_estimate", "chip_book", "chip_insurance"]),
    "estimate":   ("estimate",   "estimate_flow",  ESTIMATE_FIELDS, ["chip_inspection", "chip_insurance"]),
    "booking":    ("booking",    "booking_flow",   BOOKING_FIELDS,  ["chip_details"]),
    "status":     ("status",     "status_lookup",  STATUS_FIELDS,   ["chip_reference"]),
    "insurance":  ("insurance",  "insurance_info", None,            ["chip_estimate"]),
    "turnaround": ("turnaround", "general_info",   None,            ["chip_book"]),
    "tips":       ("tips",       "tips",           None,            ["chip_services"]),
    "default":    ("default",    "general_info",   None,            ["chip_estimate", "chip_book"]),
}


def last_user_message(messages: List[Message]) -> Optional[Message]:
    """Most recent message written by the customer, if any"""
    for message in reversed(messages):
        if message.role == "user":
            return message
    return None


def build_response(intent: str, language: str) -> AgentOutput:
    reply_key, action, fields, chip_keys = RESPONSES[intent]
    return AgentOutput(
        reply=text(reply_key, language),
        language=language,
        action=action,
        fields_requested=list(fields) if fields else None,
        suggestions=chips(chip_keys, language),
    )


def run_agent(payload: AgentInput) -> AgentOutput:
    """Answer the latest user message in the conversation.

    Only the last user-authored message is looked at; earlier turns and
    assistant/system messages are ignored. The reply language is Afrikaans
    when the message carries an Afrikaans hint word, otherwise the
    language hint from the widget (English when absent).
    """
    last = last_user_message(payload.messages)
    user_text = (last.content if last else "").lower()
    language = detect_language(user_text, payload.language or "en")

    intent = get_intent(user_text)
    logger.debug("Intent detected: '%s' (%s) for message: '%s'", intent, language, user_text[:30])

    return build_response(intent, language)
