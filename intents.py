"""
intents.py  – keyword heuristics to label customer messages
-----------------------------------------------------------
Returns one of:
    • "greeting"
    • "services"
    • "estimate"
    • "booking"
    • "status"
    • "insurance"
    • "turnaround"
    • "tips"
    • "default"

Rules are checked in order and the first hit wins. The keyword buckets
overlap on purpose ("hi, can I book..." is a booking, not a greeting), so
the order below is part of the behaviour.
"""

import re
from typing import Callable, List, Tuple

# Afrikaans hint words (substring match, so "kar" also hits "karavaan")
AF_HINTS_RX = re.compile(
    r"(asseblief|dankie|bespreking|kar|motor|wer(k|kstatus)|hoe lank|watter"
    r"|vers(ekering|ekerings)|skatting|verf|roes|spuit|paneel|klop|regmaak)",
    re.IGNORECASE,
)

# basic keyword buckets
GREETING_RX   = re.compile(r"(hello|hi|morning|afternoon|howzit|hey|goeie dag|hallo)", re.IGNORECASE)
SERVICES_RX   = re.compile(r"(services?|do you offer|what do you do|dienste|watter)", re.IGNORECASE)
ESTIMATE_RX   = re.compile(r"(estimate|quote|price|cost|skat(ting)?|kwotasie)", re.IGNORECASE)
BOOKING_RX    = re.compile(r"(book|booking|schedule|bespre(k|king)|maak.*bespreking)", re.IGNORECASE)
STATUS_RX     = re.compile(r"(status|progress|update|ref(erence)?|job|werkstatus|vordering)", re.IGNORECASE)
TIPS_RX       = re.compile(r"(tips?|care|maintenance|protect|seël|versorg|wenke)", re.IGNORECASE)
INSURANCE_RX  = re.compile(r"(insurance|claim|assessor|verzeker|versekering|eis)", re.IGNORECASE)
TURNAROUND_RX = re.compile(r"(how long|turnaround|timeline|hoe lank|tydlyn)", re.IGNORECASE)

# photo + damage together also count as an estimate request
PHOTOS_RX     = re.compile(r"(photo|image|picture|foto|prent)", re.IGNORECASE)
DAMAGE_RX     = re.compile(r"(damage|dent|scratch|roes|duik)", re.IGNORECASE)


def detect_language(text: str, fallback: str = "en") -> str:
    """'af' if any Afrikaans hint word appears, otherwise the fallback"""
    return "af" if AF_HINTS_RX.search(text) else fallback


def is_greeting(text: str) -> bool:
    # a greeting that also asks for something is not a greeting
    if not GREETING_RX.search(text):
        return False
    return not (is_services(text) or ESTIMATE_RX.search(text)
                or is_booking(text) or is_status(text))


def is_services(text: str) -> bool:
    return bool(SERVICES_RX.search(text))


def is_estimate(text: str) -> bool:
    if ESTIMATE_RX.search(text):
        return True
    return bool(PHOTOS_RX.search(text) and DAMAGE_RX.search(text))


def is_booking(text: str) -> bool:
    return bool(BOOKING_RX.search(text))


def is_status(text: str) -> bool:
    return bool(STATUS_RX.search(text))


def is_insurance(text: str) -> bool:
    return bool(INSURANCE_RX.search(text))


def is_turnaround(text: str) -> bool:
    return bool(TURNAROUND_RX.search(text))


def is_tips(text: str) -> bool:
    return bool(TIPS_RX.search(text))


RULES: List[Tuple[str, Callable[[str], bool]]] = [
    ("greeting",   is_greeting),
    ("services",   is_services),
    ("estimate",   is_estimate),
    ("booking",    is_booking),
    ("status",     is_status),
    ("insurance",  is_insurance),
    ("turnaround", is_turnaround),
    ("tips",       is_tips),
]


def get_intent(msg: str) -> str:
    lower = msg.lower()

    for name, matches in RULES:
        if matches(lower):
            return name

    return "default"
