"""
Demo job-status lookup.
There is no job database: the stage is picked from the length of the
reference (plus the registration, when given) so the same question always
gets the same answer.
"""

import logging
import re
from typing import Optional, Tuple

from models import AgentOutput
from replies import chips, text

logger = logging.getLogger(__name__)

JOB_REF_RX = re.compile(r"([a-z]{2,3}[-\s]?\d{4,6})", re.IGNORECASE)
REGISTRATION_RX = re.compile(r"([a-z]{2,3}\s?\d{2,3}\s?[a-z]{2,3})", re.IGNORECASE)

STAGES = [
    "Checked in",
    "Assessment complete",
    "Parts ordered",
    "Panel beating in progress",
    "Spray painting",
    "Final polish and QA",
    "Ready for collection",
]


def extract_job_ref(message: str) -> Optional[str]:
    """Job reference such as 'DJ-12345', upper-cased with a dash separator"""
    match = JOB_REF_RX.search(message.lower())
    if not match:
        return None
    return re.sub(r"\s+", "-", match.group(1).upper(), count=1)


def extract_registration(message: str) -> Optional[str]:
    match = REGISTRATION_RX.search(message.lower())
    return match.group(1) if match else None


def simulate_status(job_ref: str, registration: Optional[str] = None) -> Tuple[str, int, int]:
    """Return (stage, low, high) where low-high is the estimated days left"""
    index = (len(job_ref) + len(registration or "")) % len(STAGES)
    return STAGES[index], 1 + index % 3, 2 + index % 4


def apply_status_overlay(result: AgentOutput, message: str) -> AgentOutput:
    """Answer a status question directly when the message carries a job reference.

    Only the reply and the suggestions change; action and requested fields
    stay as the classifier left them.
    """
    if result.action != "status_lookup":
        return result

    job_ref = extract_job_ref(message)
    if not job_ref:
        return result

    registration = extract_registration(message)
    stage, low, high = simulate_status(job_ref, registration)
    logger.debug("Status for %s (reg=%s): %s", job_ref, registration, stage)

    return result.model_copy(update={
        "reply": text("status_result", result.language).format(
            ref=job_ref, stage=stage, low=low, high=high
        ),
        "suggestions": chips(["chip_book", "chip_contact"], result.language),
    })
