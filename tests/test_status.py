#!/usr/bin/env python3
"""
Unit tests for the simulated job status lookup
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from chatbot import run_agent
from models import AgentInput
from status import apply_status_overlay, extract_job_ref, extract_registration, simulate_status

def answer(message, language=None):
    result = run_agent(AgentInput(language=language, messages=[{"role": "user", "content": message}]))
    return apply_status_overlay(result, message)

def test_extract_job_ref():
    """Reference is upper-cased and the separator becomes a dash"""
    assert extract_job_ref("My reference is DJ-12345") == "DJ-12345"
    assert extract_job_ref("my reference is dj 12345") == "DJ-12345"
    assert extract_job_ref("ref abc 123456") == "ABC-123456"
    assert extract_job_ref("job xy9876") == "XY9876"
    assert extract_job_ref("Check my job status") is None

def test_extract_registration():
    """Registration shaped like letters, digits, letters"""
    assert extract_registration("reg CA 123 GP") == "ca 123 gp"
    assert extract_registration("reg ca123gp") == "ca123gp"
    assert extract_registration("DJ-12345") is None

def test_simulate_status():
    """Stage and day range come from the reference length"""
    assert simulate_status("DJ-12345") == ("Assessment complete", 2, 3)
    assert simulate_status("DJ-12345", "ca 123 gp") == ("Panel beating in progress", 1, 5)
    assert simulate_status("AB-1234") == ("Checked in", 1, 2)

def test_status_with_reference():
    """Reference DJ-12345 without a registration reports 'Assessment complete'"""
    result = answer("My reference is DJ-12345")
    assert result.action == "status_lookup"
    assert result.reply == "Status for DJ-12345: Assessment complete. Estimated completion in 2–3 days."
    assert result.suggestions == ["Book my car in", "Contact us"]
    assert result.fields_requested == ["jobRef", "vehicleReg"]

def test_status_with_registration():
    """Registration length is added before picking the stage"""
    result = answer("Status of DJ-12345, reg CA 123 GP")
    assert result.reply == "Status for DJ-12345: Panel beating in progress. Estimated completion in 1–5 days."

def test_status_in_afrikaans():
    """Afrikaans status question gets the Afrikaans template"""
    result = answer("Wat is my werkstatus? Verwysing DJ-12345")
    assert result.language == "af"
    assert result.reply == "Status vir DJ-12345: Assessment complete. Geskatte voltooiing oor 2–3 dae."
    assert result.suggestions == ["Maak ’n bespreking", "Kontak ons"]

def test_no_overlay_without_reference():
    """Status question without a reference keeps the classifier reply"""
    result = answer("Check my job status")
    assert result.reply.startswith("Please share your job reference number")
    assert result.suggestions == ["My reference is DJ-12345"]

def test_no_overlay_for_other_actions():
    """A reference in a booking message does not trigger a status reply"""
    result = answer("Please book DJ-12345 in")
    assert result.action == "booking_flow"
    assert result.reply.startswith("Let’s book your car in.")

if __name__ == "__main__":
    pytest.main([__file__])
