"""
replies.py – canned bilingual replies for the panelbeating assistant
--------------------------------------------------------------------
Every customer-facing string lives in one table keyed by message key,
then by language ("en" / "af"). The classifier looks each key up once.
"""

from typing import Dict, List

BULLET = "•"

SERVICES: Dict[str, List[str]] = {
    "en": [
        "Collision repair and panel beating",
        "Professional spray painting and colour matching",
        "Dent removal (PDR where suitable)",
        "Chassis measuring and straightening",
        "Rust treatment and prevention",
        "Full and partial resprays",
        "Polishing and paint correction",
        "Insurance claims assistance",
    ],
    "af": [
        "Botsingsherstel en paneelklopwerk",
        "Professionele spuitverf en kleurpassing",
        "Drukduik verwydering (PDR waar toepaslik)",
        "Chassis meting en reguitmaak",
        "Roesteremediëring en -voorkoming",
        "Volledige en gedeeltelike oorspuite",
        "Polering en verfkorreksie",
        "Versekeringseis ondersteuning",
    ],
}

TIPS: Dict[str, List[str]] = {
    "en": [
        "Avoid automated car washes for 2 weeks after a respray; hand wash only.",
        "Use pH-neutral shampoo and microfiber mitts to protect the finish.",
        "Apply a quality paint sealant after 30 days for added protection.",
        "Address chips and scratches promptly to prevent rust.",
    ],
    "af": [
        "Vermy outo-wasplekke vir 2 weke ná ’n oorspuit; handwas net.",
        "Gebruik pH-neutrale sjampoe en mikrofiber-handskoene vir beskerming.",
        "Dien ’n kwaliteit verfseëlmiddel na 30 dae toe vir ekstra beskerming.",
        "Hanteer skyfies en krapmerke vinnig om roes te voorkom.",
    ],
}


def list_to_bullets(items: List[str]) -> str:
    """One bullet per line"""
    return "\n".join(f"{BULLET} {item}" for item in items)


REPLIES: Dict[str, Dict[str, str]] = {
    # ---------- reply bodies ----------
    "greeting": {
        "en": "Welcome! We’re a trusted, family-run panelbeating and spray-painting centre. How can I help today?",
        "af": "Welkom! Ons is ’n betroubare, familie-onderneming vir paneelklop en spuitverf. Hoe kan ek help vandag?",
    },
    "services": {
        "en": f"We offer:\n{list_to_bullets(SERVICES['en'])}\n\nWould you like help with an estimate or booking?",
        "af": f"Ons bied aan:\n{list_to_bullets(SERVICES['af'])}\n\nWil jy help hê met ’n skatting of bespreking?",
    },
    "estimate": {
        "en": "Happy to help with an estimate. Please share: car make/model, year, damage type/location, and photos if possible.",
        "af": "Graag help ek met ’n skatting. Deel asseblief: kar maak/model, jaar, tipe/ligging van skade, en foto’s indien moontlik.",
    },
    "booking": {
        "en": "Let’s book your car in. I’ll need: name, contact number, preferred date, car make/model, and a brief description of the issue.",
        "af": "Kom ons maak ’n bespreking. Ek het nodig: naam, kontaknommer, voorkeurdatum, kar maak/model, en ’n kort beskrywing van die probleem.",
    },
    "status": {
        "en": "Please share your job reference number (e.g., DJ-12345) and the vehicle registration to check the status.",
        "af": "Deel asseblief jou werkverwysingsnommer (bv. DJ-12345) en die registrasienommer om die status na te gaan.",
    },
    "status_result": {
        "en": "Status for {ref}: {stage}. Estimated completion in {low}–{high} days.",
        "af": "Status vir {ref}: {stage}. Geskatte voltooiing oor {low}–{high} dae.",
    },
    "insurance": {
        "en": "We work with major insurers and can assist with assessments and paperwork. I can help you prepare photos and details for a smooth claim.",
        "af": "Ons werk met groot versekeraars en help met assesserings en papierwerk. Ek kan help om foto’s en besonderhede voor te berei vir ’n gladde eis.",
    },
    "turnaround": {
        "en": "Typical turnaround: small dents 1–2 days, moderate repairs 3–5 days, major collision work 1–2 weeks. Paint curing can add time.",
        "af": "Gewone omkeertyd: klein duike 1–2 dae, matige herstelwerk 3–5 dae, groot botsingswerk 1–2 weke. Verfgenesing kan tyd byvoeg.",
    },
    "tips": {
        "en": f"After-care tips:\n{list_to_bullets(TIPS['en'])}",
        "af": f"Ná-sorg wenke:\n{list_to_bullets(TIPS['af'])}",
    },
    "default": {
        "en": "I can help with estimates, bookings, job updates, insurance assistance, and paint care tips. What would you like to do?",
        "af": "Ek kan help met skattings, besprekings, werkopdaterings, versekeringhulp en verfsorg wenke. Waarmee kan ek help?",
    },
    "server_error": {
        "en": "Server error",
        "af": "Server error",
    },
    "transport_error": {
        "en": "Sorry, I had trouble responding. Please try again.",
        "af": "Jammer, ek het probleme ondervind. Probeer asseblief weer.",
    },

    # ---------- quick-reply chips ----------
    "chip_estimate": {"en": "Get an estimate", "af": "Kry ’n skatting"},
    "chip_services": {"en": "List services", "af": "Lys dienste"},
    "chip_book": {"en": "Book my car in", "af": "Maak ’n bespreking"},
    "chip_insurance": {"en": "Insurance claims help", "af": "Hulp met versekeringseis"},
    "chip_inspection": {"en": "Book an inspection", "af": "Boek ’n inspeksie"},
    "chip_details": {"en": "Share my details", "af": "Deel my besonderhede"},
    "chip_reference": {"en": "My reference is DJ-12345", "af": "My verwysing is DJ-12345"},
    "chip_contact": {"en": "Contact us", "af": "Kontak ons"},
}

# Starter questions shown above the chat window
STARTERS: Dict[str, List[str]] = {
    "en": [
        "What services do you offer?",
        "Can I get a repair estimate?",
        "Help with an insurance claim",
        "Book my car in",
        "Check my job status",
        "How long do repairs take?",
        "Paint care tips",
    ],
    "af": [
        "Watter dienste bied julle?",
        "Kan ek ’n skatting kry?",
        "Hulp met ’n versekeringseis",
        "Maak ’n bespreking",
        "Kontroleer my werkstatus",
        "Hoe lank neem herstelwerk?",
        "Verfsorg wenke",
    ],
}

# Widget labels
UI_TEXT: Dict[str, Dict[str, str]] = {
    "placeholder": {"en": "Type your message…", "af": "Tik jou boodskap…"},
    "add_photos": {"en": "Add photos", "af": "Voeg foto’s by"},
    "send": {"en": "Send", "af": "Stuur"},
    "sending": {"en": "Sending…", "af": "Stuur…"},
}


def text(key: str, language: str) -> str:
    """Look up a reply or chip by key, English when the language is unknown"""
    entry = REPLIES[key]
    return entry.get(language, entry["en"])


def chips(keys: List[str], language: str) -> List[str]:
    return [text(key, language) for key in keys]
