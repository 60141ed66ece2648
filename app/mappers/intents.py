import re
from collections.abc import Callable
from typing import NamedTuple

from app.mappers.facts_extractor import DEFAULT_ADDRESS
from app.schemas.facts import FactsRecord
from app.schemas.responses import Language

_TELUGU_RE = re.compile(r"[\u0C00-\u0C7F]")

NO_DATA_AVAILABLE: dict[str, str] = {
    "te": "క్షమించండి, ఈ సమాచారం ప్రస్తుతం అందుబాటులో లేదు. దయచేసి హాస్పిటల్‌కి నేరుగా కాల్ చేయండి.",
    "en": "Sorry, that information is not available right now. Please call the hospital directly.",
}

HOSPITAL_NAME_EN = "Amma Hospital"
ADDRESS_EN = "near the RTC Bus Stand"


def detect_language(text: str) -> Language:
    """'te' if any character is in the Telugu block, else 'en'."""
    return "te" if _TELUGU_RE.search(text) else "en"


def normalize(text: str) -> str:
    return text.lower().strip()


class Intent(NamedTuple):
    name: str
    te_keywords: tuple[str, ...]
    en_keywords: tuple[str, ...]
    render: Callable[[FactsRecord, Language], str]

    def matches(self, query: str) -> bool:
        return any(k in query for k in self.te_keywords + self.en_keywords)


def render_address(facts: FactsRecord, lang: Language) -> str:
    if lang == "te":
        if not facts.address or facts.address == DEFAULT_ADDRESS:
            return f"{facts.name} అనంతపురంలో ఉంది."
        return f"{facts.name} అనంతపురంలో {facts.address} ఉంది."
    return f"{HOSPITAL_NAME_EN} is located in Anantapur, {ADDRESS_EN}."


def render_contact(facts: FactsRecord, lang: Language) -> str:
    if lang == "te":
        return f"మీరు మమ్మల్ని {' లేదా '.join(facts.contact_numbers)} నెంబర్లలో సంప్రదించవచ్చు."
    return f"You can contact us at {' or '.join(facts.contact_numbers)}."


def render_services(facts: FactsRecord, lang: Language) -> str:
    services = ", ".join(facts.services)
    if lang == "te":
        return f"మా ప్రధాన సేవలు: {services} మరియు మరెన్నో."
    return f"Our main services are {services}, and many more."


def render_doctor(facts: FactsRecord, lang: Language) -> str:
    if not facts.doctors:
        return NO_DATA_AVAILABLE[lang]
    doctor = facts.doctors[0]
    if lang == "te":
        return f"మా హాస్పిటల్ ప్రధాన డాక్టర్ {doctor.name} గారు, {doctor.specialty} నిపుణురాలు."
    name = doctor.name_en or doctor.name
    specialty = doctor.specialty_en or doctor.specialty
    return f"Our main doctor is {name}, an expert in {specialty}."


def render_hours(facts: FactsRecord, lang: Language) -> str:
    hours = facts.working_hours
    if not hours.mon_sat and not hours.sunday:
        return NO_DATA_AVAILABLE[lang]
    if lang == "te":
        return (
            f"మా పని సమయాలు: సోమవారం నుండి శనివారం వరకు {hours.mon_sat} "
            f"మరియు ఆదివారం {hours.sunday}."
        )
    return f"Our working hours: Mon-Sat {hours.mon_sat}, Sun {hours.sunday}."


# Evaluated in order; the first intent with a matching keyword wins.
INTENTS: tuple[Intent, ...] = (
    Intent("address", ("అడ్రస్",), ("address", "location"), render_address),
    Intent("contact", ("ఫోన్", "నెంబర్"), ("contact", "phone"), render_contact),
    Intent("services", ("సేవలు",), ("services",), render_services),
    Intent("doctor", ("డాక్టర్",), ("doctor",), render_doctor),
    Intent("hours", ("టైమింగ్స్", "సమయాలు"), ("hours",), render_hours),
)


def match_intent(text: str, intents: tuple[Intent, ...] = INTENTS) -> Intent | None:
    query = normalize(text)
    for intent in intents:
        if intent.matches(query):
            return intent
    return None
