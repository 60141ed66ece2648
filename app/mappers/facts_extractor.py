import re
from collections.abc import Callable

from bs4 import BeautifulSoup, Tag

from app.schemas.facts import Doctor, FactsRecord, WorkingHours

DEFAULT_NAME = "అమ్మ హాస్పిటల్"
DEFAULT_ADDRESS = "అనంతపురం"
DEFAULT_EMAIL = "Not available"

# Literal markers on the hospital homepage
_CONTACT_HEADING = "సంప్రదింపు వివరాలు"
_MON_SAT_LABEL = "సోమ - శని:"
_SUNDAY_LABEL = "ఆదివారం:"
_LEAD_DOCTOR_SPECIALTY = "ప్రసూతి మరియు గైనకాలజీ"
_LEAD_DOCTOR_NAME_EN = "Dr. T. Sivajyothi"
_LEAD_DOCTOR_SPECIALTY_EN = "Obstetrics & Gynecology"

_ADDRESS_RE = re.compile(r"అనంతపురము పట్టణంలోని (.+?)\.")
_LEAD_DOCTOR_RE = re.compile(r"డాక్టర్ టి\. శివజ్యోతి")
_EMAIL_RE = re.compile(r"[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}")

_MIN_CONTACT_LENGTH = 6


def _text(tag: Tag | None) -> str:
    return tag.get_text().strip() if tag else ""


def _after_colon(text: str) -> str | None:
    """'Label: value' -> 'value'. Keeps colons inside the value (e.g. 9:00)."""
    _, sep, value = text.partition(":")
    value = value.strip()
    return value if sep and value else None


def _paragraph_containing(soup: BeautifulSoup, label: str) -> Tag | None:
    return soup.find(lambda tag: tag.name == "p" and label in tag.get_text())


def _about_text(soup: BeautifulSoup) -> str:
    return _text(soup.select_one('p[data-key="about_desc"]'))


def extract_name(soup: BeautifulSoup) -> str | None:
    return _text(soup.select_one('h1[data-key="hospital_name"]')) or None


def extract_tagline(soup: BeautifulSoup) -> str | None:
    return _text(soup.select_one('p[data-key="hospital_tagline"]')) or None


def extract_emergency_number(soup: BeautifulSoup) -> str | None:
    return _after_colon(_text(soup.select_one(".emergency-info .emergency-number")))


def extract_contact_numbers(soup: BeautifulSoup) -> list[str] | None:
    for heading in soup.select(".footer-section h4"):
        if _CONTACT_HEADING not in heading.get_text():
            continue
        block = heading.find_next_sibling()
        if block is None:
            return None
        numbers = [_text(span) for span in block.find_all("span")]
        return [n for n in numbers if len(n) >= _MIN_CONTACT_LENGTH]
    return None


def extract_email(soup: BeautifulSoup) -> str | None:
    for span in soup.find_all("span"):
        match = _EMAIL_RE.search(span.get_text())
        if match:
            return match.group(0)
    return None


def extract_address(soup: BeautifulSoup) -> str | None:
    match = _ADDRESS_RE.search(_about_text(soup))
    return match.group(1).strip() if match else None


def extract_services(soup: BeautifulSoup) -> list[str] | None:
    names = [_text(h3) for h3 in soup.select(".services-grid .service-card h3")]
    return [n for n in names if n] or None


def extract_doctors(soup: BeautifulSoup) -> list[Doctor] | None:
    match = _LEAD_DOCTOR_RE.search(_about_text(soup))
    if not match:
        return None
    return [
        Doctor(
            name=match.group(0),
            specialty=_LEAD_DOCTOR_SPECIALTY,
            name_en=_LEAD_DOCTOR_NAME_EN,
            specialty_en=_LEAD_DOCTOR_SPECIALTY_EN,
        )
    ]


def extract_working_hours(soup: BeautifulSoup) -> WorkingHours | None:
    mon_sat = _after_colon(_text(_paragraph_containing(soup, _MON_SAT_LABEL)))
    sunday = _after_colon(_text(_paragraph_containing(soup, _SUNDAY_LABEL)))
    if not mon_sat and not sunday:
        return None
    return WorkingHours(mon_sat=mon_sat or "", sunday=sunday or "")


# field -> (rule, default). A rule returning None leaves the default in place.
_RULES: dict[str, tuple[Callable[[BeautifulSoup], object], Callable[[], object]]] = {
    "name": (extract_name, lambda: DEFAULT_NAME),
    "tagline": (extract_tagline, lambda: ""),
    "emergency_number": (extract_emergency_number, lambda: ""),
    "contact_numbers": (extract_contact_numbers, list),
    "email": (extract_email, lambda: DEFAULT_EMAIL),
    "address": (extract_address, lambda: DEFAULT_ADDRESS),
    "services": (extract_services, list),
    "doctors": (extract_doctors, list),
    "working_hours": (extract_working_hours, WorkingHours),
}


def extract_facts(html: str) -> FactsRecord:
    """Build a FactsRecord from the hospital homepage markup.

    Every field has its own rule. Markup the rule does not recognise degrades
    to the field default; this function never raises on unexpected markup.
    """
    soup = BeautifulSoup(html, "html.parser")
    fields = {}
    for field, (rule, default) in _RULES.items():
        value = rule(soup)
        fields[field] = default() if value is None else value
    return FactsRecord(**fields)
