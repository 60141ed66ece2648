from datetime import datetime, timezone

from pydantic import BaseModel, Field


class Doctor(BaseModel):
    name: str
    specialty: str = ""
    name_en: str = ""
    specialty_en: str = ""


class WorkingHours(BaseModel):
    mon_sat: str = ""
    sunday: str = ""


class FactsRecord(BaseModel):
    name: str = ""
    tagline: str = ""
    address: str = ""
    emergency_number: str = ""
    email: str = ""
    contact_numbers: list[str] = []  # page order, noise entries dropped
    services: list[str] = []
    doctors: list[Doctor] = []
    working_hours: WorkingHours = WorkingHours()
    scraped_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
