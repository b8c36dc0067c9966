"""Flat records filled in by schema-constrained extraction.

Every field is a string with a default so a failed extraction still
yields a record the client forms can bind directly.
"""
from pydantic import BaseModel


class ExtractedProfile(BaseModel):
    """Resume builder details"""
    name: str = ""
    location: str = ""
    skills: str = ""
    experience: str = ""
    education: str = ""


class SchemeProfile(BaseModel):
    """Scheme matcher details"""
    age: str = ""
    gender: str = "Male"
    occupation: str = ""
    income: str = ""
    state: str = ""


class ExtractedTrip(BaseModel):
    """Mobility planner details"""
    start: str = ""
    end: str = ""
    aid: str = "None"  # None | Wheelchair | Walking Stick | Crutches


class ExtractedItem(BaseModel):
    """Kisan Mandi listing details"""
    name: str = ""
    price: str = ""
    contact: str = ""
    location: str = "My Village"


EXTRACTION_SCHEMAS: dict[str, type[BaseModel]] = {
    "profile": ExtractedProfile,
    "scheme": SchemeProfile,
    "trip": ExtractedTrip,
    "item": ExtractedItem,
}
