"""
Pydantic models for parolee records.

A parolee is identified by an integer ``id`` assigned by the store on
creation and carries a name, an optional gender and an optional date
of birth (a calendar date without time or timezone).
"""

from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"

    @classmethod
    def from_text(cls, text: Optional[str]) -> Optional["Gender"]:
        """Return the gender named by ``text`` (case insensitive).

        Unrecognised or missing values yield ``None`` rather than an
        error.
        """
        if text is None:
            return None
        wanted = text.strip().lower()
        for gender in cls:
            if gender.value.lower() == wanted:
                return gender
        return None


class Parolee(BaseModel):
    """A parolee record as held by the store."""

    id: Optional[int] = Field(None, description="Identifier assigned by the store")
    first_name: Optional[str] = Field(None, examples=["Al"])
    last_name: Optional[str] = Field(None, examples=["Capone"])
    gender: Optional[Gender] = Field(None, examples=["Male"])
    date_of_birth: Optional[date] = Field(None, examples=["1899-01-17"])

    model_config = {
        "validate_assignment": True,
    }
