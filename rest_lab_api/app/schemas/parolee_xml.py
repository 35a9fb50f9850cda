"""
XML marshaling for parolee records.

A record is exchanged as::

    <parolee id="1">
       <first-name>Al</first-name>
       <last-name>Capone</last-name>
       <gender>Male</gender>
       <date-of-birth>17/01/1899</date-of-birth>
    </parolee>

The ``id`` attribute is optional on input and ignored by the store.
Dates use the ``dd/MM/yyyy`` layout; single‑digit days and months are
accepted on input.  Any document that cannot be read raises
``MalformedParoleeError``.
"""

from datetime import date, datetime
from typing import Iterable
from xml.etree import ElementTree as ET

from .parolee import Gender, Parolee

DATE_FORMAT = "%d/%m/%Y"
INDENT = "   "


class MalformedParoleeError(ValueError):
    """Raised when a request body is not a readable parolee document."""


def format_date(value: date) -> str:
    # strftime does not zero‑pad years below 1000 on every platform.
    return f"{value.day:02d}/{value.month:02d}/{value.year:04d}"


def parse_date(text: str) -> date:
    try:
        return datetime.strptime(text.strip(), DATE_FORMAT).date()
    except ValueError as exc:
        raise MalformedParoleeError(f"Invalid date of birth {text!r}; expected dd/MM/yyyy") from exc


def parse_parolee(body: bytes) -> Parolee:
    """Read a parolee record from an XML document."""
    try:
        root = ET.fromstring(body)
    except ET.ParseError as exc:
        raise MalformedParoleeError(f"Malformed XML: {exc}") from exc
    if root.tag != "parolee":
        raise MalformedParoleeError(f"Expected a <parolee> document, got <{root.tag}>")

    parolee = Parolee()
    raw_id = (root.get("id") or "").strip()
    if raw_id:
        try:
            parolee.id = int(raw_id)
        except ValueError as exc:
            raise MalformedParoleeError(f"Invalid parolee id {raw_id!r}") from exc

    for child in root:
        text = child.text or ""
        if child.tag == "first-name":
            parolee.first_name = text
        elif child.tag == "last-name":
            parolee.last_name = text
        elif child.tag == "gender":
            parolee.gender = Gender.from_text(text)
        elif child.tag == "date-of-birth":
            parolee.date_of_birth = parse_date(text)
    return parolee


def _parolee_element(parolee: Parolee) -> ET.Element:
    root = ET.Element("parolee")
    if parolee.id is not None:
        root.set("id", str(parolee.id))
    fields = (
        ("first-name", parolee.first_name),
        ("last-name", parolee.last_name),
        ("gender", parolee.gender.value if parolee.gender else None),
        ("date-of-birth", format_date(parolee.date_of_birth) if parolee.date_of_birth else None),
    )
    for tag, value in fields:
        if value is not None:
            ET.SubElement(root, tag).text = value
    return root


def render_parolee(parolee: Parolee) -> str:
    """Return the XML representation of a single record."""
    root = _parolee_element(parolee)
    ET.indent(root, space=INDENT)
    return ET.tostring(root, encoding="unicode")


def render_parolees(parolees: Iterable[Parolee]) -> str:
    """Return the XML representation of a collection of records."""
    root = ET.Element("parolees")
    for parolee in parolees:
        root.append(_parolee_element(parolee))
    ET.indent(root, space=INDENT)
    return ET.tostring(root, encoding="unicode")
