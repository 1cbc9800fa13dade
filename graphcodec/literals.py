"""Literal encoding rules shared by the builder and decoder.

string, number and boolean values become plain rdflib literals, except a
property keyed ``uuid``, which becomes a ``urn:uuid:`` reference so that
records can be looked up by identifier.

Date values carry date-only or date-time meaning depending on the value
itself: a value at exactly midnight of its own wall clock is written as an
``xsd:date``, anything else as an ``xsd:dateTime``.
"""

from __future__ import annotations

from datetime import date, datetime, time
from typing import Any

from rdflib import Literal, URIRef, XSD

from .namespaces import UUID_URN_PREFIX
from .types import BOOLEAN, DATE, NUMBER, STRING

UUID_KEY = "uuid"


# ---------------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------------

def beginning_of_day(value: date) -> datetime:
    """Return midnight of the day ``value`` falls on (tzinfo is kept)."""
    if isinstance(value, datetime):
        return value.replace(hour=0, minute=0, second=0, microsecond=0)
    return datetime.combine(value, time())


def is_beginning_of_day(value: date) -> bool:
    """True for plain dates and for datetimes at exactly midnight."""
    if isinstance(value, datetime):
        return value == beginning_of_day(value)
    return isinstance(value, date)


def _coerce_date(value: Any) -> date:
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return parse_date(value)
    raise TypeError(f"Expected a date or datetime, got {type(value).__name__}")


def parse_date(text: str) -> datetime:
    """Parse an ISO-8601 date or date-time literal.

    Date-only text yields a naive datetime at midnight.
    """
    text = text.strip()
    if "T" in text or " " in text:
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        return datetime.fromisoformat(text)
    return datetime.combine(date.fromisoformat(text), time())


# ---------------------------------------------------------------------------
# Build
# ---------------------------------------------------------------------------

def build_literal(kind: str, key: str, value: Any) -> Literal | URIRef:
    """Return the graph term for a literal-typed property value."""
    if kind in (STRING, NUMBER, BOOLEAN):
        if key == UUID_KEY:
            return URIRef(UUID_URN_PREFIX + str(value).lower())
        return Literal(value)
    if kind == DATE:
        value = _coerce_date(value)
        if is_beginning_of_day(value):
            day = value.date() if isinstance(value, datetime) else value
            return Literal(day.isoformat(), datatype=XSD.date)
        return Literal(value.isoformat(), datatype=XSD.dateTime)
    raise ValueError(f"Not a literal kind: {kind!r}")


# ---------------------------------------------------------------------------
# Decode
# ---------------------------------------------------------------------------

def parse_number(text: str) -> int | float:
    try:
        return int(text)
    except ValueError:
        return float(text)


def decode_literal(kind: str, key: str, text: str) -> Any:
    """Inverse of build_literal, applied to the lexical form of a term."""
    text = str(text)
    if kind == STRING:
        if key == UUID_KEY:
            if text.startswith(UUID_URN_PREFIX):
                text = text[len(UUID_URN_PREFIX):]
            return text.lower()
        return text
    if kind == DATE:
        return parse_date(text)
    if kind == NUMBER:
        return parse_number(text)
    if kind == BOOLEAN:
        return text.lower() == "true"
    raise ValueError(f"Not a literal kind: {kind!r}")
