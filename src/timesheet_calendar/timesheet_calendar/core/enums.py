from __future__ import annotations

from enum import Enum


class DayClassification(str, Enum):
    """How a calendar day is colored given the entries recorded on it."""

    NONE = "none"
    COMPLIANT = "compliant"
    NONCOMPLIANT = "noncompliant"


class ClassificationPolicy(str, Enum):
    """Which entries of a day decide its classification."""

    ALL_ENTRIES = "all"
    FIRST_ENTRY = "first"
