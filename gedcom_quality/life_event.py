"""
life_event.py - life event modeling for genealogical record comparison.

This module provides the LifeEvent class used for births, deaths,
christenings, burials and marriages. An event is a date and a place, either
of which may be missing.

Module: gedcom_quality.life_event
"""

__all__ = ['LifeEvent']

from typing import Tuple, Union

from .gedcom_date import GedcomDate


class LifeEvent:
    """
    Represents a life event (birth, death, marriage, etc.) for a person or family.

    Attributes:
        place (str): The place where the event occurred ('' when unknown).
        date (GedcomDate): The date of the event (empty when unknown).
        what (str): The type of event (e.g., 'birth', 'marriage').
    """
    __slots__ = ['place', 'date', 'what']

    def __init__(self, place: str = '', date: Union[str, int, GedcomDate, None] = None, what: str = ''):
        """
        Initialize a LifeEvent instance.

        Args:
            place (str): Place of the event.
            date: Date of the event (text, year, GedcomDate or None).
            what (str): Type of event.
        """
        self.place: str = place or ''
        self.date: GedcomDate = GedcomDate(date)
        self.what: str = what or ''

    def __repr__(self) -> str:
        if self.what:
            return f"[ {self.date_str} : {self.place} is {self.what}]"
        return f"[ {self.date_str} : {self.place} ]"

    def __str__(self) -> str:
        if self.is_empty():
            return '<Empty>'
        return ' '.join(part for part in (self.date_str, self.place) if part)

    @property
    def date_str(self) -> str:
        return str(self.date)

    def is_empty(self) -> bool:
        """True when the event has neither date nor place."""
        return self.date.is_empty() and self.place == ''

    def shares_detail_with(self, other: 'LifeEvent') -> bool:
        """
        True if both events are non-empty and have the same non-empty date
        string or the same non-empty place.
        """
        if other is None or self.is_empty() or other.is_empty():
            return False
        return ((self.date_str != '' and self.date_str == other.date_str)
                or (self.place != '' and self.place == other.place))

    def differences(self, other: 'LifeEvent') -> Tuple[bool, bool]:
        """
        Compare date string and place independently.

        Returns:
            Tuple[bool, bool]: (dates differ, places differ).
        """
        return self.date_str != other.date_str, self.place != other.place
