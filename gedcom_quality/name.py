"""
name.py - personal name value object for genealogical records.

Module: gedcom_quality.name
"""

__all__ = ['Name']

from typing import Optional

from . import name_similarity


class Name:
    """
    A personal name split into given name and surname.

    Attributes:
        given_name (str): Given (first and middle) names; '' when unknown.
        surname (str): Surname; '' when unknown.
    """
    __slots__ = ['given_name', 'surname']

    def __init__(self, given_name: Optional[str] = '', surname: Optional[str] = ''):
        self.given_name: str = given_name or ''
        self.surname: str = surname or ''

    def __str__(self) -> str:
        """Given name followed by surname, skipping empty parts."""
        return ' '.join(part for part in (self.given_name, self.surname) if part)

    def __repr__(self) -> str:
        return f"Name({self.given_name!r}, {self.surname!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Name):
            return NotImplemented
        return self.given_name == other.given_name and self.surname == other.surname

    def is_empty(self) -> bool:
        return self.given_name == '' and self.surname == ''

    def genealogical_format(self) -> str:
        """Name as "Surname, Given"."""
        if self.given_name and self.surname:
            return f"{self.surname}, {self.given_name}"
        return self.surname or self.given_name

    def initials(self) -> str:
        return ''.join(part[0].upper() for part in (self.given_name, self.surname) if part)

    def exact_match(self, other: 'Name') -> bool:
        """Case-insensitive equality of given name and surname."""
        return name_similarity.exact_match(self, other)

    def similar_match(self, other: 'Name') -> bool:
        """Exact match, or both given name and surname plausibly the same."""
        return name_similarity.similar_match(self, other)

    def surname_similar(self, other: 'Name') -> bool:
        return name_similarity.surname_similar(self.surname, other.surname)
