"""
family.py - family (couple plus children) modeling for genealogical records.

Module: gedcom_quality.family
"""

__all__ = ['Family']

from typing import Iterable, List, Optional

from .life_event import LifeEvent


class Family:
    """Represents a family: a couple, their children and their marriage.

    Attributes:
        xref_id (int): Stable integer id, unique within the dataset.
        husband (Optional[int]): Person id of the husband.
        wife (Optional[int]): Person id of the wife.
        children (List[int]): Person ids of the children.
        marriage (LifeEvent): The marriage event (empty when unknown).
    """

    __slots__ = ['xref_id', 'husband', 'wife', 'children', 'marriage']

    def __init__(self, xref_id: int, husband: Optional[int] = None, wife: Optional[int] = None,
                 children: Optional[Iterable[int]] = None, marriage: Optional[LifeEvent] = None):
        """Initializes a Family instance.

        Args:
            xref_id (int): Family id.
            husband (int, optional): Husband's person id.
            wife (int, optional): Wife's person id.
            children (Iterable[int], optional): Children's person ids.
            marriage (LifeEvent, optional): The marriage event.

        Raises:
            TypeError: If xref_id is not an integer.
        """
        if not isinstance(xref_id, int) or isinstance(xref_id, bool):
            raise TypeError(f"Family id must be an int, got {type(xref_id).__name__}")
        self.xref_id: int = xref_id
        self.husband: Optional[int] = husband
        self.wife: Optional[int] = wife
        self.children: List[int] = list(children) if children is not None else []
        self.marriage: LifeEvent = marriage if marriage is not None else LifeEvent(what='marriage')

    def __str__(self) -> str:
        """Returns a string representation of the family.

        Returns:
            str: String describing the spouses, children and marriage.
        """
        if self.is_empty():
            return '<Empty Family>'
        parts = []
        if self.husband is not None:
            parts.append(f"Husband: {self.husband}")
        if self.wife is not None:
            parts.append(f"Wife: {self.wife}")
        if self.children:
            parts.append(f"Children: {len(self.children)} ({', '.join(str(c) for c in self.children)})")
        if not self.marriage.is_empty():
            parts.append(f"Married: {self.marriage}")
        return ', '.join(parts)

    def __repr__(self) -> str:
        return f'Family(id={self.xref_id}, husband={self.husband}, wife={self.wife}, children={self.children}, marriage={self.marriage!r})'

    def is_empty(self) -> bool:
        return self.husband is None and self.wife is None and not self.children and self.marriage.is_empty()

    def partners(self) -> List[int]:
        """Person ids of the spouses that are present."""
        return [pid for pid in (self.husband, self.wife) if pid is not None]

    def is_spouse(self, person_id: int) -> bool:
        return person_id in self.partners()

    def partner_of(self, person_id: int) -> Optional[int]:
        """Return the other spouse of the given person.

        Args:
            person_id (int): The spouse to exclude.
        Returns:
            int: The other spouse's id, or None if there is none.
        """
        if person_id == self.husband:
            return self.wife
        if person_id == self.wife:
            return self.husband
        return None
