"""
person.py - person modeling for genealogical record comparison.

This module provides the Person class: one individual as recorded on a source
page, with a name, four life events, links to families and opaque
cross-references. It supports:
    - Event access by tag ('birth', 'death', 'christening', 'burial')
    - Family and cross-reference bookkeeping
    - Human-readable life summaries for reports

Module: gedcom_quality.person
"""

__all__ = ['Person', 'EVENT_TAGS']

import logging
from typing import Iterable, List, Optional, Tuple

from .name import Name
from .life_event import LifeEvent

logger = logging.getLogger(__name__)

EVENT_TAGS: Tuple[str, ...] = ('birth', 'death', 'christening', 'burial')


class Person:
    """
    Represents a person in a dataset.

    Attributes:
        xref_id (int): Stable integer id, unique within the dataset.
        name (Name): Given name and surname.
        birth (LifeEvent): Birth event (empty when unknown).
        death (LifeEvent): Death event.
        christening (LifeEvent): Christening / baptism event.
        burial (LifeEvent): Burial event.
        families (List[int]): Ids of families the person belongs to, as
            spouse or child.
        references (List[str]): Opaque cross-reference strings.
        source (str): Key of the entry (source page record) the person
            appears in.
    """
    __slots__ = ['xref_id', 'name',
                 'birth', 'death', 'christening', 'burial',
                 'families', 'references', 'source']

    def __init__(self, xref_id: int,
                 name: Optional[Name] = None,
                 birth: Optional[LifeEvent] = None,
                 death: Optional[LifeEvent] = None,
                 christening: Optional[LifeEvent] = None,
                 burial: Optional[LifeEvent] = None,
                 families: Optional[Iterable[int]] = None,
                 references: Optional[Iterable[str]] = None,
                 source: str = ''):
        """
        Initialize a Person.

        Args:
            xref_id (int): Stable integer id.
            name (Name, optional): Person's name. Defaults to an empty name.
            birth, death, christening, burial (LifeEvent, optional): Life
                events. Missing events are stored as empty events.
            families (Iterable[int], optional): Family ids.
            references (Iterable[str], optional): Cross-reference strings.
            source (str): Entry key.

        Raises:
            TypeError: If xref_id is not an integer.
        """
        if not isinstance(xref_id, int) or isinstance(xref_id, bool):
            raise TypeError(f"Person id must be an int, got {type(xref_id).__name__}")
        self.xref_id: int = xref_id
        self.name: Name = name if name is not None else Name()

        self.birth: LifeEvent = birth if birth is not None else LifeEvent(what='birth')
        self.death: LifeEvent = death if death is not None else LifeEvent(what='death')
        self.christening: LifeEvent = christening if christening is not None else LifeEvent(what='christening')
        self.burial: LifeEvent = burial if burial is not None else LifeEvent(what='burial')

        self.families: List[int] = []
        for family_id in families or []:
            self.add_family(family_id)
        self.references: List[str] = []
        for reference in references or []:
            self.add_reference(reference)
        self.source: str = source or ''

    def __str__(self) -> str:
        return f"Person(id={self.xref_id}, name={self.name})"

    def __repr__(self) -> str:
        return f"[ {self.xref_id} : {self.name} - {self.birth!r} - {self.source} ]"

    def get_event(self, tag: str) -> LifeEvent:
        """
        Get the life event for a tag.

        Raises:
            ValueError: If tag is not one of EVENT_TAGS.
        """
        if tag not in EVENT_TAGS:
            raise ValueError(f"Unknown event tag: {tag}")
        return getattr(self, tag)

    def events(self) -> List[Tuple[str, LifeEvent]]:
        return [(tag, getattr(self, tag)) for tag in EVENT_TAGS]

    @property
    def birth_year(self) -> Optional[int]:
        """Birth year, or None when unknown."""
        return self.birth.date.year_num

    def add_family(self, family_id: int) -> None:
        if family_id not in self.families:
            self.families.append(family_id)

    def add_reference(self, reference: str) -> None:
        if isinstance(reference, str) and reference and reference not in self.references:
            self.references.append(reference)

    def is_empty(self) -> bool:
        return (self.name.is_empty()
                and all(event.is_empty() for _, event in self.events())
                and not self.families
                and not self.references)

    def life_summary(self) -> str:
        """
        Returns a one-line summary, e.g. "John Smith, born 1850 Boston, died 1920".
        """
        parts = [str(self.name) or '<Unknown Name>']
        for label, event in (('born', self.birth), ('christened', self.christening),
                             ('died', self.death), ('buried', self.burial)):
            if not event.is_empty():
                parts.append(f"{label} {event}")
        return ', '.join(parts)
