"""
dataset.py - one complete dataset: entries plus dataset-wide people and families.

A dataset is what a parser hands to the comparison engine: a ground-truth
transcription or a candidate produced by automated extraction. It exposes
    - entry key -> Entry
    - person id -> Person
    - family id -> Family

Module: gedcom_quality.dataset
"""

__all__ = ['Dataset']

import logging
from typing import Any, Dict, List, Mapping, Optional

from .entry import Entry
from .family import Family
from .life_event import LifeEvent
from .name import Name
from .person import EVENT_TAGS, Person

logger = logging.getLogger(__name__)


class Dataset:
    """
    A collection of entries with dataset-wide person and family maps.

    Attributes:
        name (str): Label for reports (e.g. the source file name).
        location (str): Place the source pages come from, used by fill_events.
        entries (Dict[str, Entry]): Entry key -> Entry, in insertion order.
        people (Dict[int, Person]): Person id -> Person.
        families (Dict[int, Family]): Family id -> Family.
    """
    __slots__ = ['name', 'location', 'entries', 'people', 'families']

    def __init__(self, name: str = '', location: str = ''):
        self.name: str = name or ''
        self.location: str = location or ''
        self.entries: Dict[str, Entry] = {}
        self.people: Dict[int, Person] = {}
        self.families: Dict[int, Family] = {}

    def __str__(self) -> str:
        if self.is_empty():
            return '<Empty Dataset>'
        return (f"<Dataset {self.name}: {self.entry_count()} entries, "
                f"{self.people_count()} people, {self.family_count()} families>")

    def __repr__(self) -> str:
        return f"Dataset(name={self.name!r}, location={self.location!r}, entries={list(self.entries)})"

    def is_empty(self) -> bool:
        return not self.entries and not self.people and not self.families

    def entry_count(self) -> int:
        return len(self.entries)

    def people_count(self) -> int:
        return len(self.people)

    def family_count(self) -> int:
        return len(self.families)

    def entry_ids(self) -> List[str]:
        return list(self.entries)

    def get_entry(self, entry_id: str) -> Optional[Entry]:
        return self.entries.get(entry_id)

    def get_person(self, person_id: int) -> Optional[Person]:
        return self.people.get(person_id)

    def get_family(self, family_id: int) -> Optional[Family]:
        return self.families.get(family_id)

    def add_entry(self, entry: Entry) -> None:
        """
        Add an entry and register its people and families dataset-wide.

        Raises:
            TypeError: If entry is not an Entry.
            ValueError: If the entry has no id, the id is taken, or one of its
                person or family ids is already used by another record.
        """
        if not isinstance(entry, Entry):
            raise TypeError(f"Expected Entry, got {type(entry).__name__}")
        if not entry.entry_id:
            raise ValueError("Entry id is required")
        if entry.entry_id in self.entries:
            raise ValueError(f"Entry {entry.entry_id} already exists")
        for person_id, person in entry.people.items():
            if self.people.get(person_id, person) is not person:
                raise ValueError(f"Person id {person_id} already exists in dataset")
        for family_id, family in entry.families.items():
            if self.families.get(family_id, family) is not family:
                raise ValueError(f"Family id {family_id} already exists in dataset")

        self.entries[entry.entry_id] = entry
        self.people.update(entry.people)
        self.families.update(entry.families)

    def add_person(self, person: Person, relationship: Optional[str] = None) -> bool:
        """
        Add a person to the dataset and to the entry named by person.source,
        creating the entry if needed.

        Returns:
            bool: False if the person has no source entry key.

        Raises:
            TypeError: If person is not a Person.
            ValueError: If the person id is already used.
        """
        if not isinstance(person, Person):
            raise TypeError(f"Expected Person, got {type(person).__name__}")
        if person.xref_id in self.people:
            raise ValueError(f"Person id {person.xref_id} already exists in dataset")
        if not person.source:
            logger.warning(f"Person {person.xref_id} has no source entry; not added")
            return False
        entry = self.entries.get(person.source)
        if entry is None:
            entry = Entry(person.source)
            self.entries[person.source] = entry
        self.people[person.xref_id] = person
        entry.add_person(person, relationship=relationship)
        return True

    def add_family(self, family: Family, entry_id: Optional[str] = None) -> None:
        """
        Add a family to the dataset and, when entry_id is given, to that entry.

        Raises:
            TypeError: If family is not a Family or entry_id is not a str.
            ValueError: If the family id is already used.
        """
        if not isinstance(family, Family):
            raise TypeError(f"Expected Family, got {type(family).__name__}")
        if entry_id is not None and not isinstance(entry_id, str):
            raise TypeError(f"Entry id must be a str, got {type(entry_id).__name__}")
        if family.xref_id in self.families:
            raise ValueError(f"Family id {family.xref_id} already exists in dataset")
        self.families[family.xref_id] = family
        if entry_id is not None:
            entry = self.entries.get(entry_id)
            if entry is None:
                entry = Entry(entry_id)
                self.entries[entry_id] = entry
            entry.add_family(family)

    def fill_events(self, location: Optional[str] = None) -> int:
        """
        Set the place of exactly-dated events that have no place.

        Args:
            location (str, optional): Place to use; defaults to self.location.

        Returns:
            int: Number of events updated.
        """
        place = location or self.location
        if not place:
            return 0
        events: List[LifeEvent] = [getattr(person, tag) for person in self.people.values() for tag in EVENT_TAGS]
        events.extend(family.marriage for family in self.families.values())
        updated = 0
        for event in events:
            if not event.is_empty() and event.place == '' and event.date.is_exact():
                event.place = place
                updated += 1
        logger.info(f"Filled place '{place}' into {updated} events")
        return updated

    def fill_surname(self) -> int:
        """Run Entry.fill_surname over every entry."""
        return sum(entry.fill_surname() for entry in self.entries.values())

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Dataset':
        """
        Build a dataset from plain data (as loaded from JSON or YAML).

        Expected shape::

            {'name': ..., 'location': ...,
             'entries': [{'id': 'E1',
                          'people': [{'id': 1, 'given_name': ..., 'surname': ...,
                                      'birth': {'date': ..., 'place': ...},
                                      'death': ..., 'christening': ..., 'burial': ...,
                                      'references': [...], 'relationship': '0'}],
                          'families': [{'id': 1, 'husband': 1, 'wife': 2,
                                        'children': [3], 'marriage': {...}}]}]}

        Args:
            data: Mapping in the shape above.

        Returns:
            Dataset: The populated dataset.
        """
        dataset = cls(name=data.get('name', ''), location=data.get('location', ''))
        for entry_data in data.get('entries', []):
            entry = Entry(str(entry_data['id']))
            for person_data in entry_data.get('people', []):
                person = Person(
                    int(person_data['id']),
                    name=Name(person_data.get('given_name', ''), person_data.get('surname', '')),
                    references=person_data.get('references', []),
                    source=entry.entry_id,
                    **{tag: _event_from_dict(person_data.get(tag), tag) for tag in EVENT_TAGS},
                )
                entry.add_person(person, relationship=person_data.get('relationship'))
            for family_data in entry_data.get('families', []):
                entry.add_family(Family(
                    int(family_data['id']),
                    husband=family_data.get('husband'),
                    wife=family_data.get('wife'),
                    children=family_data.get('children', []),
                    marriage=_event_from_dict(family_data.get('marriage'), 'marriage'),
                ))
            dataset.add_entry(entry)
        return dataset


def _event_from_dict(data: Optional[Mapping[str, Any]], what: str) -> LifeEvent:
    if not data:
        return LifeEvent(what=what)
    return LifeEvent(place=data.get('place', ''), date=data.get('date'), what=what)
