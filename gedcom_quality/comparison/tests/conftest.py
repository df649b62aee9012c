"""
Pytest fixtures for comparison tests.
"""
from __future__ import annotations

import pytest
from typing import Dict, Iterable, Optional, Sequence, Tuple

from gedcom_quality.dataset import Dataset
from gedcom_quality.entry import Entry
from gedcom_quality.family import Family
from gedcom_quality.life_event import LifeEvent
from gedcom_quality.name import Name
from gedcom_quality.person import Person


@pytest.fixture
def make_person():
    """Create a Person; events are given as date or (date, place)."""
    def _create_person(xref_id: int, given: str = "", surname: str = "",
                       references: Iterable[str] = (), **events) -> Person:
        kwargs = {}
        for tag, value in events.items():
            date, place = value if isinstance(value, tuple) else (value, "")
            kwargs[tag] = LifeEvent(place=place, date=date, what=tag)
        return Person(xref_id, name=Name(given, surname), references=references, **kwargs)

    return _create_person


@pytest.fixture
def make_entry():
    """Create an Entry from people, optional families and relationship labels."""
    def _create_entry(entry_id: str, people: Sequence[Person], families: Sequence[Family] = (),
                      labels: Optional[Dict[int, str]] = None) -> Entry:
        entry = Entry(entry_id)
        for person in people:
            person.source = entry_id
            entry.add_person(person)
        for family in families:
            entry.add_family(family)
        for person_id, label in (labels or {}).items():
            entry.set_relationship(person_id, label)
        return entry

    return _create_entry


@pytest.fixture
def make_dataset():
    """Create a Dataset from entries."""
    def _create_dataset(*entries: Entry, name: str = "", location: str = "") -> Dataset:
        dataset = Dataset(name=name, location=location)
        for entry in entries:
            dataset.add_entry(entry)
        return dataset

    return _create_dataset


@pytest.fixture
def make_pair(make_entry, make_dataset):
    """
    Create a ground-truth and a candidate dataset with one entry 'E1' each.

    Candidate person ids are offset by 100 so the two sides never share ids.
    """
    def _create_pair(first_people: Sequence[Person], second_people: Sequence[Person],
                     first_families: Sequence[Family] = (), second_families: Sequence[Family] = (),
                     first_labels: Optional[Dict[int, str]] = None,
                     second_labels: Optional[Dict[int, str]] = None) -> Tuple[Dataset, Dataset]:
        first = make_dataset(make_entry("E1", first_people, first_families, first_labels), name="truth")
        second = make_dataset(make_entry("E1", second_people, second_families, second_labels), name="candidate")
        return first, second

    return _create_pair
