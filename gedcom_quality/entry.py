"""
entry.py - one source-page entry: the people and families recorded together.

An entry is the unit within which two datasets are matched. Besides holding
its people and families, an entry labels each person's position in the
family trees of the entry ("relationship labels"):

    <tree number><role letters>

e.g. "0" for the first person of tree 0, "0W" for his wife, "0C" for a child,
"0CS" for that child's sibling. Trees are numbered in person order; roles are
W(ife), H(usband), C(hild), F(ather), M(other) and S(ibling). Labels supplied
by the data source take precedence over computed ones.

Module: gedcom_quality.entry
"""

__all__ = ['Entry']

import logging
from collections import deque
from typing import Dict, Iterator, List, Optional, Tuple

from .family import Family
from .name import Name
from .person import Person

logger = logging.getLogger(__name__)


class Entry:
    """
    People and families appearing together on one source page.

    Attributes:
        entry_id (str): Entry key, shared by both datasets for the same page.
        people (Dict[int, Person]): Person id -> Person, in insertion order.
        families (Dict[int, Family]): Family id -> Family.
    """
    __slots__ = ['entry_id', 'people', 'families', '_labels', '_computed_labels']

    def __init__(self, entry_id: str):
        if not isinstance(entry_id, str):
            raise TypeError(f"Entry id must be a str, got {type(entry_id).__name__}")
        self.entry_id: str = entry_id
        self.people: Dict[int, Person] = {}
        self.families: Dict[int, Family] = {}
        self._labels: Dict[int, str] = {}
        self._computed_labels: Optional[Dict[int, str]] = None

    def __str__(self) -> str:
        if self.is_empty():
            return f"<Empty Entry: {self.entry_id}>"
        return f"<Entry: {self.entry_id} - {len(self.people)} people, {len(self.families)} families>"

    def __repr__(self) -> str:
        return f"Entry({self.entry_id!r}, people={list(self.people)}, families={list(self.families)})"

    def __len__(self) -> int:
        return len(self.people)

    def __iter__(self) -> Iterator[Tuple[int, Person]]:
        return iter(self.people.items())

    def is_empty(self) -> bool:
        return not self.people and not self.families

    def add_person(self, person: Person, relationship: Optional[str] = None) -> bool:
        """
        Add a person to the entry.

        Args:
            person (Person): Person to add, keyed by its xref_id.
            relationship (str, optional): Relationship label supplied by the
                data source.

        Returns:
            bool: False if a person with the same id is already present.

        Raises:
            TypeError: If person is not a Person.
        """
        if not isinstance(person, Person):
            raise TypeError(f"Entry {self.entry_id}: expected Person, got {type(person).__name__}")
        if person.xref_id in self.people:
            logger.warning(f"Entry {self.entry_id}: person {person.xref_id} already present")
            return False
        self.people[person.xref_id] = person
        if relationship is not None:
            self._labels[person.xref_id] = relationship
        self._computed_labels = None
        return True

    def add_family(self, family: Family) -> bool:
        """
        Add a family and link its id into its members' family lists.

        Returns:
            bool: False if a family with the same id is already present.

        Raises:
            TypeError: If family is not a Family.
        """
        if not isinstance(family, Family):
            raise TypeError(f"Entry {self.entry_id}: expected Family, got {type(family).__name__}")
        if family.xref_id in self.families:
            logger.warning(f"Entry {self.entry_id}: family {family.xref_id} already present")
            return False
        self.families[family.xref_id] = family
        for person_id in family.partners() + family.children:
            person = self.people.get(person_id)
            if person is not None:
                person.add_family(family.xref_id)
        self._computed_labels = None
        return True

    def get_person(self, person_id: int) -> Optional[Person]:
        return self.people.get(person_id)

    def set_relationship(self, person_id: int, label: str) -> None:
        """Set the relationship label supplied by the data source."""
        self._labels[person_id] = label or ''

    def relationship(self, person_id: int) -> str:
        """
        Relationship label of a person in this entry.

        Returns:
            str: The supplied label if any, else the computed one; '' for ids
            not in the entry.
        """
        if person_id not in self.people:
            return ''
        if person_id in self._labels:
            return self._labels[person_id]
        if self._computed_labels is None:
            self._computed_labels = self._calculate_relationships()
        return self._computed_labels.get(person_id, '')

    def get_relationship(self, person_id: int) -> str:
        return self.relationship(person_id)

    def _calculate_relationships(self) -> Dict[int, str]:
        labels: Dict[int, str] = {}
        tree_number = 0
        for person_id in self.people:
            if person_id not in labels:
                self._label_tree(person_id, str(tree_number), labels)
                tree_number += 1
        return labels

    def _label_tree(self, trunk_id: int, trunk_label: str, labels: Dict[int, str]) -> None:
        queue = deque([(trunk_id, trunk_label)])
        while queue:
            person_id, label = queue.popleft()
            if person_id in labels:
                continue
            labels[person_id] = label
            for family_id in self.people[person_id].families:
                family = self.families.get(family_id)
                if family is None:
                    continue
                for relative_id, role in self._relatives(family, person_id):
                    if relative_id in self.people and relative_id not in labels:
                        queue.append((relative_id, label + role))

    @staticmethod
    def _relatives(family: Family, person_id: int) -> List[Tuple[int, str]]:
        relatives: List[Tuple[int, str]] = []
        if person_id == family.husband:
            if family.wife is not None:
                relatives.append((family.wife, 'W'))
            relatives.extend((child_id, 'C') for child_id in family.children)
        elif person_id == family.wife:
            if family.husband is not None:
                relatives.append((family.husband, 'H'))
            relatives.extend((child_id, 'C') for child_id in family.children)
        elif person_id in family.children:
            if family.husband is not None:
                relatives.append((family.husband, 'F'))
            if family.wife is not None:
                relatives.append((family.wife, 'M'))
            relatives.extend((sibling_id, 'S') for sibling_id in family.children if sibling_id != person_id)
        return relatives

    def fill_surname(self) -> int:
        """
        Give people without a surname the surname of their father (when they
        are a child) or of one of their children (when they are a husband).

        Returns:
            int: Number of people updated.
        """
        updated = 0
        for person_id, person in self.people.items():
            if person.name.surname:
                continue
            new_surname = None
            for family in self.families.values():
                if person_id in family.children and family.husband in self.people:
                    new_surname = self.people[family.husband].name.surname or None
                if new_surname is None and person_id == family.husband:
                    new_surname = next((self.people[child_id].name.surname for child_id in family.children
                                        if child_id in self.people and self.people[child_id].name.surname), None)
                if new_surname:
                    break
            if new_surname:
                logger.debug(f"Entry {self.entry_id}: surname of person {person_id} filled as {new_surname}")
                person.name = Name(person.name.given_name, new_surname)
                updated += 1
        return updated

    def summary(self) -> Dict[str, object]:
        return {
            'id': self.entry_id,
            'people_count': len(self.people),
            'families_count': len(self.families),
        }
