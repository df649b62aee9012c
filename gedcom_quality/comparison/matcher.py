"""
matcher.py - person matching between two rosters of the same entry.

PersonMatcher folds five ordered phases over the people of two rosters.
Each phase only looks at people that are still unmatched and claims the first
acceptable partner it finds (first-fit, in roster order):

    1. exactNameUnique     exact name, unique within each full roster
    2. eventReference      a shared life event or cross-reference
    3. relationshipSimilar similar name and surname, same relationship label
    4. similarName         similar name
    5. exactNameResolved   exact name, unique among the people still unmatched

Phases 1-4 also require compatible birth years. Phases 3 and 4 skip pairs
whose names are exactly equal but not unique in both rosters; those are left
to phase 5.

Module: gedcom_quality.comparison.matcher
"""
from __future__ import annotations

import logging
from collections import Counter
from typing import Callable, Iterator, List, Optional, Sequence

from gedcom_quality.entry import Entry
from gedcom_quality.name_similarity import name_key
from gedcom_quality.person import EVENT_TAGS, Person
from gedcom_quality.comparison.model import MatchPair, MatchResult, MatchType

logger = logging.getLogger(__name__)

BIRTH_YEAR_TOLERANCE = 5


def birth_years_compatible(year1: Optional[int], year2: Optional[int],
                           tolerance: int = BIRTH_YEAR_TOLERANCE) -> bool:
    """True if either year is unknown (None or 0) or they differ by at most tolerance."""
    if not year1 or not year2:
        return True
    return abs(year1 - year2) <= tolerance


class Roster:
    """
    One dataset's people within one entry.

    People are addressed by slot: their position in the roster.

    Attributes:
        entry_id (str): Entry key.
        people (List[Person]): People in entry order.
        relationships (List[str]): Relationship label per slot.
    """
    __slots__ = ['entry_id', 'people', 'relationships', '_name_counts']

    def __init__(self, entry_id: str = '', people: Optional[Sequence[Person]] = None,
                 relationships: Optional[Sequence[str]] = None):
        self.entry_id: str = entry_id
        self.people: List[Person] = list(people or [])
        if relationships is None:
            relationships = [''] * len(self.people)
        if len(relationships) != len(self.people):
            raise ValueError(f"Roster {entry_id}: {len(relationships)} labels for {len(self.people)} people")
        self.relationships: List[str] = [label or '' for label in relationships]
        self._name_counts = Counter(name_key(person.name) for person in self.people)

    @classmethod
    def from_entry(cls, entry: Entry) -> Roster:
        """
        Build the roster of an entry, with the entry's relationship labels.

        Raises:
            TypeError: If entry is not an Entry.
        """
        if not isinstance(entry, Entry):
            raise TypeError(f"Roster needs an Entry, got {type(entry).__name__}")
        people = list(entry.people.values())
        return cls(entry.entry_id, people, [entry.relationship(person.xref_id) for person in people])

    def __len__(self) -> int:
        return len(self.people)

    def __repr__(self) -> str:
        return f"Roster({self.entry_id!r}, {len(self.people)} people)"

    def has_unique_name(self, slot: int) -> bool:
        """True if no other person in the roster has exactly the same name."""
        return self._name_counts[name_key(self.people[slot].name)] == 1


class _MatchState:
    """Matched flags per slot and the matches found so far, local to one match() call."""

    def __init__(self, first: Roster, second: Roster):
        self.first = first
        self.second = second
        self.matched_first = [False] * len(first)
        self.matched_second = [False] * len(second)
        self.matches: List[MatchPair] = []

    def unmatched_first(self) -> Iterator[int]:
        return (slot for slot, matched in enumerate(self.matched_first) if not matched)

    def unmatched_second(self) -> Iterator[int]:
        return (slot for slot, matched in enumerate(self.matched_second) if not matched)

    def claim(self, slot1: int, slot2: int, match_type: MatchType) -> None:
        person1 = self.first.people[slot1]
        person2 = self.second.people[slot2]
        self.matched_first[slot1] = True
        self.matched_second[slot2] = True
        self.matches.append(MatchPair(person1.xref_id, person2.xref_id, match_type,
                                      str(person1.name), str(person2.name)))

    def result(self) -> MatchResult:
        return MatchResult(
            matches=list(self.matches),
            unmatched_in_first=[self.first.people[slot].xref_id for slot in self.unmatched_first()],
            unmatched_in_second=[self.second.people[slot].xref_id for slot in self.unmatched_second()],
        )


class PersonMatcher:
    """
    Matches the people of two rosters of the same entry.

    Attributes:
        birth_year_tolerance (int): Largest birth-year difference accepted by
            phases 1-4.
    """

    def __init__(self, birth_year_tolerance: int = BIRTH_YEAR_TOLERANCE):
        self.birth_year_tolerance = birth_year_tolerance

    def match(self, first: Roster, second: Roster) -> MatchResult:
        """
        Match two rosters.

        Args:
            first (Roster): Roster from the first (ground-truth) dataset.
            second (Roster): Roster from the second (candidate) dataset.

        Returns:
            MatchResult: Matches in the order found, plus unmatched person ids.
        """
        state = _MatchState(first, second)
        phases: Sequence[Callable[[_MatchState], None]] = (
            self._match_exact_name_unique,
            self._match_event_reference,
            self._match_relationship_similar,
            self._match_similar_name,
            self._match_exact_name_resolved,
        )
        for phase in phases:
            found = len(state.matches)
            phase(state)
            logger.debug(f"Entry {first.entry_id}: {phase.__name__} matched {len(state.matches) - found}")
        return state.result()

    def match_entries(self, first: Entry, second: Entry) -> MatchResult:
        return self.match(Roster.from_entry(first), Roster.from_entry(second))

    def _compatible(self, person1: Person, person2: Person) -> bool:
        return birth_years_compatible(person1.birth_year, person2.birth_year, self.birth_year_tolerance)

    def _match_exact_name_unique(self, state: _MatchState) -> None:
        for slot1 in state.unmatched_first():
            if not state.first.has_unique_name(slot1):
                continue
            person1 = state.first.people[slot1]
            for slot2 in state.unmatched_second():
                person2 = state.second.people[slot2]
                if (state.second.has_unique_name(slot2)
                        and person1.name.exact_match(person2.name)
                        and self._compatible(person1, person2)):
                    state.claim(slot1, slot2, MatchType.EXACT_NAME_UNIQUE)
                    break

    def _match_event_reference(self, state: _MatchState) -> None:
        for slot1 in state.unmatched_first():
            person1 = state.first.people[slot1]
            for slot2 in state.unmatched_second():
                person2 = state.second.people[slot2]
                if self._compatible(person1, person2) and (shares_event(person1, person2)
                                                           or shares_reference(person1, person2)):
                    state.claim(slot1, slot2, MatchType.EVENT_REFERENCE)
                    break

    def _match_relationship_similar(self, state: _MatchState) -> None:
        for slot1 in state.unmatched_first():
            person1 = state.first.people[slot1]
            label1 = state.first.relationships[slot1]
            if not label1:
                continue
            for slot2 in state.unmatched_second():
                person2 = state.second.people[slot2]
                if (label1 == state.second.relationships[slot2]
                        and person1.name.similar_match(person2.name)
                        and person1.name.surname_similar(person2.name)
                        and self._compatible(person1, person2)
                        and not self._ambiguous_exact_name(state, slot1, slot2)):
                    state.claim(slot1, slot2, MatchType.RELATIONSHIP_SIMILAR)
                    break

    def _match_similar_name(self, state: _MatchState) -> None:
        for slot1 in state.unmatched_first():
            person1 = state.first.people[slot1]
            for slot2 in state.unmatched_second():
                person2 = state.second.people[slot2]
                if (person1.name.similar_match(person2.name)
                        and self._compatible(person1, person2)
                        and not self._ambiguous_exact_name(state, slot1, slot2)):
                    state.claim(slot1, slot2, MatchType.SIMILAR_NAME)
                    break

    def _match_exact_name_resolved(self, state: _MatchState) -> None:
        for slot1 in state.unmatched_first():
            person1 = state.first.people[slot1]
            key = name_key(person1.name)
            for slot2 in state.unmatched_second():
                person2 = state.second.people[slot2]
                if not person1.name.exact_match(person2.name):
                    continue
                remaining1 = sum(1 for slot in state.unmatched_first()
                                 if name_key(state.first.people[slot].name) == key)
                remaining2 = sum(1 for slot in state.unmatched_second()
                                 if name_key(state.second.people[slot].name) == key)
                if remaining1 == 1 and remaining2 == 1:
                    state.claim(slot1, slot2, MatchType.EXACT_NAME_RESOLVED)
                break

    @staticmethod
    def _ambiguous_exact_name(state: _MatchState, slot1: int, slot2: int) -> bool:
        person1 = state.first.people[slot1]
        person2 = state.second.people[slot2]
        return (person1.name.exact_match(person2.name)
                and not (state.first.has_unique_name(slot1) and state.second.has_unique_name(slot2)))


def shares_event(person1: Person, person2: Person) -> bool:
    """True if one of the four life events has the same non-empty date or place on both sides."""
    return any(person1.get_event(tag).shares_detail_with(person2.get_event(tag)) for tag in EVENT_TAGS)


def shares_reference(person1: Person, person2: Person) -> bool:
    return bool(set(person1.references) & set(person2.references))
