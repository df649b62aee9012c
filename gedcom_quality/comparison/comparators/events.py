"""
Life event comparator.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any, Dict, List, Optional

from gedcom_quality.comparison.base import FacetComparator, register_comparator
from gedcom_quality.comparison.model import EntryDetail, EntryMatch, EventReport
from gedcom_quality.dataset import Dataset
from gedcom_quality.entry import Entry
from gedcom_quality.family import Family
from gedcom_quality.life_event import LifeEvent
from gedcom_quality.person import EVENT_TAGS, Person

logger = logging.getLogger(__name__)


@register_comparator
@dataclass
class EventComparator(FacetComparator):
    """
    Compares the life events of matched individuals.

    Birth, death, christening and burial are compared pairwise:
        - both empty: agreement
        - one empty: recall error, tagged with the side it is missing in
        - both present: precision error if the date text or the place differ

    Marriages are compared through the families in which each person is a
    spouse: a different number of such families is a recall error, otherwise
    the marriages are compared index by index with the same rule.
    """
    comparator_id: str = "events"

    def new_report(self) -> EventReport:
        return EventReport()

    def compare_entry(self, entry_match: EntryMatch, detail: EntryDetail) -> None:
        for match in entry_match.matches:
            person1, person2 = entry_match.people(match)
            detail.matches.append(match.to_dict())
            record = self.pair_record(match)
            for tag in EVENT_TAGS:
                self._compare_event(record, tag, person1.get_event(tag), person2.get_event(tag), detail)
            self._compare_marriages(record, entry_match, person1, person2, detail)

    def _compare_marriages(self, record: Dict[str, Any], entry_match: EntryMatch,
                           person1: Person, person2: Person, detail: EntryDetail) -> None:
        families1 = spouse_families(person1, entry_match.first, entry_match.first_dataset)
        families2 = spouse_families(person2, entry_match.second, entry_match.second_dataset)
        if len(families1) != len(families2):
            detail.recall_errors.append({
                **record,
                'event_type': 'marriage',
                'families1_count': len(families1),
                'families2_count': len(families2),
                'missing_in': 'second' if len(families1) > len(families2) else 'first',
            })
            return
        for index, (family1, family2) in enumerate(zip(families1, families2)):
            self._compare_event(record, 'marriage', family1.marriage, family2.marriage, detail, family_index=index)

    @staticmethod
    def _compare_event(record: Dict[str, Any], tag: str, event1: LifeEvent, event2: LifeEvent,
                       detail: EntryDetail, family_index: Optional[int] = None) -> None:
        empty1, empty2 = event1.is_empty(), event2.is_empty()
        if empty1 and empty2:
            return
        extra = {} if family_index is None else {'family_index': family_index}
        if empty1 or empty2:
            detail.recall_errors.append({
                **record,
                'event_type': tag,
                'missing_in': 'first' if empty1 else 'second',
                'event1': str(event1),
                'event2': str(event2),
                **extra,
            })
            return
        dates_differ, places_differ = event1.differences(event2)
        if dates_differ or places_differ:
            detail.precision_errors.append({
                **record,
                'event_type': tag,
                'event1': str(event1),
                'event2': str(event2),
                'dates_differ': dates_differ,
                'places_differ': places_differ,
                **extra,
            })


def spouse_families(person: Person, entry: Entry, dataset: Optional[Dataset] = None) -> List[Family]:
    """
    Families in which the person is husband or wife, in the person's family order.

    Family ids are looked up in the entry first, then in the dataset.
    """
    families: List[Family] = []
    for family_id in person.families:
        family = entry.families.get(family_id)
        if family is None and dataset is not None:
            family = dataset.get_family(family_id)
        if family is None:
            logger.debug(f"Entry {entry.entry_id}: family {family_id} of person {person.xref_id} not found")
            continue
        if family.is_spouse(person.xref_id):
            families.append(family)
    return families
