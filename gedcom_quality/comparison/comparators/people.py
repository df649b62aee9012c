"""
People comparator: how precisely matched individuals' names agree.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging

from gedcom_quality.comparison.base import FacetComparator, register_comparator
from gedcom_quality.comparison.model import EntryDetail, EntryMatch, PeopleReport

logger = logging.getLogger(__name__)


@register_comparator
@dataclass
class PeopleComparator(FacetComparator):
    """
    Compares the people of each common entry.

    A match is precise when both names agree exactly (case-insensitive);
    imprecise matches are recorded as precision errors. The report also
    rolls up matches per matcher phase and unmatched people per side.
    """
    comparator_id: str = "people"

    def new_report(self) -> PeopleReport:
        return PeopleReport()

    def compare_entry(self, entry_match: EntryMatch, detail: EntryDetail) -> None:
        result = entry_match.result
        detail.people_first_count = len(entry_match.first.people)
        detail.people_second_count = len(entry_match.second.people)
        detail.unmatched_in_first = list(result.unmatched_in_first)
        detail.unmatched_in_second = list(result.unmatched_in_second)

        for match in result.matches:
            person1, person2 = entry_match.people(match)
            detail.matches.append(match.to_dict())
            if not person1.name.exact_match(person2.name):
                detail.precision_errors.append({
                    **self.pair_record(match),
                    'match_type': match.match_type.value,
                })

        if result.unmatched_in_first or result.unmatched_in_second:
            logger.debug(f"Entry {entry_match.entry_id}: unmatched {len(result.unmatched_in_first)} in first, "
                         f"{len(result.unmatched_in_second)} in second")
