"""
Cross-reference comparator.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging

from gedcom_quality.comparison.base import FacetComparator, register_comparator
from gedcom_quality.comparison.model import EntryDetail, EntryMatch, ReferenceReport

logger = logging.getLogger(__name__)


@register_comparator
@dataclass
class ReferenceComparator(FacetComparator):
    """
    Compares the cross-reference sets of matched individuals.

    Errors recorded:
        - recall: the sets differ in size (records the references found on
          one side only, in first-then-second order)
        - precision: same size, different contents
    """
    comparator_id: str = "references"

    def new_report(self) -> ReferenceReport:
        return ReferenceReport()

    def compare_entry(self, entry_match: EntryMatch, detail: EntryDetail) -> None:
        for match in entry_match.matches:
            person1, person2 = entry_match.people(match)
            detail.matches.append(match.to_dict())

            references1, references2 = set(person1.references), set(person2.references)
            only_in_first = [ref for ref in person1.references if ref not in references2]
            only_in_second = [ref for ref in person2.references if ref not in references1]

            if len(references1) != len(references2):
                detail.recall_errors.append({
                    **self.pair_record(match),
                    'person1_references': list(person1.references),
                    'person2_references': list(person2.references),
                    'missing_references': only_in_first + only_in_second,
                    'expected_count': max(len(references1), len(references2)),
                    'actual_count': min(len(references1), len(references2)),
                })
            elif references1 != references2:
                detail.precision_errors.append({
                    **self.pair_record(match),
                    'different_references1': only_in_first,
                    'different_references2': only_in_second,
                })
