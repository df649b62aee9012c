"""
Relationship label comparator.

Labels look like "<tree number><role letters>", e.g. "0", "2W", "1CS". The
number depends on traversal order and is ignored; only the letters are
compared.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
import re

from gedcom_quality.comparison.base import FacetComparator, register_comparator
from gedcom_quality.comparison.model import EntryDetail, EntryMatch, RelationshipReport

logger = logging.getLogger(__name__)

LABEL_PATTERN = re.compile(r'^\d+([a-zA-Z]*)$')


def relationship_letters(label: str) -> str:
    """Role letters of a relationship label; '' for empty or malformed labels."""
    if not label:
        return ''
    match = LABEL_PATTERN.match(label)
    if match is None:
        logger.warning(f"Malformed relationship label: {label!r}")
        return ''
    return match.group(1)


@register_comparator
@dataclass
class RelationshipComparator(FacetComparator):
    """Flags matched individuals whose role letters differ as recall errors."""
    comparator_id: str = "relationships"

    def new_report(self) -> RelationshipReport:
        return RelationshipReport()

    def compare_entry(self, entry_match: EntryMatch, detail: EntryDetail) -> None:
        for match in entry_match.matches:
            detail.matches.append(match.to_dict())
            label1 = entry_match.first.relationship(match.person1_id)
            label2 = entry_match.second.relationship(match.person2_id)
            letters1 = relationship_letters(label1)
            letters2 = relationship_letters(label2)
            if letters1 != letters2:
                detail.recall_errors.append({
                    **self.pair_record(match),
                    'relationship1': label1,
                    'relationship2': label2,
                    'letters1': letters1,
                    'letters2': letters2,
                    'match_type': match.match_type.value,
                })
