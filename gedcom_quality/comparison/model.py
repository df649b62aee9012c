"""
Data models for the comparison module.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from enum import Enum
from typing import Any, ClassVar, Dict, List, Optional, Tuple

from gedcom_quality.dataset import Dataset
from gedcom_quality.entry import Entry
from gedcom_quality.person import Person


def rate(count: int, total: int) -> float:
    """Percentage of count in total; 0.0 when total is 0."""
    if not total:
        return 0.0
    return count / total * 100


class MatchType(str, Enum):
    """Matcher phase that produced a match."""
    EXACT_NAME_UNIQUE = 'exactNameUnique'
    EVENT_REFERENCE = 'eventReference'
    RELATIONSHIP_SIMILAR = 'relationshipSimilar'
    SIMILAR_NAME = 'similarName'
    EXACT_NAME_RESOLVED = 'exactNameResolved'


@dataclass(frozen=True)
class MatchPair:
    """
    One matched individual: a person of the first roster and a person of the
    second roster, with the phase that matched them.
    """
    person1_id: int
    person2_id: int
    match_type: MatchType
    person1_name: str = ''
    person2_name: str = ''

    def to_dict(self) -> Dict[str, Any]:
        return {
            'person1_id': self.person1_id,
            'person2_id': self.person2_id,
            'match_type': self.match_type.value,
            'person1_name': self.person1_name,
            'person2_name': self.person2_name,
        }


@dataclass
class MatchResult:
    """Matches of one entry plus the ids left unmatched on each side."""
    matches: List[MatchPair] = field(default_factory=list)
    unmatched_in_first: List[int] = field(default_factory=list)
    unmatched_in_second: List[int] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.matches)

    def count(self, *match_types: MatchType) -> int:
        """Number of matches produced by any of the given phases."""
        return sum(1 for match in self.matches if match.match_type in match_types)


@dataclass
class EntryMatch:
    """
    The matching of one entry common to both datasets, handed to every
    facet comparator.
    """
    entry_id: str
    first: Entry
    second: Entry
    result: MatchResult
    first_dataset: Optional[Dataset] = None
    second_dataset: Optional[Dataset] = None

    @property
    def matches(self) -> List[MatchPair]:
        return self.result.matches

    def people(self, match: MatchPair) -> Tuple[Person, Person]:
        """The two Person records of a match (KeyError if missing)."""
        return self.first.people[match.person1_id], self.second.people[match.person2_id]


@dataclass
class EntryDetail:
    """Per-entry record of matches and literal mismatches."""
    entry_id: str
    matches: List[Dict[str, Any]] = field(default_factory=list)
    recall_errors: List[Dict[str, Any]] = field(default_factory=list)
    precision_errors: List[Dict[str, Any]] = field(default_factory=list)
    people_first_count: Optional[int] = None
    people_second_count: Optional[int] = None
    unmatched_in_first: Optional[List[int]] = None
    unmatched_in_second: Optional[List[int]] = None

    def to_dict(self) -> Dict[str, Any]:
        return {key: value for key, value in asdict(self).items() if value is not None}


@dataclass
class QualityReport:
    """
    Base class for facet reports.

    Counts are derived from the entry details added to the report; rates are
    computed on demand and are 0.0 when there are no matches.
    stopped is True when a stop request cut the comparison short; the counts
    then cover only the entries compared before it.
    """
    facet: ClassVar[str] = ''
    rate_fields: ClassVar[Tuple[str, ...]] = ()

    entries_compared: int = 0
    total_matches: int = 0
    details: List[EntryDetail] = field(default_factory=list)
    skipped_entries: List[str] = field(default_factory=list)
    stopped: bool = False

    def add_detail(self, detail: EntryDetail) -> None:
        self.details.append(detail)
        self.total_matches += len(detail.matches)
        self._accumulate(detail)

    def _accumulate(self, detail: EntryDetail) -> None:
        pass

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            f.name: getattr(self, f.name) for f in fields(self)
            if f.name not in ('details', 'skipped_entries', 'stopped')
        }
        for name in self.rate_fields:
            data[name] = getattr(self, name)
        data['details'] = [detail.to_dict() for detail in self.details]
        data['skipped_entries'] = list(self.skipped_entries)
        data['stopped'] = self.stopped
        return data


@dataclass
class PeopleReport(QualityReport):
    facet: ClassVar[str] = 'people'
    rate_fields: ClassVar[Tuple[str, ...]] = ('precision_rate',)

    exact_name_matches: int = 0
    event_reference_matches: int = 0
    relationship_similar_matches: int = 0
    similar_name_matches: int = 0
    unmatched_in_first: int = 0
    unmatched_in_second: int = 0
    precise_matches: int = 0
    imprecise_matches: int = 0

    def _accumulate(self, detail: EntryDetail) -> None:
        for match in detail.matches:
            match_type = match['match_type']
            if match_type in (MatchType.EXACT_NAME_UNIQUE.value, MatchType.EXACT_NAME_RESOLVED.value):
                self.exact_name_matches += 1
            elif match_type == MatchType.EVENT_REFERENCE.value:
                self.event_reference_matches += 1
            elif match_type == MatchType.RELATIONSHIP_SIMILAR.value:
                self.relationship_similar_matches += 1
            elif match_type == MatchType.SIMILAR_NAME.value:
                self.similar_name_matches += 1
        self.unmatched_in_first += len(detail.unmatched_in_first or [])
        self.unmatched_in_second += len(detail.unmatched_in_second or [])
        self.imprecise_matches += len(detail.precision_errors)
        self.precise_matches += len(detail.matches) - len(detail.precision_errors)

    @property
    def precision_rate(self) -> float:
        return rate(self.precise_matches, self.total_matches)


@dataclass
class ReferenceReport(QualityReport):
    facet: ClassVar[str] = 'references'
    rate_fields: ClassVar[Tuple[str, ...]] = ('recall_error_rate', 'precision_error_rate')

    cross_reference_recall_errors: int = 0
    cross_reference_precision_errors: int = 0

    def _accumulate(self, detail: EntryDetail) -> None:
        self.cross_reference_recall_errors += len(detail.recall_errors)
        self.cross_reference_precision_errors += len(detail.precision_errors)

    @property
    def recall_error_rate(self) -> float:
        return rate(self.cross_reference_recall_errors, self.total_matches)

    @property
    def precision_error_rate(self) -> float:
        return rate(self.cross_reference_precision_errors, self.total_matches)


@dataclass
class RelationshipReport(QualityReport):
    facet: ClassVar[str] = 'relationships'
    rate_fields: ClassVar[Tuple[str, ...]] = ('recall_error_rate',)

    relationship_recall_errors: int = 0

    def _accumulate(self, detail: EntryDetail) -> None:
        self.relationship_recall_errors += len(detail.recall_errors)

    @property
    def recall_error_rate(self) -> float:
        return rate(self.relationship_recall_errors, self.total_matches)


@dataclass
class EventReport(QualityReport):
    facet: ClassVar[str] = 'events'
    rate_fields: ClassVar[Tuple[str, ...]] = ('recall_error_rate', 'precision_error_rate')

    event_recall_errors: int = 0
    event_precision_errors: int = 0

    def _accumulate(self, detail: EntryDetail) -> None:
        self.event_recall_errors += len(detail.recall_errors)
        self.event_precision_errors += len(detail.precision_errors)

    @property
    def recall_error_rate(self) -> float:
        return rate(self.event_recall_errors, self.total_matches)

    @property
    def precision_error_rate(self) -> float:
        return rate(self.event_precision_errors, self.total_matches)


@dataclass
class ComparisonResults:
    """
    Reports of one comparison run, keyed by facet id.

    Attributes:
        reports: facet id -> QualityReport
        stopped: True if a stop request cut the run short; the last report
            may then cover only part of the entries
    """
    reports: Dict[str, QualityReport] = field(default_factory=dict)
    stopped: bool = False

    def __contains__(self, facet: str) -> bool:
        return facet in self.reports

    def __getitem__(self, facet: str) -> QualityReport:
        return self.reports[facet]

    def add_report(self, facet: str, report: QualityReport) -> None:
        self.reports[facet] = report

    def get_report(self, facet: str) -> Optional[QualityReport]:
        return self.reports.get(facet)

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        return {facet: report.to_dict() for facet, report in self.reports.items()}
