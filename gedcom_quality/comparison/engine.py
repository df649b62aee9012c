from __future__ import annotations

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional
import logging

from gedcom_quality.app_hooks import AppHooks
from gedcom_quality.dataset import Dataset
from .base import get_comparator_registry
from .matcher import PersonMatcher, Roster
from .metrics import FacetScore, quality_metrics
from .model import (ComparisonResults, EntryMatch, EventReport, PeopleReport, QualityReport,
                    ReferenceReport, RelationshipReport)
from .pipeline import ComparisonConfig, ComparisonPipeline

logger = logging.getLogger(__name__)


@dataclass
class EntryComparison:
    """Entry keys found in only one dataset, and those found in both."""
    only_in_first: List[str] = field(default_factory=list)
    only_in_second: List[str] = field(default_factory=list)
    common: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, List[str]]:
        return asdict(self)


class ComparisonEngine:
    """
    High-level interface for comparing a candidate dataset with a ground truth.

    People are matched once per entry common to both datasets; the facet
    reports are computed from those matches.

    Example:
        engine = ComparisonEngine(ground_truth, candidate)
        people = engine.compare_people()
        print(people.precision_rate)

        results = engine.run()          # every enabled facet
        scores = engine.quality_metrics()
    """

    def __init__(
        self,
        first: Dataset,
        second: Dataset,
        config_dict: Optional[Dict[str, Any]] = None,
        config_file: Optional[Path] = None,
        app_hooks: Optional[AppHooks] = None
    ) -> None:
        """
        Initialize the engine.

        Args:
            first: Ground-truth dataset
            second: Candidate dataset
            config_dict: Dictionary configuration (e.g., {'birth_year_tolerance': 5,
                'comparators': {'events': False}})
            config_file: Path to YAML config file
            app_hooks: Optional application hooks for progress reporting

        Raises:
            TypeError: If either dataset is not a Dataset.
        """
        for label, dataset in (('first', first), ('second', second)):
            if not isinstance(dataset, Dataset):
                raise TypeError(f"ComparisonEngine: {label} dataset must be a Dataset, got {type(dataset).__name__}")
        self.first = first
        self.second = second
        self.app_hooks = app_hooks

        if config_dict:
            self.config = ComparisonConfig.from_dict(config_dict)
        elif config_file:
            self.config = ComparisonConfig(config_file=config_file)
        else:
            self.config = ComparisonConfig()

        self.matcher = PersonMatcher(birth_year_tolerance=self.config.birth_year_tolerance)
        self.pipeline = ComparisonPipeline(config=self.config, app_hooks=app_hooks)
        self.skipped_entries: List[str] = []
        self._entry_matches: Optional[List[EntryMatch]] = None

    def common_entry_ids(self) -> List[str]:
        """Entry keys present in both datasets, in first-dataset order."""
        return [entry_id for entry_id in self.first.entries if entry_id in self.second.entries]

    def compare_entries(self) -> EntryComparison:
        comparison = EntryComparison(
            only_in_first=[entry_id for entry_id in self.first.entries if entry_id not in self.second.entries],
            only_in_second=[entry_id for entry_id in self.second.entries if entry_id not in self.first.entries],
            common=self.common_entry_ids(),
        )
        if comparison.only_in_first:
            logger.warning(f"{len(comparison.only_in_first)} entries only in first dataset: {comparison.only_in_first}")
        if comparison.only_in_second:
            logger.warning(f"{len(comparison.only_in_second)} entries only in second dataset: {comparison.only_in_second}")
        return comparison

    def match_entry(self, entry_id: str) -> EntryMatch:
        """
        Match the people of one entry.

        Raises:
            KeyError: If the entry is missing from either dataset.
        """
        first_entry = self.first.entries[entry_id]
        second_entry = self.second.entries[entry_id]
        result = self.matcher.match(Roster.from_entry(first_entry), Roster.from_entry(second_entry))
        return EntryMatch(entry_id, first_entry, second_entry, result,
                          first_dataset=self.first, second_dataset=self.second)

    def match_entries(self, refresh: bool = False) -> List[EntryMatch]:
        """
        Match every common entry, once; later calls reuse the matches.

        Entries whose matching raises a data error are logged and listed in
        skipped_entries.

        Args:
            refresh: Match again (after the datasets were modified)
        """
        if self._entry_matches is not None and not refresh:
            return self._entry_matches

        self.skipped_entries = []
        entry_matches: List[EntryMatch] = []
        for entry_id in self.compare_entries().common:
            try:
                entry_matches.append(self.match_entry(entry_id))
            except (AttributeError, KeyError, ValueError) as e:
                logger.error(f"Matching failed for entry {entry_id}: {e}", exc_info=True)
                self.skipped_entries.append(entry_id)
        logger.info(f"Matched {sum(len(m.result) for m in entry_matches)} people in {len(entry_matches)} entries")
        self._entry_matches = entry_matches
        return entry_matches

    def _compare(self, comparator_id: str) -> QualityReport:
        comparator = get_comparator_registry()[comparator_id](app_hooks=self.app_hooks)
        return self._finish(comparator.compare(self.match_entries()))

    def _finish(self, report: QualityReport) -> QualityReport:
        report.entries_compared += len(self.skipped_entries)
        report.skipped_entries.extend(self.skipped_entries)
        return report

    def compare_people(self) -> PeopleReport:
        return self._compare('people')

    def compare_references(self) -> ReferenceReport:
        return self._compare('references')

    def compare_relationships(self) -> RelationshipReport:
        return self._compare('relationships')

    def compare_events(self) -> EventReport:
        return self._compare('events')

    def run(self) -> ComparisonResults:
        """
        Run every enabled facet comparator.

        Returns:
            ComparisonResults keyed by facet id
        """
        results = self.pipeline.run(self.match_entries())
        for report in results.reports.values():
            self._finish(report)
        return results

    def quality_metrics(self, results: Optional[ComparisonResults] = None) -> Dict[str, FacetScore]:
        """Precision / recall / F1 per facet, running the comparison if no results are given."""
        return quality_metrics(results if results is not None else self.run())

    def summary(self) -> Dict[str, Any]:
        """Totals of both datasets and entry overlap counts."""
        entries = self.compare_entries()
        return {
            'first': self._dataset_summary(self.first),
            'second': self._dataset_summary(self.second),
            'entries_only_in_first': len(entries.only_in_first),
            'entries_only_in_second': len(entries.only_in_second),
            'common_entries': len(entries.common),
        }

    @staticmethod
    def _dataset_summary(dataset: Dataset) -> Dict[str, Any]:
        return {
            'name': dataset.name,
            'location': dataset.location,
            'entries': dataset.entry_count(),
            'people': dataset.people_count(),
            'families': dataset.family_count(),
        }
