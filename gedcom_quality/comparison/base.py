"""
Base classes for facet comparators.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
import logging
from typing import Any, Dict, Iterable, Type

from gedcom_quality.app_hooks import HookedProcess
from gedcom_quality.comparison.model import EntryDetail, EntryMatch, MatchPair, QualityReport

logger = logging.getLogger(__name__)

# Comparator Registry
_COMPARATOR_REGISTRY: Dict[str, Type['FacetComparator']] = {}


def register_comparator(cls: Type['FacetComparator']) -> Type['FacetComparator']:
    """
    Decorator to register a comparator class in the global registry.

    Usage:
        @register_comparator
        @dataclass
        class MyComparator(FacetComparator):
            comparator_id: str = "my_facet"
            ...
    """
    if getattr(cls, 'comparator_id', ''):
        _COMPARATOR_REGISTRY[cls.comparator_id] = cls
        logger.debug(f"Registered facet comparator: {cls.comparator_id}")
    else:
        logger.warning(f"Comparator {cls.__name__} missing 'comparator_id' attribute, not registered")
    return cls


def get_comparator_registry() -> Dict[str, Type['FacetComparator']]:
    """Get the global comparator registry."""
    return _COMPARATOR_REGISTRY.copy()


@dataclass
class FacetComparator(HookedProcess, ABC):
    """
    Base class for facet comparators.

    A comparator inspects the matches of every common entry for disagreement
    on one facet (people, references, relationships, events) and produces a
    QualityReport. It never modifies the datasets.

    Attributes:
        comparator_id: Unique identifier for this comparator (the facet id)
        enabled: Whether this comparator is enabled (can be set via config)
        app_hooks: Optional application hooks for progress reporting
    """
    comparator_id: str = ""
    enabled: bool = True
    app_hooks: Any = None

    @abstractmethod
    def new_report(self) -> QualityReport:
        """Create the empty report for this facet."""

    @abstractmethod
    def compare_entry(self, entry_match: EntryMatch, detail: EntryDetail) -> None:
        """
        Record the disagreements of one entry in detail.

        Args:
            entry_match: Matching of one common entry
            detail: Detail record to fill with matches and errors
        """

    def __post_init__(self):
        """Validate comparator configuration."""
        if not self.comparator_id:
            raise ValueError(f"{self.__class__.__name__} must define comparator_id")

    def compare(self, entry_matches: Iterable[EntryMatch]) -> QualityReport:
        """
        Compare every entry and build the facet report.

        Entries raising a data error (AttributeError, KeyError, ValueError)
        are logged, listed in skipped_entries and left out of the match
        counts. On a stop request the report covers only the entries reached
        so far and is flagged as stopped.

        Args:
            entry_matches: Matchings of the entries common to both datasets

        Returns:
            QualityReport for this facet
        """
        report = self.new_report()
        entry_matches = list(entry_matches)
        self._report_step(info=f"Comparing {self.comparator_id}", target=len(entry_matches), reset_counter=True)
        for entry_match in entry_matches:
            if self._stop_requested(f"{self.comparator_id} comparison stopped by user"):
                report.stopped = True
                break
            report.entries_compared += 1
            detail = EntryDetail(entry_id=entry_match.entry_id)
            try:
                self.compare_entry(entry_match, detail)
            except (AttributeError, KeyError, ValueError) as e:
                logger.error(f"{self.comparator_id}: skipping entry {entry_match.entry_id}: {e}", exc_info=True)
                report.skipped_entries.append(entry_match.entry_id)
                continue
            finally:
                self._report_step(plus_step=1)
            report.add_detail(detail)
        logger.info(f"{self.comparator_id}: {report.entries_compared} of {len(entry_matches)} entries, "
                    f"{report.total_matches} matches")
        return report

    @staticmethod
    def pair_record(match: MatchPair) -> Dict[str, Any]:
        """Identity fields shared by every error record of a match."""
        return {
            'person1_id': match.person1_id,
            'person2_id': match.person2_id,
            'person1_name': match.person1_name,
            'person2_name': match.person2_name,
        }
