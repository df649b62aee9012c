"""
Pipeline for running facet comparators.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import yaml

from gedcom_quality.app_hooks import HookedProcess
from gedcom_quality.comparison.base import FacetComparator, get_comparator_registry
from gedcom_quality.comparison.matcher import BIRTH_YEAR_TOLERANCE
from gedcom_quality.comparison.model import ComparisonResults, EntryMatch

logger = logging.getLogger(__name__)


@dataclass
class ComparisonConfig:
    """
    Configuration for a comparison run.

    Attributes:
        birth_year_tolerance: Largest birth-year difference the matcher accepts
        comparators: Dict of comparator_id -> enabled status
        config_file: Path to YAML config file (optional)
    """
    birth_year_tolerance: int = BIRTH_YEAR_TOLERANCE
    comparators: Dict[str, bool] = field(default_factory=dict)
    config_file: Optional[Path] = None

    def __post_init__(self) -> None:
        """Load configuration from file if config_file is specified and exists."""
        if self.config_file and Path(self.config_file).exists():
            self._load_from_file()

    def _load_from_file(self) -> None:
        """
        Load configuration from YAML file.

        Reads the 'comparison' section from the YAML file: the matcher's
        birth_year_tolerance and comparator enable/disable settings.
        """
        try:
            with open(self.config_file, 'r') as f:
                data = yaml.safe_load(f) or {}
                comparison_config = data.get('comparison', {}) or {}

                tolerance = comparison_config.get('birth_year_tolerance')
                if tolerance is not None:
                    self.birth_year_tolerance = int(tolerance)

                comparators_config = comparison_config.get('comparators', {}) or {}
                for comparator_id, settings in comparators_config.items():
                    if isinstance(settings, dict):
                        self.comparators[comparator_id] = settings.get('enabled', True)
                    elif isinstance(settings, bool):
                        self.comparators[comparator_id] = settings

                logger.info(f"Loaded comparison config from {self.config_file}")
        except (OSError, yaml.YAMLError, AttributeError, TypeError, ValueError) as e:
            logger.warning(f"Failed to load comparison config from {self.config_file}: {e}")

    def is_enabled(self, comparator_id: str) -> bool:
        """
        Check if a comparator is enabled.

        Args:
            comparator_id: Identifier of the comparator to check

        Returns:
            True if enabled (default if not specified), False otherwise
        """
        return self.comparators.get(comparator_id, True)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ComparisonConfig:
        """
        Create configuration from dictionary.

        Args:
            data: Dictionary with optional 'birth_year_tolerance' and
                'comparators' (comparator_id -> enabled status) keys

        Returns:
            ComparisonConfig instance
        """
        return cls(
            birth_year_tolerance=int(data.get('birth_year_tolerance', BIRTH_YEAR_TOLERANCE)),
            comparators=dict(data.get('comparators', {})),
        )


@dataclass
class ComparisonPipeline(HookedProcess):
    """
    Pipeline for running facet comparators over matched entries.

    Attributes:
        comparators: List of comparator instances to run
        config: Configuration for the pipeline
        app_hooks: Optional application hooks for progress reporting
    """
    comparators: List[FacetComparator] = field(default_factory=list)
    config: ComparisonConfig = field(default_factory=ComparisonConfig)
    app_hooks: Optional[Any] = field(default=None)

    def __post_init__(self) -> None:
        """Load every registered comparator if none were provided."""
        if not self.comparators:
            self._load_comparators_from_registry()

    def _load_comparators_from_registry(self) -> None:
        registry = get_comparator_registry()
        for comparator_id, comparator_cls in registry.items():
            enabled = self.config.is_enabled(comparator_id)
            self.comparators.append(comparator_cls(enabled=enabled, app_hooks=self.app_hooks))
            logger.debug(f"Loaded comparator: {comparator_id} (enabled={enabled})")

    def run(self, entry_matches: Iterable[EntryMatch]) -> ComparisonResults:
        """
        Run all enabled comparators on the matched entries.

        Args:
            entry_matches: Matchings of the entries common to both datasets

        Returns:
            ComparisonResults with one report per enabled comparator
        """
        results = ComparisonResults()
        entry_matches = list(entry_matches)

        logger.debug(f"Running comparison on {len(entry_matches)} entries")

        enabled_comparators = [c for c in self.comparators if c.enabled]
        self._report_step(info="Comparing datasets", target=len(enabled_comparators), reset_counter=True, plus_step=0)

        for comparator in self.comparators:
            if not comparator.enabled:
                logger.debug(f"Skipping disabled comparator: {comparator.comparator_id}")
                continue

            if self._stop_requested("Comparison stopped by user"):
                logger.info(f"Comparison stopped after {len(results.reports)} comparators")
                results.stopped = True
                return results

            logger.debug(f"Running comparator: {comparator.comparator_id}")
            report = comparator.compare(entry_matches)
            results.add_report(comparator.comparator_id, report)
            if report.stopped:
                results.stopped = True
                return results
            self._report_step(plus_step=1)

        return results

