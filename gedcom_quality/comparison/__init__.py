"""
Comparison module for measuring a candidate dataset against a ground truth.

People of each entry common to both datasets are matched by a five-phase
matcher; facet comparators then measure how well the matched records agree.

Main components:
    - PersonMatcher: Matches the people of two rosters of one entry
    - FacetComparator: Base class for creating facet comparators
    - ComparisonPipeline: Orchestrates running multiple comparators
    - ComparisonEngine: Public entry point over two datasets
    - Built-in comparators: people, references, relationships, events
"""

from gedcom_quality.comparison.model import (
    ComparisonResults,
    EntryDetail,
    EntryMatch,
    EventReport,
    MatchPair,
    MatchResult,
    MatchType,
    PeopleReport,
    QualityReport,
    ReferenceReport,
    RelationshipReport,
    rate,
)
from gedcom_quality.comparison.matcher import PersonMatcher, Roster, birth_years_compatible
from gedcom_quality.comparison.base import FacetComparator, register_comparator, get_comparator_registry
from gedcom_quality.comparison.pipeline import ComparisonPipeline, ComparisonConfig
from gedcom_quality.comparison.metrics import FacetScore, f1_score, quality_metrics
from gedcom_quality.comparison.engine import ComparisonEngine, EntryComparison

# Import comparators to ensure they're registered
from gedcom_quality.comparison import comparators

__all__ = [
    'ComparisonEngine',
    'ComparisonConfig',
    'ComparisonPipeline',
    'ComparisonResults',
    'EntryComparison',
    'EntryDetail',
    'EntryMatch',
    'EventReport',
    'FacetComparator',
    'FacetScore',
    'MatchPair',
    'MatchResult',
    'MatchType',
    'PeopleReport',
    'PersonMatcher',
    'QualityReport',
    'ReferenceReport',
    'RelationshipReport',
    'Roster',
    'birth_years_compatible',
    'comparators',
    'f1_score',
    'get_comparator_registry',
    'quality_metrics',
    'rate',
    'register_comparator',
]
