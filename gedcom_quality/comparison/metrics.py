"""
Precision / recall / F1 quality scores derived from the facet reports.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict

from gedcom_quality.comparison.model import ComparisonResults, QualityReport


def f1_score(precision: float, recall: float) -> float:
    """Harmonic mean of precision and recall; 0.0 when both are 0."""
    if precision + recall == 0:
        return 0.0
    return 2 * precision * recall / (precision + recall)


@dataclass(frozen=True)
class FacetScore:
    """Quality of one facet, as percentages."""
    precision: float = 100.0
    recall: float = 100.0
    f1: float = 100.0

    @classmethod
    def from_rates(cls, precision: float, recall: float) -> FacetScore:
        return cls(precision=precision, recall=recall, f1=f1_score(precision, recall))

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


def _score(report: QualityReport, precision: float, recall: float) -> FacetScore:
    if report.entries_compared == 0:
        return FacetScore()
    return FacetScore.from_rates(precision, recall)


def quality_metrics(results: ComparisonResults) -> Dict[str, FacetScore]:
    """
    Score every facet present in the results.

    Error rates turn into scores as 100 - rate (never below 0); the people
    facet uses its precision rate for both precision and recall, and the
    relationship facet, which only has recall errors, scores recall as 100.
    Facets that compared no entries score 100 throughout.

    Args:
        results: Reports of a comparison run

    Returns:
        Dict of facet id -> FacetScore, always including 'entries'
    """
    scores: Dict[str, FacetScore] = {'entries': FacetScore()}

    people = results.get_report('people')
    if people is not None:
        scores['people'] = _score(people, people.precision_rate, people.precision_rate)

    for facet in ('references', 'events'):
        report = results.get_report(facet)
        if report is not None:
            scores[facet] = _score(report,
                                   max(0.0, 100 - report.precision_error_rate),
                                   max(0.0, 100 - report.recall_error_rate))

    relationships = results.get_report('relationships')
    if relationships is not None:
        scores['relationships'] = _score(relationships, max(0.0, 100 - relationships.recall_error_rate), 100.0)

    return scores
