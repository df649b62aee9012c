"""
Tests for comparison.metrics module.
"""
from __future__ import annotations

import pytest

from gedcom_quality.comparison.metrics import FacetScore, f1_score, quality_metrics
from gedcom_quality.comparison.model import (ComparisonResults, EventReport, PeopleReport,
                                             ReferenceReport, RelationshipReport)


@pytest.mark.parametrize(
    "precision,recall,expected",
    [
        (100.0, 100.0, 100.0),
        (0.0, 0.0, 0.0),
        (50.0, 100.0, pytest.approx(66.6667, rel=1e-4)),
        (0.0, 100.0, 0.0),
    ]
)
def test_f1_score(precision, recall, expected):
    assert f1_score(precision, recall) == expected


def test_facet_score_defaults():
    assert FacetScore().to_dict() == {'precision': 100.0, 'recall': 100.0, 'f1': 100.0}


class TestQualityMetrics:
    """Tests for quality_metrics()."""

    def test_empty_results(self):
        assert quality_metrics(ComparisonResults()) == {'entries': FacetScore()}

    def test_facets_without_entries_score_full(self):
        results = ComparisonResults()
        results.add_report('people', PeopleReport())
        results.add_report('events', EventReport())

        scores = quality_metrics(results)

        assert scores['people'] == FacetScore()
        assert scores['events'] == FacetScore()

    def test_scores_from_rates(self):
        results = ComparisonResults()
        results.add_report('people', PeopleReport(entries_compared=1, total_matches=4, precise_matches=3))
        results.add_report('references', ReferenceReport(entries_compared=1, total_matches=4,
                                                         cross_reference_recall_errors=1,
                                                         cross_reference_precision_errors=2))
        results.add_report('relationships', RelationshipReport(entries_compared=1, total_matches=4,
                                                               relationship_recall_errors=1))
        results.add_report('events', EventReport(entries_compared=1, total_matches=1, event_recall_errors=3))

        scores = quality_metrics(results)

        assert scores['people'].precision == 75.0
        assert scores['people'].recall == 75.0
        assert scores['references'].precision == 50.0
        assert scores['references'].recall == 75.0
        assert scores['relationships'].precision == 75.0
        assert scores['relationships'].recall == 100.0
        assert scores['events'].recall == 0.0
        assert scores['events'].precision == 100.0
        assert scores['events'].f1 == 0.0
