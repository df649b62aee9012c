"""
Tests for ComparisonEngine.
"""
from __future__ import annotations

import pytest

from gedcom_quality.comparison import ComparisonEngine, MatchType
from gedcom_quality.dataset import Dataset


@pytest.fixture
def datasets(make_person, make_entry, make_dataset):
    first = make_dataset(
        make_entry("E1", [make_person(1, "John", "Smith", birth=("1850-06-15", "Boston"), references=["R1"])]),
        make_entry("E2", [make_person(2, "Anna", "Meier")]),
        make_entry("E3", [make_person(3, "Hans", "Keller")]),
        name="truth", location="Boston",
    )
    second = make_dataset(
        make_entry("E1", [make_person(101, "John", "Smith", birth=("1850-06-15", "Boston"), references=["R1"])]),
        make_entry("E2", [make_person(102, "Anna", "Meyer")]),
        make_entry("E4", [make_person(104, "Paul", "Huber")]),
        name="candidate",
    )
    return first, second


class TestComparisonEngine:
    """Tests for ComparisonEngine class."""

    @pytest.mark.parametrize("first,second", [("a", Dataset()), (Dataset(), None), ({}, {})])
    def test_wrong_types(self, first, second):
        with pytest.raises(TypeError):
            ComparisonEngine(first, second)

    def test_compare_entries(self, datasets):
        engine = ComparisonEngine(*datasets)

        entries = engine.compare_entries()

        assert entries.common == ["E1", "E2"]
        assert entries.only_in_first == ["E3"]
        assert entries.only_in_second == ["E4"]
        assert engine.common_entry_ids() == ["E1", "E2"]
        assert entries.to_dict() == {'only_in_first': ["E3"], 'only_in_second': ["E4"], 'common': ["E1", "E2"]}

    def test_summary(self, datasets):
        summary = ComparisonEngine(*datasets).summary()

        assert summary['first'] == {'name': 'truth', 'location': 'Boston', 'entries': 3, 'people': 3, 'families': 0}
        assert summary['second']['people'] == 3
        assert summary['entries_only_in_first'] == 1
        assert summary['entries_only_in_second'] == 1
        assert summary['common_entries'] == 2

    def test_match_entries_is_cached(self, datasets):
        engine = ComparisonEngine(*datasets)

        matches = engine.match_entries()

        assert [m.entry_id for m in matches] == ["E1", "E2"]
        assert engine.match_entries() is matches
        assert engine.match_entries(refresh=True) is not matches
        assert matches[0].result.matches[0].match_type == MatchType.EXACT_NAME_UNIQUE
        assert matches[1].result.matches[0].match_type == MatchType.RELATIONSHIP_SIMILAR

    def test_match_entry_unknown(self, datasets):
        with pytest.raises(KeyError):
            ComparisonEngine(*datasets).match_entry("E3")

    def test_run(self, datasets):
        results = ComparisonEngine(*datasets).run()

        assert set(results.reports) == {'people', 'references', 'relationships', 'events'}
        assert results['people'].total_matches == 2
        assert results['people'].precision_rate == 50.0
        assert results['references'].cross_reference_recall_errors == 0
        assert results['events'].entries_compared == 2
        assert set(results.to_dict()) == set(results.reports)

    def test_run_with_disabled_comparator(self, datasets):
        results = ComparisonEngine(*datasets, config_dict={'comparators': {'events': False}}).run()

        assert 'events' not in results
        assert 'people' in results

    def test_birth_year_tolerance_from_config(self, make_person, make_entry, make_dataset):
        first = make_dataset(make_entry("E1", [make_person(1, "Jon", "Smith", birth="1850")]))
        second = make_dataset(make_entry("E1", [make_person(101, "John", "Smith", birth="1857")]))

        assert ComparisonEngine(first, second).compare_people().total_matches == 0
        engine = ComparisonEngine(first, second, config_dict={'birth_year_tolerance': 10})
        assert engine.compare_people().total_matches == 1

    def test_config_file(self, datasets, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("comparison:\n  comparators:\n    people: false\n")

        results = ComparisonEngine(*datasets, config_file=config_file).run()

        assert 'people' not in results

    def test_empty_datasets(self):
        engine = ComparisonEngine(Dataset(), Dataset())

        people = engine.compare_people()
        events = engine.compare_events()

        assert people.entries_compared == 0
        assert people.precision_rate == 0.0
        assert events.recall_error_rate == 0.0
        assert events.precision_error_rate == 0.0
        assert engine.compare_relationships().recall_error_rate == 0.0

    def test_quality_metrics(self, datasets):
        scores = ComparisonEngine(*datasets).quality_metrics()

        assert set(scores) == {'entries', 'people', 'references', 'relationships', 'events'}
        assert scores['people'].precision == 50.0
        assert scores['references'].f1 == 100.0
