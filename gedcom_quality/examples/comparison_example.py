"""
Example: Comparing a candidate dataset with a ground truth.

This example demonstrates how to:
1. Load two datasets from plain data
2. Match the people of each common entry
3. Compute the four quality reports
4. Export results
"""

import json
import logging

from gedcom_quality import ComparisonEngine, Dataset


GROUND_TRUTH = {
    'name': 'ground truth',
    'location': 'Basel',
    'entries': [
        {
            'id': 'page-12',
            'people': [
                {'id': 1, 'given_name': 'Johann', 'surname': 'Meier',
                 'birth': {'date': '15 JUN 1850', 'place': 'Basel'}, 'references': ['R1']},
                {'id': 2, 'given_name': 'Katharina', 'surname': 'Müller',
                 'birth': {'date': '1852'}},
                {'id': 3, 'given_name': 'Anna', 'surname': 'Meier',
                 'christening': {'date': '3 MAR 1876', 'place': 'Basel'}},
            ],
            'families': [
                {'id': 10, 'husband': 1, 'wife': 2, 'children': [3],
                 'marriage': {'date': '1 MAY 1875', 'place': 'Basel'}},
            ],
        },
    ],
}

CANDIDATE = {
    'name': 'extracted',
    'entries': [
        {
            'id': 'page-12',
            'people': [
                {'id': 101, 'given_name': 'J.', 'surname': 'Meyer',
                 'birth': {'date': '15 JUN 1850', 'place': 'Basel'}, 'references': ['R1', 'R7']},
                {'id': 102, 'given_name': 'Catharina', 'surname': 'Mueller'},
                {'id': 103, 'given_name': 'Anna', 'surname': 'Meyer',
                 'christening': {'date': '3 MAR 1876', 'place': 'Riehen'}},
            ],
            'families': [
                {'id': 110, 'husband': 101, 'wife': 102, 'children': [103],
                 'marriage': {'date': '1 MAY 1875'}},
            ],
        },
    ],
}


def example_comparison():
    """Example workflow comparing two datasets."""

    # Step 1: Load the datasets
    ground_truth = Dataset.from_dict(GROUND_TRUTH)
    candidate = Dataset.from_dict(CANDIDATE)
    print(ground_truth)
    print(candidate)

    # Step 2: Match people
    engine = ComparisonEngine(ground_truth, candidate)
    print("\n=== Matches ===")
    for entry_match in engine.match_entries():
        for match in entry_match.matches:
            print(f"{entry_match.entry_id}: {match.person1_name} <-> {match.person2_name} ({match.match_type.value})")

    # Step 3: Compute reports
    results = engine.run()
    print("\n=== People ===")
    print(f"Precision rate: {results['people'].precision_rate:.1f}%")
    print("\n=== Events ===")
    print(f"Recall error rate: {results['events'].recall_error_rate:.1f}%")
    print(f"Precision error rate: {results['events'].precision_error_rate:.1f}%")

    print("\n=== Quality ===")
    for facet, score in engine.quality_metrics(results).items():
        print(f"{facet:14} P={score.precision:6.1f} R={score.recall:6.1f} F1={score.f1:6.1f}")

    # Step 4: Export
    with open('comparison_results.json', 'w') as f:
        json.dump({'summary': engine.summary(), 'results': results.to_dict()}, f, indent=2, ensure_ascii=False)
    print("\nResults exported to comparison_results.json")


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    example_comparison()
