"""
Built-in facet comparators.

Import comparators here to automatically register them.
"""

from gedcom_quality.comparison.comparators.people import PeopleComparator
from gedcom_quality.comparison.comparators.references import ReferenceComparator
from gedcom_quality.comparison.comparators.relationships import RelationshipComparator, relationship_letters
from gedcom_quality.comparison.comparators.events import EventComparator, spouse_families

__all__ = [
    'PeopleComparator',
    'ReferenceComparator',
    'RelationshipComparator',
    'EventComparator',
    'relationship_letters',
    'spouse_families',
]
