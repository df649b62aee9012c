"""gedcom_quality package: measures how well a candidate genealogical dataset reproduces a ground truth."""

from gedcom_quality.dataset import Dataset
from gedcom_quality.entry import Entry
from gedcom_quality.family import Family
from gedcom_quality.gedcom_date import GedcomDate
from gedcom_quality.life_event import LifeEvent
from gedcom_quality.name import Name
from gedcom_quality.person import Person
from gedcom_quality.comparison import ComparisonEngine, PersonMatcher

__all__ = [
    "ComparisonEngine",
    "Dataset",
    "Entry",
    "Family",
    "GedcomDate",
    "LifeEvent",
    "Name",
    "Person",
    "PersonMatcher",
]
