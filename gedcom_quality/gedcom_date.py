"""
gedcom_date.py - Date wrapper for genealogical event comparison.

Provides the GedcomDate class, which keeps the date text exactly as supplied
(dates are compared as strings) and uses ged4py to interpret it when a year or
exactness is needed. Supports:
    - GEDCOM date strings ("15 JUN 1850", "ABT 1762", "BET 1850 AND 1855")
    - ISO 8601 dates ("1850-06-15"), optionally with GEDCOM qualifiers
    - Free-text phrases, from which a year is extracted when present

Module: gedcom_quality.gedcom_date
"""

__all__ = ['GedcomDate']

import logging
import re
from typing import Optional, Union

from ged4py.date import DateValue

logger = logging.getLogger(__name__)

MONTHS = ['JAN', 'FEB', 'MAR', 'APR', 'MAY', 'JUN',
          'JUL', 'AUG', 'SEP', 'OCT', 'NOV', 'DEC']


class GedcomDate:
    """
    Opaque event date.

    Attributes:
        original (str): The date text as supplied ('' when there is no date).
        date (Optional[DateValue]): ged4py interpretation of the text, or None.
    """
    __slots__ = ['original', 'date']

    ISO_DATE_RE = re.compile(r'(?<!\d)(\d{4})-(\d{2})-(\d{2})(?!\d)')
    YEAR_RE = re.compile(r'(?<!\d)(\d{3,4})(?!\d)')

    def __init__(self, date: Union[str, int, "GedcomDate", None] = None):
        """
        Initialize a GedcomDate instance.

        Args:
            date: Date text, a year number, another GedcomDate, or None.

        Raises:
            TypeError: If date is of an unsupported type.
        """
        if isinstance(date, GedcomDate):
            self.original: str = date.original
        elif date is None:
            self.original = ''
        elif isinstance(date, str):
            self.original = date.strip()
        elif isinstance(date, int) and not isinstance(date, bool):
            self.original = str(date)
        else:
            raise TypeError(f"Unsupported date type: {type(date)}")
        self.date: Optional[DateValue] = self._parse(self.original)

    def _iso_to_gedcom(self, text: str) -> str:
        """Rewrite ISO dates inside text as GEDCOM "DD MON YYYY" dates."""
        def replace(match: re.Match) -> str:
            year, month, day = (int(part) for part in match.groups())
            if not 1 <= month <= len(MONTHS):
                return match.group(0)
            return f"{day} {MONTHS[month - 1]} {year}" if day else f"{MONTHS[month - 1]} {year}"
        return self.ISO_DATE_RE.sub(replace, text)

    def _parse(self, text: str) -> Optional[DateValue]:
        if not text:
            return None
        try:
            return DateValue.parse(self._iso_to_gedcom(text.upper()))
        except Exception as e:
            logger.warning(f"Failed to parse date string '{text}': {e}")
            return None

    @property
    def kind(self) -> Optional[str]:
        """Name of the ged4py date kind (SIMPLE, ABOUT, RANGE, PHRASE ...), or None."""
        kind = getattr(self.date, 'kind', None)
        return kind.name if kind is not None else None

    def is_empty(self) -> bool:
        return self.original == ''

    @property
    def year_num(self) -> Optional[int]:
        """
        Return the year as an integer, if possible.

        Ranges and periods give their first year; phrases give the first
        year-like number they contain. A year of 0 counts as unknown.

        Returns:
            int or None: The year value, or None if not found.
        """
        if self.is_empty():
            return None
        if self.date is not None and self.kind != 'PHRASE':
            calendar_date = getattr(self.date, 'date', None) or getattr(self.date, 'date1', None)
            year = getattr(calendar_date, 'year', None)
            if year:
                return int(year)
        match = self.YEAR_RE.search(self.original)
        if match and int(match.group(1)):
            return int(match.group(1))
        logger.debug('GedcomDate: year_num: no year in "%s"', self.original)
        return None

    def is_exact(self) -> bool:
        """True for a plain date with day, month and year."""
        if self.kind != 'SIMPLE':
            return False
        calendar_date = getattr(self.date, 'date', None)
        return bool(calendar_date is not None
                    and getattr(calendar_date, 'day', None)
                    and getattr(calendar_date, 'month', None)
                    and getattr(calendar_date, 'year', None))

    def __str__(self) -> str:
        return self.original

    def __repr__(self) -> str:
        return f"GedcomDate({self.original!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, GedcomDate):
            return NotImplemented
        return self.original == other.original

    def __hash__(self) -> int:
        return hash(self.original)
