"""
name_similarity.py - fuzzy personal-name comparison for genealogical records.

Decides whether two personal names are the same, or plausibly the same, using
cheap deterministic checks before a phonetic fallback:
    - case-insensitive equality
    - initials and abbreviated given names ("J." / "J. Friedrich")
    - known name-variation groups (Catherine / Katherine / Kathryn ...)
    - minor spelling variations (Levenshtein distance)
    - Soundex equality

Names are compared component by component: two names are similar only when
both the given names and the surnames are similar, so people sharing just a
common given name are not matched.

Module: gedcom_quality.name_similarity
"""

__all__ = [
    'name_key',
    'exact_match',
    'similar_match',
    'components_similar',
    'surname_similar',
    'is_abbreviation',
    'are_name_variations',
    'is_minor_spelling_variation',
    'get_soundex',
    'levenshtein_distance',
    'load_name_variations',
]

import logging
import re
from functools import lru_cache
from pathlib import Path
from typing import Dict, FrozenSet, List, Optional, Tuple

import yaml
from rapidfuzz.distance import Levenshtein
from unidecode import unidecode

logger = logging.getLogger(__name__)

NAME_VARIATIONS_FILE = Path(__file__).parent / "data" / "name_variations.yaml"

EMPTY_SOUNDEX = "0000"

# Minor spelling variation thresholds
MIN_SPELLING_LENGTH = 3
MAX_LENGTH_DIFFERENCE = 2
SHORT_NAME_LENGTH = 6
SHORT_NAME_MAX_DISTANCE = 1
LONG_NAME_MAX_DISTANCE = 2

INITIAL_RE = re.compile(r'^[^\W\d_]\.?$')

_SOUNDEX_GROUPS = {
    'BFPV': '1',
    'CGJKQSXZ': '2',
    'DT': '3',
    'L': '4',
    'MN': '5',
    'R': '6',
}
_SOUNDEX_CODES: Dict[str, str] = {
    letter: code for letters, code in _SOUNDEX_GROUPS.items() for letter in letters
}


def _norm(component: Optional[str]) -> str:
    return (component or '').strip().lower()


def name_key(name) -> Tuple[str, str]:
    """
    Return the key under which two names compare as exactly equal.

    Args:
        name: Any object with ``given_name`` and ``surname`` attributes.

    Returns:
        Tuple[str, str]: Lower-cased (given name, surname).
    """
    return _norm(name.given_name), _norm(name.surname)


def exact_match(first, second) -> bool:
    """Case-insensitive equality of given name and surname independently."""
    return name_key(first) == name_key(second)


def similar_match(first, second) -> bool:
    """
    True when the names match exactly, or when both the given-name pair and
    the surname pair independently pass :func:`components_similar`.
    """
    if exact_match(first, second):
        return True
    return (components_similar(first.given_name, second.given_name)
            and components_similar(first.surname, second.surname))


def surname_similar(first: Optional[str], second: Optional[str]) -> bool:
    """Similarity check applied to two surnames on their own."""
    return components_similar(first, second)


def components_similar(first: Optional[str], second: Optional[str]) -> bool:
    """
    Compare two name components (two given names, or two surnames).

    Checks are evaluated in order and short-circuit on the first success:
    equality, abbreviation, variation group, minor spelling variation and
    finally Soundex.

    Args:
        first (str): First name component.
        second (str): Second name component.

    Returns:
        bool: True if the components are the same or plausibly the same.
    """
    a = _norm(first)
    b = _norm(second)
    if a == b:
        return True
    if is_abbreviation(a, b):
        return True
    if are_name_variations(a, b):
        return True
    if is_minor_spelling_variation(a, b):
        return True
    soundex_a = get_soundex(a)
    return soundex_a != EMPTY_SOUNDEX and soundex_a == get_soundex(b)


def _is_initial(token: str) -> bool:
    return bool(INITIAL_RE.match(token))


def _close_spelling(first: str, second: str) -> bool:
    return _norm(first) == _norm(second) or is_minor_spelling_variation(first, second)


def is_abbreviation(first: Optional[str], second: Optional[str]) -> bool:
    """
    Check whether one component abbreviates the other.

    Two patterns are recognised:
        - a single letter, optionally followed by a period, matching the first
          letter of the other side ("J." / "Johann");
        - a two-token "Initial. Fullname" against "Fullname", or against a
          longer name whose first token starts with the initial
          ("J. Friedrich" / "Friedrich", "J. Friedrich" / "Johann Friedrich").
          The full-name part only needs to match with a minor spelling
          variation.
    """
    a = (first or '').strip()
    b = (second or '').strip()
    if not a or not b:
        return False

    for short, full in ((a, b), (b, a)):
        if _is_initial(short) and short[0].lower() == full[0].lower():
            return True

    for short, full in ((a, b), (b, a)):
        tokens = short.split()
        if len(tokens) != 2 or not _is_initial(tokens[0]) or _is_initial(tokens[1]):
            continue
        initial, remainder = tokens
        others = full.split()
        if len(others) == 1:
            if _close_spelling(remainder, others[0]):
                return True
        elif len(others) >= 2 and not _is_initial(others[0]):
            if (others[0][0].lower() == initial[0].lower()
                    and _close_spelling(remainder, ' '.join(others[1:]))):
                return True
    return False


@lru_cache(maxsize=None)
def load_name_variations(path: Path = NAME_VARIATIONS_FILE) -> Dict[str, FrozenSet[int]]:
    """
    Load the name-variation groups and index them by name.

    Args:
        path (Path): YAML file with a ``name_variations`` list of groups.

    Returns:
        Dict[str, FrozenSet[int]]: Lower-cased name -> indices of the groups
        it belongs to.
    """
    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}
    groups: List[List[str]] = data.get('name_variations', [])
    index: Dict[str, set] = {}
    for group_num, group in enumerate(groups):
        for name in group:
            index.setdefault(_norm(str(name)), set()).add(group_num)
    logger.debug(f"Loaded {len(groups)} name variation groups from {path}")
    return {name: frozenset(group_nums) for name, group_nums in index.items()}


def are_name_variations(first: Optional[str], second: Optional[str]) -> bool:
    """True if both components belong to the same name-variation group."""
    a = _norm(first)
    b = _norm(second)
    if not a or not b:
        return False
    variations = load_name_variations()
    groups_a = variations.get(a)
    groups_b = variations.get(b)
    if not groups_a or not groups_b:
        return False
    return bool(groups_a & groups_b)


def is_minor_spelling_variation(first: Optional[str], second: Optional[str]) -> bool:
    """
    True for small typos: both at least 3 characters, lengths within 2 of each
    other, and an edit distance of at most 1 (names up to 6 characters) or 2
    (longer names).
    """
    a = _norm(first)
    b = _norm(second)
    if len(a) < MIN_SPELLING_LENGTH or len(b) < MIN_SPELLING_LENGTH:
        return False
    if abs(len(a) - len(b)) > MAX_LENGTH_DIFFERENCE:
        return False
    if max(len(a), len(b)) <= SHORT_NAME_LENGTH:
        max_distance = SHORT_NAME_MAX_DISTANCE
    else:
        max_distance = LONG_NAME_MAX_DISTANCE
    return levenshtein_distance(a, b) <= max_distance


def get_soundex(text: Optional[str]) -> str:
    """
    Soundex code of a name.

    The text is transliterated to ASCII and upper-cased, and anything that is
    not a letter is dropped. The first letter is kept; the remaining letters
    are coded with the six consonant classes, adjacent duplicate codes are
    collapsed and uncoded letters (vowels, H, W, Y) break a run of duplicates.

    Returns:
        str: Letter followed by three digits, or "0000" for empty input.
    """
    letters = [c for c in unidecode(text or '').upper() if 'A' <= c <= 'Z']
    if not letters:
        return EMPTY_SOUNDEX

    code = [letters[0]]
    previous = _SOUNDEX_CODES.get(letters[0], '')
    for letter in letters[1:]:
        digit = _SOUNDEX_CODES.get(letter, '')
        if digit and digit != previous:
            code.append(digit)
        previous = digit
    return ''.join(code)[:4].ljust(4, '0')


def levenshtein_distance(first: Optional[str], second: Optional[str]) -> int:
    """Edit distance with unit insert, delete and substitute costs."""
    return Levenshtein.distance(first or '', second or '')
