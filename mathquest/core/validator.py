"""
Free-text answer validation.

Children type answers in many shapes, so the validator tries several legal
interpretations before giving up:
- Exact match after normalization
- Numbers: integers, decimals, English word numbers ("five"), and numbers
  followed by a unit or word ("65 degrees", "five faces")
- Fractions: "3/4" and mixed numbers "1 3/4"

Nothing here raises; an unparseable answer is simply not a match.
"""

from __future__ import annotations

import re

# Absolute tolerance for float equivalence of numeric answers.
ANSWER_TOLERANCE = 1e-4

WORD_NUMBERS = {
    "zero": 0,
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
    "ten": 10,
    "eleven": 11,
    "twelve": 12,
    "thirteen": 13,
    "fourteen": 14,
    "fifteen": 15,
    "sixteen": 16,
    "seventeen": 17,
    "eighteen": 18,
    "nineteen": 19,
    "twenty": 20,
}

_NUMBER = r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)"
_NUMBER_RE = re.compile(rf"^{_NUMBER}$")
# A suffix is anything after a space that does not start with a digit or "/"
# ("15 km/h", "96 m²"), or an attached CJK unit / percent sign. "3/4", "1 3/4"
# and "4x^3" are never read as a bare leading number.
_NUMBER_WITH_SUFFIX_RE = re.compile(rf"^({_NUMBER})(?:\s+[^\d\s/].*|\s*[%\u4e00-\u9fff].*)$")
_WORD_WITH_SUFFIX_RE = re.compile(r"^((?:-|negative |minus )?[a-z]+)\s+\S.*$")
_FRACTION_RE = re.compile(r"^([+-]?\d+)\s*/\s*([+-]?\d+)$")
_MIXED_RE = re.compile(r"^([+-]?)(\d+)\s+(\d+)\s*/\s*(\d+)$")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_answer(answer: str) -> str:
    """Trim, lowercase, drop thousands separators and degree signs, collapse spaces."""
    value = answer.strip().lower()
    value = value.replace(",", "").replace("，", "").replace("°", "")
    return _WHITESPACE_RE.sub(" ", value).strip()


def _parse_word_number(value: str) -> float | None:
    sign = 1
    for prefix in ("-", "negative ", "minus "):
        if value.startswith(prefix):
            sign = -1
            value = value[len(prefix):].strip()
            break
    if value in WORD_NUMBERS:
        return float(sign * WORD_NUMBERS[value])
    return None


def parse_numeric(value: str) -> float | None:
    """
    Parse a normalized answer as a single number.

    Tries, in order: a numeric literal, a word number, a numeric literal
    followed by a suffix, and a word number followed by a suffix.
    """
    if not value:
        return None

    if _NUMBER_RE.match(value):
        return float(value)

    word = _parse_word_number(value)
    if word is not None:
        return word

    match = _NUMBER_WITH_SUFFIX_RE.match(value)
    if match:
        return float(match.group(1))

    match = _WORD_WITH_SUFFIX_RE.match(value)
    if match:
        return _parse_word_number(match.group(1))

    return None


def parse_fraction(value: str) -> float | None:
    """Parse "N/D" or a mixed number "W N/D". Zero denominators do not parse."""
    match = _FRACTION_RE.match(value)
    if match:
        numerator = int(match.group(1))
        denominator = int(match.group(2))
        if denominator == 0:
            return None
        return numerator / denominator

    match = _MIXED_RE.match(value)
    if match:
        sign = -1 if match.group(1) == "-" else 1
        whole = int(match.group(2))
        numerator = int(match.group(3))
        denominator = int(match.group(4))
        if denominator == 0:
            return None
        return sign * (whole + numerator / denominator)

    return None


def validate_answer(
    user_answer: str,
    correct_answer: str,
    *,
    tolerance: float = ANSWER_TOLERANCE,
) -> bool:
    """
    Check whether a learner's free-text answer is equivalent to the correct one.

    Args:
        user_answer: What the learner typed
        correct_answer: Canonical answer string
        tolerance: Absolute tolerance for numeric comparison

    Returns:
        True if the answers match under any supported interpretation
    """
    user = normalize_answer(user_answer or "")
    correct = normalize_answer(correct_answer or "")

    if user == correct:
        return True

    user_num = parse_numeric(user)
    correct_num = parse_numeric(correct)
    if user_num is not None and correct_num is not None:
        return abs(user_num - correct_num) < tolerance

    user_frac = parse_fraction(user)
    correct_frac = parse_fraction(correct)
    if user_frac is None and correct_frac is None:
        return False
    if user_frac is None:
        user_frac = user_num
    if correct_frac is None:
        correct_frac = correct_num
    if user_frac is not None and correct_frac is not None:
        return abs(user_frac - correct_frac) < tolerance

    return False
