"""
NumberForm - Decide whether a string reads as a roman numeral or an arabic number.

Two classification strategies are supported:

- PATTERN (default): the whole string must consist of the roman letters
  I, V, X, L, C, D, M. The empty string matches trivially.
- PARSE: the string is tried as a base-10 signed integer; anything that
  fails to parse is treated as roman.

The strategies disagree on malformed mixed input such as "12X"
(ARABIC under PATTERN, ROMAN under PARSE). This module only looks at the
lexical shape of the input; "IIII" is roman form even though it is not a
canonical numeral.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional
import logging
import re

logger = logging.getLogger(__name__)

ROMAN_LETTERS = "IVXLCDM"

ROMAN_PATTERN = re.compile(rf"[{ROMAN_LETTERS}]*")
# ASCII-only folding, so e.g. dotless "ı" does not match "I"
ROMAN_PATTERN_IGNORECASE = re.compile(rf"[{ROMAN_LETTERS}]*", re.IGNORECASE | re.ASCII)


class NumberForm(Enum):
    """Lexical form of a number string."""
    ROMAN = "roman"
    ARABIC = "arabic"


class ClassificationStrategy(Enum):
    """How a string is classified."""
    PATTERN = "pattern"  # Full match against the roman letter set
    PARSE = "parse"  # Base-10 integer parse attempt


@dataclass(frozen=True)
class ParseResult:
    """Outcome of a non-raising integer parse."""

    ok: bool
    value: Optional[int] = None


def try_parse_int(text: str) -> ParseResult:
    """
    Parse text as a base-10 signed integer without raising.

    Follows int(text, 10): surrounding whitespace, a leading sign and
    digit-group underscores are accepted. Strings longer than the
    interpreter's integer digit limit count as failures.

    Args:
        text: String to parse

    Returns:
        ParseResult with ok=True and the value on success, ok=False otherwise
    """
    try:
        return ParseResult(ok=True, value=int(text, 10))
    except ValueError:
        return ParseResult(ok=False)


def matches_roman_letters(text: str, ignore_case: bool = False) -> bool:
    """True if every character of text is a roman letter (empty string included)."""
    pattern = ROMAN_PATTERN_IGNORECASE if ignore_case else ROMAN_PATTERN
    return pattern.fullmatch(text) is not None


def classify(
    text: str,
    strategy: ClassificationStrategy = ClassificationStrategy.PATTERN,
    ignore_case: bool = False,
) -> NumberForm:
    """
    Classify text as roman or arabic number form.

    Args:
        text: Any string, possibly empty
        strategy: PATTERN or PARSE
        ignore_case: Accept lowercase roman letters (PATTERN only)

    Returns:
        NumberForm.ROMAN or NumberForm.ARABIC

    Raises:
        ValueError: If strategy is not a ClassificationStrategy
    """
    if strategy is ClassificationStrategy.PARSE:
        is_roman = not try_parse_int(text).ok
    elif strategy is ClassificationStrategy.PATTERN:
        is_roman = matches_roman_letters(text, ignore_case=ignore_case)
    else:
        raise ValueError(f"strategy must be a ClassificationStrategy, got {strategy!r}")

    form = NumberForm.ROMAN if is_roman else NumberForm.ARABIC
    logger.debug("Classified %r as %s (%s)", text, form.value, strategy.value)
    return form


def is_roman_number(
    text: str,
    strategy: ClassificationStrategy = ClassificationStrategy.PATTERN,
    ignore_case: bool = False,
) -> bool:
    """Boolean view of classify(): True means roman form."""
    return classify(text, strategy=strategy, ignore_case=ignore_case) is NumberForm.ROMAN
