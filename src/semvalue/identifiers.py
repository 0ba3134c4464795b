"""Pre-release identifier grammar and precedence."""

import re
from collections.abc import Sequence

from .types import Comparison, Identifier

PRE_RELEASE_IDENTIFIER = re.compile(
    r"0|[1-9][0-9]*|[0-9]+[A-Z-]+[0-9A-Z-]*|[A-Z-]+[0-9A-Z-]*",
    re.IGNORECASE | re.ASCII,
)
_NUMERIC_IDENTIFIER = re.compile(r"[0-9]+")


def is_valid_pre_release_identifier(identifier: Identifier) -> bool:
    """Check an identifier against the pre-release grammar.

    An identifier is valid if it is ``"0"``, a decimal numeral without a
    leading zero, or a token of ASCII letters, digits and hyphens containing
    at least one non-digit. Letters match case-insensitively.

    Args:
        identifier: The identifier to check.

    Returns:
        True if the identifier is valid, False otherwise.
    """
    return PRE_RELEASE_IDENTIFIER.fullmatch(identifier) is not None


def is_numeric_identifier(identifier: Identifier) -> bool:
    """Check whether an identifier consists only of ASCII digits."""
    return _NUMERIC_IDENTIFIER.fullmatch(identifier) is not None


def _sign(value: int) -> Comparison:
    if value < 0:
        return -1
    if value > 0:
        return 1
    return 0


def compare_identifiers(left: Identifier, right: Identifier) -> Comparison:
    """Compare two pre-release identifiers by precedence.

    Numeric identifiers compare numerically and sort before alphanumeric
    identifiers. Alphanumeric identifiers compare lexically in ASCII order,
    case-sensitively.

    Args:
        left: First identifier.
        right: Second identifier.

    Returns:
        -1 if left has lower precedence, 1 if higher, 0 if equal.
    """
    left_numeric = is_numeric_identifier(left)
    right_numeric = is_numeric_identifier(right)

    if left_numeric and right_numeric:
        # Digit strings order by length, then lexically; no int() size limit.
        left_key = (len(left.lstrip("0")), left.lstrip("0"))
        right_key = (len(right.lstrip("0")), right.lstrip("0"))
        return _sign((left_key > right_key) - (left_key < right_key))
    if left_numeric:
        return -1
    if right_numeric:
        return 1
    return _sign((left > right) - (left < right))


def compare_pre_release(
    left: Sequence[Identifier], right: Sequence[Identifier]
) -> Comparison:
    """Compare two pre-release identifier lists by precedence.

    An empty list means "no pre-release" and sorts after any non-empty list.
    Non-empty lists compare identifier by identifier; when one list is a
    strict prefix of the other, the shorter one sorts first.

    Args:
        left: First pre-release list.
        right: Second pre-release list.

    Returns:
        -1 if left has lower precedence, 1 if higher, 0 if equal.
    """
    if not left and not right:
        return 0
    if not left:
        return 1
    if not right:
        return -1

    for left_id, right_id in zip(left, right, strict=False):
        result = compare_identifiers(left_id, right_id)
        if result:
            return result

    return _sign(len(left) - len(right))
