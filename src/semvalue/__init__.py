"""semvalue - a validated semantic version value type.

Holds a semantic version (major.minor.patch with optional pre-release and
build metadata), validates pre-release identifiers, renders the canonical
string form and orders versions by precedence.
"""

from ._version import __version__
from .identifiers import (
    compare_identifiers,
    compare_pre_release,
    is_numeric_identifier,
    is_valid_pre_release_identifier,
)
from .semantic_version import SemanticVersion
from .types import Comparison, Identifier, Identifiers

__all__ = [
    "Comparison",
    "Identifier",
    "Identifiers",
    "SemanticVersion",
    "__version__",
    "compare_identifiers",
    "compare_pre_release",
    "is_numeric_identifier",
    "is_valid_pre_release_identifier",
]
