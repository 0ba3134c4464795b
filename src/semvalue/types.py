"""Type aliases needed in the package."""

from typing import Literal, TypeAlias

Identifier: TypeAlias = str
Identifiers: TypeAlias = tuple[Identifier, ...]
Comparison: TypeAlias = Literal[-1, 0, 1]
