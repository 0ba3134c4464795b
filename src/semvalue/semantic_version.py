"""Models a semantic version value."""

from collections.abc import Mapping, Sequence
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, field_validator
from pydantic_core import PydanticCustomError

from .identifiers import compare_pre_release, is_valid_pre_release_identifier
from .log import get_logger
from .types import Comparison, Identifier, Identifiers

logger = get_logger(__name__)


class SemanticVersion(BaseModel):
    """Semantic version representation.

    Fields are mutable. Every assignment is validated, and a rejected
    assignment leaves the field untouched. Sequences given for
    ``pre_release`` or ``build`` are copied into tuples, so callers never
    share storage with the instance.

    Equality is structural over all five fields. Ordering follows version
    precedence, which ignores ``build``: two versions that differ only in
    build metadata are unequal but ``compare_to`` reports 0 for them.

    Attributes:
        major: Major version number (breaking changes).
        minor: Minor version number (backward-compatible features).
        patch: Patch version number (backward-compatible fixes).
        pre_release: Dot-separated pre-release identifiers, e.g.
            ``("alpha", "1")``. Empty means "not a pre-release".
        build: Build metadata identifiers. Not validated and not part of
            precedence.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    major: NonNegativeInt = Field(default=0, strict=True)
    minor: NonNegativeInt = Field(default=0, strict=True)
    patch: NonNegativeInt = Field(default=0, strict=True)
    pre_release: Identifiers = ()
    build: Identifiers = ()

    def __init__(  # noqa: PLR0913
        self: Self,
        major: int = 0,
        minor: int = 0,
        patch: int = 0,
        pre_release: Sequence[Identifier] = (),
        build: Sequence[Identifier] = (),
        **data: Any,
    ) -> None:
        """Initialize a version, defaulting to ``0.0.0``.

        Raises:
            ValidationError: If a numeric field is negative or a pre-release
                identifier is invalid.
        """
        super().__init__(
            major=major,
            minor=minor,
            patch=patch,
            pre_release=pre_release,
            build=build,
            **data,
        )

    @field_validator("pre_release")
    @classmethod
    def validate_pre_release(cls, value: Identifiers) -> Identifiers:
        """Reject the assignment at the first invalid identifier."""
        for identifier in value:
            if not is_valid_pre_release_identifier(identifier):
                logger.debug("pre_release_identifier_rejected", identifier=identifier)
                raise PydanticCustomError(
                    "invalid_pre_release_identifier",
                    'Invalid pre-release identifier "{identifier}"',
                    {"identifier": identifier},
                )
        return value

    def model_copy(
        self: Self, *, update: Mapping[str, Any] | None = None, deep: bool = False
    ) -> Self:
        """Return a copy, validating any updated fields.

        Every field holds immutable values, so ``deep`` makes no difference.

        Args:
            update: Field values to replace in the copy.
            deep: Accepted for compatibility with ``BaseModel.model_copy``.

        Returns:
            A new version.

        Raises:
            ValidationError: If an updated field is invalid or unknown.
        """
        return self.model_validate({**self.model_dump(), **(update or {})})

    @property
    def is_pre_release(self: Self) -> bool:
        """Whether this version carries pre-release identifiers."""
        return bool(self.pre_release)

    def compare_to(self: Self, other: "SemanticVersion") -> Comparison:
        """Compare this version with another by precedence.

        Major, minor and patch compare numerically. A pre-release sorts
        before the release with the same numbers, and pre-releases compare
        identifier by identifier. Build metadata is ignored.

        Args:
            other: Version to compare against.

        Returns:
            -1 if this version has lower precedence, 1 if higher, 0 if equal.

        Raises:
            TypeError: If other is not a SemanticVersion.
        """
        if not isinstance(other, SemanticVersion):
            raise TypeError(
                f"Cannot compare SemanticVersion with {type(other).__name__}"
            )

        core = (self.major, self.minor, self.patch)
        other_core = (other.major, other.minor, other.patch)
        if core < other_core:
            return -1
        if core > other_core:
            return 1
        return compare_pre_release(self.pre_release, other.pre_release)

    def __lt__(self: Self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self: Self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self: Self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self: Self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __str__(self: Self) -> str:
        """Return string representation of version.

        Returns:
            Version string in format "major.minor.patch[-pre_release][+build]".
        """
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.pre_release:
            text += f"-{'.'.join(self.pre_release)}"
        if self.build:
            text += f"+{'.'.join(self.build)}"
        return text
