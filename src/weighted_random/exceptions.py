"""Exception hierarchy for weighted-random.

All exceptions derive from WeightedRandomError. Input validation failures
derive from SelectorValidationError; InternalConsistencyError does not,
because it signals a defect in the library rather than bad caller input.
"""

from __future__ import annotations

from typing import Any


class WeightedRandomError(Exception):
    """Base exception for all weighted-random errors."""


class SelectorValidationError(WeightedRandomError):
    """The items passed to a selector are invalid."""


class EmptyInputError(SelectorValidationError):
    """No items were supplied (``None`` or an empty sequence)."""

    def __init__(self) -> None:
        super().__init__("The sequence of weighted items cannot be None or empty")


class DuplicateIdentifierError(SelectorValidationError):
    """The same identifier appears more than once.

    Attributes:
        identifier: The first identifier found to repeat.
    """

    def __init__(self, identifier: Any) -> None:
        self.identifier = identifier
        super().__init__(f"Duplicate identifier detected: {identifier!r}")


class WeightSumMismatchError(SelectorValidationError):
    """Item weights do not add up to the distribution size.

    Attributes:
        expected: The required distribution size.
        actual: The computed sum of all weights.
    """

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"The weights of each item must add up to {expected}. "
            f"They currently add up to {actual}"
        )


class InvalidWeightError(SelectorValidationError):
    """A weight is not a positive integer.

    Attributes:
        identifier: Identifier of the offending item.
        weight: The rejected weight value.
    """

    def __init__(self, identifier: Any, weight: Any) -> None:
        self.identifier = identifier
        self.weight = weight
        super().__init__(
            f"Weight for identifier {identifier!r} must be a positive integer, got {weight!r}"
        )


class InvalidDistributionSizeError(SelectorValidationError):
    """The distribution size is not an integer of at least 1.

    Attributes:
        distribution_size: The rejected value.
    """

    def __init__(self, distribution_size: Any) -> None:
        self.distribution_size = distribution_size
        super().__init__(
            f"The distribution size must be an integer of at least 1, got {distribution_size!r}"
        )


class InternalConsistencyError(WeightedRandomError):
    """The built distribution does not have the expected length.

    Unreachable for correct construction logic. Never retry on this error.

    Attributes:
        expected: The distribution size the selector was built for.
        actual: The length of the distribution that was actually built.
    """

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"The weight distribution should have a size of {expected} slots. "
            f"It currently contains {actual}"
        )


class UnexpectedIdentifierError(WeightedRandomError):
    """A tally received an identifier outside its known set.

    Attributes:
        identifier: The unexpected identifier.
    """

    def __init__(self, identifier: Any) -> None:
        self.identifier = identifier
        super().__init__(f"An identifier was drawn that should not have been: {identifier!r}")


class ConfigValidationError(WeightedRandomError):
    """Configuration field validation failed.

    Raised when overrides name unknown fields or carry values that fail
    type or range validation.
    """
