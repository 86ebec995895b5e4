from typing import (
    Any,
)

from eth_utils import (
    ValidationError,
)

from pad_left.constants import (
    SPACE,
)


def validate_is_text(value: Any, title: str = "Value") -> None:
    if not isinstance(value, str):
        raise ValidationError(f"{title} must be a text string.  Got: {type(value)}")


def validate_is_integer(value: Any, title: str = "Value") -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValidationError(f"{title} must be an integer.  Got: {type(value)}")


def validate_gte(value: int, minimum: int, title: str = "Value") -> None:
    if value < minimum:
        raise ValidationError(
            f"{title} {value} is not greater than or equal to {minimum}"
        )


def validate_is_single_character(value: Any, title: str = "Value") -> None:
    validate_is_text(value, title=title)
    if len(value) != 1:
        raise ValidationError(
            f"{title} must be a single character.  Got {value!r} of length {len(value)}"
        )


def validate_is_blank(value: str, title: str = "Value") -> None:
    """
    Checks that ``value`` is made up of spaces only.  The empty string passes.
    """
    if value.strip(SPACE):
        raise ValidationError(f"{title} must contain only spaces.  Got: {value!r}")
