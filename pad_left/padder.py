from typing import (
    Any,
    List,
    Optional,
    Type,
)

from eth_utils import (
    get_extended_debug_logger,
)

from pad_left._utils.datatypes import (
    Configurable,
)
from pad_left.constants import (
    NULL_CHAR,
    SHORT_SPACES,
    SPACE,
)
from pad_left.validation import (
    validate_gte,
    validate_is_blank,
    validate_is_integer,
    validate_is_single_character,
    validate_is_text,
)


class LeftPadder(Configurable):
    """
    Left pads text to a minimum length.

    Padding with spaces by fewer than ``len(short_pad_buffer)`` characters is
    served by slicing a pre-built run of spaces.  Everything else is built by
    doubling up blocks of the fill character.  Both produce the same result.
    """

    logger = get_extended_debug_logger("pad_left.padder.LeftPadder")

    # fill character used when none is given to ``pad``
    fill_char: str = SPACE

    # pre-built spaces for the fast path; empty disables it
    short_pad_buffer: str = SHORT_SPACES

    @classmethod
    def configure(
        cls, __name__: Optional[str] = None, **overrides: Any
    ) -> Type["LeftPadder"]:
        padder_class = super().configure(__name__, **overrides)
        validate_is_text(padder_class.short_pad_buffer, title="Short pad buffer")
        validate_is_blank(padder_class.short_pad_buffer, title="Short pad buffer")
        return padder_class

    @classmethod
    def pad(cls, value: str, length: int, fill_char: Optional[str] = None) -> str:
        """
        Return ``value`` preceded by enough fill characters to make it at least
        ``length`` characters long.  ``value`` is returned as-is when it is
        already long enough; it is never truncated.

        A null ``fill_char`` pads with spaces.
        """
        if fill_char is None:
            fill_char = cls.fill_char

        validate_is_text(value, title="Padded value")
        validate_is_integer(length, title="Pad length")
        validate_gte(length, 0, title="Pad length")
        validate_is_single_character(fill_char, title="Fill character")

        deficit = max(0, length - len(value))
        if deficit == 0:
            return value

        if fill_char == NULL_CHAR:
            fill_char = SPACE

        if fill_char == SPACE and deficit < len(cls.short_pad_buffer):
            return cls._short_pad(value, deficit)
        else:
            return cls._doubling_pad(value, deficit, fill_char)

    @classmethod
    def _short_pad(cls, value: str, deficit: int) -> str:
        return cls.short_pad_buffer[:deficit] + value

    @classmethod
    def _doubling_pad(cls, value: str, deficit: int, fill_char: str) -> str:
        cls.logger.debug2("Padding with %d x %r", deficit, fill_char)

        pieces: List[str] = []
        remaining = deficit
        while remaining > 0:
            if remaining & 1:
                pieces.append(fill_char)
            remaining >>= 1
            if remaining > 0:
                pieces.append(fill_char * remaining)

        pieces.append(value)
        return "".join(pieces)
