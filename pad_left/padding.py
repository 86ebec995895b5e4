from eth_utils.toolz import (
    curry,
)

from pad_left.constants import (
    SPACE,
    ZERO_CHAR,
)
from pad_left.padder import (
    LeftPadder,
)


@curry
def left_pad(value: str, length: int, fill_char: str = SPACE) -> str:
    return LeftPadder.pad(value, length, fill_char)


zpad_left = left_pad(fill_char=ZERO_CHAR)
