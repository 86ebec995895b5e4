from importlib.metadata import (
    version as __version,
)

from pad_left.padder import (
    LeftPadder,
)
from pad_left.padding import (
    left_pad,
    zpad_left,
)

__version__ = __version("pad-left")
