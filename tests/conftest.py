from eth_utils import (
    setup_DEBUG2_logging,
)

#
#  Setup DEBUG2 level logging.
#
setup_DEBUG2_logging()
