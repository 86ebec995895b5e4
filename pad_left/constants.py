SPACE = " "

# Treated as a space when used as a fill character
NULL_CHAR = "\x00"

ZERO_CHAR = "0"

#
# Short space padding
#
SHORT_PAD_LENGTH = 20
SHORT_SPACES = SPACE * SHORT_PAD_LENGTH
