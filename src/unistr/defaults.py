"""Default argument values shared by the unistr operations and the CLI."""

# Padding and trimming
DEFAULT_FILL = " "

# split() with no separator yields individual codepoints
DEFAULT_SEPARATOR = ""

# capwords() word boundary
DEFAULT_WORD_SEPARATOR = " "

# expandtabs() replacement width (fixed, not column-aware)
DEFAULT_TAB_SIZE = 8

# nl2br() fragment inserted before each line break
DEFAULT_BREAK_TAG = "<br>"

# replace() count meaning "every occurrence"
REPLACE_ALL = -1
