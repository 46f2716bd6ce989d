"""Constants for the describer project."""

DESCRIBER_STR = "describer"

ELLIPSIS_MARKER = "..."
