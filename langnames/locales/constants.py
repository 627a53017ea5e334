"""
langnames/locales/constants.py
Static strings shared by both entry points.
The header lines are consumed by downstream readers; keep them byte-stable.
"""

# ---------------------------------------------------------------------
# Locale used for the "English display name" column
# ---------------------------------------------------------------------
REFERENCE_LOCALE = "en"

# Tags that parse to the root/undefined locale
ROOT_LANGUAGES = {"und", "root"}

INVALID_TAG_MESSAGE = "Invalid language tag."

# ---------------------------------------------------------------------
# Output headers
# ---------------------------------------------------------------------
BATCH_HEADER = "# Language tag\tEnglish display name\tLocalized display name"
STREAM_HEADER = BATCH_HEADER + "\tError message, if any"

USAGE = (
    "This program should be passed, on the command line, a list of language tags.",
    "Example: language-names en fr pt-br",
)
