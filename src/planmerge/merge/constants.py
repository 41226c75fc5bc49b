"""Fixed thresholds and keys used by the table merge engine."""

# Minimum similarity for a fuzzy header or row-label match
MATCH_THRESHOLD = 0.7

# Score given when one normalized label contains the other
CONTAINMENT_SCORE = 0.8

# Prefix-overlap ratios below this are treated as no match at all
MIN_PARTIAL_SCORE = 0.5

DEFAULT_COLUMN_WIDTH = 200
ROW_LABEL_COLUMN_WIDTH = 150

# Header stems that identify the column holding each row's label
ROW_LABEL_KEYWORDS = ("stage", "day", "phase", "section")

PERIOD_ROW_LABEL_KEYS = {
    "daily": "stage",
    "weekly": "day",
    "monthly": "phase",
}
FALLBACK_ROW_LABEL_KEY = "section"

# Normalized keys that a full table replace keeps as built-in columns
DEFAULT_SEMANTIC_KEYS = (
    "focus",
    "languagetarget",
    "assessment",
    "teacheractions",
    "studentactions",
)
