"""planmerge - Smart lesson-plan table import."""

__version__ = "0.1.0"
