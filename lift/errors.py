"""Exceptions raised while building llms.txt outputs."""


class LiftError(Exception):
    """Base class for errors that abort a run."""


class ScanError(LiftError):
    """The input directory is missing, not a directory, or unreadable."""


class OutputError(LiftError):
    """The output directory could not be created or written."""


class ProcessingError(LiftError):
    """A pipeline stage failed; wraps the underlying cause."""
