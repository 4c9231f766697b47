"""Exception types raised by the retrieval pipeline."""


class RetrievalError(Exception):
    """Base class for failures surfaced to the caller."""


class InvalidRequestError(RetrievalError):
    """The request is missing a required field or carries a bad value."""


class DataSourceUnavailableError(RetrievalError):
    """No record store could be reached for this retrieval."""
