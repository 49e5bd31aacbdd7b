class EmptyResponseError(RuntimeError):
    """The remote model returned no usable text."""


class InsightParseError(ValueError):
    """The model output could not be turned into insights."""


class MissingAPIKeyError(RuntimeError):
    """No API key was configured for the remote model."""
