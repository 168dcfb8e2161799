class FailurePrefixes:
    """Message prefixes for failures produced by a raising callable."""
    MAPPING = "Mapping failed: "
    BINDING = "Binding operation failed: "


class CorrelationIds:
    """Correlation id defaults shared by the context and the options."""
    LENGTH = 8
    DEFAULT_HEADER = "X-Correlation-ID"


DEFAULT_ERROR_MESSAGE = "Unknown error"
SETTINGS_ENV_PREFIX = "RESULT_"
