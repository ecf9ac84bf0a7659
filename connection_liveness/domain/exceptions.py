"""Custom exceptions for connection liveness monitoring.

The monitor itself never raises: staleness, skipped reopens and collaborator
failures are reported through the diagnostic log. Exceptions here cover the
setup path only.
"""


class ConfigurationError(ValueError):
    """Monitor configuration is invalid.

    Raised by the configuration loader when the YAML cannot be parsed or a
    value fails schema validation.

    Example:
        >>> raise ConfigurationError("stale_threshold must be positive")
    """
