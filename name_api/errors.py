# name_api/errors.py


class ConfigurationError(RuntimeError):
    """Raised when the application settings are missing or invalid.

    The underlying pydantic ``ValidationError`` is chained as ``__cause__``.
    """
