class NightReportError(Exception):
    """Base exception for the night report tooling."""


class ConfigError(NightReportError):
    """Raised when configuration is missing or invalid."""


class InputError(NightReportError):
    """Raised when input text cannot be read or decoded."""


def wrap_exception(error: Exception) -> NightReportError:
    """
    Map non-nightreport exceptions to suitable report_exceptions types.
    Use this at the CLI boundary to standardise error reporting.
    """
    if isinstance(error, NightReportError):
        return error

    if isinstance(error, OSError):
        return InputError(str(error))

    if isinstance(error, UnicodeError):
        return InputError(f"Input is not valid text: {error}")

    return NightReportError(str(error))
