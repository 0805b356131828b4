"""Exceptions raised by JournalChart."""


class JournalChartError(Exception):
    """Base class for all JournalChart errors."""


class InvalidArgumentError(JournalChartError, ValueError):
    """Raised when a caller passes an input the generator cannot accept."""


class ConfigError(JournalChartError):
    """Raised when the configuration file cannot be read or parsed."""
