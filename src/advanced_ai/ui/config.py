"""UI configuration constants.

Centralizes level names, theme names and layout values for the UI module.
"""


class LogLevel:
    """Log level constants with numeric values for comparison.

    Standard logging hierarchy: DEBUG < INFO < WARNING < ERROR
    Lower numeric value = more verbose (shows more messages).
    """

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40

    _names = {
        DEBUG: "DEBUG",
        INFO: "INFO",
        WARNING: "WARNING",
        ERROR: "ERROR",
    }

    _from_string = {
        "debug": DEBUG,
        "info": INFO,
        "warning": WARNING,
        "error": ERROR,
    }

    @classmethod
    def name(cls, level: int) -> str:
        """Get the name for a log level."""
        return cls._names.get(level, "UNKNOWN")

    @classmethod
    def from_string(cls, level_str: str) -> int:
        """Convert string to log level. Returns DEBUG if invalid."""
        return cls._from_string.get(level_str.lower(), cls.DEBUG)


# Registered Textual theme names, keyed by conversation Theme value
THEME_NAMES = {
    "dark": "advanced-dark",
    "light": "advanced-light",
}

# Send button labels
SEND_LABEL = "Send"

INPUT_PLACEHOLDER = "Type your message..."

# Log panel configuration
LOG_TIMESTAMP_FORMAT = "%H:%M:%S"
LOG_MAX_MESSAGE_LENGTH = 500  # Characters before truncating log messages
