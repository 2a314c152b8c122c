"""ANSI markup used by the colored formatter"""


class LogColor:
    """Color start and reset sequences."""

    RESET = "\033[0m"

    BRIGHT_BLACK = "\033[90m"
    BRIGHT_RED = "\033[91m"
    BRIGHT_GREEN = "\033[92m"
    BRIGHT_YELLOW = "\033[93m"
    BRIGHT_BLUE = "\033[94m"
    BRIGHT_MAGENTA = "\033[95m"
    BRIGHT_CYAN = "\033[96m"
    BRIGHT_WHITE = "\033[97m"

    # Metadata segments (timestamp, uptime, prefix fields)
    DEFAULT = BRIGHT_BLACK
