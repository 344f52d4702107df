"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from .enums import Command

EARTH_RADIUS_M = 6_371_000
DEFAULT_OFFICE_RADIUS_M = 100
DEFAULT_HTTP_TIMEOUT_SECONDS = 10

# Display name used when the chat backend cannot tell us who the user is.
DEFAULT_EMPLOYEE_NAME = "Сотрудник"

COMMAND_ALIASES: dict[Command, tuple[str, ...]] = {
    Command.CHECK_IN: ("пришел", "start", "начал"),
    Command.CHECK_OUT: ("ушел", "уход", "конец"),
    Command.STATUS: ("статус", "status"),
    Command.HELP: ("помощь", "help"),
}

# Reverse lookup generated from COMMAND_ALIASES.
COMMAND_BY_ALIAS: dict[str, Command] = {
    alias: command for command, aliases in COMMAND_ALIASES.items() for alias in aliases
}
