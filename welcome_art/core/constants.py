# welcome_art/core/constants.py
# Constants & enums for listing formats, config views & process exit codes

from enum import Enum, IntEnum


# * Template listing presentation modes (formatting only, discovery is shared)
class ListMode(Enum):
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"


# * Which config file(s) `config show` prints
class ShowTarget(Enum):
    SYSTEM = "system"
    USER = "user"
    BOTH = "both"


# * Process exit codes per failure kind
class ExitCode(IntEnum):
    SUCCESS = 0
    GENERAL_ERROR = 1
    CONFIG_ERROR = 3
    TEMPLATE_ERROR = 4
    PERMISSION_DENIED = 5


# placeholder shown for user-scope keys that are absent
NOT_SET = "(not set)"
