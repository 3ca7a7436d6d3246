"""Access decision outcomes and the operations a view mediates."""
from enum import Enum, auto


class AccessDecision(Enum):
    ALLOW = auto()
    DENY = auto()
    REVOKED = auto()

    def is_permitted(self) -> bool:
        """Returns True only for ALLOW."""
        return self is AccessDecision.ALLOW


class Operation(Enum):
    READ = auto()
    WRITE = auto()
    CONTAINS = auto()
    REMOVE = auto()
    DEFINE = auto()
    LIST_KEYS = auto()
    HAS_OWN = auto()
    DESCRIBE = auto()

    @property
    def label(self) -> str:
        """Lower-case name used in error messages and logs."""
        return self.name.lower()
