"""View configuration."""
from __future__ import annotations

from dataclasses import dataclass

from fieldguard.domain.predicates import DEFAULT_MARKER


@dataclass(frozen=True, slots=True)
class ViewConfig:
    """Options shared by plain and revocable views.

    marker:          prefix that makes a name private when no explicit
                     predicate is passed to the view
    violation_limit: revoke a revocable view after this many denied
                     private-field operations (None = never)
    audit:           record an AccessEvent for every operation
    """
    marker: str = DEFAULT_MARKER
    violation_limit: int | None = None
    audit: bool = False

    def __post_init__(self) -> None:
        """Validate: non-empty str marker, violation_limit None or >= 1."""
        if not isinstance(self.marker, str) or not self.marker:
            raise ValueError("marker must be a non-empty string")
        if self.violation_limit is not None:
            if isinstance(self.violation_limit, bool) or not isinstance(self.violation_limit, int):
                raise TypeError("violation_limit must be an int or None")
            if self.violation_limit < 1:
                raise ValueError("violation_limit must be at least 1")
