
from dataclasses import dataclass
from typing import ClassVar

from crawlgate.exceptions import InvalidFilterResultError


@dataclass(frozen=True)
class FilterResult:
    """Outcome of a parse filter check: whether the resource is filtered and why.

    Filtered resources are not parsed. `reason` is always a string, empty when
    there is nothing specific to say.
    """

    is_filtered: bool
    reason: str = ""

    NOT_FILTERED: ClassVar["FilterResult"]
    FILTERED: ClassVar["FilterResult"]

    def __post_init__(self):
        if not isinstance(self.reason, str):
            raise InvalidFilterResultError(self.reason)
        object.__setattr__(self, "is_filtered", bool(self.is_filtered))

    @classmethod
    def filtered_because(cls, reason: str) -> "FilterResult":
        """Filtered result carrying the reason the resource will not be parsed."""
        return cls(True, reason)

    @classmethod
    def not_filtered(cls, reason: str = "") -> "FilterResult":
        return cls(False, reason)


FilterResult.NOT_FILTERED = FilterResult(False, "")
FilterResult.FILTERED = FilterResult(True, "")
