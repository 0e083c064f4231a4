from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from overlay_engine.options import MenuOption

OptionPredicate = Callable[[MenuOption], bool]


@dataclass(frozen=True)
class CloseOnSelect:
    """Whether selecting an option also closes the menu: always, never, or per option."""

    kind: str
    predicate: Optional[OptionPredicate] = None

    @classmethod
    def when(cls, predicate: OptionPredicate) -> "CloseOnSelect":
        if not callable(predicate):
            raise ValueError("close-on-select predicate must be callable")
        return cls("predicate", predicate)

    @classmethod
    def coerce(cls, value: object) -> "CloseOnSelect":
        """Accept a policy, a bool, or a predicate callable."""
        if isinstance(value, CloseOnSelect):
            return value
        if isinstance(value, bool):
            return ALWAYS if value else NEVER
        if callable(value):
            return cls.when(value)
        raise ValueError(f"Unsupported close-on-select value: {value!r}")

    def should_close(self, option: MenuOption) -> bool:
        if self.kind == "always":
            return True
        if self.kind == "never":
            return False
        return bool(self.predicate(option))  # type: ignore[misc]


ALWAYS = CloseOnSelect("always")
NEVER = CloseOnSelect("never")
