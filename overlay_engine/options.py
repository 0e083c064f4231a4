from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Hashable, Iterable, Mapping, Tuple, Union

OptionLike = Union["MenuOption", Mapping[str, Any]]


@dataclass(frozen=True)
class MenuOption:
    """One entry of a navigable option list; ``id`` is its identity."""

    id: Hashable
    label: str
    value: Any = None
    disabled: bool = False

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "MenuOption":
        value = payload.get("value")
        identifier = payload.get("id")
        if identifier is None:
            identifier = value
        if identifier is None:
            raise ValueError(f"Menu option needs an 'id' or 'value': {dict(payload)!r}")
        label = payload.get("label")
        return cls(
            id=identifier,
            label=str(label if label is not None else identifier),
            value=value if value is not None else identifier,
            disabled=bool(payload.get("disabled", False)),
        )

    def same_as(self, other: object) -> bool:
        return isinstance(other, MenuOption) and other.id == self.id


def coerce_options(options: Iterable[OptionLike]) -> Tuple[MenuOption, ...]:
    result = []
    for option in options:
        if isinstance(option, MenuOption):
            result.append(option)
        else:
            result.append(MenuOption.from_mapping(option))
    return tuple(result)


def enabled_subset(options: Iterable[MenuOption]) -> Tuple[MenuOption, ...]:
    return tuple(option for option in options if not option.disabled)
