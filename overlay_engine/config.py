"""Menu configuration loaded from JSON files or plain mappings."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional

from overlay_engine.close_policy import ALWAYS, CloseOnSelect
from overlay_engine.position_resolver import Placement

DEFAULT_CONFIG_PATH = Path(__file__).with_name("menu_config.json")

DEFAULT_CONFIG = {
    "is_open": False,
    "close_on_select": True,
    "placement": "bottom-end",
}


@dataclass
class MenuConfig:
    """Initial open state, close-on-select policy and preferred placement of a menu."""

    is_open: bool = False
    close_on_select: CloseOnSelect = field(default=ALWAYS)
    placement: Placement = field(default_factory=lambda: Placement.parse(DEFAULT_CONFIG["placement"]))
    source_path: Optional[Path] = None

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any], *, source_path: Optional[Path] = None) -> "MenuConfig":
        if not isinstance(payload, Mapping):
            raise ValueError(f"Menu configuration must be an object, got {type(payload).__name__}")
        raw_placement = payload.get("placement", DEFAULT_CONFIG["placement"])
        placement = Placement.parse(raw_placement)
        if placement is None:
            raise ValueError(f"Unknown menu placement '{raw_placement}'")
        raw_close = payload.get("close_on_select", DEFAULT_CONFIG["close_on_select"])
        try:
            close_on_select = CloseOnSelect.coerce(raw_close)
        except ValueError as exc:
            raise ValueError(f"Invalid close_on_select value {raw_close!r}") from exc
        return cls(
            is_open=_coerce_bool(payload.get("is_open"), bool(DEFAULT_CONFIG["is_open"])),
            close_on_select=close_on_select,
            placement=placement,
            source_path=source_path,
        )

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "MenuConfig":
        """Load config from disk, creating the default file if missing."""

        path = path or DEFAULT_CONFIG_PATH
        if not path.exists():
            path.write_text(json.dumps(DEFAULT_CONFIG, indent=2), encoding="utf-8")
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ValueError(f"Menu configuration {path} is not valid JSON: {exc}") from exc
        return cls.from_mapping(payload, source_path=path)


def _coerce_bool(raw: object, fallback: bool) -> bool:
    if raw is None:
        return fallback
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        token = raw.strip().lower()
        if token in {"1", "true", "yes", "on"}:
            return True
        if token in {"0", "false", "no", "off"}:
            return False
        return fallback
    return bool(raw)
