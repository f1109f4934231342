from __future__ import annotations

import json
from dataclasses import fields
from typing import Any

from meta_collector.errors import SerializationError
from meta_collector.models import App, Attributes, Icon, Player, Twitter, Video

# Output names that differ from the attribute name.
_RENAMES: dict[type, dict[str, str]] = {
    Attributes: {"fb_app": "fbapp"},
    App: {"class_": "class"},
    Player: {"url": "player"},
}

# Emitted even when empty.
_ALWAYS: dict[type, frozenset[str]] = {
    Attributes: frozenset({"url"}),
    Video: frozenset({"url"}),
}

_RECORDS = (Attributes, Video, App, Twitter, Player, Icon)


def to_dict(obj: Any) -> Any:
    if isinstance(obj, list):
        return [to_dict(v) for v in obj]
    if not isinstance(obj, _RECORDS):
        return obj

    cls = type(obj)
    renames = _RENAMES.get(cls, {})
    always = _ALWAYS.get(cls, frozenset())
    out: dict[str, Any] = {}
    for f in fields(obj):
        value = getattr(obj, f.name)
        if f.name not in always and (value is None or value == "" or value == []):
            continue
        out[renames.get(f.name, f.name)] = to_dict(value)
    return out


def dumps(attrs: Attributes) -> str:
    """Tab-indented JSON, as printed by the CLI."""
    try:
        return json.dumps(to_dict(attrs), indent="\t", ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"error serializing record: {e}") from e
