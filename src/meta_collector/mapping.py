"""
Declarative key -> field tables for every record type.

A field may accept several alias keys; adding a field or an alias only touches
the tables below.
"""

from __future__ import annotations

from dataclasses import dataclass

from meta_collector.models import App, Attributes, Player, Twitter, Video


@dataclass(frozen=True)
class FieldSpec:
    attr: str
    aliases: frozenset[str]
    is_list: bool = False


def _f(attr: str, *aliases: str, is_list: bool = False) -> FieldSpec:
    return FieldSpec(attr=attr, aliases=frozenset(aliases), is_list=is_list)


ATTRIBUTES_FIELDS: tuple[FieldSpec, ...] = (
    _f("site_name", "og:site_name"),
    _f("url", "og:url"),
    _f("description", "og:description"),
    _f("title", "og:title"),
    _f("image", "og:image"),
    _f("type", "og:type"),
    _f("fb_app", "fb:app_id"),
    _f("robots", "robots"),
    _f("video_tags", "og:video:tag", is_list=True),
)

VIDEO_FIELDS: tuple[FieldSpec, ...] = (
    _f("url", "og:video:url", "og:video"),
    _f("secure_url", "og:video:secure_url"),
    _f("type", "og:video:type"),
    _f("width", "og:video:width"),
    _f("height", "og:video:height"),
    _f("duration", "og:video:duration"),
    _f("release_date", "og:video:release_date"),
)

# App keys arrive already normalized to `al:*:<field>`.
APP_FIELDS: tuple[FieldSpec, ...] = (
    _f("name", "al:*:app_name"),
    _f("app_id", "al:*:app_id"),
    _f("url", "al:*:url"),
    _f("class_", "al:*:class"),
)

TWITTER_FIELDS: tuple[FieldSpec, ...] = (
    _f("user_name", "twitter:site"),
    _f("user_id", "twitter:site:id"),
    _f("image", "twitter:image"),
    _f("image_alt", "twitter:image:alt"),
    _f("creator", "twitter:creator"),
    _f("creator_id", "twitter:creator:id"),
)

PLAYER_FIELDS: tuple[FieldSpec, ...] = (
    _f("url", "twitter:player"),
    _f("width", "twitter:player:width"),
    _f("height", "twitter:player:height"),
)

_TABLES: dict[type, tuple[FieldSpec, ...]] = {
    Attributes: ATTRIBUTES_FIELDS,
    Video: VIDEO_FIELDS,
    App: APP_FIELDS,
    Twitter: TWITTER_FIELDS,
    Player: PLAYER_FIELDS,
}


def fields_for(target: object) -> tuple[FieldSpec, ...]:
    try:
        return _TABLES[type(target)]
    except KeyError:
        raise TypeError(f"No field table for {type(target).__name__}") from None


def update_fields(target: object, key: str, content: str) -> bool:
    """
    Assign `content` to every field of `target` that accepts `key`.

    Scalars are overwritten, list fields get a new element. Returns False when
    no field accepts the key.
    """
    written = False
    for spec in fields_for(target):
        if key not in spec.aliases:
            continue
        if spec.is_list:
            getattr(target, spec.attr).append(content)
        else:
            setattr(target, spec.attr, content)
        written = True
    return written
