from __future__ import annotations

import logging
import re
from collections.abc import Callable

from meta_collector.mapping import update_fields
from meta_collector.models import App, Attributes, Icon, LinkAttrs, MetaAttrs, Video
from meta_collector.tokenizer import TagEvent

logger = logging.getLogger(__name__)

MetaHandler = Callable[[Attributes, MetaAttrs | LinkAttrs], None]

VIDEO_TAG_KEY = "og:video:tag"
VIDEO_ENTRY_KEYS = frozenset({"og:video", "og:video:url", "og:video:secure_url"})
APP_ID_ALIASES = frozenset({"app_store_id", "package", "app_id"})

_APP_KEY_RE = re.compile(r"^al:(\w*):(.*)$", re.ASCII)


# --- Tag classification ---


def classify_meta(event: TagEvent) -> MetaAttrs | None:
    """
    `property` wins over `name`; tags without a key or content are dropped.
    """
    key = event.get("property").strip() or event.get("name").strip()
    content = event.get("content").strip()
    if not key or not content:
        return None
    return MetaAttrs(name=key, content=content)


def is_relevant_link(rel: str) -> bool:
    return "icon" in rel or ("alternate" in rel and "stylesheet" not in rel)


def classify_link(event: TagEvent) -> LinkAttrs | None:
    link = LinkAttrs(
        rel=event.get("rel").strip(),
        sizes=event.get("sizes").strip(),
        id=event.get("id").strip(),
        href=event.get("href").strip(),
    )
    if not is_relevant_link(link.rel):
        return None
    return link


# --- Group accumulators ---


def is_closed(video: Video) -> bool:
    """A video entry is complete once both of its URLs are known."""
    return bool(video.url) and bool(video.secure_url)


class VideoAccumulator:
    def __init__(self, videos: list[Video]) -> None:
        self.videos = videos

    def current(self) -> Video:
        if not self.videos:
            self.videos.append(Video())
        return self.videos[-1]

    def accept(self, key: str, content: str) -> None:
        if key in VIDEO_ENTRY_KEYS and self.videos and is_closed(self.videos[-1]):
            self.videos.append(Video())
        update_fields(self.current(), key, content)


def platform_of(key: str) -> str | None:
    """Platform discriminator of an App Links key, None when malformed."""
    m = _APP_KEY_RE.match(key)
    return m.group(1) if m else None


def normalize_app_key(key: str) -> str:
    field_name = key.split(":")[2]
    if field_name in APP_ID_ALIASES:
        return "al:*:app_id"
    return f"al:*:{field_name}"


class AppAccumulator:
    def __init__(self, apps: list[App]) -> None:
        self.apps = apps

    def is_new_entry(self, platform: str) -> bool:
        return not self.apps or self.apps[-1].type != platform

    def accept(self, key: str, content: str) -> bool:
        platform = platform_of(key)
        if platform is None:
            logger.debug("ignoring malformed app links key %r", key)
            return False
        if self.is_new_entry(platform):
            self.apps.append(App(type=platform))
        return update_fields(self.apps[-1], normalize_app_key(key), content)


# --- Routing ---


def meta_handler(attrs: Attributes, meta: MetaAttrs) -> None:
    key, content = meta.name, meta.content

    if key.startswith(("og:", "fb:")):
        if key == VIDEO_TAG_KEY:
            update_fields(attrs, key, content)
        elif key.startswith("og:video"):
            VideoAccumulator(attrs.videos).accept(key, content)
        else:
            update_fields(attrs, key, content)
    elif key.startswith("al:"):
        AppAccumulator(attrs.apps).accept(key, content)
    elif key.startswith("twitter:"):
        twitter = attrs.ensure_twitter()
        if key.startswith("twitter:player"):
            update_fields(attrs.ensure_player(), key, content)
        else:
            update_fields(twitter, key, content)
    else:
        update_fields(attrs, key, content)


def default_icon_size(rel: str) -> str:
    if rel == "mask-icon":
        return "mask-icon"
    if "shortcut" in rel:
        return "16x16"
    return "unknown"


def link_handler(attrs: Attributes, link: LinkAttrs) -> None:
    if "icon" in link.rel:
        attrs.icons.append(Icon(size=link.sizes or default_icon_size(link.rel), url=link.href))
        return
    # Alternate links pass the filter but are not recorded.
    logger.debug("skipping alternate link rel=%r href=%r", link.rel, link.href)


def attrs_handler(attrs: Attributes, meta: MetaAttrs | LinkAttrs) -> None:
    """Default MetaHandler: routes meta and link payloads to their handlers."""
    if isinstance(meta, MetaAttrs):
        meta_handler(attrs, meta)
    elif isinstance(meta, LinkAttrs):
        link_handler(attrs, meta)
