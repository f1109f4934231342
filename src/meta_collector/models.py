from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Video:
    url: str = ""
    secure_url: str = ""
    type: str = ""
    width: str = ""
    height: str = ""
    duration: str = ""
    release_date: str = ""


@dataclass
class App:
    # Platform discriminator taken from `al:<type>:...`.
    type: str = ""
    name: str = ""
    app_id: str = ""
    url: str = ""
    class_: str = ""


@dataclass
class Twitter:
    user_name: str = ""
    user_id: str = ""
    image: str = ""
    image_alt: str = ""
    creator: str = ""
    creator_id: str = ""


@dataclass
class Player:
    url: str = ""
    width: str = ""
    height: str = ""


@dataclass
class Icon:
    size: str = ""
    url: str = ""


@dataclass
class Attributes:
    """Everything extracted from a single page."""

    site_name: str = ""
    url: str = ""
    description: str = ""
    title: str = ""
    image: str = ""
    type: str = ""
    fb_app: str = ""
    robots: str = ""
    video_tags: list[str] = field(default_factory=list)
    videos: list[Video] = field(default_factory=list)
    apps: list[App] = field(default_factory=list)
    twitter: Twitter | None = None
    player: Player | None = None
    icons: list[Icon] = field(default_factory=list)

    def ensure_twitter(self) -> Twitter:
        if self.twitter is None:
            self.twitter = Twitter()
        return self.twitter

    def ensure_player(self) -> Player:
        if self.player is None:
            self.player = Player()
        return self.player


@dataclass(frozen=True)
class MetaAttrs:
    """A classified `<meta>` tag as handed to a MetaHandler."""

    name: str
    content: str


@dataclass(frozen=True)
class LinkAttrs:
    """A `<link>` tag that passed the relation filter."""

    rel: str = ""
    sizes: str = ""
    id: str = ""
    href: str = ""
