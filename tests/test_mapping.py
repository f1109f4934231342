from __future__ import annotations

import pytest

from meta_collector.mapping import ATTRIBUTES_FIELDS, fields_for, update_fields
from meta_collector.models import App, Attributes, Icon, Player, Twitter, Video


def test_scalar_field_is_last_write_wins() -> None:
    attrs = Attributes()
    assert update_fields(attrs, "og:title", "first")
    assert update_fields(attrs, "og:title", "second")
    assert attrs.title == "second"


def test_list_field_appends() -> None:
    attrs = Attributes()
    update_fields(attrs, "og:video:tag", "music")
    update_fields(attrs, "og:video:tag", "live")
    assert attrs.video_tags == ["music", "live"]


def test_unknown_key_is_a_noop() -> None:
    attrs = Attributes()
    assert update_fields(attrs, "og:locale", "en_US") is False
    assert attrs == Attributes()


def test_video_url_accepts_both_aliases() -> None:
    video = Video()
    update_fields(video, "og:video", "http://a")
    assert video.url == "http://a"
    update_fields(video, "og:video:url", "http://b")
    assert video.url == "http://b"


@pytest.mark.parametrize(
    ("target", "key", "attr"),
    [
        (Attributes(), "fb:app_id", "fb_app"),
        (Attributes(), "robots", "robots"),
        (App(), "al:*:class", "class_"),
        (App(), "al:*:app_name", "name"),
        (Twitter(), "twitter:site:id", "user_id"),
        (Twitter(), "twitter:image:alt", "image_alt"),
        (Player(), "twitter:player", "url"),
        (Player(), "twitter:player:height", "height"),
        (Video(), "og:video:release_date", "release_date"),
    ],
)
def test_keys_land_on_expected_fields(target: object, key: str, attr: str) -> None:
    assert update_fields(target, key, "v")
    assert getattr(target, attr) == "v"


def test_tables_only_name_real_attributes() -> None:
    attrs = Attributes()
    for spec in ATTRIBUTES_FIELDS:
        assert hasattr(attrs, spec.attr)
    for target in (Video(), App(), Twitter(), Player()):
        for spec in fields_for(target):
            assert hasattr(target, spec.attr)


def test_records_without_table_are_rejected() -> None:
    with pytest.raises(TypeError):
        update_fields(Icon(), "size", "16x16")
