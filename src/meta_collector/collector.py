"""
Extraction driver: turn an HTML document into an `Attributes` record.

Only the document head is of interest, so scanning stops at `</head>`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO

import httpx

from meta_collector.config import Settings, load_settings
from meta_collector.errors import FetchError, InputError, TokenizeError
from meta_collector.handlers import MetaHandler, attrs_handler, classify_link, classify_meta
from meta_collector.models import Attributes
from meta_collector.tokenizer import END, START, iter_tag_events

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 65536


def extract_meta(
    doc: bytes | BinaryIO,
    handler: MetaHandler = attrs_handler,
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> Attributes:
    """
    Scan `doc` and pass every classified meta/link tag to `handler`.

    Raises TokenizeError (carrying the partial record) if the stream cannot be
    read or tokenized.
    """
    if chunk_size <= 0:
        raise ValueError("chunk_size must be > 0")

    attrs = Attributes()
    events = iter_tag_events(doc, chunk_size=chunk_size)

    while True:
        try:
            event = next(events)
        except StopIteration:
            return attrs
        except Exception as e:  # noqa: BLE001
            raise TokenizeError(f"error tokenizing document: {e}", partial=attrs) from e

        if event.kind == END:
            if event.tag == "head":
                logger.debug("reached </head>, stopping scan")
                return attrs
            continue

        if event.kind != START:
            continue

        if event.tag == "meta":
            meta = classify_meta(event)
            if meta is not None:
                handler(attrs, meta)
        elif event.tag == "link":
            link = classify_link(event)
            if link is not None:
                handler(attrs, link)


def parse_file(
    filename: str | Path,
    handler: MetaHandler = attrs_handler,
    *,
    settings: Settings | None = None,
) -> Attributes:
    cfg = settings or load_settings()
    path = Path(filename).expanduser()
    if not path.exists():
        raise InputError(f"no such file or directory: {filename}")
    with path.open("rb") as f:
        return extract_meta(f, handler, chunk_size=cfg.read_chunk_size)


def fetch_document(
    url: str,
    *,
    settings: Settings | None = None,
    client: httpx.Client | None = None,
) -> bytes:
    """Single GET with the crawler user agent. Anything but a 200 is an error."""
    cfg = settings or load_settings()
    headers = {"User-Agent": cfg.user_agent}

    logger.debug("fetching %s", url)
    try:
        if client is not None:
            r = client.get(url, headers=headers)
        else:
            with httpx.Client(follow_redirects=True) as c:
                r = c.get(url, headers=headers)
    except httpx.HTTPError as e:
        raise FetchError(f"error reading URL: {url} ~ {e}", url=url) from e

    logger.debug("fetched %s status=%s bytes=%d", url, r.status_code, len(r.content))
    if r.status_code != 200:
        raise FetchError(
            f"error reading URL: {url} ~ ({r.status_code}) {r.reason_phrase}",
            url=url,
            status_code=r.status_code,
        )
    return r.content


def parse_html(
    url: str,
    handler: MetaHandler = attrs_handler,
    *,
    settings: Settings | None = None,
    client: httpx.Client | None = None,
) -> Attributes:
    cfg = settings or load_settings()
    body = fetch_document(url, settings=cfg, client=client)
    return extract_meta(body, handler, chunk_size=cfg.read_chunk_size)
