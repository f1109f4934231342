from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from meta_collector.models import Attributes


class MetaCollectorError(RuntimeError):
    """Base class for every error raised by meta_collector."""


class InputError(MetaCollectorError):
    pass


class FetchError(MetaCollectorError):
    def __init__(self, message: str, *, url: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class TokenizeError(MetaCollectorError):
    """
    The HTML stream could not be tokenized.

    `partial` holds whatever was extracted before the failure.
    """

    def __init__(self, message: str, *, partial: Attributes) -> None:
        super().__init__(message)
        self.partial = partial


class SerializationError(MetaCollectorError):
    pass
