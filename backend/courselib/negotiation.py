"""Media type negotiation for author representations.

A representation is picked from the request's Accept header. Subtypes
ending in ``hateoas`` ask for embedded links; the remaining base subtype
selects the full or the friendly field set.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Literal

from courselib.config import settings

logger = logging.getLogger(__name__)

Variant = Literal["full", "friendly"]

DEFAULT_MEDIA_TYPE = "application/json"
LINKS_MARKER = "hateoas"

_TOKEN = r"[!#$%&'*+.^_`|~0-9A-Za-z-]+"
_MEDIA_TYPE_RE = re.compile(
    rf"^\s*(?P<type>{_TOKEN})/(?P<subtype>{_TOKEN})"
    rf"(?P<params>(\s*;\s*{_TOKEN}=({_TOKEN}|\"[^\"]*\"))*)\s*$"
)
_Q_PARAM_RE = re.compile(r";\s*q=([0-9.]+)", re.IGNORECASE)
# Commas separate Accept entries only outside quoted parameter values
_ENTRY_SEPARATOR_RE = re.compile(r',(?=(?:[^"]*"[^"]*")*[^"]*$)')


class InvalidMediaTypeError(ValueError):
    """Raised when an Accept value cannot be parsed as a media type."""


class NotAcceptableError(ValueError):
    """Raised when no requested media type is one this API can produce."""


class NegotiationConfigurationError(RuntimeError):
    """Raised when the supported vocabulary contains an unclassifiable media type."""


@dataclass(frozen=True)
class MediaTypeDescriptor:
    """A parsed media type.

    ``subtype_without_suffix`` drops a structured syntax suffix, so
    ``vnd.example.author.full+json`` becomes ``vnd.example.author.full``.
    """

    raw_value: str
    type: str
    subtype: str
    subtype_without_suffix: str
    quality: float = 1.0

    @property
    def essence(self) -> str:
        return f"{self.type}/{self.subtype}"


@dataclass(frozen=True)
class Representation:
    """Outcome of negotiation for one request."""

    media_type: str
    variant: Variant
    include_links: bool


def parse_media_type(value: str) -> MediaTypeDescriptor:
    """Parse a single media type such as ``application/vnd.x+json; q=0.8``.

    Raises:
        InvalidMediaTypeError: If ``value`` is not a well-formed media type.
    """
    match = _MEDIA_TYPE_RE.match(value or "")
    if match is None:
        raise InvalidMediaTypeError(f"'{value}' is not a valid media type")

    type_ = match.group("type").lower()
    subtype = match.group("subtype").lower()
    without_suffix = subtype.split("+", 1)[0]

    quality = 1.0
    q_match = _Q_PARAM_RE.search(match.group("params"))
    if q_match:
        try:
            quality = float(q_match.group(1))
        except ValueError:
            raise InvalidMediaTypeError(f"'{value}' has an invalid quality value") from None

    return MediaTypeDescriptor(
        raw_value=value.strip(),
        type=type_,
        subtype=subtype,
        subtype_without_suffix=without_suffix,
        quality=quality,
    )


def strip_links_marker(subtype: str) -> tuple[str, bool]:
    """Remove a trailing ``hateoas`` marker and its separator.

    Returns:
        (base subtype, whether the marker was present)
    """
    if not subtype.lower().endswith(LINKS_MARKER):
        return subtype, False
    base = subtype[: -len(LINKS_MARKER)]
    if base and not base[-1].isalnum():
        base = base[:-1]
    return base, True


def author_media_types(vendor: str) -> tuple[str, ...]:
    """The media types the author endpoints can produce."""
    prefix = f"application/vnd.{vendor}"
    return (
        DEFAULT_MEDIA_TYPE,
        f"{prefix}.{LINKS_MARKER}+json",
        f"{prefix}.author.friendly+json",
        f"{prefix}.author.friendly.{LINKS_MARKER}+json",
        f"{prefix}.author.full+json",
        f"{prefix}.author.full.{LINKS_MARKER}+json",
    )


class MediaTypeNegotiator:
    """Maps Accept headers onto representations.

    Every supported media type is classified when the negotiator is built,
    so a vocabulary the negotiator cannot interpret fails at startup.
    """

    def __init__(self, vendor: str, supported: Iterable[str] | None = None):
        self.vendor = vendor.lower()
        self.full_subtype = f"vnd.{self.vendor}.author.full"
        self._friendly_subtypes = {
            "json",
            f"vnd.{self.vendor}",
            f"vnd.{self.vendor}.author.friendly",
        }
        self._representations: dict[str, Representation] = {}
        for media_type in supported if supported is not None else author_media_types(vendor):
            descriptor = parse_media_type(media_type)
            self._representations[descriptor.essence] = self._classify(descriptor)
        if DEFAULT_MEDIA_TYPE not in self._representations:
            raise NegotiationConfigurationError(f"'{DEFAULT_MEDIA_TYPE}' must be supported")

    def _classify(self, descriptor: MediaTypeDescriptor) -> Representation:
        base, include_links = strip_links_marker(descriptor.subtype_without_suffix)
        if base == self.full_subtype:
            variant: Variant = "full"
        elif base in self._friendly_subtypes:
            variant = "friendly"
        else:
            raise NegotiationConfigurationError(
                f"Media type '{descriptor.raw_value}' has no known representation"
            )
        return Representation(descriptor.essence, variant, include_links)

    @property
    def supported_media_types(self) -> list[str]:
        return list(self._representations)

    def negotiate(self, accept: str | None) -> Representation:
        """Pick the representation for an Accept header.

        A missing header or a wildcard yields plain JSON. With several
        comma-separated entries the highest quality supported one wins,
        ties going to the earlier entry.

        Raises:
            InvalidMediaTypeError: If any entry fails to parse.
            NotAcceptableError: If no entry is supported.
        """
        if accept is None or not accept.strip():
            return self._representations[DEFAULT_MEDIA_TYPE]

        try:
            candidates = [
                parse_media_type(part) for part in _ENTRY_SEPARATOR_RE.split(accept) if part.strip()
            ]
        except InvalidMediaTypeError:
            logger.info("Rejected malformed Accept: %s", accept)
            raise
        candidates.sort(key=lambda d: d.quality, reverse=True)

        for descriptor in candidates:
            if descriptor.quality <= 0:
                continue
            if descriptor.essence in ("*/*", "application/*"):
                return self._representations[DEFAULT_MEDIA_TYPE]
            representation = self._representations.get(descriptor.essence)
            if representation is not None:
                return representation

        logger.info("No acceptable representation for Accept: %s", accept)
        raise NotAcceptableError(f"None of the requested media types are supported: {accept}")


negotiator = MediaTypeNegotiator(settings.media_type_vendor)
