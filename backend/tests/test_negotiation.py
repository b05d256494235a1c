"""Tests for media type parsing and representation negotiation."""

import logging

import pytest

from courselib.negotiation import (
    InvalidMediaTypeError,
    MediaTypeNegotiator,
    NegotiationConfigurationError,
    NotAcceptableError,
    parse_media_type,
    strip_links_marker,
)

HATEOAS = "application/vnd.example.hateoas+json"
FRIENDLY = "application/vnd.example.author.friendly+json"
FRIENDLY_HATEOAS = "application/vnd.example.author.friendly.hateoas+json"
FULL = "application/vnd.example.author.full+json"
FULL_HATEOAS = "application/vnd.example.author.full.hateoas+json"


@pytest.fixture
def negotiator() -> MediaTypeNegotiator:
    return MediaTypeNegotiator("example")


class TestParseMediaType:
    def test_splits_type_subtype_and_suffix(self):
        descriptor = parse_media_type(FULL_HATEOAS)

        assert descriptor.type == "application"
        assert descriptor.subtype == "vnd.example.author.full.hateoas+json"
        assert descriptor.subtype_without_suffix == "vnd.example.author.full.hateoas"
        assert descriptor.quality == 1.0

    def test_reads_quality_parameter(self):
        descriptor = parse_media_type("application/json; charset=utf-8; q=0.4")

        assert descriptor.essence == "application/json"
        assert descriptor.quality == 0.4

    def test_lowercases(self):
        assert parse_media_type("Application/JSON").essence == "application/json"

    @pytest.mark.parametrize("value", ["", "json", "application/", "/json", "text/html junk"])
    def test_rejects_malformed_values(self, value):
        with pytest.raises(InvalidMediaTypeError):
            parse_media_type(value)


class TestStripLinksMarker:
    def test_removes_marker_and_separator(self):
        assert strip_links_marker("vnd.example.author.full.hateoas") == ("vnd.example.author.full", True)

    def test_leaves_other_subtypes_alone(self):
        assert strip_links_marker("vnd.example.author.full") == ("vnd.example.author.full", False)


class TestNegotiate:
    @pytest.mark.parametrize("accept", [None, "", "*/*", "application/*", "application/json"])
    def test_plain_json(self, negotiator, accept):
        representation = negotiator.negotiate(accept)

        assert representation.media_type == "application/json"
        assert representation.variant == "friendly"
        assert representation.include_links is False

    @pytest.mark.parametrize(
        ("accept", "variant", "include_links"),
        [
            (HATEOAS, "friendly", True),
            (FRIENDLY, "friendly", False),
            (FRIENDLY_HATEOAS, "friendly", True),
            (FULL, "full", False),
            (FULL_HATEOAS, "full", True),
        ],
    )
    def test_vendor_media_types(self, negotiator, accept, variant, include_links):
        representation = negotiator.negotiate(accept)

        assert representation.media_type == accept
        assert representation.variant == variant
        assert representation.include_links is include_links

    def test_matching_ignores_case(self, negotiator):
        assert negotiator.negotiate(FULL.upper()).variant == "full"

    def test_skips_unsupported_entries(self, negotiator):
        assert negotiator.negotiate(f"text/html, {FULL}").media_type == FULL

    def test_highest_quality_wins(self, negotiator):
        representation = negotiator.negotiate(f"application/json;q=0.2, {FULL_HATEOAS};q=0.9")

        assert representation.media_type == FULL_HATEOAS

    def test_ties_go_to_the_earlier_entry(self, negotiator):
        assert negotiator.negotiate(f"{FULL}, {HATEOAS}").media_type == FULL

    def test_zero_quality_is_not_acceptable(self, negotiator):
        with pytest.raises(NotAcceptableError):
            negotiator.negotiate(f"{FULL};q=0")

    def test_unsupported_media_type(self, negotiator):
        with pytest.raises(NotAcceptableError):
            negotiator.negotiate("text/html")

    def test_commas_inside_quoted_parameters(self, negotiator):
        representation = negotiator.negotiate(f'application/json; foo="a,b", {FULL};q=0.5')

        assert representation.media_type == "application/json"

    def test_unparseable_accept_header_is_logged(self, negotiator, caplog):
        with caplog.at_level(logging.INFO, logger="courselib.negotiation"):
            with pytest.raises(InvalidMediaTypeError):
                negotiator.negotiate("text/html, not a media type")

        assert "not a media type" in caplog.text

    def test_unparseable_accept_header(self, negotiator):
        with pytest.raises(InvalidMediaTypeError):
            negotiator.negotiate("not a media type")

    def test_vendor_is_configurable(self):
        negotiator = MediaTypeNegotiator("acme")

        assert negotiator.negotiate("application/vnd.acme.author.full+json").variant == "full"
        with pytest.raises(NotAcceptableError):
            negotiator.negotiate(FULL)


class TestNegotiatorConfiguration:
    def test_default_vocabulary(self, negotiator):
        assert len(negotiator.supported_media_types) == 6
        assert "application/json" in negotiator.supported_media_types

    def test_unclassifiable_media_type_fails_at_construction(self):
        with pytest.raises(NegotiationConfigurationError):
            MediaTypeNegotiator("example", ["application/json", "application/vnd.example.book+json"])

    def test_plain_json_is_required(self):
        with pytest.raises(NegotiationConfigurationError):
            MediaTypeNegotiator("example", [FULL])
