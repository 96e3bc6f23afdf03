"""Tests for envelope decoding."""

import pytest

from opencode_events.core.envelope import decode_envelope, require_properties
from opencode_events.models.envelope import Envelope
from opencode_events.utils.errors import ParseError, ParseErrorCode


class TestDecodeEnvelope:
    """Tests for decode_envelope function."""

    def test_decodes_type_and_properties(self):
        """Test event type and properties are extracted."""
        envelope = decode_envelope('{"type":"session.idle","properties":{"sessionID":"ses_1"}}')
        assert envelope.event_type == "session.idle"
        assert envelope.properties == {"sessionID": "ses_1"}

    def test_accepts_bytes(self):
        """Test bytes payloads are accepted."""
        envelope = decode_envelope(b'{"type":"server.connected","properties":{}}')
        assert envelope.event_type == "server.connected"

    def test_missing_properties_default_to_empty(self):
        """Test missing properties decode to an empty bag."""
        envelope = decode_envelope('{"type":"server.connected"}')
        assert envelope.properties == {}

    def test_properties_kept_unconsumed(self):
        """Test unknown nested fields are preserved in the property bag."""
        envelope = decode_envelope(
            '{"type":"x","properties":{"a":{"b":[1,2,{"c":null}]},"d":"e"}}'
        )
        assert envelope.properties == {"a": {"b": [1, 2, {"c": None}]}, "d": "e"}

    def test_extra_top_level_fields_ignored(self):
        """Test extra top-level fields do not fail decoding."""
        envelope = decode_envelope('{"type":"x","properties":{},"id":7,"directory":"/tmp"}')
        assert envelope.event_type == "x"

    def test_invalid_json(self):
        """Test invalid JSON raises ParseError."""
        with pytest.raises(ParseError) as exc_info:
            decode_envelope("{not json")
        assert exc_info.value.code == ParseErrorCode.INVALID_JSON

    def test_empty_payload(self):
        """Test empty payload raises ParseError."""
        with pytest.raises(ParseError) as exc_info:
            decode_envelope("")
        assert exc_info.value.code == ParseErrorCode.INVALID_JSON

    def test_missing_type(self):
        """Test missing type raises ParseError."""
        with pytest.raises(ParseError) as exc_info:
            decode_envelope('{"properties":{}}')
        assert exc_info.value.code == ParseErrorCode.INVALID_ENVELOPE
        assert exc_info.value.location == "type"

    def test_non_string_type(self):
        """Test non-string type raises ParseError."""
        with pytest.raises(ParseError) as exc_info:
            decode_envelope('{"type":42,"properties":{}}')
        assert exc_info.value.code == ParseErrorCode.INVALID_ENVELOPE

    def test_non_object_payload(self):
        """Test JSON that is not an object raises ParseError."""
        with pytest.raises(ParseError) as exc_info:
            decode_envelope("[1, 2, 3]")
        assert exc_info.value.code == ParseErrorCode.INVALID_ENVELOPE

    def test_error_chains_validation_error(self):
        """Test the pydantic error is kept as the cause."""
        with pytest.raises(ParseError) as exc_info:
            decode_envelope('{"properties":{}}')
        assert type(exc_info.value.__cause__).__name__ == "ValidationError"


class TestRequireProperties:
    """Tests for require_properties function."""

    def test_returns_object_properties(self):
        """Test object properties are returned."""
        envelope = Envelope(event_type="session.idle", properties={"sessionID": "s"})
        assert require_properties(envelope) == {"sessionID": "s"}

    @pytest.mark.parametrize("properties", [None, [], "text", 3])
    def test_rejects_non_object(self, properties):
        """Test non-object properties raise ParseError."""
        envelope = Envelope(event_type="session.idle", properties=properties)
        with pytest.raises(ParseError) as exc_info:
            require_properties(envelope)
        assert exc_info.value.event_type == "session.idle"
        assert exc_info.value.code == ParseErrorCode.INVALID_ENVELOPE
