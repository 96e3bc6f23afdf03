"""Configurable facade over the event decoding functions."""

import logging

from opencode_events.config import DecoderSettings, Settings
from opencode_events.core.envelope import decode_envelope
from opencode_events.core.mapper import map_envelope
from opencode_events.core.sse import strip_data_prefix
from opencode_events.models.events import Event
from opencode_events.utils.errors import ParseError, log_parse_error, truncate_error

logger = logging.getLogger(__name__)


class EventDecoder:
    """Decode stream payloads into domain events.

    Holds settings only; no state is kept between calls, so one instance can
    be shared across threads and sessions.

    Usage:
        decoder = EventDecoder.from_settings(get_settings())
        for line in data_lines:
            event = decoder.decode_line_or_none(line)
            if event is not None:
                handle(event)
    """

    def __init__(self, settings: DecoderSettings | None = None):
        self.settings = settings or DecoderSettings()
        self._unknown_log_level = getattr(logging, self.settings.unknown_event_log_level)

    @classmethod
    def from_settings(cls, settings: Settings) -> "EventDecoder":
        """Create a decoder from application settings."""
        return cls(settings.decoder)

    def decode(self, payload: str | bytes) -> Event:
        """Decode one JSON payload.

        Raises:
            ParseError: If the payload is malformed.
        """
        return map_envelope(decode_envelope(payload), unknown_log_level=self._unknown_log_level)

    def decode_line(self, line: str) -> Event:
        """Decode one SSE ``data:`` line.

        Raises:
            ParseError: If the line is not a data line or is malformed.
        """
        return self.decode(strip_data_prefix(line))

    def decode_or_none(self, payload: str | bytes) -> Event | None:
        """Decode one JSON payload, logging and returning None on failure."""
        try:
            return self.decode(payload)
        except ParseError as e:
            self._log_failure(e, payload)
            return None

    def decode_line_or_none(self, line: str) -> Event | None:
        """Decode one SSE ``data:`` line, logging and returning None on failure."""
        try:
            return self.decode_line(line)
        except ParseError as e:
            self._log_failure(e, line)
            return None

    def _log_failure(self, exc: ParseError, payload: str | bytes) -> None:
        if isinstance(payload, bytes):
            payload = payload.decode("utf-8", errors="replace")
        log_parse_error(
            exc,
            max_length=self.settings.max_error_length,
            location=exc.location,
            payload=truncate_error(payload, self.settings.max_error_length),
        )
