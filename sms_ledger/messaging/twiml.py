"""TwiML rendering for webhook replies."""

from __future__ import annotations

from xml.sax.saxutils import escape

TWIML_CONTENT_TYPE = "text/xml"


def render_message(body: str) -> str:
    """Wrap one reply text in a TwiML `<Response><Message>` document."""

    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        f"<Response><Message>{escape(body)}</Message></Response>"
    )
