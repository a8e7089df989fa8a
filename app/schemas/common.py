"""Response envelopes shared by every endpoint."""

from __future__ import annotations

from pydantic import BaseModel


class Envelope(BaseModel):
    """Base for success bodies: `{"success": true, ...}`."""

    success: bool = True


class AckResponse(Envelope):
    """Acknowledgement with a human-readable message."""

    message: str
