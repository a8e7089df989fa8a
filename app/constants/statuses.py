"""Status values persisted for invitations and location alerts."""

from enum import StrEnum


class InvitationStatus(StrEnum):
    """Lifecycle of a chat invitation.

    Decline and cancel apply to PENDING only. Re-sending resets any status to
    PENDING.
    """

    PENDING = "pending"
    ACCEPTED = "accepted"
    DECLINED = "declined"
    CANCELED = "canceled"


class AlertStatus(StrEnum):
    """At most one ACTIVE alert per (sender, receiver) pair."""

    ACTIVE = "active"
    INACTIVE = "inactive"


DEFAULT_MESSAGE_TYPE = "text"
