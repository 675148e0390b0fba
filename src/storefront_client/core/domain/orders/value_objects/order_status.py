from enum import StrEnum


class OrderStatus(StrEnum):
    """Statuses the client knows how to present. The backend owns transitions."""

    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @classmethod
    def from_raw(cls, raw: str) -> "OrderStatus":
        """Case-insensitive lookup; anything unrecognised is shown as pending."""
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return cls.PENDING
