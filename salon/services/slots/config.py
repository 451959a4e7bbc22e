# salon/services/slots/config.py
"""
Slot policy: which times exist and how far ahead of "now" they close.
"""

from dataclasses import dataclass

from ...config import Settings


@dataclass(frozen=True)
class SlotPolicy:
    """
    Attributes:
        template: Ordered "HH:MM" start times offered every day
        margin_minutes: A slot today stays bookable only while it starts
            strictly later than now + margin_minutes
    """
    template: tuple[str, ...]
    margin_minutes: int = 30

    def __post_init__(self):
        if self.margin_minutes < 0:
            raise ValueError(f"margin_minutes must be >= 0, got {self.margin_minutes}")

    @classmethod
    def from_settings(cls, settings: Settings) -> "SlotPolicy":
        return cls(
            template=tuple(settings.business_hours),
            margin_minutes=settings.slot_margin_minutes,
        )


def time_str_to_minutes(value: str) -> int:
    """Convert "HH:MM" (or "HH:MM:SS") to minutes since midnight."""
    hour, minute = value.split(":")[:2]
    return int(hour) * 60 + int(minute)
