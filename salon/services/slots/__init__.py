# salon/services/slots/__init__.py
"""
Bookable slot calculation.

Template slots (business hours)
  − times claimed by non-cancelled online or manual appointments
  − for today: times not after now + margin (business timezone)
"""

from .config import SlotPolicy, time_str_to_minutes
from .calculator import available_slots, booked_times, drop_elapsed

__all__ = [
    "SlotPolicy",
    "time_str_to_minutes",
    "available_slots",
    "booked_times",
    "drop_elapsed",
]
