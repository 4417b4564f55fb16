"""Trip planning backend: trips, bookings, budget, packing and gamification."""

__version__ = "1.3.0"
