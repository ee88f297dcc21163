"""Rooms, customers, staff, bookings and text screens for the Le Prairiel hotel front desk."""

__version__ = "1.0.0"