class CalendarError(ValueError):
    """Raised for invalid holiday-calendar construction or use."""
