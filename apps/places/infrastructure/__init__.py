"""Places Infrastructure Layer."""
