"""Places Service."""
