"""Shared pytest configuration."""
from mp_deadline.testing.fixtures import fake_timer  # noqa: F401
