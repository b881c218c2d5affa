"""Testing fixtures – pytest fixtures for fake doubles.

Register in your ``conftest.py``::

    pytest_plugins = ["mp_deadline.testing.fixtures"]
"""
from mp_deadline.testing.fixtures.timer import fake_timer

__all__ = ["fake_timer"]
