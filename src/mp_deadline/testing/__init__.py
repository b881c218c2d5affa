"""Testing support – fakes and pytest fixtures.

Import in your ``conftest.py``::

    pytest_plugins = ["mp_deadline.testing.fixtures"]
"""

from mp_deadline.testing.fakes import FakeTimer

__all__ = ["FakeTimer"]
