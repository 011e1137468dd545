"""Test utilities for wren applications.

Provides an in-process test client::

    from wren.testing import TestClient
"""

from wren.testing.client import TestClient

__all__ = ["TestClient"]
