"""Test utilities for jsonshelf applications.

    from jsonshelf.testing import TestClient
"""

from jsonshelf.testing.client import TestClient

__all__ = ["TestClient"]
