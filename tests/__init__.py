# tests/__init__.py
"""
Expose common test utilities so tests can import directly:
    from tests import make_csv, first_row
"""

from .utils import CallCounter, first_row, make_csv

__all__ = ["make_csv", "first_row", "CallCounter"]
