"""
Readers for chemical reference data.
"""

from .read_elements import ElementTable, read_elements

__all__ = ['ElementTable', 'read_elements']
