"""
datekit.format
~~~~~~~~~~~~~~

Textual representations.  Formatting is the one place an invalid date
raises (``InvalidTimeValueError``): there is no text for "not a time".

Basic usage::

    from datekit.format import format_iso9075

    format_iso9075(datetime(2019, 9, 18, 19, 0, 52))                 # '2019-09-18 19:00:52'
    format_iso9075(datetime(2019, 9, 18, 19, 0, 52), format="basic") # '20190918 190052'
"""

from __future__ import annotations

from datekit.format.iso9075 import add_leading_zeros, format_iso9075

__all__ = [
    "add_leading_zeros",
    "format_iso9075",
]
