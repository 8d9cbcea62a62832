"""
General use constants.
"""

from __future__ import annotations
from typing import Final

import string

WHITESPACES: Final[frozenset[str]] = frozenset({" ", "\t", "\n", "\r", "\f"})
DECIMAL: Final[frozenset[str]] = frozenset(string.digits)
ALPHABETIC: Final[frozenset[str]] = frozenset(string.ascii_letters)
ALNUM: Final[frozenset[str]] = ALPHABETIC | DECIMAL
