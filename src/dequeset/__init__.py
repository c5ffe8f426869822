"""dequeset - Ordered set with insertion order and O(1) operations at both ends."""

import logging

from dequeset.core import DequeSet
from dequeset.errors import DequeSetError, InvalidValueError
from dequeset.types import Visitor

__version__ = "0.0.1"

__all__ = [
    "DequeSet",
    "DequeSetError",
    "InvalidValueError",
    "Visitor",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
