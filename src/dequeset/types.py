"""Type definitions for dequeset."""

from collections.abc import Callable
from typing import TypeAlias, TypeVar

# Generic type variables for stored values and derived results
T = TypeVar("T")  # Element type
U = TypeVar("U")  # Result type of map()

# Callback for each(); returning False stops the traversal
Visitor: TypeAlias = Callable[[T], bool | None]
