"""
Differentiation types of the epidermal lineage.

Cells only advance along stem -> transit-amplifying -> differentiated.
"""

from enum import IntEnum
from typing import Union

from .errors import InvalidArgument


class CellType(IntEnum):
    """Lineage stage, stored as the integer codes 1, 2 and 3."""

    STEM = 1
    TRANSIT_AMPLIFYING = 2
    DIFFERENTIATED = 3

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    CellType.STEM: "stem",
    CellType.TRANSIT_AMPLIFYING: "transit_amplifying",
    CellType.DIFFERENTIATED: "differentiated",
}


def as_cell_type(value: Union[int, str, CellType]) -> CellType:
    """
    Coerce an integer code or label to a CellType.

    Args:
        value: CellType, integer code (1-3) or label such as "stem"

    Returns:
        Matching CellType

    Raises:
        InvalidArgument: If value names no differentiation type
    """
    if isinstance(value, CellType):
        return value
    if isinstance(value, str):
        for cell_type, label in _LABELS.items():
            if label == value.lower():
                return cell_type
        raise InvalidArgument(f"unknown cell type label {value!r}")
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"cell type must be an int code or label, got {value!r}")
    try:
        return CellType(value)
    except ValueError:
        raise InvalidArgument(f"cell type code must be 1, 2 or 3, got {value}") from None


def type_label(value) -> str:
    """Label for a type value, tolerating raw codes written onto a cell."""
    try:
        return as_cell_type(value).label
    except InvalidArgument:
        return repr(value)
