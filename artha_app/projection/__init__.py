"""Projection and ranking engine for investment comparisons"""

from .comparator import compare
from .growth import compound_value, project_yearly_values
from .rates import adjust_rate

__all__ = [
    "compare",
    "compound_value",
    "project_yearly_values",
    "adjust_rate",
]
