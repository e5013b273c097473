"""
Core math modules — FixedPointKernel

Целочисленные примитивы с checked-арифметикой: домены uint256/int256,
partition-exchange sort и описательная статистика.
"""

# Checked arithmetic
from src.core.math.checked import (
    FIXED_POINT_UNIT,
    INT256,
    INT256_MAX,
    INT256_MIN,
    UINT256,
    UINT256_MAX,
    WORD_BITS,
    IntegerDomain,
    abs_diff,
    checked_add,
    checked_div,
    checked_dot,
    checked_mul,
    checked_sub,
    checked_sum,
    ensure_in_domain,
    ensure_integer,
    ensure_series,
    fixed_mul,
    mul_div,
)

# Sorting
from src.core.math.sorting import partition_exchange_sort

# Statistics
from src.core.math.statistics import (
    integer_sqrt,
    maximum,
    mean,
    median,
    minimum,
    mode,
    sort,
    standard_deviation,
    variance,
)

__all__ = [
    # Checked arithmetic — Constants
    "FIXED_POINT_UNIT",
    "INT256",
    "INT256_MAX",
    "INT256_MIN",
    "UINT256",
    "UINT256_MAX",
    "WORD_BITS",
    # Checked arithmetic — Types
    "IntegerDomain",
    # Checked arithmetic — Functions
    "abs_diff",
    "checked_add",
    "checked_div",
    "checked_dot",
    "checked_mul",
    "checked_sub",
    "checked_sum",
    "ensure_in_domain",
    "ensure_integer",
    "ensure_series",
    "fixed_mul",
    "mul_div",
    # Sorting
    "partition_exchange_sort",
    # Statistics
    "integer_sqrt",
    "maximum",
    "mean",
    "median",
    "minimum",
    "mode",
    "sort",
    "standard_deviation",
    "variance",
]
