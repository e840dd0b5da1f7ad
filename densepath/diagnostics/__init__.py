"""Diagnostics and debugging utilities for densepath."""

from .core import (
    assert_nonnegative_reweighting,
    check_triangle_inequality,
    reweighted_edges,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "reweighted_edges",
    "assert_nonnegative_reweighting",
    "check_triangle_inequality",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
