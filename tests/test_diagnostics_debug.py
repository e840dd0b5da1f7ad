"""Tests for debug mode functionality."""

import pytest

from densepath.diagnostics import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)
from densepath.graphs import APSPStatus, dijkstra, johnson


def test_debug_mode_toggle_and_context() -> None:
    """Test debug mode toggling and context manager."""
    original = is_debug_enabled()

    try:
        set_debug_enabled(False)
        assert not is_debug_enabled()

        with debug_context(True):
            assert is_debug_enabled()

        # Back to previous (False in this block)
        assert not is_debug_enabled()

        set_debug_enabled(True)
        assert is_debug_enabled()

        with debug_context(False):
            assert not is_debug_enabled()

        assert is_debug_enabled()
    finally:
        set_debug_enabled(original)


def test_set_debug_enabled_returns_previous() -> None:
    original = is_debug_enabled()
    try:
        set_debug_enabled(True)
        assert set_debug_enabled(False) is True
        assert set_debug_enabled(False) is False
    finally:
        set_debug_enabled(original)


@pytest.mark.parametrize(
    "value, expected",
    [("1", True), ("TRUE", True), (" on ", True), ("0", False), ("", False), (None, False)],
)
def test_env_flag_parsing(value, expected) -> None:
    from densepath.diagnostics.debug_mode import _flag_from_env

    assert _flag_from_env(value) is expected


def test_debug_context_restores_on_error() -> None:
    original = is_debug_enabled()

    with pytest.raises(RuntimeError):
        with debug_context(not original):
            raise RuntimeError("boom")

    assert is_debug_enabled() == original


def test_dijkstra_traces_steps_in_debug_mode(path_graph, log_stream) -> None:
    """Each scan step is logged while debug mode is on."""
    with debug_context(True):
        result = dijkstra(path_graph, 0, 2)

    output = log_stream.getvalue()
    assert result.distance == 3.0
    assert "step 0: visit 0" in output
    assert "step 1: visit 1" in output
    assert "remaining 1 vertices unreachable" in output


def test_dijkstra_quiet_without_debug_mode(path_graph, log_stream) -> None:
    with debug_context(False):
        dijkstra(path_graph, 0, 2)
    assert "step 0" not in log_stream.getvalue()


def test_johnson_in_debug_mode(negative_edge_graph, random_digraph) -> None:
    """Johnson verifies its reweighting without raising on valid input."""
    with debug_context(True):
        assert johnson(negative_edge_graph).status is APSPStatus.OK
        assert johnson(random_digraph(7, negative=True)).status is APSPStatus.OK
