import numpy as np
import pytest

from cycle_cancel import EdgeAlreadyExistsError, _core


def test_min_cost_flow_edges_diamond():
    flow = _core.min_cost_flow_edges(
        4,
        np.asarray([0, 1, 0, 2], dtype=np.int64),
        np.asarray([1, 3, 2, 3], dtype=np.int64),
        np.asarray([3, 2, 2, 3], dtype=np.int64),
        np.asarray([1, 1, 2, 1], dtype=np.int64),
    )
    assert flow.dtype == np.int64
    assert flow.tolist() == [2, 2, 2, 2]


def test_min_cost_flow_edges_returns_bare_flow_array():
    flow = _core.min_cost_flow_edges(4, [0, 1, 0, 2], [1, 3, 2, 3], [3, 2, 2, 3], [1, 1, 2, 1])
    assert isinstance(flow, np.ndarray)
    assert flow.shape == (4,)
    _, stats = _core.min_cost_flow_edges_with_options(4, [0, 1, 0, 2], [1, 3, 2, 3], [3, 2, 2, 3], [1, 1, 2, 1])
    assert stats["cost"] == int(np.dot(flow, [1, 1, 2, 1])) == 10


def test_min_cost_flow_edges_prefers_cheap_route():
    flow = _core.min_cost_flow_edges(4, [0, 1, 1, 2], [1, 3, 2, 3], [2, 2, 2, 2], [0, 10, 1, 1])
    assert flow.tolist() == [2, 0, 2, 2]


def test_min_cost_flow_edges_rejects_mismatched_lengths():
    with pytest.raises(ValueError, match="tail and head"):
        _core.min_cost_flow_edges(
            2,
            np.asarray([0], dtype=np.int64),
            np.asarray([1, 1], dtype=np.int64),
            np.asarray([1], dtype=np.int64),
            np.asarray([1], dtype=np.int64),
        )


@pytest.mark.parametrize(
    "tail, head, capacity, cost, match",
    [
        ([0], [2], [1], [1], "head index"),
        ([-1], [1], [1], [1], "tail index"),
        ([0], [1], [-4], [1], "non-negative"),
        ([0], [1], [1.5], [1], "integers"),
        ([0], [1], [1], [1, 2], "edge attribute"),
        ([[0]], [[1]], [[1]], [[1]], "1D"),
    ],
)
def test_min_cost_flow_edges_validation(tail, head, capacity, cost, match):
    with pytest.raises(ValueError, match=match):
        _core.min_cost_flow_edges(2, tail, head, capacity, cost)


def test_duplicate_edges_are_rejected():
    with pytest.raises(EdgeAlreadyExistsError):
        _core.min_cost_flow_edges(2, [0, 0], [1, 1], [1, 2], [1, 1])


def test_min_cost_flow_edges_with_options_returns_stats():
    flow, stats = _core.min_cost_flow_edges_with_options(
        4, [0, 1, 1, 2], [1, 3, 2, 3], [2, 2, 2, 2], [0, 10, 1, 1], max_iters=10
    )
    assert flow.tolist() == [2, 0, 2, 2]
    assert {"iterations", "max_flow", "cost", "artificial_nodes", "termination"} <= set(stats.keys())
    assert stats["cost"] == 4
    assert stats["max_flow"] == 2
