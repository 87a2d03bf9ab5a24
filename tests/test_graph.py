import pytest

from cycle_cancel import (
    Edge,
    EdgeAlreadyExistsError,
    EdgeNotFoundError,
    Graph,
    InvalidGraphError,
    NegativeCapacityError,
    NegativeNodeIdError,
    NodeNotFoundError,
)


def _diamond() -> Graph:
    graph = Graph(4)
    graph.add_edge(0, 1, 3, 1)
    graph.add_edge(1, 3, 2, 1)
    graph.add_edge(0, 2, 2, 2)
    graph.add_edge(2, 3, 3, 1)
    return graph


def test_add_then_get_returns_edge():
    graph = Graph(3)
    graph.add_edge(0, 2, 7, -4)
    assert graph.get_edge(0, 2) == Edge(0, 2, 7, -4)
    assert graph.has_edge(0, 2)
    assert not graph.has_edge(2, 0)


def test_add_edge_accepts_edge_and_tuple():
    graph = Graph(3)
    graph.add_edge(Edge(0, 1, 1, 1))
    graph.add_edge((1, 2, 2, 3))
    assert graph.get_edge(1, 2).capacity == 2
    assert graph.num_edges == 2


def test_remove_edge():
    graph = _diamond()
    graph.remove_edge(0, 1)
    assert not graph.has_edge(0, 1)
    with pytest.raises(EdgeNotFoundError):
        graph.remove_edge(0, 1)


def test_duplicate_edge_is_rejected():
    graph = _diamond()
    with pytest.raises(EdgeAlreadyExistsError):
        graph.add_edge(0, 1, 5, 5)
    assert graph.get_edge(0, 1) == Edge(0, 1, 3, 1)


def test_node_validation():
    graph = Graph(2)
    with pytest.raises(NodeNotFoundError):
        graph.get_node_adj_list(2)
    with pytest.raises(NodeNotFoundError):
        graph.add_edge(0, 5, 1, 1)
    with pytest.raises(NegativeNodeIdError):
        graph.add_edge(-1, 1, 1, 1)
    assert graph.num_edges == 0


def test_negative_capacity_rejected():
    graph = Graph(2)
    with pytest.raises(NegativeCapacityError):
        graph.add_edge(0, 1, -1, 1)
    graph.add_edge(0, 1, 1, 1)
    with pytest.raises(NegativeCapacityError):
        graph.set_edge_capacity(0, 1, -3)
    assert graph.get_edge(0, 1).capacity == 1


def test_errors_are_value_errors():
    graph = Graph(2)
    with pytest.raises(ValueError, match="No edge"):
        graph.get_edge(0, 1)


def test_set_capacity_and_cost():
    graph = _diamond()
    graph.set_edge_capacity(0, 1, 9)
    graph.set_edge_cost(0, 1, -2)
    assert graph.get_edge(0, 1) == Edge(0, 1, 9, -2)
    with pytest.raises(EdgeNotFoundError):
        graph.set_edge_cost(1, 0, 4)


def test_adjacency_keeps_insertion_order():
    graph = _diamond()
    assert [e.sink for e in graph.get_node_adj_list(0)] == [1, 2]
    graph.set_edge_capacity(0, 1, 1)
    assert [e.sink for e in graph.get_node_adj_list(0)] == [1, 2]


def test_artificial_nodes():
    graph = Graph(3)
    original = Edge(1, 2, 5, 1)
    node = graph.add_artificial_node(original)
    assert node == 3
    assert graph.num_nodes == 4
    assert graph.starting_num_nodes == 3
    assert graph.is_artificial(3)
    assert not graph.is_artificial(1)
    assert graph.get_artificial_edge(3) == original
    assert graph.get_node_adj_list(3) == []
    with pytest.raises(TypeError):
        graph.artificial_nodes[4] = original


def test_equality_ignores_insertion_order():
    a = _diamond()
    b = Graph.from_edges(4, reversed([e.as_tuple() for e in a.edges()]))
    assert a == b
    b.set_edge_cost(2, 3, 5)
    assert a != b
    assert Graph(4) != Graph(5)


def test_copy_is_independent():
    graph = _diamond()
    clone = graph.copy()
    clone.remove_edge(0, 1)
    assert graph.has_edge(0, 1)
    assert clone != graph


def test_from_dict_round_trip():
    data = {
        "Num_nodes": 3,
        "Edges": [
            {"Source": 0, "Sink": 1, "Capacity": 4, "Weight": 2},
            {"Source": 1, "Sink": 2, "Capacity": 3, "Weight": -1},
        ],
    }
    graph = Graph.from_dict(data)
    assert graph.get_edge(1, 2) == Edge(1, 2, 3, -1)
    assert graph.to_dict() == data


@pytest.mark.parametrize(
    "data, error",
    [
        ({"Edges": []}, InvalidGraphError),
        ({"Num_nodes": 0, "Edges": []}, InvalidGraphError),
        ({"Num_nodes": True, "Edges": []}, InvalidGraphError),
        ({"Num_nodes": 2, "Edges": [{"Source": 0, "Sink": 1}]}, InvalidGraphError),
        ({"Num_nodes": 2, "Edges": [{"Source": 0, "Sink": 1, "Capacity": 1.5, "Weight": 1}]}, InvalidGraphError),
        ({"Num_nodes": 2, "Edges": [{"Source": 0, "Sink": 2, "Capacity": 1, "Weight": 1}]}, NodeNotFoundError),
        ({"Num_nodes": 2, "Edges": [{"Source": 0, "Sink": 1, "Capacity": -1, "Weight": 1}]}, NegativeCapacityError),
        (
            {
                "Num_nodes": 2,
                "Edges": [
                    {"Source": 0, "Sink": 1, "Capacity": 1, "Weight": 1},
                    {"Source": 0, "Sink": 1, "Capacity": 2, "Weight": 1},
                ],
            },
            EdgeAlreadyExistsError,
        ),
    ],
)
def test_from_dict_validation(data, error):
    with pytest.raises(error):
        Graph.from_dict(data)


def test_to_string_marks_artificial_nodes():
    graph = Graph(2)
    graph.add_edge(0, 1, 2, 3)
    graph.add_artificial_node(Edge(0, 1, 2, 3))
    text = graph.to_string()
    assert "0: [1 (capacity=2, cost=3)]" in text
    assert "2*: []" in text


@pytest.mark.parametrize("num_nodes", [0, -3, True, 2.0, "4"])
def test_constructor_rejects_invalid_node_count(num_nodes):
    with pytest.raises(InvalidGraphError):
        Graph(num_nodes)
