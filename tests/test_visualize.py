import matplotlib

matplotlib.use("Agg")

from graph import Graph
from visualize import build_networkx_graph, draw_shortest_path, path_edges


def make_graph():
    return Graph(
        {
            "start": {"a": 6, "b": 2},
            "b": {"a": 3, "finish": 5},
            "a": {"finish": 1},
            "finish": {},
        }
    )


def test_build_networkx_graph_is_directed():
    graph_nx = build_networkx_graph(make_graph())
    assert graph_nx.is_directed()
    assert graph_nx["b"]["a"]["cost"] == 3
    assert not graph_nx.has_edge("a", "b")


def test_path_edges():
    assert path_edges(["start", "b", "a", "finish"]) == [
        ("start", "b"),
        ("b", "a"),
        ("a", "finish"),
    ]
    assert path_edges(["start"]) == []


def test_draw_shortest_path_writes_file(tmp_path):
    graph = make_graph()
    cost, path = graph.shortest_path("start", "finish")
    output = tmp_path / "path.png"
    draw_shortest_path(graph, path, cost, output=output)
    assert output.exists()
