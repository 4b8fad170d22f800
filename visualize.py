from __future__ import annotations

import argparse
from pathlib import Path
from typing import Dict, Hashable, List, Sequence, Tuple

import matplotlib.pyplot as plt
import networkx as nx

from graph import Graph


def build_networkx_graph(graph: Graph) -> nx.DiGraph:
    g = nx.DiGraph()
    g.add_nodes_from(graph.nodes)
    for origin, target, weight in graph.edges():
        g.add_edge(origin, target, cost=weight)
    return g


def compute_layout(graph: nx.DiGraph) -> Dict[Hashable, Tuple[float, float]]:
    return nx.spring_layout(graph, seed=42)


def path_edges(path: Sequence[Hashable]) -> List[Tuple[Hashable, Hashable]]:
    return list(zip(path[:-1], path[1:]))


def draw_shortest_path(
    graph: Graph,
    path: Sequence[Hashable],
    cost: int,
    output: Path | None,
    show: bool = False,
) -> None:
    graph_nx = build_networkx_graph(graph)
    layout = compute_layout(graph_nx)

    fig, ax = plt.subplots(figsize=(8, 6))

    nx.draw_networkx_edges(
        graph_nx, layout, ax=ax, edge_color="lightgray", width=1.0, arrows=True
    )

    highlighted = path_edges(path)
    if highlighted:
        nx.draw_networkx_edges(
            graph_nx,
            layout,
            edgelist=highlighted,
            edge_color="#d62728",
            width=2.5,
            arrows=True,
            ax=ax,
        )

    node_colors = ["#ff7f0e" if node in path else "#1f77b4" for node in graph_nx.nodes]
    nx.draw_networkx_nodes(graph_nx, layout, node_color=node_colors, node_size=600, ax=ax)
    nx.draw_networkx_labels(graph_nx, layout, font_size=9, ax=ax)

    edge_labels = {(u, v): data["cost"] for u, v, data in graph_nx.edges(data=True)}
    nx.draw_networkx_edge_labels(graph_nx, layout, edge_labels=edge_labels, font_size=8, ax=ax)

    ax.text(
        1.02,
        0.5,
        f"Path: {' -> '.join(str(node) for node in path)}\nCost: {cost}",
        transform=ax.transAxes,
        va="center",
        fontsize=10,
        bbox=dict(facecolor="white", alpha=0.8, boxstyle="round"),
    )

    ax.set_axis_off()
    ax.set_title("Shortest Path")

    if output:
        fig.savefig(output, bbox_inches="tight")
    if show:
        plt.show()
    else:
        plt.close(fig)


def main() -> None:
    from main import graph_from_config, load_config, DEFAULT_CONFIG

    parser = argparse.ArgumentParser(
        description="Draw a graph with its shortest path highlighted."
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to the YAML graph configuration (defaults to the built-in example).",
    )
    parser.add_argument(
        "--out",
        type=Path,
        help="Optional path to save a static PNG of the graph and path.",
    )
    parser.add_argument(
        "--no-show",
        action="store_true",
        help="Do not display the figure interactively.",
    )
    args = parser.parse_args()

    config = load_config(args.config) if args.config else DEFAULT_CONFIG
    graph = graph_from_config(config)
    query = config["query"]
    cost, path = graph.shortest_path(query["start"], query["finish"])

    draw_shortest_path(graph, path, cost, output=args.out, show=not args.no_show)


if __name__ == "__main__":
    main()
