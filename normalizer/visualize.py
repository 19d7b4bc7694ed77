import networkx as nx
from matplotlib import pyplot as plt

from normalizer.grammar import Grammar


def chain_graph(grammar: Grammar) -> nx.DiGraph:
    """Graph with an edge `u → v` for every chain rule `u → v`.

    Nodes are the generators plus any chain target that heads no rule.
    """
    graph = nx.DiGraph()
    graph.add_nodes_from(grammar.generators)
    for rule in grammar.chain_rules():
        graph.add_edge(rule.lhs, rule.rhs[0].value)
    return graph


def visualize(grammar: Grammar, pairs: frozenset | None = None):
    graph = chain_graph(grammar)
    pos = nx.circular_layout(graph)

    nx.draw(graph, pos, arrows=True, node_shape="o", node_size=1500, alpha=0.4)
    nx.draw_networkx_labels(graph, pos, labels={v: str(v) for v in graph.nodes})

    if pairs is not None:
        # Closure edges that are not already chain rules; self loops are implied
        closure = [(u, w) for u, w in pairs if u != w and not graph.has_edge(u, w)]
        nx.draw_networkx_edges(graph, pos, edgelist=closure, style="dashed", edge_color="tab:red")

    plt.show()
