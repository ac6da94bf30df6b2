from . import config as cfg
from .attributes import AttributesAware, GraphAware
from .node import Node
from .utils import block, quote_id


class Edge(GraphAware, AttributesAware):
    """Edge represents an edge (arrow, line) between two nodes."""

    def __init__(self, from_node: Node, to_node: Node):
        """Edge represents a link between two nodes.

        :param from_node: Starting node.
        :param to_node: Destination node.
        """
        super().__init__()
        self.from_node = from_node
        self.to_node = to_node

    def __repr__(self):
        return f"<Edge {self.from_node!r} {self.connector} {self.to_node!r}>"

    def __str__(self) -> str:
        return self.to_dot()

    @staticmethod
    def create(from_node: Node, to_node: Node) -> "Edge":
        return Edge(from_node, to_node)

    def get_from(self) -> Node:
        return self.from_node

    def get_to(self) -> Node:
        return self.to_node

    @property
    def connector(self) -> str:
        # Decided when rendering; an edge outside of any graph is undirected.
        # On a subgraph this follows the enclosing graph, see Graph.is_directed.
        graph = self.get_graph_root()
        if graph is not None and graph.is_directed():
            return cfg.EDGE_DIRECTED
        return cfg.EDGE_UNDIRECTED

    def to_dot(self) -> str:
        """Returns the edge definition as is requested by GraphViz."""
        head = f"{quote_id(self.get_from().get_name())} {self.connector} {quote_id(self.get_to().get_name())}"
        return block(head, self._render_attributes())
