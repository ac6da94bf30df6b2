import logging
import os
import weakref
from typing import Dict, List, Optional

from . import config as cfg
from .attributes import AttributesAware
from .edge import Edge
from .errors import InvalidGraphType
from .node import Node
from .renderer import Renderer

log = logging.getLogger(__name__)


class Graph(AttributesAware):
    """Graph represents a main graph or a subgraph.

    A subgraph whose name starts with ``cluster_`` is grouped and drawn with
    a border by GraphViz; otherwise it is only a logical container to place
    defaults in.
    """

    def __init__(self, name: str = cfg.DEFAULT_GRAPH_NAME, type: str = cfg.GRAPH_DIRECTED, strict: bool = False):
        """Graph represents a DOT graph.

        :param name: Graph name.
        :param type: One of "digraph", "graph" or "subgraph".
        :param strict: Whether multiple edges between the same pair of nodes
            are merged by GraphViz.
        """
        super().__init__()
        self.name = name
        self.type = cfg.GRAPH_DIRECTED
        self.set_type(type)
        self.strict = strict
        self.path = ""

        self._nodes: Dict[str, Node] = {}
        self._edges: List[Edge] = []
        self._graphs: Dict[str, "Graph"] = {}
        self._parent: Optional["weakref.ReferenceType"] = None

    def __repr__(self):
        return f"<Graph {self.type} {self.name!r}>"

    def __str__(self) -> str:
        return self.to_dot()

    def __contains__(self, name: str) -> bool:
        return name in self._nodes

    @classmethod
    def create(cls, name: str = cfg.DEFAULT_GRAPH_NAME, directed: bool = True) -> "Graph":
        """Factory for a directed or undirected top level graph."""
        return cls(name, cfg.GRAPH_DIRECTED if directed else cfg.GRAPH_UNDIRECTED)

    def get_name(self) -> str:
        return self.name

    def set_name(self, name: str) -> "Graph":
        self.name = name
        return self

    def get_type(self) -> str:
        return self.type

    def set_type(self, type: str) -> "Graph":
        """Sets the type for this graph.

        :param type: Must be either "digraph", "graph" or "subgraph".
        :raises InvalidGraphType: For any other value.
        """
        if type not in cfg.GRAPH_TYPES:
            raise InvalidGraphType(type)
        self.type = type
        return self

    def is_strict(self) -> bool:
        return self.strict

    def set_strict(self, strict: bool) -> "Graph":
        self.strict = strict
        return self

    def is_directed(self) -> bool:
        """Whether edges of this graph are drawn as arrows.

        A subgraph follows the graph it was added to.
        """
        if self.type == cfg.GRAPH_SUBGRAPH:
            parent = self._parent() if self._parent is not None else None
            return parent is not None and parent.is_directed()
        return self.type == cfg.GRAPH_DIRECTED

    def get_path(self) -> str:
        return self.path

    def set_path(self, path: str) -> "Graph":
        """Sets the directory to run ``dot`` from, if it is not on the PATH.

        The path is only accepted when it exists and is already absolute and
        canonical; anything else is ignored.
        """
        if path and os.path.exists(path) and os.path.realpath(path) == path:
            self.path = path + os.sep
        else:
            log.debug("ignoring non canonical path %r", path)
        return self

    def add_graph(self, graph: "Graph") -> "Graph":
        """Adds a subgraph; its type is changed to subgraph.

        Subgraphs are indexed by name, so a later subgraph replaces an earlier
        one with the same name.
        """
        graph.set_type(cfg.GRAPH_SUBGRAPH)
        graph._parent = weakref.ref(self)
        name = graph.get_name()
        if name in self._graphs:
            log.debug("subgraph %r replaces an existing subgraph of %r", name, self.name)
        self._graphs[name] = graph
        return self

    def has_graph(self, name: str) -> bool:
        return name in self._graphs

    def get_graph(self, name: str) -> "Graph":
        return self._graphs[name]

    def get_graphs(self) -> List["Graph"]:
        return list(self._graphs.values())

    def set_node(self, node: Node) -> "Graph":
        """Adds a node, indexed by its name; replaces an earlier node with that name."""
        node.set_graph_root(self)
        name = node.get_name()
        if name in self._nodes:
            log.debug("node %r replaces an existing node of %r", name, self.name)
        self._nodes[name] = node
        return self

    def bind_node(self, name: str, node: Node) -> "Graph":
        """Stores a node under a custom index name."""
        self._nodes[name] = node
        return self

    def get_node(self, name: str) -> Optional[Node]:
        """Returns the node indexed under ``name`` in this graph only."""
        return self._nodes.get(name)

    def get_nodes(self) -> List[Node]:
        return list(self._nodes.values())

    def find_node(self, name: str) -> Optional[Node]:
        """Finds a node in this graph or, depth first, in any of its subgraphs."""
        if name in self._nodes:
            return self._nodes[name]

        for graph in self._graphs.values():
            node = graph.find_node(name)
            if node is not None:
                return node

        return None

    def link(self, edge: Edge) -> "Graph":
        """Registers an edge on this graph."""
        edge.set_graph_root(self)
        self._edges.append(edge)
        return self

    def get_edges(self) -> List[Edge]:
        return list(self._edges)

    def to_dot(self) -> str:
        """Generates the DOT source; GraphViz itself is not needed for this."""
        elements = [
            *self._graphs.values(),
            *self._attributes.values(),
            *self._edges,
            *self._nodes.values(),
        ]
        body = "\n".join(str(element) for element in elements)
        strict = "strict " if self.strict else ""
        return f'{strict}{self.type} "{self.name}" {{\n{body}\n}}'

    def export(self, format: str, filename: str) -> "Graph":
        """Renders this graph with GraphViz into ``filename``.

        :param format: Output format, e.g. "png" or "pdf".
        :param filename: Path to write to.
        :raises RenderFailure: If GraphViz could not render the graph.
        """
        Renderer(self.path).export(self.to_dot(), format, filename)
        return self
