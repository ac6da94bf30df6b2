from typing import Optional

from .attributes import AttributesAware, GraphAware
from .utils import block, quote_id


class Node(GraphAware, AttributesAware):
    """Node represents a vertex of a graph."""

    def __init__(self, name: str, label: Optional[str] = None):
        """Node represents a named vertex.

        :param name: Node name, used as the DOT identifier. Not to confuse
            with the label.
        :param label: Optional label; stored as the ``label`` attribute.
        """
        super().__init__()
        self.name = name
        if label is not None:
            self.set_attribute("label", label)

    def __repr__(self):
        return f"<Node {self.name!r}>"

    def __str__(self) -> str:
        return self.to_dot()

    @staticmethod
    def create(name: str, label: Optional[str] = None) -> "Node":
        return Node(name, label)

    def get_name(self) -> str:
        return self.name

    def set_name(self, name: str) -> "Node":
        self.name = name
        return self

    def to_dot(self) -> str:
        """Returns the node definition as is requested by GraphViz."""
        return block(quote_id(self.name), self._render_attributes())
