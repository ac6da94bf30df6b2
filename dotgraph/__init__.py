from .attribute import Attribute
from .edge import Edge
from .errors import AttributeNotFound, GraphvizError, InvalidGraphType, RenderFailure
from .graph import Graph
from .node import Node
from .renderer import Renderer

__all__ = [
    "Attribute",
    "AttributeNotFound",
    "Edge",
    "Graph",
    "GraphvizError",
    "InvalidGraphType",
    "Node",
    "RenderFailure",
    "Renderer",
]
