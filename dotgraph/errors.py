from . import config as cfg


class GraphvizError(Exception):
    """Base class for every error raised by dotgraph."""


class AttributeNotFound(GraphvizError, KeyError):
    """Raised when an attribute is read that was never set."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'Attribute with name "{name}" was not found.')

    def __str__(self) -> str:
        # KeyError would repr() the message otherwise.
        return self.args[0]


class InvalidGraphType(GraphvizError, ValueError):
    """Raised when a graph type other than digraph, graph or subgraph is given."""

    def __init__(self, type: str):
        self.type = type
        accepted = ", ".join(f'"{t}"' for t in cfg.GRAPH_TYPES)
        super().__init__(f'The type for a graph must be one of {accepted}, got "{type}"')


class RenderFailure(GraphvizError):
    """Raised when Graphviz could not produce the requested output."""

    def __init__(self, output: str):
        self.output = output
        super().__init__(f"An error occurred while creating the graph; GraphViz returned: {output}")
