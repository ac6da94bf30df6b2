from pathlib import Path

# fmt: off

#########################
#         Graph         #
#########################

DEFAULT_GRAPH_NAME = "G"

GRAPH_DIRECTED = "digraph"
GRAPH_UNDIRECTED = "graph"
GRAPH_SUBGRAPH = "subgraph"
GRAPH_TYPES = (GRAPH_DIRECTED, GRAPH_UNDIRECTED, GRAPH_SUBGRAPH)

#########################
#       Attributes      #
#########################

# Keys rendered under a different name than they are stored with.
KEY_ALIASES = {
    "url": "URL",
}

# Letters that form a valid escape sequence after a backslash in an escString.
# See: https://graphviz.org/docs/attr-types/escString/
ESCAPE_LETTERS = "\\NGETHLnlr"

EDGE_DIRECTED = "->"
EDGE_UNDIRECTED = "--"

#########################
#       Rendering       #
#########################

DOT_COMMAND = "dot"
TMP_PREFIX = "gvz"
DEFAULT_FORMAT = "png"

#########################
#         Schema        #
#########################

ATTRIBUTE_SPEC = Path(__file__).parent / "assets" / "attributes.xml"
XSD_NAMESPACE = "http://www.w3.org/2001/XMLSchema"

ELEMENT_KINDS = ("graph", "node", "edge", "subgraph", "cluster")

# fmt: on
