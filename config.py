# fmt: off

#########################
#      Application      #
#########################

APP_NAME = "dotgraph"

DIR_DOC_ROOT = "docs"
DIR_APP_ROOT = "dotgraph"
DIR_TEMPLATE = "templates"

#########################
#  Documentation Build  #
#########################

TMPL_APIDOC = "attributes.md.tmpl"
FILE_APIDOC = "attributes.md"

# Order of the sections in the generated reference.
KINDS = ("graph", "subgraph", "cluster", "node", "edge")

TYPE_NAMES = {
    bool: "boolean",
    float: "number",
    str: "string",
}

# fmt: on
