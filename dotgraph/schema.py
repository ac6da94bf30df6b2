"""
schema.py answers questions about DOT attribute names using the bundled
attribute specification (assets/attributes.xml).

It tells which attributes apply to graphs, nodes and edges and which
primitive type (bool, float or str) an attribute expects. It never rejects
values; it only describes the ``getX``/``setX`` accessors of the model.
"""

import functools
import xml.etree.ElementTree as ET
from typing import Dict, List, NamedTuple, Tuple

from . import config as cfg

_XSD = "{%s}" % cfg.XSD_NAMESPACE

_PRIMITIVES: Dict[str, type] = {
    "xsd:boolean": bool,
    "xsd:decimal": float,
}


class AttributeSpec(NamedTuple):
    name: str
    xsd_type: str
    kinds: Tuple[str, ...]

    @property
    def type(self) -> type:
        return _PRIMITIVES.get(self.xsd_type, str)


@functools.lru_cache(maxsize=None)
def load() -> Dict[str, AttributeSpec]:
    """Parse the attribute specification once; keyed by lower cased name."""
    root = ET.parse(cfg.ATTRIBUTE_SPEC).getroot()

    kinds: Dict[str, List[str]] = {}
    for complex_type in root.iter(f"{_XSD}complexType"):
        kind = complex_type.get("name")
        for ref in complex_type.iter(f"{_XSD}attribute"):
            kinds.setdefault(ref.get("ref").lower(), []).append(kind)

    specs = {}
    for attribute in root.findall(f"{_XSD}attribute"):
        name = attribute.get("name")
        key = name.lower()
        specs[key] = AttributeSpec(name, attribute.get("type", "xsd:string"), tuple(kinds.get(key, ())))
    return specs


def attributes_for(kind: str) -> List[str]:
    """Returns the lower cased names of all attributes applying to ``kind``.

    :param kind: One of "graph", "subgraph", "cluster", "node" or "edge".
    """
    if kind not in cfg.ELEMENT_KINDS:
        raise ValueError(f'"{kind}" is not a valid element kind')
    return [key for key, spec in load().items() if kind in spec.kinds]


def attribute_type(name: str) -> type:
    """Returns bool, float or str; unknown attributes are strings."""
    spec = load().get(name.lower())
    return spec.type if spec else str


def _accessor_attribute(method_name: str) -> str:
    name = method_name[3:]
    if name.startswith("_"):
        name = name[1:]
    return name.lower()


def has_accessor(kind: str, method_name: str) -> bool:
    """Whether ``getX``/``setX`` names an attribute the schema lists for ``kind``."""
    if method_name[:3] not in ("get", "set"):
        return False
    return _accessor_attribute(method_name) in attributes_for(kind)


def accessor_type(method_name: str) -> type:
    """Returns the primitive type a ``setX`` accessor expects as value."""
    return attribute_type(_accessor_attribute(method_name))
