import weakref
from typing import Any, Callable, Dict, List, Optional

from .attribute import Attribute
from .errors import AttributeNotFound


def _noop(*args, **kwargs) -> None:
    return None


def _stringify(value: Any) -> str:
    # DOT spells booleans in lower case.
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class AttributesAware:
    """Ordered collection of attributes shared by graphs, nodes and edges.

    Besides ``set_attribute`` and ``get_attribute`` any DOT attribute can be
    reached through a generated accessor: ``setFontSize(12)`` stores the
    attribute ``fontSize`` and ``getFontSize()`` returns it again. Only the
    first letter after the ``get``/``set`` prefix is lower cased, and a single
    underscore after the prefix is skipped so ``set_fontsize`` works as well.
    Any other name resolves to a callable that does nothing and returns None.
    """

    def __init__(self):
        self._attributes: Dict[str, Attribute] = {}

    def __getattr__(self, name: str) -> Callable[..., Any]:
        # Only called for names not found the regular way. Private and
        # dunder lookups must fail so copy, pickle and mocks keep working.
        if name.startswith("_"):
            raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

        action, key = name[:3], name[3:]
        if key.startswith("_"):
            key = key[1:]
        key = key[:1].lower() + key[1:]

        if key and action == "set":
            return lambda value: self.set_attribute(key, value)
        if key and action == "get":
            return lambda: self.get_attribute(key)
        return _noop

    def set_attribute(self, name: str, value: Any):
        """Store ``value`` under ``name``, replacing an earlier attribute with that name.

        :return: This object, for chaining.
        """
        self._attributes[name] = Attribute(name, _stringify(value))
        return self

    def get_attribute(self, name: str) -> Attribute:
        """Returns the attribute stored under ``name``.

        :raises AttributeNotFound: If no such attribute was set.
        """
        try:
            return self._attributes[name]
        except KeyError:
            raise AttributeNotFound(name) from None

    def has_attribute(self, name: str) -> bool:
        return name in self._attributes

    def get_attributes(self) -> List[Attribute]:
        return list(self._attributes.values())

    def _render_attributes(self) -> List[str]:
        return [str(attribute) for attribute in self._attributes.values()]


class GraphAware:
    """Non-owning link from a node or edge back to the graph it was added to."""

    _graph: Optional["weakref.ReferenceType"] = None

    def get_graph_root(self) -> Optional["Graph"]:
        if self._graph is None:
            return None
        return self._graph()

    def set_graph_root(self, graph: "Graph") -> None:
        self._graph = weakref.ref(graph)
