from . import config as cfg
from .utils import addslashes, encode_specials


class Attribute:
    """Attribute represents a single ``key=value`` pair of a DOT statement."""

    def __init__(self, key: str, value: str):
        """Attribute represents a single GraphViz attribute.

        :param key: Name of the attribute, e.g. ``fontsize``.
        :param value: Raw value; escaping is applied when rendering.
        """
        self.key = key
        self.value = value

    def __repr__(self):
        return f"<Attribute {self.key}={self.value!r}>"

    def __str__(self) -> str:
        return self.to_dot()

    def get_key(self) -> str:
        return self.key

    def set_key(self, key: str) -> "Attribute":
        self.key = key
        return self

    def get_value(self) -> str:
        return self.value

    def set_value(self, value: str) -> "Attribute":
        self.value = value
        return self

    def is_value_containing_specials(self) -> bool:
        """Whether the value holds a backslash that may start an escape sequence."""
        return "\\" in self.value

    def is_value_in_html(self) -> bool:
        """Whether the value is an HTML-like label, e.g. ``<<b>bold</b>>``."""
        return self.value[:1] == "<"

    def to_dot(self) -> str:
        """Returns the attribute definition as is requested by GraphViz."""
        key = cfg.KEY_ALIASES.get(self.key, self.key)

        value = self.value
        if self.is_value_containing_specials():
            value = f'"{encode_specials(value)}"'
        elif not self.is_value_in_html():
            value = f'"{addslashes(value)}"'

        return f"{key}={value}"
