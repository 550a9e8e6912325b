"""
SCIM attribute paths per RFC 7644 Section 3.10.

Supports:
- Simple paths: "userName", "name.givenName"
- ValuePath with filters: "emails[type eq \"work\"].value"
- Fully qualified paths: "urn:ietf:params:scim:schemas:extension:enterprise:2.0:User:manager.value"

Paths are immutable value objects. Attribute names and schema URNs compare
case-insensitively; value filters compare as written.
"""

import re
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple, Union


ATTRIBUTE_NAME = re.compile(r"^\$?[A-Za-z][\w\-]*$")


class MalformedPath(ValueError):
    """Raised when a path string does not follow the SCIM path grammar."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid SCIM path '{path}': {reason}")


class PathIndexError(IndexError):
    pass


def is_urn(value: str) -> bool:
    return len(value) > 4 and value[:4].lower() == "urn:"


@dataclass(frozen=True, eq=False)
class Element:
    """One attribute segment of a path, with an optional value filter."""
    attribute: str
    value_filter: Optional[str] = None

    def __eq__(self, other) -> bool:
        if not isinstance(other, Element):
            return NotImplemented
        return self.attribute.lower() == other.attribute.lower() and self.value_filter == other.value_filter

    def __hash__(self) -> int:
        return hash((self.attribute.lower(), self.value_filter))

    def __str__(self) -> str:
        if self.value_filter is None:
            return self.attribute
        return f"{self.attribute}[{self.value_filter}]"


class Path:
    __slots__ = ("_schema_urn", "_elements")

    def __init__(self, schema_urn: Optional[str] = None, elements: Iterable[Element] = ()):
        self._schema_urn = schema_urn
        self._elements: Tuple[Element, ...] = tuple(elements)

    @classmethod
    def root(cls, schema_urn: Optional[str] = None) -> "Path":
        return cls(schema_urn)

    @property
    def schema_urn(self) -> Optional[str]:
        return self._schema_urn

    @property
    def elements(self) -> Tuple[Element, ...]:
        return self._elements

    def attribute(self, name: Union[str, "Path"], value_filter: Optional[str] = None) -> "Path":
        """Return a new path with ``name`` appended.

        Passing another ``Path`` appends all of its elements, dropping its
        namespace.
        """
        if isinstance(name, Path):
            return Path(self._schema_urn, self._elements + name.elements)
        return Path(self._schema_urn, self._elements + (Element(name, value_filter),))

    def size(self) -> int:
        return len(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def is_root(self) -> bool:
        return not self._elements

    def sub_path(self, size: int) -> "Path":
        """Return the path truncated to its first ``size`` elements."""
        if size < 0 or size > len(self._elements):
            raise PathIndexError(f"Sub path size {size} is out of range for path '{self}' of size {len(self._elements)}")
        return Path(self._schema_urn, self._elements[:size])

    def without_filters(self) -> "Path":
        if all(e.value_filter is None for e in self._elements):
            return self
        return Path(self._schema_urn, (Element(e.attribute) for e in self._elements))

    def _key(self) -> Tuple[Optional[str], Tuple[Element, ...]]:
        urn = self._schema_urn.lower() if self._schema_urn is not None else None
        return urn, self._elements

    def __eq__(self, other) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        attributes = ".".join(str(e) for e in self._elements)
        if self._schema_urn is None:
            return attributes
        if not attributes:
            return self._schema_urn
        return f"{self._schema_urn}:{attributes}"

    def __repr__(self) -> str:
        return f"Path({str(self)!r})"

    @classmethod
    def from_string(cls, path: str) -> "Path":
        """
        Parse a SCIM path string.

        Examples:
            "userName" -> Path("userName")
            "emails[type eq \"work\"].value" -> Path with a filter on "emails"
            "urn:ietf:params:scim:schemas:extension:enterprise:2.0:User:manager"
                -> Path rooted at the enterprise extension URN

        Raises:
            MalformedPath: If the string is not a valid path
        """
        text = path.strip()
        if not text:
            return cls.root()

        schema_urn = None
        attributes = text
        if is_urn(text):
            bracket = text.find("[")
            prefix = text if bracket < 0 else text[:bracket]
            colon = prefix.rfind(":")
            schema_urn = text[:colon]
            attributes = text[colon + 1:]
            if len(schema_urn) <= 4 or schema_urn.endswith(":"):
                raise MalformedPath(path, "schema URN is incomplete")
            if not attributes:
                raise MalformedPath(path, "missing attribute name after schema URN")

        return cls(schema_urn, _parse_elements(path, attributes))


def _parse_elements(path: str, text: str) -> Tuple[Element, ...]:
    elements = []
    pos = 0
    while True:
        end = pos
        while end < len(text) and text[end] not in ".[]":
            end += 1
        name = text[pos:end]
        if not name:
            raise MalformedPath(path, f"empty attribute name at position {pos}")
        if not ATTRIBUTE_NAME.match(name):
            raise MalformedPath(path, f"invalid attribute name '{name}'")

        value_filter = None
        if end < len(text) and text[end] == "]":
            raise MalformedPath(path, f"unexpected ']' at position {end}")
        if end < len(text) and text[end] == "[":
            close = _find_closing_bracket(text, end)
            if close < 0:
                raise MalformedPath(path, "unterminated '['")
            value_filter = text[end + 1:close].strip()
            if not value_filter:
                raise MalformedPath(path, f"empty value filter on '{name}'")
            end = close + 1
            if end < len(text) and text[end] != ".":
                raise MalformedPath(path, f"unexpected '{text[end]}' after ']'")

        elements.append(Element(name, value_filter))
        if end >= len(text):
            return tuple(elements)
        # text[end] is "."
        pos = end + 1
        if pos >= len(text):
            raise MalformedPath(path, "path ends with '.'")


def _find_closing_bracket(text: str, start: int) -> int:
    """Index of the ']' closing the '[' at ``start``, ignoring quoted text."""
    in_quotes = False
    i = start + 1
    while i < len(text):
        char = text[i]
        if in_quotes:
            if char == "\\":
                i += 1
            elif char == '"':
                in_quotes = False
        elif char == '"':
            in_quotes = True
        elif char == "[":
            return -1
        elif char == "]":
            return i
        i += 1
    return -1
