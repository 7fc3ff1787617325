"""
Comment-preserving editable view of a configuration file.

tomlkit keeps every byte of a TOML file, but it files comments where the
parser meets them: a comment block written above a ``[table]`` header ends up
at the end of the *previous* table. Migrations reason the other way round:
the comment block above a key or a header documents that key or table.

:class:`ConfigDocument` regroups tomlkit's syntax tree into that shape. Each
:class:`Entry` (key/value pair) and :class:`Section` (``[table]``) carries
its *decor*, the exact text between the previous line of content and its own
first line. Rendering an untouched document gives back the input byte for
byte; edits only change what they touch.

Only the subset of TOML used by configuration files is supported: top-level
key/values, top-level `table.key = value` lines and standard tables of
key/values. Deeper dotted keys, dotted keys inside tables, nested tables and
arrays of tables raise :class:`~gitz.exceptions.DocumentError`.
"""

from typing import Any, Dict, Iterator, List, Optional, Union

import tomlkit
from loguru import logger
from tomlkit.exceptions import TOMLKitError
from tomlkit.items import AoT, Array, Item, Key, String, StringType, Table, Trivia

from ..exceptions import DocumentError

_TRIVIA_FIELDS = ("indent", "comment_ws", "comment", "trail")


def multiline_string(value: str) -> String:
    """
    Build a multi-line basic string item.

    The opening delimiter is followed by a newline, which TOML trims, so the
    value starts on its own line as users write templates.
    """
    escaped = tomlkit.string(value, multiline=True).as_string()[3:-3]
    return String(StringType.MLB, value, "\n" + escaped, Trivia())


def to_item(value: Any) -> Item:
    """Convert a Python value to a tomlkit item, multi-line for strings with newlines."""
    if isinstance(value, str) and "\n" in value:
        return multiline_string(value)
    return tomlkit.item(value)


class Entry:
    """
    A ``key = value`` line and the comment block above it.

    Attributes:
        decor: Text written before the key, usually blank lines and comments
        item: The tomlkit value item, including its inline trivia
    """

    def __init__(self, key: Key, item: Item, decor: str = ""):
        self._key = key
        self.item = item
        self.decor = decor

    @classmethod
    def new(cls, key: str, value: Any, decor: str = "") -> "Entry":
        """Create an entry from plain Python values."""
        return cls(tomlkit.key(key), value if isinstance(value, Item) else to_item(value), decor)

    @property
    def key(self) -> str:
        return self._key.key

    @property
    def value(self) -> Any:
        """The value as plain Python data."""
        return self.item.unwrap()

    def set_value(self, value: Any) -> None:
        """Replace the value, keeping indentation and any trailing inline comment."""
        new_item = to_item(value)
        for name in _TRIVIA_FIELDS:
            setattr(new_item.trivia, name, getattr(self.item.trivia, name))
        self.item = new_item

    def array(self) -> Array:
        """
        Return the value as an editable tomlkit array.

        Raises:
            DocumentError: If the value is not an array
        """
        if not isinstance(self.item, Array):
            raise DocumentError(
                f"Expected {self.key} to be an array", "DOCUMENT_002", {"key": self.key}
            )
        return self.item

    def as_string(self, prefix: Optional[str] = None) -> str:
        """Render the entry; ``prefix`` writes it as a dotted key under that table."""
        trivia = self.item.trivia
        key = self._key.as_string() if prefix is None else f"{prefix}.{self._key.as_string()}"
        return (
            f"{self.decor}"
            f"{trivia.indent}"
            f"{key}"
            f"{self._key.sep}"
            f"{self.item.as_string()}"
            f"{trivia.comment_ws}"
            f"{trivia.comment}"
            f"{trivia.trail}"
        )

    def __repr__(self) -> str:
        return f"Entry({self.key!r}, {self.value!r})"


class Section:
    """
    A table, the comment block above it and its entries.

    A section is usually written as a ``[table]`` header followed by its
    entries. A *dotted* section has no header: each entry is written as a
    top-level ``table.key = value`` line, and the decor sits above the first
    of them.
    """

    def __init__(
        self,
        key: Key,
        entries: Optional[List[Entry]] = None,
        decor: str = "",
        header: Optional[str] = None,
        dotted: bool = False,
    ):
        self._key = key
        self.entries = list(entries or [])
        self.decor = decor
        self._header = header
        self._dotted = dotted

    @classmethod
    def new(cls, key: str, entries: Optional[List[Entry]] = None, decor: str = "") -> "Section":
        return cls(tomlkit.key(key), entries, decor)

    @property
    def key(self) -> str:
        return self._key.key

    @property
    def is_dotted(self) -> bool:
        return self._dotted

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    def get(self, key: str) -> Optional[Entry]:
        for entry in self.entries:
            if entry.key == key:
                return entry
        return None

    def entry(self, key: str) -> Entry:
        """
        Return the entry for ``key``.

        Raises:
            DocumentError: If the table has no such key
        """
        entry = self.get(key)
        if entry is None:
            raise DocumentError(
                f"No {self.key}.{key} key in the configuration",
                "DOCUMENT_002",
                {"key": f"{self.key}.{key}"},
            )
        return entry

    def set(self, key: str, value: Any) -> Entry:
        """Set the value of ``key``, appending a new entry if it is absent."""
        entry = self.get(key)
        if entry is None:
            entry = Entry.new(key, value)
            self.entries.append(entry)
        else:
            entry.set_value(value)
        return entry

    def append(self, entry: Entry) -> None:
        self.entries.append(entry)

    def remove(self, key: str) -> Optional[Entry]:
        """Remove ``key`` with its decor; return the removed entry, if any."""
        entry = self.get(key)
        if entry is not None:
            self.entries.remove(entry)
        return entry

    def as_string(self) -> str:
        if self._dotted:
            prefix = self._key.as_string()
            return self.decor + "".join(entry.as_string(prefix) for entry in self.entries)

        if self._header is None:
            header = f"[{self._key.as_string()}]\n"
        else:
            header = self._header
        return self.decor + header + "".join(entry.as_string() for entry in self.entries)

    def __repr__(self) -> str:
        return f"Section({self.key!r}, {[entry.key for entry in self.entries]!r})"


Node = Union[Entry, Section]


def _is_inline(node: Node) -> bool:
    return isinstance(node, Entry) or node.is_dotted


def _header_of(key: Key, table: Table) -> str:
    trivia = table.trivia
    name = table.display_name if table.display_name is not None else key.as_string()
    newline = "\n" if "\n" not in trivia.trail and len(table.value) > 0 else ""
    return f"{trivia.indent}[{name}]{trivia.comment_ws}{trivia.comment}{trivia.trail}{newline}"


def _check_supported_key(key: Key, item: Item) -> None:
    if key.is_dotted():
        raise DocumentError(
            f"Dotted keys are not supported: {key.as_string()}",
            "DOCUMENT_001",
            {"key": key.as_string()},
        )
    if isinstance(item, AoT):
        raise DocumentError(
            f"Arrays of tables are not supported: {key.as_string()}",
            "DOCUMENT_001",
            {"key": key.as_string()},
        )


class ConfigDocument:
    """
    An ordered list of top-level entries and sections.

    Example:
        >>> document = ConfigDocument.parse('version = "0.1"\\n')
        >>> document.entry("version").set_value("0.2")
        >>> document.as_string()
        'version = "0.2"\\n'
    """

    def __init__(self, nodes: Optional[List[Node]] = None, epilogue: str = ""):
        self.nodes = list(nodes or [])
        self.epilogue = epilogue

    @classmethod
    def parse(cls, toml_text: str) -> "ConfigDocument":
        """
        Parse TOML text into an editable document.

        Raises:
            DocumentError: With code DOCUMENT_001 if the text is not TOML or
                uses constructs outside the supported subset
        """
        try:
            toml_document = tomlkit.parse(toml_text)
        except TOMLKitError as e:
            logger.error(f"Failed to parse the configuration as a document: {e}")
            raise DocumentError(
                "Failed to parse the configuration as an editable document",
                "DOCUMENT_001",
                {"reason": str(e)},
            ) from e

        nodes: List[Node] = []
        dotted_sections: Dict[str, Section] = {}
        pending: List[str] = []

        for key, item in toml_document.body:
            if key is None:
                pending.append(item.as_string())
                continue

            decor = "".join(pending)

            # tomlkit files each `table.key = value` line under its own implicit table.
            if key.is_dotted() and isinstance(item, Table):
                child_key, child = cls._dotted_child(key, item)
                section = dotted_sections.get(key.key)
                if section is None:
                    section = Section(key, [], decor, dotted=True)
                    dotted_sections[key.key] = section
                    nodes.append(section)
                    decor = ""
                section.append(Entry(child_key, child, decor))
                pending = []
                continue

            _check_supported_key(key, item)

            if isinstance(item, Table):
                section, trailing = cls._section_from_table(key, item, decor)
                nodes.append(section)
                pending = [trailing]
            else:
                nodes.append(Entry(key, item, decor))
                pending = []

        return cls(nodes, "".join(pending))

    @staticmethod
    def _dotted_child(key: Key, table: Table):
        body = table.value.body
        if len(body) != 1 or body[0][0] is None or isinstance(body[0][1], (Table, AoT)):
            raise DocumentError(
                f"Dotted keys deeper than table.key are not supported: {key.as_string()}",
                "DOCUMENT_001",
                {"key": key.as_string()},
            )
        return body[0]

    @staticmethod
    def _section_from_table(key: Key, table: Table, decor: str):
        if table.is_super_table():
            raise DocumentError(
                f"Nested tables are not supported: {key.as_string()}",
                "DOCUMENT_001",
                {"key": key.as_string()},
            )

        entries: List[Entry] = []
        pending: List[str] = []
        for child_key, child in table.value.body:
            if child_key is None:
                pending.append(child.as_string())
                continue

            _check_supported_key(child_key, child)
            if isinstance(child, Table):
                raise DocumentError(
                    f"Nested tables are not supported: {key.as_string()}.{child_key.as_string()}",
                    "DOCUMENT_001",
                    {"key": f"{key.as_string()}.{child_key.as_string()}"},
                )
            entries.append(Entry(child_key, child, "".join(pending)))
            pending = []

        # Comments after the last entry document whatever comes next.
        return Section(key, entries, decor, _header_of(key, table)), "".join(pending)

    def as_string(self) -> str:
        """
        Render the document.

        Top-level entries and dotted sections are written before the other
        sections, as TOML requires.
        """
        parts = [node.as_string() for node in self.nodes if _is_inline(node)]
        for section in self.sections():
            if section.is_dotted:
                continue
            if parts and not parts[-1].endswith("\n"):
                parts.append("\n")
            parts.append(section.as_string())
        parts.append(self.epilogue)
        return "".join(parts)

    def __str__(self) -> str:
        return self.as_string()

    def __contains__(self, key: str) -> bool:
        return self._index(key) is not None

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    def sections(self) -> List[Section]:
        return [node for node in self.nodes if isinstance(node, Section)]

    def _index(self, key: str) -> Optional[int]:
        for index, node in enumerate(self.nodes):
            if node.key == key:
                return index
        return None

    def get(self, key: str) -> Optional[Node]:
        index = self._index(key)
        return None if index is None else self.nodes[index]

    def entry(self, key: str) -> Entry:
        """
        Return the top-level ``key = value`` entry for ``key``.

        Raises:
            DocumentError: If there is no such entry or ``key`` is a table
        """
        node = self.get(key)
        if not isinstance(node, Entry):
            raise DocumentError(
                f"No {key} key in the configuration", "DOCUMENT_002", {"key": key}
            )
        return node

    def section(self, key: str) -> Section:
        """
        Return the ``[key]`` table.

        Raises:
            DocumentError: If there is no such table (an inline table does not count)
        """
        node = self.get(key)
        if not isinstance(node, Section):
            raise DocumentError(
                f"No [{key}] table in the configuration", "DOCUMENT_002", {"key": key}
            )
        return node

    def optional_section(self, key: str) -> Optional[Section]:
        """Return the ``[key]`` table, or None when the key is absent."""
        if key not in self:
            return None
        return self.section(key)

    def set(self, key: str, value: Any) -> Entry:
        """Set a top-level value, appending a new entry if it is absent."""
        node = self.get(key)
        if node is None:
            node = Entry.new(key, value)
            self.nodes.append(node)
        elif isinstance(node, Entry):
            node.set_value(value)
        else:
            raise DocumentError(
                f"Cannot set [{key}] to a plain value", "DOCUMENT_002", {"key": key}
            )
        return node

    def replace(self, key: str, node: Node) -> Node:
        """
        Put ``node`` where ``key`` was and return the replaced node.

        The new node may have another key and another kind: this is how a
        field is restructured without moving it in the file.

        Raises:
            DocumentError: If ``key`` is absent
        """
        index = self._index(key)
        if index is None:
            raise DocumentError(
                f"No {key} key in the configuration", "DOCUMENT_002", {"key": key}
            )
        old = self.nodes[index]
        self.nodes[index] = node
        return old

    def append(self, node: Node) -> None:
        self.nodes.append(node)

    def remove(self, key: str) -> Optional[Node]:
        """Remove ``key`` with its decor; return the removed node, if any."""
        index = self._index(key)
        if index is None:
            return None
        return self.nodes.pop(index)


__all__ = [
    "ConfigDocument",
    "Entry",
    "Section",
    "multiline_string",
    "to_item",
]
