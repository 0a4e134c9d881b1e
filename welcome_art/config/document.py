# welcome_art/config/document.py
# Line-preserving document model for INI-like config files (sections, key=value, comments, blanks)

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple, Union

from ..core.exceptions import LineError

# line grammar
SECTION_HEADER_RE = re.compile(r"^\s*\[([^\]]+)\]\s*$")
KEY_VALUE_RE = re.compile(r"^\s*[^=#][^=]*=.*$")

# first line written into config files created from scratch
NEW_FILE_HEADER = "# Welcome-Art Configuration"

_QUOTES = ("'", '"')


# values the reader would trim or unquote must be written inside quotes
def needs_quotes(value: str) -> bool:
    if value != value.strip():
        return True
    return len(value) >= 2 and value[0] in _QUOTES and value[-1] == value[0]


# base entry: one physical line, stored w/o its line ending
@dataclass
class Entry:
    text: str
    ending: str = "\n"
    line_number: Optional[int] = None

    def render(self) -> str:
        return self.text + self.ending


@dataclass
class Blank(Entry):
    pass


@dataclass
class Comment(Entry):
    @property
    def comment(self) -> str:
        return self.text.strip()[1:].strip()


# line matching none of the grammar rules; kept verbatim so reads stay lossless
@dataclass
class Malformed(Entry):
    pass


@dataclass
class SectionHeader(Entry):
    name: str = ""


# key=value line; edits keep the original key spelling, spacing & quote style
@dataclass
class KeyValue(Entry):
    key: str = ""
    value: str = ""
    prefix: str = ""
    suffix: str = ""
    quote: str = ""

    @classmethod
    def from_line(
        cls, text: str, ending: str = "\n", line_number: Optional[int] = None
    ) -> "KeyValue":
        before, _, after = text.partition("=")
        stripped = after.strip()
        lead = after[: len(after) - len(after.lstrip())]
        tail = after[len(after.rstrip()) :] if stripped else ""
        quote = ""
        value = stripped
        if len(stripped) >= 2 and stripped[0] in _QUOTES and stripped[-1] == stripped[0]:
            quote = stripped[0]
            value = stripped[1:-1]
        return cls(
            text=text,
            ending=ending,
            line_number=line_number,
            key=before.strip(),
            value=value,
            prefix=f"{before}={lead}",
            suffix=tail,
            quote=quote,
        )

    @classmethod
    def new(cls, key: str, value: str, ending: str = "\n") -> "KeyValue":
        entry = cls(text="", ending=ending, key=key, prefix=f"{key}=")
        entry.set_value(value)
        return entry

    # reading the rewritten line back yields exactly `value`
    def set_value(self, value: str) -> None:
        if not self.quote and needs_quotes(value):
            self.quote = '"'
        self.value = value
        self.text = f"{self.prefix}{self.quote}{value}{self.quote}{self.suffix}"


Line = Union[Blank, Comment, Malformed, SectionHeader, KeyValue]


# physical run of lines under one header (header is None for the preamble)
@dataclass
class Block:
    header: Optional[SectionHeader] = None
    entries: List[Entry] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.header.name if self.header is not None else ""

    def lines(self) -> Iterator[Entry]:
        if self.header is not None:
            yield self.header
        yield from self.entries


# * Split text into (content, ending) pairs; endings kept for byte-exact output
def split_lines(text: str) -> List[Tuple[str, str]]:
    lines: List[Tuple[str, str]] = []
    pos = 0
    while pos < len(text):
        nl = text.find("\n", pos)
        if nl == -1:
            lines.append((text[pos:], ""))
            break
        end = nl
        ending = "\n"
        if end > pos and text[end - 1] == "\r":
            end -= 1
            ending = "\r\n"
        lines.append((text[pos:end], ending))
        pos = nl + 1
    return lines


# * Classify one line against the config grammar
def parse_line(text: str, ending: str = "\n", line_number: Optional[int] = None) -> Line:
    if not text.strip():
        return Blank(text, ending, line_number)
    if text.lstrip().startswith("#"):
        return Comment(text, ending, line_number)
    header = SECTION_HEADER_RE.match(text)
    if header and header.group(1).strip():
        return SectionHeader(text, ending, line_number, name=header.group(1).strip())
    if KEY_VALUE_RE.match(text) and text.partition("=")[0].strip():
        return KeyValue.from_line(text, ending, line_number)
    return Malformed(text, ending, line_number)


# * Ordered config document; logical sections may span repeated headers
@dataclass
class ConfigDocument:
    blocks: List[Block] = field(default_factory=lambda: [Block()])
    path: Optional[Path] = None
    warnings: List[str] = field(default_factory=list)

    @classmethod
    def new(cls, path: Optional[Path] = None) -> "ConfigDocument":
        preamble = Block(entries=[Comment(NEW_FILE_HEADER), Blank("")])
        return cls(blocks=[preamble], path=path)

    # line ending used for lines added in memory
    @property
    def newline(self) -> str:
        for entry in self.lines():
            if entry.ending:
                return entry.ending
        return "\n"

    def lines(self) -> Iterator[Entry]:
        for block in self.blocks:
            yield from block.lines()

    @property
    def errors(self) -> List[LineError]:
        return [
            LineError(e.line_number or 0, e.text)
            for e in self.lines()
            if isinstance(e, Malformed)
        ]

    @property
    def is_valid(self) -> bool:
        return not self.errors

    # logical section names in first-occurrence order (preamble excluded)
    def section_names(self) -> List[str]:
        names: List[str] = []
        for block in self.blocks:
            if block.header is not None and block.name not in names:
                names.append(block.name)
        return names

    def has_section(self, name: str) -> bool:
        return name == "" or name in self.section_names()

    def _blocks_named(self, name: str) -> List[Block]:
        if name == "":
            return [self.blocks[0]]
        return [b for b in self.blocks if b.header is not None and b.name == name]

    # key -> value for one logical section (last write wins)
    def items(self, section: str) -> Dict[str, str]:
        values: Dict[str, str] = {}
        for block in self._blocks_named(section):
            for entry in block.entries:
                if isinstance(entry, KeyValue):
                    values[entry.key] = entry.value
        return values

    def get(self, section: str, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.items(section).get(key, default)

    # flattened (section, key) -> value view used by the layer resolver
    def as_mapping(self) -> Dict[Tuple[str, str], str]:
        mapping: Dict[Tuple[str, str], str] = {}
        for block in self.blocks:
            for entry in block.entries:
                if isinstance(entry, KeyValue):
                    mapping[(block.name, entry.key)] = entry.value
        return mapping

    # * Set key in section: update in place, append to section, or append new section
    def set_key(self, section: str, key: str, value: str) -> None:
        blocks = self._blocks_named(section)
        if not blocks:
            self._append_section(section, key, value)
            return

        matches = [
            e
            for b in blocks
            for e in b.entries
            if isinstance(e, KeyValue) and e.key == key
        ]
        if matches:
            # every occurrence updated so a hand-edited duplicate cannot shadow the new value
            for entry in matches:
                entry.set_value(value)
            return

        target = blocks[-1]
        entries = target.entries
        # end of the section: after its last key & the comments directly below it,
        # ahead of trailing blanks & any comment block introducing the next header
        last_key = max(
            (i for i, e in enumerate(entries) if not isinstance(e, (Blank, Comment))),
            default=-1,
        )
        if last_key < 0:
            insert_at = max(
                (i + 1 for i, e in enumerate(entries) if not isinstance(e, Blank)),
                default=0,
            )
        else:
            insert_at = last_key + 1
            while insert_at < len(entries) and isinstance(entries[insert_at], Comment):
                insert_at += 1

        previous = target.entries[insert_at - 1] if insert_at else target.header
        if previous is None:
            previous = self._line_before(target)
        if previous is not None and not previous.ending:
            previous.ending = self.newline
        target.entries.insert(insert_at, KeyValue.new(key, value, self.newline))

    def _line_before(self, block: Block) -> Optional[Entry]:
        last: Optional[Entry] = None
        for candidate in self.blocks:
            if candidate is block:
                return last
            for entry in candidate.lines():
                last = entry
        return last

    def _append_section(self, section: str, key: str, value: str) -> None:
        newline = self.newline
        last: Optional[Entry] = None
        for entry in self.lines():
            last = entry
        if last is not None:
            if not last.ending:
                last.ending = newline
            if not isinstance(last, Blank):
                self.blocks[-1].entries.append(Blank("", newline))
        header = SectionHeader(f"[{section}]", newline, name=section)
        self.blocks.append(Block(header, [KeyValue.new(key, value, newline)]))

    def render(self) -> str:
        return "".join(entry.render() for entry in self.lines())


# * Parse config text into a document; malformed lines are kept & reported, never fatal
def parse_document(text: str, path: Optional[Path] = None) -> ConfigDocument:
    doc = ConfigDocument(path=path)
    current = doc.blocks[0]
    seen: set[str] = set()

    for number, (content, ending) in enumerate(split_lines(text), start=1):
        entry = parse_line(content, ending, number)
        if isinstance(entry, SectionHeader):
            if entry.name in seen:
                doc.warnings.append(
                    f"Duplicate section [{entry.name}] at line {number} "
                    "continues the earlier section"
                )
            seen.add(entry.name)
            current = Block(entry)
            doc.blocks.append(current)
            continue
        current.entries.append(entry)

    return doc


# * Validate a document: every line must be blank, comment, header or key=value
def validate_document(doc: ConfigDocument) -> List[LineError]:
    return doc.errors


def validate_text(text: str) -> List[LineError]:
    return parse_document(text).errors


__all__ = [
    "SECTION_HEADER_RE",
    "KEY_VALUE_RE",
    "NEW_FILE_HEADER",
    "Entry",
    "Blank",
    "Comment",
    "Malformed",
    "SectionHeader",
    "KeyValue",
    "Block",
    "ConfigDocument",
    "split_lines",
    "parse_line",
    "parse_document",
    "validate_document",
    "validate_text",
]
