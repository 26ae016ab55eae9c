"""TypeScript source parsing and cursor positions."""

from __future__ import annotations

from dataclasses import dataclass

import tree_sitter_typescript as tstypescript
from pydantic import BaseModel, Field
from tree_sitter import Language, Node, Parser, Tree

TS_LANGUAGE = Language(tstypescript.language_typescript())


class Position(BaseModel):
    """A zero-based cursor position, as editors report it.

    ``character`` counts UTF-16 code units, so a character outside the Basic
    Multilingual Plane occupies two.
    """

    line: int = Field(..., ge=0)
    character: int = Field(..., ge=0)


@dataclass(frozen=True)
class SourceTree:
    """Parsed TypeScript source plus the bytes its node offsets refer to."""

    text: str
    source: bytes
    tree: Tree

    @property
    def root(self) -> Node:
        return self.tree.root_node

    def text_of(self, node: Node) -> str:
        return self.source[node.start_byte:node.end_byte].decode("utf-8")


def parse_source(text: str) -> SourceTree:
    source = text.encode("utf-8")
    tree = Parser(TS_LANGUAGE).parse(source)
    return SourceTree(text=text, source=source, tree=tree)


def _utf16_prefix(text: str, units: int) -> str:
    """The leading part of ``text`` spanning ``units`` UTF-16 code units."""
    count = 0
    for index, char in enumerate(text):
        if count >= units:
            return text[:index]
        count += 2 if ord(char) > 0xFFFF else 1
    return text


def position_to_offset(source: SourceTree, position: Position) -> int:
    """Byte offset of ``position``; lines and characters past the end are clamped."""
    lines = source.text.split("\n")
    line = min(position.line, len(lines) - 1)

    preceding = sum(len(text.encode("utf-8")) + 1 for text in lines[:line])
    return preceding + len(_utf16_prefix(lines[line], position.character).encode("utf-8"))
