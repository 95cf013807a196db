"""A character trie used for Vietnamese spelling checks."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from bamboo.chars import Tone, add_tone_to_char, remove_mark_from_char


class FindResult(IntEnum):
    """How well a string matches the trie."""

    NOT_MATCH = 0
    MATCH_PREFIX = 1
    MATCH_FULL = 2


@dataclass
class Node:
    """A trie node; `full` marks the end of a word."""

    full: bool = False
    dictionary: bool = False
    children: dict[str, Node] = field(default_factory=dict)


def add_trie(trie: Node, s: str, dictionary: bool, down: bool) -> None:
    """Insert a word, also adding paths with the marks and tones dropped.

    Paths reached through a dropped mark or tone (`down`) only lead to
    prefixes, never to full words.
    """
    if not s:
        raise ValueError("cannot add an empty string to the trie")
    first, rest = s[0], s[1:]
    child = trie.children.setdefault(first, Node())
    if not rest:
        if not child.full:
            child.full = not down
        child.dictionary = dictionary
    else:
        add_trie(child, rest, dictionary, down)

    unmarked = remove_mark_from_char(first)
    if unmarked != first:
        node = trie.children.setdefault(unmarked, Node())
        if rest:
            add_trie(node, rest, dictionary, True)
    toneless = add_tone_to_char(unmarked, Tone.NONE)
    if toneless != first and toneless != unmarked:
        node = trie.children.setdefault(toneless, Node())
        if rest:
            add_trie(node, rest, dictionary, True)


def match_string(trie: Node, s: str, dictionary: bool) -> FindResult:
    """Test a string against the trie, ignoring the case of the input.

    With `dictionary` set, only full words that came from a dictionary match.
    """
    node = trie
    for ch in s:
        next_node = node.children.get(ch.lower())
        if next_node is None:
            return FindResult.NOT_MATCH
        node = next_node
    if dictionary:
        if node.full and node.dictionary:
            return FindResult.MATCH_FULL
        return FindResult.NOT_MATCH
    return FindResult.MATCH_FULL if node.full else FindResult.MATCH_PREFIX


def find_node(trie: Node, s: str) -> Node | None:
    """Return the node reached by following s exactly, or None."""
    node = trie
    for ch in s:
        next_node = node.children.get(ch)
        if next_node is None:
            return None
        node = next_node
    return node


def _collect(node: Node, prefix: str, found: set[str]) -> None:
    if node.full:
        found.add(prefix)
    for ch, child in node.children.items():
        _collect(child, prefix + ch, found)


def find_words(trie: Node, s: str) -> list[str]:
    """Return, sorted, the full words of the trie that start with s."""
    node = find_node(trie, s)
    if node is None:
        return []
    found: set[str] = set()
    _collect(node, s, found)
    return sorted(found)