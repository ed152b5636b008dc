"""
Section Locator.

Headings are the only reliable anchors in the documentation pages, so a
"section" is simply the run of siblings after a heading, up to the next
heading of the same or a higher level.  Everything here is a pure function
over DocNode lists; a heading that cannot be found yields an empty section,
never an exception.
"""

from typing import Iterator, Optional

from .schemas import DocNode, NodeKind


def iter_nodes(nodes: list[DocNode]) -> Iterator[tuple[DocNode, list[DocNode], int]]:
    """
    Walk the tree depth-first in document order.

    Yields (node, siblings, index) so callers can look at the node's
    neighbours without parent pointers.  Uses an explicit stack, so tree
    depth is not bounded by the recursion limit.
    """
    stack = [(nodes, 0)]
    while stack:
        siblings, index = stack.pop()
        if index >= len(siblings):
            continue
        node = siblings[index]
        yield node, siblings, index
        stack.append((siblings, index + 1))
        if node.children:
            stack.append((node.children, 0))


def section_after(siblings: list[DocNode], index: int) -> list[DocNode]:
    """Siblings following siblings[index] up to the next heading of level <= its own."""
    level = siblings[index].level
    section = []
    for node in siblings[index + 1:]:
        if node.kind == NodeKind.HEADING and node.level <= level:
            break
        section.append(node)
    return section


def find_heading(nodes: list[DocNode], label: str,
                 level: int) -> Optional[tuple[list[DocNode], int]]:
    """Position (siblings, index) of the first level-`level` heading whose trimmed text is `label`."""
    for node, siblings, index in iter_nodes(nodes):
        if node.is_heading(level) and node.text.strip() == label:
            return siblings, index
    return None


def locate_section(nodes: list[DocNode], label: str, level: int = 2) -> list[DocNode]:
    """
    Content nodes of the section headed by `label`.

    Matching is exact and case-sensitive on the trimmed heading text, and
    only the first matching heading counts.

    Args:
        nodes: Top-level nodes of a ParsedDocument
        label: Heading text to look for, e.g. "Installation"
        level: Heading level (2 for <h2>)

    Returns:
        Ordered section nodes, or [] when the heading is absent
    """
    position = find_heading(nodes, label, level)
    if position is None:
        return []
    siblings, index = position
    return section_after(siblings, index)


def first_heading(nodes: list[DocNode], level: int) -> Optional[tuple[list[DocNode], int]]:
    """Position of the first heading of a given level, in document order."""
    for node, siblings, index in iter_nodes(nodes):
        if node.is_heading(level):
            return siblings, index
    return None


def code_blocks(nodes: list[DocNode]) -> list[DocNode]:
    """Code nodes among `nodes` and their descendants, in document order."""
    return [node for node, _, _ in iter_nodes(nodes) if node.kind == NodeKind.CODE]


def nearest_heading_before(siblings: list[DocNode], index: int) -> Optional[DocNode]:
    """Closest preceding sibling that is a heading of any level."""
    for node in reversed(siblings[:index]):
        if node.kind == NodeKind.HEADING:
            return node
    return None
