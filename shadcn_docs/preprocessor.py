"""
Preprocessor: raw HTML → ParsedDocument.

Turns a documentation page into an ordered tree of typed nodes (heading,
paragraph, code, container) that the Section Locator and the extractors
walk without touching BeautifulSoup themselves.  Anchor hrefs are collected
in document order for the catalog scan.

Design principle: NEVER FAIL on bad HTML.  Malformed markup yields a
smaller tree and a warning, not an exception.

Pipeline position: Stage 1 (Fetcher → Preprocessor → Locator/Extractors).
Input:  raw HTML string
Output: ParsedDocument
"""

import re

from bs4 import BeautifulSoup, Comment, Tag

from .schemas import DocNode, NodeKind, ParsedDocument
from .logger import get_module_logger

logger = get_module_logger("preprocessor")

HEADING_LEVELS = {f"h{n}": n for n in range(1, 7)}

# Dropped with their content so no script text leaks into descriptions
STRIP_ELEMENTS = ['script', 'style', 'noscript', 'template']

# Attributes worth keeping on nodes; everything else is presentation
KEPT_ATTRIBUTES = ['role', 'id', 'data-state', 'data-orientation']


class Preprocessor:
    """Rule-based HTML preprocessor producing typed document nodes."""

    def _sanitize_html(self, html: str) -> tuple[str, list[str]]:
        """
        Sanitize raw HTML string before parsing.

        Returns:
            Tuple of (sanitized HTML, list of warnings)
        """
        warnings = []
        sanitized = html

        # NULL bytes are never valid in HTML text content
        if '\x00' in sanitized:
            sanitized = sanitized.replace('\x00', '')
            warnings.append("Removed NULL bytes")

        sanitized = sanitized.replace('\r\n', '\n').replace('\r', '\n')

        # Control characters except tab/newline
        control_chars = ''.join(chr(c) for c in range(32) if c not in (9, 10))
        if any(c in sanitized for c in control_chars):
            sanitized = sanitized.translate(str.maketrans('', '', control_chars))
            warnings.append("Removed control characters")

        return sanitized, warnings

    def _parse(self, html: str, warnings: list[str]) -> BeautifulSoup:
        # html5lib follows the WHATWG algorithm and copes with the worst
        # markup; lxml and html.parser are fallbacks if it blows up.
        try:
            return BeautifulSoup(html, 'html5lib')
        except Exception as e:
            logger.warning(f"html5lib parsing failed, trying lxml: {e}")
            warnings.append(f"html5lib parsing failed: {e}")

        try:
            return BeautifulSoup(html, 'lxml')
        except Exception as e:
            logger.warning(f"lxml parsing also failed: {e}")
            warnings.append(f"lxml parsing failed: {e}")
            return BeautifulSoup(html, 'html.parser')

    def process(self, html: str) -> ParsedDocument:
        """
        Parse HTML into a ParsedDocument.

        Args:
            html: Raw HTML string

        Returns:
            ParsedDocument with node tree, anchor hrefs and warnings
        """
        sanitized, warnings = self._sanitize_html(html)
        soup = self._parse(sanitized, warnings)

        for comment in soup.find_all(string=lambda text: isinstance(text, Comment)):
            comment.extract()

        stripped = 0
        for elem in soup.find_all(STRIP_ELEMENTS):
            elem.decompose()
            stripped += 1
        if stripped:
            logger.debug(f"Removed {stripped} script/style elements")

        links = [a['href'] for a in soup.find_all('a', href=True)]
        nodes = self._convert_children(soup)

        return ParsedDocument(nodes=nodes, links=links, warnings=warnings)

    def _convert_children(self, parent) -> list[DocNode]:
        """
        Convert the element children of `parent` and their subtrees.

        Walks with an explicit stack so arbitrarily deep pages convert
        without hitting the interpreter's recursion limit.  Popping in
        document order means each node is appended after its earlier
        siblings and their descendants.
        """
        roots: list[DocNode] = []
        containers = []
        stack = [(child, roots) for child in reversed(self._element_children(parent))]

        while stack:
            elem, siblings = stack.pop()
            node = self._convert(elem)
            siblings.append(node)
            if node.kind == NodeKind.CONTAINER:
                containers.append((elem, node))
                stack.extend(
                    (child, node.children) for child in reversed(self._element_children(elem))
                )

        # Elements with no element children are leaves
        for elem, node in containers:
            if not node.children:
                node.kind = NodeKind.OTHER
                node.text = self._text(elem)

        return roots

    def _element_children(self, elem) -> list[Tag]:
        # bare text between elements carries no structure
        return [child for child in elem.children if isinstance(child, Tag)]

    def _convert(self, elem: Tag) -> DocNode:
        """Map one element to a DocNode; containers get their children later."""
        name = (elem.name or '').lower()
        classes = list(elem.get('class') or [])
        attrs = {}
        for key in KEPT_ATTRIBUTES:
            value = elem.get(key)
            if isinstance(value, str):
                attrs[key] = value

        if name in HEADING_LEVELS:
            return DocNode(kind=NodeKind.HEADING, tag=name, level=HEADING_LEVELS[name],
                           text=self._text(elem), classes=classes, attrs=attrs)
        if name == 'p':
            return DocNode(kind=NodeKind.PARAGRAPH, tag=name, text=self._text(elem),
                           classes=classes, attrs=attrs)
        if name == 'pre':
            # Code keeps its exact whitespace; trimming is the consumer's call
            return DocNode(kind=NodeKind.CODE, tag=name, text=elem.get_text(),
                           classes=classes, attrs=attrs)

        return DocNode(kind=NodeKind.CONTAINER, tag=name, classes=classes, attrs=attrs)

    def _text(self, elem: Tag) -> str:
        # Collapse layout whitespace; leading/trailing trimmed by consumers
        return re.sub(r'[ \t\n]+', ' ', elem.get_text())


def preprocess(html: str) -> ParsedDocument:
    """Convenience function to preprocess HTML."""
    return Preprocessor().process(html)
