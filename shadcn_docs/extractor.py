"""
Field Extractors.

Pulls the component detail fields out of a parsed component page:
description, installation snippet, usage code and variant examples.

Each extractor is independent and total: a missing heading, section or code
block gives that field its empty value ("" or no variants), and the others
still run.  Once the page itself has been fetched, building a
ComponentDetail always succeeds.

Pipeline position: Stage 2 (Preprocessor → Extractor → Service cache).
Input:  ParsedDocument + component name
Output: ComponentDetail
"""

from typing import Optional

from .locator import (
    code_blocks,
    first_heading,
    iter_nodes,
    locate_section,
)
from .schemas import ComponentDetail, DocNode, NodeKind, ParsedDocument, VariantSpec
from .settings import Settings
from .logger import get_module_logger

logger = get_module_logger("extractor")

INSTALLATION_LABEL = "Installation"
USAGE_LABEL = "Usage"
EXAMPLES_LABEL = "Examples"

SECTION_LEVEL = 2
VARIANT_LEVEL = 3

# Code tab of a preview/code switcher in the Examples section
TAB_CONTENT_CLASS = "tabs-content"


def is_tab_content(node: DocNode) -> bool:
    return TAB_CONTENT_CLASS in node.classes or node.attrs.get("role") == "tabpanel"


class Extractor:
    """Extracts ComponentDetail fields from a parsed component page."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()

    def extract(self, document: ParsedDocument, component_name: str) -> ComponentDetail:
        """
        Build the full detail record for one component.

        Args:
            document: Parsed component page
            component_name: Lowercased component name (e.g. "button")

        Returns:
            ComponentDetail; props is None when no variants were found
        """
        props = self.extract_variants(document, component_name)

        detail = ComponentDetail(
            name=component_name,
            description=self.extract_description(document),
            url=self.settings.component_url(component_name),
            source_url=self.settings.source_url(component_name),
            installation=self.extract_installation(document),
            usage=self.extract_usage(document),
            props=props or None,
        )
        logger.info(
            f"Extracted {component_name}: installation={bool(detail.installation)}, "
            f"usage={bool(detail.usage)}, variants={len(props)}"
        )
        return detail

    def extract_description(self, document: ParsedDocument) -> str:
        """Text of the paragraph right after the first <h1>, or ""."""
        position = first_heading(document.nodes, 1)
        if position is None:
            return ""

        siblings, index = position
        if index + 1 >= len(siblings):
            return ""
        following = siblings[index + 1]
        if following.kind != NodeKind.PARAGRAPH:
            return ""
        # Script content was dropped by the Preprocessor
        return following.text.strip()

    def extract_installation(self, document: ParsedDocument) -> str:
        """First code block of the Installation section, trimmed."""
        section = locate_section(document.nodes, INSTALLATION_LABEL, SECTION_LEVEL)
        blocks = code_blocks(section)
        if not blocks:
            logger.debug("No installation code block")
            return ""
        return blocks[0].text.strip()

    def extract_usage(self, document: ParsedDocument) -> str:
        """All code blocks of the Usage section, trimmed and joined by a blank line."""
        section = locate_section(document.nodes, USAGE_LABEL, SECTION_LEVEL)
        return "\n\n".join(block.text.strip() for block in code_blocks(section))

    def extract_variants(self, document: ParsedDocument,
                         component_name: str) -> dict[str, VariantSpec]:
        """
        One VariantSpec per <h3> directly inside the Examples section.

        Heading text is the key, so a repeated heading replaces the earlier
        entry while keeping its original position in the mapping.  A
        variant's example is the first tab content block anywhere after its
        heading in the Examples section, so a heading with no tabs of its own
        takes the next variant's code.
        """
        section = locate_section(document.nodes, EXAMPLES_LABEL, SECTION_LEVEL)
        props: dict[str, VariantSpec] = {}

        for index, node in enumerate(section):
            if not node.is_heading(VARIANT_LEVEL):
                continue

            variant_name = node.text.strip()
            if variant_name in props:
                logger.debug(f"Duplicate variant heading '{variant_name}' replaces earlier entry")

            props[variant_name] = VariantSpec(
                description=f"{variant_name} variant of the {component_name} component",
                example=self._variant_example(section[index + 1:]),
            )

        return props

    def _variant_example(self, variant_nodes: list[DocNode]) -> str:
        """First code block of the first tab content block in `variant_nodes`."""
        for node, _, _ in iter_nodes(variant_nodes):
            if is_tab_content(node):
                blocks = code_blocks(node.children)
                return blocks[0].text.strip() if blocks else ""
        return ""


def extract_detail(document: ParsedDocument, component_name: str,
                   settings: Optional[Settings] = None) -> ComponentDetail:
    """Convenience function to extract a ComponentDetail."""
    return Extractor(settings).extract(document, component_name)
