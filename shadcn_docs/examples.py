"""
Example Collector.

Gathers runnable examples for a component from three independent sources,
always concatenated in this order:

  1. generic     : every code block on the page, titled by its nearest heading
  2. named       : code blocks of the "Usage" and then the "Link" sections
  3. remote demo : <name>-demo.tsx from the shadcn/ui repository

The same code may appear in both the generic and the named pass; entries
are not deduplicated.  The remote demo is best effort: any failure to fetch
it is logged and the entry is left out.
"""

from typing import Optional

from .exceptions import FetchError
from .fetcher import BaseFetcher
from .locator import code_blocks, iter_nodes, locate_section, nearest_heading_before
from .schemas import Example, NodeKind, ParsedDocument
from .settings import Settings
from .logger import get_module_logger

logger = get_module_logger("examples")

# (section label, description) pairs for the named pass, in output order
NAMED_SECTIONS = [
    ("Usage", "Basic usage example"),
    ("Link", "Link usage example"),
]

DEMO_TITLE = "GitHub Demo Example"


class ExampleCollector:
    """Collects Example entries for one component page."""

    def __init__(self, fetcher: BaseFetcher, settings: Optional[Settings] = None):
        self.fetcher = fetcher
        self.settings = settings or Settings()

    def collect(self, document: ParsedDocument, component_name: str) -> list[Example]:
        """
        Run all three passes and concatenate their results.

        Args:
            document: Parsed component page
            component_name: Lowercased component name

        Returns:
            Examples in pass order (generic, Usage, Link, remote demo)
        """
        examples = self.collect_generic(document)
        for label, description in NAMED_SECTIONS:
            examples.extend(self.collect_section(document, label, description))

        demo = self.fetch_demo_example(component_name)
        if demo is not None:
            examples.append(demo)

        logger.info(f"Collected {len(examples)} examples for {component_name}")
        return examples

    def collect_generic(self, document: ParsedDocument) -> list[Example]:
        """
        Every non-empty code block, titled by the nearest preceding heading.

        Only an <h2> or <h3> names the example; anything else (no heading,
        or a heading of another level) gets "Code Example N", where N counts
        all code blocks on the page, including skipped empty ones.
        """
        examples = []
        position = 0

        for node, siblings, index in iter_nodes(document.nodes):
            if node.kind != NodeKind.CODE:
                continue
            position += 1

            code = node.text.strip()
            if not code:
                continue

            heading = nearest_heading_before(siblings, index)
            if heading is not None and heading.level in (2, 3):
                title = heading.text.strip()
                description = f"{title} example"
            else:
                title = f"Code Example {position}"
                description = "Code example"

            examples.append(Example(title=title, code=code, description=description))

        return examples

    def collect_section(self, document: ParsedDocument, label: str,
                        description: str) -> list[Example]:
        """Code blocks of one <h2> section, titled "<label> Example N"."""
        section = locate_section(document.nodes, label)
        examples = []

        for position, block in enumerate(code_blocks(section), start=1):
            code = block.text.strip()
            if code:
                examples.append(Example(
                    title=f"{label} Example {position}",
                    code=code,
                    description=description
                ))

        return examples

    def fetch_demo_example(self, component_name: str) -> Optional[Example]:
        """
        The component's demo file from the repository, or None.

        The body is used verbatim.  Fetch failures are logged and end here;
        they never reach the examples query.
        """
        url = self.settings.demo_url(component_name)
        try:
            code = self.fetcher.fetch(url)
        except FetchError as e:
            logger.warning(f"Failed to fetch GitHub example for {component_name}: {e.message}")
            return None

        if not code:
            logger.debug(f"Empty demo file for {component_name}")
            return None
        return Example(title=DEMO_TITLE, code=code)
