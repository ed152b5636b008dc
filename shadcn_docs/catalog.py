"""
Component Catalog: the list of components linked from the docs index page.
"""

from typing import Optional

from .schemas import ComponentSummary, ParsedDocument
from .settings import COMPONENTS_PATH, Settings
from .logger import get_module_logger

logger = get_module_logger("catalog")

COMPONENT_HREF_PREFIX = f"{COMPONENTS_PATH}/"


def scan_catalog(document: ParsedDocument,
                 settings: Optional[Settings] = None) -> list[ComponentSummary]:
    """
    One summary per component link, in document order.

    Repeated links produce repeated summaries; the catalog keeps the page's
    cardinality as-is.
    """
    settings = settings or Settings()
    components = []

    for href in document.links:
        if not href.startswith(COMPONENT_HREF_PREFIX):
            continue
        name = href.split("/")[-1]
        components.append(ComponentSummary(
            name=name,
            description="",  # filled in only by detail queries
            url=f"{settings.docs_url}{href}",
        ))

    logger.info(f"Catalog scan found {len(components)} component links")
    return components
