"""
Component search: a plain substring filter over the cached catalog.
"""

from typing import Iterable

from .schemas import ComponentSummary


def filter_components(components: Iterable[ComponentSummary],
                      query: str) -> list[ComponentSummary]:
    """
    Components whose name, or lowercased description, contains `query`.

    The query is expected lowercased already.  Catalog order is preserved
    and there is no ranking.
    """
    return [
        component for component in components
        if query in component.name or query in component.description.lower()
    ]
