"""
Query service for the shadcn_docs package.

Wires Fetcher → Preprocessor → Extractor/Collector/Catalog together behind
the four query operations, owns the two caches and translates fetch
failures into the query-level error taxonomy:

  DocumentNotFoundError → ComponentNotFoundError  (detail/example queries)
  any other FetchError  → InternalError
  processing failure    → InternalError

The tool layer (TOOLS, call_tool) accepts the JSON argument objects tool
callers send (componentName, query) and returns text content holding the
pretty-printed JSON payload.
"""

import json
from typing import Any, Optional

from .cache import CatalogStore, DetailStore
from .catalog import scan_catalog
from .examples import ExampleCollector
from .exceptions import (
    ComponentNotFoundError,
    DocumentNotFoundError,
    FetchError,
    InternalError,
    InvalidInputError,
    MethodNotFoundError,
)
from .extractor import Extractor
from .fetcher import BaseFetcher, HTTPFetcher
from .preprocessor import Preprocessor
from .schemas import ComponentDetail, ComponentSummary, Example, ParsedDocument
from .search import filter_components
from .settings import Settings
from .logger import get_module_logger, setup_logger

logger = get_module_logger("service")


TOOLS = [
    {
        "name": "list_shadcn_components",
        "description": "Get a list of all available shadcn/ui components",
        "inputSchema": {
            "type": "object",
            "properties": {},
            "required": [],
        },
    },
    {
        "name": "get_component_details",
        "description": "Get detailed information about a specific shadcn/ui component",
        "inputSchema": {
            "type": "object",
            "properties": {
                "componentName": {
                    "type": "string",
                    "description": 'Name of the shadcn/ui component (e.g., "accordion", "button")',
                },
            },
            "required": ["componentName"],
        },
    },
    {
        "name": "get_component_examples",
        "description": "Get usage examples for a specific shadcn/ui component",
        "inputSchema": {
            "type": "object",
            "properties": {
                "componentName": {
                    "type": "string",
                    "description": 'Name of the shadcn/ui component (e.g., "accordion", "button")',
                },
            },
            "required": ["componentName"],
        },
    },
    {
        "name": "search_components",
        "description": "Search for shadcn/ui components by keyword",
        "inputSchema": {
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": "Search query to find relevant components",
                },
            },
            "required": ["query"],
        },
    },
]


def validate_component_name(value: Any) -> str:
    """Lowercased component name, or InvalidInputError."""
    if not isinstance(value, str) or not value.strip():
        raise InvalidInputError("Component name is required and must be a string")
    return value.strip().lower()


def validate_search_query(value: Any) -> str:
    """Lowercased search query, or InvalidInputError."""
    if not isinstance(value, str) or not value.strip():
        raise InvalidInputError("Search query is required and must be a string")
    return value.strip().lower()


def to_payload(result) -> Any:
    """JSON-ready form of a query result (model or list of models)."""
    if isinstance(result, (list, tuple)):
        return [item.to_payload() for item in result]
    return result.to_payload()


class ComponentDocsService:
    """
    Serves component catalog, detail, example and search queries.

    Caches are injectable so tests can inspect them; by default each service
    gets fresh, empty stores that live as long as the service.
    """

    def __init__(
        self,
        fetcher: Optional[BaseFetcher] = None,
        settings: Optional[Settings] = None,
        catalog_store: Optional[CatalogStore] = None,
        detail_store: Optional[DetailStore] = None,
        log_level: Optional[int] = None
    ):
        if log_level is not None:
            setup_logger(level=log_level)

        self.settings = settings or Settings()
        self.fetcher = fetcher or HTTPFetcher(self.settings)
        self.catalog_store = catalog_store if catalog_store is not None else CatalogStore()
        self.detail_store = detail_store if detail_store is not None else DetailStore()

        self.preprocessor = Preprocessor()
        self.extractor = Extractor(self.settings)
        self.collector = ExampleCollector(self.fetcher, self.settings)

        logger.info(f"ComponentDocsService initialized for {self.settings.docs_url}")

    # --- Query operations ---

    def list_components(self) -> list[ComponentSummary]:
        """All components linked from the docs index, loaded once per service."""
        try:
            return list(self.ensure_catalog_loaded())
        except FetchError as e:
            raise InternalError(
                f"Failed to fetch shadcn/ui components: {e.message}",
                details={"url": e.url, "status": e.status}
            ) from e

    def get_component_details(self, component_name: Any) -> ComponentDetail:
        """
        Extracted detail for one component.

        The first successful query per name is cached; later queries return
        that same object without fetching.
        """
        name = validate_component_name(component_name)

        cached = self.detail_store.get(name)
        if cached is not None:
            return cached

        document = self._fetch_component_page(name, context=f'Component "{name}"')
        detail = self.extractor.extract(document, name)
        return self.detail_store.put(name, detail)

    def get_component_examples(self, component_name: Any) -> list[Example]:
        """Examples from the component page plus the repository demo file."""
        name = validate_component_name(component_name)
        document = self._fetch_component_page(name, context=f'Component examples for "{name}"')
        return self.collector.collect(document, name)

    def search_components(self, query: Any) -> list[ComponentSummary]:
        """Catalog entries matching a keyword."""
        query = validate_search_query(query)
        try:
            components = self.ensure_catalog_loaded()
        except FetchError as e:
            raise InternalError(
                f"Search failed: {e.message}",
                details={"url": e.url, "status": e.status}
            ) from e

        results = filter_components(components, query)
        logger.info(f"Search '{query}' matched {len(results)} components")
        return results

    # --- Cache helpers ---

    def ensure_catalog_loaded(self) -> tuple[ComponentSummary, ...]:
        """
        Cached catalog, scanning the index page on first use.

        Raises FetchError untranslated; callers decide how it surfaces.
        A page that fails to process raises InternalError.
        """
        components = self.catalog_store.get()
        if components is not None:
            return components

        html = self.fetcher.fetch(self.settings.index_url())
        document = self._process(html, context="Component index")
        return self.catalog_store.put(scan_catalog(document, self.settings))

    def _fetch_component_page(self, name: str, context: str) -> ParsedDocument:
        try:
            html = self.fetcher.fetch(self.settings.component_url(name))
        except DocumentNotFoundError as e:
            raise ComponentNotFoundError(name, context=context, details={"url": e.url}) from e
        except FetchError as e:
            raise InternalError(
                f"{context}: {e.message}",
                details={"url": e.url, "status": e.status}
            ) from e

        document = self._process(html, context=context)
        for warning in document.warnings:
            logger.warning(f"{name}: {warning}")
        return document

    def _process(self, html: str, context: str) -> ParsedDocument:
        try:
            return self.preprocessor.process(html)
        except Exception as e:
            logger.error(f"{context}: failed to process page: {e!r}")
            raise InternalError(
                f"{context}: failed to process page",
                details={"error": type(e).__name__}
            ) from e

    # --- Tool layer ---

    def call_tool(self, name: str, arguments: Optional[dict] = None) -> dict:
        """
        Run a tool by name and wrap its JSON payload as text content.

        Raises:
            MethodNotFoundError: unknown tool
            InvalidInputError: bad arguments
            ComponentNotFoundError, InternalError: as the operation raises them
        """
        args = arguments if isinstance(arguments, dict) else {}

        if name == "list_shadcn_components":
            result = self.list_components()
        elif name == "get_component_details":
            result = self.get_component_details(args.get("componentName"))
        elif name == "get_component_examples":
            result = self.get_component_examples(args.get("componentName"))
        elif name == "search_components":
            result = self.search_components(args.get("query"))
        else:
            raise MethodNotFoundError(name)

        return {
            "content": [
                {
                    "type": "text",
                    "text": json.dumps(to_payload(result), indent=2),
                }
            ]
        }
