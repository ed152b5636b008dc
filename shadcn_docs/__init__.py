"""
shadcn/ui component reference

Extracts component metadata from the shadcn/ui documentation site and
repository, and serves it through four cached query operations.
- Preprocessor: HTML → ordered tree of typed nodes
- Extractor: description, installation, usage and variants per component
- ExampleCollector: code examples from the page and the repository demo
- ComponentDocsService: catalog, details, examples and search, with caching

Public API surface:
  Service           : ComponentDocsService, TOOLS
  Pipeline pieces   : Preprocessor, Extractor, ExampleCollector, scan_catalog, locate_section
  Data models       : ComponentSummary, ComponentDetail, VariantSpec, Example, ParsedDocument
  Fetching & config : BaseFetcher, HTTPFetcher, Settings
  Error types       : InvalidInputError, MethodNotFoundError, ComponentNotFoundError, InternalError
  Caching           : CatalogStore, DetailStore
"""

# --- Service and tool layer ---
from .service import ComponentDocsService, TOOLS

# --- Pipeline stages ---
from .preprocessor import Preprocessor
from .extractor import Extractor
from .examples import ExampleCollector
from .catalog import scan_catalog
from .locator import locate_section
from .search import filter_components

# --- Data models ---
from .schemas import (
    ComponentSummary,
    ComponentDetail,
    VariantSpec,
    Example,
    DocNode,
    NodeKind,
    ParsedDocument,
)

# --- Fetching and configuration ---
from .fetcher import BaseFetcher, HTTPFetcher
from .settings import Settings

# --- Exceptions ---
from .exceptions import (
    ShadcnDocsError,
    InvalidInputError,
    MethodNotFoundError,
    ComponentNotFoundError,
    InternalError,
    FetchError,
    DocumentNotFoundError,
    TransientFetchError,
)

# --- Caches ---
from .cache import CatalogStore, DetailStore

__version__ = "0.1.0"
__all__ = [
    "ComponentDocsService",
    "TOOLS",
    "Preprocessor",
    "Extractor",
    "ExampleCollector",
    "scan_catalog",
    "locate_section",
    "filter_components",
    "ComponentSummary",
    "ComponentDetail",
    "VariantSpec",
    "Example",
    "DocNode",
    "NodeKind",
    "ParsedDocument",
    "BaseFetcher",
    "HTTPFetcher",
    "Settings",
    "ShadcnDocsError",
    "InvalidInputError",
    "MethodNotFoundError",
    "ComponentNotFoundError",
    "InternalError",
    "FetchError",
    "DocumentNotFoundError",
    "TransientFetchError",
    "CatalogStore",
    "DetailStore",
]
