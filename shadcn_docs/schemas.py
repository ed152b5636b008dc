"""
Pydantic schemas defining the contracts between modules.

Document side (Preprocessor → Locator/Extractors):
  DocNode, ParsedDocument: the page as an ordered tree of typed nodes.

Query side (Extractors/Catalog → Service → caller):
  ComponentSummary, ComponentDetail, VariantSpec, Example.

Query models are frozen: once a detail sits in the cache nothing can
mutate it.  Payloads are produced with to_payload(), which applies the
camelCase aliases and drops optional fields that are unset.
"""

from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


# --- Parsed document ---

class NodeKind(str, Enum):
    """Structural role of a node in the parsed page."""
    HEADING = "heading"        # h1..h6, carries level
    PARAGRAPH = "paragraph"    # p
    CODE = "code"              # pre, text kept verbatim
    CONTAINER = "container"    # any other element; holds children
    OTHER = "other"            # leaf elements with no structural meaning


class DocNode(BaseModel):
    """One element of the parsed page."""
    kind: NodeKind
    tag: str = ""
    level: int = 0                                       # 1-6 for headings only
    text: str = ""
    classes: list[str] = Field(default_factory=list)
    attrs: dict[str, str] = Field(default_factory=dict)  # role, data-* and similar
    children: list["DocNode"] = Field(default_factory=list)

    def is_heading(self, level: Optional[int] = None) -> bool:
        if self.kind != NodeKind.HEADING:
            return False
        return level is None or self.level == level


DocNode.model_rebuild()


class ParsedDocument(BaseModel):
    """Output of the Preprocessor."""
    nodes: list[DocNode] = Field(default_factory=list)
    links: list[str] = Field(default_factory=list)     # anchor hrefs, document order
    warnings: list[str] = Field(default_factory=list)  # non-fatal parsing issues


# --- Query models ---

class _Payload(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_payload(self) -> dict:
        """JSON-ready dict with aliases applied and unset optionals removed."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ComponentSummary(_Payload):
    """A catalog entry. Description is always empty at catalog time."""
    name: str
    description: str = ""
    url: str


class VariantSpec(_Payload):
    """A named variant found under the Examples section of a component page."""
    type: Literal["variant"] = "variant"
    description: str
    required: bool = False
    example: str = ""


class ComponentDetail(_Payload):
    """Everything extracted from one component page."""
    name: str
    description: str = ""
    url: str
    source_url: str = Field(alias="sourceUrl")
    installation: str = ""
    usage: str = ""
    props: Optional[dict[str, VariantSpec]] = None  # None when no variants found


class Example(_Payload):
    """One titled code sample from any of the collection sources."""
    title: str
    code: str
    description: Optional[str] = None
