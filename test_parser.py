"""
Tests for the extraction pipeline: Preprocessor, Section Locator, field
extractors, Example Collector and catalog scan.

Pages are hand-written HTML strings (see conftest.py); nothing touches the
network.
"""

from conftest import BUTTON_PAGE, INDEX_PAGE, FakeFetcher
from shadcn_docs.catalog import scan_catalog
from shadcn_docs.examples import ExampleCollector
from shadcn_docs.exceptions import TransientFetchError
from shadcn_docs.extractor import Extractor
from shadcn_docs.locator import code_blocks, locate_section
from shadcn_docs.preprocessor import Preprocessor, preprocess
from shadcn_docs.schemas import DocNode, NodeKind, ParsedDocument


def heading(level, text):
    return DocNode(kind=NodeKind.HEADING, tag=f"h{level}", level=level, text=text)


def code(text):
    return DocNode(kind=NodeKind.CODE, tag="pre", text=text)


def paragraph(text):
    return DocNode(kind=NodeKind.PARAGRAPH, tag="p", text=text)


# --- Preprocessor ---

def test_preprocessor_builds_typed_nodes():
    """Headings, paragraphs and code blocks keep their role and document order."""
    document = preprocess(BUTTON_PAGE)

    kinds = [
        node.kind for node in document.nodes[0].children[1].children[0].children[:4]
    ]
    assert kinds == [NodeKind.HEADING, NodeKind.PARAGRAPH, NodeKind.HEADING, NodeKind.CODE]


def test_preprocessor_drops_script_content():
    document = preprocess(BUTTON_PAGE)
    texts = [node.text for node in _all_nodes(document.nodes)]
    assert not any("track(" in text or "analytics" in text for text in texts)


def test_preprocessor_collects_links_in_order():
    document = preprocess(INDEX_PAGE)
    assert document.links == [
        "/docs",
        "/docs/components/accordion",
        "/docs/components/badge",
        "/docs/components/button",
        "https://github.com/shadcn-ui/ui",
    ]


def test_preprocessor_never_fails_on_garbage():
    """Malformed input yields a (possibly empty) document plus warnings."""
    document = Preprocessor().process("<div><h2>Usage\x00</h2><pre>x = 1\x07</div></pre>")

    assert "Removed NULL bytes" in document.warnings
    assert "Removed control characters" in document.warnings
    assert [block.text for block in code_blocks(document.nodes)] == ["x = 1"]


def test_preprocessor_handles_deeply_nested_markup():
    html = "<div>" * 1000 + "<pre>deep()</pre>" + "</div>" * 1000
    document = preprocess(html)
    assert [block.text for block in code_blocks(document.nodes)] == ["deep()"]


def _all_nodes(nodes):
    for node in nodes:
        yield node
        yield from _all_nodes(node.children)


# --- Section Locator ---

def test_locate_section_stops_at_same_level_heading():
    nodes = [
        heading(2, "Installation"),
        code("npm install x"),
        heading(3, "Manual"),
        code("copy files"),
        heading(2, "Usage"),
        code("use it"),
    ]
    section = locate_section(nodes, "Installation", 2)
    assert [node.text for node in section] == ["npm install x", "Manual", "copy files"]


def test_locate_section_stops_at_higher_level_heading():
    nodes = [heading(3, "Default"), code("a"), heading(2, "Next"), code("b")]
    assert [node.text for node in locate_section(nodes, "Default", 3)] == ["a"]


def test_locate_section_exact_case_sensitive_match():
    nodes = [heading(2, " usage "), code("a"), heading(2, "Usage extras"), code("b")]
    assert locate_section(nodes, "Usage", 2) == []


def test_locate_section_trims_heading_text():
    nodes = [heading(2, "  Usage\n"), code("a")]
    assert [node.text for node in locate_section(nodes, "Usage", 2)] == ["a"]


def test_locate_section_requires_matching_level():
    nodes = [heading(3, "Usage"), code("a")]
    assert locate_section(nodes, "Usage", 2) == []


def test_locate_section_uses_first_match():
    nodes = [heading(2, "Usage"), code("first"), heading(2, "Usage"), code("second")]
    assert [node.text for node in locate_section(nodes, "Usage", 2)] == ["first"]


def test_locate_section_finds_nested_heading():
    """The heading may sit inside a container; its section is its own sibling run."""
    container = DocNode(
        kind=NodeKind.CONTAINER,
        tag="main",
        children=[heading(2, "Usage"), code("inside")],
    )
    nodes = [container, code("outside")]
    assert [node.text for node in locate_section(nodes, "Usage", 2)] == ["inside"]


def test_locate_section_missing_heading_is_empty():
    assert locate_section([paragraph("hello")], "Usage", 2) == []
    assert locate_section([], "Usage", 2) == []


def test_code_blocks_walks_deep_trees():
    node = code("bottom")
    for _ in range(5000):
        node = DocNode(kind=NodeKind.CONTAINER, tag="div", children=[node])
    assert [block.text for block in code_blocks([node])] == ["bottom"]


# --- Field extractors ---

def test_extract_installation_returns_first_code_block():
    document = preprocess("<h2>Installation</h2><pre>npm install x</pre>")
    assert Extractor().extract_installation(document) == "npm install x"


def test_extract_installation_without_code_block():
    document = preprocess("<h2>Installation</h2><p>Run the CLI.</p><h2>Usage</h2><pre>x</pre>")
    assert Extractor().extract_installation(document) == ""


def test_extract_usage_without_usage_heading():
    document = preprocess("<h1>Badge</h1><p>A badge.</p><pre>npm install badge</pre>")
    assert Extractor().extract_usage(document) == ""


def test_extract_usage_joins_blocks_with_blank_line():
    document = ParsedDocument(nodes=[
        heading(2, "Usage"),
        code("  import { Badge } from './badge'\n"),
        paragraph("then"),
        code("<Badge />"),
    ])
    assert Extractor().extract_usage(document) == "import { Badge } from './badge'\n\n<Badge />"


def test_extract_description_reads_paragraph_after_h1():
    document = preprocess(BUTTON_PAGE)
    assert Extractor().extract_description(document) == (
        "Displays a button or a component that looks like a button."
    )


def test_extract_description_requires_immediate_paragraph():
    document = preprocess("<h1>Badge</h1><div>not a paragraph</div><p>too late</p>")
    assert Extractor().extract_description(document) == ""


def test_extract_description_without_h1():
    assert Extractor().extract_description(preprocess("<p>orphan</p>")) == ""


def test_extract_variants_from_examples_section():
    document = preprocess(BUTTON_PAGE)
    props = Extractor().extract_variants(document, "button")

    assert list(props) == ["Primary", "Secondary", "Ghost"]
    assert props["Primary"].example == "<Button>Button</Button>"
    assert props["Secondary"].example == '<Button variant="secondary">Secondary</Button>'
    # Last variant with no tab content after it
    assert props["Ghost"].example == ""
    assert props["Primary"].description == "Primary variant of the button component"
    assert props["Primary"].type == "variant"
    assert props["Primary"].required is False


def test_extract_variants_without_tabs_take_next_tab_in_section():
    document = preprocess(
        "<h2>Examples</h2>"
        "<h3>A</h3><p>no tab</p>"
        "<h3>B</h3><div class='tabs-content'><pre>b()</pre></div>"
    )
    props = Extractor().extract_variants(document, "toggle")

    assert props["A"].example == "b()"
    assert props["B"].example == "b()"


def test_extract_variants_stop_at_end_of_examples_section():
    document = preprocess(
        "<h2>Examples</h2><h3>A</h3><p>no tab</p>"
        "<h2>Notes</h2><div class='tabs-content'><pre>elsewhere()</pre></div>"
    )
    props = Extractor().extract_variants(document, "toggle")
    assert props["A"].example == ""


def test_extract_variants_duplicate_heading_keeps_last():
    document = preprocess(
        "<h2>Examples</h2>"
        "<h3>Default</h3><div class='tabs-content'><pre>first</pre></div>"
        "<h3>Default</h3><div class='tabs-content'><pre>second</pre></div>"
    )
    props = Extractor().extract_variants(document, "toggle")

    assert list(props) == ["Default"]
    assert props["Default"].example == "second"


def test_extract_variants_accepts_tabpanel_role():
    document = preprocess(
        "<h2>Examples</h2><h3>Outline</h3>"
        "<div role='tabpanel'><pre>&lt;Badge variant='outline' /&gt;</pre></div>"
    )
    props = Extractor().extract_variants(document, "badge")
    assert props["Outline"].example == "<Badge variant='outline' />"


def test_extract_variants_ignores_h3_outside_examples():
    document = preprocess("<h2>Usage</h2><h3>Default</h3><pre>x</pre>")
    assert Extractor().extract_variants(document, "button") == {}


def test_extract_builds_full_detail(settings):
    detail = Extractor(settings).extract(preprocess(BUTTON_PAGE), "button")

    assert detail.name == "button"
    assert detail.url == "https://ui.shadcn.com/docs/components/button"
    assert detail.source_url == (
        "https://github.com/shadcn-ui/ui/tree/main/apps/www/registry/default/ui/button"
    )
    assert detail.installation == "npx shadcn@latest add button"
    assert detail.usage == (
        'import { Button } from "@/components/ui/button"\n\n'
        '<Button variant="outline">Button</Button>'
    )
    assert set(detail.props) == {"Primary", "Secondary", "Ghost"}


def test_extract_detail_on_empty_page_degrades_to_empty_fields():
    detail = Extractor().extract(preprocess("<html><body></body></html>"), "ghost")
    payload = detail.to_payload()

    assert payload["description"] == ""
    assert payload["installation"] == ""
    assert payload["usage"] == ""
    assert "props" not in payload
    assert payload["sourceUrl"].endswith("/ui/ghost")


# --- Example Collector ---

def test_generic_examples_titles():
    """A block after <h2>Foo</h2> is titled Foo; one with no heading is positional."""
    document = preprocess("<h2>Foo</h2><pre>a()</pre><div><pre>b()</pre></div>")
    examples = ExampleCollector(FakeFetcher()).collect_generic(document)

    assert [(e.title, e.description) for e in examples] == [
        ("Foo", "Foo example"),
        ("Code Example 2", "Code example"),
    ]


def test_generic_examples_skip_empty_blocks_but_count_them():
    document = preprocess("<pre>   </pre><pre>x</pre>")
    examples = ExampleCollector(FakeFetcher()).collect_generic(document)
    assert [e.title for e in examples] == ["Code Example 2"]


def test_generic_examples_ignore_h1_and_h4_titles():
    document = preprocess("<h1>Title</h1><pre>a</pre><h4>Deep</h4><pre>b</pre>")
    examples = ExampleCollector(FakeFetcher()).collect_generic(document)
    assert [e.title for e in examples] == ["Code Example 1", "Code Example 2"]


def test_collect_orders_passes_and_keeps_duplicates(settings):
    demo_url = settings.demo_url("button")
    fetcher = FakeFetcher({demo_url: "export default function ButtonDemo() {}\n"})

    examples = ExampleCollector(fetcher, settings).collect(preprocess(BUTTON_PAGE), "button")
    titles = [e.title for e in examples]

    assert titles == [
        "Installation",
        "Usage",
        "Usage",
        "Link",
        "Code Example 5",
        "Code Example 6",
        "Code Example 7",
        "Usage Example 1",
        "Usage Example 2",
        "Link Example 1",
        "GitHub Demo Example",
    ]
    assert examples[7].description == "Basic usage example"
    assert examples[9].description == "Link usage example"
    assert examples[1].code == examples[7].code
    # demo body is kept verbatim and has no description
    assert examples[-1].code == "export default function ButtonDemo() {}\n"
    assert examples[-1].description is None
    assert fetcher.calls == [demo_url]


def test_collect_omits_demo_on_not_found():
    examples = ExampleCollector(FakeFetcher()).collect(preprocess(BUTTON_PAGE), "button")
    assert examples[-1].title == "Link Example 1"


def test_collect_omits_demo_on_transient_failure(settings):
    demo_url = settings.demo_url("button")
    fetcher = FakeFetcher({demo_url: TransientFetchError("boom", url=demo_url, status=500)})

    examples = ExampleCollector(fetcher, settings).collect(preprocess(BUTTON_PAGE), "button")
    assert "GitHub Demo Example" not in [e.title for e in examples]


def test_fetch_demo_example_returns_none_on_failure():
    assert ExampleCollector(FakeFetcher()).fetch_demo_example("nope") is None


def test_example_payload_drops_missing_description():
    fetcher = FakeFetcher({"https://raw.githubusercontent.com/shadcn-ui/ui/main"
                           "/apps/www/registry/default/example/card-demo.tsx": "demo"})
    example = ExampleCollector(fetcher).fetch_demo_example("card")
    assert example.to_payload() == {"title": "GitHub Demo Example", "code": "demo"}


# --- Catalog ---

def test_scan_catalog_keeps_component_links_in_order(settings):
    components = scan_catalog(preprocess(INDEX_PAGE), settings)

    assert [c.name for c in components] == ["accordion", "badge", "button"]
    assert components[0].url == "https://ui.shadcn.com/docs/components/accordion"
    assert all(c.description == "" for c in components)


def test_scan_catalog_preserves_duplicate_links():
    document = ParsedDocument(links=["/docs/components/button", "/docs/components/button"])
    components = scan_catalog(document)

    assert len(components) == 2
    assert components[0] == components[1]


def test_scan_catalog_without_links():
    assert scan_catalog(ParsedDocument()) == []
