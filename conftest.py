"""
Shared pytest fixtures: an in-memory fetcher and sample documentation pages.
"""

import pytest

from shadcn_docs.exceptions import DocumentNotFoundError
from shadcn_docs.fetcher import BaseFetcher
from shadcn_docs.settings import Settings


class FakeFetcher(BaseFetcher):
    """
    Serves canned bodies by URL and records every request.

    A missing URL behaves like an upstream 404; a mapped exception instance
    is raised as-is.
    """

    def __init__(self, pages=None):
        self.pages = dict(pages or {})
        self.calls = []

    def fetch(self, url: str) -> str:
        self.calls.append(url)
        body = self.pages.get(url)
        if body is None:
            raise DocumentNotFoundError(f"{url} returned 404", url=url, status=404)
        if isinstance(body, Exception):
            raise body
        return body


BUTTON_PAGE = """<!DOCTYPE html>
<html>
<head><title>Button</title><script>window.analytics = {};</script></head>
<body>
<main>
  <h1>Button</h1>
  <p>Displays a button or a component that looks like a button.<script>track("button")</script></p>
  <h2>Installation</h2>
  <pre><code>npx shadcn@latest add button</code></pre>
  <h2>Usage</h2>
  <pre><code>import { Button } from "@/components/ui/button"</code></pre>
  <pre><code>&lt;Button variant="outline"&gt;Button&lt;/Button&gt;</code></pre>
  <h2>Link</h2>
  <p>You can use the buttonVariants helper to create a link that looks like a button.</p>
  <pre><code>buttonVariants({ variant: "outline" })</code></pre>
  <h2>Examples</h2>
  <h3>Primary</h3>
  <div class="tabs">
    <div class="tabs-content" data-state="active"><pre><code>&lt;Button&gt;Button&lt;/Button&gt;</code></pre></div>
    <div class="tabs-content" data-state="inactive"><pre><code>preview</code></pre></div>
  </div>
  <h3>Secondary</h3>
  <div class="tabs">
    <div class="tabs-content"><pre><code>&lt;Button variant="secondary"&gt;Secondary&lt;/Button&gt;</code></pre></div>
  </div>
  <h3>Ghost</h3>
  <p>No code tab here.</p>
</main>
</body>
</html>
"""

INDEX_PAGE = """<html><body>
<nav>
  <a href="/docs">Introduction</a>
  <a href="/docs/components/accordion">Accordion</a>
  <a href="/docs/components/badge">Badge</a>
  <a href="/docs/components/button">Button</a>
  <a href="https://github.com/shadcn-ui/ui">GitHub</a>
</nav>
</body></html>
"""


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def fake_fetcher():
    return FakeFetcher()
