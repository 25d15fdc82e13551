import sys
from html.parser import HTMLParser
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


import pytest

from src.taxonomies.escaping import get_filter_hooks
from src.taxonomies.schemas import Term


@pytest.fixture(autouse=True)
def _clear_global_filter_hooks():
    get_filter_hooks().clear()
    yield
    get_filter_hooks().clear()


@pytest.fixture
def news_tree() -> list[Term]:
    """News -> (Local, World -> Europe), Sports."""
    return [
        Term(id=1, parent=None, slug="news", name="News"),
        Term(id=2, parent=1, slug="local", name="Local"),
        Term(id=3, parent=1, slug="world", name="World"),
        Term(id=4, parent=3, slug="europe", name="Europe"),
        Term(id=5, parent=0, slug="sports", name="Sports"),
    ]


class NestingChecker(HTMLParser):
    """Tracks open elements and records any mismatched close tag."""

    TRACKED = {"ul", "li", "label", "option"}

    def __init__(self):
        super().__init__()
        self.stack: list[str] = []
        self.errors: list[str] = []
        self.max_ul_depth = 0

    def handle_starttag(self, tag, attrs):
        if tag in self.TRACKED:
            self.stack.append(tag)
            self.max_ul_depth = max(self.max_ul_depth, self.stack.count("ul"))

    def handle_endtag(self, tag):
        if tag not in self.TRACKED:
            return
        if not self.stack or self.stack[-1] != tag:
            self.errors.append(f"unexpected </{tag}> with stack {self.stack}")
            return
        self.stack.pop()


@pytest.fixture
def check_nesting():
    def _check(html: str) -> NestingChecker:
        checker = NestingChecker()
        checker.feed(html)
        checker.close()
        return checker

    return _check
