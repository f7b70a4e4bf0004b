"""Tests for PDF link extraction and de-duplication."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from harvester.scraper.extractor import dedup, extract_links


# ---------------------------------------------------------------------------
# Fixtures / constants
# ---------------------------------------------------------------------------

_PRODUCT_HTML = """\
<html>
<body>
  <a href="/product/x.pdf?v=2">Spec sheet</a>
  <a href="https://cam2.com/data-sheets/y.PDF">SDS</a>
  <a href="/product/other/">Not a PDF</a>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# extract_links
# ---------------------------------------------------------------------------

class TestExtractLinks:
    def test_extracts_relative_and_absolute_in_order(self) -> None:
        assert extract_links(_PRODUCT_HTML) == [
            "/product/x.pdf?v=2",
            "https://cam2.com/data-sheets/y.PDF",
        ]

    def test_keeps_duplicates(self) -> None:
        html = '<a href="/a.pdf">1</a><a href="/a.pdf">2</a>'
        assert extract_links(html) == ["/a.pdf", "/a.pdf"]

    def test_empty_input_returns_empty(self) -> None:
        assert extract_links("") == []

    def test_no_match_returns_empty(self) -> None:
        assert extract_links('<a href="/docs/">docs</a><img src="/a.pdf">') == []

    def test_single_quoted_href_is_ignored(self) -> None:
        assert extract_links("<a href='/a.pdf'>x</a>") == []

    def test_uppercase_attribute_marker_is_ignored(self) -> None:
        assert extract_links('<a HREF="/a.pdf">x</a>') == []

    def test_matches_inside_scripts_and_comments(self) -> None:
        text = (
            '<!-- <a href="/hidden.pdf"> -->'
            '<script>var s = \'href="/in-script.pdf"\';</script>'
        )
        assert extract_links(text) == ["/hidden.pdf", "/in-script.pdf"]

    def test_tolerates_concatenated_pages(self) -> None:
        page_one = '<html><body><a href="/one.pdf">'
        page_two = '<html><body><a href="/two.pdf#page=3"></a></body></html>'
        assert extract_links(page_one + "\n" + page_two) == ["/one.pdf", "/two.pdf#page=3"]

    def test_pdf_in_middle_of_path_matches(self) -> None:
        assert extract_links('<a href="/pdf-files/sheet.pdf.html">x</a>') == [
            "/pdf-files/sheet.pdf.html"
        ]


# ---------------------------------------------------------------------------
# dedup
# ---------------------------------------------------------------------------

class TestDedup:
    def test_preserves_first_occurrence_order(self) -> None:
        assert dedup(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]

    def test_is_idempotent(self) -> None:
        items = ["/x.pdf", "/y.pdf", "/x.pdf", "/z.pdf", "/y.pdf"]
        assert dedup(dedup(items)) == dedup(items)

    def test_is_case_sensitive(self) -> None:
        assert dedup(["a.pdf", "A.PDF", "a.pdf"]) == ["a.pdf", "A.PDF"]

    def test_empty(self) -> None:
        assert dedup([]) == []

    def test_accepts_any_iterable(self) -> None:
        assert dedup(iter(["a", "a", "b"])) == ["a", "b"]


_LINK_LISTS = st.lists(st.text(min_size=1), max_size=30)


@given(items=_LINK_LISTS)
def test_dedup_is_idempotent_property(items: list[str]) -> None:
    assert dedup(dedup(items)) == dedup(items)


@given(items=_LINK_LISTS)
def test_dedup_has_no_repeats_property(items: list[str]) -> None:
    result = dedup(items)
    assert len(result) == len(set(result))
    assert set(result) == set(items)


@given(items=_LINK_LISTS)
def test_dedup_keeps_first_occurrence_order_property(items: list[str]) -> None:
    expected = [item for i, item in enumerate(items) if item not in items[:i]]
    assert dedup(items) == expected
