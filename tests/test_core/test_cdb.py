import pytest
from conftest import CDB_HTML

from writings_core.errors import CitationResolutionError, StructureError
from writings_core.models import ParagraphStyle
from writings_core.visitors import CDBVisitor


def _parse(html=CDB_HTML):
    return CDBVisitor().parse_and_traverse(html)


def test_preface_is_not_emitted():
    assert "pre1" not in [r.ref_id for r in _parse()]


def test_paragraph_split_into_prose_and_stanzas():
    records = _parse()
    assert [(r.ref_id, r.style, r.index) for r in records] == [
        ("c1", ParagraphStyle.invocation, 1),
        ("c2", ParagraphStyle.text, 2),
        ("c2-1", ParagraphStyle.blockquote, 3),
        ("c2-2", ParagraphStyle.blockquote, 4),
    ]
    assert [r.text for r in records[1:]] == ["Prose before.", "Line one\nLine two", "Line three"]


def test_work_title_subtitle_and_number():
    records = _parse()
    assert {r.work_title for r in records} == {"The Seven Valleys"}
    assert {r.subtitle for r in records} == {"Written in reply to questions"}
    assert records[0].number is None
    assert [r.number for r in records[1:]] == [2, 2, 2]


def test_citation_stays_with_its_prose_part():
    _, prose, first_stanza, _ = _parse()
    (citation,) = prose.citations
    assert citation.text == "Note one."
    assert citation.offset == len("Prose before.")
    assert first_stanza.citations == ()


def test_index_restarts_per_work():
    html = CDB_HTML.replace(
        "<h2>Notes</h2>",
        '<div class="ic"><h1 class="g">The Four Valleys</h1></div>'
        '<p><a class="sf" id="d1"></a>Next work.</p>'
        "<h2>Notes</h2>",
    )
    last = _parse(html)[-1]
    assert (last.ref_id, last.work_title, last.index, last.subtitle) == ("d1", "The Four Valleys", 1, None)


def test_unresolvable_citation_is_fatal():
    html = CDB_HTML.replace('<a id="n1"></a>', '<a id="n9"></a>').replace(
        '<span class="jf">1</span>', '<span class="jf">9</span>'
    )
    with pytest.raises(CitationResolutionError):
        _parse(html)


def _with_paragraph(body):
    return CDB_HTML.replace(
        CDB_HTML[CDB_HTML.index('<p><a class="sf" id="c2">') : CDB_HTML.index("<h2>Notes</h2>")],
        f'<p><a class="sf" id="c2"></a>{body}</p>\n',
    )


def test_marker_after_poetry_container_joins_last_stanza():
    html = _with_paragraph(
        'Prose.<span class="dd"><span class="ce">Line one</span></span><sup><a href="#n1">1</a></sup>'
    )
    _, prose, stanza = _parse(html)
    assert prose.citations == ()
    (citation,) = stanza.citations
    assert (stanza.ref_id, stanza.text) == ("c2-1", "Line one")
    assert citation.offset == len("Line one")
    assert citation.text == "Note one."


def test_marker_alone_on_a_stanza_line_stays_in_the_stanza():
    html = _with_paragraph(
        'Prose.<span class="dd"><span class="ce">Line one<br/><sup><a href="#n1">1</a></sup><br/>Line two</span></span>'
    )
    stanza = _parse(html)[-1]
    assert stanza.text == "Line one\nLine two"
    (citation,) = stanza.citations
    assert citation.offset == len("Line one")


def test_marker_before_any_text_is_fatal():
    html = _with_paragraph('<sup><a href="#n1">1</a></sup><span class="dd"><span class="ce">Line one</span></span>')
    with pytest.raises(StructureError, match="no preceding text"):
        _parse(html)
