"""Small hand-written snapshots that mirror the structure of the library pages."""

import pytest
from bs4 import BeautifulSoup

from writings_core.corpus import CorpusCache
from writings_core.models import Author

PRAYERS_HTML = f"""
<html><body>
<nav><p>Contents</p></nav>
<h1 class="e">Bahá’í Prayers</h1>
<h2 class="g c">General Prayers</h2>
<h3 class="ub c l">Aid and Assistance</h3>
<div>
  <p class="cb"><a class="sf" id="p1"></a>(To be recited daily)</p>
  <p><a class="sf" id="p2"></a>O God,
     guide me.<sup><a href="#fn1">1</a></sup> Protect me.</p>
  <p class="hb ac">—{Author.bahaullah.value}</p>
</div>
<h3 class="xc jb c kf z nb zd ub">Children</h3>
<p class="ub w kf"><a class="sf" id="p3"></a>He is God!</p>
<p class="hb ac">—{Author.abdul_baha.value}</p>
<div class="bf wf">
  <div><span class="jf">1</span><p><a id="fn1"></a>A note on guidance.</p></div>
  <div><span class="jf">2</span><p><a id="fn2"></a>A second note.</p></div>
  <div><span class="jf">3</span><p><a id="fn3"></a>A third note.</p></div>
</div>
</body></html>
"""

HIDDEN_WORDS_HTML = """
<html><body>
<p class="w"><a class="sf" id="hw0"></a>He is the Glory of Glories</p>
<p class="zd hb">This is that which hath descended from the realm of glory.</p>
<h2>Part One</h2>
<p class="dd zd"><a class="sf" id="hw1"></a><span class="kf">O Son of Spirit!</span> My first counsel is this.</p>
<p class="dd zd"><a class="sf" id="hw2"></a><span class="kf">O Son of Being!</span> Love Me, that I may love thee.</p>
<h2>Part Two</h2>
<p class="dd zd hb">In the name of the Lord of utterance.</p>
<p class="dd zd"><a class="sf" id="hw3"></a><span class="kf">O Ye People that have Minds to Know!</span> Know ye.</p>
<p class="zd hb"><a class="sf" id="hw4"></a>I bear witness, O friends!</p>
<p class="dd zd"><a class="sf" id="hw5"></a><span class="kf">O Stray!</span> Never reached.</p>
</body></html>
"""


def numbered_html(*units: tuple[str, list[str]], prefix: str = "r") -> str:
    """Build a Gleanings-style page from (heading, [paragraph, ...]) units."""
    parts = ["<html><body>", "<p>Front matter</p>"]
    n = 0
    for heading, paragraphs in units:
        parts.append(f'<h2 class="c q">{heading}</h2>')
        for text in paragraphs:
            n += 1
            parts.append(f'<p><a class="sf" id="{prefix}{n}"></a>{text}</p>')
    parts.append('<div class="wf"><p>Footer</p></div>')
    parts.append("</body></html>")
    return "\n".join(parts)


GLEANINGS_HTML = numbered_html(
    ("I", ["Praise be to Thee, O Lord.", "Lauded be Thy name."]),
    ("II", ["The Day of God is come."]),
)

MEDITATIONS_HTML = numbered_html(("I", ["Glorified art Thou, O Lord my God!"]), prefix="m")

CDB_HTML = """
<html><body>
<div class="ic"><h1 class="g">Preface</h1></div>
<p><a class="sf" id="pre1"></a>Preface text is not part of any work.</p>
<div class="ic"><h1 class="g">The Seven Valleys</h1><p class="hb">Written in reply to questions</p></div>
<p class="ub w kf"><a class="sf" id="c1"></a>In the name of God</p>
<p><a class="sf" id="c2"></a><a class="td">2</a>Prose before.<sup><a href="#n1">1</a></sup><span class="dd"><span class="ce">Line one<br/>Line two</span><span class="ce">Line three</span></span></p>
<h2>Notes</h2>
<div><span class="jf">1</span><p><a id="n1"></a>Note one.</p></div>
</body></html>
"""

SNAPSHOTS = {
    "prayers": PRAYERS_HTML,
    "hidden_words": HIDDEN_WORDS_HTML,
    "gleanings": GLEANINGS_HTML,
    "meditations": MEDITATIONS_HTML,
    "call_divine_beloved": CDB_HTML,
}


def element(html: str, selector: str):
    return BeautifulSoup(html, "lxml").select_one(selector)


@pytest.fixture
def corpus_cache() -> CorpusCache:
    """Corpus over the fixture snapshots, without record-count checks."""
    return CorpusCache(loader=lambda work: SNAPSHOTS[work.file_name], verify=False)
