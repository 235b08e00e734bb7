import pytest
from fastapi.testclient import TestClient

from writings_api.deps import get_corpus
from writings_api.main import app


@pytest.fixture
def client(corpus_cache):
    app.dependency_overrides[get_corpus] = lambda: corpus_cache
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}


def test_writings_by_ref(client):
    response = client.get("/api/writings/c2-1")
    assert response.status_code == 200
    body = response.json()
    assert body["type"] == "cdb"
    assert body["style"] == "blockquote"
    assert body["text"] == "Line one\nLine two"


def test_writings_by_ref_not_found(client):
    response = client.get("/api/writings/nope")
    assert response.status_code == 404
    assert "nope" in response.json()["detail"]


def test_writings_list_paginates(client):
    body = client.get("/api/writings", params={"limit": 2, "offset": 1}).json()
    assert body["limit"] == 2
    assert body["offset"] == 1
    assert [w["ref_id"] for w in body["writings"]] == ["p2", "p3"]

    body = client.get("/api/writings", params={"type": "gleaning"}).json()
    assert body["total"] == 3


def test_prayers_filters(client):
    body = client.get("/api/prayers", params={"author": "‘Abdu’l‑Bahá"}).json()
    assert [w["ref_id"] for w in body["writings"]] == ["p3"]

    body = client.get("/api/prayers", params={"section": "aid-and/children"}).json()
    assert [w["ref_id"] for w in body["writings"]] == ["p3"]

    body = client.get("/api/prayers", params={"kind": "Obligatory Prayers"}).json()
    assert body["total"] == 0


def test_prayer_by_number(client):
    paragraphs = client.get("/api/prayers/1").json()
    assert [p["paragraph"] for p in paragraphs] == [1, 2]
    assert paragraphs[1]["citations"][0]["text"] == "A note on guidance."
    assert client.get("/api/prayers/99").status_code == 404


def test_hidden_words(client):
    assert len(client.get("/api/hidden-words").json()) == 5
    persian = client.get("/api/hidden-words", params={"kind": "persian"}).json()
    assert [hw["ref_id"] for hw in persian] == ["hw3", "hw4"]

    hidden_word = client.get("/api/hidden-words/arabic/2").json()
    assert hidden_word["invocation"] == "O Son of Being!"
    assert client.get("/api/hidden-words/latin/2").status_code == 400
    assert client.get("/api/hidden-words/Persian/9").status_code == 404


@pytest.mark.parametrize("number", ["2", "II", "ii"])
def test_gleanings_by_decimal_or_roman(client, number):
    paragraphs = client.get(f"/api/gleanings/{number}").json()
    assert [p["ref_id"] for p in paragraphs] == ["r3"]


def test_gleanings_rejects_bad_numeral(client):
    assert client.get("/api/gleanings/IIII").status_code == 400
    assert client.get("/api/gleanings/IX").status_code == 404


def test_meditation_paragraph(client):
    paragraph = client.get("/api/meditations/I/1").json()
    assert paragraph["ref_id"] == "m1"
    assert client.get("/api/meditations/I/2").status_code == 404


def test_search_ignores_case_and_diacritics(client):
    body = client.get("/api/search", params={"q": "GLÓRIFIED art"}).json()
    assert body["total"] == 1
    (result,) = body["results"]
    assert result["writings"]["ref_id"] == "m1"
    assert result["ty"] == "meditation"
    assert result["title"] == "Prayers and Meditations"
    assert result["excerpt"] == "Glorified art Thou, O Lord my God!"


def test_search_keywords_must_share_a_sentence(client):
    body = client.get("/api/search", params={"q": "first counsel"}).json()
    assert [r["writings"]["ref_id"] for r in body["results"]] == ["hw1"]
    assert client.get("/api/search", params={"q": "counsel glory"}).json()["total"] == 0


def test_search_tolerates_a_misspelt_last_keyword(client):
    body = client.get("/api/search", params={"q": "art glorifyed"}).json()
    assert [r["writings"]["ref_id"] for r in body["results"]] == ["m1"]
    assert body["results"][0]["excerpt"] == "Glorified art Thou, O Lord my God!"
    assert client.get("/api/search", params={"q": "glorifyed art"}).json()["total"] == 0


def test_search_matches_prayer_sections(client):
    body = client.get("/api/search", params={"q": "children"}).json()
    assert [r["writings"]["ref_id"] for r in body["results"]] == ["p3"]
    assert body["results"][0]["subtitle"] == "General Prayers: Aid and Assistance"


def test_search_requires_query(client):
    assert client.get("/api/search", params={"q": "x"}).status_code == 422
