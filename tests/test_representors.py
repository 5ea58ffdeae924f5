import json

import pytest

from hypernav import (
    HalRepresentor,
    HtmlRepresentor,
    JsonApiRepresentor,
    Link,
    LinkNotFound,
    ParseError,
    SirenRepresentor,
)

URI = "http://example.org/articles/1"


def test_hal_links_and_content():
    body = {
        "_links": {
            "self": {"href": "/articles/1"},
            "author": {"href": "/people/9", "title": "Evert"},
            "tag": [{"href": "/tags/a"}, {"href": "/tags/b"}],
            "search": {"href": "/search{?q}", "templated": True},
            "curies": [{"name": "ex", "href": "http://example.org/rels/{rel}", "templated": True}],
        },
        "title": "Hello",
    }

    representor = HalRepresentor(URI, "application/hal+json", json.dumps(body), [])

    assert representor.content == {"title": "Hello"}
    assert [link.rel for link in representor.links] == ["self", "author", "tag", "tag", "search"]
    assert representor.get_link("author") == Link(rel="author", href="/people/9", context=URI, title="Evert")
    assert [link.href for link in representor.get_links("tag")] == ["/tags/a", "/tags/b"]
    assert representor.get_link("search").resolve({"q": "x y"}) == "http://example.org/search?q=x%20y"
    assert not representor.has_link("curies")


def test_hal_embedded():
    body = {
        "_links": {"self": {"href": "/articles"}},
        "_embedded": {
            "item": [
                {"_links": {"self": {"href": "/articles/1"}}, "title": "One"},
                {"_links": {"self": {"href": "/articles/2"}}, "title": "Two"},
                {"title": "no self link"},
            ]
        },
    }

    representor = HalRepresentor("http://example.org/articles", "application/hal+json", json.dumps(body), [])

    assert [link.href for link in representor.get_links("item")] == ["/articles/1", "/articles/2"]
    assert list(representor.embedded) == ["http://example.org/articles/1", "http://example.org/articles/2"]
    assert json.loads(representor.embedded["http://example.org/articles/2"])["title"] == "Two"
    assert representor.content == {}


def test_header_links_come_first():
    header_link = Link(rel="next", href="/articles/2", context=URI)
    body = {"_links": {"prev": {"href": "/articles/0"}}}

    representor = HalRepresentor(URI, "application/hal+json", json.dumps(body), [header_link])

    assert [link.rel for link in representor.get_links()] == ["next", "prev"]


def test_empty_body():
    representor = HalRepresentor(URI, "application/hal+json", None, [])

    assert representor.content is None
    assert representor.links == []


def test_invalid_json():
    with pytest.raises(ParseError):
        HalRepresentor(URI, "application/hal+json", "{not json", [])


@pytest.mark.parametrize("body, content", [("[1, 2]", [1, 2]), ("42", 42), ('"text"', "text")])
def test_hal_keeps_non_object_json(body, content):
    header_links = [Link(rel="next", href="/list?page=2", context="http://example.org/list")]

    representor = HalRepresentor("http://example.org/list", "application/json", body, header_links)

    assert representor.content == content
    assert representor.links == header_links
    assert representor.embedded == {}


@pytest.mark.parametrize(
    "body",
    [
        {"_links": "x"},
        {"_links": {"self": "/a", "up": [1, {"href": 2}]}},
        {"_embedded": ["x"]},
        {"_embedded": {"item": [{"_links": "x"}, {"_links": {"self": {"href": None}}}]}},
    ],
)
def test_hal_skips_malformed_links(body):
    representor = HalRepresentor(URI, "application/hal+json", json.dumps(body), [])

    assert representor.links == []
    assert representor.embedded == {}


@pytest.mark.parametrize(
    "body",
    [
        {"links": "x"},
        {"links": ["self", {"rel": ["next"]}, {"rel": ["up"], "href": 3}]},
        {"entities": ["x", {"rel": ["item"], "links": ["self", {"rel": ["self"]}]}]},
    ],
)
def test_siren_skips_malformed_links(body):
    representor = SirenRepresentor(URI, "application/vnd.siren+json", json.dumps(body), [])

    assert representor.links == []
    assert representor.embedded == {}


def test_siren_requires_object():
    with pytest.raises(ParseError):
        SirenRepresentor(URI, "application/vnd.siren+json", "[1, 2]", [])


@pytest.mark.parametrize(
    "body",
    [
        {"links": "x"},
        {"links": {"self": 1}, "data": ["x", {"links": "y"}, {"links": {"self": ["z"]}}]},
    ],
)
def test_jsonapi_skips_malformed_links(body):
    representor = JsonApiRepresentor(URI, "application/vnd.api+json", json.dumps(body), [])

    assert representor.links == []
    assert representor.content == body


def test_link_not_found():
    representor = HalRepresentor(URI, "application/hal+json", "{}", [])

    with pytest.raises(LinkNotFound) as exc_info:
        representor.get_link("author")

    assert exc_info.value.rel == "author"
    assert exc_info.value.uri == URI


def test_jsonapi():
    body = {
        "links": {"self": "/articles", "next": {"href": "/articles?page=2"}, "prev": None},
        "data": [
            {"type": "articles", "id": "1", "links": {"self": "/articles/1"}},
            {"type": "articles", "id": "2"},
        ],
    }

    representor = JsonApiRepresentor("http://example.org/articles", "application/vnd.api+json", json.dumps(body), [])

    assert [(link.rel, link.href) for link in representor.links] == [
        ("self", "/articles"),
        ("next", "/articles?page=2"),
        ("item", "/articles/1"),
    ]
    assert representor.content == body
    assert representor.embedded == {}


def test_siren():
    body = {
        "class": ["order"],
        "properties": {"orderNumber": 42},
        "entities": [
            {"rel": ["http://x.io/rels/customer"], "href": "/customers/7"},
            {
                "rel": ["item"],
                "properties": {"sku": "a"},
                "links": [{"rel": ["self"], "href": "/items/1"}],
            },
            {"rel": ["item"], "properties": {"sku": "b"}},
        ],
        "links": [
            {"rel": ["self"], "href": "/orders/42"},
            {"rel": ["previous", "prev"], "href": "/orders/41", "title": "Previous"},
        ],
    }

    representor = SirenRepresentor("http://example.org/orders/42", "application/vnd.siren+json", json.dumps(body), [])

    assert representor.content == {"orderNumber": 42}
    assert [(link.rel, link.href) for link in representor.links] == [
        ("self", "/orders/42"),
        ("previous", "/orders/41"),
        ("prev", "/orders/41"),
        ("http://x.io/rels/customer", "/customers/7"),
        ("item", "/items/1"),
    ]
    assert list(representor.embedded) == ["http://example.org/items/1"]


def test_html():
    body = """
    <html>
      <head>
        <link rel="stylesheet alternate" href="/style.css" type="text/css">
        <link href="/no-rel">
      </head>
      <body>
        <a href="/about" rel="about" title="About us">About</a>
        <a href="/plain">Plain</a>
      </body>
    </html>
    """

    representor = HtmlRepresentor(URI, "text/html", body, [])

    assert [(link.rel, link.href) for link in representor.links] == [
        ("stylesheet", "/style.css"),
        ("alternate", "/style.css"),
        ("about", "/about"),
    ]
    assert representor.get_link("stylesheet").type == "text/css"
    assert representor.get_link("about").title == "About us"
    assert representor.content == body


def test_link_resolution():
    link = Link(rel="up", href="../", context="http://example.org/a/b/c")

    assert link.resolve() == "http://example.org/a/"
