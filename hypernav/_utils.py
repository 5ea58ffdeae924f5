from __future__ import annotations

import typing as tp

import httpx

SAFE_METHODS = ("GET", "HEAD", "OPTIONS", "TRACE")


def resolve(base: str, reference: tp.Optional[str] = None) -> str:
    """
    Resolve a URI reference against an absolute base URI.

    The result is the string form of an `httpx.URL`, which is also what
    `str(request.url)` produces for outgoing requests, so both can be used
    as the same cache key.

    Examples:
        >>> resolve("http://example.org/a/b", "../c")
        'http://example.org/c'
        >>> resolve("http://example.org/a/b")
        'http://example.org/a/b'
    """
    if not reference:
        return str(httpx.URL(base))
    return str(httpx.URL(base).join(reference))


def is_safe_method(method: str) -> bool:
    return method.upper() in SAFE_METHODS


def strip_content_type(content_type: str) -> str:
    """
    Drop media type parameters and surrounding whitespace.

    Examples:
        >>> strip_content_type("application/json; charset=utf-8")
        'application/json'
    """
    if ";" in content_type:
        content_type = content_type.split(";", 1)[0]
    return content_type.strip()
