from __future__ import annotations

import json
import typing as tp

import httpx

__all__ = (
    "HypernavError",
    "UnsupportedContentType",
    "UnknownRepresentor",
    "ParseError",
    "MissingContentType",
    "LinkNotFound",
    "HttpError",
    "Problem",
    "http_error_from_response",
)


class HypernavError(Exception): ...


class UnsupportedContentType(HypernavError):
    def __init__(self, content_type: str, mime: tp.Optional[str] = None) -> None:
        self.content_type = content_type
        self.mime = content_type if mime is None else mime
        super().__init__(f"Could not find a representor for contentType: {content_type}")


class UnknownRepresentor(HypernavError):
    def __init__(self, representor: str) -> None:
        self.representor = representor
        super().__init__(f"Unknown representor: {representor}")


class ParseError(HypernavError): ...


class MissingContentType(ParseError):
    def __init__(self, uri: str) -> None:
        self.uri = uri
        super().__init__(f"Response from {uri} did not have a Content-Type header")


class LinkNotFound(HypernavError):
    def __init__(self, rel: str, uri: str) -> None:
        self.rel = rel
        self.uri = uri
        super().__init__(f'Link with rel "{rel}" not found on {uri}')


class HttpError(HypernavError):
    """
    Raised for every response outside of the 2xx range.

    The original response is kept so callers can inspect headers and body.
    """

    def __init__(self, response: httpx.Response, message: tp.Optional[str] = None) -> None:
        self.response = response
        self.status = response.status_code
        super().__init__(message or f"HTTP error {response.status_code}")


class Problem(HttpError):
    """An `application/problem+json` (RFC 7807) error response."""

    def __init__(self, response: httpx.Response, body: tp.Dict[str, tp.Any]) -> None:
        self.body = body
        self.title: tp.Optional[str] = body.get("title")
        self.detail: tp.Optional[str] = body.get("detail")
        message = f"HTTP error {response.status_code}"
        if self.title:
            message += f": {self.title}"
        super().__init__(response, message)


def http_error_from_response(response: httpx.Response) -> HttpError:
    content_type = response.headers.get("Content-Type", "").split(";")[0].strip()

    if content_type == "application/problem+json":
        try:
            body = json.loads(response.content)
        except ValueError:
            return HttpError(response)
        if isinstance(body, dict):
            return Problem(response, body)

    return HttpError(response)
