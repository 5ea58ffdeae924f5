from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

"""
HTTP token, quoted-string and Link header parsing utilities.

The token and quoted-string rules follow RFC 7230, the Link header
grammar follows RFC 8288.
"""

__all__ = ("LinkValue", "parse_link_header", "parse_link_headers")


def is_ctl(c: str) -> bool:
    """
    Check if character is a control character.

    Per RFC 7230: CTL = control characters (0-31 and 127)
    """
    if not c:
        return False
    b = ord(c)
    return b <= 31 or b == 127


def is_separator(c: str) -> bool:
    """
    Check if character is an HTTP separator.

    Per RFC 2616 Section 2.2:
    separators = "(" | ")" | "<" | ">" | "@"
               | "," | ";" | ":" | "\" | <">
               | "/" | "[" | "]" | "?" | "="
               | "{" | "}" | SP | HT
    """
    if not c:
        return False
    return c in '()<>@,;:\\"/[]?={} \t'


def is_token(c: str) -> bool:
    """
    Check if character is valid in an HTTP token.

    Examples:
        >>> is_token('a')
        True
        >>> is_token('-')
        True
        >>> is_token(';')
        False
        >>> is_token(' ')
        False
    """
    return bool(c) and ord(c) <= 127 and not is_ctl(c) and not is_separator(c)


def http_unquote(raw: str) -> tuple[int, str]:
    r"""
    Unquote an HTTP quoted-string.

    The raw string must begin with a double quote. Only the first quoted
    string is parsed.

    Returns:
        Tuple of (eaten, result) where eaten is the number of characters
        consumed, or -1 when the closing quote is missing.

    Examples:
        >>> http_unquote('"next prev"; title=x')
        (11, 'next prev')
        >>> http_unquote('"a\\"b"')
        (6, 'a"b')
        >>> http_unquote('"open')
        (-1, '')
    """
    if not raw or raw[0] != '"':
        return -1, ""

    buf: list[str] = []
    i = 1

    while i < len(raw):
        c = raw[i]

        if c == '"':
            return i + 1, "".join(buf)

        if c == "\\":
            if i + 1 >= len(raw):
                return -1, ""
            buf.append(raw[i + 1])
            i += 2
        else:
            buf.append(c)
            i += 1

    return -1, ""


@dataclass
class LinkValue:
    """A single `<uri-reference>; param=value` element of a Link header."""

    uri: str
    params: Dict[str, str] = field(default_factory=dict)

    @property
    def rels(self) -> List[str]:
        # RFC 8288 3.3: rel holds one or more space separated relation types
        return self.params.get("rel", "").split()

    def has_rel(self, rel: str) -> bool:
        return rel.lower() in (value.lower() for value in self.rels)

    def get(self, name: str) -> Optional[str]:
        return self.params.get(name)


def skip_ows(value: str, i: int) -> int:
    while i < len(value) and value[i] in (" ", "\t"):
        i += 1
    return i


def parse_link_header(value: str) -> List[LinkValue]:
    """
    Parse a Link header field value character by character.

    Commas inside the `<...>` target or inside quoted parameter values do
    not split link values. Malformed elements are skipped up to the next
    comma. Parameter names are lowercased; only the first occurrence of a
    parameter is kept (RFC 8288 3.3 for `rel`).

    Examples:
        >>> [link.uri for link in parse_link_header('</a>; rel="next", </b,c>; rel=prev')]
        ['/a', '/b,c']
    """
    links: List[LinkValue] = []

    if not value:
        return links

    i = 0
    length = len(value)

    while i < length:
        # Skip whitespace and empty list elements
        while i < length and value[i] in (" ", "\t", ","):
            i += 1

        if i >= length:
            break

        if value[i] != "<":
            i = skip_to_next_element(value, i)
            continue

        end = value.find(">", i + 1)
        if end == -1:
            break

        link = LinkValue(uri=value[i + 1 : end].strip())
        i = end + 1

        while True:
            i = skip_ows(value, i)
            if i >= length or value[i] != ";":
                break
            i = skip_ows(value, i + 1)

            j = i
            while j < length and is_token(value[j]):
                j += 1
            name = value[i:j].lower()
            i = skip_ows(value, j)

            param_value = ""
            if i < length and value[i] == "=":
                i = skip_ows(value, i + 1)
                if i < length and value[i] == '"':
                    eaten, param_value = http_unquote(value[i:])
                    if eaten == -1:
                        # Quote mismatch, nothing usable is left in this field
                        i = length
                        break
                    i += eaten
                else:
                    j = i
                    while j < length and value[j] not in (" ", "\t", ",", ";"):
                        j += 1
                    param_value = value[i:j]
                    i = j

            if name and name not in link.params:
                link.params[name] = param_value

        links.append(link)
        i = skip_to_next_element(value, i)

    return links


def skip_to_next_element(value: str, i: int) -> int:
    while i < len(value) and value[i] != ",":
        if value[i] == '"':
            eaten, _ = http_unquote(value[i:])
            if eaten == -1:
                return len(value)
            i += eaten
        else:
            i += 1
    return i


def parse_link_headers(values: Iterable[str]) -> List[LinkValue]:
    """Parse every field of a (possibly repeated) Link header."""
    links: List[LinkValue] = []
    for value in values:
        links.extend(parse_link_header(value))
    return links
