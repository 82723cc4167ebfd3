# File: site_crawler/utils.py
"""site_crawler.utils: URL canonicalisation, reference resolution and domain scoping."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final, Optional, Sequence
from urllib.parse import quote, urljoin, urlsplit, urlunsplit

from site_crawler.logger import logger

__all__: Sequence[str] = (
    "InvalidSeedURL",
    "DomainFilter",
    "normalize_url",
    "extract_domain",
    "canonical_seed",
)

# Schemes with a host and a hierarchical path, mapped to their default port.
_SPECIAL_SCHEMES: Final[dict[str, int]] = {
    "http": 80,
    "https": 443,
    "ws": 80,
    "wss": 443,
    "ftp": 21,
}

_C0_AND_SPACE: Final[str] = "".join(chr(c) for c in range(0x21))
_TAB_NEWLINE_RE = re.compile(r"[\t\r\n]")

# Printable ASCII left untouched by quote(); alphanumerics and "_.-~" are always safe.
_PATH_SAFE: Final[str] = "!$%&'()*+,/:;=@[\\]^|"
_QUERY_SAFE: Final[str] = "!$%&()*+,/:;=?@[\\]^`{|}"
_FRAGMENT_SAFE: Final[str] = "!#$%&'()*+,/:;=?@[\\]^{|}"


class InvalidSeedURL(ValueError):
    """The seed URL is not an absolute http(s) URL with a host."""


def _remove_dot_segments(path: str) -> str:
    """Collapse ``.`` and ``..`` segments of an absolute path (RFC 3986, 5.2.4)."""
    segments = path.split("/")
    output: list[str] = []
    for segment in segments:
        if segment == "..":
            if len(output) > 1:
                output.pop()
        elif segment != ".":
            output.append(segment)
    if segments[-1] in (".", ".."):
        output.append("")
    return "/".join(output)


def _encode_host(host: str) -> Optional[str]:
    if host.isascii():
        return host
    try:
        return host.encode("idna").decode("ascii")
    except UnicodeError:
        return None


def _canonicalize(url: str) -> Optional[str]:
    """Return the canonical form of an absolute *url*, or ``None`` if it is not one."""
    try:
        parts = urlsplit(url)
        port = parts.port
    except ValueError:
        return None

    scheme = parts.scheme.lower()
    if not scheme:
        return None
    special = scheme in _SPECIAL_SCHEMES

    netloc = parts.netloc
    if netloc:
        host = _encode_host(parts.hostname or "")
        if host is None:
            return None
        if ":" in host:
            host = f"[{host}]"
        userinfo, at, _ = netloc.rpartition("@")
        netloc = f"{userinfo}{at}{host}"
        if port is not None and port != _SPECIAL_SCHEMES.get(scheme):
            netloc = f"{netloc}:{port}"
    if special and not parts.hostname:
        return None

    path = parts.path
    if special:
        if not path.startswith("/"):
            path = "/" + path
        path = _remove_dot_segments(path)

    return urlunsplit(
        (
            scheme,
            netloc,
            quote(path, safe=_PATH_SAFE),
            quote(parts.query, safe=_QUERY_SAFE),
            quote(parts.fragment, safe=_FRAGMENT_SAFE),
        )
    )


def normalize_url(base_url: str, href: str) -> Optional[str]:
    """Resolve *href* against *base_url* into an absolute, canonical URL.

    An already-absolute *href* is canonicalised as-is; anything else is joined
    onto *base_url*. Returns ``None`` when neither works, so callers can drop
    the candidate silently.
    """
    href = _TAB_NEWLINE_RE.sub("", href.strip(_C0_AND_SPACE))

    absolute = _canonicalize(href)
    if absolute is not None:
        return absolute

    base = _canonicalize(base_url)
    if base is None:
        logger.debug("Cannot resolve %r: base %r is not absolute", href, base_url)
        return None
    try:
        resolved = _canonicalize(urljoin(base, href))
    except ValueError:
        resolved = None
    if resolved is None:
        logger.debug("Dropped unresolvable link %r (base %s)", href, base)
    return resolved


def extract_domain(url: str) -> Optional[str]:
    """Return the lower-cased host of *url*, or ``None`` if it has none."""
    try:
        host = urlsplit(url).hostname
    except ValueError:
        return None
    return _encode_host(host) if host else None


def canonical_seed(seed_url: str) -> str:
    """Canonical form of *seed_url*; raises :class:`InvalidSeedURL` if it has none."""
    seed = normalize_url(seed_url, seed_url)
    if seed is None:
        raise InvalidSeedURL(f"malformed seed URL {seed_url!r}")
    return seed


@dataclass(frozen=True, slots=True)
class DomainFilter:
    """Keeps a crawl on the host of its seed URL (exact match, port ignored)."""

    base_domain: str

    @classmethod
    def from_seed(cls, seed_url: str) -> DomainFilter:
        """Build the filter from *seed_url*; raises :class:`InvalidSeedURL` on a bad seed."""
        try:
            scheme = urlsplit(seed_url).scheme.lower()
        except ValueError as exc:
            raise InvalidSeedURL(f"invalid seed URL {seed_url!r}: {exc}") from exc
        if scheme not in ("http", "https"):
            raise InvalidSeedURL(f"seed URL must use http or https: {seed_url!r}")
        domain = extract_domain(seed_url)
        if domain is None:
            raise InvalidSeedURL(f"unable to extract domain from seed URL {seed_url!r}")
        canonical_seed(seed_url)
        return cls(domain)

    def is_in_scope(self, url: str) -> bool:
        in_scope = extract_domain(url) == self.base_domain
        logger.debug("In scope: %s -> %s", url, in_scope)
        return in_scope
