"""
Cardano NFT Metadata - URI Handling

URL acceptance for image and file sources, and image location
classification.
"""

import re
from typing import Any
from urllib.parse import unquote, urlsplit

from .metadata import NftTypes


IPFS_PREFIX = "ipfs://"

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")

# Schemes whose URLs must carry a host
NETWORK_SCHEMES = frozenset({"http", "https", "ftp", "ws", "wss"})

# Code points no host may contain
FORBIDDEN_HOST_CHARS = frozenset("\x00\t\n\r #/:<>?@[\\]^|")

# Domains (network scheme hosts) additionally exclude controls and '%'
FORBIDDEN_DOMAIN_CHARS = FORBIDDEN_HOST_CHARS | frozenset(
    [chr(c) for c in range(0x20)] + ["%", "\x7f"]
)


def is_valid_url(value: Any) -> bool:
    """
    Check whether `value` is an absolute URL.

    Any scheme is accepted (ipfs:, ar:, data: ...). Network schemes need a
    host and, when given, a numeric port; the slashes before their host
    are optional. Other schemes written with `//` need a well-formed host.
    """
    if not isinstance(value, str):
        return False

    candidate = value.strip()
    scheme, sep, rest = candidate.partition(":")
    if not sep or not _SCHEME_RE.match(scheme):
        return False

    if scheme.lower() in NETWORK_SCHEMES:
        return _has_valid_domain(scheme, rest)
    if rest.startswith("//"):
        return _has_valid_opaque_host(candidate)
    return True


def _has_valid_domain(scheme: str, rest: str) -> bool:
    # https:a.png and https:///a.png both name the host a.png
    authority = rest.lstrip("/\\").replace("\\", "/")
    try:
        parsed = urlsplit(f"{scheme}://{authority}")
        parsed.port  # raises ValueError on a malformed port
    except ValueError:
        return False

    host = parsed.hostname
    if not host:
        return False
    if host.startswith("[") or ":" in host:
        return True
    return not any(c in FORBIDDEN_DOMAIN_CHARS for c in unquote(host))


def _has_valid_opaque_host(candidate: str) -> bool:
    try:
        parsed = urlsplit(candidate)
        parsed.port
    except ValueError:
        return False

    host = parsed.netloc.rpartition("@")[2]
    if host.startswith("["):
        return host.endswith("]") or "]:" in host
    host = host.partition(":")[0]
    return not any(c in FORBIDDEN_HOST_CHARS for c in host)


def is_ipfs_url(value: str) -> bool:
    return value.startswith(IPFS_PREFIX)


def classify_url(value: str) -> NftTypes:
    """Location of a URL image: IPFS or any other off-chain host."""
    if is_ipfs_url(value):
        return NftTypes.IPFS
    return NftTypes.OFFCHAIN
