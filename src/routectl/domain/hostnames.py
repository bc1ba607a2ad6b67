"""Hostname heuristics for route derivation.

A domain with three or more dot-separated labels is a subdomain; two
labels is a root domain. Public suffixes are NOT consulted, so compound
TLDs are misclassified (``example.co.uk`` counts as a subdomain of
``co.uk``).
"""

from __future__ import annotations

SUBDOMAIN_MIN_LABELS = 3


def is_subdomain(domain: str) -> bool:
    """Return True when *domain* has at least three labels.

    Examples:
        >>> is_subdomain("api.example.com")
        True
        >>> is_subdomain("example.com")
        False
    """
    if not domain:
        return False
    return len(domain.split(".")) >= SUBDOMAIN_MIN_LABELS


def root_domain(domain: str) -> str:
    """Return the last two labels of *domain*.

    Examples:
        >>> root_domain("staging-api.example.com")
        'example.com'
        >>> root_domain("example.com")
        'example.com'
    """
    if not domain:
        return ""
    parts = domain.split(".")
    if len(parts) <= 2:
        return domain
    return ".".join(parts[-2:])


def subdomain_prefix(domain: str) -> str:
    """Convert the first label of a subdomain into a path prefix.

    Examples:
        >>> subdomain_prefix("api.example.com")
        '/api'
        >>> subdomain_prefix("example.com")
        ''
    """
    if not is_subdomain(domain):
        return ""
    return f"/{domain.split('.')[0]}"
