from typing import Tuple

from tld import parse_tld

from domaintwist.config.settings import DEFAULT_SUFFIX


def domain_tld(domain: str) -> Tuple[str, str, str]:
    """Splits a domain into (subdomain, registrable label, public suffix) using the Public Suffix List."""
    if not domain:
        return '', '', ''
    suffix, label, subdomain = parse_tld(domain, fix_protocol=True)
    return subdomain or '', label or '', suffix or ''


def split_domain(domain: str) -> Tuple[str, str]:
    """
    Returns the registrable label and the public suffix of `domain`.

    Subdomains are dropped ('www.paypal.com' -> ('paypal', 'com')). When the
    suffix cannot be determined the whole input is used as the label and the
    suffix falls back to DEFAULT_SUFFIX.
    """
    _, label, suffix = domain_tld(domain)
    return label or domain, suffix or DEFAULT_SUFFIX
