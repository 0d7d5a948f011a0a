"""
Tests for domain splitting, input normalization and output formatting.
"""

import json

import pytest

from domaintwist.services.format import Format
from domaintwist.services.permutation import Permutation
from domaintwist.services.url_parser import UrlParser, is_valid_domain
from domaintwist.utils.domain_util import domain_tld, split_domain


class TestDomainTld:
    """Test suffix splitting."""

    def test_three_parts(self):
        assert domain_tld("www.paypal.co.uk") == ("www", "paypal", "co.uk")

    def test_no_subdomain(self):
        assert domain_tld("paypal.com") == ("", "paypal", "com")

    def test_empty(self):
        assert domain_tld("") == ("", "", "")

    def test_split_domain(self):
        assert split_domain("mail.example.org") == ("example", "org")

    def test_split_domain_fallback(self):
        assert split_domain("localhost") == ("localhost", "com")


class TestIsValidDomain:
    """Test FQDN validation."""

    @pytest.mark.parametrize("domain", ["paypal.com", "pay-pal.co.uk", "xn--bcher-kva.de"])
    def test_valid(self, domain):
        assert is_valid_domain(domain)

    @pytest.mark.parametrize("domain", ["", "a-.com", "-a.com", "pay pal.com", "paypal", "a.b"])
    def test_invalid(self, domain):
        assert not is_valid_domain(domain)


class TestUrlParser:
    """Test normalization of user input."""

    def test_bare_domain(self):
        assert UrlParser("paypal.com").domain == "paypal.com"

    def test_full_url(self):
        parser = UrlParser("https://PayPal.com/login")
        assert parser.domain == "paypal.com"
        assert parser.path == "/login"

    def test_unicode_domain(self):
        assert UrlParser("bücher.de").domain == "xn--bcher-kva.de"

    def test_trailing_dot(self):
        assert UrlParser("paypal.com.").domain == "paypal.com"

    @pytest.mark.parametrize("url", ["", "ftp://example.com", "http://", "not a domain"])
    def test_rejected(self, url):
        with pytest.raises(ValueError):
            UrlParser(url)

    def test_non_string(self):
        with pytest.raises(ValueError):
            UrlParser(None)


class TestFormat:
    """Test output rendering."""

    def setup_method(self):
        self.domains = [
            Permutation(fuzzer="omission", domain="ab.com"),
            Permutation(fuzzer="tld-fusion", domain="abc.net"),
        ]

    def test_json(self):
        assert json.loads(Format(self.domains).json()) == [
            {"fuzzer": "omission", "domain": "ab.com"},
            {"fuzzer": "tld-fusion", "domain": "abc.net"},
        ]

    def test_json_keeps_unicode(self):
        output = Format([Permutation(fuzzer="homoglyphs", domain="bücher.de")]).json()
        assert "bücher.de" in output

    def test_csv(self):
        assert Format(self.domains).csv() == "fuzzer,domain\nomission,ab.com\ntld-fusion,abc.net"

    def test_csv_quotes_commas(self):
        output = Format([Permutation(fuzzer="x", domain="a,b")]).csv()
        assert output.splitlines()[1] == 'x,"a,b"'

    def test_list(self):
        assert Format(self.domains).list() == "ab.com\nabc.net"

    def test_empty(self):
        assert Format().list() == ""
        assert Format().csv() == "fuzzer,domain"
