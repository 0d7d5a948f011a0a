import urllib.parse

import idna

from domaintwist.config.settings import VALID_FQDN_REGEX


def is_valid_domain(domain: str) -> bool:
	"""Checks that `domain` is an ASCII FQDN that survives an IDNA round trip."""
	if not domain or len(domain) > 253:
		return False
	if VALID_FQDN_REGEX.match(domain):
		try:
			_ = idna.decode(domain)
		except (idna.IDNAError, UnicodeError):
			return False
		else:
			return True
	return False


class UrlParser():
	"""
	Normalizes what a caller typed (a bare domain, a Unicode domain or a full
	URL) into the host name the fuzzer should work on.
	"""
	def __init__(self, url):
		if not url or not isinstance(url, str):
			raise ValueError('argument has to be non-empty string')
		u = urllib.parse.urlparse(url.strip() if '://' in url else '//' + url.strip(), scheme='http')
		self.scheme = u.scheme.lower()
		if self.scheme not in ('http', 'https'):
			raise ValueError('invalid scheme') from None
		if not u.hostname:
			raise ValueError('invalid domain name') from None
		try:
			self.domain = idna.encode(u.hostname.rstrip('.'), uts46=True).decode()
		except (idna.IDNAError, UnicodeError):
			raise ValueError('invalid domain name') from None
		if not is_valid_domain(self.domain):
			raise ValueError('invalid domain name') from None
		self.path = u.path
