# settings.py

import os
import re

# Default values for environment-based configurations
DEFAULT_SUFFIX = os.environ.get('TWIST_DEFAULT_SUFFIX', 'com')
REQUEST_TIMEOUT_HTTP = float(os.environ.get('REQUEST_TIMEOUT_HTTP', 5))
LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

# Other constants
VALID_FQDN_REGEX = re.compile(r'(?=^.{4,253}$)(^((?!-)[a-z0-9-]{1,63}(?<!-)\.)+[a-z0-9-]{2,63}$)')
