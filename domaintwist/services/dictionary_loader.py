import json
import logging
from pathlib import Path
from typing import Union

import requests
from pydantic import ValidationError

from domaintwist.config.settings import REQUEST_TIMEOUT_HTTP
from domaintwist.models.dictionary import Dictionary

logger = logging.getLogger(__name__)


class DictionaryLoadError(Exception):
    """Raised when a dictionary cannot be read, fetched or parsed."""


def _parse(raw: str, source: str) -> Dictionary:
    try:
        return Dictionary.from_mapping(json.loads(raw))
    except (json.JSONDecodeError, ValidationError, ValueError) as e:
        raise DictionaryLoadError(f"Failed to load dictionary from {source}: {e}") from e


def load_dictionary_from_file(path: Union[str, Path]) -> Dictionary:
    """
    Loads a dictionary from a JSON file shaped like
    `{"words": [...], "<category>": [...]}`.

    Raises:
        DictionaryLoadError: If the file cannot be read or is not a valid dictionary.
    """
    try:
        raw = Path(path).read_text(encoding='utf-8')
    except OSError as e:
        raise DictionaryLoadError(f"Failed to load dictionary from {path}: {e}") from e
    dictionary = _parse(raw, str(path))
    logger.info("Loaded %d dictionary words from %s", len(dictionary), path)
    return dictionary


def load_dictionary_from_url(url: str, timeout: float = REQUEST_TIMEOUT_HTTP) -> Dictionary:
    """
    Fetches a JSON dictionary over HTTP(S).

    Args:
        url (str): Location of the dictionary.
        timeout (float): Request timeout in seconds.

    Returns:
        Dictionary: The parsed dictionary.

    Raises:
        DictionaryLoadError: On connection errors, non-2xx responses or malformed JSON.
    """
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        raise DictionaryLoadError(f"Failed to load dictionary from {url}: {e}") from e
    dictionary = _parse(response.text, url)
    logger.info("Loaded %d dictionary words from %s", len(dictionary), url)
    return dictionary
