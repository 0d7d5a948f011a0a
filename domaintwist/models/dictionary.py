from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

GENERAL_CATEGORY = 'words'


class Dictionary(BaseModel):
    """
    Word list used by the dictionary engine.

    `words` is the general-purpose bucket; `categories` holds additional named
    word lists, iterated in insertion order after `words`. Both are read-only,
    so a Dictionary can be shared between threads.
    """
    model_config = ConfigDict(frozen=True)

    words: Tuple[str, ...] = ()
    categories: Mapping[str, Tuple[str, ...]] = Field(default_factory=lambda: MappingProxyType({}))

    @field_validator('words', mode='before')
    @classmethod
    def _clean_words(cls, value: Any) -> Tuple[str, ...]:
        return _clean_word_list(value, GENERAL_CATEGORY)

    @field_validator('categories', mode='before')
    @classmethod
    def _clean_categories(cls, value: Any) -> Dict[str, Tuple[str, ...]]:
        if value is None:
            return {}
        if not isinstance(value, Mapping):
            raise ValueError('categories must be a mapping of category name to word list')
        cleaned: Dict[str, Tuple[str, ...]] = {}
        for name, words in value.items():
            if not isinstance(name, str) or not name.strip():
                raise ValueError('category names must be non-empty strings')
            if name == GENERAL_CATEGORY:
                raise ValueError(f"'{GENERAL_CATEGORY}' is reserved for the general word list")
            cleaned[name] = _clean_word_list(words, name)
        return cleaned

    @field_validator('categories', mode='after')
    @classmethod
    def _freeze_categories(cls, value: Mapping[str, Tuple[str, ...]]) -> Mapping[str, Tuple[str, ...]]:
        return MappingProxyType(dict(value))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> 'Dictionary':
        """
        Builds a Dictionary from the flat JSON shape
        `{"words": [...], "<category>": [...], ...}`.
        """
        if not isinstance(data, Mapping):
            raise ValueError(f'dictionary data must be a JSON object, got {type(data).__name__}')
        categories = {name: words for name, words in data.items() if name != GENERAL_CATEGORY}
        return cls(words=data.get(GENERAL_CATEGORY) or (), categories=categories)

    def iter_words(self) -> Iterator[str]:
        """Yields the general words first, then every category's words in order."""
        yield from self.words
        for words in self.categories.values():
            yield from words

    def union(self, other: 'Dictionary') -> 'Dictionary':
        """Returns a new Dictionary holding the words of both, duplicates removed."""
        categories: Dict[str, Tuple[str, ...]] = dict(self.categories)
        for name, words in other.categories.items():
            categories[name] = tuple(dict.fromkeys(categories.get(name, ()) + words))
        return Dictionary(words=tuple(dict.fromkeys(self.words + other.words)), categories=categories)

    def __len__(self) -> int:
        return len(self.words) + sum(len(words) for words in self.categories.values())


def _clean_word_list(value: Any, name: str) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str) or not isinstance(value, Iterable):
        raise ValueError(f"'{name}' must be a list of words")
    words = []
    for word in value:
        if not isinstance(word, str):
            raise ValueError(f"'{name}' contains a non-string entry: {word!r}")
        word = word.strip()
        if word:
            words.append(word)
    return tuple(words)


def build_dictionary(words: Iterable[str],
                     categories: Optional[Mapping[str, Iterable[str]]] = None) -> Dictionary:
    """
    Creates a custom dictionary from a general word list and optional categories.

    Args:
        words (Iterable[str]): General-purpose words.
        categories (Optional[Mapping[str, Iterable[str]]]): Extra named word lists.

    Returns:
        Dictionary: A validated, immutable dictionary.
    """
    return Dictionary(words=tuple(words), categories=dict(categories or {}))


# default_dictionary: Words frequently used in domain names, especially for phishing or typosquatting.
DEFAULT_DICTIONARY = Dictionary(
    words=(
        'auth', 'access', 'account', 'admin', 'agree', 'blue', 'business', 'cdn', 'choose', 'claim', 'click',
        'confirm', 'confirmation', 'connect', 'download', 'enroll', 'find', 'group', 'http', 'https',
        'https-www', 'install', 'login', 'mobile', 'mail', 'my', 'online', 'pay', 'payment', 'payments',
        'portal', 'recovery', 'register', 'ssl', 'safe', 'secure', 'security', 'service', 'services',
        'signin', 'signup', 'support', 'summary', 'update', 'user', 'verify', 'verification', 'view', 'ww',
        'www', 'web',
    ),
    categories={
        'commerce': ('shop', 'store', 'buy', 'order', 'checkout', 'cart', 'deals', 'sale', 'billing',
                     'invoice', 'refund', 'wallet'),
        'support': ('help', 'helpdesk', 'contact', 'info', 'team', 'care', 'desk', 'ticket'),
        'corporate': ('corp', 'global', 'official', 'inc', 'hq', 'careers', 'jobs', 'news', 'media'),
        'technology': ('app', 'api', 'cloud', 'dev', 'host', 'net', 'server', 'sync', 'auth0', 'sso'),
    },
)
