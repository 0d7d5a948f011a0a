import logging
import re
from enum import Enum
from typing import Any, FrozenSet, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from domaintwist.models.dictionary import Dictionary

logger = logging.getLogger(__name__)


class Engine(str, Enum):
    """Every transformation engine, in the order the orchestrator runs them."""
    VOWEL_SWAP = 'vowel-swap'
    GLYPHS = 'glyphs'
    UNICODE = 'unicode'
    OMISSION = 'omission'
    DUPLICATION = 'duplication'
    ADDITION = 'addition'
    REPLACEMENT = 'replacement'
    BITSQUATTING = 'bitsquatting'
    HYPHENATION = 'hyphenation'
    SUBDOMAIN = 'subdomain'
    POSITION_SWAP = 'position-swap'
    DICTIONARY = 'dictionary'
    NUMBER_TO_LETTER = 'number-to-letter'
    HOMOGLYPHS = 'homoglyphs'
    COMMON_MISSPELLINGS = 'common-misspellings'
    KEYBOARD_SHIFT = 'keyboard-shift'
    LETTER_REPETITION = 'letter-repetition'
    LETTER_SWAP = 'letter-swap'
    COMMON_TYPO = 'common-typo'
    TLD_FUSION = 'tld-fusion'

    @classmethod
    def lookup(cls, name: Any) -> Optional['Engine']:
        """
        Resolves an engine from its value ('vowel-swap'), member name
        ('VOWEL_SWAP') or flag form ('include_vowel_swap', 'includeVowelSwap').
        Returns None for anything unrecognized.
        """
        if isinstance(name, cls):
            return name
        if not isinstance(name, str):
            return None
        key = re.sub(r'(?<=[a-z0-9])(?=[A-Z])', '_', name.strip())
        key = key.lower().replace('-', '_')
        if key.startswith('include_'):
            key = key[len('include_'):]
        return _ENGINE_KEYS.get(key)


# Aliases for the flag names used by callers of the flag-bag form.
_ENGINE_KEYS = {engine.name.lower(): engine for engine in Engine}
_ENGINE_KEYS.update({
    'vowelswap': Engine.VOWEL_SWAP,
    'positionswap': Engine.POSITION_SWAP,
    'unicode_glyphs': Engine.UNICODE,
})

CUSTOM_DICTIONARY_KEYS = ('custom_dictionary', 'customDictionary', 'dictionary_data')


class EngineSelection(BaseModel):
    """
    Which engines the orchestrator runs, and the dictionary the dictionary
    engine uses. Defaults to every engine with the built-in dictionary.
    """
    model_config = ConfigDict(frozen=True)

    engines: FrozenSet[Engine] = Field(default_factory=lambda: frozenset(Engine))
    custom_dictionary: Optional[Dictionary] = None

    @field_validator('engines', mode='before')
    @classmethod
    def _known_engines_only(cls, value: Any) -> FrozenSet[Engine]:
        if value is None:
            return frozenset(Engine)
        if isinstance(value, (str, Engine)):
            value = [value]
        selected = set()
        for name in value:
            engine = Engine.lookup(name)
            if engine is None:
                logger.debug("Ignoring unknown engine '%s'", name)
                continue
            selected.add(engine)
        return frozenset(selected)

    @field_validator('custom_dictionary', mode='before')
    @classmethod
    def _coerce_dictionary(cls, value: Any) -> Any:
        """Plain mappings are always read in the flat `{"words": [...], "<category>": [...]}` shape."""
        if isinstance(value, Mapping):
            return Dictionary.from_mapping(value)
        return value

    @classmethod
    def from_flags(cls, flags: Optional[Mapping[str, Any]] = None) -> 'EngineSelection':
        """
        Builds a selection from a flag bag such as
        `{'include_vowel_swap': False, 'custom_dictionary': {...}}`.

        Every engine stays enabled unless its flag is falsy. Unknown keys are ignored.
        """
        flags = flags or {}
        enabled = set(Engine)
        custom_dictionary = None
        for key, value in flags.items():
            if key in CUSTOM_DICTIONARY_KEYS:
                custom_dictionary = value
                continue
            engine = Engine.lookup(key)
            if engine is None:
                logger.debug("Ignoring unknown selection flag '%s'", key)
                continue
            if not value:
                enabled.discard(engine)
        return cls(engines=frozenset(enabled), custom_dictionary=custom_dictionary)

    def ordered(self):
        """Returns the selected engines in declared order."""
        return [engine for engine in Engine if engine in self.engines]
