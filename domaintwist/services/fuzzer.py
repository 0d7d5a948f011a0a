import logging
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Set, Union

from domaintwist.models.dictionary import Dictionary
from domaintwist.models.engine_selection import Engine, EngineSelection
from domaintwist.services import engines, glyphs
from domaintwist.services.permutation import Permutation
from domaintwist.services.punycode import ACE_PREFIX, PunycodeError, to_unicode
from domaintwist.services.url_parser import is_valid_domain
from domaintwist.utils.domain_util import split_domain

logger = logging.getLogger(__name__)

SelectionLike = Union[EngineSelection, Mapping[str, Any], Iterable[Union[str, Engine]], None]


def resolve_selection(selection: SelectionLike) -> EngineSelection:
    """
    Accepts an EngineSelection, a flag mapping ({'include_addition': False, ...})
    or an iterable of engine names and returns an EngineSelection.
    """
    if selection is None:
        return EngineSelection()
    if isinstance(selection, EngineSelection):
        return selection
    if isinstance(selection, Mapping):
        return EngineSelection.from_flags(selection)
    return EngineSelection(engines=selection)


# --- Fuzzer Class ---

class Fuzzer:
    """
    Generates look-alike and typo-adjacent variations of a domain.

    The domain is split into its registrable label and public suffix, every
    selected engine is run against the label, and the results are collected
    as Permutation objects in a set, so each domain appears once and is
    credited to the first engine (in declared order) that produced it.
    """

    # Engines returning bare labels; the suffix is appended here.
    # Dictionary and TLD fusion build fully qualified domains themselves.
    label_engines: Dict[Engine, Callable[[str], List[str]]] = {
        Engine.VOWEL_SWAP: engines.vowel_swap,
        Engine.GLYPHS: engines.glyphs_swap,
        Engine.UNICODE: engines.unicode_glyphs,
        Engine.OMISSION: engines.omission,
        Engine.DUPLICATION: engines.duplication,
        Engine.ADDITION: engines.addition,
        Engine.REPLACEMENT: engines.replacement,
        Engine.BITSQUATTING: engines.bitsquatting,
        Engine.HYPHENATION: engines.hyphenation,
        Engine.SUBDOMAIN: engines.subdomain,
        Engine.POSITION_SWAP: engines.position_swap,
        Engine.NUMBER_TO_LETTER: engines.number_to_letter,
        Engine.HOMOGLYPHS: engines.homoglyphs,
        Engine.COMMON_MISSPELLINGS: engines.common_misspellings,
        Engine.KEYBOARD_SHIFT: engines.keyboard_shift,
        Engine.LETTER_REPETITION: engines.letter_repetition,
        Engine.LETTER_SWAP: engines.letter_swap,
        Engine.COMMON_TYPO: engines.common_typo,
    }

    def __init__(self, domain: str, dictionary: Optional[Dictionary] = None) -> None:
        """
        Args:
            domain (str): The target domain (e.g. "paypal.com" or "www.paypal.co.uk").
                Degenerate input is not rejected: when no public suffix is found
                the whole input becomes the label and the default suffix is used.
            dictionary (Optional[Dictionary]): Replaces the built-in dictionary
                for the dictionary engine.
        """
        self.input_domain: str = domain or ''
        self.ascii_label, self.suffix = split_domain(self.input_domain)
        self.label: str = self._decode_label(self.ascii_label)
        self.dictionary = dictionary
        self.domains: Set[Permutation] = set()

    @staticmethod
    def _decode_label(label: str) -> str:
        """Turns an `xn--` label back into Unicode so the engines see the real characters."""
        if not label.lower().startswith(ACE_PREFIX):
            return label
        try:
            return to_unicode(label)
        except PunycodeError as e:
            logger.warning("Keeping label '%s' undecoded: %s", label, e)
            return label

    def _fuzz(self, engine: Engine, dictionary: Optional[Dictionary]) -> List[str]:
        if engine is Engine.DICTIONARY:
            return engines.dictionary(self.label, self.suffix, dictionary)
        if engine is Engine.TLD_FUSION:
            return engines.tld_fusion(self.label, self.suffix)
        return [f"{variation}.{self.suffix}" for variation in self.label_engines[engine](self.label) if variation]

    def generate(self, selection: SelectionLike = None) -> None:
        """
        Runs the selected engines and stores the unique results in `self.domains`.

        Args:
            selection (SelectionLike): Which engines to run. None runs all of
                them. Unknown engine names are ignored. A custom dictionary in
                the selection takes precedence over the one given to __init__.
        """
        self.domains.clear()
        selection = resolve_selection(selection)
        dictionary = selection.custom_dictionary or self.dictionary
        original = {self.input_domain, f"{self.ascii_label}.{self.suffix}", f"{self.label}.{self.suffix}"}

        for engine in selection.ordered():
            before = len(self.domains)
            for candidate in self._fuzz(engine, dictionary):
                if candidate not in original:
                    self.domains.add(Permutation(fuzzer=engine.value, domain=candidate))
            logger.debug("%s: %d new domains for '%s'", engine.value, len(self.domains) - before, self.label)

        logger.info("Generated %d variations of %s.%s", len(self.domains), self.label, self.suffix)

    # --- Method to Retrieve Generated Permutations ---
    def permutations(self, unicode: bool = False, valid_only: bool = False) -> List[Permutation]:
        """
        Returns the generated variations, sorted by engine then domain.

        Args:
            unicode (bool): Render `xn--` labels back to Unicode for display.
            valid_only (bool): Keep only syntactically valid, registrable-looking
                FQDNs (drops candidates with characters DNS would reject).

        Returns:
            List[Permutation]: Copies of the stored permutations.
        """
        selected = [p.copy() for p in self.domains]
        if valid_only:
            selected = [p for p in selected if is_valid_domain(p.domain)]
        if unicode:
            for p in selected:
                try:
                    p.domain = '.'.join(to_unicode(part) for part in p.domain.split('.'))
                except PunycodeError:
                    # Keep the ASCII form when a label does not decode.
                    pass
        return sorted(selected)

    def domains_list(self) -> List[str]:
        """Returns the generated domain strings in a stable order."""
        return [p.domain for p in sorted(self.domains)]


def generate_domain_variations(domain: str, selection: SelectionLike = None) -> List[str]:
    """
    Generates every variation of `domain` produced by the selected engines.

    Args:
        domain (str): The domain to twist.
        selection (SelectionLike): Engines to run (default: all) and an
            optional custom dictionary.

    Returns:
        List[str]: Unique fully qualified candidate domains, never the input itself.
    """
    fuzzer = Fuzzer(domain)
    fuzzer.generate(selection)
    return fuzzer.domains_list()


def twist_domain(domain: str, include_tld_swap: bool = True) -> List[str]:
    """
    Lightweight variant of `generate_domain_variations` for callers that need
    speed over coverage: vowel swap, leetspeak, common subdomain prefixes,
    hyphenation, omission, duplication and an optional swap over a short TLD list.

    Args:
        domain (str): The domain to twist.
        include_tld_swap (bool): Also pair the label with a few common TLDs.

    Returns:
        List[str]: Unique candidate domains, never the input itself.
    """
    label, suffix = split_domain(domain or '')
    if not label:
        return []

    variations: Set[str] = set()

    # 1. Vowel swapping, one vowel at a time
    for i, char in enumerate(label):
        lowered = char.lower()
        if lowered in glyphs.VOWELS:
            for vowel in glyphs.VOWELS:
                if vowel != lowered:
                    variations.add(f"{label[:i]}{vowel}{label[i + 1:]}.{suffix}")

    # 2. Leetspeak substitutions
    for i, char in enumerate(label):
        for substitute in glyphs.LEETSPEAK.get(char.lower(), ()):
            variations.add(f"{label[:i]}{substitute}{label[i + 1:]}.{suffix}")

    # 3. Common subdomain prefixes
    for prefix in glyphs.TWIST_SUBDOMAINS:
        variations.add(f"{prefix}.{label}.{suffix}")

    # 4-6. Hyphenation, omission, duplication
    for engine in (engines.hyphenation, engines.omission, engines.duplication):
        variations.update(f"{variation}.{suffix}" for variation in engine(label) if variation)

    # 7. TLD swap
    if include_tld_swap:
        variations.update(f"{label}.{tld}" for tld in glyphs.TWIST_TLDS if tld != suffix)

    variations.discard(f"{label}.{suffix}")
    variations.discard(domain)
    return sorted(variations)
