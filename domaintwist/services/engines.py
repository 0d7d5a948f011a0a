"""
Transformation engines.

Every engine takes a label (the registrable part of a domain, without its
suffix) and returns a list of candidate labels. Two of them, `tld_fusion` and
`dictionary`, also take the suffix and return fully qualified domains.

Engines are pure: they never mutate shared state and an empty label always
yields an empty list.
"""
import logging
from typing import Any, Iterable, List, Mapping, Optional, Tuple, Union

from domaintwist.models.dictionary import DEFAULT_DICTIONARY, Dictionary
from domaintwist.services import glyphs
from domaintwist.services.punycode import MAX_CODE_POINT, PunycodeError, to_ascii

logger = logging.getLogger(__name__)


# --- Helpers ---

def _unique(candidates: Iterable[str]) -> List[str]:
    """Removes duplicates, keeping first-seen order."""
    return list(dict.fromkeys(candidates))


def _substitute_each(label: str, table: Mapping[str, Tuple[str, ...]]) -> List[str]:
    """Replaces one character at a time with every differing entry from `table`."""
    candidates = []
    for i, char in enumerate(label):
        for replacement in table.get(char, ()):
            if replacement != char:
                candidates.append(label[:i] + replacement + label[i + 1:])
    return candidates


def _two_pass(label: str, table: Mapping[str, Tuple[str, ...]]) -> List[str]:
    """
    Single substitutions followed by a second substitution applied to each of
    them, deduplicated. The unchanged label is never returned, even when a
    second substitution reverts the first one.
    """
    first_pass = _substitute_each(label, table)
    second_pass = [candidate for word in first_pass for candidate in _substitute_each(word, table)]
    return [candidate for candidate in _unique(first_pass + second_pass) if candidate != label]


def _encode_all(candidates: Iterable[str], engine_name: str) -> List[str]:
    """Passes each candidate through `to_ascii`, skipping the ones that cannot be encoded."""
    encoded = []
    for candidate in candidates:
        try:
            encoded.append(to_ascii(candidate))
        except PunycodeError as e:
            logger.warning("%s: skipping '%s', cannot convert to ASCII: %s", engine_name, candidate, e)
    return encoded


# --- Character substitution engines ---

def vowel_swap(label: str) -> List[str]:
    """
    Replaces vowels with other vowels, first one at a time and then two at a time.

    Args:
        label (str): The label to fuzz.

    Returns:
        List[str]: Unique variations, never the label itself.
    """
    vowel_table = {vowel: tuple(v for v in glyphs.VOWELS if v != vowel) for vowel in glyphs.VOWELS}
    return _two_pass(label, vowel_table)


def glyphs_swap(label: str) -> List[str]:
    """
    Replaces characters with visually similar ASCII characters or digraphs
    ('m' -> 'rn', 'l' -> '1'), one and two substitutions deep.

    Args:
        label (str): The label to fuzz.

    Returns:
        List[str]: Unique variations, never the label itself.
    """
    return _two_pass(label, glyphs.GLYPHS_ASCII)


def unicode_glyphs(label: str) -> List[str]:
    """
    Like `glyphs_swap` but driven by the full-alphabet Unicode homoglyph table.
    Every result is converted to its ASCII-compatible form.

    Args:
        label (str): The label to fuzz.

    Returns:
        List[str]: Variations, in `xn--` form when they contain non-ASCII characters.
    """
    return _encode_all(_two_pass(label, glyphs.GLYPHS_UNICODE), 'unicode')


def homoglyphs(label: str) -> List[str]:
    """
    Single-pass substitution from the curated homoglyph table. Matching is
    case-insensitive; the replacement takes the place of the matched character.

    Args:
        label (str): The label to fuzz.

    Returns:
        List[str]: Variations in ASCII-compatible form.
    """
    candidates = []
    for i, char in enumerate(label):
        for replacement in glyphs.HOMOGLYPHS.get(char.lower(), ()):
            candidates.append(label[:i] + replacement + label[i + 1:])
    return _encode_all(candidates, 'homoglyphs')


def number_to_letter(label: str) -> List[str]:
    """Replaces one digit per candidate with the letter it resembles."""
    return [label[:i] + glyphs.NUMBER_TO_LETTER[char] + label[i + 1:]
            for i, char in enumerate(label) if char in glyphs.NUMBER_TO_LETTER]


def keyboard_shift(label: str) -> List[str]:
    """Replaces each character with each of its neighbours on a QWERTY keyboard."""
    candidates = []
    for i, char in enumerate(label):
        for adjacent_key in glyphs.QWERTY.get(char.lower(), ()):
            candidates.append(label[:i] + adjacent_key + label[i + 1:])
    return candidates


def bitsquatting(label: str) -> List[str]:
    """
    Simulates single-bit memory or transmission errors by shifting one code
    point at a time by +/-1 to +/-8.

    Args:
        label (str): The label to fuzz.

    Returns:
        List[str]: Variations whose shifted character is a valid hostname
                   character (`[a-z0-9-]`).
    """
    candidates = []
    for i, char in enumerate(label):
        code_point = ord(char)
        for magnitude in glyphs.BITSQUATTING_MAGNITUDES:
            for shifted in (code_point + magnitude, code_point - magnitude):
                if not 0 <= shifted <= MAX_CODE_POINT:
                    continue
                flipped_char = chr(shifted)
                if flipped_char in glyphs.BITSQUATTING_ALLOWED_CHARS:
                    candidates.append(label[:i] + flipped_char + label[i + 1:])
    return candidates


# --- Structural engines ---

def omission(label: str) -> List[str]:
    """Deletes each character position once."""
    return [label[:i] + label[i + 1:] for i in range(len(label))]


def duplication(label: str) -> List[str]:
    """Doubles each character in place, one position at a time."""
    return [label[:i] + char + label[i:] for i, char in enumerate(label)]


def addition(label: str) -> List[str]:
    """
    Inserts every alphanumeric character at every position after the first
    character. Produces exactly `(len(label) - 1) * 36` candidates.
    """
    return [label[:i] + char_to_add + label[i:]
            for i in range(1, len(label)) for char_to_add in glyphs.ALPHANUMERIC]


def replacement(label: str) -> List[str]:
    """Replaces the character at every position with every other alphanumeric character."""
    return [label[:i] + replacement_char + label[i + 1:]
            for i, char in enumerate(label) for replacement_char in glyphs.ALPHANUMERIC
            if replacement_char != char]


def hyphenation(label: str) -> List[str]:
    """Inserts a hyphen at each internal position."""
    return [label[:i] + '-' + label[i:] for i in range(1, len(label))]


def subdomain(label: str) -> List[str]:
    """Inserts a dot at each internal position, e.g. 'example' -> 'ex.ample'."""
    return [label[:i] + '.' + label[i:] for i in range(1, len(label))]


def position_swap(label: str) -> List[str]:
    """
    Copies any character of the label into any position.

    Stage 0 inserts the copy in front of position `a`; stage 1 overwrites the
    character at `a`. Covers adjacent and distant transposition typos.

    Args:
        label (str): The label to fuzz.

    Returns:
        List[str]: Unique variations, never the label itself.
    """
    candidates = []
    for stage in (0, 1):
        for a in range(len(label)):
            for b in range(len(label)):
                generated = label[:a] + label[b] + label[a + stage:]
                if generated != label:
                    candidates.append(generated)
    return _unique(candidates)


# --- Typo pattern engines ---

def common_misspellings(label: str) -> List[str]:
    """Applies each misspelling pattern (ei <-> ie, th -> t, nn -> n, ...) to its first occurrence."""
    return [label.replace(pattern, substitute, 1)
            for pattern, substitute in glyphs.COMMON_MISSPELLINGS if pattern in label]


def letter_repetition(label: str) -> List[str]:
    """Doubles commonly repeated letters; 's' and 't' are also tripled."""
    candidates = []
    for i, char in enumerate(label):
        lowered = char.lower()
        if lowered in glyphs.COMMON_REPEATS:
            candidates.append(label[:i] + lowered * 2 + label[i + 1:])
            if lowered in glyphs.TRIPLE_REPEATS:
                candidates.append(label[:i] + lowered * 3 + label[i + 1:])
    return candidates


def letter_swap(label: str) -> List[str]:
    """Transposes adjacent letter pairs that are commonly confused ('ie', 'th', 'ou', ...)."""
    candidates = []
    for i in range(len(label) - 1):
        pair = label[i:i + 2].lower()
        if pair in glyphs.COMMON_SWAPS:
            candidates.append(label[:i] + pair[1] + pair[0] + label[i + 2:])
    return candidates


def common_typo(label: str) -> List[str]:
    """
    Rewrites common English spellings the way people mistype them
    ('tion' -> 'shun', 'ck' -> 'k', 'ph' -> 'f', ...). The label is lower-cased
    and only the first occurrence of each pattern is rewritten.

    Args:
        label (str): The label to fuzz.

    Returns:
        List[str]: One candidate per replacement variant of every matching pattern.
    """
    lowered = label.lower()
    candidates = [lowered.replace(pattern, variant, 1)
                  for pattern, variants in glyphs.COMMON_TYPOS.items() if pattern in lowered
                  for variant in variants]
    return _encode_all(candidates, 'common-typo')


# --- Fully qualified engines ---

def tld_fusion(label: str, suffix: str) -> List[str]:
    """
    Re-pairs the label with every suffix of the curated list except its own.

    Args:
        label (str): The registrable label.
        suffix (str): The original public suffix, excluded from the output.

    Returns:
        List[str]: Fully qualified domains such as 'example.net'.
    """
    if not label:
        return []
    return [f"{label}.{tld}" for tld in glyphs.FUSION_TLDS if tld != suffix]


DictionaryLike = Union[Dictionary, Mapping[str, Any]]


def dictionary(label: str, suffix: str, custom_dictionary: Optional[DictionaryLike] = None) -> List[str]:
    """
    Combines the label with dictionary words: 'wordlabel', 'labelword',
    'word-label' and 'label-word', each joined with the suffix.

    Args:
        label (str): The registrable label.
        suffix (str): The suffix appended to every candidate.
        custom_dictionary (Optional[DictionaryLike]): Replaces the built-in
            dictionary entirely. A plain mapping is read with
            `Dictionary.from_mapping`.

    Returns:
        List[str]: Fully qualified domains.
    """
    if not label:
        return []
    if custom_dictionary is None:
        words_source = DEFAULT_DICTIONARY
    elif isinstance(custom_dictionary, Dictionary):
        words_source = custom_dictionary
    else:
        words_source = Dictionary.from_mapping(custom_dictionary)

    logger.debug("Dictionary: %s | TLD: %s | %d words", label, suffix, len(words_source))
    candidates = []
    for word in words_source.iter_words():
        candidates.append(f"{word}{label}.{suffix}")
        candidates.append(f"{label}{word}.{suffix}")
        candidates.append(f"{word}-{label}.{suffix}")
        candidates.append(f"{label}-{word}.{suffix}")
    return candidates
