from typing import Dict, FrozenSet, Tuple

# --- Static Data ---
# Character mappings, keyboard layouts and lists used by the engines.
# Built once at import time and never mutated afterwards.

VOWELS: Tuple[str, ...] = ('a', 'e', 'i', 'o', 'u')

# ALPHANUMERIC: Characters inserted or substituted by the addition and replacement engines.
ALPHANUMERIC: Tuple[str, ...] = tuple('abcdefghijklmnopqrstuvwxyz0123456789')

# glyphs_ascii: ASCII-to-ASCII look-alikes (e.g., 'o' to '0', 'm' to 'rn')
GLYPHS_ASCII: Dict[str, Tuple[str, ...]] = {
    '0': ('o',), '1': ('l', 'i'), '3': ('8',), '6': ('9',), '8': ('3',), '9': ('6',),
    'b': ('d', 'lb'), 'c': ('e',), 'd': ('b', 'cl', 'dl'), 'e': ('c',), 'g': ('q',), 'h': ('lh',),
    'i': ('1', 'l'), 'k': ('lc',), 'l': ('1', 'i'), 'm': ('n', 'nn', 'rn', 'rr'), 'n': ('m', 'r'),
    'o': ('0',), 'q': ('g',), 'w': ('vv',),
}

# glyphs_unicode: Full-alphabet homoglyphs, mixing Cyrillic, Latin extended and
# a few ASCII digraphs. Every letter has at least one entry.
GLYPHS_UNICODE: Dict[str, Tuple[str, ...]] = {
    'a': ('а', 'ạ', 'ă', 'ȧ', 'ɑ', 'å', 'ą', 'â', 'ǎ', 'á', 'ə', 'ä', 'ã', 'ā', 'à'),
    'b': ('ь', 'ḃ', 'ḅ', 'ƅ', 'ʙ', 'ḇ', 'ɓ', 'd', 'lb', 'ib', '1b'),
    'c': ('с', 'ç', 'ć', 'ĉ', 'č', 'ċ', 'ᴄ', 'ƈ', 'e'),
    'd': ('ԁ', 'ď', 'đ', 'ḍ', 'ḋ', 'ɖ', 'ḏ', 'ɗ', 'ḓ', 'ḑ', 'b', 'cl', 'dl', 'di'),
    'e': ('е', 'ê', 'ẹ', 'ę', 'è', 'ḛ', 'ě', 'ɇ', 'ė', 'ĕ', 'é', 'ë', 'ē', 'ȩ'),
    'f': ('ḟ', 'ƒ'),
    'g': ('ԍ', 'ǧ', 'ġ', 'ǵ', 'ğ', 'ɡ', 'ǥ', 'ĝ', 'ģ', 'ɢ'),
    'h': ('һ', 'ȟ', 'ḫ', 'ḩ', 'ḣ', 'ɦ', 'ḥ', 'ḧ', 'ħ', 'ẖ', 'ⱨ', 'ĥ'),
    'i': ('і', 'ɩ', 'ǐ', 'í', 'ɪ', 'ỉ', 'ȋ', 'ɨ', 'ï', 'ī', 'ĩ', 'ị', 'î', 'ı', 'ĭ', 'į', 'ì'),
    'j': ('ј', 'ǰ', 'ĵ', 'ʝ', 'ɉ'),
    'k': ('к', 'ĸ', 'ǩ', 'ⱪ', 'ḵ', 'ķ', 'ᴋ', 'ḳ'),
    'l': ('ӏ', 'ĺ', 'ł', 'ɫ', 'ļ', 'ľ'),
    'm': ('м', 'ᴍ', 'ṁ', 'ḿ', 'ṃ', 'ɱ'),
    'n': ('ņ', 'ǹ', 'ń', 'ň', 'ṅ', 'ṉ', 'ṇ', 'ꞑ', 'ñ', 'ŋ'),
    'o': ('о', 'ö', 'ó', 'ȯ', 'ỏ', 'ô', 'ᴏ', 'ō', 'ò', 'ŏ', 'ơ', 'ő', 'õ', 'ọ', 'ø', '0'),
    'p': ('р', 'ṗ', 'ƿ', 'ƥ', 'ṕ'),
    'q': ('ԛ', 'ʠ'),
    'r': ('ʀ', 'ȓ', 'ɍ', 'ɾ', 'ř', 'ṛ', 'ɽ', 'ȑ', 'ṙ', 'ŗ', 'ŕ', 'ɼ', 'ṟ'),
    's': ('ѕ', 'ṡ', 'ș', 'ŝ', 'ꜱ', 'ʂ', 'š', 'ś', 'ṣ', 'ş'),
    't': ('т', 'ť', 'ƫ', 'ţ', 'ṭ', 'ṫ', 'ț', 'ŧ'),
    'u': ('ᴜ', 'ų', 'ŭ', 'ū', 'ű', 'ǔ', 'ȕ', 'ư', 'ù', 'ů', 'ʉ', 'ú', 'ȗ', 'ü', 'û', 'ũ', 'ụ'),
    'v': ('ѵ', 'ᶌ', 'ṿ', 'ᴠ', 'ⱴ', 'ⱱ', 'ṽ'),
    'w': ('ԝ', 'ᴡ', 'ẇ', 'ẅ', 'ẃ', 'ẘ', 'ẉ', 'ⱳ', 'ŵ', 'ẁ'),
    'x': ('х', 'ẋ', 'ẍ'),
    'y': ('у', 'ŷ', 'ÿ', 'ʏ', 'ẏ', 'ɏ', 'ƴ', 'ȳ', 'ý', 'ỿ', 'ỵ'),
    'z': ('ž', 'ƶ', 'ẓ', 'ẕ', 'ⱬ', 'ᴢ', 'ż', 'ź', 'ʐ'),
    '3': ('8',),
}

# homoglyphs: Smaller curated table of the most convincing single-letter look-alikes.
HOMOGLYPHS: Dict[str, Tuple[str, ...]] = {
    'a': ('α', 'а', 'ɑ'),
    'e': ('е', 'ē', 'ė', 'ę'),
    'i': ('і', 'ї', 'ı'),
    'o': ('о', 'ο', 'օ'),
    'p': ('р', 'ρ'),
    'c': ('с', 'ϲ'),
    's': ('ѕ',),
    'y': ('у', 'ү', 'ʏ'),
}

# Keyboard layout for simulating adjacent key press errors
QWERTY: Dict[str, Tuple[str, ...]] = {
    'q': ('w', 'a', 's'), 'w': ('q', 'e', 'a', 's', 'd'), 'e': ('w', 'r', 's', 'd', 'f'),
    'r': ('e', 't', 'd', 'f', 'g'), 't': ('r', 'y', 'f', 'g', 'h'), 'y': ('t', 'u', 'g', 'h', 'j'),
    'u': ('y', 'i', 'h', 'j', 'k'), 'i': ('u', 'o', 'j', 'k', 'l'), 'o': ('i', 'p', 'k', 'l'),
    'p': ('o', 'l'), 'a': ('q', 'w', 's', 'z'), 's': ('q', 'w', 'e', 'a', 'd', 'z', 'x'),
    'd': ('w', 'e', 'r', 's', 'f', 'x', 'c'), 'f': ('e', 'r', 't', 'd', 'g', 'c', 'v'),
    'g': ('r', 't', 'y', 'f', 'h', 'v', 'b'), 'h': ('t', 'y', 'u', 'g', 'j', 'b', 'n'),
    'j': ('y', 'u', 'i', 'h', 'k', 'n', 'm'), 'k': ('u', 'i', 'o', 'j', 'l', 'm'),
    'l': ('i', 'o', 'p', 'k'), 'z': ('a', 's', 'x'), 'x': ('s', 'd', 'z', 'c'),
    'c': ('d', 'f', 'x', 'v'), 'v': ('f', 'g', 'c', 'b'), 'b': ('g', 'h', 'v', 'n'),
    'n': ('h', 'j', 'b', 'm'), 'm': ('j', 'k', 'n'),
}

NUMBER_TO_LETTER: Dict[str, str] = {
    '0': 'o', '1': 'l', '2': 'z', '3': 'e', '4': 'a', '5': 's', '6': 'b', '7': 't', '8': 'b', '9': 'g',
}

# leetspeak: Substitutions used by the lightweight twist. Some entries map a
# letter to itself; the twist drops the resulting unchanged domain.
LEETSPEAK: Dict[str, Tuple[str, ...]] = {
    'a': ('4', 'a'), 'e': ('3',), 'i': ('1', 'i'), 'o': ('0',), 's': ('5', '6'), 't': ('7',), 'g': ('9',),
    'b': ('8',),
}

# Ordered (pattern, replacement) pairs, applied to the first occurrence only.
COMMON_MISSPELLINGS: Tuple[Tuple[str, str], ...] = (
    ('ei', 'ie'), ('ie', 'ei'), ('th', 't'), ('nn', 'n'), ('mm', 'm'), ('cc', 'c'), ('ll', 'l'),
)

COMMON_TYPOS: Dict[str, Tuple[str, ...]] = {
    'tion': ('shun', 'shion'), 'ing': ('in', 'inng'), 'ght': ('gt', 'gth'), 'ough': ('ow', 'o'),
    'ph': ('f',), 'ck': ('k', 'c'), 'qu': ('kw', 'q'), 'ch': ('sh', 'tch'), 'th': ('t', 'd'),
    'wh': ('w',), 'wr': ('r',), 'kn': ('n',), 'mb': ('m',), 'mn': ('m',), 'ps': ('s',),
    'pt': ('t',), 'rh': ('r',), 'sc': ('s',), 'st': ('s',), 'sw': ('s',), 'tw': ('t',),
}

# Letters people commonly hit twice; the first group is also hit three times.
TRIPLE_REPEATS: FrozenSet[str] = frozenset('st')
COMMON_REPEATS: FrozenSet[str] = frozenset('steaoinrl')

COMMON_SWAPS: FrozenSet[str] = frozenset(('ie', 'ei', 'th', 'er', 're', 'an', 'na', 'ou', 'uo'))

# BITSQUATTING_ALLOWED_CHARS: Character set allowed in labels generated by bitsquatting.
BITSQUATTING_ALLOWED_CHARS: FrozenSet[str] = frozenset('abcdefghijklmnopqrstuvwxyz0123456789-')
BITSQUATTING_MAGNITUDES: Tuple[int, ...] = (1, 2, 3, 4, 5, 6, 7, 8)

# fusion_tlds: Curated list of common suffixes the label is re-paired with.
FUSION_TLDS: Tuple[str, ...] = (
    'com', 'net', 'org', 'info', 'biz', 'co', 'io', 'me', 'us', 'uk',
    'ca', 'au', 'de', 'fr', 'it', 'es', 'nl', 'se', 'no', 'dk',
    'fi', 'pl', 'cz', 'hu', 'ro', 'bg', 'hr', 'si', 'sk', 'lt',
    'lv', 'ee', 'ie', 'pt', 'gr', 'cy', 'mt', 'lu', 'be', 'at',
    'ch', 'li', 'is', 'jp', 'cn', 'kr', 'in', 'br', 'mx', 'ar',
    'cl', 'pe', 've', 'ec', 'uy', 'py', 'bo', 'gy', 'sr', 'tv',
    'ws', 'ki', 'nr', 'fm', 'mh', 'pw', 'mp', 'gu', 'as', 'vi',
    'pr', 'do', 'ht', 'cu', 'jm', 'bb', 'tt', 'ag', 'dm', 'lc',
    'vc', 'gd', 'kn', 'ai', 'ms', 'tc', 'vg', 'ky', 'bm', 'bs',
    'bz', 'cr', 'sv', 'gt', 'hn', 'ni', 'pa', 'aw', 'an', 'cw',
    'sx', 'bq', 'bl', 'mf', 'gl', 'fo', 'sj', 'ax', 'ad', 'mc',
    'sm', 'va', 'gi', 'je', 'gg', 'im', 'ac', 'sh', 'ta',
    'gs', 'hm', 'bv', 'tf', 'aq', 'eh', 'za', 'eg', 'ly', 'tn',
    'dz', 'ma', 'sd', 'ss', 'et', 'er', 'dj', 'so', 'ke', 'ug',
    'tz', 'rw', 'bi', 'mw', 'zm', 'zw', 'bw', 'na', 'sz', 'ls',
    'mg', 'mu', 'sc', 'km', 'mz', 'ao', 'cd', 'cg', 'ga', 'gq',
    'cm', 'cf', 'td', 'ne', 'ng', 'bj', 'tg', 'bf', 'ci', 'gh',
    'lr', 'sl', 'gn', 'gw', 'gm', 'sn', 'ml', 'mr',
)

# Lightweight twist data
TWIST_SUBDOMAINS: Tuple[str, ...] = ('www', 'mail', 'login', 'secure', 'account')
TWIST_TLDS: Tuple[str, ...] = ('com', 'net', 'org', 'io', 'co', 'info', 'biz', 'us', 'uk', 'de', 'fr')
