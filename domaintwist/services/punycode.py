"""
Bootstring (RFC 3492) codec for domain labels.

Engines that emit non-ASCII look-alikes pass their candidates through
`to_ascii`, which turns them into `xn--` labels that can actually be
registered and resolved.
"""

BASE = 36
TMIN = 1
TMAX = 26
SKEW = 38
DAMP = 700
INITIAL_BIAS = 72
INITIAL_N = 128
DELIMITER = '-'
ACE_PREFIX = 'xn--'
MAX_CODE_POINT = 0x10FFFF


class PunycodeError(ValueError):
    """Raised when a string cannot be encoded or decoded."""


def _adapt(delta: int, num_points: int, first_time: bool) -> int:
    delta = delta // DAMP if first_time else delta // 2
    delta += delta // num_points
    k = 0
    while delta > ((BASE - TMIN) * TMAX) // 2:
        delta //= BASE - TMIN
        k += BASE
    return k + ((BASE - TMIN + 1) * delta) // (delta + SKEW)


def _threshold(k: int, bias: int) -> int:
    if k <= bias:
        return TMIN
    if k >= bias + TMAX:
        return TMAX
    return k - bias


def _encode_digit(digit: int) -> str:
    # 0..25 -> a..z, 26..35 -> 0..9
    if digit < 26:
        return chr(ord('a') + digit)
    return chr(ord('0') + digit - 26)


def _decode_digit(char: str) -> int:
    if '0' <= char <= '9':
        return ord(char) - ord('0') + 26
    if 'A' <= char <= 'Z':
        return ord(char) - ord('A')
    if 'a' <= char <= 'z':
        return ord(char) - ord('a')
    return BASE


def encode(text: str) -> str:
    """
    Encodes a Unicode string into its Bootstring representation.

    Basic (ASCII) code points are copied verbatim and followed by the
    delimiter when there is at least one of them. The remaining code points
    are encoded as variable-length base-36 deltas in increasing order.

    Args:
        text (str): The string to encode.

    Returns:
        str: The pure-ASCII encoding (without the `xn--` prefix).

    Raises:
        PunycodeError: If the input is not a string.
    """
    if not isinstance(text, str):
        raise PunycodeError(f"Cannot encode {type(text).__name__}, expected str")

    code_points = [ord(char) for char in text]
    output = [char for char in text if ord(char) < INITIAL_N]
    basic_count = handled = len(output)
    if basic_count:
        output.append(DELIMITER)

    n = INITIAL_N
    delta = 0
    bias = INITIAL_BIAS
    while handled < len(code_points):
        next_code_point = min(cp for cp in code_points if cp >= n)
        delta += (next_code_point - n) * (handled + 1)
        n = next_code_point
        for cp in code_points:
            if cp < n:
                delta += 1
            elif cp == n:
                q = delta
                k = BASE
                while True:
                    t = _threshold(k, bias)
                    if q < t:
                        break
                    output.append(_encode_digit(t + (q - t) % (BASE - t)))
                    q = (q - t) // (BASE - t)
                    k += BASE
                output.append(_encode_digit(q))
                bias = _adapt(delta, handled + 1, handled == basic_count)
                delta = 0
                handled += 1
        delta += 1
        n += 1

    return ''.join(output)


def decode(text: str) -> str:
    """
    Decodes a Bootstring representation back into Unicode.

    Args:
        text (str): The encoded string (without the `xn--` prefix).

    Returns:
        str: The decoded Unicode string.

    Raises:
        PunycodeError: On non-ASCII content before the last delimiter, an
            invalid or truncated digit sequence, or a code point beyond
            U+10FFFF.
    """
    if not isinstance(text, str):
        raise PunycodeError(f"Cannot decode {type(text).__name__}, expected str")

    delimiter_pos = text.rfind(DELIMITER)
    if delimiter_pos > 0:
        basic = text[:delimiter_pos]
        if not basic.isascii():
            raise PunycodeError(f"Non-basic code point before delimiter in '{text}'")
        output = list(basic)
        pos = delimiter_pos + 1
    else:
        output = []
        pos = 0

    n = INITIAL_N
    i = 0
    bias = INITIAL_BIAS
    while pos < len(text):
        old_i = i
        weight = 1
        k = BASE
        while True:
            if pos >= len(text):
                raise PunycodeError(f"Truncated digit sequence in '{text}'")
            digit = _decode_digit(text[pos])
            pos += 1
            if digit >= BASE:
                raise PunycodeError(f"Invalid digit '{text[pos - 1]}' in '{text}'")
            i += digit * weight
            if i >= (MAX_CODE_POINT - n + 1) * (len(output) + 1):
                raise PunycodeError(f"Code point overflow in '{text}'")
            t = _threshold(k, bias)
            if digit < t:
                break
            weight *= BASE - t
            k += BASE

        bias = _adapt(i - old_i, len(output) + 1, old_i == 0)
        n += i // (len(output) + 1)
        i %= len(output) + 1
        output.insert(i, chr(n))
        i += 1

    return ''.join(output)


def to_ascii(label: str) -> str:
    """Returns ASCII labels unchanged and ACE-encodes (`xn--...`) everything else."""
    if label.isascii():
        return label
    return ACE_PREFIX + encode(label)


def to_unicode(label: str) -> str:
    """Reverses `to_ascii`. Labels without the ACE prefix are returned as they are."""
    if label[:len(ACE_PREFIX)].lower() == ACE_PREFIX:
        return decode(label[len(ACE_PREFIX):])
    return label
