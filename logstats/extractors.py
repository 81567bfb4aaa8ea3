"""Log Stats - Field extraction heuristics"""

from typing import List, Optional

from .patterns import (OCTET_MAX, STATUS_CODE_MAX, STATUS_CODE_MIN,
                       TOKEN_SEPARATOR, UNSIGNED_PATTERN)


def parse_unsigned(token: str) -> Optional[int]:
    if not UNSIGNED_PATTERN.fullmatch(token):
        return None
    return int(token)


def tokens(line: str) -> List[str]:
    return [word for word in TOKEN_SEPARATOR.split(line) if word]


def extract_ip(line: str) -> Optional[str]:
    """Return the first dotted-quad token of the line.

    Syntactic check only: four dot-separated parts, each in 0-255.
    Tokens split on whitespace, but not on the 0x1c-0x1f separators.
    """
    for word in tokens(line):
        parts = word.split('.')
        if len(parts) != 4:
            continue
        octets = [parse_unsigned(p) for p in parts]
        if all(o is not None and o <= OCTET_MAX for o in octets):
            return word
    return None


def extract_status_code(line: str) -> Optional[int]:
    """Return the first integer token in the HTTP status range.

    Any number in range matches, so ports, sizes or PIDs between 100 and
    599 are counted as status codes too.
    """
    for word in tokens(line):
        code = parse_unsigned(word)
        if code is not None and STATUS_CODE_MIN <= code < STATUS_CODE_MAX:
            return code
    return None
