"""Log Stats - Constants and patterns"""

import re

VERSION = "1.0.0"

# Level markers in priority order, first substring match wins
LEVEL_MARKERS = (
    ('ERROR', 'error'),
    ('WARN', 'warning'),
    ('WARNING', 'warning'),
    ('INFO', None),
    ('DEBUG', None),
)

# Unsigned integer token: ASCII digits with an optional leading plus
UNSIGNED_PATTERN = re.compile(r'\+?[0-9]+')

# Token separators: Unicode whitespace except the 0x1c-0x1f information separators
TOKEN_SEPARATOR = re.compile(r"[^\S\x1c-\x1f]+")

OCTET_MAX = 255

# Half-open range [min, max)
STATUS_CODE_MIN = 100
STATUS_CODE_MAX = 600

# Report limits
TOP_IPS_LIMIT = 10
RECENT_SAMPLES_LIMIT = 5
