"""Log Stats - Data models"""

from collections import Counter
from dataclasses import dataclass, field
from typing import List, Optional

from .extractors import extract_ip, extract_status_code
from .patterns import LEVEL_MARKERS


@dataclass
class LogStats:
    """Accumulated statistics for one log file"""
    total_lines: int = 0
    levels: Counter = field(default_factory=Counter)
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    ip_addresses: Counter = field(default_factory=Counter)
    status_codes: Counter = field(default_factory=Counter)

    def analyze_line(self, line: str):
        self.total_lines += 1

        level = self.classify(line)
        if level is not None:
            marker, category = level
            self.levels[marker] += 1
            if category == 'error':
                self.errors.append(line)
            elif category == 'warning':
                self.warnings.append(line)

        ip = extract_ip(line)
        if ip is not None:
            self.ip_addresses[ip] += 1

        code = extract_status_code(line)
        if code is not None:
            self.status_codes[code] += 1

    @staticmethod
    def classify(line: str) -> Optional[tuple]:
        line_upper = line.upper()
        for marker, category in LEVEL_MARKERS:
            if marker in line_upper:
                return marker, category
        return None
