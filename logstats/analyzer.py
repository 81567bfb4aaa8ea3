"""Log Stats - Core analysis engine"""

import logging
from pathlib import Path
from typing import Dict, Iterable, Optional

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

from .exceptions import LogReadError
from .models import LogStats
from .patterns import RECENT_SAMPLES_LIMIT, TOP_IPS_LIMIT

logger = logging.getLogger(__name__)


def strip_terminator(line: str) -> str:
    """Drop one trailing newline or CRLF."""
    if line.endswith('\n'):
        line = line[:-1]
        if line.endswith('\r'):
            line = line[:-1]
    return line


class LogAnalyzer:
    """Main log analyzer class"""

    def __init__(self, top_ips: int = TOP_IPS_LIMIT,
                 recent_samples: int = RECENT_SAMPLES_LIMIT,
                 console: Optional[Console] = None):
        self.top_ips = top_ips
        self.recent_samples = recent_samples
        self.console = console
        self.stats = LogStats()

    def analyze_lines(self, lines: Iterable[str]) -> LogStats:
        stats = LogStats()
        for line in lines:
            stats.analyze_line(strip_terminator(line))
        self.stats = stats
        return stats

    def analyze_file(self, filepath) -> LogStats:
        path = Path(filepath)
        logger.debug("Opening %s", path)

        try:
            # Only \n ends a line, a lone \r stays part of it
            with open(path, 'r', encoding='utf-8', newline='\n') as f:
                if self.console is not None and self.console.is_terminal:
                    stats = self._analyze_with_progress(f)
                else:
                    stats = self.analyze_lines(f)
        except (OSError, UnicodeDecodeError) as e:
            self.stats = LogStats()
            raise LogReadError(str(path), e) from e

        logger.debug("Analyzed %d lines from %s", stats.total_lines, path)
        return stats

    def _analyze_with_progress(self, lines: Iterable[str]) -> LogStats:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            TextColumn("{task.completed:.0f} lines"),
            console=self.console,
            transient=True
        ) as progress:
            task = progress.add_task("Analyzing logs...", total=None)

            def tracked():
                for line in lines:
                    yield line
                    progress.advance(task)

            return self.analyze_lines(tracked())

    def generate_report(self, stats: Optional[LogStats] = None) -> Dict:
        stats = stats if stats is not None else self.stats
        total = stats.total_lines

        # most_common keeps first-insertion order for equal counts
        levels = {
            level: {
                'count': count,
                'percentage': round(count / total * 100, 1)
            }
            for level, count in stats.levels.most_common()
        }

        return {
            'summary': {
                'total_lines': total,
                'unique_ips': len(stats.ip_addresses),
                'unique_status_codes': len(stats.status_codes)
            },
            'levels': levels,
            'status_codes': dict(sorted(stats.status_codes.items())),
            'top_ips': dict(stats.ip_addresses.most_common(self.top_ips)),
            'errors': self._samples(stats.errors),
            'warnings': self._samples(stats.warnings)
        }

    def _samples(self, lines) -> Dict:
        recent = [line.strip() for line in reversed(lines[-self.recent_samples:])]
        return {'total': len(lines), 'recent': recent}
