"""Log Stats package"""

from .patterns import VERSION, LEVEL_MARKERS
from .models import LogStats
from .extractors import extract_ip, extract_status_code
from .analyzer import LogAnalyzer
from .exceptions import LogReadError
from .output import print_report

__all__ = ['VERSION', 'LEVEL_MARKERS', 'LogAnalyzer', 'LogStats', 'LogReadError',
           'extract_ip', 'extract_status_code', 'print_report']
