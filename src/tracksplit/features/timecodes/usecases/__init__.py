from .ordering import check_timecode_order
from .parser import parse_line, parse_timecodes, parse_timecodes_file

__all__ = ["check_timecode_order", "parse_line", "parse_timecodes", "parse_timecodes_file"]
