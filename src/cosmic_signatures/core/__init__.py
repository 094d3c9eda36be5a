"""剪贴板解析与对账合并。"""

from .clipboard import ClipboardUnavailable, parse_paste, read_clipboard
from .reconcile import merge_signatures
from .session import SessionState

__all__ = [
    "ClipboardUnavailable",
    "SessionState",
    "merge_signatures",
    "parse_paste",
    "read_clipboard",
]
