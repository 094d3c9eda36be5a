"""扫描器剪贴板文本的解析。"""

from __future__ import annotations

from typing import List

from ..config import DEFAULT_IDENTIFIER_WIDTH
from ..logging_utils import get_logger
from ..models.candidate import CandidateRecord
from ..models.signature import SignatureIdentifier, Wormhole

logger = get_logger(__name__)

SITE_SUFFIX = " Site"
SITE_CATEGORIES = ("Gas Site", "Relic Site", "Data Site", "Combat Site")


class ClipboardUnavailable(RuntimeError):
    """系统剪贴板无法读取。"""


def parse_paste(text: str, identifier_width: int = DEFAULT_IDENTIFIER_WIDTH) -> List[CandidateRecord]:
    """解析扫描窗口复制出的文本。

    每行形如：
        <标签>\\tCosmic Signature\\t<类别>\\t<名称>\\t<百分比>%\\t<距离>

    规则：
    - 空白输入返回空列表；
    - 标识取行首固定宽度的字符；
    - 去掉前两个字段后没有剩余字段的行直接跳过；
    - 标识无法解析的行跳过，不影响同一批次的其余行；
    - 输出保持输入顺序，不去重。
    """

    if not text.strip():
        return []
    findings: List[CandidateRecord] = []
    for line in text.split("\n"):
        line = line.rstrip("\r")
        parts = line.split("\t")[2:]
        if not parts:
            continue
        identifier = line[:identifier_width]
        try:
            SignatureIdentifier.from_text(identifier)
        except ValueError:
            logger.debug("跳过无法识别标识的行：%r", line)
            continue
        category = parts[0]
        if category == Wormhole.label:
            findings.append(CandidateRecord(identifier, Wormhole.label, ""))
        elif category in SITE_CATEGORIES:
            name = parts[1] if len(parts) > 1 else ""
            findings.append(CandidateRecord(identifier, category[: -len(SITE_SUFFIX)], name))
        else:
            findings.append(CandidateRecord(identifier, "", ""))
    logger.debug("剪贴板解析出 %d 条候选记录", len(findings))
    return findings


def read_clipboard() -> str:
    """读取系统剪贴板文本。"""

    import pyperclip

    try:
        return pyperclip.paste()
    except pyperclip.PyperclipException as exc:
        raise ClipboardUnavailable(f"无法读取剪贴板：{exc}") from exc
