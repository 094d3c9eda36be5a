"""新扫描结果与已有信号列表的对账合并。"""

from __future__ import annotations

from typing import Dict, FrozenSet, Iterable, List, Tuple

from ..logging_utils import get_logger
from ..models.candidate import CandidateRecord
from ..models.signature import (
    NamedSite,
    Signature,
    SignatureClassification,
    SignatureIdentifier,
    Unknown,
    Wormhole,
    check_classification,
)

logger = get_logger(__name__)


def _resolve_candidates(
    candidates: Iterable[CandidateRecord],
) -> List[Tuple[SignatureIdentifier, CandidateRecord]]:
    """解析候选标识，无法解析的候选跳过。"""

    resolved: List[Tuple[SignatureIdentifier, CandidateRecord]] = []
    for candidate in candidates:
        try:
            resolved.append((candidate.signature_identifier(), candidate))
        except ValueError:
            logger.warning("忽略标识无法解析的候选：%r", candidate.identifier)
    return resolved


def _apply(signature: Signature, proposed: SignatureClassification) -> bool:
    """按“信息只增不减”的规则更新单个信号，返回是否发生了修改。"""

    proposed = check_classification(proposed)
    if isinstance(proposed, Unknown):
        # 扫描没能分类，不携带新信息
        return False
    if isinstance(proposed, Wormhole):
        # 扫描器不提供虫洞细节，已是虫洞则保留玩家填写的内容
        if isinstance(signature.classification, Wormhole):
            return False
        signature.classification = Wormhole()
        return True
    if isinstance(proposed, NamedSite):
        # 带名称的扫描视为权威；无名称时不能让已命名的信号退化
        if not proposed.has_name() and signature.classification.has_name():
            return False
        changed = signature.classification != proposed
        signature.classification = proposed
        return changed
    raise TypeError(f"未知的信号分类：{proposed!r}")


def merge_signatures(
    existing: List[Signature], candidates: Iterable[CandidateRecord]
) -> List[Signature]:
    """把一批候选记录合并进已有信号列表（原地修改并返回同一列表）。

    两轮处理：
    1) 更新已有信号：找不到对应候选的信号保持不变（没出现在本次扫描里
       不代表已消失）；找到时按分类规则更新，绝不让低信息量的扫描覆盖
       更具体的已知信息。
    2) 追加新信号：以第一轮之前的标识集合为准，按候选顺序追加，
       不去重，同一批次内重复出现的新标识每次都会追加。
    """

    resolved = _resolve_candidates(candidates)
    by_key: Dict[str, CandidateRecord] = {}
    for identifier, candidate in resolved:
        by_key.setdefault(identifier.key, candidate)

    # 追加阶段只对照合并前的标识集合
    existing_keys: FrozenSet[str] = frozenset(signature.identifier.key for signature in existing)

    updated = 0
    for signature in existing:
        candidate = by_key.get(signature.identifier.key)
        if candidate is None:
            continue
        if _apply(signature, candidate.classification()):
            updated += 1

    appended = 0
    for identifier, candidate in resolved:
        if identifier.key in existing_keys:
            continue
        existing.append(Signature(identifier=identifier, classification=candidate.classification()))
        appended += 1

    logger.debug("合并完成：更新 %d 条，新增 %d 条，共 %d 条", updated, appended, len(existing))
    return existing
