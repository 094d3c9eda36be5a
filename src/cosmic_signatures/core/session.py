"""会话态：当前星系、各星系信号列表与界面光标，串起解析与合并。"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from ..config import DEFAULT_IDENTIFIER_WIDTH
from ..models.candidate import CandidateRecord
from ..models.signature import Signature, SignatureClassification, check_classification
from ..reference.catalogue import ReferenceData, SystemData, WormholeInfo
from .clipboard import parse_paste
from .reconcile import merge_signatures


@dataclass
class SessionState:
    """一次运行的会话状态。

    说明：只由单线程的界面循环修改，不做持久化。
    """

    # 只读参考数据句柄，可为空（测试时无需加载完整目录）
    reference: ReferenceData | None = None
    current_system: str | None = None
    # 星系名 -> 信号列表（插入顺序即发现顺序）
    system_data: Dict[str, List[Signature]] = field(default_factory=dict)
    cursor: int = 0
    identifier_width: int = DEFAULT_IDENTIFIER_WIDTH

    def select_system(self, name: str) -> None:
        """切换当前星系；各星系列表互相独立，切回时原样恢复。"""

        self.current_system = name
        self.cursor = 0

    def active_signatures(self) -> List[Signature]:
        if self.current_system is None:
            return []
        return list(self.system_data.get(self.current_system, []))

    def selected_signature(self) -> Signature | None:
        signatures = self.active_signatures()
        if not signatures:
            return None
        self.cursor = min(self.cursor, len(signatures) - 1)
        return signatures[self.cursor]

    def move_cursor(self, delta: int) -> int:
        """移动光标，夹在 [0, count-1] 内，不回绕。"""

        count = len(self.active_signatures())
        self.cursor = min(max(self.cursor + delta, 0), max(count - 1, 0))
        return self.cursor

    def cursor_up(self) -> int:
        return self.move_cursor(-1)

    def cursor_down(self) -> int:
        return self.move_cursor(1)

    def merge_in(self, candidates: Iterable[CandidateRecord]) -> None:
        """把候选记录合并进当前星系；未选星系时不做任何事。"""

        if self.current_system is None:
            return
        existing = self.system_data.setdefault(self.current_system, [])
        merge_signatures(existing, candidates)

    def paste(self, text: str) -> int:
        """解析并合并一次粘贴，返回解析出的候选数量。"""

        candidates = parse_paste(text, self.identifier_width)
        self.merge_in(candidates)
        return len(candidates)

    def add_signature(self, signature: Signature) -> None:
        """玩家手动录入；同标识的条目被替换而不是重复追加。"""

        if self.current_system is None:
            return
        check_classification(signature.classification)
        signatures = self.system_data.setdefault(self.current_system, [])
        for index, existing in enumerate(signatures):
            if existing.identifier == signature.identifier:
                signatures[index] = signature
                return
        signatures.append(signature)

    def update_selected(self, classification: SignatureClassification) -> Signature | None:
        """玩家手动修改光标处信号的分类。"""

        signature = self.selected_signature()
        if signature is None:
            return None
        signature.classification = check_classification(classification)
        return signature

    def remove_selected(self) -> Signature | None:
        """删除光标处的信号（唯一的删除途径）。"""

        signature = self.selected_signature()
        if signature is None:
            return None
        del self.system_data[self.current_system][self.cursor]
        self.move_cursor(0)
        return signature

    def system_info(self) -> SystemData | None:
        if self.reference is None or self.current_system is None:
            return None
        return self.reference.system(self.current_system)

    def wormhole_info(self, code: str) -> WormholeInfo | None:
        if self.reference is None:
            return None
        return self.reference.wormhole(code)
