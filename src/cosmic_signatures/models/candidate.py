"""剪贴板解析出的候选记录。"""

from __future__ import annotations

from dataclasses import dataclass

from .signature import (
    SITE_TYPES,
    SignatureClassification,
    SignatureIdentifier,
    Unknown,
    Wormhole,
)


@dataclass(frozen=True)
class CandidateRecord:
    """一次粘贴中的单行结果，只在一次合并中使用。

    字段都是松散的原始文本：
    - identifier: 行首切出的标识文本（例如 "ABC-123"）
    - category: 去掉 " Site" 后的类别词，无法识别时为空串
    - name: 站点名称，可能为空串
    """

    identifier: str
    category: str = ""
    name: str = ""

    def signature_identifier(self) -> SignatureIdentifier:
        return SignatureIdentifier.from_text(self.identifier)

    def classification(self) -> SignatureClassification:
        """推导候选的分类。

        - 空类别或无法识别 → Unknown
        - Wormhole → 默认态虫洞
        - 其余站点 → 对应类型，名称为空时视为 None
        """

        if self.category == Wormhole.label:
            return Wormhole()
        site_type = SITE_TYPES.get(self.category)
        if site_type is None:
            return Unknown()
        return site_type(name=self.name or None)
