"""信号（宇宙信号）模型：标识、分类与显示。"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import ClassVar, Dict, List, Type, Union

from .wormhole import WormholeDetail

# 游戏标签形如 "ABC-123"；横线只是显示约定，规范键不含横线。
IDENTIFIER_PATTERN = re.compile(r"^([A-Za-z]{3})-?(\d+)$")

# 分类名称列宽，用于对齐显示
LABEL_WIDTH = 9


@dataclass(frozen=True)
class SignatureIdentifier:
    """信号标识：3 位字母组码 + 数字后缀。

    这是跨扫描匹配信号的唯一依据，创建后不可变。
    """

    group: str
    number: str

    @classmethod
    def from_text(cls, text: str) -> SignatureIdentifier:
        """从 "ABC-123" 或 "ABC123" 解析，格式不符时抛出 ValueError。"""

        match = IDENTIFIER_PATTERN.match(text.strip())
        if match is None:
            raise ValueError(f"无法解析信号标识：{text!r}")
        return cls(group=match.group(1), number=match.group(2))

    @property
    def key(self) -> str:
        """规范匹配键（组码与数字直接拼接）。"""

        return f"{self.group}{self.number}"

    def __str__(self) -> str:
        return f"{self.group}-{self.number}"


@dataclass
class Unknown:
    """尚未确定类别的信号（新发现信号的默认态）。"""

    label: ClassVar[str] = "Unknown"

    def has_name(self) -> bool:
        return False

    def __str__(self) -> str:
        return self.label


@dataclass
class Wormhole:
    """虫洞信号：本身即视为“已命名”。"""

    label: ClassVar[str] = "Wormhole"

    detail: WormholeDetail = field(default_factory=WormholeDetail)

    def has_name(self) -> bool:
        return True

    def __str__(self) -> str:
        wh_type = self.detail.wh_type or "?"
        destination = self.detail.destination or "?"
        return (
            f"{'WH':<{LABEL_WIDTH}}{wh_type} -> {destination}"
            f"      {self.detail.life.label}      {self.detail.mass.label}"
        )


@dataclass
class NamedSite:
    """带可选站点名称的类别的公共基类。"""

    label: ClassVar[str] = ""

    name: str | None = None

    def has_name(self) -> bool:
        return self.name is not None

    def __str__(self) -> str:
        if self.name is None:
            return self.label
        return f"{self.label:<{LABEL_WIDTH}}{self.name}"


@dataclass
class Combat(NamedSite):
    label: ClassVar[str] = "Combat"


@dataclass
class Ore(NamedSite):
    label: ClassVar[str] = "Ore"


@dataclass
class Data(NamedSite):
    label: ClassVar[str] = "Data"


@dataclass
class Relic(NamedSite):
    label: ClassVar[str] = "Relic"


@dataclass
class Gas(NamedSite):
    label: ClassVar[str] = "Gas"


SignatureClassification = Union[Unknown, Wormhole, Combat, Ore, Data, Relic, Gas]

# 类别词 -> 站点类型；新增类别只需在这里登记
SITE_TYPES: Dict[str, Type[NamedSite]] = {
    site_type.label: site_type for site_type in (Combat, Ore, Data, Relic, Gas)
}


def check_classification(classification: object) -> SignatureClassification:
    """确认对象属于封闭的分类集合，否则抛出 TypeError。"""

    if isinstance(classification, (Unknown, Wormhole)):
        return classification
    if isinstance(classification, NamedSite) and type(classification) in SITE_TYPES.values():
        return classification
    raise TypeError(f"未知的信号分类：{classification!r}")


@dataclass
class Signature:
    """空间中可扫描的信号。

    说明：信号只会被对账引擎或玩家手动修改，从不自动删除。
    """

    identifier: SignatureIdentifier
    classification: SignatureClassification = field(default_factory=Unknown)

    @classmethod
    def create(
        cls,
        group: str,
        number: str,
        classification: SignatureClassification | None = None,
    ) -> Signature:
        return cls(
            identifier=SignatureIdentifier(group=group, number=number),
            classification=classification if classification is not None else Unknown(),
        )

    def __str__(self) -> str:
        return f"{self.identifier}      {self.classification}"

    def to_row(self) -> List[str]:
        """生成表格显示用的四列：标识、类别、细节、附加信息。"""

        classification = check_classification(self.classification)
        identifier = str(self.identifier)
        if isinstance(classification, Unknown):
            return [identifier, classification.label, "", ""]
        if isinstance(classification, Wormhole):
            detail = classification.detail
            return [
                identifier,
                classification.label,
                detail.destination or "",
                f"{detail.life.label}/{detail.mass.label}",
            ]
        return [identifier, classification.label, classification.name or "?", ""]
