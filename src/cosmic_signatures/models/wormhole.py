"""虫洞信号的细节模型。"""

from dataclasses import dataclass
from enum import Enum


class WormholeLife(str, Enum):
    """虫洞寿命状态。

    stable: 正常
    end_of_life: 临近坍塌（EOL）
    """

    stable = "stable"
    end_of_life = "end_of_life"

    @property
    def label(self) -> str:
        return "EOL" if self is WormholeLife.end_of_life else "Stable"


class WormholeMass(str, Enum):
    """虫洞质量状态，与寿命相互独立。"""

    stable = "stable"
    destabilized = "destabilized"
    critical = "critical"

    @property
    def label(self) -> str:
        if self is WormholeMass.destabilized:
            return "Destab"
        if self is WormholeMass.critical:
            return "Critical"
        return "Stable"


@dataclass
class WormholeDetail:
    """虫洞细节。

    说明：扫描器不提供这些信息，只能由玩家手动鉴定后填写，
    因此新发现的虫洞一律是“全未知 + 稳定”的默认态。
    """

    # 虫洞型号（参考目录的键，例如 K162）
    wh_type: str | None = None
    # 目的地星系等级标签
    destination: str | None = None
    life: WormholeLife = WormholeLife.stable
    mass: WormholeMass = WormholeMass.stable
