"""静态参考数据：虫洞型号目录与星系目录。

两份目录在启动时加载一次，之后只读；通过 ReferenceData 句柄注入会话，
解析与合并流程不依赖它们。
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, TypeVar

from ..config import DATA_DIR
from ..logging_utils import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class ReferenceDataError(RuntimeError):
    """参考数据缺失或格式错误，启动时致命。"""


class SecurityBand(str, Enum):
    high_sec = "High-Sec"
    low_sec = "Low-Sec"
    null_sec = "Null-Sec"
    w_space = "W-Space"


@dataclass(frozen=True)
class SystemClass:
    """星系安全分级；虫洞空间额外携带等级。"""

    band: SecurityBand
    wspace_class: int | None = None

    @property
    def label(self) -> str:
        if self.band is SecurityBand.w_space:
            return f"Class-{self.wspace_class}"
        return self.band.value


@dataclass(frozen=True)
class WormholeInfo:
    """单个虫洞型号的目录信息。"""

    life: str
    origins: List[str]
    leads_to: str
    mass: int
    jump: int

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> WormholeInfo:
        return cls(
            life=str(payload["life"]),
            origins=[str(item) for item in payload["from"]],
            leads_to=str(payload["leadsTo"]),
            mass=int(payload["mass"]),
            jump=int(payload["jump"]),
        )


@dataclass(frozen=True)
class SystemData:
    """单个星系的目录信息。"""

    security: float
    wspace_class: int | None = None
    effect: str | None = None
    statics: List[str] = field(default_factory=list)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> SystemData:
        wspace_class = payload.get("class")
        return cls(
            security=float(payload["security"]),
            wspace_class=int(wspace_class) if wspace_class is not None else None,
            effect=payload.get("effect"),
            statics=[str(item) for item in payload.get("statics", [])],
        )

    def classification(self) -> SystemClass:
        """常规安全分级：有虫洞等级即为虫洞空间，否则按安全值划分。"""

        if self.wspace_class is not None:
            return SystemClass(SecurityBand.w_space, self.wspace_class)
        if self.security >= 0.5:
            return SystemClass(SecurityBand.high_sec)
        if self.security >= 0.1:
            return SystemClass(SecurityBand.low_sec)
        return SystemClass(SecurityBand.null_sec)


@dataclass(frozen=True)
class ReferenceData:
    """只读参考数据句柄。"""

    wormhole_types: Mapping[str, WormholeInfo]
    systems: Mapping[str, SystemData]

    @classmethod
    def empty(cls) -> ReferenceData:
        return cls(wormhole_types=MappingProxyType({}), systems=MappingProxyType({}))

    def wormhole(self, code: str) -> WormholeInfo | None:
        return self.wormhole_types.get(code)

    def system(self, name: str) -> SystemData | None:
        return self.systems.get(name)


def _load_table(path: str | Path, build: Callable[[Mapping[str, Any]], T]) -> Mapping[str, T]:
    file_path = Path(path)
    try:
        payload = json.loads(file_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ReferenceDataError(f"无法读取参考数据 {file_path}：{exc}") from exc
    except json.JSONDecodeError as exc:
        raise ReferenceDataError(f"参考数据 {file_path} 不是合法 JSON：{exc}") from exc
    if not isinstance(payload, dict):
        raise ReferenceDataError(f"参考数据 {file_path} 顶层必须是对象")
    table: Dict[str, T] = {}
    for key, entry in payload.items():
        try:
            table[key] = build(entry)
        except (KeyError, TypeError, ValueError) as exc:
            raise ReferenceDataError(f"参考数据 {file_path} 中 {key} 格式错误：{exc!r}") from exc
    return MappingProxyType(table)


def load_reference_data(
    wormhole_path: str | Path | None = None,
    systems_path: str | Path | None = None,
) -> ReferenceData:
    """加载两份目录，默认使用随包附带的数据。"""

    wormhole_types = _load_table(
        wormhole_path or DATA_DIR / "wormhole_types.json", WormholeInfo.from_payload
    )
    systems = _load_table(systems_path or DATA_DIR / "systems.json", SystemData.from_payload)
    logger.info("参考数据已加载：虫洞型号 %d 个，星系 %d 个", len(wormhole_types), len(systems))
    return ReferenceData(wormhole_types=wormhole_types, systems=systems)
