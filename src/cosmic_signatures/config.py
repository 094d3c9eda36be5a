"""全局配置与默认参数。"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path

DATA_DIR = Path(__file__).resolve().parent / "reference" / "data"

# 剪贴板行首标签 "ABC-123" 的宽度
DEFAULT_IDENTIFIER_WIDTH = 7


class ConfigError(ValueError):
    """配置文件内容不合法。"""


@dataclass
class TrackerConfig:
    """系统可调参数集合。

    注意：这里的数值只是默认值，可由 config.toml 覆盖。
    """

    # 剪贴板行首标识的截取宽度（游戏标签 "ABC-123" 为 7 个字符）
    identifier_width: int = DEFAULT_IDENTIFIER_WIDTH
    # 启动时选中的星系，None 表示不选
    initial_system: str | None = None
    # 参考数据：虫洞型号目录与星系目录
    wormhole_types_path: str = field(default_factory=lambda: str(DATA_DIR / "wormhole_types.json"))
    systems_path: str = field(default_factory=lambda: str(DATA_DIR / "systems.json"))
    # 日志文件与级别
    log_path: str = "app.log"
    log_level: str = "INFO"
    # 游戏 SSO 凭据（远程 API 客户端使用，核心不读取）
    sso_client_id: str | None = None
    sso_client_secret: str | None = None
    sso_callback_url: str | None = None


def load_config(path: str | Path | None = None) -> TrackerConfig:
    """读取 TOML 配置；未给路径时返回默认值。

    未知键或类型不符会抛出 ConfigError，文件不存在时抛出 FileNotFoundError。
    """

    if path is None:
        return TrackerConfig()
    file_path = Path(path)
    try:
        payload = tomllib.loads(file_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"{file_path} 不是合法的 TOML：{exc}") from exc

    known = {item.name: item for item in fields(TrackerConfig)}
    unknown = sorted(set(payload) - set(known))
    if unknown:
        raise ConfigError(f"{file_path} 中存在未知配置项：{', '.join(unknown)}")

    # TOML 没有 null：除截取宽度外，其余配置项都是字符串
    for key, value in payload.items():
        if key == "identifier_width":
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                raise ConfigError(f"identifier_width 必须是正整数，实际为 {value!r}")
        elif not isinstance(value, str):
            raise ConfigError(f"{key} 必须是字符串，实际为 {value!r}")
    return TrackerConfig(**payload)
