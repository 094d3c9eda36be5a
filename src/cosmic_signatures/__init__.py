"""宇宙信号记录与扫描结果对账。"""

from .config import ConfigError, TrackerConfig, load_config
from .core.clipboard import parse_paste
from .core.reconcile import merge_signatures
from .models.candidate import CandidateRecord
from .core.session import SessionState
from .models.signature import (
    Combat,
    Data,
    Gas,
    Ore,
    Relic,
    Signature,
    SignatureIdentifier,
    Unknown,
    Wormhole,
)
from .models.wormhole import WormholeDetail, WormholeLife, WormholeMass

__all__ = [
    "CandidateRecord",
    "Combat",
    "ConfigError",
    "Data",
    "Gas",
    "Ore",
    "Relic",
    "SessionState",
    "Signature",
    "SignatureIdentifier",
    "TrackerConfig",
    "Unknown",
    "Wormhole",
    "WormholeDetail",
    "WormholeLife",
    "WormholeMass",
    "load_config",
    "merge_signatures",
    "parse_paste",
]
