"""静态参考数据。"""

from .catalogue import (
    ReferenceData,
    ReferenceDataError,
    SecurityBand,
    SystemClass,
    SystemData,
    WormholeInfo,
    load_reference_data,
)

__all__ = [
    "ReferenceData",
    "ReferenceDataError",
    "SecurityBand",
    "SystemClass",
    "SystemData",
    "WormholeInfo",
    "load_reference_data",
]
