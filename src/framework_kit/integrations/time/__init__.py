from framework_kit.integrations.time.abc import Time
from framework_kit.integrations.time.real import RealTime

__all__ = [
    "RealTime",
    "Time",
]
