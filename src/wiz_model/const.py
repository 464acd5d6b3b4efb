import os
from dataclasses import dataclass

from wiz_model import __version__

__all__ = [
    "DEVICE_OPTS",
    "DeviceOptions",
    "SCENE_ID_RANGE_DESC",
    "WIZ_DEBUG",
    "WIZ_LOG_FORMAT",
    "WIZ_LOG_HUMAN_OUTPUT",
    "WIZ_LOG_JSON_FILE",
    "WIZ_PERF_THRESHOLD_MS",
    "WIZ_PERF_TRACKING",
    "WIZ_VERSION",
    "YES_ANSWER",
]

YES_ANSWER = ("true", "1", "yes", "y", "t", 1, "on", "o")
WIZ_VERSION: str = __version__

WIZ_DEBUG = os.environ.get("WIZ_DEBUG", "0").casefold() in YES_ANSWER

# Logging Configuration
WIZ_LOG_FORMAT: str = os.environ.get("WIZ_LOG_FORMAT", "human")  # "json", "human", or "both"
_json_file = os.environ.get("WIZ_LOG_JSON_FILE")
WIZ_LOG_JSON_FILE: str | None = _json_file if _json_file else None
WIZ_LOG_HUMAN_OUTPUT: str = os.environ.get("WIZ_LOG_HUMAN_OUTPUT", "stderr")  # "stdout", "stderr", or file path

# Performance Instrumentation
WIZ_PERF_TRACKING: bool = os.environ.get("WIZ_PERF_TRACKING", "true").casefold() in YES_ANSWER
_perf_threshold = os.environ.get("WIZ_PERF_THRESHOLD_MS", "100")
WIZ_PERF_THRESHOLD_MS: int = int(_perf_threshold) if _perf_threshold and _perf_threshold.isdigit() else 100


@dataclass(frozen=True)
class DeviceOptions:
    """Substrings that identify device capabilities inside a module name."""

    rgb: str
    dimmable_white: str
    tunable_white: str
    dual_head: str
    single_head: str
    socket: str


DEVICE_OPTS = DeviceOptions(
    rgb="RGB",
    dimmable_white="DW",
    tunable_white="TW",
    dual_head="DH",
    single_head="SH",
    socket="SOCKET",
)

SCENE_ID_RANGE_DESC = "1-32 or 1000"
