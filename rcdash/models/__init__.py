"""Core data structures for rcdash."""

from rcdash.models.config import KubeConfig, LogConfig, RcdashConfig
from rcdash.models.selectors import LabelSelector, Operator, Requirement
from rcdash.models.workloads import (
    ControllerSnapshot,
    PodInfo,
    PodPhase,
    PodSnapshot,
    ServiceSnapshot,
)

__all__ = [
    "ControllerSnapshot",
    "KubeConfig",
    "LabelSelector",
    "LogConfig",
    "Operator",
    "PodInfo",
    "PodPhase",
    "PodSnapshot",
    "RcdashConfig",
    "Requirement",
    "ServiceSnapshot",
]
