"""Scale-from-zero annotations for machine sets, derived from instance type capabilities."""

from __future__ import annotations

import logging
import math
from typing import Mapping, MutableMapping

logger = logging.getLogger(__name__)

CPU_KEY = "machine.openshift.io/vCPU"
MEMORY_KEY = "machine.openshift.io/memoryMb"
GPU_KEY = "machine.openshift.io/GPU"

VCPUS = "vCPUs"
MEMORY_GB = "MemoryGB"
GPUS = "GPUs"


def _parse_float(text: str) -> float:
    if text != text.strip() or "_" in text:
        raise ValueError(f"invalid syntax: {text!r}")
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"value out of range: {text!r}")
    return value


def _round_half_away_from_zero(value: float) -> int:
    truncated = math.trunc(value)
    if abs(value - truncated) >= 0.5:
        truncated += 1 if value > 0 else -1
    return int(truncated)


def memory_gib_to_mib(memory_gib: str) -> str:
    """Convert a memory size in GiB to a whole number of MiB.

    An unparseable value is logged and counted as zero.
    """
    try:
        gib = _parse_float(memory_gib)
    except ValueError as exc:
        logger.warning("could not parse memoryGB: %s", exc)
        gib = 0.0
    return str(_round_half_away_from_zero(gib * 1024))


def update_machine_set_annotations(
    annotations: MutableMapping[str, str] | None,
    capabilities: Mapping[str, str],
) -> MutableMapping[str, str]:
    """Set the CPU, memory and GPU annotations from an instance type's capabilities.

    Returns the updated annotations, a new dict if none were given.
    """
    if annotations is None:
        annotations = {}

    cpu = capabilities.get(VCPUS)
    if cpu is None:
        logger.warning("failed to get vCPUs from capabilities: %s", dict(capabilities))
        cpu = ""
    annotations[CPU_KEY] = cpu

    memory = capabilities.get(MEMORY_GB)
    if memory is None:
        logger.warning("azure api did not provide memory size for machine type")
        memory = ""
    annotations[MEMORY_KEY] = memory_gib_to_mib(memory)

    annotations[GPU_KEY] = capabilities.get(GPUS, "0")
    return annotations