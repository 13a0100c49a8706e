"""Simulated breath analysis.

The estimate is derived from a 32-bit string hash of the sample, so the
same recording always yields the same reading.
"""

from __future__ import annotations

from typing import Literal

from protokit.backend.sites.breathcheck.schemas import BreathResult

# Only the first 100 UTF-16 code units of a sample are hashed.
SAMPLE_PREFIX = 100

# Thresholds in hundredths of a percent BAC; 0.08 is the usual legal limit.
WARNING_AT = 3
DANGER_AT = 8

MESSAGES = {
    "safe": "Clear: You are good to go. Drive safely!",
    "warning": "Caution: You are below the legal limit, but alcohol is affecting you. "
               "Consider waiting before driving.",
    "danger": "Warning: Do not drive. Your estimated BAC is above the legal limit.",
}


def sample_hash(sample: str) -> int:
    """``h = h * 31 + unit`` over UTF-16 code units, wrapped to signed 32 bits, then made positive."""
    data = sample.encode("utf-16-le")[: SAMPLE_PREFIX * 2]
    value = 0
    for i in range(0, len(data), 2):
        unit = int.from_bytes(data[i:i + 2], "little")
        value = ((value << 5) - value + unit) & 0xFFFFFFFF
    if value >= 1 << 31:
        value -= 1 << 32
    return abs(value)


def level_for(hundredths: int) -> Literal["safe", "warning", "danger"]:
    if hundredths < WARNING_AT:
        return "safe"
    if hundredths < DANGER_AT:
        return "warning"
    return "danger"


def evaluate_sample(audio_sample: str) -> BreathResult:
    """Estimate a BAC between 0.00 and 0.19 from a breath recording."""
    hundredths = sample_hash(audio_sample) % 20
    level = level_for(hundredths)
    return BreathResult(bac=f"{hundredths / 100:.2f}", level=level, message=MESSAGES[level])
