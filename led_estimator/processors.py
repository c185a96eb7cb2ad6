# processors.py
# Processor class recommendation from the wall's total pixel count.

from enum import Enum


class ProcessorTier(str, Enum):
    PROFESSIONAL = "Professional LED Processor (4K+)"
    STANDARD = "Standard LED Processor (2K)"
    ENTRY = "Entry LED Processor (1K)"
    BASIC = "Basic LED Processor"


# (pixel count must exceed, tier), evaluated high to low
PROCESSOR_TIERS = [
    (2_000_000, ProcessorTier.PROFESSIONAL),
    (1_000_000, ProcessorTier.STANDARD),
    (500_000, ProcessorTier.ENTRY),
]


def recommend_processor(total_pixels: int) -> ProcessorTier:
    for threshold, tier in PROCESSOR_TIERS:
        if total_pixels > threshold:
            return tier
    return ProcessorTier.BASIC
