from vmem.engine import TranslationContext, TranslationEngine
from vmem.errors import TranslationError, BackingStoreError, FramePoolExhaustedError
from vmem.results import TranslationResult, Statistics, AccessLine
from vmem.simulator import VirtualMemorySimulator

__all__ = ["TranslationContext", "TranslationEngine", "TranslationError", "BackingStoreError",
           "FramePoolExhaustedError", "TranslationResult", "Statistics", "AccessLine", "VirtualMemorySimulator"]
