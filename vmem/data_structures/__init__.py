from .backing_store import BackingStore
from .frame_allocator import FrameAllocator
from .page_table import PageTable, PageTableEntry
from .physical_memory import PhysicalMemory
from .tlb import TLBCache, TLBEntry

__all__ = ["BackingStore", "FrameAllocator", "PageTable", "PageTableEntry", "PhysicalMemory", "TLBCache",
           "TLBEntry"]
