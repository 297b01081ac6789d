from vmem.address import AddressDecomposer
from vmem.clock import LogicalClock
from vmem.data_structures.frame_allocator import FrameAllocator
from vmem.data_structures.page_table import PageTable
from vmem.data_structures.physical_memory import PhysicalMemory
from vmem.data_structures.tlb import TLBCache
from vmem.fault_handler import PageFaultHandler
from vmem.results import Statistics, TranslationResult


class TranslationContext:
    """
    All state of one translation run. Built by the caller and handed to the
    engine, so separate runs never share anything.
    """
    def __init__(self, config, backing_store):
        self.config = config
        self.backing_store = backing_store
        self.clock = LogicalClock()
        self.decomposer = AddressDecomposer(config)
        self.physical_memory = PhysicalMemory(config)
        self.frame_allocator = FrameAllocator(config)
        self.page_table = PageTable(config)
        self.tlb = TLBCache(config, self.clock)
        self.statistics = Statistics()
        self.fault_handler = PageFaultHandler(backing_store, self.frame_allocator, self.physical_memory,
                                              self.page_table, self.tlb, self.statistics)


class TranslationEngine:
    """Translates logical addresses through the TLB, page table and fault handler."""
    def __init__(self, context):
        self.context = context

    @property
    def statistics(self):
        return self.context.statistics

    def _resolve_frame(self, page_number):
        """
        Find the frame holding a page
        :param page_number: int
        :return: int, bool, bool; frame number, tlb hit, page fault
        """
        ctx = self.context
        frame_number = ctx.tlb.lookup(page_number)
        if frame_number is not None:
            return frame_number, True, False

        frame_number = ctx.page_table.lookup(page_number)
        if frame_number is None:
            # the fault handler fills the TLB itself
            return ctx.fault_handler.resolve(page_number), False, True

        # table hit, the TLB is refreshed on every miss
        ctx.tlb.insert(page_number, frame_number)
        ctx.page_table.touch(page_number, ctx.clock.now)
        return frame_number, False, False

    def translate(self, logical_address):
        """
        Translate a logical address and fetch the byte it refers to
        :param logical_address: int
        :return: TranslationResult
        """
        ctx = self.context
        page_number, offset = ctx.decomposer.parse_address(logical_address)
        frame_number, tlb_hit, page_fault = self._resolve_frame(page_number)
        physical_address = ctx.decomposer.build_physical_address(frame_number, offset)
        value = ctx.physical_memory.read_signed_byte(physical_address)
        result = TranslationResult(logical_address, page_number, offset, frame_number, physical_address, value,
                                   tlb_hit=tlb_hit, page_fault=page_fault)
        ctx.statistics.record(result)
        return result

    def translate_all(self, addresses):
        """
        Lazily translate a sequence of logical addresses
        :param addresses: iterable of int
        :return: generator of TranslationResult
        """
        for logical_address in addresses:
            yield self.translate(logical_address)
