class TranslationResult:
    """
    Represents the result of translating one logical address
    """
    def __init__(self, logical_address, page_number, offset, frame_number, physical_address, value,
                 tlb_hit=False, page_fault=False):
        self.logical_address = logical_address
        self.page_number = page_number
        self.offset = offset
        self.frame_number = frame_number
        self.physical_address = physical_address
        self.value = value
        self.tlb_hit = tlb_hit
        self.page_fault = page_fault

    @property
    def source(self):
        """Which structure resolved the frame: "tlb", "page table" or "fault"."""
        if self.tlb_hit:
            return "tlb"
        if self.page_fault:
            return "fault"
        return "page table"


class Statistics:
    """
    Running counters for a translation run
    """
    def __init__(self):
        self.translations = 0
        self.page_faults = 0
        self.tlb_hits = 0
        self.tlb_misses = 0

    def record(self, result):
        # page faults are counted by the fault handler as they happen
        self.translations += 1
        if result.tlb_hit:
            self.tlb_hits += 1
        else:
            self.tlb_misses += 1

    @property
    def page_fault_rate(self):
        return self.page_faults / self.translations if self.translations > 0 else 0

    @property
    def tlb_hit_rate(self):
        return self.tlb_hits / self.translations if self.translations > 0 else 0

    def as_dict(self):
        return {
            "translations": self.translations,
            "page faults": self.page_faults,
            "tlb hits": self.tlb_hits,
            "tlb misses": self.tlb_misses,
            "page fault rate": self.page_fault_rate,
            "tlb hit rate": self.tlb_hit_rate,
        }


class AccessLine:
    """
    Formats a single translation for output
    """
    def __init__(self, result):
        self.logical_address = result.logical_address
        self.physical_address = result.physical_address
        self.value = result.value

    def __str__(self):
        return (f"Logical address: {self.logical_address} ; "
                f"Physical address: {self.physical_address} ; "
                f"Signed Byte Value: {self.value}")
