class PageFaultHandler:
    """
    Loads an unmapped page from the backing store into a free frame
    """
    def __init__(self, backing_store, frame_allocator, physical_memory, page_table, tlb, statistics):
        self.backing_store = backing_store
        self.frame_allocator = frame_allocator
        self.physical_memory = physical_memory
        self.page_table = page_table
        self.tlb = tlb
        self.statistics = statistics

    def resolve(self, page_number):
        """
        Service a page fault. The page is read and a frame allocated before
        anything is written, so a failure leaves every structure untouched.
        :param page_number: int, an unmapped page
        :return: int, the frame now holding the page
        """
        data = self.backing_store.read_page(page_number)
        frame_number = self.frame_allocator.allocate(page_number)
        self.physical_memory.load_frame(frame_number, data)
        self.page_table.map(page_number, frame_number, self.tlb.clock.now)
        self.statistics.page_faults += 1
        self.tlb.insert(page_number, frame_number)
        self.page_table.touch(page_number, self.tlb.clock.now)
        return frame_number
