class PageTableEntry:
    """
    Page table entry, frame_number is None while the page is unmapped
    """
    def __init__(self, page_number):
        self.page_number = page_number
        self.frame_number = None
        self.last_access = 0

    @property
    def mapped(self):
        return self.frame_number is not None

    def __str__(self):
        return f"PageTableEntry(page={self.page_number}, frame={self.frame_number}, last_access={self.last_access})"


class PageTable:
    """
    Page table without eviction: once a page is mapped it stays mapped
    """
    def __init__(self, config):
        self.n_virtual_pages = config.pt.n_virtual_pages
        self.entries = [PageTableEntry(page_number) for page_number in range(self.n_virtual_pages)]

        # stats for tracking
        self.hits = 0
        self.misses = 0
        self.accesses = 0

    def __len__(self):
        return len(self.entries)

    def lookup(self, page_number):
        """
        Look up the frame a page is mapped to
        :param page_number: int
        :return: int frame number, or None if the page is unmapped
        """
        self.accesses += 1
        frame_number = self.entries[page_number].frame_number
        if frame_number is None:
            self.misses += 1
        else:
            self.hits += 1
        return frame_number

    def map(self, page_number, frame_number, stamp=0):
        """
        Record the frame holding a page. A page is only ever mapped once.
        :param page_number: int
        :param frame_number: int
        :param stamp: int, logical clock value at the time of mapping
        :return: None
        """
        entry = self.entries[page_number]
        if entry.mapped:
            raise ValueError(f"page {page_number} is already mapped to frame {entry.frame_number}")
        entry.frame_number = frame_number
        entry.last_access = stamp

    def touch(self, page_number, stamp):
        self.entries[page_number].last_access = stamp

    def mapped_pages(self):
        return {entry.page_number: entry.frame_number for entry in self.entries if entry.mapped}

    def get_stats(self):
        """
        Get page table stats
        :return: dict of stats
        """
        stats = {
            "accesses": self.accesses,
            "hits": self.hits,
            "misses": self.misses,
            "hit rate": self.hits / self.accesses if self.accesses > 0 else 0,
            "mapped pages": sum(1 for entry in self.entries if entry.mapped),
        }
        return stats
