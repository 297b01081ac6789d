class TLBEntry:
    """
    One TLB slot. An empty slot has page_number None and last_used 0.
    """
    def __init__(self, page_number=None, frame_number=None, inserted_at=0):
        self.page_number = page_number
        self.frame_number = frame_number
        self.inserted_at = inserted_at
        self.last_used = inserted_at

    @property
    def valid(self):
        return self.page_number is not None

    def __str__(self):
        return f"TLBEntry(page={self.page_number}, frame={self.frame_number}, last_used={self.last_used})"


class TLBCache:
    """
    Fully associative translation cache with LRU replacement. Recency is
    ordered by a logical clock rather than wall-clock time.
    """
    def __init__(self, config, clock):
        self.name = "TLB"
        self.capacity = config.tlb.num_entries
        self.clock = clock
        self.slots = [TLBEntry() for _ in range(self.capacity)]

        # stats
        self.hits = 0
        self.misses = 0
        self.evictions = 0

    def __len__(self):
        return sum(1 for slot in self.slots if slot.valid)

    def lookup(self, page_number):
        """
        Look up a page, marking the slot most recently used on a hit
        :param page_number: int
        :return: int frame number on a hit, None on a miss
        """
        for slot in self.slots:
            if slot.valid and slot.page_number == page_number:
                self.hits += 1
                slot.last_used = self.clock.tick()
                return slot.frame_number
        self.misses += 1
        return None

    def choose_victim(self):
        # smallest stamp wins, empty slots start at 0, ties go to the lowest index
        victim = self.slots[0]
        for slot in self.slots[1:]:
            if slot.last_used < victim.last_used:
                victim = slot
        return victim

    def insert(self, page_number, frame_number):
        """
        Store a mapping in the least recently used slot
        :param page_number: int
        :param frame_number: int
        :return: TLBEntry that was evicted, or None if an empty slot was used
        """
        victim = self.choose_victim()
        evicted = None
        if victim.valid:
            evicted = TLBEntry(victim.page_number, victim.frame_number, victim.inserted_at)
            evicted.last_used = victim.last_used
            self.evictions += 1
        stamp = self.clock.tick()
        victim.page_number = page_number
        victim.frame_number = frame_number
        victim.inserted_at = stamp
        victim.last_used = stamp
        return evicted

    def entries(self):
        """
        Live page -> frame mappings
        :return: dict
        """
        return {slot.page_number: slot.frame_number for slot in self.slots if slot.valid}

    def get_stats(self):
        """
        Get TLB stats
        :return: dict of stats
        """
        lookups = self.hits + self.misses
        stats = {"hits": self.hits,
                 "misses": self.misses,
                 "hit rate": self.hits / lookups if lookups > 0 else 0,
                 "evictions": self.evictions}
        return stats
