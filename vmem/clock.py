class LogicalClock:
    """
    Monotonic counter used to order TLB accesses. The page table reads it to
    stamp entries, but those stamps are informational only.
    """
    def __init__(self):
        self._now = 0

    @property
    def now(self):
        return self._now

    def tick(self):
        """
        Advance the clock
        :return: int, the new clock value
        """
        self._now += 1
        return self._now
