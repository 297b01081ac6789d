from vmem.errors import BackingStoreError


class BackingStore:
    """
    Read-only paged store backed by a binary file. Page N occupies bytes
    [N * page_size, (N + 1) * page_size).
    """
    def __init__(self, filename, page_size=256):
        self.filename = filename
        self.page_size = page_size
        self._file = open(filename, 'rb')

        # stats
        self.page_reads = 0

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def close(self):
        self._file.close()

    @property
    def closed(self):
        return self._file.closed

    def read_page(self, page_number):
        """
        Read one page from the backing store
        :param page_number: int
        :return: bytes, exactly page_size long
        """
        start = page_number * self.page_size
        try:
            self._file.seek(start)
            page = self._file.read(self.page_size)
        except (OSError, ValueError) as exc:
            raise BackingStoreError(page_number, str(exc)) from exc
        if len(page) != self.page_size:
            raise BackingStoreError(page_number,
                                    f"short read ({len(page)} of {self.page_size} bytes at offset {start})")
        self.page_reads += 1
        return page
