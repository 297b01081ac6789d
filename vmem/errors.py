class TranslationError(Exception):
    """
    Base class for fatal errors raised while translating addresses
    """


class BackingStoreError(TranslationError):
    """
    A page could not be read from the backing store
    """
    def __init__(self, page_number, reason):
        self.page_number = page_number
        self.reason = reason
        super().__init__(f"error reading page {page_number} from backing store: {reason}")


class FramePoolExhaustedError(TranslationError):
    """
    A page fault needed a frame but every frame is already in use
    """
    def __init__(self, page_number, num_frames):
        self.page_number = page_number
        self.num_frames = num_frames
        super().__init__(f"frame pool exhausted: no free frame for page {page_number} "
                         f"(all {num_frames} frames in use)")
