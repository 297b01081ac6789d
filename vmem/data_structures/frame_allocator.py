from collections import deque

from vmem.errors import FramePoolExhaustedError


class FrameAllocator:
    """
    Hands out physical frames from a fixed pool. Frames are given out in
    ascending order starting at frame 0 and are never returned.
    """
    def __init__(self, config):
        self.n_frames = config.pt.n_frames
        self.free_frames = deque(range(self.n_frames))

    @property
    def remaining(self):
        return len(self.free_frames)

    @property
    def allocated(self):
        return self.n_frames - len(self.free_frames)

    def allocate(self, page_number=None):
        """
        Take the next free frame
        :param page_number: int, the page the frame is for (used in the error message)
        :return: int, the frame number
        """
        if not self.free_frames:
            raise FramePoolExhaustedError(page_number, self.n_frames)
        return self.free_frames.popleft()
