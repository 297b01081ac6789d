class PhysicalMemory:
    """
    Flat byte store split into fixed-size frames
    """
    def __init__(self, config):
        self.n_frames = config.pt.n_frames
        self.frame_size = config.pt.frame_size
        self.memory = bytearray(self.n_frames * self.frame_size)

        # stats
        self.reads = 0
        self.frames_loaded = 0

    def __len__(self):
        return len(self.memory)

    def _frame_base(self, frame_number):
        if not 0 <= frame_number < self.n_frames:
            raise IndexError(f"frame {frame_number} out of range (0..{self.n_frames - 1})")
        return frame_number * self.frame_size

    def load_frame(self, frame_number, data):
        """
        Copy one page of data into a frame
        :param frame_number: int
        :param data: bytes, exactly one frame long
        :return: None
        """
        if len(data) != self.frame_size:
            raise ValueError(f"expected {self.frame_size} bytes for frame {frame_number}, got {len(data)}")
        base = self._frame_base(frame_number)
        self.memory[base:base + self.frame_size] = data
        self.frames_loaded += 1

    def read_frame(self, frame_number):
        base = self._frame_base(frame_number)
        return bytes(self.memory[base:base + self.frame_size])

    def read_byte(self, physical_address):
        self.reads += 1
        return self.memory[physical_address]

    def read_signed_byte(self, physical_address):
        """
        Read a byte as a signed 8-bit value, 0..255 maps to -128..127
        :param physical_address: int
        :return: int
        """
        byte = self.read_byte(physical_address)
        return byte - 256 if byte > 127 else byte

    def get_stats(self):
        return {
            "reads": self.reads,
            "frames loaded": self.frames_loaded,
        }
