import math

# fixed geometry used when no config file is given
PAGE_SIZE = 256
PAGE_TABLE_SIZE = 256
NUM_FRAMES = 256
TLB_SIZE = 16

def is_power_of_two(n):
    """Check if a number is a power of two. uses bit operations."""
    return n > 0 and (n & (n - 1)) == 0

def safe_log_2(n):
    """Compute the base-2 logarithm of a number, ensuring the number is a power of two."""
    if not is_power_of_two(n):
        raise ValueError("Input must be a power of two.")
    return int(math.log2(n))

def safe_int(value, name):
    """Parse a config value as an int, naming the offending key on failure."""
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be an integer, got {value!r}.") from None


class BitCounts:
    def __init__(self):
        # initialize them all to zero to start
        self.page_number_bits = 0
        self.offset_bits = 0
        self.frame_bits = 0
        self.address_bits = 0

class PageTableConfig:
    def __init__(self, n_virtual_pages, n_frames, page_size):
        self.n_virtual_pages = n_virtual_pages
        self.n_frames = n_frames
        self.page_size = page_size

    @property
    def frame_size(self):
        # frames and pages are the same size
        return self.page_size

class TLBConfig:
    def __init__(self, num_entries):
        self.num_entries = num_entries

class Config:
    def __init__(self, tlb_cfg=None, pt_cfg=None):
        self.tlb = tlb_cfg if tlb_cfg is not None else TLBConfig(TLB_SIZE)
        self.pt = pt_cfg if pt_cfg is not None else PageTableConfig(PAGE_TABLE_SIZE, NUM_FRAMES, PAGE_SIZE)
        self.bits = BitCounts()
        self.validate()
        self.derive_bits()

    @property
    def memory_size(self):
        return self.pt.n_frames * self.pt.frame_size

    @property
    def backing_store_size(self):
        return self.pt.n_virtual_pages * self.pt.page_size

    @classmethod
    def from_config_file(cls, filepath):
        # parse out config info
        with open(filepath) as infile:
            raw_lines = [ln.rstrip("\n") for ln in infile]

        # Section names exactly as in the file
        section_headers = {
            "TLB configuration": "tlb",
            "Page Table configuration": "pt",
        }

        sections = {
            "tlb": {},
            "pt": {},
        }

        current = None
        for ln in raw_lines:
            line = ln.strip()
            if not line or line.startswith("#"):
                continue

            # Enter a new section?
            if line in section_headers:
                current = section_headers[line]
                continue

            # Regular "Key: value" inside a section
            if ":" in line and current is not None:
                key, val = line.split(":", 1)
                sections[current][key.strip()] = val.strip()
                continue

            raise ValueError(f"Unrecognized config line: {line!r}")

        # TLB config info, anything missing falls back to the fixed geometry
        tlb_entries = safe_int(sections["tlb"].get("Number of entries", TLB_SIZE), "Number of entries")

        # Page table config info
        n_virtual_pages = safe_int(sections["pt"].get("Number of virtual pages", PAGE_TABLE_SIZE),
                                   "Number of virtual pages")
        n_frames = safe_int(sections["pt"].get("Number of physical frames", NUM_FRAMES), "Number of physical frames")
        page_size = safe_int(sections["pt"].get("Page size", PAGE_SIZE), "Page size")

        return cls(
            tlb_cfg=TLBConfig(tlb_entries),
            pt_cfg=PageTableConfig(n_virtual_pages, n_frames, page_size),
        )

    def _validate_tlb(self):
        if self.tlb.num_entries < 1:
            raise ValueError("TLB must have at least one entry.")

    def _validate_pt(self):
        if self.pt.n_virtual_pages < 1:
            raise ValueError("Number of virtual pages must be at least 1.")
        if self.pt.n_frames < 1:
            raise ValueError("Number of physical frames must be at least 1.")
        # page number and offset are bit fields of the logical address
        if not is_power_of_two(self.pt.n_virtual_pages):
            raise ValueError("Number of virtual pages must be a power of two.")
        if not is_power_of_two(self.pt.page_size):
            raise ValueError("Page size must be a power of two.")
        # max logical address length is 32 bits
        if self.pt.n_virtual_pages * self.pt.page_size > 2**32:
            raise ValueError("Maximum logical address space exceeded (2^32).")

    def validate(self):
        self._validate_tlb()
        self._validate_pt()

    def derive_bits(self):
        self.bits.offset_bits = safe_log_2(self.pt.page_size)
        self.bits.page_number_bits = safe_log_2(self.pt.n_virtual_pages)
        # frame count need not be a power of two, round up for display
        self.bits.frame_bits = max(1, (self.pt.n_frames - 1).bit_length())
        self.bits.address_bits = self.bits.page_number_bits + self.bits.offset_bits

    def __str__(self):
        print_str = ""
        print_str += f"TLB contains {self.tlb.num_entries} entries.\n\n"
        print_str += f"Number of virtual pages is {self.pt.n_virtual_pages}.\n"
        print_str += f"Number of physical frames is {self.pt.n_frames}.\n"
        print_str += f"Each page contains {self.pt.page_size} bytes.\n"
        print_str += f"Number of bits used for the page number is {self.bits.page_number_bits}.\n"
        print_str += f"Number of bits used for the page offset is {self.bits.offset_bits}.\n"
        print_str += f"Logical addresses are {self.bits.address_bits} bits wide.\n"
        print_str += f"Physical memory holds {self.memory_size} bytes.\n"
        print_str += f"Backing store holds {self.backing_store_size} bytes.\n"
        return print_str
