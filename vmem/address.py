class AddressDecomposer:
    """
    Splits logical addresses into page number and offset, and joins a frame
    number and offset back into a physical address
    """
    def __init__(self, config):
        self.offset_bits = config.bits.offset_bits
        self.page_number_bits = config.bits.page_number_bits
        self.frame_size = config.pt.frame_size

        # precompute masks
        self._offset_mask = (1 << self.offset_bits) - 1
        self._page_number_mask = (1 << self.page_number_bits) - 1

    def parse_address(self, address):
        """
        Parse a logical address into its page number and offset. Bits above
        the page number are ignored.
        :param address: int, the logical address
        :return: int, int; the page number and offset
        """
        offset = address & self._offset_mask
        page_number = (address >> self.offset_bits) & self._page_number_mask
        return page_number, offset

    def build_physical_address(self, frame_number, offset):
        return frame_number * self.frame_size + offset
