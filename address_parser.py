import re

_DECIMAL = re.compile(r"[+-]?\d+")

def to_int(token):
    """Return the token as an int, or None if it is not a decimal integer."""
    if _DECIMAL.fullmatch(token):
        return int(token)
    return None

class AddressParser:
    """
    Parses an addresses file and yields logical addresses.
    Stops at the first token that is not a decimal integer.
    """
    def __init__(self, addresses_file):
        self.addresses_file = addresses_file
        with open(addresses_file, 'r') as f:
            self.tokens = f.read().split()

    def __iter__(self):
        for token in self.tokens:
            address = to_int(token)
            if address is None:
                return
            yield address
