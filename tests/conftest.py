import pytest

from config import Config
from vmem.data_structures.backing_store import BackingStore
from vmem.engine import TranslationContext, TranslationEngine

STORE_SIZE = 256 * 256


def pattern_byte(i):
    return (i * 7 + 3) % 256


@pytest.fixture
def make_store(tmp_path):
    """Write a backing store file. data overrides individual offsets of an all-zero store."""
    def _make(data=None, size=STORE_SIZE, fill=None, name="BACKING_STORE.bin"):
        if fill is not None:
            raw = bytearray(fill(i) for i in range(size))
        else:
            raw = bytearray(size)
        for offset, value in (data or {}).items():
            raw[offset] = value
        path = tmp_path / name
        path.write_bytes(bytes(raw))
        return path
    return _make


@pytest.fixture
def make_addresses(tmp_path):
    def _make(text, name="addresses.txt"):
        path = tmp_path / name
        path.write_text(text)
        return path
    return _make


@pytest.fixture
def make_engine():
    """Build an engine over a backing store path. Stores are closed at teardown."""
    opened = []

    def _make(store_path, config=None):
        config = config if config is not None else Config()
        backing_store = BackingStore(store_path, page_size=config.pt.page_size)
        opened.append(backing_store)
        return TranslationEngine(TranslationContext(config, backing_store))

    yield _make
    for backing_store in opened:
        backing_store.close()
