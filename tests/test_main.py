import pytest

from main import main


def test_translates_and_summarises(make_store, make_addresses, capsys):
    store = make_store({0: 65, 256: 66})
    addresses = make_addresses("0\n0\n256\n")
    assert main([str(store), str(addresses)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Logical address: 0 ; Physical address: 0 ; Signed Byte Value: 65"
    assert lines[-2:] == ["Number of page faults: 2", "Number of TLB hits: 1"]


def test_stops_at_non_numeric_token(make_store, make_addresses, capsys):
    store = make_store({10: 42})
    addresses = make_addresses("10\nend\n")
    assert main([str(store), str(addresses)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Logical address: 10 ; Physical address: 10 ; Signed Byte Value: 42",
        "Number of page faults: 1",
        "Number of TLB hits: 0",
    ]


@pytest.mark.parametrize("argv", [[], ["only-one"], ["a", "b", "c"]])
def test_wrong_argument_count_is_a_usage_error(argv, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    assert exc_info.value.code != 0
    captured = capsys.readouterr()
    assert "usage" in captured.err
    assert captured.out == ""


def test_missing_backing_store(tmp_path, make_addresses, capsys):
    addresses = make_addresses("0\n")
    missing = tmp_path / "nope.bin"
    assert main([str(missing), str(addresses)]) != 0
    assert str(missing) in capsys.readouterr().err


def test_missing_addresses_file(tmp_path, make_store, capsys):
    store = make_store()
    missing = tmp_path / "nope.txt"
    assert main([str(store), str(missing)]) != 0
    assert str(missing) in capsys.readouterr().err


def test_short_backing_store_is_fatal(make_store, make_addresses, capsys):
    store = make_store(size=300)
    addresses = make_addresses("0\n256\n0\n")
    assert main([str(store), str(addresses)]) == 1
    captured = capsys.readouterr()
    assert "page 1" in captured.err
    assert "Number of page faults" not in captured.out


def test_config_file_shrinks_frame_pool(make_store, make_addresses, tmp_path, capsys):
    config = tmp_path / "vmem.config"
    config.write_text("Page Table configuration\nNumber of physical frames: 1\n")
    store = make_store()
    addresses = make_addresses("0\n256\n")
    assert main([str(store), str(addresses), "-c", str(config)]) == 1
    assert "frame pool exhausted" in capsys.readouterr().err


def test_invalid_config_file(make_store, make_addresses, tmp_path, capsys):
    config = tmp_path / "vmem.config"
    config.write_text("Page Table configuration\nPage size: 100\n")
    assert main([str(make_store()), str(make_addresses("0\n")), "-c", str(config)]) == 2
    assert "Page size must be a power of two" in capsys.readouterr().err


def test_verbose_prints_config(make_store, make_addresses, capsys):
    assert main([str(make_store()), str(make_addresses("0\n")), "-v"]) == 0
    out = capsys.readouterr().out
    assert "TLB contains 16 entries." in out
    assert "translated addresses : 1" in out
