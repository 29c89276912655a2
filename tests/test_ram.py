import pytest

from statline import ram

SAMPLE = (
    "MemTotal:        1048576 kB\n"
    "MemFree:             200 kB\n"
    "MemAvailable:       1024 kB\n"
    "Buffers:             100 kB\n"
    "Cached:              200 kB\n"
    "Active(anon):         42 kB\n"
)


@pytest.fixture
def meminfo(tmp_path, monkeypatch):
    def write(text):
        path = tmp_path / "meminfo"
        path.write_text(text)
        monkeypatch.setattr(ram, "MEMINFO", str(path))

    return write


def test_parse_meminfo_values():
    info = ram.parse_meminfo(SAMPLE)
    assert info["MemTotal"] == 1048576
    assert info["MemFree"] == 200
    assert info["Buffers"] == 100
    assert info["Active(anon)"] == 42


def test_parse_meminfo_empty():
    assert ram.parse_meminfo("") == {}


def test_ram_total(meminfo):
    meminfo(SAMPLE)
    assert ram.ram_total() == "1.0 Gi"


def test_ram_free_reports_available(meminfo):
    meminfo(SAMPLE)
    assert ram.ram_free() == "1.0 Mi"


def test_ram_perc(meminfo):
    meminfo(
        "MemTotal: 1000 kB\nMemFree: 200 kB\nMemAvailable: 300 kB\n"
        "Buffers: 100 kB\nCached: 200 kB\n"
    )
    assert ram.ram_perc() == "50"


def test_ram_perc_zero_total(meminfo):
    meminfo("MemTotal: 0 kB\nMemFree: 0 kB\nBuffers: 0 kB\nCached: 0 kB\n")
    assert ram.ram_perc() is None


def test_ram_used_zero(meminfo):
    meminfo("MemTotal: 500 kB\nMemFree: 200 kB\nBuffers: 100 kB\nCached: 200 kB\n")
    assert ram.ram_used() == "0.0 "


def test_missing_field(meminfo):
    meminfo("MemTotal: 500 kB\n")
    assert ram.ram_used() is None
    assert ram.ram_free() is None


def test_missing_file(tmp_path, monkeypatch):
    monkeypatch.setattr(ram, "MEMINFO", str(tmp_path / "absent"))
    assert ram.ram_total() is None