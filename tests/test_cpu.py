from statline import cpu


def _write_stat(path, values):
    path.write_text("cpu " + " ".join(str(v) for v in values) + "\ncpu0 1 2 3\n")


def test_first_sample_is_unknown(tmp_path):
    stat = tmp_path / "stat"
    _write_stat(stat, [100, 0, 0, 100, 0, 0, 0])
    assert cpu.CpuUsage(str(stat)).sample() is None


def test_usage_between_samples(tmp_path):
    stat = tmp_path / "stat"
    usage = cpu.CpuUsage(str(stat))
    _write_stat(stat, [100, 0, 0, 100, 0, 0, 0])
    usage.sample()
    _write_stat(stat, [150, 0, 0, 150, 0, 0, 0])
    assert usage.sample() == "50"


def test_fully_idle_is_zero(tmp_path):
    stat = tmp_path / "stat"
    usage = cpu.CpuUsage(str(stat))
    _write_stat(stat, [100, 0, 0, 100, 0, 0, 0])
    usage.sample()
    _write_stat(stat, [100, 0, 0, 300, 0, 0, 0])
    assert usage.sample() == "0"


def test_no_change_is_unknown(tmp_path):
    stat = tmp_path / "stat"
    usage = cpu.CpuUsage(str(stat))
    _write_stat(stat, [100, 5, 5, 100, 0, 0, 0])
    usage.sample()
    assert usage.sample() is None


def test_zero_user_time_previous_is_unknown(tmp_path):
    stat = tmp_path / "stat"
    usage = cpu.CpuUsage(str(stat))
    _write_stat(stat, [0, 0, 0, 100, 0, 0, 0])
    usage.sample()
    _write_stat(stat, [50, 0, 0, 150, 0, 0, 0])
    assert usage.sample() is None


def test_malformed_stat(tmp_path):
    stat = tmp_path / "stat"
    stat.write_text("cpu 1 2\n")
    assert cpu.CpuUsage(str(stat)).sample() is None


def test_missing_stat(tmp_path, capsys):
    assert cpu.CpuUsage(str(tmp_path / "missing")).sample() is None
    assert "fopen" in capsys.readouterr().err


def test_cpu_perc_range():
    cpu.cpu_perc()
    result = cpu.cpu_perc()
    assert result is None or 0 <= int(result) <= 100


def test_cpu_freq_linux(tmp_path, monkeypatch):
    freq = tmp_path / "scaling_cur_freq"
    freq.write_text("2400000\n")
    monkeypatch.setattr(cpu, "CPU_FREQ", str(freq))
    monkeypatch.setattr(cpu.sys, "platform", "linux")
    assert cpu.cpu_freq() == "2.4 G"


def test_cpu_freq_linux_missing(tmp_path, monkeypatch):
    monkeypatch.setattr(cpu, "CPU_FREQ", str(tmp_path / "missing"))
    monkeypatch.setattr(cpu.sys, "platform", "linux")
    assert cpu.cpu_freq() is None