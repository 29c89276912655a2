# statline

statline builds a single status line from small pieces of system information
(battery, memory, date and time, command output and more) and refreshes it
once per second. By default the line is set as the name of the X root window,
where status bars that read the root window name pick it up; with `-s` it is
written to standard output instead.

It targets Linux: most components read `/proc` and `/sys`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Usage

```
statline [-v] [-s] [-1]
```

- With no options, statline connects to the X display named by `DISPLAY`
  (a local socket under `/tmp/.X11-unix` or TCP port 6000 + display number,
  authenticating with an `MIT-MAGIC-COOKIE-1` entry from `XAUTHORITY` or
  `~/.Xauthority`) and sets the root window name on every update. On exit the
  name is cleared. If the display cannot be opened it reports
  `XOpenDisplay: Failed to open display` and exits with status 1.
- `-s` writes the status line to standard output on each update.
- `-1` writes the status line once and exits. It implies `-s`.
- `-v` prints `statline-1.0` to standard error and exits with status 1.

Flags may be combined (`-s1`). Any other flag or extra argument prints the
usage line and exits with status 1.

`SIGINT` and `SIGTERM` stop the loop after the current update. `SIGUSR1` ends
the current wait early and forces an immediate refresh.

Any value that cannot be read shows as `n/a`. Diagnostics go to standard
error.

### The default line

The command shows, in this order: the charging state and charge of `BAT0`, the
volume reported by `pactl` (through a shell pipeline with `awk` and `tr`), used
and total memory, and the local date and time as `%F %I:%M:%S %p`. The
interval (1000 ms), the `n/a` placeholder and the 2048-character limit are
fixed in `statline.cli`; to show something else, build your own line as
described below.

## Components

Each component is a plain function. It takes one argument (a path, interface
name, format or command; ignored by components that need none) and returns a
string, or `None` when the value cannot be read.

| Module                 | Functions                                                  |
|------------------------|------------------------------------------------------------|
| `statline.battery`     | `battery_perc`, `battery_state`, `battery_remaining`       |
| `statline.cpu`         | `cpu_freq`, `cpu_perc`                                     |
| `statline.disk`        | `disk_free`, `disk_perc`, `disk_total`, `disk_used`        |
| `statline.files`       | `cat`, `num_files`, `run_command`                          |
| `statline.ip`          | `ipv4`, `ipv6`                                             |
| `statline.netspeeds`   | `netspeed_rx`, `netspeed_tx`                               |
| `statline.ram`         | `ram_free`, `ram_perc`, `ram_total`, `ram_used`            |
| `statline.swap`        | `swap_free`, `swap_perc`, `swap_total`, `swap_used`        |
| `statline.system`      | `datetime`, `hostname`, `kernel_release`, `load_avg`, `uptime`, `gid`, `uid`, `username`, `entropy` |
| `statline.temperature` | `temp`                                                     |
| `statline.volume`      | `vol_perc`                                                 |
| `statline.wifi`        | `wifi_perc`, `wifi_essid`                                  |

Some notes:

- `battery_state` returns `+` (charging), `-` (discharging), `o` (full or not
  charging) or `?`. `battery_remaining` returns `Hh Mm` while discharging and
  an empty string otherwise.
- `cpu_perc`, `netspeed_rx` and `netspeed_tx` compare with the previous call,
  so the first call returns `None`. The classes behind them, `CpuUsage` (over
  a `/proc/stat`-style file) and `NetSpeed` (over a counter path template or a
  callable), can be used directly.
- `vol_perc` reads the master volume from an OSS mixer device such as
  `/dev/mixer`.
- `wifi_perc` reads `/proc/net/wireless`; `wifi_essid` queries the interface
  with an ioctl. `rssi_to_perc` and `parse_wireless` are exposed as helpers.
- `parse_meminfo` (`statline.ram`) and `parse_swap` (`statline.swap`) parse
  meminfo text; `format_uptime` (`statline.system`) formats seconds.

Sizes are formatted by `statline.util.fmt_human`, which uses binary prefixes
such as `Ki`, `Mi` and `Gi` for base 1024, and decimal prefixes such as `k`,
`M` and `G` for base 1000; any other base raises `ValueError`:

```python
>>> from statline.util import fmt_human
>>> fmt_human(2048, 1024)
'2.0 Ki'
```

## Building your own line

`statline.cli.build_status` takes a sequence of `Arg` entries, one per piece of
the line. Each entry holds a component function, a `%s` format and the
argument for that function. Values that are `None` are replaced by the
placeholder, and the line is cut short before it reaches the length limit:

```python
from statline.cli import Arg, build_status
from statline.ram import ram_used, ram_total
from statline.system import datetime

args = [
    Arg(ram_used, "[%s/", None),
    Arg(ram_total, "%s]", None),
    Arg(datetime, " [%s]", "%F %T"),
]
print(build_status(args, "n/a", 2048))
```

## What it does not do

- Keyboard layout and lock indicators are not read from the X server.
  `statline.keyboard` only offers the formatting helpers: `get_layout` and
  `valid_layout_or_variant` pick a layout out of an xkb symbols name, and
  `format_indicators` renders a caps/num lock mask following a format such as
  `c?n?`.
- There is no configuration file; the command's line, interval and limit are
  set in code.