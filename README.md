# statline

statline collects small pieces of system information and joins them into a
single status line. Examples are the date and time, memory and swap use, CPU
load, network throughput, battery state, the WiFi ESSID and the output of your
own shell commands. It refreshes the line once a second. The line goes either
to standard output or to the X root window name, which many tiling window
managers show as their status text.

## Installation

```
pip install .
```

## Running

```
statline [-v] [-s] [-1]
```

- `-v` prints `statline-1.1` to standard error and exits with status 1.
- `-s` writes each status line to standard output. This suits bars that read
  from a pipe.
- `-1` writes the status line once to standard output and exits.
- You can combine flags, as in `-s1`. Any other flag or argument prints a usage
  message and exits with status 1.

Without `-s` or `-1`, statline sets the root window name by running
`xsetroot -name`. This needs `DISPLAY` to be set and `xsetroot` to be on the
`PATH`. If either is missing, statline reports
`XOpenDisplay: Failed to open display` and exits. When it stops, it sets the
root window name to an empty string.

While it runs, statline reacts to signals:

- `SIGUSR1` refreshes every entry at once.
- A real-time signal `SIGRTMIN+n` refreshes only the entries whose `signal`
  field is `n`.
- `SIGINT` and `SIGTERM` stop it.

## The default line

`statline.config.default_args()` returns the line that the command shows, from
left to right:

- the output of `~/scripts/middle_status.sh`
- `echo ';'`
- the receive speed of `wlan0`
- the output of `~/scripts/volume.sh`
- RAM in use
- CPU usage
- the ESSID of `wlan0`
- the output of `~/scripts/bluetooth.sh`
- the output of `~/scripts/battery.sh`
- the date and time

When an entry has no value, it shows `UNKNOWN_STR`, which is an empty string.
Each entry's text is limited to `CMDLEN` (128) bytes, terminator included.
Updates happen every `INTERVAL` (1000) milliseconds. All of these names come
from `statline.config`.

## Building your own line

An entry is a `statline.config.Arg`. It has five fields:

| field | meaning |
| --- | --- |
| `func` | the component function |
| `fmt` | a printf-style format holding one `%s` |
| `args` | the argument passed to `func` |
| `turn` | the entry refreshes every `turn` ticks |
| `signal` | the real-time signal offset that refreshes it, or `-1` for none |

`statline.cli.StatusBar` holds the latest text of every entry:

- `update(iteration, signo)` refreshes the entries that are due.
- `render()` returns the joined line.

```python
from statline.basic import datetime
from statline.cli import StatusBar
from statline.config import Arg
from statline.memory import ram_used

bar = StatusBar(
    [Arg(ram_used, "RAM %s | ", None, 2), Arg(datetime, "%s", "%H:%M", 1)],
    unknown_str="n/a",
    cmdlen=128,
)
bar.update(0, 0)
print(bar.render())
```

`statline.cli.parse_args(argv)` parses the command line flags into an
`Options` value. `statline.cli.main(argv=None)` runs the command.

## Components

Components are plain functions. Each takes one argument and returns a string,
or `None` when it cannot read a value. Most failures also print a warning to
standard error.

| function | module | argument |
| --- | --- | --- |
| `datetime` | `statline.basic` | strftime format, e.g. `%F %T` |
| `run_command` | `statline.basic` | shell command; the first line of its output |
| `cat` | `statline.basic` | path of a file; its first line |
| `disk_free`, `disk_perc`, `disk_total`, `disk_used` | `statline.basic` | mount point |
| `entropy`, `hostname`, `kernel_release`, `load_avg`, `uptime` | `statline.basic` | unused |
| `username`, `uid`, `gid` | `statline.basic` | unused |
| `num_files` | `statline.basic` | directory |
| `temp` | `statline.basic` | sensor file in millidegrees Celsius |
| `ram_free`, `ram_perc`, `ram_total`, `ram_used` | `statline.memory` | unused |
| `swap_free`, `swap_perc`, `swap_total`, `swap_used` | `statline.memory` | unused |
| `cpu_perc`, `cpu_freq` | `statline.cpu` | unused |
| `battery_perc`, `battery_state`, `battery_remaining` | `statline.power` | battery name, e.g. `BAT0` |
| `ipv4`, `ipv6`, `up` | `statline.network` | interface name |
| `netspeed_rx`, `netspeed_tx` | `statline.network` | interface name |
| `vol_perc` | `statline.volume` | OSS mixer device, e.g. `/dev/mixer` |
| `wifi_essid`, `wifi_perc` | `statline.wifi` | interface name |

Some components take a second argument that points at a different data source.
This helps with testing or unusual systems:

- `entropy(unused, path)` and `cpu_freq(unused, path)` take the file to read.
- The memory functions take `meminfo`, the meminfo file to read.
- The battery functions take `root`, the power-supply directory.

`cpu_perc`, `netspeed_rx` and `netspeed_tx` compare with their previous call,
so the first call returns `None`. For independent meters, make your own:

- `statline.cpu.CpuMeter(stat_path)`
- `statline.network.NetSpeed(direction, interval, sysfs_root)`, where
  `direction` is `"rx"` or `"tx"`.

Helpers:

- `statline.util.fmt_human(num, base)` formats sizes with decimal (1000) or
  binary (1024) prefixes. For example, `fmt_human(1536, 1024)` gives `"1.5 Ki"`.
  Any other base raises `ValueError`.
- `statline.util.read_text` and `statline.util.read_int` read small files.
- `statline.util.warn` prints warnings.
- `statline.memory.parse_meminfo(text)` turns meminfo text into a dict of kB
  values.
- `statline.wifi.rssi_to_perc(rssi)` maps dBm to a percentage.
- `statline.wifi.find_attr(attr, data)` extracts a netlink attribute payload.

## What it does not do

- It has no keyboard indicator or keyboard layout components.
- It does not talk to the X server itself; it only sets the root window name
  through `xsetroot`.
- Battery, CPU, memory, swap, network speed and WiFi readings come from Linux
  interfaces: `/proc`, `/sys` and nl80211 netlink.
- Volume is read only from an OSS mixer device.
- The layout is changed from Python, not through a configuration file.