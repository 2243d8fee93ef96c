# smiview

Building blocks for a terminal-based hardware monitoring view: text
measurement and coloured output, screen layout arithmetic, a process
table, host tabs, a full-screen help page, the function-key status line,
timed notifications, a flicker-free line renderer, mount-point filtering
and a few host helpers.

The package has no third-party dependencies. Renderers write plain ANSI
escape sequences to any text stream, so they can be pointed at
`sys.stdout` or at an `io.StringIO` for inspection.

## Installation

Install it with pip from a checkout; the `test` extra pulls in pytest.

## Modules

| Module | Purpose |
| --- | --- |
| `smiview.text` | `Color`, `display_width`, `truncate_to_width`, `format_ram_value`, `print_colored_text`, `move_to` |
| `smiview.notification` | `Notification`, `NotificationManager`, `NotificationType` and the `NotificationError` family |
| `smiview.layout` | `calculate_header_lines`, `calculate_content_area`, `calculate_progress_bar_layout`, `calculate_table_columns`, `ColumnSpec`, `process_table_columns`, `device_table_columns` |
| `smiview.disk_filter` | `DiskFilter`, `DiskEntry`, `is_primary_mount_point`, `filter_docker_aware_disks` |
| `smiview.system` | `get_hostname`, `has_sudo_privileges`, `calculate_adaptive_interval`, `ensure_sudo_permissions`, `ensure_sudo_permissions_with_fallback` |
| `smiview.chrome` | `SortCriteria`, `SortDirection`, `function_keys_text`, `print_function_keys`, `print_loading_indicator` |
| `smiview.help` | `generate_help_popup_content`, `strip_ansi_codes`, `calculate_display_width`, `sort_status_text` |
| `smiview.buffer` | `DifferentialRenderer`, which rewrites only the lines that changed |
| `smiview.tabs` | `HostStatus`, `draw_tabs`, `calculate_tab_visibility`, `tab_display_name` |
| `smiview.process_format` | `ProcessRow`, `print_process_info`, `format_memory_size`, `format_cpu_time`, `build_process_header` |

## Examples

Formatting helpers:

```python
from smiview.text import format_ram_value, truncate_to_width
from smiview.process_format import format_cpu_time, format_memory_size

format_ram_value(2048.0)               # "2.00TB"
truncate_to_width("NVIDIA H100", 6)    # "NVIDIA"
format_cpu_time(3725)                  # "1:02:05"
format_memory_size(500 * 1024 * 1024)  # "500M"
```

Distributing spare width over table columns by weight:

```python
from smiview.layout import ColumnSpec, calculate_table_columns

specs = [ColumnSpec("A", 10, 1.0), ColumnSpec("B", 15, 2.0), ColumnSpec("C", 5, 0.5)]
calculate_table_columns(50, specs)     # [15, 25, 7]
```

Filtering mount points:

```python
from smiview.disk_filter import DiskFilter, is_primary_mount_point

disk_filter = DiskFilter()
disk_filter.should_include("/home/user")       # True
disk_filter.should_include("/proc/meminfo")    # False
is_primary_mount_point("/usr/bin/nvidia-smi")  # False
```

`filter_docker_aware_disks` takes `DiskEntry(name, mount_point, file_system)`
values that the caller has gathered; on a device with more than five
mounts only primary directory mounts are kept, and overlay root
filesystems are always kept when they pass the basic filter.

Notifications expire after four seconds unless given another duration:

```python
from smiview.notification import NotificationManager

manager = NotificationManager()
manager.warning("Warning: host unreachable")
manager.current_message()   # "Warning: host unreachable"
manager.clear()
manager.has_notification()  # False
```

Messages longer than 200 bytes raise `MessageTooLongError`, and a
duration that is not positive raises `InvalidDurationError`; both derive
from `NotificationError`.

Rendering into a string buffer:

```python
import io
from smiview.chrome import SortCriteria, SortDirection, print_function_keys
from smiview.process_format import ProcessRow, print_process_info

out = io.StringIO()
print_function_keys(out, 120, 40, SortCriteria.DEFAULT, None, False)

rows = [ProcessRow(pid=42, user="alice", cpu_percent=12.5, command="python train.py")]
print_process_info(out, rows, 0, 0, 20, 120, 0, "alice",
                   SortCriteria.PID, SortDirection.ASCENDING)
```

`DifferentialRenderer` accepts an output stream and a size provider, so
it can be driven without a real terminal:

```python
import io
from smiview.buffer import DifferentialRenderer

renderer = DifferentialRenderer(io.StringIO(), lambda: (80, 24))
renderer.render_differential("line one\nline two")
```

Polling interval for a cluster, which grows with the number of nodes:

```python
from smiview.system import calculate_adaptive_interval

calculate_adaptive_interval(10)   # 2
calculate_adaptive_interval(150)  # 5
```

`get_hostname` runs the `hostname` command and `has_sudo_privileges` runs
`sudo -n -v`. On macOS, `ensure_sudo_permissions` and
`ensure_sudo_permissions_with_fallback` explain why privileges are needed
and run `sudo -v`, raising `SystemExit(1)` if that fails; on other
platforms they only print a note or return `True`.

## What this package does not do

- It has no command and no main loop: nothing reads the keyboard, polls
  hosts or assembles a full screen. Callers combine the renderers
  themselves.
- It does not collect metrics. There is no GPU, CPU, memory or disk
  reading; process rows and disk entries are supplied by the caller.
- It has no GPU, CPU, memory or disk panels and no cluster dashboard or
  history graphs; only the process table, tabs, help page and
  function-key line are rendered.
- It has no network client or metrics server.