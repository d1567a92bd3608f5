"""Rich-text summaries of a profiling run and the machine it ran on."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import List, Optional

from hotspotview.util import (
    format_cost,
    format_cost_relative,
    format_frequency,
    format_time_string,
)

_INDENT = "&nbsp;&nbsp;&nbsp;&nbsp;"
_METRIC_UNITS = ("B", "kB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")
_METRIC_BASE = 1000


class CostUnit(enum.Enum):
    """What the periods of a cost type measure."""

    UNKNOWN = "unknown"
    GENERIC = "generic"
    TIME = "time"


@dataclass
class CostSummary:
    """Totals for one cost type, e.g. one perf event."""

    label: str = ""
    sample_count: int = 0
    total_period: int = 0
    unit: CostUnit = CostUnit.GENERIC


@dataclass
class Summary:
    """Overview data of a parsed profiling run."""

    command: str = ""
    application_running_time: int = 0
    on_cpu_time: int = 0
    off_cpu_time: int = 0
    process_count: int = 0
    thread_count: int = 0
    sample_count: int = 0
    costs: List[CostSummary] = field(default_factory=list)
    lost_chunks: int = 0
    host_name: str = ""
    linux_kernel_version: str = ""
    perf_version: str = ""
    cpu_description: str = ""
    cpu_id: str = ""
    cpu_architecture: str = ""
    cpus_online: int = 0
    cpus_available: int = 0
    cpu_sibling_cores: str = ""
    cpu_sibling_threads: str = ""
    total_memory_in_kib: int = 0
    errors: List[str] = field(default_factory=list)


def _html_escape(text: str) -> str:
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


def _row(description: str, value: str) -> str:
    return f"<tr><td>{description}: </td><td>{value}</td></tr>"


def format_byte_size(size: int, precision: int = 1) -> str:
    """Format a byte count with SI prefixes (powers of 1000), e.g. ``1.5 kB``."""
    if size < 0:
        raise ValueError("size must not be negative")
    value = float(size)
    power = 0
    while value >= _METRIC_BASE and power < len(_METRIC_UNITS) - 1:
        value /= _METRIC_BASE
        power += 1
    if power == 0:
        return f"{size} {_METRIC_UNITS[0]}"
    return f"{value:.{precision}f} {_METRIC_UNITS[power]}"


def format_summary(summary: Summary) -> str:
    """Return the HTML table describing the run, its samples and costs."""
    has_cpu_times = summary.off_cpu_time > 0 or summary.on_cpu_time > 0
    running = summary.application_running_time

    parts = [
        "<qt><table>",
        _row("Command", f"<tt>{_html_escape(summary.command)}</tt>"),
        _row("Run Time", format_time_string(running)),
    ]
    if has_cpu_times:
        parts.append(_row(_INDENT + "On CPU Time", format_time_string(summary.on_cpu_time)))
        parts.append(_row(_INDENT + "Off CPU Time", format_time_string(summary.off_cpu_time)))
    parts.append(_row("Processes", str(summary.process_count)))
    parts.append(_row("Threads", str(summary.thread_count)))
    if has_cpu_times:
        parts.append(
            _row(_INDENT + "Avg. Running", format_cost_relative(summary.on_cpu_time, running * 100))
        )
        parts.append(
            _row(_INDENT + "Avg. Sleeping", format_cost_relative(summary.off_cpu_time, running * 100))
        )
    parts.append(
        _row(
            "Total Samples",
            f"{summary.sample_count} ({format_frequency(summary.sample_count, running)})",
        )
    )

    for cost in summary.costs:
        if not cost.sample_count:
            continue
        if cost.unit is CostUnit.TIME:
            # on/off CPU time is already shown above
            continue
        details = (
            f"{format_cost(cost.total_period)} "
            f"({format_cost(cost.sample_count)} samples, "
            f"{format_cost_relative(cost.sample_count, summary.sample_count)}% of total, "
            f"{format_frequency(cost.sample_count, running)})"
        )
        parts.append(_row(_INDENT + _html_escape(cost.label), details))
        if running and cost.sample_count * 1e9 / running < 100:
            parts.append(_row(_INDENT + "<b>WARNING</b>", "Sampling frequency below 100Hz"))

    parts.append(_row("Lost Chunks", str(summary.lost_chunks)))
    parts.append("</table></qt>")
    return "".join(parts)


def format_system_info(summary: Summary) -> str:
    """Return the HTML table describing the host, or ``""`` if it is unknown."""
    if not summary.host_name:
        return ""
    rows = [
        _row("Host Name", summary.host_name),
        _row("Linux Kernel Version", summary.linux_kernel_version),
        _row("Perf Version", summary.perf_version),
        _row("CPU Description", summary.cpu_description),
        _row("CPU ID", summary.cpu_id),
        _row("CPU Architecture", summary.cpu_architecture),
        _row("CPUs Online", str(summary.cpus_online)),
        _row("CPUs Available", str(summary.cpus_available)),
        _row("CPU Sibling Cores", summary.cpu_sibling_cores),
        _row("CPU Sibling Threads", summary.cpu_sibling_threads),
        _row("Total Memory", format_byte_size(summary.total_memory_in_kib * 1024, 1)),
    ]
    return "<qt><table>" + "".join(rows) + "</table></qt>"


def lost_chunks_message(lost_chunks: int) -> Optional[str]:
    """Return a warning about lost chunks, or ``None`` when nothing was lost."""
    if lost_chunks <= 0:
        return None
    if lost_chunks == 1:
        return "Lost one chunk - Check IO/CPU overload!"
    return f"Lost {lost_chunks} chunks - Check IO/CPU overload!"