#!/usr/bin/env python3
# -*- coding:utf-8 -*-
"""
@file   Timer.py

@author muFFTCheck developers

@date   18 Oct 2026

@brief  Hierarchical timing of the stages of a verification run

Copyright © 2026 muFFTCheck developers

µFFTCheck is free software; you can redistribute it and/or
modify it under the terms of the GNU Lesser General Public License as
published by the Free Software Foundation, either version 3, or (at
your option) any later version.

µFFTCheck is distributed in the hope that it will be useful, but
WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU
Lesser General Public License for more details.

You should have received a copy of the GNU Lesser General Public License
along with µFFTCheck; see the file COPYING. If not, write to the
Free Software Foundation, Inc., 59 Temple Place - Suite 330,
Boston, MA 02111-1307, USA.

Additional permission under GNU GPL version 3 section 7

If you modify this Program, or any covered work, by linking or combining it
with proprietary FFT implementations or numerical libraries, containing parts
covered by the terms of those libraries' licenses, the licensors of this
Program grant you additional permission to convey the resulting work.
"""

import time
from contextlib import contextmanager


class Timer:
    """
    Hierarchical timing utility with nested context manager support.

    Timers opened inside other timers are recorded as their children, and
    repeated use of the same name accumulates time and call counts. The
    orchestrator wraps every backend, case and stage of a run in a timer,
    so the summary breaks the run time down into stimulus generation,
    reference transforms, backend transforms and comparisons.

    Example usage:
        timer = Timer()

        with timer("NumpyFFT"):
            with timer("forward"):
                ...
            with timer("compare"):
                ...

        timer.print_summary()
    """

    def __init__(self):
        self._timers = {}  # full name -> {"total", "calls", "children"}
        self._stack = []   # full names of the open timers
        self._roots = []   # top-level timer names in order of first use

    @contextmanager
    def __call__(self, name):
        """
        Context manager for timing a named code section.

        Args:
            name: Identifier for this timing section. Repeated calls with the
                  same name accumulate time and increment the call counter.
        """
        if self._stack:
            parent = self._stack[-1]
            full_name = f"{parent}/{name}"
        else:
            parent = None
            full_name = name

        if full_name not in self._timers:
            self._timers[full_name] = {"total": 0.0, "calls": 0,
                                       "children": []}
            if parent is None:
                self._roots.append(full_name)
            else:
                self._timers[parent]["children"].append(full_name)

        start = time.perf_counter()
        self._stack.append(full_name)
        try:
            yield
        finally:
            self._stack.pop()
            self._timers[full_name]["total"] += time.perf_counter() - start
            self._timers[full_name]["calls"] += 1

    def _lookup(self, name):
        if name in self._timers:
            return self._timers[name]
        # Short names match the last component of the hierarchical name
        for full_name, info in self._timers.items():
            if full_name.endswith("/" + name):
                return info
        return None

    def get_calls(self, name):
        """Number of calls, 0 for unknown timers."""
        info = self._lookup(name)
        return 0 if info is None else info["calls"]

    def _format_time(self, seconds):
        """Format time with appropriate units, fixed width."""
        if seconds < 1e-6:
            return f"{seconds * 1e9:8.2f} ns"
        elif seconds < 1e-3:
            return f"{seconds * 1e6:8.2f} us"
        elif seconds < 1:
            return f"{seconds * 1e3:8.2f} ms"
        else:
            return f"{seconds:8.4f} s "

    def _collect_rows(self, name, indent, parent_time, rows):
        info = self._timers[name]
        total = info["total"]
        calls = info["calls"]
        pct = 100.0 * total / parent_time if parent_time else None
        rows.append((indent, name.split("/")[-1], total, calls,
                     total / calls if calls > 1 else None, pct))
        for child in info["children"]:
            self._collect_rows(child, indent + 1, total, rows)
        return rows

    def print_summary(self, title="Timing Summary", name_width=30):
        """Print hierarchical timing summary in tabular format."""
        if not self._timers:
            print("No timing data collected.")
            return

        rows = []
        for root in self._roots:
            self._collect_rows(root, 0, None, rows)

        line_width = 78
        print(f"\n{'=' * line_width}")
        print(title)
        print(f"{'=' * line_width}")
        print(f"{'Name':<{name_width}} {'Total':>12} {'Calls':>8} "
              f"{'Average':>12} {'% Parent':>10}")
        print(f"{'-' * name_width} {'-' * 12} {'-' * 8} {'-' * 12} {'-' * 10}")
        for indent, name, total, calls, avg, pct in rows:
            name = "  " * indent + name
            if len(name) > name_width:
                name = name[:name_width - 3] + "..."
            avg_str = self._format_time(avg) if avg is not None \
                else f"{'-':>12}"
            pct_str = f"{pct:>9.1f}%" if pct is not None else f"{'-':>10}"
            print(f"{name:<{name_width}} {self._format_time(total)} "
                  f"{calls:>8} {avg_str} {pct_str}")
        print(f"{'=' * line_width}")

