#!/usr/bin/env python3
# -*- coding:utf-8 -*-
"""
@file   CommandLine.py

@author muFFTCheck developers

@date   18 Oct 2026

@brief  Command line interface of the FFT verification harness

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

import argparse

import muFFTCheck
from .Cases import Precision
from .Orchestrator import HarnessConfig, Orchestrator

parser = argparse.ArgumentParser(
    prog="fft3d_check",
    description="Verify 3D FFT backends against a reference transform"
)

parser.add_argument(
    "precision",
    nargs="?",
    default=Precision.single.value,
    help="Floating point precision of the grids, 'single' or 'double' "
         "(default: single)"
)

parser.add_argument(
    "-b", "--backend",
    action="append",
    dest="backends",
    default=None,
    help="FFT backend to check, can be given multiple times. One of "
         "'numpy', 'cupy', 'host', 'device' or 'default' "
         "(default: all available)"
)

parser.add_argument(
    "-s", "--seed",
    type=int,
    default=0,
    help="Seed of the random stimulus (default: 0)"
)

parser.add_argument(
    "-t", "--timings",
    action="store_true",
    help="Print a timing summary at the end of the run (default: off)"
)


def make_config(args):
    return HarnessConfig(precision=Precision.from_string(args.precision),
                         backends=tuple(args.backends or ()),
                         seed=args.seed,
                         timings=args.timings)


def resolve_backends(config):
    if config.backends:
        return [muFFTCheck.get_backend_factory(name)
                for name in config.backends]
    return [factory for factory, memory_location
            in muFFTCheck.fft_backends.values()]


def main(argv=None):
    """
    Run the harness. Returns the process exit code: 0 if every case
    passed or was skipped, 1 on any failure.
    """
    args = parser.parse_args(argv)
    try:
        config = make_config(args)
        report = Orchestrator(config, resolve_backends(config)).run()
    except Exception as e:
        print("exception: {}".format(e))
        return 1
    if not report.succeeded:
        for backend, case, message in report.errors:
            print("error: {} on {}: {}".format(case, backend, message))
        return 1
    print("Done")
    return 0
