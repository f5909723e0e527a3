#!/usr/bin/env python3
# -*- coding:utf-8 -*-
"""
@file   Orchestrator.py

@author muFFTCheck developers

@date   18 Oct 2026

@brief  Driver running the case matrix against FFT backends

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

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

import numpy as np

from .Cases import Precision, TransformCase, default_cases
from .Dimensions import DEFAULT_CEILING
from .Errors import ConfigurationError, ToleranceError, UnsupportedCaseError
from .Layout import (complex_embedding, extract_non_redundant,
                     nb_round_trip_values, real_input)
from .Reference import ReferenceFFT
from .Stimulus import generate_stimulus
from .Timer import Timer
from .Tolerance import FORWARD, ROUND_TRIP, compare, tolerance_for


class Stage(Enum):
    # The shape is normalised first, the stimulus length depends on it
    select_case = 'SelectCase'
    normalize_shape = 'NormalizeShape'
    generate_stimulus = 'GenerateStimulus'
    run_forward = 'RunForward'
    compare_forward = 'CompareForward'
    run_inverse = 'RunInverse'
    compare_round_trip = 'CompareRoundTrip'
    passed = 'Pass'
    failed = 'Fail'
    done = 'Done'


@dataclass(frozen=True)
class HarnessConfig:
    """
    Settings of one verification run.

    Parameters
    ----------
    precision : Precision
        Precision of all cases. (Default: single)
    backends : tuple of str
        Identifiers of the backends to check. Empty means every backend
        available in this process.
    seed : int
        Seed of the stimulus generator.
    ceiling : int
        Largest grid extent the dimension search considers.
    timings : bool
        Print a timing summary at the end of the run.
    """
    precision: Precision = Precision.single
    backends: Tuple[str, ...] = ()
    seed: int = 0
    ceiling: int = DEFAULT_CEILING
    timings: bool = False

    def __post_init__(self):
        if isinstance(self.precision, str):
            object.__setattr__(self, 'precision',
                               Precision.from_string(self.precision))


@dataclass
class CaseReport:
    backend: str
    case: TransformCase
    forward: object = None
    round_trip: object = None


@dataclass
class RunReport:
    passed: List[CaseReport] = field(default_factory=list)
    skipped: List[Tuple[str, TransformCase, str]] = field(default_factory=list)
    errors: List[Tuple[str, TransformCase, str]] = field(default_factory=list)

    @property
    def succeeded(self):
        return len(self.errors) == 0


class Orchestrator:
    """
    Runs every case against every backend, one case at a time.

    For each case the requested shape is first normalised to one the
    backend can process, then a seeded stimulus of that shape is
    transformed forward on the backend and by the reference transform and
    the two spectra are compared. The backend's inverse transform must
    then recover the stimulus up to the factor X*Y*Z.

    A numerical mismatch raises ToleranceError and ends the run. Cases a
    backend reports as unsupported are skipped; configuration errors
    abort the case and are collected in the report.

    Parameters
    ----------
    config : HarnessConfig
    backends : list of FFTBackend subclasses
    cases : list of TransformCase, optional
        Defaults to the standard case matrix for `config.precision`.
    timer : Timer, optional
    """

    def __init__(self, config, backends, cases=None, timer=None):
        self.config = config
        self.backends = list(backends)
        if cases is None:
            cases = default_cases(config.precision)
        self.cases = list(cases)
        self.timer = Timer() if timer is None else timer
        self.stage = Stage.select_case
        self.current_case: Optional[TransformCase] = None

    def _reference_input(self, case, stimulus):
        if case.kind.is_real_to_complex:
            return complex_embedding(real_input(stimulus, case.nb_grid_pts))
        return stimulus.astype(np.complex128)

    def _check(self, case, check, result):
        if not result.passed:
            self.stage = Stage.failed
            raise ToleranceError(case, check, result)

    def verify_case(self, factory, requested):
        """
        Verify one case on one backend. Returns a CaseReport on success.

        Raises
        ------
        UnsupportedCaseError
            If the backend cannot run the case.
        ToleranceError
            If the forward or round-trip comparison fails.
        """
        timer = self.timer
        self.stage = Stage.normalize_shape
        case = factory.normalise(requested, self.config.ceiling)
        self.current_case = case
        print(case)
        nx, ny, nz = case.dims
        real_to_complex = case.kind.is_real_to_complex
        report = CaseReport(factory.name, case)

        self.stage = Stage.generate_stimulus
        with timer('stimulus'):
            stimulus = generate_stimulus(self.config.seed, case.nb_grid_pts,
                                         case.precision)

        backend = factory(case)
        backend.upload(stimulus)

        self.stage = Stage.run_forward
        with timer('forward'):
            spectrum = backend.execute_forward().download()

        self.stage = Stage.compare_forward
        with timer('reference'):
            reference = ReferenceFFT(case.dims).forward(
                self._reference_input(case, stimulus))
            expected = extract_non_redundant(reference, case.dims,
                                             real_to_complex)
        with timer('compare'):
            report.forward = compare(expected, spectrum,
                                     tolerance_for(case, FORWARD),
                                     shape=(nx, ny, case.nb_packed_z))
        self._check(case, FORWARD, report.forward)

        self.stage = Stage.run_inverse
        with timer('inverse'):
            recovered = backend.execute_inverse().download()

        self.stage = Stage.compare_round_trip
        nb_values = nb_round_trip_values(case.nb_grid_pts, real_to_complex)
        scale = 1.0 / case.nb_grid_pts
        with timer('compare'):
            report.round_trip = compare(
                stimulus[:nb_values],
                scale * recovered[:nb_values].astype(np.complex128),
                tolerance_for(case, ROUND_TRIP))
        self._check(case, ROUND_TRIP, report.round_trip)

        self.stage = Stage.passed
        return report

    def run_backend(self, factory, report):
        print('Testing {}'.format(factory.name))
        with self.timer(factory.name):
            for requested in self.cases:
                self.stage = Stage.select_case
                self.current_case = requested
                try:
                    with self.timer(requested.kind.value + ' ' + 'x'.join(
                            str(n) for n in requested.dims)):
                        report.passed.append(
                            self.verify_case(factory, requested))
                except UnsupportedCaseError as err:
                    print('Skipping case on {}: {}'.format(factory.name, err))
                    report.skipped.append((factory.name, requested, str(err)))
                except ConfigurationError as err:
                    print('Configuration error on {}: {}'
                          .format(factory.name, err))
                    report.errors.append((factory.name, requested, str(err)))

    def run(self):
        """
        Run all cases on all backends. ToleranceError and unexpected
        exceptions propagate to the caller.
        """
        report = RunReport()
        for factory in self.backends:
            self.run_backend(factory, report)
        self.stage = Stage.done
        self.current_case = None
        if self.config.timings:
            self.timer.print_summary()
        return report
