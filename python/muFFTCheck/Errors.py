#!/usr/bin/env python3
# -*- coding:utf-8 -*-
"""
@file   Errors.py

@author muFFTCheck developers

@date   18 Oct 2026

@brief  Exception hierarchy of the FFT verification harness

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


class ConfigurationError(RuntimeError):
    """
    The harness was asked for something it cannot set up, e.g. a grid
    extent without a legal dimension below the search ceiling or a
    precision nobody knows about. Aborts the current case.
    """
    pass


class UnsupportedCaseError(Exception):
    """
    Raised by a backend for a case it cannot process (precision, volume
    size). The orchestrator skips the case for this backend only.
    """
    pass


class ToleranceError(AssertionError):
    """
    Numerical mismatch between a backend and the reference transform.
    Fatal to the whole run.
    """

    def __init__(self, case, check, result):
        self.case = case
        self.check = check
        self.result = result
        super().__init__('{} check failed for {}: {}'
                         .format(check, case, result))


class UnknownBackendError(Exception):
    """
    Exception used to indicate an unknown FFT backend identifier.
    """
    pass
