#!/usr/bin/env python3
# -*- coding:utf-8 -*-
"""
@file   __init__.py

@author muFFTCheck developers

@date   18 Oct 2026

@brief  Main entry point for the muFFTCheck Python module

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

import warnings

from .Backends import CupyFFT, FFTBackend, NumpyFFT
from .Cases import Precision, TransformCase, TransformKind, default_cases
from .Dimensions import find_legal_dimension, legal_dimension_predicate
from .Errors import (ConfigurationError, ToleranceError, UnknownBackendError,
                     UnsupportedCaseError)
from .Orchestrator import HarnessConfig, Orchestrator, Stage
from .Reference import ReferenceFFT
from .Stimulus import generate_stimulus
from .Timer import Timer
from .Tolerance import ComparisonResult, compare

__version__ = '0.1.0'

# This is a list of FFT backends that are potentially available.
#               |---------------------------- String identifier for backend
#               |          |----------------- Backend class
#               v          v          v------ Memory location of the grids
_factories = {'numpy': (NumpyFFT, 'host'),
              'cupy': (CupyFFT, 'device')}


# Detect FFT backends. This is a convenience dictionary that allows
# enumeration of all backends usable in the running process.
def _find_fft_backends():
    fft_backends = {}
    for name, (factory, memory_location) in _factories.items():
        try:
            available = factory.is_available()
        except RuntimeError as e:
            warnings.warn("FFT backend '{}' could not be initialized and "
                          "will not be checked: {}".format(name, e))
            continue
        if available:
            fft_backends[name] = (factory, memory_location)
    return fft_backends


fft_backends = _find_fft_backends()


def mangle_backend_identifier(backend):
    """
    Return normalized backend identifier. This will turn 'host', 'device'
    and 'default' identifiers into the respective backend available in the
    running process. 'default' is the device backend if there is one and
    the host backend otherwise.

    Parameters
    ----------
    backend : string
        FFT backend to use. Use 'device' for a backend running on the
        accelerator and 'host' for one running on the CPU. It is also
        possible to specifically choose 'numpy' or 'cupy'.
    """
    if backend == 'host':
        return 'numpy'
    elif backend == 'default':
        for name, (factory, memory_location) in fft_backends.items():
            if memory_location == 'device':
                return name
        return 'numpy'
    elif backend == 'device':
        for name, (factory, memory_location) in fft_backends.items():
            if memory_location == 'device':
                return name
        raise UnknownBackendError('No device FFT backend is available. '
                                  'Is CuPy installed and a GPU visible?')
    return backend


def get_backend_factory(backend):
    """
    Get backend class given its string identifier.

    Parameters
    ----------
    backend : string
        FFT backend to use, see `mangle_backend_identifier`.
    """
    name = mangle_backend_identifier(backend)
    try:
        factory, memory_location = fft_backends[name]
    except KeyError:
        raise UnknownBackendError(
            "FFT backend with identifier '{}' (internally mangled to '{}') "
            "does not exist or is not available in this process."
            .format(backend, name))
    return factory


__all__ = [
    "ComparisonResult",
    "ConfigurationError",
    "CupyFFT",
    "FFTBackend",
    "HarnessConfig",
    "NumpyFFT",
    "Orchestrator",
    "Precision",
    "ReferenceFFT",
    "Stage",
    "Timer",
    "ToleranceError",
    "TransformCase",
    "TransformKind",
    "UnknownBackendError",
    "UnsupportedCaseError",
    "compare",
    "default_cases",
    "fft_backends",
    "find_legal_dimension",
    "generate_stimulus",
    "get_backend_factory",
    "legal_dimension_predicate",
    "mangle_backend_identifier",
]
