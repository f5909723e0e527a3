#!/usr/bin/env python3
# -*- coding:utf-8 -*-
"""
@file   Backends.py

@author muFFTCheck developers

@date   18 Oct 2026

@brief  Uniform execution interface for FFT engines under test

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

import numpy as np

from .Buffer import DeviceBuffer, _get_cupy
from .Cases import Precision
from .Dimensions import (DEFAULT_CEILING, find_legal_dimension, is_smooth,
                         normalise_shape)
from .Errors import UnsupportedCaseError

_axes = (0, 1, 2)


class FFTBackend:
    """
    Base class of all FFT backends checked by the harness.

    A backend instance is created for exactly one transform case. It owns
    the pair of grids the transform operates on: the input grid holds the
    full real-space volume, the output grid holds the (possibly packed)
    Fourier-space volume. `execute_forward` transforms input into output,
    `execute_inverse` transforms output back into input. Both directions
    are unnormalised and both block until the transform has completed.

    Subclasses set the class attributes describing their capabilities and
    implement `_forward` and `_inverse`.

    Class attributes
    ----------------
    name : str
        Human readable name.
    radices : tuple of int or None
        Prime factors a grid extent may consist of. None for no
        restriction.
    memory_location : str
        Where the grids live, "host" or "device".
    supported_precisions : tuple of Precision
    max_nb_grid_pts : int or None
        Largest volume the backend accepts.
    """
    name = None
    radices = None
    memory_location = "host"
    supported_precisions = (Precision.single, Precision.double)
    max_nb_grid_pts = None

    def __init__(self, case):
        self.check_supported(case)
        self.case = case
        element_size = case.precision.element_size
        self.input_grid = self.allocate(case.nb_grid_pts, element_size,
                                        'grid1')
        self.output_grid = self.allocate(case.nb_output_pts, element_size,
                                         'grid2')

    @classmethod
    def is_available(cls):
        """Whether the engine can be used in the running process."""
        return True

    @classmethod
    def is_legal_dimension(cls, n):
        return is_smooth(n, cls.radices)

    @classmethod
    def find_legal_dimension(cls, minimum, ceiling=DEFAULT_CEILING):
        return find_legal_dimension(minimum, cls.is_legal_dimension, ceiling)

    @classmethod
    def normalise(cls, case, ceiling=DEFAULT_CEILING):
        """Return `case` with every extent replaced by a legal one."""
        return case.with_dims(
            normalise_shape(case.dims, cls.is_legal_dimension, ceiling))

    @classmethod
    def check_supported(cls, case):
        """
        Raise UnsupportedCaseError if this engine cannot run `case`. Only
        capability limits are checked here, never numerical quality.
        """
        if case.precision not in cls.supported_precisions:
            raise UnsupportedCaseError(
                "{} does not support {} precision"
                .format(cls.name, case.precision.value))
        if cls.max_nb_grid_pts is not None and \
                case.nb_grid_pts > cls.max_nb_grid_pts:
            raise UnsupportedCaseError(
                "{} supports at most {} grid points, case has {}"
                .format(cls.name, cls.max_nb_grid_pts, case.nb_grid_pts))
        if not all(cls.is_legal_dimension(n) for n in case.dims):
            raise UnsupportedCaseError(
                "{} cannot process a {} grid; normalise the shape first"
                .format(cls.name, case.dims))

    def allocate(self, nb_elements, element_size, name):
        return DeviceBuffer(nb_elements, element_size, name,
                            memory_location=self.memory_location)

    def upload(self, values):
        """Copy host values to the beginning of the input grid."""
        self.input_grid.upload(values)

    def synchronize(self):
        """Block until all queued device work has finished."""
        pass

    def execute_forward(self):
        """Forward transform input grid -> output grid."""
        self._forward(self.input_grid, self.output_grid)
        self.synchronize()
        return self.output_grid

    def execute_inverse(self):
        """Unnormalised inverse transform output grid -> input grid."""
        self._inverse(self.output_grid, self.input_grid)
        self.synchronize()
        return self.input_grid

    def _forward(self, input_grid, output_grid):
        raise NotImplementedError

    def _inverse(self, input_grid, output_grid):
        raise NotImplementedError

    def __repr__(self):
        return '{}({})'.format(type(self).__name__, self.case)


class ArrayModuleFFT(FFTBackend):
    """
    Backend for array libraries exposing a numpy compatible `fft` module.
    The array module is returned by `array_module()`.
    """

    @classmethod
    def array_module(cls):
        raise NotImplementedError

    def _real_view(self, grid):
        """First X*Y*Z real values of a complex grid."""
        real_dtype = self.case.precision.real_dtype
        return grid.data.view(real_dtype)[:self.case.nb_grid_pts]

    def _forward(self, input_grid, output_grid):
        xp = self.array_module()
        dims = self.case.dims
        if self.case.kind.is_real_to_complex:
            values = self._real_view(input_grid).reshape(dims)
            result = xp.fft.rfftn(values, axes=_axes)
        else:
            values = input_grid.data.reshape(dims)
            result = xp.fft.fftn(values, axes=_axes)
        output_grid.data[...] = result.reshape(-1)

    def _inverse(self, input_grid, output_grid):
        xp = self.array_module()
        dims = self.case.dims
        nx, ny, nz = dims
        # norm='forward' puts the 1/N factor on the forward transform, so
        # the inverse is left unnormalised.
        if self.case.kind.is_real_to_complex:
            values = input_grid.data.reshape(nx, ny, self.case.nb_packed_z)
            result = xp.fft.irfftn(values, s=dims, axes=_axes, norm='forward')
            self._real_view(output_grid)[...] = result.reshape(-1)
        else:
            values = input_grid.data.reshape(dims)
            result = xp.fft.ifftn(values, axes=_axes, norm='forward')
            output_grid.data[...] = result.reshape(-1)


class NumpyFFT(ArrayModuleFFT):
    """
    PocketFFT as shipped with numpy, operating on host memory. Accepts
    every grid extent.
    """
    name = 'NumpyFFT'

    @classmethod
    def array_module(cls):
        return np


class CupyFFT(ArrayModuleFFT):
    """
    cuFFT (or hipFFT on ROCm) through CuPy, operating on device memory.
    Grid extents are restricted to products of the radices cuFFT has
    dedicated kernels for.
    """
    name = 'CupyFFT'
    radices = (2, 3, 5, 7)
    memory_location = "device"

    @classmethod
    def array_module(cls):
        return _get_cupy()

    @classmethod
    def is_available(cls):
        """
        False if CuPy is not installed. Errors of the CUDA or ROCm runtime
        are raised, the registry reports them.
        """
        try:
            cp = _get_cupy()
        except ImportError:
            return False
        return cp.cuda.runtime.getDeviceCount() > 0

    @classmethod
    def check_supported(cls, case):
        super().check_supported(case)
        cp = _get_cupy()
        free_bytes, total_bytes = cp.cuda.Device().mem_info
        # Two grids plus the work area of the plan, which is at most the
        # size of the output grid.
        required = case.precision.element_size * \
            (case.nb_grid_pts + 2 * case.nb_output_pts)
        if required > free_bytes:
            raise UnsupportedCaseError(
                "{} needs {} bytes of device memory, only {} are free"
                .format(cls.name, required, free_bytes))

    def synchronize(self):
        _get_cupy().cuda.get_current_stream().synchronize()
