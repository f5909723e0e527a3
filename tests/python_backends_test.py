#!/usr/bin/env python3
# -*- coding:utf-8 -*-
"""
@file   python_backends_test.py

@author muFFTCheck developers

@date   18 Oct 2026

@brief  Compare the FFT backends to numpy's fft

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

import unittest
from types import SimpleNamespace
from unittest import mock

import numpy as np

from python_test_imports import muFFTCheck
from muFFTCheck import (CupyFFT, NumpyFFT, Precision, TransformCase,
                        TransformKind, UnknownBackendError,
                        UnsupportedCaseError)
from muFFTCheck.Buffer import DeviceBuffer

GPU_AVAILABLE = 'cupy' in muFFTCheck.fft_backends


class DeviceBuffer_Check(unittest.TestCase):
    def test_host_buffer(self):
        buffer = DeviceBuffer(10, 8, 'grid1')
        self.assertEqual(buffer.dtype, np.complex64)
        self.assertFalse(buffer.is_on_gpu)
        buffer.upload(np.arange(4) + 1j)
        data = buffer.download()
        np.testing.assert_array_equal(data[:4], np.arange(4) + 1j)
        np.testing.assert_array_equal(data[4:], 0)
        # Download returns a copy
        data[0] = 42
        self.assertEqual(buffer.download()[0], 0 + 1j)

    def test_oversized_upload(self):
        buffer = DeviceBuffer(3, 16, 'grid2')
        with self.assertRaises(ValueError):
            buffer.upload(np.zeros(4))

    def test_invalid_arguments(self):
        with self.assertRaises(ValueError):
            DeviceBuffer(3, 4, 'grid')
        with self.assertRaises(ValueError):
            DeviceBuffer(3, 8, 'grid', memory_location='disk')

    @unittest.skipUnless(GPU_AVAILABLE, 'No GPU available')
    def test_device_buffer(self):
        import cupy as cp
        buffer = DeviceBuffer(5, 16, 'grid1', memory_location='device')
        self.assertTrue(buffer.is_on_gpu)
        self.assertIsInstance(buffer.data, cp.ndarray)
        buffer.upload(np.ones(5))
        data = buffer.download()
        self.assertIsInstance(data, np.ndarray)
        np.testing.assert_array_equal(data, 1)


class FFTBackend_Check(unittest.TestCase):
    def setUp(self):
        #               v- grid
        #                          v- real-to-complex?
        self.grids = [((6, 4, 5), False),
                      ((6, 4, 5), True),
                      ((3, 5, 8), True),
                      ((7, 2, 1), False)]
        self.backends = [NumpyFFT]
        if GPU_AVAILABLE:
            self.backends += [CupyFFT]

    def make_case(self, dims, real_to_complex, precision=Precision.double):
        kind = (TransformKind.real_to_complex if real_to_complex
                else TransformKind.complex_to_complex)
        return TransformCase(dims, kind, precision)

    def test_grid_sizes(self):
        for factory in self.backends:
            backend = factory(self.make_case((3, 5, 8), True,
                                             Precision.single))
            self.assertEqual(backend.input_grid.nb_elements, 3*5*8)
            self.assertEqual(backend.output_grid.nb_elements, 3*5*5)
            self.assertEqual(backend.input_grid.element_size, 8)
            backend = factory(self.make_case((3, 5, 8), False))
            self.assertEqual(backend.output_grid.nb_elements, 3*5*8)
            self.assertEqual(backend.output_grid.element_size, 16)

    def test_forward_transform(self):
        for factory in self.backends:
            for dims, real_to_complex in self.grids:
                case = self.make_case(dims, real_to_complex)
                np.random.seed(1)
                data = np.random.random(case.nb_grid_pts) + \
                    1j * np.random.random(case.nb_grid_pts)
                backend = factory(case)
                backend.upload(data)
                out = backend.execute_forward().download()
                if real_to_complex:
                    real = data.view(float)[:case.nb_grid_pts].reshape(dims)
                    ref = np.fft.rfftn(real)
                else:
                    ref = np.fft.fftn(data.reshape(dims))
                np.testing.assert_allclose(
                    out, ref.ravel(), rtol=1e-12, atol=1e-12,
                    err_msg='{} backend, {}'.format(factory.name, case))

    def test_round_trip(self):
        for factory in self.backends:
            for dims, real_to_complex in self.grids:
                case = self.make_case(dims, real_to_complex)
                np.random.seed(2)
                data = np.random.random(case.nb_grid_pts) + \
                    1j * np.random.random(case.nb_grid_pts)
                backend = factory(case)
                backend.upload(data)
                backend.execute_forward()
                out = backend.execute_inverse().download()
                n = case.nb_grid_pts // 2 if real_to_complex \
                    else case.nb_grid_pts
                # Both directions are unnormalised
                np.testing.assert_allclose(
                    out[:n] / case.nb_grid_pts, data[:n], rtol=1e-12,
                    atol=1e-12,
                    err_msg='{} backend, {}'.format(factory.name, case))

    def test_single_precision(self):
        for factory in self.backends:
            case = self.make_case((6, 4, 5), False, Precision.single)
            backend = factory(case)
            backend.upload(np.ones(case.nb_grid_pts))
            out = backend.execute_forward().download()
            self.assertEqual(out.dtype, np.complex64)
            self.assertAlmostEqual(out[0], case.nb_grid_pts, places=3)
            np.testing.assert_allclose(out[1:], 0, atol=1e-4)

    def test_unsupported_precision(self):
        class DoubleOnlyFFT(NumpyFFT):
            name = 'DoubleOnlyFFT'
            supported_precisions = (Precision.double,)

        with self.assertRaises(UnsupportedCaseError):
            DoubleOnlyFFT(self.make_case((2, 2, 2), False, Precision.single))
        DoubleOnlyFFT(self.make_case((2, 2, 2), False, Precision.double))

    def test_unsupported_volume(self):
        class SmallFFT(NumpyFFT):
            name = 'SmallFFT'
            max_nb_grid_pts = 100

        with self.assertRaises(UnsupportedCaseError):
            SmallFFT(self.make_case((5, 5, 5), True))
        SmallFFT(self.make_case((4, 5, 5), True))

    def test_illegal_dimension(self):
        class SmoothFFT(NumpyFFT):
            name = 'SmoothFFT'
            radices = (2, 3, 5, 7)

        case = self.make_case((6, 4, 11), False)
        with self.assertRaises(UnsupportedCaseError):
            SmoothFFT(case)
        SmoothFFT(SmoothFFT.normalise(case))


class BackendRegistry_Check(unittest.TestCase):
    def test_numpy_always_available(self):
        self.assertIn('numpy', muFFTCheck.fft_backends)
        self.assertIs(muFFTCheck.get_backend_factory('numpy'), NumpyFFT)
        self.assertIs(muFFTCheck.get_backend_factory('host'), NumpyFFT)

    def test_unknown_backend(self):
        with self.assertRaises(UnknownBackendError):
            muFFTCheck.get_backend_factory('fftw')

    def test_device_backend(self):
        if GPU_AVAILABLE:
            self.assertEqual(muFFTCheck.mangle_backend_identifier('device'),
                             'cupy')
            self.assertIs(muFFTCheck.get_backend_factory('device'), CupyFFT)
        else:
            self.assertNotIn('cupy', muFFTCheck.fft_backends)
            with self.assertRaises(UnknownBackendError):
                muFFTCheck.get_backend_factory('device')
            with self.assertRaises(UnknownBackendError):
                muFFTCheck.get_backend_factory('cupy')

    def test_default_backend(self):
        expected = CupyFFT if GPU_AVAILABLE else NumpyFFT
        self.assertIs(muFFTCheck.get_backend_factory('default'), expected)

    def test_uninitializable_backend_warns(self):
        def no_device():
            raise RuntimeError('cudaErrorNoDevice: no CUDA-capable device')
        fake_cupy = SimpleNamespace(cuda=SimpleNamespace(
            runtime=SimpleNamespace(getDeviceCount=no_device)))
        with mock.patch('muFFTCheck.Buffer._cupy', fake_cupy):
            with self.assertWarns(UserWarning) as cm:
                backends = muFFTCheck._find_fft_backends()
        self.assertIn('numpy', backends)
        self.assertNotIn('cupy', backends)
        self.assertIn('cupy', str(cm.warning))
        self.assertIn('cudaErrorNoDevice', str(cm.warning))


if __name__ == '__main__':
    unittest.main()
