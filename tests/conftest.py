import pytest

from python_test_imports import muFFTCheck


@pytest.fixture
def single_c2c_case():
    return muFFTCheck.TransformCase((28, 25, 30),
                                    muFFTCheck.TransformKind.complex_to_complex,
                                    muFFTCheck.Precision.single)


@pytest.fixture
def single_r2c_case():
    return muFFTCheck.TransformCase((25, 25, 28),
                                    muFFTCheck.TransformKind.real_to_complex,
                                    muFFTCheck.Precision.single)


@pytest.fixture
def config():
    return muFFTCheck.HarnessConfig(precision='single', seed=0)


def pytest_configure(config):
    config.addinivalue_line("markers",
                            "slow: runs the full case matrix")
