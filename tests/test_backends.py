"""
Test backend selection and agreement between backends.
"""

import pytest
import numpy as np

from pylinreg import Sample, fit, get_backend, list_available_backends, reference_sample
from pylinreg._backends import print_backend_info, CPUBackendFP64, QRBackendFP64


class TestBackendSelection:
    """Test backend lookup."""

    def test_list_backends(self):
        backends = list_available_backends()
        assert isinstance(backends, list)
        assert backends == ['cpu', 'qr']

    def test_auto_is_cpu(self):
        backend = get_backend('auto')
        assert backend.name == 'cpu_fp64'
        assert backend.precision == 'fp64'

    def test_qr(self):
        assert get_backend('qr').name == 'qr_fp64'

    def test_instance_passthrough(self):
        backend = QRBackendFP64()
        assert get_backend(backend) is backend

    def test_unknown_backend(self):
        with pytest.raises(ValueError, match="Unknown backend"):
            get_backend('gpu')

    def test_device_info(self):
        for backend in (CPUBackendFP64(), QRBackendFP64()):
            info = backend.get_device_info()
            assert info['backend'] == 'cpu'
            assert info['precision'] == 'fp64'

    def test_print_backend_info(self, capsys):
        print_backend_info()
        captured = capsys.readouterr()
        assert 'Backend Status' in captured.out
        assert 'cpu_fp64' in captured.out


class TestBackendAgreement:
    """Closed form and QR give the same fit."""

    @pytest.mark.parametrize("seed", [0, 1, 2])
    def test_random_samples(self, seed):
        rng = np.random.default_rng(seed)
        x = rng.uniform(-5, 5, size=25)
        y = 2.0 + 3.0 * x + rng.normal(0, 2, size=25)
        sample = Sample(x, y)

        cpu = fit(sample, backend='cpu')
        qr = fit(sample, backend='qr')

        np.testing.assert_allclose([qr.c0, qr.c1], [cpu.c0, cpu.c1], rtol=1e-10)
        np.testing.assert_allclose(qr.sumsq, cpu.sumsq, rtol=1e-10)
        np.testing.assert_allclose(qr.cov_matrix, cpu.cov_matrix, rtol=1e-8)

    def test_reference_sample(self):
        sample = reference_sample()
        cpu = fit(sample, backend='cpu')
        qr = fit(sample, backend='qr')
        np.testing.assert_allclose(qr.cov_matrix, cpu.cov_matrix, rtol=1e-8)
        assert cpu.backend == 'cpu_fp64'
        assert qr.backend == 'qr_fp64'
