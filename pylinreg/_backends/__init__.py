"""
Backend selection and management.

Provides a unified interface to the closed-form and QR CPU backends.
"""

from .base import BackendBase, FitResult
from .cpu_fp64_backend import CPUBackendFP64
from .qr_fp64_backend import QRBackendFP64


_BACKENDS = {
    'cpu': CPUBackendFP64,
    'qr': QRBackendFP64,
}


def get_backend(backend='auto') -> BackendBase:
    """
    Get computational backend.

    Parameters
    ----------
    backend : str or BackendBase
        Backend selection:
        - 'auto': closed-form CPU backend
        - 'cpu': closed-form sums (FP64)
        - 'qr': QR factorisation of the design matrix (FP64)
        A BackendBase instance is returned unchanged.

    Returns
    -------
    BackendBase
        Backend instance

    Examples
    --------
    >>> backend = get_backend('auto')
    >>> backend.name
    'cpu_fp64'
    """
    if isinstance(backend, BackendBase):
        return backend

    if backend == 'auto':
        return CPUBackendFP64()

    try:
        return _BACKENDS[backend]()
    except (KeyError, TypeError):
        raise ValueError(
            f"Unknown backend: '{backend}'\n"
            f"Valid options: 'auto', 'cpu', 'qr'"
        ) from None


def list_available_backends() -> list:
    """List names of available backends."""
    return list(_BACKENDS)


def print_backend_info():
    """Print detailed backend information (diagnostic)."""
    print("pylinreg Backend Status")
    print("=" * 50)
    print(f"\nAvailable Backends:")
    for key, cls in _BACKENDS.items():
        info = cls().get_device_info()
        print(f"  {key:<6} {info['method']:<12} {info['precision']}  ({info['library']})")

    print(f"\nDefault Backend:")
    print(f"  {get_backend('auto').name}")


__all__ = [
    'get_backend',
    'list_available_backends',
    'print_backend_info',
    'BackendBase',
    'FitResult',
    'CPUBackendFP64',
    'QRBackendFP64',
]


if __name__ == "__main__":
    print_backend_info()
