import pytest


@pytest.fixture
def log_file(tmp_path):
    return str(tmp_path / "pymatrix.log")


@pytest.fixture
def ab():
    """the 2x2 pair used throughout the arithmetic tests"""
    from pymatrix import Matrix
    a = Matrix.from_array([[1, 2], [3, 4]])
    b = Matrix.from_array([[5, 6], [7, 8]])
    return a, b
