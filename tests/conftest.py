"""
Shared fixtures for exifcodec tests
"""

import pytest

from builders import build_jpeg, load, sample_tiff


@pytest.fixture
def sample_jpeg():
    return build_jpeg(sample_tiff())


@pytest.fixture
def sample_dataset():
    return load(build_jpeg(sample_tiff()))


@pytest.fixture
def little_endian_dataset():
    return load(build_jpeg(sample_tiff(order='<')))
