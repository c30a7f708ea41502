import importlib
import pytest

@pytest.fixture(scope="session")
def logic():
    return importlib.import_module("encoding_converter.logic")

@pytest.fixture(scope="session")
def converter():
    return importlib.import_module("encoding_converter.converter")
