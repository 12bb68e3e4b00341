# tests/conftest.py
import pytest

from src.sofc_model import SOFCEvaluator, SOFCParameters


@pytest.fixture
def parameters():
    return SOFCParameters.default()


@pytest.fixture
def evaluator(parameters):
    return SOFCEvaluator(parameters)


@pytest.fixture
def i0(evaluator):
    return evaluator.i0
