import logging

import pytest

import log_init
from activation_fn import ActivationFunction, Identity
from num_gen import ConstantGenerator
from topology import TopologyBuilder


@pytest.fixture(autouse=True)
def setup_logging():
    """Keep the root logger quiet and restore its state after each test."""
    root = logging.getLogger()
    level = root.level
    root.setLevel(logging.WARNING)

    yield

    # drop handlers installed by config_logger
    for handler in root.handlers[:]:
        if handler.formatter is log_init.formatter:
            handler.close()
            root.removeHandler(handler)
    root.setLevel(level)


class PowerBy(ActivationFunction):
    """Test activation raising its input to a fixed exponent."""

    def __init__(self, exponent):
        self.exponent = exponent

    def activate(self, x):
        return x ** self.exponent


@pytest.fixture
def power_by():
    return PowerBy


@pytest.fixture
def ones():
    return ConstantGenerator(1.0)


@pytest.fixture
def two_layer_topology():
    """Input width 2, hidden layer of 2, output of 1, identity everywhere."""
    return (TopologyBuilder()
            .with_input_size(2)
            .add_layer(2, Identity())
            .add_layer(1, Identity())
            .build())
