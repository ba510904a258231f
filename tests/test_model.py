import numpy as np
import pytest
import torch
import torch.nn as nn

from activation_fn import ActivationFunction, Identity, ReLU, LeakyReLU, Sigmoid, Tanh
from model import Network, network_from_torch
from neural_net import NeuralNet
from num_gen import TorchGenerator
from topology import TopologyBuilder


class Square(ActivationFunction):
    def activate(self, x):
        return x * x


@pytest.fixture
def neural_net():
    topology = (TopologyBuilder()
                .with_input_size(4)
                .add_layer(6, ReLU())
                .add_layer(5, Tanh())
                .add_layer(3, LeakyReLU(0.05))
                .add_layer(2, Sigmoid())
                .add_layer(2, Identity())
                .build())
    return NeuralNet.create(topology, TorchGenerator(seed=11))


def test_network_matches_predict(neural_net):
    torch_model = Network(neural_net)
    x = [0.3, -1.2, 0.7, 2.0]

    with torch.no_grad():
        expected = torch_model(torch.tensor(x, dtype=torch.float64)).numpy()

    np.testing.assert_allclose(neural_net.predict(x), expected, rtol=1e-9, atol=1e-12)


def test_network_layout(neural_net):
    torch_model = Network(neural_net)
    linear_layers = [m for m in torch_model.sequential if isinstance(m, nn.Linear)]

    assert len(linear_layers) == neural_net.nb_layers
    # Identity output layer has no activation module
    assert isinstance(torch_model.sequential[-1], nn.Linear)
    assert torch_model.input_size == 4
    assert torch_model.output_size == 2


def test_network_rejects_unknown_activation():
    topology = TopologyBuilder().with_input_size(2).add_layer(1, Square()).build()
    with pytest.raises(ValueError, match="Square"):
        Network(NeuralNet.create(topology, TorchGenerator()))


def test_round_trip_through_torch(neural_net):
    rebuilt = network_from_torch(Network(neural_net))

    assert rebuilt.nb_neurons == neural_net.nb_neurons
    for original, copy in zip(neural_net.weights, rebuilt.weights):
        assert original == copy
    x = [1.0, 0.0, -1.0, 0.5]
    np.testing.assert_allclose(rebuilt.predict(x), neural_net.predict(x))


def test_network_from_torch_sequential():
    torch.manual_seed(42)
    torch_model = nn.Sequential(nn.Linear(3, 4), nn.ReLU(), nn.Linear(4, 2))
    x = [0.2, 0.4, -0.6]

    neural_net = network_from_torch(torch_model)

    with torch.no_grad():
        expected = torch_model(torch.tensor(x)).numpy()
    assert neural_net.nb_neurons == (3, 4, 2)
    assert isinstance(neural_net.activation_functions[0], ReLU)
    assert isinstance(neural_net.activation_functions[1], Identity)
    np.testing.assert_allclose(neural_net.predict(x), expected, rtol=1e-5, atol=1e-6)


def test_network_from_torch_without_bias():
    linear = nn.Linear(2, 1, bias=False)
    with torch.no_grad():
        linear.weight.fill_(2.0)

    neural_net = network_from_torch(nn.Sequential(linear))

    np.testing.assert_allclose(neural_net.predict([1.0, 1.5]), [5.0])


def test_network_from_torch_rejects_unsupported_modules():
    with pytest.raises(ValueError, match="Dropout"):
        network_from_torch(nn.Sequential(nn.Linear(2, 2), nn.Dropout()))
    with pytest.raises(ValueError, match="must follow a Linear"):
        network_from_torch(nn.Sequential(nn.ReLU(), nn.Linear(2, 2)))
    with pytest.raises(ValueError, match="inputs"):
        network_from_torch(nn.Sequential(nn.Linear(2, 3), nn.Linear(4, 1)))
    with pytest.raises(ValueError, match="Linear layer"):
        network_from_torch(nn.Sequential())
