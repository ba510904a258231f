# Copyright (c) 2025, Jannick Sebastian Strobel
# All rights reserved.

# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

import torch
import torch.nn as nn

from activation_fn import Identity, ReLU, LeakyReLU, Sigmoid, Tanh
from neural_net import NeuralNet
from num_gen import SequenceGenerator
from topology import TopologyBuilder

def _to_torch_activation(fn):
    """Returns the torch module equivalent to an activation function, None for Identity."""
    if isinstance(fn, Identity):
        return None
    if isinstance(fn, LeakyReLU):
        return nn.LeakyReLU(fn.negative_slope)
    if isinstance(fn, ReLU):
        return nn.ReLU()
    if isinstance(fn, Sigmoid):
        return nn.Sigmoid()
    if isinstance(fn, Tanh):
        return nn.Tanh()
    raise ValueError(f"Activation {type(fn).__name__} has no torch counterpart")

def _from_torch_activation(module):
    """Returns the activation function equivalent to a torch module, None if it is not an activation."""
    if isinstance(module, nn.LeakyReLU):
        return LeakyReLU(module.negative_slope)
    if isinstance(module, nn.ReLU):
        return ReLU()
    if isinstance(module, nn.Sigmoid):
        return Sigmoid()
    if isinstance(module, nn.Tanh):
        return Tanh()
    if isinstance(module, nn.Identity):
        return Identity()
    return None

class Network(nn.Module):
    """
    PyTorch mirror of a NeuralNet.

    Every layer transition becomes an nn.Linear holding a copy of the weights
    and biases, followed by the matching torch activation (omitted for Identity).
    Computations use float64 like NeuralNet.predict.

    Args:
        neural_net (NeuralNet): Network whose parameters are copied.

    Raises:
        ValueError: If an activation function has no torch counterpart.
    """
    def __init__(self, neural_net):
        super().__init__()

        self.input_size = neural_net.input_size
        self.output_size = neural_net.output_size

        layers = []
        for w, b, fn in zip(neural_net.weights, neural_net.biases, neural_net.activation_functions):
            linear = nn.Linear(w.nb_columns, w.nb_rows, dtype=torch.float64)
            with torch.no_grad():
                linear.weight.copy_(torch.tensor(w.to_numpy(), dtype=torch.float64))
                linear.bias.copy_(torch.tensor(b.copy(), dtype=torch.float64))
            layers.append(linear)

            activation = _to_torch_activation(fn)
            if activation is not None:
                layers.append(activation)

        self.sequential = nn.Sequential(*layers)

    def forward(self, x):
        """
        Forward pass of the network.

        Args:
            x (torch.Tensor): Input tensor with input_size features in the last dimension.

        Returns:
            torch.Tensor: Output of the network.
        """
        return self.sequential(x)


def network_from_torch(torch_model):
    """
    Rebuilds a NeuralNet from a sequential feedforward PyTorch model.

    The model is either an nn.Sequential or a module exposing one as
    `sequential`. Each nn.Linear may be followed by one activation module;
    a Linear without activation gets Identity.

    Args:
        torch_model (torch.nn.Module): Sequential feedforward model.

    Returns:
        NeuralNet: Network computing the same function in float64.

    Raises:
        ValueError: If the model contains a module other than Linear or a supported activation,
            or an activation that does not follow a Linear layer.
    """
    sequential = torch_model.sequential if hasattr(torch_model, "sequential") else torch_model

    layers = []
    for module in sequential:
        if isinstance(module, nn.Linear):
            layers.append([module, None])
            continue

        activation = _from_torch_activation(module)
        if activation is None:
            raise ValueError(f"Module {type(module).__name__} is not supported")
        if not layers or layers[-1][1] is not None:
            raise ValueError(f"Activation {type(module).__name__} must follow a Linear layer")
        layers[-1][1] = activation

    if not layers:
        raise ValueError("Model does not contain any Linear layer")

    # Parameters in the order NeuralNet.create consumes them
    values = []
    builder = TopologyBuilder().with_input_size(layers[0][0].in_features)
    for idx, (linear, activation) in enumerate(layers):
        if idx > 0 and linear.in_features != layers[idx - 1][0].out_features:
            raise ValueError(f"Linear layer {idx} expects {linear.in_features} inputs, "
                             f"previous layer has {layers[idx - 1][0].out_features} outputs")
        builder.add_layer(linear.out_features, activation if activation is not None else Identity())

        values.extend(linear.weight.detach().to(torch.float64).reshape(-1).tolist())
        if linear.bias is not None:
            values.extend(linear.bias.detach().to(torch.float64).tolist())
        else:
            values.extend([0.0] * linear.out_features)

    return NeuralNet.create(builder.build(), SequenceGenerator(values))
