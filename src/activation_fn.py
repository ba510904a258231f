# Copyright (c) 2025, Jannick Sebastian Strobel
# All rights reserved.

# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

import math

class ActivationFunction:
    """
    Scalar nonlinearity applied elementwise after each affine transform.

    Subclasses implement `activate`. `derivative` is optional and never used
    during inference.
    """

    def activate(self, x: float) -> float:
        raise NotImplementedError

    def derivative(self, x: float) -> float:
        raise NotImplementedError(f"{type(self).__name__} does not provide a derivative")

    def __repr__(self):
        return f"{type(self).__name__}()"


class Identity(ActivationFunction):
    """Linear activation, returns its input."""

    def activate(self, x):
        return x

    def derivative(self, x):
        return 1.0


class ReLU(ActivationFunction):
    """Rectified linear unit."""

    def activate(self, x):
        return x if x > 0.0 else 0.0

    def derivative(self, x):
        return 1.0 if x > 0.0 else 0.0


class LeakyReLU(ActivationFunction):
    """
    Rectified linear unit with a small slope for negative inputs.

    Args:
        negative_slope (float): Factor applied to negative inputs.
    """

    def __init__(self, negative_slope=0.01):
        self.negative_slope = negative_slope

    def activate(self, x):
        return x if x > 0.0 else self.negative_slope * x

    def derivative(self, x):
        return 1.0 if x > 0.0 else self.negative_slope

    def __repr__(self):
        return f"LeakyReLU(negative_slope={self.negative_slope})"


class Sigmoid(ActivationFunction):
    """Logistic function 1 / (1 + exp(-x))."""

    def activate(self, x):
        # exp(-x) overflows for large negative x
        if x >= 0.0:
            return 1.0 / (1.0 + math.exp(-x))
        e = math.exp(x)
        return e / (1.0 + e)

    def derivative(self, x):
        s = self.activate(x)
        return s * (1.0 - s)


class Tanh(ActivationFunction):
    """Hyperbolic tangent."""

    def activate(self, x):
        return math.tanh(x)

    def derivative(self, x):
        t = math.tanh(x)
        return 1.0 - t * t


ACTIVATIONS = {
    "identity": Identity,
    "linear": Identity,
    "relu": ReLU,
    "leaky_relu": LeakyReLU,
    "sigmoid": Sigmoid,
    "tanh": Tanh,
}

def get_activation(name, **kwargs):
    """
    Instantiates an activation function from its registry name.

    Args:
        name (str): Registry name, case insensitive (e.g. "relu").
        **kwargs: Constructor options (e.g. negative_slope for "leaky_relu").

    Returns:
        ActivationFunction: New activation instance.

    Raises:
        ValueError: If the name is not registered.
    """
    try:
        activation_cls = ACTIVATIONS[name.lower()]
    except KeyError:
        raise ValueError(f"Activation function {name} is not supported") from None
    return activation_cls(**kwargs)
