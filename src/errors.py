# Copyright (c) 2025, Jannick Sebastian Strobel
# All rights reserved.

# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

class NeuralNetError(Exception):
    """Base class of all errors raised by the inference core."""


class ShapeMismatchError(NeuralNetError, ValueError):
    """
    Raised when matrix and vector dimensions disagree.

    Args:
        dimension (str): Which dimension disagreed ("columns", "rows", "data", "weights" or "bias").
        expected (int): Size required by the operand it is checked against.
        actual (int or tuple): Size that was supplied, or the shape of an input that is not a vector.
        message (str, optional): Human readable description.
    """
    def __init__(self, dimension, expected, actual, message=None):
        self.dimension = dimension
        self.expected = expected
        self.actual = actual
        if message is None:
            message = f"{dimension} mismatch: expected {expected}, got {actual}"
        super().__init__(message)


class InputMismatchError(NeuralNetError, ValueError):
    """Raised by predict when the input vector does not match the network input width."""
    def __init__(self, expected, actual):
        self.expected = expected
        self.actual = actual
        if isinstance(actual, tuple):
            super().__init__(f"Input vector must have {expected} elements, got an input of shape {actual}")
        else:
            super().__init__(f"Input vector must have {expected} elements, got {actual}")


class TopologyDomainError(NeuralNetError, ValueError):
    """Raised by the topology builder when a structural piece is missing."""


class GeneratorError(NeuralNetError, RuntimeError):
    """Raised when a number generator does not deliver the requested amount of values."""
    def __init__(self, requested, produced, message=None):
        self.requested = requested
        self.produced = produced
        if message is None:
            message = f"Number generator returned {produced} values, {requested} were requested"
        super().__init__(message)
