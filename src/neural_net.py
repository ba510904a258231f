# Copyright (c) 2025, Jannick Sebastian Strobel
# All rights reserved.

# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

import logging
import numpy as np

from errors import InputMismatchError, ShapeMismatchError
from linalg import Matrix, gemv, apply_activation_function
from num_gen import generate_checked

class NeuralNet:
    """
    Fully-connected feedforward network used for inference only.

    Layer transition i maps nb_neurons[i] values to nb_neurons[i+1] values
    with weights[i] * a + biases[i] followed by activation_functions[i].
    The parameters never change after construction, so predict can be
    called concurrently on the same instance.

    Args:
        weights (list of Matrix): One weight matrix per layer transition.
        biases (list of sequence of float): One bias vector per layer transition.
        activation_functions (list of ActivationFunction): One activation per layer transition.

    Raises:
        ValueError: If the three lists are empty or of different lengths.
        ShapeMismatchError: If consecutive shapes do not chain.
    """

    def __init__(self, weights, biases, activation_functions):
        weights = tuple(weights)
        activation_functions = tuple(activation_functions)
        biases = tuple(np.array(b, dtype=np.float64).reshape(-1) for b in biases)

        if not weights:
            raise ValueError("A neural network requires at least one layer")
        if not (len(weights) == len(biases) == len(activation_functions)):
            raise ValueError(f"Got {len(weights)} weight matrices, {len(biases)} bias vectors "
                             f"and {len(activation_functions)} activation functions")

        for idx, (w, b) in enumerate(zip(weights, biases)):
            if b.shape[0] != w.nb_rows:
                raise ShapeMismatchError("bias", w.nb_rows, b.shape[0],
                                         f"Bias {idx} has {b.shape[0]} elements, weight matrix {idx} has {w.nb_rows} rows")
            if idx > 0 and w.nb_columns != weights[idx - 1].nb_rows:
                raise ShapeMismatchError("weights", weights[idx - 1].nb_rows, w.nb_columns,
                                         f"Weight matrix {idx} has {w.nb_columns} columns, "
                                         f"layer {idx} has {weights[idx - 1].nb_rows} neurons")
            b.flags.writeable = False

        self._weights = weights
        self._biases = biases
        self._activation_functions = activation_functions

    @classmethod
    def create(cls, topology, generator):
        """
        Constructs a neural network from a topology.

        For each transition the weight matrix is generated first, then the
        bias vector, so a deterministic generator yields a deterministic network.

        Args:
            topology (Topology): Layer widths and activation functions.
            generator (NumberGenerator): Source of the initial weights and biases.

        Returns:
            NeuralNet: The initialised network.

        Raises:
            GeneratorError: If the generator delivered the wrong number of values.
        """
        nb_neurons = topology.nb_neurons
        weights = []
        biases = []

        for idx in range(len(nb_neurons) - 1):
            nb_rows = nb_neurons[idx + 1]
            nb_cols = nb_neurons[idx]

            weights.append(Matrix.create(nb_rows, nb_cols, generator))
            biases.append(generate_checked(generator, nb_rows))

        logging.debug(f"created neural network with layers {list(nb_neurons)}")
        return cls(weights, biases, topology.activation_functions)

    @property
    def weights(self):
        return self._weights

    @property
    def biases(self):
        return self._biases

    @property
    def activation_functions(self):
        return self._activation_functions

    @property
    def nb_layers(self):
        return len(self._weights)

    @property
    def nb_neurons(self):
        return (self._weights[0].nb_columns,) + tuple(w.nb_rows for w in self._weights)

    @property
    def input_size(self):
        return self._weights[0].nb_columns

    @property
    def output_size(self):
        return self._weights[-1].nb_rows

    def predict(self, input):
        """
        Computes the network output for one input vector.

        Args:
            input (sequence of float): Input vector of input_size elements.

        Returns:
            np.ndarray: Output vector of output_size elements.

        Raises:
            InputMismatchError: If the input length differs from input_size.
        """
        a = np.asarray(input, dtype=np.float64)
        actual = a.shape[0] if a.ndim == 1 else a.shape
        if a.ndim != 1 or actual != self.input_size:
            raise InputMismatchError(self.input_size, actual)

        for w, b, fn in zip(self._weights, self._biases, self._activation_functions):
            z = gemv(w, a, b)
            a = apply_activation_function(fn, z)

        return a

    def __repr__(self):
        return f"NeuralNet(layers={list(self.nb_neurons)})"
