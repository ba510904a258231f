# Copyright (c) 2025, Jannick Sebastian Strobel
# All rights reserved.

# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

import numbers

from errors import TopologyDomainError

def _is_width(n):
    """True for integer neuron counts of at least one, bools excluded."""
    return isinstance(n, numbers.Integral) and not isinstance(n, bool) and n >= 1


class Topology:
    """
    Validated description of a fully-connected feedforward network.

    nb_neurons[0] is the input width, nb_neurons[-1] the output width and
    the entries in between the hidden widths. activation_functions[i] is
    applied after the transition from layer i to layer i + 1.
    Instances are created by TopologyBuilder.build().
    """

    __slots__ = ("_nb_neurons", "_activation_functions")

    def __init__(self, nb_neurons, activation_functions):
        self._nb_neurons = tuple(nb_neurons)
        self._activation_functions = tuple(activation_functions)

    @property
    def nb_neurons(self):
        return self._nb_neurons

    @property
    def activation_functions(self):
        return self._activation_functions

    @property
    def nb_layers(self):
        """Number of layer transitions."""
        return len(self._activation_functions)

    @property
    def input_size(self):
        return self._nb_neurons[0]

    @property
    def output_size(self):
        return self._nb_neurons[-1]

    def __repr__(self):
        layers = ", ".join(f"{n}:{fn!r}" for n, fn in zip(self._nb_neurons[1:], self._activation_functions))
        return f"Topology(input={self.input_size}, layers=[{layers}])"


class TopologyBuilder:
    """
    Incremental constructor of Topology.

    Every configuration call returns the builder so calls can be chained;
    validation happens once in build():

        topology = (TopologyBuilder()
                    .with_input_size(2)
                    .add_layer(3, ReLU())
                    .add_layer(1, Identity())
                    .build())
    """

    def __init__(self):
        self.input_size = None
        self.layers = []

    def with_input_size(self, nb_input):
        """Sets the number of inputs, the last call wins."""
        self.input_size = nb_input
        return self

    def add_layer(self, nb_neuron, activation_function):
        """
        Appends a layer after the previously added ones.

        Args:
            nb_neuron (int): Number of neurons of the layer.
            activation_function (ActivationFunction): Activation applied on the layer output.

        Raises:
            TypeError: If the activation function does not provide `activate`.
        """
        if not callable(getattr(activation_function, "activate", None)):
            raise TypeError(f"Expected an activation function, but got {type(activation_function).__name__}")
        self.layers.append((nb_neuron, activation_function))
        return self

    def build(self):
        """
        Validates the accumulated configuration and creates the topology.

        Returns:
            Topology: Topology with nb_neurons = [input size, layer widths...].

        Raises:
            TopologyDomainError: If the input size is unset or not a positive integer,
                if no layer was added, or if a layer width is not a positive integer
                (checked in this order).
        """
        if not _is_width(self.input_size):
            raise TopologyDomainError("missing input layer")

        if not self.layers:
            raise TopologyDomainError("missing hidden/output layer")

        for idx, (nb_neuron, _) in enumerate(self.layers):
            if not _is_width(nb_neuron):
                raise TopologyDomainError(f"layer {idx} has no neuron")

        nb_neurons = [int(self.input_size)] + [int(nb_neuron) for nb_neuron, _ in self.layers]
        activation_functions = [fn for _, fn in self.layers]
        return Topology(nb_neurons, activation_functions)
