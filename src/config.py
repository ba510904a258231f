# Copyright (c) 2025, Jannick Sebastian Strobel
# All rights reserved.

# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

import os
import json
import argparse
import logging

from activation_fn import get_activation
from log_init import config_logger
from neural_net import NeuralNet
from num_gen import ZeroGenerator, ConstantGenerator, TorchGenerator
from topology import TopologyBuilder

def dict_to_namespace(d):
    """Recursively convert a nested dictionary to an argparse.Namespace."""
    ns = argparse.Namespace()
    for key, value in d.items():
        setattr(ns, key, dict_to_namespace(value) if isinstance(value, dict) else value)
    return ns

def namespace_to_dict(ns):
    """Recursively convert a nested argparse.Namespace back to a dictionary."""
    return {key: namespace_to_dict(value) if isinstance(value, argparse.Namespace) else value
            for key, value in vars(ns).items()}

def load_params(params_path):
    """
    Reads a JSON parameter file.

    Args:
        params_path (str): Path to the params.json file.

    Returns:
        tuple: (params, params_dict), the parameters as nested argparse.Namespace and as raw dictionary.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    if not os.path.exists(params_path):
        raise FileNotFoundError(f"The file {params_path} does not exist.")

    with open(params_path, 'r') as params_file:
        params_dict = json.load(params_file)

    return dict_to_namespace(params_dict), params_dict

def build_topology(params):
    """
    Builds the topology described by the `topology` section.

    Expected layout:
        {"input_size": 2, "layers": [{"neurons": 3, "activation": "relu", "options": {}}, ...]}

    Args:
        params (Namespace): Parameters containing a `topology` section.

    Returns:
        Topology: The validated topology.

    Raises:
        TopologyDomainError: If the described topology is invalid.
        ValueError: If the `topology` section or a layer width is missing, or an activation
            function is not supported.
    """
    topology = getattr(params, "topology", None)
    if topology is None:
        raise ValueError("Parameters do not contain a topology section")

    builder = TopologyBuilder().with_input_size(getattr(topology, "input_size", None))

    for idx, layer in enumerate(getattr(topology, "layers", [])):
        # layers are a JSON list, their entries stay plain dicts
        if isinstance(layer, argparse.Namespace):
            layer = namespace_to_dict(layer)
        if "neurons" not in layer:
            raise ValueError(f"Layer {idx} of the topology section has no neurons entry")
        options = layer.get("options") or {}
        builder.add_layer(layer["neurons"], get_activation(layer.get("activation", "identity"), **options))

    return builder.build()

def build_generator(params):
    """
    Creates the number generator described by the optional `generator` section.

    Supported kinds are "zero", "constant" (with `value`) and "uniform"
    (with `seed`, `low`, `high`). Without a section a uniform generator with
    seed 42 is used.

    Args:
        params (Namespace): Parameters, optionally containing a `generator` section.

    Returns:
        NumberGenerator: The configured generator.

    Raises:
        ValueError: If the generator kind is not supported.
    """
    gen = getattr(params, "generator", argparse.Namespace())
    kind = getattr(gen, "kind", "uniform")

    if kind == "zero":
        return ZeroGenerator()
    elif kind == "constant":
        return ConstantGenerator(getattr(gen, "value", 1.0))
    elif kind == "uniform":
        return TorchGenerator(seed=getattr(gen, "seed", 42),
                              low=getattr(gen, "low", -1.0),
                              high=getattr(gen, "high", 1.0))
    else:
        raise ValueError(f"Generator {kind} is not supported")

def build_network(params):
    """
    Creates a neural network from parameters.

    If the parameters contain a `log` section (`path`, `level`), the
    global logger is configured first.

    Args:
        params (Namespace or dict): Parameters with `topology` and optional `generator` and `log` sections.

    Returns:
        NeuralNet: The initialised network.
    """
    if isinstance(params, dict):
        params = dict_to_namespace(params)

    log = getattr(params, "log", None)
    if log is not None:
        config_logger(getattr(log, "path", None), getattr(log, "level", logging.INFO))

    topology = build_topology(params)
    generator = build_generator(params)
    logging.info(f"building network {topology} with {type(generator).__name__}")

    return NeuralNet.create(topology, generator)
