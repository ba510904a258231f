# Copyright (c) 2025, Jannick Sebastian Strobel
# All rights reserved.

# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

import numpy as np
import torch

from errors import GeneratorError

class NumberGenerator:
    """
    Source of the values used to fill weight matrices and bias vectors.

    The core only asks for a number of values; the fill policy (zeros,
    constant, random) belongs to the generator.
    """

    def generate(self, size):
        """
        Args:
            size (int): Number of values requested.

        Returns:
            sequence of float: Exactly `size` values.
        """
        raise NotImplementedError


class ZeroGenerator(NumberGenerator):
    def generate(self, size):
        return np.zeros(size, dtype=np.float64)


class ConstantGenerator(NumberGenerator):
    def __init__(self, value=1.0):
        self.value = float(value)

    def generate(self, size):
        return np.full(size, self.value, dtype=np.float64)


class SequenceGenerator(NumberGenerator):
    """
    Hands out the values of a fixed sequence, continuing where the previous
    call stopped.

    Args:
        values (iterable of float): Values in the order they are handed out.

    Raises:
        GeneratorError: From `generate` when fewer values remain than requested.
    """

    def __init__(self, values):
        self.values = np.asarray(list(values), dtype=np.float64)
        self.position = 0

    @property
    def remaining(self):
        return len(self.values) - self.position

    def generate(self, size):
        if size > self.remaining:
            raise GeneratorError(size, self.remaining,
                                 f"Sequence exhausted: {size} values requested, {self.remaining} left")
        start = self.position
        self.position += size
        return self.values[start:self.position].copy()


class TorchGenerator(NumberGenerator):
    """
    Seeded uniform random values drawn with a private torch.Generator.

    Args:
        seed (int): Seed of the generator, equal seeds give equal sequences.
        low (float): Lower bound of the uniform distribution.
        high (float): Upper bound of the uniform distribution.
    """

    def __init__(self, seed=42, low=-1.0, high=1.0):
        if low > high:
            raise ValueError(f"Lower bound {low} is greater than upper bound {high}")
        self.seed = seed
        self.low = low
        self.high = high
        self.generator = torch.Generator().manual_seed(seed)

    def generate(self, size):
        values = torch.empty(size, dtype=torch.float64)
        values.uniform_(self.low, self.high, generator=self.generator)
        return values.numpy()


def generate_checked(generator, size):
    """
    Requests `size` values from a generator and checks the amount delivered.

    Exceptions raised by the generator itself propagate unchanged.

    Args:
        generator (NumberGenerator): Source of the values.
        size (int): Number of values requested.

    Returns:
        np.ndarray: float64 vector of length `size`.

    Raises:
        GeneratorError: If the generator returned a different number of values.
    """
    values = np.asarray(generator.generate(size), dtype=np.float64).reshape(-1)
    if values.shape[0] != size:
        raise GeneratorError(size, values.shape[0])
    return values
