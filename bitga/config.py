import numpy as np

from .exceptions import ConfigError

class Parameters():
    ''' Run-time parameters of a genetic algorithm.

    INPUT
        (int) length = 128: number of bits in a chromosome
        (int) size = 1000: size of the population, can be odd or even
        (int) generations = 10000: maximum number of generations
        (int) crossover_prob = 70: probability in percent that two
              selected parents are crossed over instead of cloned
        (int) mutation_prob = 10: probability in percent that a given
              bit of an offspring is flipped
        (bool) generational = True: replace the whole population every
               generation, otherwise only the worst individual is replaced
               (steady-state)
        (numpy dtype) block_type = np.uint32: unsigned integer type used
                      as the storage block of a chromosome
    '''

    def __init__(self, length = 128, size = 1000, generations = 10000,
        crossover_prob = 70, mutation_prob = 10, generational = True,
        block_type = np.uint32):

        self.length = length
        self.size = size
        self.generations = generations
        self.crossover_prob = crossover_prob
        self.mutation_prob = mutation_prob
        self.generational = bool(generational)
        self.block_type = block_type
        self.validate()

    def validate(self):
        ''' Check every parameter, raising ConfigError on the first
            invalid one. '''

        def check_int(name, minimum, maximum = None):
            val = getattr(self, name)
            if isinstance(val, (bool, np.bool_)) or \
               not isinstance(val, (int, np.integer)):
                raise ConfigError(f"{name} must be an integer, got {val!r}")
            if val < minimum or (maximum is not None and val > maximum):
                bounds = f"[{minimum}, {maximum}]" if maximum is not None \
                         else f">= {minimum}"
                raise ConfigError(f"{name} must be {bounds}, got {val}")

        check_int('length', 1)
        check_int('size', 1)
        check_int('generations', 0)
        check_int('crossover_prob', 0, 100)
        check_int('mutation_prob', 0, 100)

        try:
            dtype = np.dtype(self.block_type)
        except TypeError:
            raise ConfigError(f"Unknown block type {self.block_type!r}")
        if dtype.kind != 'u':
            raise ConfigError("block_type must be an unsigned integer type, "
                              f"got {dtype}")
        self.block_type = dtype.type
        return self

    @property
    def offspring_size(self):
        ''' Number of offspring slots needed by one reproduction cycle. '''
        return self.size if self.generational else 1

    def as_dict(self):
        return {
            'length': self.length,
            'size': self.size,
            'generations': self.generations,
            'crossover_prob': self.crossover_prob,
            'mutation_prob': self.mutation_prob,
            'generational': self.generational,
            'block_type': self.block_type,
            }

    def replace(self, **changes):
        ''' Return a validated copy with some parameters changed. '''
        params = self.as_dict()
        params.update(changes)
        return Parameters(**params)

    def __eq__(self, other):
        return isinstance(other, Parameters) and \
               self.as_dict() == other.as_dict()

    def __repr__(self):
        args = ', '.join(f'{key} = {val!r}' for (key, val)
                         in self.as_dict().items() if key != 'block_type')
        return f'Parameters({args}, block_type = np.{self.block_type.__name__})'
