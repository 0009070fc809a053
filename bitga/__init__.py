from .chromosome import BitChromosome, clone, count_bits
from .config import Parameters
from .core import Evolution, History, Population
from .exceptions import AllocationError, BitGAError, ConfigError, StateError
from .fitness import one_max
from .operators import crossover, mutate, random_mask, roulette_wheel
from .rng import RandomSource

__version__ = '0.1.0'
