import numpy as np

from .chromosome import BitChromosome, pack

def roulette_wheel(cumulative_fitness, seed):
    ''' Roulette-wheel selection over cumulative fitness values.

    INPUT
        (ndarray) cumulative_fitness: non-decreasing prefix sums of the
                  fitness values of a population
        (int) seed: random number in [0, sum of fitnesses)

    OUTPUT
        (int) smallest index whose cumulative fitness is not below seed

    If every fitness is zero then all cumulative values are zero and index
    0 is always selected.
    '''
    idx = int(np.searchsorted(cumulative_fitness, seed, side = 'left'))
    return min(idx, len(cumulative_fitness) - 1)

def random_mask(length, rng, block_type = np.uint32):
    ''' Fresh uniform crossover mask, every bit set with probability 1/2. '''
    return BitChromosome(length, block_type = block_type).init_random(rng)

def crossover(parent1, parent2, child1, child2, rng):
    ''' Uniform crossover of two parents.

    The first child takes the bits of parent1 where the mask is set and
    those of parent2 elsewhere, the second child the other way round.

    INPUT
        (BitChromosome) parent1, parent2
        (BitChromosome) child1: receives the first offspring
        (BitChromosome) child2: receives the second offspring, pass None
                        to only compute the first one
        (RandomSource) rng

    OUTPUT
        (BitChromosome) the mask that was used
    '''
    mask = random_mask(parent1.length, rng, parent1.block_type)
    (p1, p2, m) = (parent1.blocks, parent2.blocks, mask.blocks)
    child1.blocks[:] = (p1 & m) | (p2 & ~m)
    if child2 is not None:
        child2.blocks[:] = (p1 & ~m) | (p2 & m)
    return mask

def mutate(chromosome, probability, rng):
    ''' Flip every bit of the chromosome independently, in place.

    INPUT
        (BitChromosome) chromosome
        (int) probability: probability in percent that a bit is flipped
        (RandomSource) rng
    '''
    flips = rng.flips(probability, chromosome.length)
    if flips.any():
        chromosome.blocks ^= pack(flips, chromosome.nblocks,
            chromosome.block_type)
    return chromosome
