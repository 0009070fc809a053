def one_max(chromosome):
    ''' Number of set bits of the chromosome, the one-max score.

    Any other callable taking a BitChromosome and returning an integer in
    [0, length], deterministic and maximal only at the optimum, can be used
    as a fitness function instead.
    '''
    return chromosome.popcount()
