import time
import numpy as np

# Native range of the underlying integer draws, [0, RAND_MAX)
RAND_MAX = 2 ** 31 - 1

class RandomSource():
    ''' Seeded stream of random integers and biased coin flips.

    INPUT
        (int) seed = None: seed of the stream, taken from the current
              time if not given
    '''

    def __init__(self, seed = None):
        if seed is None:
            seed = int(time.time())
        self.seed = seed
        self.state = np.random.RandomState(seed % 2 ** 32)

    def randint(self, max):
        ''' Draw an integer uniformly from [0, max), scaled down from the
            native range. Always consumes one draw, also when max is 0. '''
        return int(self.state.randint(0, RAND_MAX) * (max / RAND_MAX))

    def flip(self, p):
        ''' Flip a coin which lands on True with probability p percent.

        INPUT
            (int) p: probability in percent, between 0 and 100

        OUTPUT
            (bool) outcome of the flip
        '''
        if p == 100:
            return True
        elif p:
            return self.randint(100) <= p
        else:
            return False

    def flips(self, p, amount):
        ''' Flip the same biased coin several times at once.

        INPUT
            (int) p: probability in percent, between 0 and 100
            (int) amount: number of flips

        OUTPUT
            (ndarray) boolean array of the outcomes
        '''
        if p == 100:
            return np.ones(amount, dtype = bool)
        elif p:
            draws = self.state.randint(0, RAND_MAX, size = amount)
            draws = (draws * (100 / RAND_MAX)).astype(int)
            return np.less_equal(draws, p)
        else:
            return np.zeros(amount, dtype = bool)
