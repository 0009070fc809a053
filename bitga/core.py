import numpy as np
import logging

# Plots
import matplotlib.pyplot as plt

# Progress bars
from tqdm import trange

from .chromosome import BitChromosome
from .config import Parameters
from .exceptions import AllocationError, StateError
from .fitness import one_max
from .operators import crossover, mutate, roulette_wheel
from .rng import RandomSource

def allocate(amount, length, block_type):
    ''' Allocate a list of zeroed chromosomes. '''
    try:
        return [BitChromosome(length, block_type = block_type)
                for _ in range(amount)]
    except MemoryError as err:
        raise AllocationError(f"Could not allocate {amount} chromosomes "
                              f"of {length} bits") from err

class Population():
    ''' Fixed-size population of bit chromosomes together with their
        fitness values.

    INPUT
        (int) size: number of individuals
        (int) length: number of bits in a chromosome
        (function) fitness_fn = one_max: fitness function, taking a
                   BitChromosome and returning an integer in [0, length]
        (numpy dtype) block_type = np.uint32: storage block type
    '''

    def __init__(self, size, length, fitness_fn = one_max,
        block_type = np.uint32):

        self.size = size
        self.length = length
        self.fitness_fn = fitness_fn
        try:
            self.fitness = np.zeros(size, dtype = np.int64)
            self.cumulative_fitness = np.zeros(size, dtype = np.int64)
        except MemoryError as err:
            raise AllocationError("Could not allocate fitness arrays") \
                from err
        self.chromosomes = allocate(size, length, block_type)
        self.sum_fitness = 0
        self.best_idx = 0
        self.worst_idx = 0
        self.generation = 0

    def __len__(self):
        return self.size

    def __getitem__(self, idx):
        return self.chromosomes[idx]

    def initialise(self, rng):
        ''' Give every individual a uniformly random chromosome and
            restart the generation count. '''
        for chromosome in self.chromosomes:
            chromosome.init_random(rng)
        self.generation = 0
        return self

    def evaluate(self):
        ''' Compute the fitness of every individual, the fitness sum, the
            cumulative fitness values and the best and worst indices.

        The scan goes from left to right with both indices starting at 0.
        The best index moves on a strictly greater fitness and only
        otherwise is the worst index moved on a strictly lesser one, so
        ties keep the leftmost individual.
        '''
        self.sum_fitness = 0
        self.best_idx = 0
        self.worst_idx = 0
        for (i, chromosome) in enumerate(self.chromosomes):
            self.fitness[i] = self.fitness_fn(chromosome)
            self.sum_fitness += int(self.fitness[i])
            self.cumulative_fitness[i] = self.sum_fitness
            if self.fitness[i] > self.fitness[self.best_idx]:
                self.best_idx = i
            elif self.fitness[i] < self.fitness[self.worst_idx]:
                self.worst_idx = i
        return self

    def select(self, rng):
        ''' Pick an index by roulette-wheel selection. '''
        seed = rng.randint(self.sum_fitness)
        return roulette_wheel(self.cumulative_fitness, seed)

    @property
    def best_fitness(self):
        return int(self.fitness[self.best_idx])

    @property
    def worst_fitness(self):
        return int(self.fitness[self.worst_idx])

    @property
    def average_fitness(self):
        return self.sum_fitness / self.size

    @property
    def fittest(self):
        return self.chromosomes[self.best_idx]

    def solved(self):
        ''' Whether the best individual has the maximal fitness. '''
        return self.best_fitness == self.length

class Evolution():
    ''' Drives the evolution of a population, either generationally or in
        a steady-state fashion.

    The offspring buffer is allocated here once and reused by every
    reproduction cycle. Use it as a context manager to release the
    buffers when done.

    INPUT
        (Parameters) params = None: GA parameters, defaults if not given
        (RandomSource or int) rng = None: random source, or a seed for a
                              new one, seeded from the time if not given
        (function) fitness_fn = one_max: fitness function
        (int) verbose = 0: verbosity mode
    '''

    def __init__(self, params = None, rng = None, fitness_fn = one_max,
        verbose = 0):

        self.params = params if params is not None else Parameters()
        if not isinstance(rng, RandomSource):
            rng = RandomSource(rng)
        self.rng = rng
        self.verbose = verbose

        logging.basicConfig(format = '%(levelname)s: %(message)s')
        self.logger = logging.getLogger('bitga')

        if not verbose:
            self.logger.setLevel(logging.WARNING)
        elif verbose == 1:
            self.logger.setLevel(logging.INFO)
        elif verbose == 2:
            self.logger.setLevel(logging.DEBUG)

        self.logger.info("Creating population...")

        self.population = Population(
            size = self.params.size,
            length = self.params.length,
            fitness_fn = fitness_fn,
            block_type = self.params.block_type
            )
        self.offspring = allocate(self.params.offspring_size,
            self.params.length, self.params.block_type)
        self.state = 'allocated'

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.release()
        return False

    def release(self):
        ''' Drop the offspring buffer, the population stays readable. '''
        self.offspring = None
        self.state = 'released'

    def initialise(self):
        self._check_not_released()
        self.population.initialise(self.rng)
        self.state = 'initialized'
        return self

    def evaluate(self):
        self._check_not_released()
        self.population.evaluate()
        self.state = 'evaluated'
        return self

    def _check_not_released(self):
        if self.state == 'released':
            raise StateError("The evolution buffers have been released")

    def reproduce(self):
        ''' Run one reproduction cycle, writing the mutated offspring into
            the population. The population has to be evaluated first. '''

        self._check_not_released()
        if self.state != 'evaluated':
            raise StateError("The population has to be evaluated before "
                             f"reproducing, current state is {self.state}")
        self.state = 'reproducing'

        pop = self.population
        params = self.params

        if params.generational:
            for i in range(pop.size // 2):
                (j, k) = (pop.select(self.rng), pop.select(self.rng))
                self._breed(j, k, self.offspring[2 * i],
                    self.offspring[2 * i + 1])

            if pop.size % 2:
                j = pop.select(self.rng)
                self.logger.debug(f"Cloning {j} into the last slot")
                pop[j].clone(self.offspring[-1])

            for (i, child) in enumerate(self.offspring):
                mutate(child, params.mutation_prob, self.rng)
                child.clone(pop[i])
        else:
            (j, k) = (pop.select(self.rng), pop.select(self.rng))
            child = self.offspring[0]
            self._breed(j, k, child, None)
            mutate(child, params.mutation_prob, self.rng)
            self.logger.debug(f"Replacing worst individual {pop.worst_idx}")
            child.clone(pop[pop.worst_idx])

        return self

    def _breed(self, j, k, child1, child2):
        ''' Cross over or clone the parents at indices j and k. '''
        pop = self.population
        if self.rng.flip(self.params.crossover_prob):
            self.logger.debug(f"Crossing over {j} and {k}")
            crossover(pop[j], pop[k], child1, child2, self.rng)
        else:
            self.logger.debug(f"Cloning {j} and {k}")
            pop[j].clone(child1)
            if child2 is not None:
                pop[k].clone(child2)

    def step(self):
        ''' Run one generation: a single reproduction cycle when
            generational, otherwise as many cycles as there are
            individuals, each followed by an evaluation. '''
        cycles = 1 if self.params.generational else self.params.size
        for _ in range(cycles):
            self.reproduce()
            self.evaluate()
        self.population.generation += 1
        return self

    def evolve(self, generations = None, progress_bars = 0,
        callback = None):
        ''' Evolve the population until the generation budget is used up
            or an individual with maximal fitness has been found.

        INPUT
            (int) generations = None: maximum number of generations,
                  defaults to the one in the parameters
            (int) progress_bars = 0: whether to show a progress bar
            (function) callback = None: called with every record added
                       to the history

        OUTPUT
            (History) history of the evolution
        '''

        if generations is None:
            generations = self.params.generations

        history = History(population = self.population)
        pop = self.population

        self.initialise()
        self.evaluate()
        self._record(history, callback)

        if progress_bars:
            gen_iter = trange(generations)
            gen_iter.set_description("Evolving population")
        else:
            gen_iter = None

        try:
            while pop.generation < generations and not pop.solved():
                self.step()
                self._record(history, callback)
                if gen_iter is not None:
                    gen_iter.update(1)

                self.logger.info("Generation {}: average {:.2f}, best {}"\
                    .format(pop.generation, pop.average_fitness,
                    pop.best_fitness))
        finally:
            if gen_iter is not None:
                gen_iter.close()

        if pop.solved():
            self.logger.info('Reached goal, stopping evolution...')

        history.success = pop.solved()
        self.state = 'terminated'
        return history

    def _record(self, history, callback):
        record = history.add_entry(self.population)
        if callback is not None:
            callback(record)
        return record

class History():
    ''' History of a population's evolution.

    INPUT
        (Population) population
    '''

    def __init__(self, population):
        self.length = population.length
        self.size = population.size
        self.records = []
        self.fittest = {'genome': None, 'fitness': -1, 'generation': None}
        self.success = False

    def add_entry(self, population):
        ''' Add the statistics of the current population to the history.

        INPUT
            (Population) population

        OUTPUT
            (dict) the added record
        '''
        record = {
            'generation': population.generation,
            'average': population.average_fitness,
            'best': population.best_fitness,
            'worst': population.worst_fitness,
            'genome': population.fittest.to_string(),
            }
        self.records.append(record)

        if record['best'] > self.fittest['fitness']:
            self.fittest = {
                'genome': record['genome'],
                'fitness': record['best'],
                'generation': record['generation'],
                }
        return record

    def __len__(self):
        return len(self.records)

    @property
    def generations(self):
        return np.array([r['generation'] for r in self.records])

    @property
    def averages(self):
        return np.array([r['average'] for r in self.records])

    @property
    def bests(self):
        return np.array([r['best'] for r in self.records])

    @property
    def worsts(self):
        return np.array([r['worst'] for r in self.records])

    def plot(self, title = 'Fitness by generation', xlabel = 'Generation',
        ylabel = 'Fitness', file_name = None, show_plot = True,
        show_max = True, show_average = True, show_min = False,
        legend = True, legend_location = 'lower right'):
        ''' Plot the fitness values.

        INPUT
            (string) title = 'Fitness by generation'
            (string) xlabel = 'Generation': label on the x-axis
            (string) ylabel = 'Fitness': label on the y-axis
            (string) file_name = None: file name to save the plot to
            (bool) show_plot = True: show plot as a pop-up
            (bool) show_max = True: show the best fitness line
            (bool) show_average = True: show the average fitness line
            (bool) show_min = False: show the worst fitness line
            (bool) legend = True: show legend
            (string or int) legend_location = 'lower right': legend location
        '''
        xs = self.generations

        plt.style.use("ggplot")
        fig = plt.figure()
        plt.ylim(0, self.length)
        plt.title(title)
        plt.xlabel(xlabel)
        plt.ylabel(ylabel)

        if show_max:
            plt.plot(xs, self.bests, '-', color = 'blue', label = 'best')
        if show_average:
            plt.plot(xs, self.averages, '-', color = 'black',
                label = 'average')
        if show_min:
            plt.plot(xs, self.worsts, '-', color = 'red', label = 'worst')

        if legend:
            plt.legend(loc = legend_location)

        if file_name:
            plt.savefig(file_name)

        if show_plot:
            plt.show()
        else:
            plt.close(fig)
