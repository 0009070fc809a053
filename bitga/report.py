import sys

COLUMNS = ('Generation Number', 'Average Fitness', 'Best Fitness',
           'Best Individual')

def format_parameters(params):
    ''' Tab-separated name/value lines describing the GA parameters. '''
    rows = [
        ('LEN', params.length),
        ('POPSIZE', params.size),
        ('GENERATIONS', params.generations),
        ('CROSSOVER_PROB', params.crossover_prob),
        ('PMUT', params.mutation_prob),
        ('GENERATIONAL', 'true' if params.generational else 'false'),
        ]
    return '\n'.join(f'{name}\t{val}' for (name, val) in rows)

def format_header():
    return '\t'.join(COLUMNS)

def format_statistics(record):
    ''' One tab-separated line for a history record. '''
    return '{}\t{:f}\t{}\t{}'.format(record['generation'],
        record['average'], record['best'], record['genome'])

def format_outcome(success):
    return 'SUCCESS' if success else 'FAILURE'

class StatisticsPrinter():
    ''' Callback printing a statistics line for every history record.

    INPUT
        (file) stream = None: where to write, stdout if not given
    '''

    def __init__(self, stream = None):
        self.stream = stream

    def write(self, line):
        stream = self.stream if self.stream is not None else sys.stdout
        stream.write(line + '\n')

    def print_parameters(self, params):
        self.write(format_parameters(params))
        self.write(format_header())

    def print_outcome(self, success):
        self.write(format_outcome(success))

    def __call__(self, record):
        self.write(format_statistics(record))
