import argparse

from .config import Parameters
from .core import Evolution
from .report import StatisticsPrinter

def build_parser():
    parser = argparse.ArgumentParser(prog = 'bitga',
        description = 'Evolve bit strings towards the all-ones string.')
    parser.add_argument('seed', nargs = '?', type = int, default = None,
        help = 'seed of the random stream, taken from the time if absent')
    return parser

def main(argv = None, params = None, stream = None):
    ''' Run the GA, printing the parameters, the statistics of every
        generation and finally SUCCESS or FAILURE. The exit code is 0 in
        both cases.

    INPUT
        (list) argv = None: command line arguments, sys.argv if not given
        (Parameters) params = None: GA parameters, defaults if not given
        (file) stream = None: output stream, stdout if not given
    '''
    args = build_parser().parse_args(argv)
    params = params if params is not None else Parameters()
    printer = StatisticsPrinter(stream)

    printer.print_parameters(params)
    with Evolution(params, rng = args.seed) as evolution:
        history = evolution.evolve(callback = printer)
    printer.print_outcome(history.success)
    return 0
