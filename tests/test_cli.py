"""
Tests for the command line entry point and the text report.
"""

import io
import unittest

from bitga.cli import main
from bitga.config import Parameters
from bitga.report import (format_header, format_outcome, format_parameters,
                          format_statistics)


class TestReport(unittest.TestCase):
    """Test the formatting of the report lines."""

    def test_parameters(self):
        params = Parameters(length = 8, size = 4, generations = 3,
            crossover_prob = 60, mutation_prob = 2, generational = False)
        self.assertEqual(format_parameters(params).split('\n'), [
            'LEN\t8',
            'POPSIZE\t4',
            'GENERATIONS\t3',
            'CROSSOVER_PROB\t60',
            'PMUT\t2',
            'GENERATIONAL\tfalse',
            ])

    def test_header(self):
        self.assertEqual(format_header(), 'Generation Number\tAverage Fitness'
                         '\tBest Fitness\tBest Individual')

    def test_statistics(self):
        record = {'generation': 3, 'average': 3.5, 'best': 6, 'worst': 1,
                  'genome': '01111110'}
        self.assertEqual(format_statistics(record),
                         '3\t3.500000\t6\t01111110')

    def test_outcome(self):
        self.assertEqual(format_outcome(True), 'SUCCESS')
        self.assertEqual(format_outcome(False), 'FAILURE')


class TestMain(unittest.TestCase):
    """Test a full run through the entry point."""

    def setUp(self):
        self.params = Parameters(length = 12, size = 10, generations = 20)

    def run_main(self, argv, params = None):
        stream = io.StringIO()
        code = main(argv, params = params or self.params, stream = stream)
        return (code, stream.getvalue())

    def test_output_protocol(self):
        (code, output) = self.run_main(['17'])
        self.assertEqual(code, 0)
        lines = output.splitlines()

        self.assertEqual(lines[0], 'LEN\t12')
        self.assertEqual(lines[6], format_header())
        self.assertIn(lines[-1], ('SUCCESS', 'FAILURE'))

        stats = lines[7:-1]
        self.assertGreaterEqual(len(stats), 1)
        for (gen, line) in enumerate(stats):
            fields = line.split('\t')
            self.assertEqual(len(fields), 4)
            self.assertEqual(int(fields[0]), gen)
            self.assertEqual(len(fields[3]), 12)
            self.assertEqual(int(fields[2]), fields[3].count('1'))

        best = int(stats[-1].split('\t')[2])
        self.assertEqual(lines[-1] == 'SUCCESS', best == 12)

    def test_same_seed_same_output(self):
        self.assertEqual(self.run_main(['3']), self.run_main(['3']))

    def test_failure_still_exits_zero(self):
        params = Parameters(length = 200, size = 4, generations = 2)
        (code, output) = self.run_main(['1'], params = params)
        self.assertEqual(code, 0)
        self.assertEqual(output.splitlines()[-1], 'FAILURE')

    def test_steady_state(self):
        params = self.params.replace(generational = False, generations = 3)
        (code, output) = self.run_main(['5'], params = params)
        self.assertEqual(code, 0)
        self.assertIn('GENERATIONAL\tfalse', output)

    def test_invalid_seed(self):
        with self.assertRaises(SystemExit):
            self.run_main(['not-a-seed'])


if __name__ == '__main__':
    unittest.main()
