'''
Extensions of the :mod:`unittest` module.
'''

import fractions
import unittest
import treelog
import warnings as _builtin_warnings
import logging
from dimcalc import warnings, quantity


class PrintHandler(logging.Handler):
    'similar to StreamHandler except using always the current sys.stdout'

    def emit(self, record):
        print(record.msg)


class TestCase(unittest.TestCase):
    '''A class whose instances are single test cases.

    All :class:`dimcalc.warnings.DimcalcWarning` are turned into an
    exception by default. Use

    ::

      def test(self):
        with self.assertWarns(...):
          ...

    to assert expected warnings.
    '''

    maxDiff = None  # prevent assertEqual from shortening the diff error message

    def enter_context(self, ctx):
        retval = ctx.__enter__()
        self.addCleanup(ctx.__exit__, None, None, None)
        return retval

    def setUp(self):
        super().setUp()
        print_handler = PrintHandler()
        dimcalc_logger = logging.getLogger('dimcalc')
        dimcalc_logger.setLevel('INFO')  # handle events of level INFO and up
        dimcalc_logger.addHandler(print_handler)
        self.addCleanup(dimcalc_logger.removeHandler, print_handler)
        self.enter_context(treelog.set(treelog.LoggingLog('dimcalc')))
        self.enter_context(_builtin_warnings.catch_warnings())
        _builtin_warnings.simplefilter('error', warnings.DimcalcWarning)

    def assertQuantityAlmostEqual(self, actual, desired, places=7):
        '''Assert equal dimensions and magnitudes equal to within ``places``
        significant decimals.

        If either magnitude is zero, or both are smaller than ``10**-places``,
        the magnitudes are compared to within ``places`` absolute decimals
        instead.'''

        actual = quantity.asquantity(actual)
        desired = quantity.asquantity(desired)
        self.assertEqual(actual.dimension, desired.dimension)
        tiny = fractions.Fraction(1, 10**places)
        if not actual.magnitude or not desired.magnitude or max(abs(actual.magnitude), abs(desired.magnitude)) < tiny:
            self.assertAlmostEqual(float(actual.magnitude - desired.magnitude), 0., places=places)
        else:
            self.assertAlmostEqual(float(actual.magnitude / desired.magnitude), 1., places=places)


# vim:sw=4:sts=4:et
