from dimcalc import quantity
from dimcalc.testing import TestCase

import fractions
import pickle


class Dimension(TestCase):

    def test_drop_zero_powers(self):
        self.assertEqual(dict(quantity.Dimension({'m': 1, 's': 0})), {'m': 1})
        self.assertFalse(quantity.Dimension({'kg': 0}))

    def test_multiply(self):
        velocity = quantity.Dimension({'m': 1, 's': -1})
        self.assertEqual(velocity * quantity.Dimension({'s': 1}), quantity.Dimension({'m': 1}))

    def test_divide(self):
        length = quantity.Dimension({'m': 1})
        self.assertEqual(length / quantity.Dimension({'s': 1}), quantity.Dimension({'m': 1, 's': -1}))
        self.assertEqual(length / length, quantity.Dimension())

    def test_power(self):
        self.assertEqual(quantity.Dimension({'m': 1})**2, quantity.Dimension({'m': 2}))
        self.assertEqual(quantity.Dimension({'m': 2})**fractions.Fraction(1, 2), quantity.Dimension({'m': 1}))

    def test_name(self):
        self.assertEqual(quantity.Dimension({'kg': 1, 'm': 1, 's': -2}).name, 'kg*m/s2')
        self.assertEqual(quantity.Dimension({'kg': 1, 'm': -3}).name, 'kg/m3')
        self.assertEqual(quantity.Dimension({'s': -1}).name, '/s')
        self.assertEqual(quantity.Dimension({'m': fractions.Fraction(3, 2)}).name, 'm3_2')
        self.assertEqual(quantity.Dimension().name, '')

    def test_invalid(self):
        with self.assertRaises(ValueError):
            quantity.Dimension({1: 1})

    def test_pickle(self):
        d = quantity.Dimension({'m': 1, 's': -1})
        self.assertEqual(pickle.loads(pickle.dumps(d)), d)


class Quantity(TestCase):

    def test_exact_magnitude(self):
        self.assertEqual(quantity.Quantity(0.1).magnitude, fractions.Fraction(1, 10))
        self.assertEqual(quantity.Quantity('19.3').magnitude, fractions.Fraction(193, 10))
        self.assertEqual(quantity.Quantity(3).magnitude, 3)

    def test_invalid_magnitude(self):
        with self.assertRaises(TypeError):
            quantity.Quantity(None)
        with self.assertRaises(TypeError):
            quantity.Quantity(True)

    def test_dimensionless(self):
        self.assertTrue(quantity.Quantity(5).dimensionless)
        self.assertFalse(quantity.Quantity(5, {'kg': 1}).dimensionless)
        self.assertTrue(quantity.dimensionless(5))

    def test_multiply(self):
        mass = quantity.Quantity(2, {'kg': 1})
        acceleration = quantity.Quantity(10, {'m': 1, 's': -2})
        self.assertEqual(mass * acceleration, quantity.Quantity(20, {'kg': 1, 'm': 1, 's': -2}))
        self.assertEqual(2 * acceleration, quantity.Quantity(20, {'m': 1, 's': -2}))
        self.assertEqual(mass * 10, quantity.Quantity(20, {'kg': 1}))
        self.assertEqual(quantity.Quantity(2, {'s': 1}) * quantity.Quantity(10, {'s': -1}), 20)

    def test_divide(self):
        self.assertEqual(quantity.Quantity(2, {'m': 1}) / quantity.Quantity(10, {'s': 1}), quantity.Quantity('.2', {'m': 1, 's': -1}))
        self.assertEqual(2 / quantity.Quantity(10, {'s': 1}), quantity.Quantity('.2', {'s': -1}))
        self.assertEqual(quantity.Quantity(2, {'kg': 1}) / quantity.Quantity(10, {'kg': 1}), fractions.Fraction(1, 5))

    def test_divide_by_zero(self):
        with self.assertRaises(ZeroDivisionError):
            quantity.Quantity(2, {'m': 1}) / quantity.Quantity(0, {'s': 1})
        with self.assertRaises(ZeroDivisionError):
            quantity.Quantity(2, {'m': 1}) / 0

    def test_power(self):
        self.assertEqual(quantity.Quantity(3, {'m': 1})**2, quantity.Quantity(9, {'m': 2}))
        self.assertEqual(quantity.Quantity(3, {'m': 1})**0, 1)
        self.assertEqual(quantity.Quantity(4, {'m': 2})**-1, quantity.Quantity('.25', {'m': -2}))
        self.assertEqual(quantity.Quantity(4, {'m': 2})**.5, quantity.Quantity(2, {'m': 1}))

    def test_add(self):
        self.assertEqual(quantity.Quantity(2, {'kg': 1}) + quantity.Quantity(3, {'kg': 1}), quantity.Quantity(5, {'kg': 1}))
        self.assertEqual(1 + quantity.Quantity(2), 3)
        with self.assertRaisesRegex(quantity.DimensionError, r'incompatible arguments for add: \[kg\], \[m\]'):
            quantity.Quantity(2, {'kg': 1}) + quantity.Quantity(3, {'m': 1})

    def test_sub(self):
        self.assertEqual(quantity.Quantity(2, {'kg': 1}) - quantity.Quantity(3, {'kg': 1}), quantity.Quantity(-1, {'kg': 1}))
        self.assertEqual(5 - quantity.Quantity(2), 3)
        with self.assertRaisesRegex(TypeError, r'incompatible arguments for sub: \[kg\], \[m\]'):
            quantity.Quantity(2, {'kg': 1}) - quantity.Quantity(3, {'m': 1})

    def test_compare(self):
        self.assertLess(quantity.Quantity(2, {'kg': 1}), quantity.Quantity(3, {'kg': 1}))
        self.assertGreaterEqual(quantity.Quantity(3, {'kg': 1}), quantity.Quantity(3, {'kg': 1}))
        self.assertGreater(quantity.Quantity(1), 0)
        with self.assertRaisesRegex(quantity.DimensionError, r'incompatible arguments for lt: \[kg\], \[m\]'):
            quantity.Quantity(2, {'kg': 1}) < quantity.Quantity(3, {'m': 1})

    def test_neg_abs(self):
        self.assertEqual(-quantity.Quantity(2, {'kg': 1}), quantity.Quantity(-2, {'kg': 1}))
        self.assertEqual(abs(quantity.Quantity(-2, {'kg': 1})), quantity.Quantity(2, {'kg': 1}))

    def test_float(self):
        self.assertEqual(float(quantity.Quantity('2.5')), 2.5)
        with self.assertRaises(quantity.DimensionError):
            float(quantity.Quantity(2, {'kg': 1}))

    def test_conforms(self):
        self.assertTrue(quantity.Quantity(2, {'kg': 1}).conforms(quantity.Quantity(7, {'kg': 1})))
        self.assertFalse(quantity.Quantity(2, {'kg': 1}).conforms(quantity.Quantity(7, {'s': 1})))
        self.assertFalse(quantity.Quantity(2, {'kg': 1}).conforms(7))

    def test_hash(self):
        a = quantity.Quantity('19.3', {'kg': 1})
        b = quantity.Quantity(fractions.Fraction(193, 10), {'kg': 1})
        self.assertEqual(hash(a), hash(b))
        self.assertEqual(len({a, b}), 1)

    def test_hash_dimensionless(self):
        self.assertEqual(hash(quantity.Quantity(2)), hash(2))
        self.assertEqual(hash(quantity.Quantity('.5')), hash(.5))
        self.assertIn(2, {quantity.Quantity(2)})
        self.assertIn(quantity.Quantity(2), {2: 'two'})

    def test_repr(self):
        self.assertEqual(repr(quantity.Quantity('19.3', {'kg': 1})), '193/10[kg]')
        self.assertEqual(str(quantity.Quantity(20, {'kg': 1, 'm': 1, 's': -2})), '20[kg*m/s2]')

    def test_pickle(self):
        q = quantity.Quantity('19.3', {'kg': 1, 'm': -3})
        self.assertEqual(pickle.loads(pickle.dumps(q)), q)

    def test_asquantity(self):
        q = quantity.Quantity(1, {'m': 1})
        self.assertIs(quantity.asquantity(q), q)
        self.assertEqual(quantity.asquantity(2), quantity.Quantity(2))
        with self.assertRaises(TypeError):
            quantity.asquantity('2m')


class FallibleArithmetic(TestCase):

    def test_multiply(self):
        self.assertEqual(quantity.multiply(quantity.Quantity(2, {'m': 1}), quantity.Quantity(0, {'s': 1})), quantity.Quantity(0, {'m': 1, 's': 1}))

    def test_divide(self):
        self.assertEqual(quantity.divide(quantity.Quantity(3, {'m': 1}), quantity.Quantity(2, {'s': 1})), quantity.Quantity('1.5', {'m': 1, 's': -1}))

    def test_divide_by_zero(self):
        self.assertIsNone(quantity.divide(quantity.Quantity(3, {'m': 1}), quantity.Quantity(0, {'s': 1})))
        self.assertIsNone(quantity.divide(1, 0))


# vim:sw=4:sts=4:et
