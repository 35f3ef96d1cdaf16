'''
The quantity module provides the dimensional values that substances are built
from.

A :class:`Quantity` pairs an exact rational magnitude with a
:class:`Dimension`, the powers of the base units the magnitude is expressed
in. Base units are plain strings and carry no meaning beyond their name; a
:class:`dimcalc.context.Context` decides which ones exist.

    >>> from dimcalc.quantity import Quantity
    >>> rho = Quantity('19.3', {'kg': 1, 'm': -3}) * 1000
    >>> rho
    19300[kg/m3]
    >>> rho.dimension
    Dimension(kg/m3)

Multiplication and division combine dimensions, while addition and
subtraction require them to be equal:

    >>> Quantity(2, {'m': 1}) + Quantity(3, {'s': 1})
    Traceback (most recent call last):
         ...
    dimcalc.quantity.DimensionError: incompatible arguments for add: [m], [s]

Division by a quantity of zero magnitude raises :class:`ZeroDivisionError`.
Code that treats this case as an ordinary outcome uses :func:`divide`
instead, which returns ``None``:

    >>> divide(Quantity(1, {'m': 1}), Quantity(0, {'s': 1})) is None
    True

Magnitudes are stored as :class:`fractions.Fraction`. Floats are converted via
their shortest decimal representation, so that ``Quantity(0.1)`` holds exactly
one tenth.
'''

import fractions
import numbers
import operator
from typing import Optional
from . import types


class DimensionError(TypeError):
    pass


class Dimension(types.frozendict):
    '''Powers of base units.

    An immutable mapping from base unit symbol to a nonzero rational power.
    Zero powers are dropped on construction, so that the empty dimension is
    the dimension of pure numbers.

    >>> Dimension({'kg': 1, 'm': 1, 's': -2})
    Dimension(kg*m/s2)
    >>> Dimension({'m': 1}) / Dimension({'m': 1})
    Dimension()
    '''

    def __new__(cls, powers=()):
        if type(powers) is cls:
            return powers
        items = {}
        for base, power in dict(powers).items():
            if not isinstance(base, str):
                raise ValueError('all keys must be of type str')
            power = fractions.Fraction(power)
            if power:
                items[base] = power
        return super().__new__(cls, items)

    @property
    def name(self):
        return ''.join(('*' if power > 0 else '/') + base
                     + (str(abs(power.numerator)) if abs(power.numerator) != 1 else '')
                     + ('_'+str(abs(power.denominator)) if abs(power.denominator) != 1 else '')
            for base, power in sorted(self.items(), key=lambda item: (item[1] < 0, item[0]))).lstrip('*')

    @staticmethod
    def _binop(op, a, b):
        return Dimension({base: op(a.get(base, 0), b.get(base, 0)) for base in set(a) | set(b)})

    def __mul__(self, other):
        if not isinstance(other, Dimension):
            return NotImplemented
        return self._binop(operator.add, self, other)

    def __truediv__(self, other):
        if not isinstance(other, Dimension):
            return NotImplemented
        return self._binop(operator.sub, self, other)

    def __pow__(self, other):
        try:
            # Fraction supports only a fixed set of input types, so to extend
            # this we first see if we can convert the argument to integer.
            other = other.__index__()
        except AttributeError:
            pass
        return Dimension({base: power*fractions.Fraction(other) for base, power in self.items()})

    def __str__(self):
        return self.name

    def __repr__(self):
        return f'Dimension({self.name})'


def _exact(value):
    if isinstance(value, fractions.Fraction):
        return value
    if isinstance(value, bool) or not isinstance(value, (numbers.Rational, numbers.Real, str)):
        raise TypeError(f'expected a real number, got {type(value).__name__}')
    if isinstance(value, float):
        value = repr(value)
    return fractions.Fraction(value)


class Quantity:
    '''Magnitude with a dimension.

    Args
    ----
    magnitude : :class:`int`, :class:`float`, :class:`str` or :class:`fractions.Fraction`
        The numerical value, stored exactly as a fraction.
    dimension : mapping of :class:`str` to rational powers (optional)
        The powers of the base units; empty for a pure number.
    '''

    def __init__(self, magnitude, dimension=()):
        self.__magnitude = _exact(magnitude)
        self.__dimension = Dimension(dimension)

    @property
    def magnitude(self) -> fractions.Fraction:
        return self.__magnitude

    @property
    def dimension(self) -> Dimension:
        return self.__dimension

    @property
    def dimensionless(self) -> bool:
        'True if the dimension is empty.'

        return not self.__dimension

    def conforms(self, other) -> bool:
        'True if ``other`` has the same dimension.'

        return self.__dimension == asquantity(other).dimension

    def __reduce__(self):
        return Quantity, (self.__magnitude, dict(self.__dimension))

    def __bool__(self):
        return bool(self.__magnitude)

    def __float__(self):
        if self.__dimension:
            raise DimensionError(f'cannot convert [{self.__dimension}] to float')
        return float(self.__magnitude)

    def __repr__(self):
        return f'{self.__magnitude}[{self.__dimension}]'

    __str__ = __repr__

    def __hash__(self):
        # dimensionless quantities equal plain numbers
        if not self.__dimension:
            return hash(self.__magnitude)
        return hash((self.__magnitude, self.__dimension))

    def __eq__(self, other):
        try:
            other = asquantity(other)
        except TypeError:
            return NotImplemented
        return self.__dimension == other.__dimension and self.__magnitude == other.__magnitude

    def __compare(self, op, other):
        try:
            other = asquantity(other)
        except TypeError:
            return NotImplemented
        if self.__dimension != other.__dimension:
            raise DimensionError(f'incompatible arguments for {op.__name__}: [{self.__dimension}], [{other.__dimension}]')
        return op(self.__magnitude, other.__magnitude)

    __lt__ = lambda self, other: self.__compare(operator.lt, other)
    __le__ = lambda self, other: self.__compare(operator.le, other)
    __gt__ = lambda self, other: self.__compare(operator.gt, other)
    __ge__ = lambda self, other: self.__compare(operator.ge, other)

    def __neg__(self):
        return Quantity(-self.__magnitude, self.__dimension)

    def __pos__(self):
        return self

    def __abs__(self):
        return Quantity(abs(self.__magnitude), self.__dimension)

    def __add_like(self, op, other):
        try:
            other = asquantity(other)
        except TypeError:
            return NotImplemented
        if self.__dimension != other.__dimension:
            raise DimensionError(f'incompatible arguments for {op.__name__}: [{self.__dimension}], [{other.__dimension}]')
        return Quantity(op(self.__magnitude, other.__magnitude), self.__dimension)

    def __add__(self, other):
        return self.__add_like(operator.add, other)

    def __sub__(self, other):
        return self.__add_like(operator.sub, other)

    def __radd__(self, other):
        return self.__add_like(operator.add, other)

    def __rsub__(self, other):
        return -self.__add_like(operator.sub, other)

    def __mul__(self, other):
        try:
            other = asquantity(other)
        except TypeError:
            return NotImplemented
        return Quantity(self.__magnitude * other.__magnitude, self.__dimension * other.__dimension)

    __rmul__ = __mul__

    def __truediv__(self, other):
        try:
            other = asquantity(other)
        except TypeError:
            return NotImplemented
        if not other.__magnitude:
            raise ZeroDivisionError('division by zero')
        return Quantity(self.__magnitude / other.__magnitude, self.__dimension / other.__dimension)

    def __rtruediv__(self, other):
        try:
            other = asquantity(other)
        except TypeError:
            return NotImplemented
        return other / self

    def __pow__(self, other):
        power = fractions.Fraction(other)
        if power.denominator == 1:
            magnitude = self.__magnitude ** power.numerator
        else:
            magnitude = _exact(float(self.__magnitude) ** float(power))
        return Quantity(magnitude, self.__dimension ** power)


def asquantity(value) -> Quantity:
    '''Return ``value`` as a :class:`Quantity`, wrapping plain numbers as
    dimensionless quantities.'''

    if isinstance(value, Quantity):
        return value
    if isinstance(value, str):
        raise TypeError('strings must be parsed by a context')
    return Quantity(value)


def dimensionless(value) -> bool:
    return asquantity(value).dimensionless


def multiply(a, b) -> Quantity:
    '''Multiply two quantities. Never fails.'''

    return asquantity(a) * asquantity(b)


def divide(a, b) -> Optional[Quantity]:
    '''Divide two quantities.

    Returns ``None`` if ``b`` has zero magnitude, leaving it to the caller to
    decide what a failed division means.'''

    b = asquantity(b)
    if not b.magnitude:
        return None
    return asquantity(a) / b


# vim:sw=4:sts=4:et
