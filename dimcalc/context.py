'''
The context module turns text into quantities and quantities into text.

A :class:`Context` holds a table of units and a table of physical quantity
names. It is the renderer that substances use to build their replies, and it
is deliberately small: it knows how to read a single product of units such as
``19.3g/cm3``, not how to evaluate expressions.

    >>> ctx = SI()
    >>> rho = ctx.parse('19.3g/cm3')
    >>> ctx.show(rho)
    '19300 kg/m3 (density)'

The formal syntax accepted by :meth:`Context.parse` is:

.. code:: BNF

    <quantity> ::= <number> <units> | <number> <operator> <units>
    <number>   ::= "" | <integer> | <integer> "." <integer>
                ; Numerical value, allowing for decimal fractions but not
                ; scientific notation. An empty number is equivalent to 1.
    <units>    ::= <factor> | <factor> <operator> <units>
    <factor>   ::= <number> <unit> <power>
    <unit>     ::= <prefix> <name>
    <power>    ::= "" | <integer> | <integer> "_" <integer>
    <operator> ::= "*" | "/"

Every unit is defined with all metric prefixes at once. Defining a unit whose
prefixed names collide with an existing unit is an error, which resolves the
ambiguity between prefixes and names (is it mol or milli-ol?) in advance.

Quantities can be (de)serialized with `Stringly
<https://pypi.org/project/stringly/>`_ through a type bound to a unit:

    >>> import stringly
    >>> Density = ctx.bind('g/cm3')
    >>> stringly.loads(Density, '19.3g/cm3') == rho
    True
    >>> stringly.dumps(Density, rho)
    '19.3g/cm3'
'''

import decimal
import fractions
import re
import treelog
from typing import Optional
from . import _util, quantity, reply


class Units(dict):
    '''Table of named quantities.

    Units are assigned as attributes, either as a :class:`dimcalc.quantity.Quantity`
    or as a string in terms of previously defined units. Every assignment also
    defines the prefixed variants of the unit.

    >>> units = Units()
    >>> units.m = quantity.Quantity(1, {'m': 1})
    >>> units.L = 'dm3'
    >>> units['mL']
    1/1000000[m3]
    '''

    __prefix = {p: fractions.Fraction(10)**e for p, e in dict(Y=24, Z=21, E=18, P=15, T=12, G=9, M=6, k=3, h=2,
        d=-1, c=-2, m=-3, μ=-6, n=-9, p=-12, f=-15, a=-18, z=-21, y=-24).items()}

    def __setattr__(self, name, value):
        self.define(name, value)

    def __getattr__(self, name):
        if name not in self:
            raise AttributeError(name)
        return self[name]

    def define(self, name, value, *, prefixes=True):
        '''Define a unit, optionally without prefixed variants.'''

        if not isinstance(value, quantity.Quantity):
            if not isinstance(value, str):
                raise TypeError(f'can only assign Quantity or str, got {type(value).__name__}')
            value = self.parse(value)
        if name in self:
            raise ValueError(f'cannot define {name!r}: unit is already defined')
        scaled_units = {p + name: value * s for p, s in self.__prefix.items()} if prefixes else {}
        collisions = set(scaled_units) & set(self)
        if collisions:
            raise ValueError(f'cannot define {name!r}: unit collides with ' + ', '.join(sorted(collisions)))
        self[name] = value
        self.update(scaled_units)
        treelog.debug(f'defined unit {name} = {value!r}')

    def parse(self, s):
        '''Parse a product of units into a quantity.'''

        if not isinstance(s, str):
            raise ValueError(f'expected a str, received {type(s).__name__}')
        s = s.strip()
        tail = s.lstrip('+-0123456789.')
        q = quantity.Quantity(_number(s[:len(s)-len(tail)]))
        for expr, power, isnumer in _split_factors(tail):
            u = expr.lstrip('+-0123456789.')
            try:
                v = _number(expr[:len(expr)-len(u)]) * self[u]**power
            except (ValueError, KeyError):
                raise ValueError(f'invalid (sub)expression {expr!r}') from None
            q = q * v if isnumer else q / v
        return q


def _number(s):
    if not s:
        return fractions.Fraction(1)
    if s in ('+', '-'):
        return fractions.Fraction(s + '1')
    try:
        return fractions.Fraction(s)
    except ValueError:
        raise ValueError(f'invalid number {s!r}') from None


def _split_factors(s):
    'yield (factor, power, isnumer) for every factor of a product such as kg*m/s2'

    for op, factor in re.findall(r'([*/]?)([^*/]+)', s):
        base, numer, denom = re.fullmatch(r'(.*?)(\d*)(?:_(\d+))?', factor).groups()
        yield base, fractions.Fraction(int(numer or 1), int(denom or 1)), op != '/'


def _decimal(value, maxdigits):
    'exact decimal representation of a fraction, or None if it needs more than maxdigits'

    d = value.denominator
    ndigits = 0
    for p in 2, 5:
        n = 0
        while d % p == 0:
            d //= p
            n += 1
        ndigits = max(ndigits, n)
    if d != 1 or ndigits > maxdigits:
        return None
    i, f = divmod(abs(value.numerator) * 10**ndigits // value.denominator, 10**ndigits)
    return ('-' if value < 0 else '') + (f'{i}.{f:0{ndigits}d}' if ndigits else str(i))


class Context:
    '''Unit table and renderer.

    Args
    ----
    short_output : :class:`bool`
        Join reply records on a single line, separated by semicolons.
    precision : :class:`int`
        Number of significant digits of approximate values, and the maximum
        number of decimals of values that are displayed exactly.

    Both defaults can be changed via the ``DIMCALC_SHORT_OUTPUT`` and
    ``DIMCALC_PRECISION`` environment variables.
    '''

    @_util.defaults_from_env
    def __init__(self, short_output: bool = False, precision: int = 7):
        if precision < 1:
            raise ValueError(f'precision should be positive, got {precision}')
        self.short_output = short_output
        self.precision = precision
        self.units = Units()
        self.quantities = {}

    def parse(self, s) -> quantity.Quantity:
        return self.units.parse(s)

    def name_quantity(self, dimension, name):
        '''Register the name of a physical quantity.

        The dimension can be given as a :class:`dimcalc.quantity.Dimension`
        or as a unit string, e.g. ``'kg/m3'``.'''

        if isinstance(dimension, str):
            dimension = self.parse(dimension).dimension
        dimension = quantity.Dimension(dimension)
        if dimension in self.quantities:
            raise ValueError(f'cannot name [{dimension}] {name!r}: already named {self.quantities[dimension]!r}')
        self.quantities[dimension] = name

    def quantity_name(self, q) -> Optional[str]:
        return self.quantities.get(quantity.asquantity(q).dimension)

    def format_magnitude(self, value) -> str:
        value = fractions.Fraction(value)
        if value.denominator == 1:
            return str(value.numerator)
        exact = _decimal(value, self.precision)
        if exact is not None:
            return exact
        with decimal.localcontext() as local:
            local.prec = self.precision
            local.Emax = decimal.MAX_EMAX
            local.Emin = decimal.MIN_EMIN
            approx = decimal.Decimal(value.numerator) / decimal.Decimal(value.denominator)
        return f'approx. {approx:g}'

    def to_parts(self, q) -> reply.QuantityParts:
        q = quantity.asquantity(q)
        return reply.QuantityParts(
            value=self.format_magnitude(q.magnitude),
            unit=q.dimension.name,
            quantity=self.quantity_name(q))

    def show(self, q) -> str:
        return str(self.to_parts(q))

    def format_reply(self, records) -> str:
        return ('; ' if self.short_output else '\n').join(map(str, records))

    def bind(self, unit):
        '''Create a type that (de)serializes quantities in ``unit``.'''

        return _Bound(f'{type(self).__name__}:{unit}', (), dict(_context=self, _unit=unit))


class _Bound(type):
    'metaclass for unit bound quantity types'

    def __call__(cls, s):
        return cls.__stringly_loads__(s)

    def __stringly_loads__(cls, s):
        q = cls._context.parse(s)
        ref = cls._context.parse(cls._unit)
        if not q.conforms(ref):
            raise ValueError(f'invalid unit: expected [{ref.dimension}], got [{q.dimension}]')
        return q

    def __stringly_dumps__(cls, v):
        if not isinstance(v, quantity.Quantity):
            raise ValueError(f'can only dump quantities, got {type(v).__name__!r}')
        ratio = v / cls._context.parse(cls._unit)
        if not ratio.dimensionless:
            raise ValueError(f'invalid unit: expected [{cls._context.parse(cls._unit).dimension}], got [{v.dimension}]')
        value = _decimal(ratio.magnitude, 64)
        if value is None:
            value = ('-' if ratio.magnitude < 0 else '') + _util.f2s(float(abs(ratio.magnitude)))
        return value + cls._unit


def SI(**kwargs):
    '''Create a context with the base and derived units of the International
    System of Units, and names for the common physical quantities.'''

    ctx = Context(**kwargs)
    units = ctx.units

    units.m = quantity.Quantity(1, {'m': 1})
    units.s = quantity.Quantity(1, {'s': 1})
    units.g = quantity.Quantity(fractions.Fraction(1, 1000), {'kg': 1})
    units.A = quantity.Quantity(1, {'A': 1})
    units.K = quantity.Quantity(1, {'K': 1})
    units.mol = quantity.Quantity(1, {'mol': 1})
    units.cd = quantity.Quantity(1, {'cd': 1})

    units.N = 'kg*m/s2' # newton
    units.Pa = 'N/m2' # pascal
    units.J = 'N*m' # joule
    units.W = 'J/s' # watt
    units.Hz = '/s' # hertz
    units.C = 'A*s' # coulomb
    units.V = 'J/C' # volt
    units.Ω = 'V/A' # ohm

    units.min = '60s' # minute
    units.h = '60min' # hour
    units.day = '24h' # day
    units.L = 'dm3' # liter
    units.t = '1000kg' # ton
    units.eV = '.1602176634aJ' # electronvolt
    units.define('in', '.0254m', prefixes=False) # inch
    units.define('lb', '453.59237g', prefixes=False) # pound

    for name, dimension in [
            ('length', 'm'),
            ('time', 's'),
            ('mass', 'kg'),
            ('current', 'A'),
            ('temperature', 'K'),
            ('substance', 'mol'),
            ('luminous intensity', 'cd'),
            ('area', 'm2'),
            ('volume', 'm3'),
            ('velocity', 'm/s'),
            ('acceleration', 'm/s2'),
            ('force', 'N'),
            ('pressure', 'Pa'),
            ('energy', 'J'),
            ('power', 'W'),
            ('frequency', 'Hz'),
            ('charge', 'C'),
            ('electric potential', 'V'),
            ('resistance', 'Ω'),
            ('density', 'kg/m3'),
            ('specific volume', 'm3/kg'),
            ('molar mass', 'kg/mol'),
            ('molar volume', 'm3/mol'),
            ('concentration', 'mol/m3')]:
        ctx.name_quantity(dimension, name)

    return ctx


# vim:sw=4:sts=4:et
