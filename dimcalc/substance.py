'''
Substances and their properties.

A :class:`Substance` is an amount together with a table of named
:class:`Property` objects, each of which is a defining ratio between two
quantities. Gold, for instance, relates mass to volume:

    >>> from dimcalc import context
    >>> ctx = context.SI()
    >>> gold = Substance(1, {'density': Property(
    ...     input=ctx.parse('19.3g'), input_name='mass',
    ...     output=ctx.parse('1mL'), output_name='volume')})

The substance operates in one of two modes, depending on its amount. With a
dimensionless amount the substance is a definition, and properties are looked
up by their key:

    >>> gold.get('density')
    19300[kg/m3]

Scaling the substance by a dimensional quantity turns it into an instance,
a concrete sample of the material. Properties are then looked up by the name
of either side of the ratio, and converted to the size of the sample:

    >>> sample = gold * ctx.parse('10g')
    >>> ctx.show(sample.get('volume'))
    'approx. 5.181347e-7 m3 (volume)'

A conversion that makes no physical sense for the sample is refused with a
:class:`ConformanceError` that names the conflicting quantities:

    >>> (gold * ctx.parse('10s')).get('volume')
    Traceback (most recent call last):
         ...
    dimcalc.substance.ConformanceError: 10[s] and 193/10000[kg] do not conform
'''

import treelog
from dataclasses import dataclass
from typing import Optional
from . import quantity, reply, types


class SubstanceError(Exception):
    'Base class for errors of substance lookups.'

    def show(self, context) -> str:
        return str(self)


class GenericError(SubstanceError):
    '''Missing property or division by zero.'''


class ConformanceError(SubstanceError):
    '''Two quantities that should cancel have different dimensions.

    Both quantities are available as the ``left`` and ``right`` attributes so
    that the caller can explain the mismatch.'''

    def __init__(self, left, right):
        super().__init__(f'{left} and {right} do not conform')
        self.left = left
        self.right = right

    def show(self, context) -> str:
        return f'Conformance error: {context.show(self.left)} and {context.show(self.right)} do not conform'


@dataclass(frozen=True)
class Property:
    '''Defining ratio between two quantities.

    Args
    ----
    input : :class:`dimcalc.quantity.Quantity`
        The quantity that corresponds to ``output``.
    input_name : :class:`str`
        Name by which an instance is asked for its input side.
    output : :class:`dimcalc.quantity.Quantity`
        The quantity that corresponds to ``input``.
    output_name : :class:`str`
        Name by which an instance is asked for its output side.
    doc : :class:`str` (optional)
        Description of the property.
    '''

    input: quantity.Quantity
    input_name: str
    output: quantity.Quantity
    output_name: str
    doc: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, 'input', quantity.asquantity(self.input))
        object.__setattr__(self, 'output', quantity.asquantity(self.output))


class Substance:
    '''Amount of material with a table of properties.

    Args
    ----
    amount : :class:`dimcalc.quantity.Quantity` or number
        Dimensionless for a definition, dimensional for a concrete sample.
    properties : mapping of :class:`str` to :class:`Property`
        The property table. It is stored in a frozen, name ordered mapping
        that substances derived by scaling share.
    '''

    def __init__(self, amount, properties=()):
        properties = types.frozendict(properties)
        for name, prop in properties.items():
            if not isinstance(name, str):
                raise TypeError(f'property names should be str, got {type(name).__name__}')
            if not isinstance(prop, Property):
                raise TypeError(f'property {name!r} should be a Property, got {type(prop).__name__}')
        self.__amount = quantity.asquantity(amount)
        self.__properties = properties

    @property
    def amount(self) -> quantity.Quantity:
        return self.__amount

    @property
    def properties(self) -> types.frozendict:
        return self.__properties

    def __eq__(self, other):
        if not isinstance(other, Substance):
            return NotImplemented
        return self.__amount == other.__amount and self.__properties == other.__properties

    def __hash__(self):
        return hash((self.__amount, self.__properties))

    def __repr__(self):
        return f'Substance({self.__amount!r}, {", ".join(self.__properties)})'

    def get(self, name: str) -> quantity.Quantity:
        '''Return the converted value of a property.

        A definition is queried by property key; an instance by the input or
        output name of a property, where the first property in name order
        wins.

        Raises
        ------
        :class:`GenericError`
            If no property matches, or the amount has zero magnitude.
        :class:`ConformanceError`
            If the amount does not cancel against the matched property.
        :class:`ValueError`
            If a definition is queried for a property with a zero output.
        '''

        if self.__amount.dimensionless:
            prop = self.__properties.get(name)
            if prop is None:
                raise GenericError(f'No such property {name}')
            value = quantity.divide(quantity.multiply(self.__amount, prop.input), prop.output)
            if value is None:
                raise ValueError(f'property {name!r} has an output of zero magnitude')
            return value
        for prop in self.__properties.values():
            if name == prop.output_name:
                return self.__convert(prop.input, prop.output)
            if name == prop.input_name:
                return self.__convert(prop.output, prop.input)
        treelog.debug(f'no property of {self!r} has a side named {name!r}')
        raise GenericError(f'No such property {name}')

    def __convert(self, given, wanted):
        # given/amount must be a pure number for the sample to determine wanted
        ratio = quantity.divide(given, self.__amount)
        if ratio is None:
            raise GenericError('Division by zero')
        if not ratio.dimensionless:
            raise ConformanceError(self.__amount, given)
        value = quantity.divide(wanted, ratio)
        if value is None:
            raise GenericError('Division by zero')
        return value

    def to_reply(self, context) -> reply.SubstanceReply:
        '''Build the reply records of all known conversions.

        For a definition every property yields one record, and any failure
        aborts the reply. For an instance the first record is the amount,
        followed by the properties that conform to it; the others are
        omitted.

        Raises
        ------
        :class:`GenericError`
            If a division by zero occurs.
        '''

        if self.__amount.dimensionless:
            records = [self.__definition_record(context, name, prop) for name, prop in self.__properties.items()]
        else:
            parts = context.to_parts(self.__amount)
            records = [reply.PropertyReply(name=parts.quantity or 'amount', input=None, output=parts)]
            for name, prop in self.__properties.items():
                record = self.__instance_record(context, name, prop)
                if record is not None:
                    records.append(record)
        return reply.SubstanceReply(tuple(records))

    def __definition_record(self, context, name, prop):
        if not prop.input.dimensionless:
            return reply.PropertyReply(name, context.to_parts(prop.input), context.to_parts(prop.output), prop.doc)
        value = _divide(context, quantity.multiply(prop.output, self.__amount), prop.input)
        return reply.PropertyReply(name, None, context.to_parts(value), prop.doc)

    def __instance_record(self, context, name, prop):
        input = _divide(context, prop.input, self.__amount)
        output = _divide(context, prop.output, self.__amount)
        if input.dimensionless:
            return reply.PropertyReply(prop.output_name, None, context.to_parts(_divide(context, prop.output, input)), prop.doc)
        if output.dimensionless:
            return reply.PropertyReply(prop.input_name, None, context.to_parts(_divide(context, prop.input, output)), prop.doc)
        treelog.debug(f'omitting property {name}: neither side conforms to {self.__amount!r}')
        return None

    def show(self, context) -> str:
        'Render the reply, or the error message if it cannot be built.'

        try:
            return context.format_reply(self.to_reply(context))
        except SubstanceError as e:
            return e.show(context)

    def __mul__(self, other):
        try:
            other = quantity.asquantity(other)
        except TypeError:
            return NotImplemented
        return Substance(quantity.multiply(self.__amount, other), self.__properties)

    __rmul__ = __mul__

    def __truediv__(self, other):
        try:
            other = quantity.asquantity(other)
        except TypeError:
            return NotImplemented
        amount = quantity.divide(self.__amount, other)
        if amount is None:
            raise GenericError('Division by zero')
        return Substance(amount, self.__properties)


def _divide(context, a, b):
    value = quantity.divide(a, b)
    if value is None:
        raise GenericError(f'Division by zero: <{context.show(a)}> / <{context.show(b)}>')
    return value


# vim:sw=4:sts=4:et
