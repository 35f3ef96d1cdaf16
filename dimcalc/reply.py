'''
Display records produced by substances and rendered by a context.
'''

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class QuantityParts:
    '''Displayable decomposition of a quantity.

    Args
    ----
    value : :class:`str`
        The formatted magnitude, e.g. ``'0.0193'`` or ``'approx. 5.181347e-7'``.
    unit : :class:`str`
        The unit the value is expressed in; empty for pure numbers.
    quantity : :class:`str` (optional)
        Name of the physical quantity, e.g. ``'mass'``, if the context knows it.
    '''

    value: str
    unit: str = ''
    quantity: Optional[str] = None

    def __str__(self):
        s = f'{self.value} {self.unit}' if self.unit else self.value
        if self.quantity:
            s += f' ({self.quantity})'
        return s


@dataclass(frozen=True)
class PropertyReply:
    'One line of a substance reply.'

    name: str
    input: Optional[QuantityParts]
    output: QuantityParts
    doc: Optional[str] = None

    def __str__(self):
        if self.input is not None:
            s = f'{self.name}: {self.input} = {self.output}'
        else:
            s = f'{self.name}: {self.output}'
        if self.doc:
            s += f'. {self.doc}'
        return s


@dataclass(frozen=True)
class SubstanceReply:
    'Ordered sequence of property replies.'

    properties: Tuple[PropertyReply, ...]

    def __iter__(self):
        return iter(self.properties)

    def __len__(self):
        return len(self.properties)

    def __getitem__(self, index):
        return self.properties[index]

    def __str__(self):
        return '\n'.join(map(str, self.properties))


# vim:sw=4:sts=4:et
