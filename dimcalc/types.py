"""
Module with general purpose types.
"""

import collections.abc


class frozendict(collections.abc.Mapping):
    '''
    An immutable version of :class:`dict` that iterates in sorted key order.
    The :class:`frozendict` is hashable and both the keys and values should be
    hashable as well. Keys must be mutually comparable.

    Examples
    --------

    >>> d = frozendict({'spam': 0.0, 'eggs': 1.0})
    >>> list(d)
    ['eggs', 'spam']
    >>> d['spam'] = 1.0
    Traceback (most recent call last):
        ...
    TypeError: 'frozendict' object does not support item assignment
    '''

    def __new__(cls, base=()):
        if type(base) is cls:
            return base
        self = object.__new__(cls)
        self.__base = dict(sorted(dict(base).items(), key=lambda item: item[0]))
        self.__hash = hash(frozenset(self.__base.items()))  # check immutability and precompute hash
        return self

    def __reduce__(self):
        return type(self), (self.__base,)

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, frozendict):
            return NotImplemented
        if self.__base is other.__base:
            return True
        return self.__hash == other.__hash and self.__base == other.__base

    __getitem__ = lambda self, item: self.__base.__getitem__(item)
    __iter__ = lambda self: self.__base.__iter__()
    __len__ = lambda self: self.__base.__len__()
    __hash__ = lambda self: self.__hash
    __contains__ = lambda self, key: self.__base.__contains__(key)

    copy = lambda self: self.__base.copy()

    __repr__ = lambda self: '{}({})'.format(type(self).__name__, self.__base)


# vim:sw=4:sts=4:et
