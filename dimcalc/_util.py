"""
Utility functions for internal use.
"""

from . import warnings
import decimal
import stringly
import functools
import inspect
import os


def defaults_from_env(f):
    '''Decorator for changing function defaults based on environment.

    A parameter ``precision`` of the decorated function takes its default from
    ``DIMCALC_PRECISION`` if that variable is set. Only parameters with type
    annotation and a default value are considered, and the string value is
    deserialized using `Stringly <https://pypi.org/project/stringly/>`_ into
    the annotated type. A value that fails to deserialize emits a
    :class:`dimcalc.warnings.DimcalcWarning` and leaves the default untouched.

    The decorated function is returned as is if the environment changes none
    of its defaults.'''

    sig = inspect.signature(f)
    overrides = {}
    for name, param in sig.parameters.items():
        envname = 'DIMCALC_' + name.upper()
        s = os.environ.get(envname)
        if s is None or param.annotation is param.empty or param.default is param.empty:
            continue
        try:
            overrides[name] = stringly.loads(param.annotation, s)
        except Exception as e:
            warnings.warn(f'ignoring environment variable {envname}: {e}')
    if not overrides:
        return f
    sig = sig.replace(parameters=[param.replace(default=overrides[name]) if name in overrides else param
        for name, param in sig.parameters.items()])

    @functools.wraps(f)
    def with_env_defaults(*args, **kwargs):
        bound = sig.bind(*args, **kwargs)
        bound.apply_defaults()
        return f(*bound.args, **bound.kwargs)

    with_env_defaults.__signature__ = sig
    return with_env_defaults


def f2s(v):
    'convert float to string without scientific notation'

    return format(decimal.Decimal(repr(v)), 'f')


# vim:sw=4:sts=4:et
