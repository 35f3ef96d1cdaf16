'Dimensional conversions for unit-aware calculators'

version = '1.0'
__version__ = version
version_name = None
long_version = ('{} "{}"' if version_name else '{}').format(version, version_name)

__all__ = [
    'context',
    'quantity',
    'reply',
    'substance',
    'testing',
    'types',
    'warnings',
]

# vim:sw=4:sts=4:et
