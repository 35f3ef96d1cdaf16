import warnings


class DimcalcWarning(Warning):
    'Base class for warnings from dimcalc.'


def warn(message, category=DimcalcWarning, stacklevel=1):
    warnings.warn(message, category, stacklevel=stacklevel)


# vim:sw=4:sts=4:et
