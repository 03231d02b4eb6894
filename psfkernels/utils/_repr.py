# Licensed under a 3-clause BSD style license - see LICENSE.rst
"""
Define tools for class __repr__ and __str__ strings.
"""


def make_repr(instance, params, *, long=False):
    """
    Generate a __repr__ string for a class instance.

    Parameters
    ----------
    instance : object
        The class instance.

    params : str or list of str
        List of attribute names to include in the repr. The order of
        returned parameters is the same as the order of ``params``.
        Attributes are looked up with `getattr`, so read-only
        properties are supported.

    long : bool, optional
        Whether to use the "long" format typically used by __str__.

    Returns
    -------
    repr_str : str
        The generated __repr__ string.
    """
    cls_name = f'{instance.__class__.__name__}'
    if long:
        cls_name = f'{instance.__class__.__module__}.{cls_name}'

    if isinstance(params, str):
        params = [params]

    cls_info = []
    for param in params:
        try:
            value = getattr(instance, param)
        except AttributeError:
            msg = f'Parameter {param!r} not found in instance'
            raise ValueError(msg) from None

        cls_info.append((param, value))

    if long:
        delim = ': '
        join_str = '\n'
    else:
        delim = '='
        join_str = ', '

    fmt = [f'{key}{delim}{val!r}' for key, val in cls_info]
    fmt = f'{join_str}'.join(fmt)

    if long:
        return f'<{cls_name}>\n{fmt}'

    return f'{cls_name}({fmt})'
