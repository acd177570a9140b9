# Copyright 2024-2026 The fantomo contributors
#
# This file is part of fantomo.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Utilities mainly for internal use."""

from contextlib import contextmanager

import numpy as np

__all__ = (
    'indent',
    'is_string',
    'array_str',
    'signature_string',
)


def indent(string, indent_str='    '):
    """Return a copy of ``string`` indented by ``indent_str``.

    Parameters
    ----------
    string : str
        Text that should be indented.
    indent_str : str, optional
        String to be inserted before each new line. The default is to
        indent by 4 spaces.

    Returns
    -------
    indented : str
        The indented text.

    Examples
    --------
    >>> text = '''This is line 1.
    ... Next line.'''
    >>> print(indent(text))
        This is line 1.
        Next line.
    >>> print(indent(text, indent_str='<->'))
    <->This is line 1.
    <->Next line.
    """
    return '\n'.join(indent_str + row for row in string.splitlines())


def is_string(obj):
    """Return ``True`` if ``obj`` behaves like a string, ``False`` else."""
    try:
        obj + ''
    except TypeError:
        return False
    else:
        return True


@contextmanager
def npy_printoptions(**extra_opts):
    """Context manager to temporarily set NumPy print options.

    See Also
    --------
    numpy.get_printoptions
    numpy.set_printoptions
    """
    orig_opts = np.get_printoptions()

    try:
        new_opts = orig_opts.copy()
        new_opts.update(extra_opts)
        np.set_printoptions(**new_opts)
        yield

    finally:
        np.set_printoptions(**orig_opts)


def array_str(a, nprint=6):
    """Stringification of an array.

    Parameters
    ----------
    a : `array-like`
        The array to print.
    nprint : int, optional
        Maximum number of elements to print per axis in ``a``. For larger
        arrays, a summary is printed, with ``nprint // 2`` elements on
        each side and ``...`` in the middle (per axis).

    Examples
    --------
    >>> print(array_str(np.arange(4)))
    [0, 1, 2, 3]
    >>> print(array_str(np.arange(10)))
    [0, 1, 2, ..., 7, 8, 9]
    """
    a = np.asarray(a)

    max_shape = tuple(n if n < nprint else nprint for n in a.shape)
    with npy_printoptions(threshold=int(np.prod(max_shape)),
                          edgeitems=nprint // 2,
                          suppress=True):
        a_str = np.array2string(a, separator=', ')
    return a_str


def signature_string(posargs, optargs, sep=', ', mod='!r'):
    """Return a stringified signature from given arguments.

    Parameters
    ----------
    posargs : sequence
        Positional argument values, always included in the returned string.
    optargs : sequence of 3-tuples
        Optional arguments with names and defaults, given in the form::

            [(name1, value1, default1), (name2, value2, default2), ...]

        Only those parameters that are different from the given default
        are included as ``name=value`` keyword pairs.

        **Note:** The comparison is done by using ``if value == default:``,
        which is not valid for, e.g., NumPy arrays.

    sep : string or sequence of strings, optional
        Separator(s) for the argument strings. A provided single string is
        used for all joining operations.
        A given sequence must have 3 entries ``pos_sep, opt_sep, part_sep``.
    mod : string or callable or sequence, optional
        Format modifier(s) for the argument strings, see
        `signature_string_parts`.

    Returns
    -------
    signature : string
        Stringification of a signature, typically used in the form::

            '{}({})'.format(self.__class__.__name__, signature)

    Examples
    --------
    >>> posargs = [1, 'hello', None]
    >>> optargs = [('dtype', 'float32', 'float64')]
    >>> signature_string(posargs, optargs)
    "1, 'hello', None, dtype='float32'"

    Optional arguments equal to their default are omitted:

    >>> signature_string(['hello'], [('size', 1, 1)])
    "'hello'"
    >>> signature_string([], [('size', 2, 1)])
    'size=2'
    """
    if is_string(sep):
        pos_sep = opt_sep = part_sep = sep
    else:
        pos_sep, opt_sep, part_sep = sep

    posargs_conv, optargs_conv = signature_string_parts(posargs, optargs, mod)

    parts = []
    if posargs_conv:
        parts.append(pos_sep.join(argstr for argstr in posargs_conv))
    if optargs_conv:
        parts.append(opt_sep.join(optargs_conv))

    return part_sep.join(parts)


def _arg_string(arg, modifier, precision):
    """Stringify a single argument value with ``modifier``."""
    if callable(modifier):
        return modifier(arg)
    elif is_string(arg):
        # Preserve single quotes for strings by default
        if modifier:
            fmt = '{{{}}}'.format(modifier)
        else:
            fmt = "'{}'"
        return fmt.format(arg)
    elif np.isscalar(arg) and str(arg) in ('inf', 'nan'):
        return "'{}'".format(arg)
    elif (np.isscalar(arg) and
          np.array(arg).real.astype('int64') != arg and
          modifier in ('', '!s', '!r')):
        # Floating point value, use numpy print option 'precision'
        fmt = '{{:.{}}}'.format(precision)
        return fmt.format(arg)
    else:
        fmt = '{{{}}}'.format(modifier)
        return fmt.format(arg)


def signature_string_parts(posargs, optargs, mod='!r'):
    """Return stringified arguments as tuples.

    Parameters
    ----------
    posargs : sequence
        Positional argument values, always included in the returned string
        tuple.
    optargs : sequence of 3-tuples
        Optional arguments with names and defaults, given in the form::

            [(name1, value1, default1), (name2, value2, default2), ...]

    mod : string or callable or sequence, optional
        Format modifier(s) for the argument strings.
        In its most general form, ``mod`` is a sequence of 2 sequences
        ``pos_mod, opt_mod`` with ``len(pos_mod) == len(posargs)`` and
        ``len(opt_mod) == len(optargs)``. A string entry ``m`` results in
        ``'{{{}}}'.format(m).format(arg)``, a callable ``to_str`` in
        ``to_str(arg)``. A single string or callable applies to all
        arguments. Floating point scalars are printed with the
        ``precision`` value of NumPy's printing options.

    Returns
    -------
    pos_strings : tuple of str
        The stringified positional arguments.
    opt_strings : tuple of str
        The stringified optional arguments, not including the ones
        equal to their respective defaults.
    """
    if is_string(mod) or callable(mod):
        pos_mod = opt_mod = mod
    else:
        pos_mod, opt_mod = mod

    mods = []
    for m, args in zip((pos_mod, opt_mod), (posargs, optargs)):
        if is_string(m) or callable(m):
            mods.append([m] * len(args))
        else:
            if len(m) == 1:
                mods.append(m * len(args))
            elif len(m) == len(args):
                mods.append(m)
            else:
                raise ValueError('sequence length mismatch: '
                                 'len({}) != len({})'.format(m, args))

    pos_mod, opt_mod = mods
    precision = np.get_printoptions()['precision']

    posargs_conv = [_arg_string(arg, modifier, precision)
                    for arg, modifier in zip(posargs, pos_mod)]

    optargs_conv = []
    for (name, value, default), modifier in zip(optargs, opt_mod):
        if value == default:
            continue
        optargs_conv.append(
            '{}={}'.format(name, _arg_string(value, modifier, precision)))

    return tuple(posargs_conv), tuple(optargs_conv)


if __name__ == '__main__':
    from fantomo.util.testutils import run_doctests
    run_doctests()
