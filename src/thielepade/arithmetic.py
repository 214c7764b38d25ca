#
# thielepade -- Thiele-Pade analytic continuation
# Copyright (C) 2026 The thielepade developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
#

import contextlib
import numpy
from mpmath.ctx_mp import MPContext

from .tools import PadePreconditionError

GMP_default_prec = 256


class ArithmeticBase(object):
    """
    Number system in which the Thiele recurrences are carried out.

    The recurrences in thiele.py and wallis.py only use +, -, *, abs(),
    comparisons and the methods below, so they run unchanged on
    numpy.complex128 scalars or on mpmath multiprecision complex numbers.
    """

    def name(self):
        return "Base arithmetic"

    @property
    def zero(self):
        raise NotImplementedError

    @property
    def one(self):
        raise NotImplementedError

    def scalar(self, value):
        """
        Convert a single complex number into the native number type
        """
        raise NotImplementedError

    def asarray(self, values):
        """
        Return a new 1D array holding the given values in the native number type
        """
        raise NotImplementedError

    def zeros(self, n):
        raise NotImplementedError

    def divide(self, num, den):
        """
        num / den. Division by zero must not raise; it yields inf/nan.
        """
        raise NotImplementedError

    def errstate(self):
        """
        Context manager active while a recurrence runs
        """
        return contextlib.nullcontext()

    def to_complex(self, value):
        return complex(value)

    def to_complex_array(self, values):
        return numpy.array([self.to_complex(v) for v in values], dtype=numpy.complex128)


class NativeArithmetic(ArithmeticBase):
    """
    IEEE double precision (numpy.complex128)
    """

    def name(self):
        return "native"

    @property
    def zero(self):
        return numpy.complex128(0.0)

    @property
    def one(self):
        return numpy.complex128(1.0)

    def scalar(self, value):
        return numpy.complex128(value)

    def asarray(self, values):
        return numpy.array(values, dtype=numpy.complex128).ravel()

    def zeros(self, n):
        return numpy.zeros(n, dtype=numpy.complex128)

    def divide(self, num, den):
        return num / den

    def errstate(self):
        # Degenerate nodes produce inf/nan exactly as IEEE arithmetic does.
        return numpy.errstate(divide='ignore', invalid='ignore', over='ignore')

    def to_complex_array(self, values):
        return numpy.array(values, dtype=numpy.complex128)


class ExtendedArithmetic(ArithmeticBase):
    """
    Arbitrary precision complex numbers provided by mpmath.

    Each instance owns its MPContext, so the precision of mpmath.mp is never touched.
    """

    def __init__(self, prec=GMP_default_prec):
        """
        Parameters
        ----------
        prec : int
            Working precision in bits
        """
        if int(prec) < 53:
            raise PadePreconditionError("prec must be at least 53 bits, got {}".format(prec))
        self._ctx = MPContext()
        self._ctx.prec = int(prec)

    def name(self):
        return "extended"

    @property
    def prec(self):
        return self._ctx.prec

    @property
    def zero(self):
        return self._ctx.mpc(0)

    @property
    def one(self):
        return self._ctx.mpc(1)

    def scalar(self, value):
        if hasattr(value, '_mpc_') or hasattr(value, '_mpf_'):
            return self._ctx.mpc(value)
        return self._ctx.mpc(complex(value))

    def asarray(self, values):
        values = numpy.asarray(values).ravel()
        arr = numpy.empty(values.size, dtype=object)
        for i, v in enumerate(values):
            arr[i] = self.scalar(v)
        return arr

    def zeros(self, n):
        arr = numpy.empty(n, dtype=object)
        arr[:] = [self.zero for _ in range(n)]
        return arr

    def divide(self, num, den):
        if den == 0:
            ctx = self._ctx
            if num == 0 or ctx.isnan(num.real) or ctx.isnan(num.imag):
                return ctx.mpc(ctx.nan, ctx.nan)
            return ctx.mpc(ctx.inf, ctx.nan)
        return num / den


arithmetic_classes = {
    'native': NativeArithmetic,
    'extended': ExtendedArithmetic,
}

NATIVE = NativeArithmetic()


def get_arithmetic(precision, prec_bits=GMP_default_prec):
    """
    Select a number system by name

    Parameters
    ----------
    precision : str
        'native' or 'extended'
    prec_bits : int
        Working precision in bits (only used by 'extended')

    Returns
    -------
    ArithmeticBase
    """
    if isinstance(precision, ArithmeticBase):
        return precision
    if precision not in arithmetic_classes:
        raise ValueError("Unknown precision '{}'. Available: {}".format(
            precision, ", ".join(arithmetic_classes.keys())))
    if precision == 'native':
        return NATIVE
    return arithmetic_classes[precision](prec_bits)
