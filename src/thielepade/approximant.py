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

"""
Pade approximants by Thiele's reciprocal-difference method.

A function f known at N points x_n is approximated by

    P_N(x) = a_1 / (1 + a_2 (x - x_1) / (1 + ... a_N (x - x_{N-1}) / (1 + (x - x_N) g_{N+1}(x))))

which is evaluated (extrapolated/rotated) at a given set of arguments,
e.g. from the imaginary to the real frequency axis.

Functions taking an ``arithmetic`` argument return numbers of that
arithmetic (numpy.complex128 for native, mpmath complex for extended).
ThielePadeApproximant, interpolate and extended_precision_evaluate always
return numpy.complex128.
"""

import numpy

from . import thiele
from .arithmetic import NATIVE, GMP_default_prec, get_arithmetic
from .thiele import ThieleVariant, ThieleCoefficients
from .wallis import wallis_value, wallis_derivative
from .tools import PadePreconditionError, check_samples, check_point


def _to_variant(variant):
    if isinstance(variant, ThieleVariant):
        return variant
    if isinstance(variant, str):
        try:
            return ThieleVariant(variant.lower())
        except ValueError:
            pass
    raise PadePreconditionError(
        "variant must be chosen from 'classic' and 'greedy', got {!r}".format(variant))


def solve_coefficients(x, f, arithmetic=NATIVE):
    """
    Thiele coefficients for the reference points in the given order

    Parameters
    ----------
    x : array_like
        Reference points
    f : array_like
        Function values at x

    Returns
    -------
    a : numpy.ndarray
    """
    x, f = check_samples(x, f, arithmetic)
    return thiele.solve_coefficients(x, f, arithmetic)


def thiele_pade(x_ref, f_ref, variant, arithmetic=NATIVE):
    """
    Thiele-Pade coefficients of a function known at x_ref.

    Parameters
    ----------
    x_ref : array_like
        Reference points. Not modified.
    f_ref : array_like
        Function values at x_ref
    variant : ThieleVariant or str
        CLASSIC keeps the order of x_ref. GREEDY reorders the reference points
        so that each new point minimizes |P_i(x_{i+1}) - f(x_{i+1})|.
    arithmetic : ArithmeticBase

    Returns
    -------
    ThieleCoefficients
        x_ref : reference points in the order used by the continued fraction
        coefficients : a_1, ..., a_N
        permutation : x_ref_out = x_ref_in[permutation]
    """
    variant = _to_variant(variant)
    x, f = check_samples(x_ref, f_ref, arithmetic, "x_ref", "f_ref")
    if variant == ThieleVariant.GREEDY:
        return thiele.greedy_coefficients(x, f, arithmetic)
    return ThieleCoefficients(x_ref=x,
                              coefficients=thiele.solve_coefficients(x, f, arithmetic),
                              permutation=numpy.arange(x.size))


def evaluate(x_ref, x, coefficients, arithmetic=NATIVE):
    """
    Evaluate a Thiele continued fraction at x with Wallis' method

    Parameters
    ----------
    x_ref : array_like
        Reference points in the order used to compute the coefficients
    x : complex
        Evaluation point
    coefficients : array_like
        Thiele coefficients
    """
    x_ref, a = check_samples(x_ref, coefficients, arithmetic, "x_ref", "coefficients")
    x = check_point(x, arithmetic)
    return wallis_value(x_ref, x, a, arithmetic)


def derivative_from_coefficients(x_ref, x, coefficients, arithmetic=NATIVE):
    """
    Derivative of a Thiele continued fraction at x
    """
    x_ref, a = check_samples(x_ref, coefficients, arithmetic, "x_ref", "coefficients")
    x = check_point(x, arithmetic)
    return wallis_derivative(x_ref, x, a, arithmetic)


def evaluate_derivative(x_ref, f_ref, x, arithmetic=NATIVE):
    """
    Derivative at x of the Pade approximant of f_ref given at x_ref (classic order)
    """
    x_ref, f_ref = check_samples(x_ref, f_ref, arithmetic, "x_ref", "f_ref")
    x = check_point(x, arithmetic)
    a = thiele.solve_coefficients(x_ref, f_ref, arithmetic)
    return wallis_derivative(x_ref, x, a, arithmetic)


def pade(x, f, xx, arithmetic=NATIVE):
    """
    Value at xx of the Pade approximant of f given at x (classic order)
    """
    x, f = check_samples(x, f, arithmetic)
    xx = check_point(xx, arithmetic, "xx")
    a = thiele.solve_coefficients(x, f, arithmetic)
    return wallis_value(x, xx, a, arithmetic)


class ThielePadeApproximant(object):
    """
    Thiele-Pade approximant of a function known at a finite set of points.

    The coefficients are computed once and reused for every evaluation.

    Examples
    --------
    >>> iw = 1j * numpy.pi * (2 * numpy.arange(100) + 1) / 10.0
    >>> approx = ThielePadeApproximant(iw, 1 / (iw - 0.5), 'greedy')
    >>> g_w = approx(numpy.linspace(-1, 1, 11) + 0.01j)
    """

    def __init__(self, x, f, variant, precision='native', prec_bits=GMP_default_prec):
        """
        Parameters
        ----------
        x : array_like
            Reference points
        f : array_like
            Function values at x
        variant : ThieleVariant or str
            'classic' or 'greedy'
        precision : str
            'native' (double precision) or 'extended' (mpmath)
        prec_bits : int
            Working precision in bits for 'extended'
        """
        self._variant = _to_variant(variant)
        try:
            self._arith = get_arithmetic(precision, prec_bits)
        except ValueError as e:
            raise PadePreconditionError(str(e))
        self._x_ref, self._a, self._permutation = thiele_pade(x, f, self._variant, self._arith)

    @property
    def variant(self):
        return self._variant

    @property
    def arithmetic(self):
        return self._arith

    @property
    def n_par(self):
        return len(self._a)

    @property
    def x_ref(self):
        return self._arith.to_complex_array(self._x_ref)

    @property
    def coefficients(self):
        return self._arith.to_complex_array(self._a)

    @property
    def permutation(self):
        return self._permutation.copy()

    def __call__(self, x):
        """
        Value(s) of the approximant at x (scalar or array)
        """
        return self._eval(x, wallis_value)

    def derivative(self, x):
        """
        Derivative(s) of the approximant at x (scalar or array)
        """
        return self._eval(x, wallis_derivative)

    def _eval(self, x, func):
        arith = self._arith
        if numpy.isscalar(x):
            return arith.to_complex(func(self._x_ref, check_point(x, arith), self._a, arith))
        x = numpy.asarray(x)
        values = [func(self._x_ref, check_point(v, arith), self._a, arith) for v in x.ravel()]
        return arith.to_complex_array(values).reshape(x.shape)


def interpolate(x_ref, f_ref, x_query, variant, precision='native', prec_bits=GMP_default_prec):
    """
    Values of the Thiele-Pade approximant of f_ref at the points x_query

    Parameters
    ----------
    x_ref : array_like
        Reference points
    f_ref : array_like
        Function values at x_ref
    x_query : array_like
        Points where the approximant is evaluated
    variant : ThieleVariant or str
    precision : str
        'native' or 'extended'
    prec_bits : int

    Returns
    -------
    numpy.ndarray of complex128 with the shape of x_query
    """
    approximant = ThielePadeApproximant(x_ref, f_ref, variant, precision, prec_bits)
    return approximant(numpy.asarray(x_query, dtype=numpy.complex128))


def extended_precision_evaluate(x_ref, f_ref, x_query, variant=ThieleVariant.GREEDY, prec=GMP_default_prec):
    """
    Thiele-Pade interpolation carried out with mpmath numbers of prec bits.

    All M values are returned at once as numpy.complex128.
    """
    x_query = numpy.asarray(x_query, dtype=numpy.complex128)
    if x_query.ndim != 1:
        raise PadePreconditionError("x_query must be one-dimensional, got shape {}".format(x_query.shape))
    return interpolate(x_ref, f_ref, x_query, variant, 'extended', prec)
