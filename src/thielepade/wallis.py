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
Wallis' method for Thiele continued fractions

    P_N(x) = a_1 / (1 + a_2 (x - x_1) / (1 + ... a_N (x - x_{N-1}) / 1))
           = A_N(x) / B_N(x)

with A_n = A_{n-1} + a_n (x - x_{n-1}) A_{n-2} (B_n likewise),
A_{-1} = 1, A_0 = 0, B_{-1} = 0, B_0 = 1.

All functions in this module expect arrays and scalars already converted
to the number type of the given arithmetic (see arithmetic.py).
"""

from .arithmetic import NATIVE

# |B_n| above which A_n, A_{n-1}, B_{n-1} are rescaled by B_n
WALLIS_TOL = 1.0e-6


class WallisState(object):
    """
    Numerator/denominator convergents acoef[n], bcoef[n] for n = -1, ..., n_par
    """

    def __init__(self, n_par, arithmetic=NATIVE):
        self._arith = arithmetic
        self.n_par = n_par

        # acoef[n] is stored at self._acoef[n + 1]
        self._acoef = arithmetic.zeros(n_par + 2)
        self._bcoef = arithmetic.zeros(n_par + 2)
        self._acoef[0] = arithmetic.one
        self._bcoef[1] = arithmetic.one

    def acoef(self, n):
        return self._acoef[n + 1]

    def bcoef(self, n):
        return self._bcoef[n + 1]

    def probe(self, n, x_ref, x, a):
        """
        One step of the recurrence at x without storing the result.

        Parameters
        ----------
        n : int
            Step (1 <= n <= n_par). acoef[n-1], acoef[n-2] must be available.
        x_ref : array
            Reference points; x_ref[n - 2] is used for n > 1
        x : scalar
            Point at which the continued fraction is evaluated
        a : array
            Thiele coefficients; a[n - 1] is used

        Returns
        -------
        (acoef[n], bcoef[n]) before normalization
        """
        delta = a[n - 1]
        if n > 1:
            delta = delta * (x - x_ref[n - 2])
        return (self._acoef[n] + delta * self._acoef[n - 1],
                self._bcoef[n] + delta * self._bcoef[n - 1])

    def commit(self, n, acoef_n, bcoef_n, tol=WALLIS_TOL):
        """
        Store the pair of step n and rescale it
        """
        self._acoef[n + 1] = acoef_n
        self._bcoef[n + 1] = bcoef_n
        self.normalize(n, tol)

    def normalize(self, n, tol=WALLIS_TOL):
        """
        Divide acoef[n], acoef[n-1] and bcoef[n-1] by bcoef[n] and set bcoef[n] = 1.
        Nothing is done if |bcoef[n]| <= tol.
        The ratios acoef[k]/bcoef[k] do not change.
        """
        b = self._bcoef[n + 1]
        if abs(b) > tol:
            self._acoef[n + 1] = self._acoef[n + 1] / b
            self._acoef[n] = self._acoef[n] / b
            self._bcoef[n] = self._bcoef[n] / b
            self._bcoef[n + 1] = self._arith.one

    def value(self, n):
        """
        n-th convergent acoef[n] / bcoef[n]
        """
        return self._arith.divide(self._acoef[n + 1], self._bcoef[n + 1])


def wallis_value(x_ref, x, a, arithmetic=NATIVE):
    """
    Value of the continued fraction at x (rescaled after every step)
    """
    n_par = len(a)
    state = WallisState(n_par, arithmetic)
    with arithmetic.errstate():
        for n in range(1, n_par + 1):
            acoef_n, bcoef_n = state.probe(n, x_ref, x, a)
            state.commit(n, acoef_n, bcoef_n)
        return state.value(n_par)


def wallis_derivative(x_ref, x, a, arithmetic=NATIVE):
    """
    Derivative of the continued fraction at x.

    A_n, B_n and their derivatives dA_n, dB_n are propagated together:
        dA_{i+1} = dA_i + a_{i+1} A_{i-1} + (x - x_i) a_{i+1} dA_{i-1}
    and P'(x) = dA_N / B_N - A_N dB_N / B_N^2.
    No rescaling is applied.
    """
    n_par = len(a)
    acoef = arithmetic.zeros(n_par + 1)
    bcoef = arithmetic.zeros(n_par + 1)
    dacoef = arithmetic.zeros(n_par + 1)
    dbcoef = arithmetic.zeros(n_par + 1)

    acoef[1] = a[0]
    bcoef[0] = arithmetic.one
    bcoef[1] = arithmetic.one

    with arithmetic.errstate():
        for i in range(1, n_par):
            t = (x - x_ref[i - 1]) * a[i]
            acoef[i + 1] = acoef[i] + t * acoef[i - 1]
            bcoef[i + 1] = bcoef[i] + t * bcoef[i - 1]
            dacoef[i + 1] = dacoef[i] + a[i] * acoef[i - 1] + t * dacoef[i - 1]
            dbcoef[i + 1] = dbcoef[i] + a[i] * bcoef[i - 1] + t * dbcoef[i - 1]

        return arithmetic.divide(dacoef[n_par], bcoef[n_par]) \
            - arithmetic.divide(acoef[n_par] * dbcoef[n_par], bcoef[n_par] * bcoef[n_par])
