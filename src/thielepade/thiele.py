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
Thiele's reciprocal differences

    g_1(x) = f(x),
    g_n(x) = (g_{n-1}(x_{n-1}) - g_{n-1}(x)) / ((x - x_{n-1}) g_{n-1}(x)),  n >= 2,
    a_n = g_n(x_n).

Expressions are taken from G. A. J. Baker, Essentials of Pade Approximants
(Academic, New York, 1975). The greedy ordering of the reference points follows
PHYSICAL REVIEW B 94, 165109 (2016) and J. CHEM. THEORY COMPUT. 19, 16, 5450 (2023).
"""

import sys
from enum import Enum
from collections import namedtuple

import numpy

from .arithmetic import NATIVE
from .wallis import WallisState


class ThieleVariant(Enum):
    CLASSIC = 'classic'
    GREEDY = 'greedy'


ThieleCoefficients = namedtuple('ThieleCoefficients', ('x_ref', 'coefficients', 'permutation'))


class RecurrenceMatrix(object):
    """
    Lower triangular table g[i, j] = g_{j+1}(x_{i+1}), 0 <= j <= i < n.

    Only the lower triangle is allocated (row-major packed storage).
    """

    def __init__(self, n, arithmetic=NATIVE):
        self.n = n
        self._arith = arithmetic
        self._buf = arithmetic.zeros(n * (n + 1) // 2)

    @staticmethod
    def _offset(i):
        return i * (i + 1) // 2

    def _index(self, key):
        i, j = key
        if not (0 <= j <= i < self.n):
            raise IndexError("({}, {}) is outside of the lower triangle of a {}x{} table".format(
                i, j, self.n, self.n))
        return self._offset(i) + j

    def __getitem__(self, key):
        return self._buf[self._index(key)]

    def row(self, i):
        """
        Return a copy of g[i, 0..i]
        """
        start = self._index((i, 0))
        return self._buf[start:start + i + 1].copy()

    def diagonal(self):
        return numpy.array([self._buf[self._offset(i) + i] for i in range(self.n)],
                           dtype=self._buf.dtype)

    def build_row(self, x, f, n):
        """
        Compute row n from x[n], f[n] and the diagonal elements of rows 0..n-1.

        Parameters
        ----------
        x : array
            Reference points (at least n + 1 of them)
        f : array
            Function values at x
        n : int
            Row to be computed (0-based)
        """
        buf = self._buf
        divide = self._arith.divide
        base = self._index((n, 0))

        buf[base] = f[n]
        for idx in range(1, n + 1):
            diag = buf[self._offset(idx - 1) + idx - 1]
            prev = buf[base + idx - 1]
            buf[base + idx] = divide(diag - prev, (x[n] - x[idx - 1]) * prev)


def solve_coefficients(x, f, arithmetic=NATIVE):
    """
    Thiele coefficients a_n = g_n(x_n) for the given order of the reference points

    Parameters
    ----------
    x : array
        Reference points (in the number type of arithmetic)
    f : array
        Function values at x

    Returns
    -------
    a : array
    """
    n_par = len(x)
    g_func = RecurrenceMatrix(n_par, arithmetic)
    a = arithmetic.zeros(n_par)
    with arithmetic.errstate():
        for i in range(n_par):
            g_func.build_row(x, f, i)
            a[i] = g_func[i, i]
    return a


def greedy_coefficients(x, f, arithmetic=NATIVE):
    """
    Thiele coefficients with a greedy ordering of the reference points.

    The first point maximizes |f|. Each following point is the remaining one
    that minimizes |P_i(x_j) - f_j|, where P_i(x_j) is obtained from a single
    Wallis step on top of the convergents of the points already selected.
    Ties are resolved in favour of the point found first.

    Parameters
    ----------
    x : array
        Reference points (in the number type of arithmetic). Not modified.
    f : array
        Function values at x

    Returns
    -------
    ThieleCoefficients
        Reordered copy of x, coefficients, and the indices of the
        selected points in x.
    """
    n_par = len(x)
    remaining = list(range(n_par))

    xtmp = arithmetic.zeros(n_par)
    ytmp = arithmetic.zeros(n_par)
    a = arithmetic.zeros(n_par)
    g_func = RecurrenceMatrix(n_par, arithmetic)
    state = WallisState(n_par, arithmetic)

    kdx = max(remaining, key=lambda i: abs(f[i]))
    order = [kdx]
    remaining.remove(kdx)
    xtmp[0] = x[kdx]
    ytmp[0] = f[kdx]

    with arithmetic.errstate():
        g_func.build_row(xtmp, ytmp, 0)
        a[0] = g_func[0, 0]

        for idx in range(1, n_par):
            pval = sys.float_info.max
            winner = None
            for j in remaining:
                acoef_j, bcoef_j = state.probe(idx, xtmp, x[j], a)
                deltap = abs(arithmetic.divide(acoef_j, bcoef_j) - f[j])
                if deltap < pval:
                    pval = deltap
                    winner = (j, acoef_j, bcoef_j)

            if winner is None:
                # Every candidate gives inf or nan
                j = remaining[0]
                winner = (j,) + state.probe(idx, xtmp, x[j], a)

            kdx, acoef_in, bcoef_in = winner
            order.append(kdx)
            remaining.remove(kdx)
            xtmp[idx] = x[kdx]
            ytmp[idx] = f[kdx]

            state.commit(idx, acoef_in, bcoef_in)

            g_func.build_row(xtmp, ytmp, idx)
            a[idx] = g_func[idx, idx]

    return ThieleCoefficients(x_ref=xtmp, coefficients=a, permutation=numpy.array(order, dtype=int))
