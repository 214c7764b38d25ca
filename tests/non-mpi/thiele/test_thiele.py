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

import numpy
import pytest

from thielepade.arithmetic import NATIVE
from thielepade.thiele import RecurrenceMatrix, solve_coefficients, greedy_coefficients


def _samples(n=8):
    x = numpy.linspace(0.1, 2.0, n) + 0.1j
    return x, numpy.tanh(x)


def _difference_table(x, f):
    # g[i, j] = g_{i+1}(x_{j+1}), j >= i
    n = x.size
    g = numpy.zeros((n, n), dtype=complex)
    g[0, :] = f
    for i in range(1, n):
        for j in range(i, n):
            g[i, j] = (g[i-1, i-1] - g[i-1, j]) / ((x[j] - x[i-1]) * g[i-1, j])
    return numpy.diag(g)


def test_recurrence_matrix_first_row():
    x, f = _samples(4)
    g = RecurrenceMatrix(4, NATIVE)
    g.build_row(x, f, 0)
    assert g[0, 0] == f[0]

    g.build_row(x, f, 1)
    assert numpy.allclose(g[1, 1], (f[0] - f[1]) / ((x[1] - x[0]) * f[1]))
    assert g.row(1).size == 2


def test_recurrence_matrix_upper_triangle():
    g = RecurrenceMatrix(3, NATIVE)
    with pytest.raises(IndexError):
        g[0, 1]
    with pytest.raises(IndexError):
        g[3, 0]
    with pytest.raises(IndexError):
        g[1, -1]


def test_classic_coefficients():
    x, f = _samples()
    a = solve_coefficients(x, f, NATIVE)
    assert numpy.allclose(a, _difference_table(x, f), rtol=1e-12)


def test_greedy_first_point():
    x = numpy.arange(1, 5, dtype=complex)
    f = numpy.array([0.1, 5.0, 4.0, 1.0], dtype=complex)
    res = greedy_coefficients(x, f, NATIVE)

    # P_1 is the constant f at the first point, so the closest value is taken next
    assert list(res.permutation[:2]) == [1, 2]
    assert res.coefficients[0] == 5.0


def test_greedy_ties():
    x = numpy.arange(1, 5, dtype=complex)
    f = numpy.array([1.0, 2.0, 2.0j, -2.0], dtype=complex)
    res = greedy_coefficients(x, f, NATIVE)
    assert res.permutation[0] == 1


def test_greedy_ties_later_step():
    # -1 / (x - x0): after x = 2, the points x = 1 and x = 3 are at the same
    # distance from the constant P_1 = f(2)
    x0 = 2.0 + 2.0j
    x = numpy.arange(1, 6, dtype=complex)
    f = -1.0 / (x - x0)
    res = greedy_coefficients(x, f, NATIVE)

    assert abs(res.coefficients[0] - f[0]) == abs(res.coefficients[0] - f[2])
    assert list(res.permutation[:2]) == [1, 0]


def test_greedy_permutation():
    x, f = _samples(10)
    x_org, f_org = x.copy(), f.copy()
    res = greedy_coefficients(x, f, NATIVE)

    numpy.testing.assert_array_equal(x, x_org)
    numpy.testing.assert_array_equal(f, f_org)
    assert sorted(res.permutation) == list(range(10))
    numpy.testing.assert_array_equal(res.x_ref, x[res.permutation])

    # The greedy coefficients are Thiele coefficients of the reordered points
    a = solve_coefficients(res.x_ref, f[res.permutation], NATIVE)
    assert numpy.allclose(res.coefficients, a, rtol=1e-12)


def test_degenerate_points():
    x = numpy.array([1.0, 1.0, 2.0], dtype=complex)
    f = numpy.array([1.0, 2.0, 3.0], dtype=complex)
    a = solve_coefficients(x, f, NATIVE)
    assert numpy.isfinite(a[0])
    assert not numpy.all(numpy.isfinite(a[1:]))
