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

from thielepade.arithmetic import NATIVE, ExtendedArithmetic
from thielepade.wallis import WallisState, wallis_value, wallis_derivative, WALLIS_TOL


def _continued_fraction(x_ref, x, a):
    # a_1 / (1 + a_2 (x - x_1) / (1 + ... ))
    result = 0j
    for i in range(len(a) - 1, 0, -1):
        result = a[i] * (x - x_ref[i - 1]) / (1.0 + result)
    return a[0] / (1.0 + result)


def _random_fraction(n, seed=1):
    rng = numpy.random.RandomState(seed)
    x_ref = rng.randn(n) + 1j * rng.randn(n)
    a = 0.5 * (rng.randn(n) + 1j * rng.randn(n))
    return x_ref, a


def test_wallis_value():
    x_ref, a = _random_fraction(12)
    for x in [0.3 + 0.2j, -1.0 + 2.0j, 2.5]:
        x = numpy.complex128(x)
        assert numpy.allclose(wallis_value(x_ref, x, a), _continued_fraction(x_ref, x, a), rtol=1e-10)


def test_initial_state():
    state = WallisState(3)
    assert state.acoef(-1) == 1 and state.acoef(0) == 0
    assert state.bcoef(-1) == 0 and state.bcoef(0) == 1


def test_probe_does_not_modify_state():
    x_ref, a = _random_fraction(4)
    x = numpy.complex128(0.1 + 0.1j)
    state = WallisState(4)
    for n in [1, 2]:
        state.commit(n, *state.probe(n, x_ref, x, a))

    before = [(state.acoef(n), state.bcoef(n)) for n in range(-1, 5)]
    state.probe(3, x_ref, 2.0 + 1.0j, a)
    after = [(state.acoef(n), state.bcoef(n)) for n in range(-1, 5)]
    assert before == after


def test_normalization():
    x_ref, a = _random_fraction(3)
    x = numpy.complex128(1.0 + 0.5j)
    state = WallisState(3)
    state.commit(1, *state.probe(1, x_ref, x, a))
    acoef_2, bcoef_2 = state.probe(2, x_ref, x, a)
    assert abs(bcoef_2) > WALLIS_TOL

    ratio_1 = state.value(1)
    state.commit(2, acoef_2, bcoef_2)
    assert state.bcoef(2) == 1
    assert numpy.allclose(state.value(2), acoef_2 / bcoef_2)
    assert numpy.allclose(state.value(1), ratio_1)

    # Normalizing again does not change anything
    snapshot = [(state.acoef(n), state.bcoef(n)) for n in range(-1, 3)]
    state.normalize(2)
    assert snapshot == [(state.acoef(n), state.bcoef(n)) for n in range(-1, 3)]


def test_no_normalization_below_tolerance():
    state = WallisState(2)
    state.commit(1, numpy.complex128(3.0), numpy.complex128(1e-8))
    assert state.acoef(1) == 3.0
    assert state.bcoef(1) == 1e-8


def test_derivative():
    x_ref, a = _random_fraction(10, seed=3)
    x = numpy.complex128(0.4 + 0.7j)
    h = 1e-5
    fd = (_continued_fraction(x_ref, x + h, a) - _continued_fraction(x_ref, x - h, a)) / (2 * h)
    assert numpy.allclose(wallis_derivative(x_ref, x, a), fd, rtol=1e-5)


def test_extended_arithmetic():
    x_ref, a = _random_fraction(12)
    arith = ExtendedArithmetic(128)
    x = 0.3 + 0.2j
    value = wallis_value(arith.asarray(x_ref), arith.scalar(x), arith.asarray(a), arith)
    assert numpy.allclose(complex(value), wallis_value(x_ref, numpy.complex128(x), a, NATIVE), rtol=1e-10)
