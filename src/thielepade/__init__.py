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

__version__ = '0.1.0'

from .tools import PadePreconditionError
from .arithmetic import NativeArithmetic, ExtendedArithmetic, get_arithmetic, NATIVE
from .thiele import ThieleVariant, ThieleCoefficients, RecurrenceMatrix
from .wallis import WallisState, WALLIS_TOL
from .approximant import solve_coefficients, thiele_pade, evaluate, evaluate_derivative, \
    derivative_from_coefficients, pade, ThielePadeApproximant, interpolate, extended_precision_evaluate
