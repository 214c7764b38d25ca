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


class PadePreconditionError(ValueError):
    """
    Raised when the input of a Pade routine violates its preconditions.
    Nothing has been computed when this is raised.
    """
    pass


def _as_1d(values, name):
    arr = numpy.asarray(values)
    if arr.ndim == 0:
        arr = arr.reshape(1)
    if arr.ndim != 1:
        raise PadePreconditionError("{} must be one-dimensional, got shape {}".format(name, arr.shape))
    return arr


def check_samples(x, f, arithmetic, name_x="x", name_f="f"):
    """
    Validate a sample set and convert it to the number type of arithmetic.

    Parameters
    ----------
    x : array_like
        Reference points
    f : array_like
        Function values at the reference points (or Thiele coefficients)
    arithmetic : ArithmeticBase

    Returns
    -------
    x, f : numpy.ndarray
        New arrays, the input is never modified.
    """
    x = _as_1d(x, name_x)
    f = _as_1d(f, name_f)
    if x.size == 0:
        raise PadePreconditionError("At least one sample is required!")
    if x.size != f.size:
        raise PadePreconditionError("{} and {} must have the same length: {} != {}".format(
            name_x, name_f, x.size, f.size))
    try:
        return arithmetic.asarray(x), arithmetic.asarray(f)
    except (TypeError, ValueError) as e:
        raise PadePreconditionError("{} and {} must be complex numbers: {}".format(name_x, name_f, e))


def check_point(x, arithmetic, name="x"):
    """
    Convert a single evaluation point to the number type of arithmetic
    """
    if numpy.ndim(x) != 0:
        raise PadePreconditionError("{} must be a scalar, got shape {}".format(name, numpy.shape(x)))
    try:
        return arithmetic.scalar(x)
    except (TypeError, ValueError) as e:
        raise PadePreconditionError("{} must be a complex number: {}".format(name, e))
