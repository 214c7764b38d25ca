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

import argparse
import sys
import os.path
from warnings import warn

import numpy

from .version import version, print_header
from .program_options import create_parser, parse_parameters
from .approximant import ThielePadeApproximant


def _load_npz(filename, keys):
    if not os.path.exists(filename):
        sys.exit("File not found: " + filename)
    print("Reading", filename + "...")
    npz = numpy.load(filename)
    for key in keys:
        if key not in npz.files:
            sys.exit("ERROR: '{}' is not found in {}".format(key, filename))
    return npz


def thielepade_eval(inifile):
    parser = create_parser(["pade", "io"])
    parser.read(inifile)
    params = parser.as_dict()
    parse_parameters(params)

    p = params["pade"]
    samples = _load_npz(params["io"]["samples"], ["x", "f"])
    query = _load_npz(params["io"]["query"], ["x"])
    x_query = numpy.asarray(query["x"], dtype=numpy.complex128)

    print("variant = {}, precision = {}".format(p["variant"].value, p["precision"]))
    approximant = ThielePadeApproximant(samples["x"], samples["f"], p["variant"],
                                        precision=p["precision"], prec_bits=p["prec_bits"])
    print("Number of reference points = {}".format(approximant.n_par))

    data = {
        "x": x_query,
        "f": approximant(x_query),
        "x_ref": approximant.x_ref,
        "coefficients": approximant.coefficients,
        "permutation": approximant.permutation,
    }
    if p["derivative"]:
        data["df"] = approximant.derivative(x_query)

    for key in ["f", "df"]:
        if key in data and not numpy.all(numpy.isfinite(data[key])):
            warn("{} non-finite values are found in '{}'. The reference points may be degenerate.".format(
                numpy.count_nonzero(~numpy.isfinite(data[key])), key))

    output = params["io"]["output"]
    print("Writing to", output + "...")
    numpy.savez(output, **data)
    return data


def run():

    print_header()

    parser = argparse.ArgumentParser(
        prog='thielepade',
        description='Thiele-Pade interpolation of a function known at a finite set of points.',
        usage='$ thielepade input.ini',
        add_help=True,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument('path_input_file',
                        action='store',
                        default=None,
                        type=str,
                        nargs='?',
                        help="Input filename"
                        )
    parser.add_argument('--options', action='store_true', help="Show all input parameters and exit")
    parser.add_argument('--version', action='version', version='thielepade {}'.format(version))

    args = parser.parse_args()

    if args.options:
        create_parser().print_options()
        return
    if args.path_input_file is None:
        parser.error("An input file is required.")

    thielepade_eval(args.path_input_file)
