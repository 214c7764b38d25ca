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

from .typed_parser import TypedParser, OptionStatus, cast
from .thiele import ThieleVariant
from .arithmetic import GMP_default_prec, arithmetic_classes


def create_parser(target_sections=None):
    """
    Create a parser for all program options of thielepade
    """
    if target_sections is None:
        parser = TypedParser(['pade', 'io'])
    else:
        parser = TypedParser(target_sections)

    # [pade]
    parser.add_option("pade", "variant", str, "None",
                      'Ordering of the reference points. Chosen from "classic" and "greedy". Must be given.',
                      choices=["None"] + [v.value for v in ThieleVariant])
    parser.add_option("pade", "greedy", str, "None",
                      "Use variant = greedy or variant = classic instead.", OptionStatus.DEPRECATED)
    parser.add_option("pade", "precision", str, "native",
                      'Arithmetic. Chosen from "native" (double precision) and "extended" (mpmath).',
                      choices=list(arithmetic_classes.keys()))
    parser.add_option("pade", "prec_bits", int, GMP_default_prec,
                      "Number of bits of the mantissa for precision = extended")
    parser.add_option("pade", "derivative", bool, False,
                      "If true, the derivative of the approximant is computed as well.")

    # [io]
    parser.add_option("io", "samples", str, "samples.npz",
                      "npz file containing the reference points (x) and the function values (f)")
    parser.add_option("io", "query", str, "query.npz",
                      "npz file containing the points (x) where the approximant is evaluated")
    parser.add_option("io", "output", str, "pade.npz", "Output npz file")

    return parser


def parse_parameters(params):
    """
    Parse some parameters in a parameter

    :param params: dict (will be updated)
    :return:  None
    """
    if 'pade' in params:
        p = params['pade']
        if p['greedy'] != 'None':
            if p['variant'] != 'None':
                raise RuntimeError("[pade] greedy and [pade] variant cannot be given at the same time!")
            p['variant'] = 'greedy' if cast(bool, p['greedy']) else 'classic'

        if p['variant'] == 'None':
            raise RuntimeError("[pade] variant must be given (classic or greedy)!")
        p['variant'] = ThieleVariant(p['variant'])

        if p['prec_bits'] < 53:
            raise RuntimeError("[pade] prec_bits must be at least 53!")
