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

import os
import copy
import configparser
from enum import Enum
from warnings import warn
from collections import OrderedDict, namedtuple


class OptionStatus(Enum):
    VALID = 0
    DEPRECATED = 1
    RETIRED = 2


Option = namedtuple('Option', ('dtype', 'default', 'description', 'status', 'choices'))

_bool_strings = {'true': True, 'True': True, '1': True,
                 'false': False, 'False': False, '0': False}


def cast(value_type, string):
    """
    Convert a string read from an ini file into value_type
    """
    if value_type != bool:
        return value_type(string)
    if string not in _bool_strings:
        raise ValueError("'{}' is not a boolean (use true/false or 1/0)".format(string))
    return _bool_strings[string]


class TypedParser(object):
    """
    ini-file parser whose options carry a type, a default value and a status.

    All options are declared with add_option() before read() is called.
    Sections that are not listed at construction are skipped silently.
    """
    def __init__(self, sections_to_be_used):
        """
        :param sections_to_be_used: names of the sections handled by this parser
        """
        self._sections = list(sections_to_be_used)
        self._options = OrderedDict()
        self._values = OrderedDict()
        self._done = False

    def add_option(self, section, option, dtype, default, string, status=OptionStatus.VALID, choices=None):
        """
        :param section: section name
        :param option: option name
        :param dtype: type of the value (int, float, str, bool)
        :param default: default value
        :param string: short description
        :param status: OptionStatus
        :param choices: allowed values (None accepts anything)
        """
        if section not in self._sections:
            return
        if self._done:
            raise RuntimeError("Option [{}] {} is added after reading an input file!".format(section, option))
        defined = self._options.setdefault(section, OrderedDict())
        if option in defined:
            raise RuntimeError("Option [{}] {} is defined twice!".format(section, option))

        defined[option] = Option(dtype, dtype(default), string, status, choices)
        self._values.setdefault(section, OrderedDict())[option] = dtype(default)

    def read(self, in_file):
        """
        Read values from an ini file. Can be called only once.
        """
        if self._done:
            raise RuntimeError("TypedParser.read() is called twice!")
        self._done = True

        if not os.path.exists(in_file):
            raise RuntimeError("Input file " + in_file + " is not found!")
        ini = configparser.ConfigParser()
        ini.optionxform = str
        ini.read(in_file)

        for section in filter(lambda s: s in self._sections, ini.sections()):
            defined = self._options.get(section, {})
            for name, raw in ini.items(section):
                if name not in defined:
                    raise RuntimeError("Unknown option {} in section [{}]!".format(name, section))
                opt = defined[name]
                if opt.status == OptionStatus.DEPRECATED:
                    warn("[{}] {} is deprecated. {}".format(section, name, opt.description))
                elif opt.status == OptionStatus.RETIRED:
                    warn("[{}] {} is ignored. {}".format(section, name, opt.description))

                value = cast(opt.dtype, raw.strip('\'"'))
                if opt.choices is not None and value not in opt.choices:
                    raise ValueError("[{}] {} = {} is not allowed. Choose from {}".format(
                        section, name, value, ", ".join(map(str, opt.choices))))
                self._values[section][name] = value

    def get(self, sect, opt):
        return self._values[sect][opt]

    def get_default_value(self, sect, opt):
        return self._options[sect][opt].default

    def as_dict(self):
        """
        Values of all options as a dict of dicts, {section: {option: value}}
        """
        return copy.deepcopy({sect: dict(values) for sect, values in self._values.items()})

    def print_options(self):
        """
        Print all options with their types, defaults and descriptions
        """
        for section, options in self._options.items():
            print("\n[{}]".format(section))
            for name, opt in options.items():
                line = "  {} ({}, default: {}) {}".format(name, opt.dtype.__name__, opt.default, opt.description)
                if opt.status != OptionStatus.VALID:
                    line += " [{}]".format(opt.status.name)
                print(line)
