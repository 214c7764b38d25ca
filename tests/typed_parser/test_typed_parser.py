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

import pytest

from thielepade.typed_parser import TypedParser, OptionStatus, cast


def _write(path, lines):
    with open(path, 'w') as f:
        for line in lines:
            print(line, file=f)
    return str(path)


def test_read_file(tmp_path):
    p = TypedParser(['sectionA', 'sectionB'])
    p.add_option("sectionA", "a", int, -1000, "a in sectionA")
    p.add_option("sectionB", "b", bool, False, "b in sectionB")

    # sectionC must be ignored.
    p.add_option("sectionC", "c", int, -1000, "c in sectionC")

    params = p.as_dict()
    assert params["sectionA"]["a"] == -1000

    p.read(_write(tmp_path / "parser.in", ["[sectionA]", "a = 1", "[sectionB]", "b = True",
                                           "[sectionC]", "c = 3"]))
    params = p.as_dict()
    assert params["sectionA"]["a"] == 1
    assert params["sectionB"]["b"] is True
    assert "sectionC" not in params

    with pytest.raises(RuntimeError):
        p.read(str(tmp_path / "parser.in"))


def test_detect_undefined_option(tmp_path):
    p = TypedParser(['sectionAA'])
    p.add_option("sectionAA", "a", int, 0, "a")
    with pytest.raises(RuntimeError):
        p.read(_write(tmp_path / "parser_test_2.in", ["[sectionAA]", "aa = 2"]))


def test_missing_file(tmp_path):
    p = TypedParser(['sectionA'])
    with pytest.raises(RuntimeError):
        p.read(str(tmp_path / "not_found.in"))


def test_choices(tmp_path):
    p = TypedParser(['s'])
    p.add_option("s", "mode", str, "x", "mode", choices=["x", "y"])
    with pytest.raises(ValueError):
        p.read(_write(tmp_path / "choices.in", ["[s]", "mode = z"]))


def test_deprecated_option(tmp_path):
    p = TypedParser(['s'])
    p.add_option("s", "old", int, 0, "old option", OptionStatus.DEPRECATED)
    with pytest.warns(UserWarning):
        p.read(_write(tmp_path / "deprecated.in", ["[s]", "old = 5"]))
    assert p.get("s", "old") == 5
    assert p.get_default_value("s", "old") == 0


def test_redefinition():
    p = TypedParser(['s'])
    p.add_option("s", "a", int, 0, "a")
    with pytest.raises(RuntimeError):
        p.add_option("s", "a", int, 1, "a")


def test_cast():
    assert cast(bool, 'true') is True
    assert cast(bool, 'False') is False
    assert cast(float, '1.5') == 1.5
    with pytest.raises(ValueError):
        cast(bool, 'yes')
