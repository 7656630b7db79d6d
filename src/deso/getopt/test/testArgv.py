# testArgv.py

#/***************************************************************************
# *   Copyright (C) 2016 Daniel Mueller (deso@posteo.net)                   *
# *                                                                         *
# *   This program is free software: you can redistribute it and/or modify  *
# *   it under the terms of the GNU General Public License as published by  *
# *   the Free Software Foundation, either version 3 of the License, or     *
# *   (at your option) any later version.                                   *
# *                                                                         *
# *   This program is distributed in the hope that it will be useful,       *
# *   but WITHOUT ANY WARRANTY; without even the implied warranty of        *
# *   MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the         *
# *   GNU General Public License for more details.                          *
# *                                                                         *
# *   You should have received a copy of the GNU General Public License     *
# *   along with this program.  If not, see <http://www.gnu.org/licenses/>. *
# ***************************************************************************/

"""Test the argv module."""

from deso.getopt.argv import (
  longOption,
  longOptions,
  quote,
)
from deso.getopt.option import (
  NO_ARGUMENT,
  OPTIONAL_ARGUMENT,
  REQUIRED_ARGUMENT,
)
from unittest import (
  main,
  TestCase,
)


class TestArgv(TestCase):
  """Test case for the argv related functionality."""
  def testQuote(self):
    """Verify quoting of arguments works as expected."""
    self.assertEqual(quote(""), "''")
    self.assertEqual(quote("file"), "'file'")
    self.assertEqual(quote("two words"), "'two words'")
    self.assertEqual(quote("it's"), "'it'\\''s'")
    self.assertEqual(quote("$HOME"), "'$HOME'")


  def testLongOption(self):
    """Verify the creation of a long option from its textual form."""
    option = longOption("width:")
    self.assertEqual(option.name, "width")
    self.assertEqual(option.argument, REQUIRED_ARGUMENT)
    self.assertEqual(option.value, "width")
    self.assertIsNone(option.flag)

    self.assertEqual(longOption("color::").argument, OPTIONAL_ARGUMENT)
    self.assertEqual(longOption("all").argument, NO_ARGUMENT)


  def testLongOptionInvalid(self):
    """Verify that invalid textual long options are rejected."""
    for string in ["", ":", "::", "a=b", "a:b:", ":::"]:
      with self.assertRaises(ValueError):
        longOption(string)


  def testLongOptions(self):
    """Verify the creation of a list of long options."""
    options = longOptions("all,width:", "color::  verbose")
    names = [option.name for option in options]
    arguments = [option.argument for option in options]
    self.assertEqual(names, ["all", "width", "color", "verbose"])
    self.assertEqual(arguments, [NO_ARGUMENT, REQUIRED_ARGUMENT,
                                 OPTIONAL_ARGUMENT, NO_ARGUMENT])

    self.assertEqual(longOptions(), [])
    self.assertEqual(longOptions(",,"), [])


if __name__ == "__main__":
  main()
