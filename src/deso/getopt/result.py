# result.py

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

"""The possible outcomes of scanning an argument vector once.

  Every result carries a code compatible with the classic getopt
  interface: the option character or long option value for a match, 0
  for a long option that only set a flag, 1 for an operand returned in
  order, -1 for the end of the options, and '?' or ':' for an error.
"""

UNKNOWN_OPTION = "unknown-option"
AMBIGUOUS_OPTION = "ambiguous-option"
UNEXPECTED_ARGUMENT = "unexpected-argument"
MISSING_ARGUMENT = "missing-argument"

BAD_CHAR = "?"
BAD_ARGUMENT = ":"


class Result:
  """Base class for all results."""
  code = None

  def __eq__(self, other):
    """Compare two results for equality."""
    return type(self) is type(other) and vars(self) == vars(other)


  def __repr__(self):
    """Retrieve a textual representation of the result."""
    members = ", ".join("%s=%r" % x for x in sorted(vars(self).items()))
    return "%s(%s)" % (type(self).__name__, members)


class Match(Result):
  """A recognized short or long option, possibly with a value."""
  def __init__(self, code, value=None, index=None):
    """Create a new Match object.

      The index is the position of the matched option in the long
      option table and None for short options.
    """
    self.code = code
    self.value = value
    self.index = index


class FlagSet(Result):
  """A recognized long option that stored its value in a flag."""
  code = 0

  def __init__(self, index):
    """Create a new FlagSet object."""
    self.index = index


class Operand(Result):
  """A non-option reported in order."""
  code = 1

  def __init__(self, value):
    """Create a new Operand object."""
    self.value = value


class EndOfInput(Result):
  """There are no more options to scan."""
  code = -1

  def __init__(self):
    """Create a new EndOfInput object."""
    pass


class Error(Result):
  """A token that could not be scanned successfully."""
  def __init__(self, kind, offending, code=BAD_CHAR):
    """Create a new Error object."""
    self.kind = kind
    self.offending = offending
    self.code = code
