# program.py

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

"""The program module wraps the scanning functionality for easy access from the main module."""

from deso.getopt.argv import (
  quote,
)
from deso.getopt.interface import (
  getoptR,
)
from deso.getopt.message import (
  prefixed,
)
from deso.getopt.option import (
  OPTIONAL_ARGUMENT,
)
from deso.getopt.result import (
  EndOfInput,
  Error,
  Match,
  Operand,
)
from deso.getopt.scan import (
  strip,
)
from deso.getopt.state import (
  ScanState,
)


class Program:
  """A program object scans a parameter vector and brings it into a normalized form."""
  def __init__(self, name, options, long_options=None, long_only=False,
               quiet=False, quoted=True):
    """Create a new Program object."""
    self._name = name
    self._options = options
    self._long_options = long_options
    self._long_only = long_only
    self._quiet = quiet
    self._quoted = quoted


  def _quote(self, arg):
    """Quote an argument if requested."""
    return quote(arg) if self._quoted else arg


  def _optional(self, result):
    """Check whether the option reported by a Match takes an optional argument."""
    if result.index is not None:
      return self._long_options[result.index].argument == OPTIONAL_ARGUMENT

    options = strip(self._options)
    i = options.find(result.code)
    return options[i+1:i+3] == "::"


  def _option(self, result):
    """Convert a Match into its normalized textual form."""
    if result.index is not None:
      words = ["--%s" % self._long_options[result.index].name]
    else:
      words = ["-%s" % result.code]

    # An optional argument always shows up, even if it was not supplied,
    # to keep the output unambiguous.
    if result.value is not None:
      words += [self._quote(result.value)]
    elif self._optional(result):
      words += [self._quote("")]

    return words


  def normalize(self, parameters):
    """Scan the given parameters and normalize them.

      The function returns a tuple comprising the list of normalized
      words and the number of errors encountered.
    """
    args = [self._name] + list(parameters)
    state = ScanState(opterr=not self._quiet, sink=prefixed(self._name))
    words = []
    errors = 0

    while True:
      result = getoptR(args, self._options, state, self._long_options,
                       self._long_only)
      if isinstance(result, EndOfInput):
        break
      elif isinstance(result, Error):
        errors += 1
      elif isinstance(result, Operand):
        words += [self._quote(result.value)]
      elif isinstance(result, Match):
        words += self._option(result)

    words += ["--"]
    words += [self._quote(arg) for arg in args[state.index:]]
    return words, errors
