# util.py

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

"""Utility functions for the testing environment."""

from deso.getopt.interface import (
  getoptR,
)
from deso.getopt.result import (
  EndOfInput,
)
from deso.getopt.state import (
  ScanState,
)


def collect(messages):
  """Create a sink that appends all messages to the given list."""
  return messages.append


def scanAll(args, options, long_options=None, long_only=False, state=None):
  """Scan an argument vector until the end of the options is reached.

    The function returns the list of all results, including the final
    EndOfInput, and the state used.
  """
  if state is None:
    state = ScanState(sink=collect([]))

  results = []
  # Every scan makes progress, so the number of results is bounded by
  # the number of characters in the vector.
  for _ in range(sum(len(arg) for arg in args) + 2):
    result = getoptR(args, options, state, long_options, long_only)
    results += [result]
    if isinstance(result, EndOfInput):
      return results, state

  raise AssertionError("Scanning %s did not terminate" % args)
