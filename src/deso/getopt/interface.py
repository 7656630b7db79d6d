# interface.py

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

"""The public entry points for scanning an argument vector.

  All entry points share the same scanning logic and only differ in the
  flags they pass to it and in where the scan state lives. The state of
  getopt(), getoptLong(), and getoptLongOnly() defaults to a single
  process wide object, which makes them unsuitable for more than one
  parse session at a time. getoptR() always works on a caller supplied
  state.

  A typical loop looks like this:
    state = ScanState()
    while True:
      result = getoptR(args, "ab:", state)
      if isinstance(result, EndOfInput):
        break
      ...
    operands = args[state.index:]
"""

from deso.getopt.scan import (
  LONG_ONLY,
  PERMUTE,
  scan,
)
from deso.getopt.state import (
  ScanState,
)


_STATE = ScanState()


def _state(state):
  """Retrieve the state to use for a scan."""
  return _STATE if state is None else state


def defaultState():
  """Retrieve the process wide scan state."""
  return _STATE


def reset(index=1):
  """Reset the process wide scan state to start a new parse session."""
  _STATE.reset(index)


def getopt(args, options, state=None):
  """Scan for the next short option."""
  return scan(args, options, None, _state(state), PERMUTE)


def getoptLong(args, options, long_options, state=None):
  """Scan for the next short or long option."""
  return scan(args, options, long_options, _state(state), PERMUTE)


def getoptLongOnly(args, options, long_options, state=None):
  """Scan for the next option, treating a single dash as a long option, too."""
  return scan(args, options, long_options, _state(state), PERMUTE | LONG_ONLY)


def getoptR(args, options, state, long_options=None, long_only=False):
  """Scan for the next option using an explicitly provided state."""
  if state is None:
    raise TypeError("A scan state is required")

  flags = PERMUTE | LONG_ONLY if long_only else PERMUTE
  return scan(args, options, long_options, state, flags)
