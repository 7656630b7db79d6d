# state.py

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

"""The state shared between successive scans of an argument vector."""

from deso.getopt.message import (
  printError,
)


class ScanState:
  """A cursor into an argument vector along with auxiliary information.

    A scan state belongs to exactly one parse session. Sessions that may
    run concurrently (e.g., on different threads) must each use a state
    object of their own.

    Members:
      index      The index of the next element of the argument vector
                 to look at (optind).
      place      The not yet scanned rest of the current short option
                 cluster, empty in between elements.
      run_start  Start of a run of non-options that has not been moved
                 behind the options yet, or None.
      run_end    End of that run, or None while it is still open.
      done       Whether a double dash ended the options. Further scans
                 report the end of the options until the session is
                 reset.
      optarg     The value reported by the last scan.
      optopt     The offending option character (or long option value)
                 of the last error.
      longindex  The table index of the last matched long option.
      opterr     Whether to emit diagnostics at all.
      sink       Callable receiving diagnostic messages.
  """
  def __init__(self, opterr=True, sink=printError):
    """Create a new ScanState object ready for a new session."""
    self.opterr = opterr
    self.sink = sink
    self.reset()


  def reset(self, index=1):
    """Reset the state to start a new parse session."""
    self.index = index
    self.place = ""
    self.run_start = None
    self.run_end = None
    self.done = False
    self.optarg = None
    self.optopt = None
    self.longindex = None


  def warn(self, silent, template, *args):
    """Emit a diagnostic message unless diagnostics are suppressed."""
    if self.opterr and not silent:
      self.sink(template % args)
