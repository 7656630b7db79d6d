# scan.py

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

"""The state machine scanning an argument vector for options.

  Each invocation of scan() reports a single result and leaves the scan
  state ready for the next invocation. In permuting mode non-options
  are skipped and remembered as a run. Once options following such a
  run have been scanned and another non-option (or the end of the
  vector) is seen, the run is moved behind those options. After the
  end of the options has been reported the state's index refers to the
  first operand.
"""

from deso.getopt.message import (
  DASH,
  DOUBLE_DASH,
  ILLEGAL_OPTION_CHAR,
  INVALID_OPTION_CHAR,
  REQUIRES_ARGUMENT_CHAR,
  W_DASH,
)
from deso.getopt.permute import (
  permute,
)
from deso.getopt.resolve import (
  resolve,
)
from deso.getopt.result import (
  BAD_ARGUMENT,
  BAD_CHAR,
  EndOfInput,
  Error,
  Match,
  MISSING_ARGUMENT,
  Operand,
  UNKNOWN_OPTION,
)


PERMUTE = 0x01
ALL_ARGS = 0x02
LONG_ONLY = 0x04


def strip(options):
  """Remove the mode character ('+' or '-') from a short option specification."""
  if options.startswith(("+", "-")):
    return options[1:]

  return options


def _flush(args, state):
  """Move a pending run of non-options behind the options scanned so far."""
  if state.run_end is not None:
    permute(args, state.run_start, state.run_end, state.index)
    state.index -= state.run_end - state.run_start

  state.run_start = None
  state.run_end = None


def _nextToken(args, options, state, flags):
  """Advance to the next option token.

    The function returns a result if the caller has to be informed right
    away or None if the state's place refers to an option cluster.
  """
  while True:
    if state.index >= len(args):
      state.place = ""
      if state.run_end is None and state.run_start is not None:
        # Non-options were skipped but no options followed them. Report
        # the first of them as the first operand.
        state.index = state.run_start

      _flush(args, state)
      return EndOfInput()

    token = args[state.index]
    if not token.startswith("-") or (token == "-" and "-" not in options):
      state.place = ""
      if flags & ALL_ARGS:
        state.optarg = token
        state.index += 1
        return Operand(token)

      if not flags & PERMUTE:
        return EndOfInput()

      if state.run_start is None:
        state.run_start = state.index
      elif state.run_end is not None:
        permute(args, state.run_start, state.run_end, state.index)
        state.run_start = state.index - (state.run_end - state.run_start)
        state.run_end = None

      state.index += 1
      continue

    if state.run_start is not None and state.run_end is None:
      state.run_end = state.index

    if token == "--":
      state.index += 1
      state.place = ""
      state.done = True
      _flush(args, state)
      return EndOfInput()

    # A lone dash is only seen here if it is a known option.
    state.place = token[1:] if token != "-" else token
    return None


def _missing(state, char, silent):
  """Report a missing argument for a short option."""
  state.place = ""
  state.warn(silent, REQUIRES_ARGUMENT_CHAR, char)
  state.optopt = char
  return Error(MISSING_ARGUMENT, char, BAD_ARGUMENT if silent else BAD_CHAR)


def scan(args, options, long_options, state, flags=PERMUTE):
  """Scan the argument vector for the next option.

    'options' is the short option specification and 'long_options' an
    optional sequence of LongOption objects. A leading '+' in the
    specification stops scanning at the first non-option, a leading '-'
    reports non-options in order as Operand results. A subsequent ':'
    suppresses diagnostics and reports missing arguments with code ':'.
  """
  if options is None:
    return EndOfInput()

  if options.startswith("-"):
    flags |= ALL_ARGS
  elif options.startswith("+"):
    flags &= ~PERMUTE
  options = strip(options)

  silent = options.startswith(":")
  long_only = bool(flags & LONG_ONLY)

  # Some programs reset the index to 0 rather than 1 to start over.
  if state.index == 0:
    state.index = 1

  state.optarg = None
  if state.index == 1:
    state.run_start = None
    state.run_end = None
    state.done = False

  # Elements following a double dash are never scanned as options.
  if state.done:
    return EndOfInput()

  solitary = False
  if not state.place:
    result = _nextToken(args, options, state, flags)
    if result is not None:
      return result

    solitary = args[state.index] == "-"

  if (long_options is not None and not solitary and
      (state.place.startswith("-") or long_only)):
    short_too = False
    prefix = DASH
    if state.place.startswith("-"):
      state.place = state.place[1:]
      prefix = DOUBLE_DASH
    elif not state.place.startswith(":") and state.place[0] in options:
      short_too = True

    result = resolve(args, state.place, long_options, state, short_too,
                     long_only, silent, prefix)
    if result is not None:
      state.place = ""
      return result

  char = state.place[0]
  state.place = state.place[1:]
  i = options.find(char)

  if char == ":" or (char == "-" and state.place) or i < 0:
    # A dash ending a cluster that is not a known option terminates the
    # options.
    if char == "-" and not state.place:
      return EndOfInput()

    if not state.place:
      state.index += 1

    template = ILLEGAL_OPTION_CHAR if long_options is None else INVALID_OPTION_CHAR
    state.warn(silent, template, char)
    state.optopt = char
    return Error(UNKNOWN_OPTION, char)

  suffix = options[i+1:i+3]
  if long_options is not None and char == "W" and suffix.startswith(";"):
    # -W long-option: the remainder of the cluster or the next element
    # names a long option.
    if not state.place:
      state.index += 1
      if state.index >= len(args):
        return _missing(state, char, silent)

      state.place = args[state.index]

    result = resolve(args, state.place, long_options, state, False,
                     long_only, silent, W_DASH)
    state.place = ""
    return result

  if not suffix.startswith(":"):
    if not state.place:
      state.index += 1
  else:
    if state.place:
      state.optarg = state.place
    elif suffix != "::":
      state.index += 1
      if state.index >= len(args):
        return _missing(state, char, silent)

      state.optarg = args[state.index]

    state.place = ""
    state.index += 1

  return Match(char, state.optarg)
