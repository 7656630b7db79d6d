# resolve.py

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

"""Resolution of long options.

  A long option may be abbreviated as long as the abbreviation is
  unique, i.e., as long as all options it is a prefix of behave the
  same. A value can be attached to the option using an equality sign
  ('=') or, for options requiring one, be supplied as the next element
  of the argument vector.
"""

from deso.getopt.message import (
  AMBIGUOUS_STRING,
  NO_ARGUMENT_STRING,
  REQUIRES_ARGUMENT_STRING,
  UNRECOGNIZED_STRING,
)
from deso.getopt.option import (
  NO_ARGUMENT,
  OPTIONAL_ARGUMENT,
  REQUIRED_ARGUMENT,
)
from deso.getopt.result import (
  AMBIGUOUS_OPTION,
  BAD_ARGUMENT,
  BAD_CHAR,
  Error,
  FlagSet,
  Match,
  MISSING_ARGUMENT,
  UNEXPECTED_ARGUMENT,
  UNKNOWN_OPTION,
)


def find(name, long_options, short_too=False, long_only=False):
  """Find the long option a (possibly abbreviated) name refers to.

    The function returns a tuple (index, ambiguous). The index is None if
    no option matched.
  """
  match = None
  ambiguous = False

  for i, option in enumerate(long_options):
    if not option.name.startswith(name):
      continue

    # An exact match always wins, regardless of any abbreviations seen.
    if len(option.name) == len(name):
      return i, False

    # If the name is also a known short option do not allow a partial
    # match of a single character.
    if short_too and len(name) == 1:
      continue

    if match is None:
      match = i
    elif long_only or option.differs(long_options[match]):
      ambiguous = True

  return match, ambiguous


def resolve(args, current, long_options, state, short_too=False,
            long_only=False, silent=False, prefix="--"):
  """Resolve the long option at the state's index.

    'current' is the element at the state's index with the leading
    dashes removed. The state's index is advanced past the option (and
    its value, if taken from the next element). If short_too is set and
    no option matched, the index is left untouched and None is
    returned to have the caller try the element as short options.
  """
  state.index += 1

  name, equal, attached = current.partition("=")
  if not equal:
    attached = None

  match, ambiguous = find(name, long_options, short_too, long_only)
  if ambiguous:
    state.warn(silent, AMBIGUOUS_STRING, prefix, name)
    state.optopt = 0
    return Error(AMBIGUOUS_OPTION, name)

  if match is None:
    if short_too:
      state.index -= 1
      return None

    state.warn(silent, UNRECOGNIZED_STRING, prefix, current)
    state.optopt = 0
    return Error(UNKNOWN_OPTION, current)

  option = long_options[match]
  if option.argument == NO_ARGUMENT and attached is not None:
    state.warn(silent, NO_ARGUMENT_STRING, prefix, name)
    state.optopt = option.value if option.flag is None else 0
    return Error(UNEXPECTED_ARGUMENT, name)

  if option.argument in (REQUIRED_ARGUMENT, OPTIONAL_ARGUMENT):
    if attached is not None:
      state.optarg = attached
    elif option.argument == REQUIRED_ARGUMENT:
      # An optional argument never uses the next element.
      if state.index < len(args):
        state.optarg = args[state.index]
        state.index += 1

  if option.argument == REQUIRED_ARGUMENT and state.optarg is None:
    state.warn(silent, REQUIRES_ARGUMENT_STRING, prefix, current)
    state.optopt = option.value if option.flag is None else 0
    return Error(MISSING_ARGUMENT, name, BAD_ARGUMENT if silent else BAD_CHAR)

  state.longindex = match
  if option.flag is not None:
    option.flag.value = option.value
    return FlagSet(match)

  return Match(option.value, state.optarg, match)
