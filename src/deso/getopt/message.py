# message.py

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

"""Diagnostic messages emitted while scanning an argument vector.

  The wording follows the traditional getopt implementations so that
  scripts parsing the error output of a program keep working.
"""

from sys import (
  stderr,
)


ILLEGAL_OPTION_CHAR = "illegal option -- %s"
INVALID_OPTION_CHAR = "invalid option -- %s"
REQUIRES_ARGUMENT_CHAR = "option requires an argument -- %s"
REQUIRES_ARGUMENT_STRING = "option `%s%s' requires an argument"
AMBIGUOUS_STRING = "option `%s%s' is ambiguous"
NO_ARGUMENT_STRING = "option `%s%s' doesn't allow an argument"
UNRECOGNIZED_STRING = "unrecognized option `%s%s'"

# The prefixes a long option may have been provided with.
DASH = "-"
DOUBLE_DASH = "--"
W_DASH = "-W "


def printError(message):
  """Write a diagnostic message to stderr."""
  print(message, file=stderr)


def prefixed(name, sink=printError):
  """Create a sink that prefixes all messages with a program name."""
  def emit(message):
    """Pass the prefixed message on to the actual sink."""
    sink("%s: %s" % (name, message))

  return emit
