# argv.py

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

"""Functionality for converting between argv style vectors and text."""

from deso.getopt.option import (
  LongOption,
  NO_ARGUMENT,
  OPTIONAL_ARGUMENT,
  REQUIRED_ARGUMENT,
)
from re import (
  compile as regex,
)


# Long options are separated by commas or whitespace.
_SEPARATOR = regex(r"[,\s]+")


def quote(arg):
  """Quote an argument such that a POSIX shell reads it back unchanged."""
  # A single quote cannot appear inside single quotes. End the quoted
  # part, emit an escaped quote, and start a new quoted part.
  return "'%s'" % arg.replace("'", "'\\''")


def longOption(string):
  """Create a LongOption object from a textual description.

    The description is the option's name, optionally followed by a
    colon (':') for a required or two colons ('::') for an optional
    argument. The option's value is its name.
  """
  if string.endswith("::"):
    name, argument = string[:-2], OPTIONAL_ARGUMENT
  elif string.endswith(":"):
    name, argument = string[:-1], REQUIRED_ARGUMENT
  else:
    name, argument = string, NO_ARGUMENT

  if not name or "=" in name or ":" in name:
    raise ValueError("Invalid long option: \"%s\"" % string)

  return LongOption(name, argument, value=name)


def longOptions(*strings):
  """Create a list of LongOption objects from textual descriptions."""
  options = []
  for string in strings:
    options += [longOption(s) for s in _SEPARATOR.split(string) if s]

  return options
