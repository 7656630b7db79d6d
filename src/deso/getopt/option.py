# option.py

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

"""Descriptions of the long options a program recognizes."""

NO_ARGUMENT = 0
REQUIRED_ARGUMENT = 1
OPTIONAL_ARGUMENT = 2

_ARGUMENTS = {NO_ARGUMENT, REQUIRED_ARGUMENT, OPTIONAL_ARGUMENT}


class Flag:
  """A caller owned location a matched long option stores its value in."""
  def __init__(self, value=0):
    """Create a new Flag object with the given initial value."""
    self.value = value


  def __repr__(self):
    """Retrieve a textual representation of the flag."""
    return "Flag(%r)" % (self.value,)


class LongOption:
  """The description of a single long option.

    A long option has a name (without the leading dashes), a requirement
    regarding its argument, and a value. If a flag is given, a match of
    the option stores the value in it. Otherwise the value is reported
    as the option's code.
  """
  def __init__(self, name, argument=NO_ARGUMENT, flag=None, value=0):
    """Create a new LongOption object."""
    if argument not in _ARGUMENTS:
      raise ValueError("Invalid argument requirement: \"%s\"" % argument)

    self.name = name
    self.argument = argument
    self.flag = flag
    self.value = value


  def __repr__(self):
    """Retrieve a textual representation of the long option."""
    return "LongOption(%r, %r, %r, %r)" % (self.name, self.argument,
                                           self.flag, self.value)


  def differs(self, other):
    """Check whether two options behave differently when matched."""
    return (self.argument != other.argument or
            self.flag is not other.flag or
            self.value != other.value)
