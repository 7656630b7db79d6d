# main.py

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

"""The main module interfaces with the user input and sets up bits required for execution."""

from deso.getopt.argv import (
  longOptions,
)
from deso.getopt.program import (
  Program,
)
from sys import (
  argv as sysargv,
  stderr,
)
from argparse import (
  ArgumentParser,
  HelpFormatter,
  REMAINDER,
)


def name():
  """Retrieve the name of the program."""
  return "deso-getopt"


def description():
  """Retrieve a description of the program."""
  return "Parse and normalize command line options, for use in shell scripts."


def version():
  """Retrieve the program's current version."""
  return "0.1"


def run(program, parameters, quiet_output=False, debug=False):
  """Start actual execution."""
  try:
    words, errors = program.normalize(parameters)
  except Exception as e:
    if debug:
      raise
    print("A problem occurred:\n\"%s\"" % e, file=stderr)
    return 3

  if not quiet_output:
    print(" ".join(words))

  return 1 if errors else 0


def addStandardArgs(parser):
  """Add the standard arguments --version and --help to an argument parser."""
  parser.add_argument(
    "-h", "--help", action="help",
    help="Show this help message and exit.",
  )
  parser.add_argument(
    "--version", action="version", version="%s %s" % (name(), version()),
    help="Show the program\'s version and exit.",
  )


def addOptionalArgs(parser):
  """Add the optional arguments to a parser."""
  parser.add_argument(
    "-o", "--options", action="store", dest="options", default="",
    metavar="optstring",
    help="The short options to recognize. Each character is an option. "
         "A character followed by a colon (':') requires an argument, "
         "one followed by two colons (\'::\') has an optional argument. "
         "A leading \'+\' stops scanning at the first non-option, a "
         "leading \'-\' reports non-options in place.",
  )
  parser.add_argument(
    "-l", "--longoptions", action="append", dest="long_options",
    default=None, metavar="longopts",
    help="The long options to recognize, separated by commas. A colon "
         "or two colons following a name have the same meaning as for "
         "short options. Can be supplied multiple times.",
  )
  parser.add_argument(
    "-a", "--alternative", action="store_true", dest="long_only",
    default=False,
    help="Allow long options to start with a single dash (\'-\').",
  )
  parser.add_argument(
    "-n", "--name", action="store", dest="name", default=None,
    metavar="progname",
    help="The name to use when reporting errors. Defaults to the name "
         "of this program.",
  )
  parser.add_argument(
    "-q", "--quiet", action="store_true", dest="quiet", default=False,
    help="Do not report errors in the parameters.",
  )
  parser.add_argument(
    "-Q", "--quiet-output", action="store_true", dest="quiet_output",
    default=False,
    help="Do not print the normalized parameters. Only the exit code "
         "tells whether they were valid.",
  )
  parser.add_argument(
    "-u", "--unquoted", action="store_false", dest="quoted", default=True,
    help="Do not quote the normalized parameters. Parameters containing "
         "whitespace or other special characters will not survive "
         "being evaluated by a shell.",
  )
  parser.add_argument(
    "-T", "--test", action="store_true", dest="test", default=False,
    help="Exit with code 4 right away. Allows scripts to check for an "
         "enhanced getopt(1) implementation.",
  )
  parser.add_argument(
    "--debug", action="store_true", dest="debug", default=False,
    help="Allow for exceptions to escape the program thereby producing "
         "full backtraces.",
  )


class TopLevelHelpFormatter(HelpFormatter):
  """A help formatter class for a top level parser."""
  def add_usage(self, usage, actions, groups, prefix=None):
    """Add usage information, overwrite the default prefix."""
    if prefix is None:
      prefix = "Usage: "

    super().add_usage(usage, actions, groups, prefix)


def main(argv):
  """The main function parses the program arguments and reacts on them."""
  parser = ArgumentParser(prog=name(), add_help=False,
                          description="%s -- %s" % (name(), description()),
                          formatter_class=TopLevelHelpFormatter)
  optional = parser.add_argument_group("Optional arguments")
  addOptionalArgs(optional)
  addStandardArgs(optional)
  parser.add_argument(
    "parameters", action="store", nargs=REMAINDER, metavar="parameters",
    help="The parameters to parse. Use \'--\' to separate them from the "
         "options of this program.",
  )

  # Note that argv contains the path to the program as the first element
  # which we kindly ignore.
  ns = parser.parse_args(argv[1:])
  if ns.test:
    return 4

  parameters = ns.parameters
  # The separator between our own options and the parameters to parse
  # is not part of the latter.
  if parameters and parameters[0] == "--":
    parameters = parameters[1:]

  # Without any long options the parameters are scanned for short
  # options only.
  long_options = None
  try:
    if ns.long_options is not None:
      long_options = longOptions(*ns.long_options)
  except ValueError as e:
    if ns.debug:
      raise
    print("A problem occurred:\n\"%s\"" % e, file=stderr)
    return 2

  program = Program(ns.name or name(), ns.options, long_options,
                    ns.long_only, ns.quiet, ns.quoted)
  return run(program, parameters, ns.quiet_output, ns.debug)


if __name__ == "__main__":
  exit(main(sysargv))
