#!/usr/bin/env python

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

from os.path import (
  dirname,
  join,
)
from setuptools import (
  setup,
)
from sys import (
  path as syspath,
)


def _importAndRun(work):
  """Import the program's main module and pass it to a work function."""
  syspath.insert(1, join(dirname(__file__), "src"))
  from deso.getopt import main
  syspath.pop(1)
  return work(main)


def retrieveName():
  """Retrieve the program's name."""
  return _importAndRun(lambda x: x.name())


def retrieveVersion():
  """Retrieve the program's version."""
  return _importAndRun(lambda x: x.version())


def retrieveDescription():
  """Retrieve a description of the program."""
  return _importAndRun(lambda x: x.description())


setup(
  name = retrieveName(),
  author = "Daniel Mueller",
  author_email = "deso@posteo.net",
  maintainer = "Daniel Mueller",
  maintainer_email = "deso@posteo.net",
  version = retrieveVersion(),
  description = retrieveDescription(),
  url = "https://github.com/d-e-s-o/getopt",
  classifiers = [
    "Environment :: Console",
    "Operating System :: POSIX",
    "Programming Language :: Python",
    "Programming Language :: Python :: 3",
    "Topic :: Software Development :: Libraries",
    "Topic :: Utilities",
  ],
  keywords = "getopt argv options parser",
  license = "GPLv3",
  packages = [
    "deso.getopt",
    "deso.getopt.test",
  ],
  package_dir = {
    "deso.getopt": join("src", "deso", "getopt"),
    "deso.getopt.test": join("src", "deso", "getopt", "test"),
  },
  scripts = [
    join("src", "deso", "getopt", "deso-getopt"),
  ],
  extras_require = {
    "test": [
      "pytest>=7.0",
    ],
  },
  install_requires = [
    "argparse>=1.1",
    "setuptools>=7.0",
  ],
  zip_safe=True,
)
