# permute.py

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

"""Functionality for reordering spans of an argv style argument vector.

  When scanning an argument vector in permuting mode non-options get
  moved behind the options they precede. Rather than shifting elements
  one by one, two adjacent blocks are exchanged in place by following
  the cycles of the rotation they describe. Each element is touched
  exactly once and no temporary copy of either block is made.
"""


def gcd(a, b):
  """Compute the greatest common divisor of two positive integers."""
  c = a % b
  while c != 0:
    a = b
    b = c
    c = a % b

  return b


def permute(args, start, mid, end):
  """Exchange the block [start, mid) with the block [mid, end) in place.

    The relative order of the elements within each block is preserved.
    The function returns the number of swaps of two distinct positions
    that were performed.
  """
  assert start <= mid <= end, (start, mid, end)

  nonopts = mid - start
  opts = end - mid
  # With one of the blocks being empty there is nothing to exchange (and
  # we must not compute the gcd of zero).
  if nonopts == 0 or opts == 0:
    return 0

  cycles = gcd(nonopts, opts)
  length = (end - start) // cycles
  swaps = 0

  for i in range(cycles):
    cstart = mid + i
    pos = cstart
    for _ in range(length):
      if pos >= mid:
        pos -= nonopts
      else:
        pos += opts

      if pos != cstart:
        args[pos], args[cstart] = args[cstart], args[pos]
        swaps += 1

  return swaps
