# Copyright 2025 DeepMind Technologies Limited.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Two's-complement binary strings to/from signed 32-bit integers."""

from absl import logging
from bitgeo import errors

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_BINARY_DIGITS = frozenset("01")


def _invert(bits: str) -> str:
  return "".join("1" if b == "0" else "0" for b in bits)


def _parse_unsigned(bits: str) -> int:
  """Parses a binary string, failing if it overflows a signed 32-bit int."""
  value = int(bits, 2)
  if value > INT32_MAX:
    raise errors.ParseError(f"number too large to fit in target type: {bits}")
  return value


def representable_range(size: int) -> tuple[int, int]:
  """Returns (min, max) values representable with `size` bits."""
  if size < 1:
    raise errors.InvalidSizeError()
  return -(1 << (size - 1)), (1 << (size - 1)) - 1


def twos_complement_to_decimal(binary: str) -> int:
  """Converts a two's complement binary string to its decimal value.

  The first character is the sign bit. For example "1101" is -3 and "0101"
  is 5. The string length is the bit width.

  Args:
    binary: Non-empty string of 0s and 1s.

  Returns:
    The signed integer value.

  Raises:
    InvalidInputError: if `binary` is empty or has a non-binary character.
    ParseError: if the magnitude does not fit a signed 32-bit integer.
  """
  if not binary or not set(binary) <= _BINARY_DIGITS:
    logging.debug("Rejected binary input: %r", binary)
    raise errors.InvalidInputError()

  if binary[0] == "1":
    return -(_parse_unsigned(_invert(binary)) + 1)
  return _parse_unsigned(binary)


def decimal_to_twos_complement(value: int, size: int) -> str:
  """Converts a decimal value to a two's complement string of `size` bits.

  Args:
    value: Signed 32-bit integer.
    size: Bit width of the result, at least 1.

  Returns:
    Binary string of exactly `size` characters.

  Raises:
    InvalidSizeError: if `size` < 1.
    NumberOverflowError: if `value` is out of the range of `size` bits.
  """
  min_negative, max_positive = representable_range(size)
  if not INT32_MIN <= value <= INT32_MAX:
    raise errors.NumberOverflowError()
  if value > max_positive or value < min_negative:
    logging.debug("%d does not fit in %d bits.", value, size)
    raise errors.NumberOverflowError()

  if value >= 0:
    return format(value, f"0{size}b")
  ones_complement = _invert(format(-value, f"0{size}b"))
  result = (int(ones_complement, 2) + 1) % (1 << size)
  return format(result, f"0{size}b")
