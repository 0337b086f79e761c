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

"""Errors raised by the conversion routines.

The set of error kinds is closed: every failure of a conversion is one of the
classes listed in `ERROR_TYPES`. Errors compare equal when they have the same
class and payload, so tests can match them without looking at message text.
"""

from typing import Any


class ConversionError(ValueError):
  """Base class of all conversion failures."""

  def __init__(self, *payload: Any):
    super().__init__(*payload)
    self.payload = payload

  @property
  def message(self) -> str:
    raise NotImplementedError

  def __str__(self) -> str:
    return self.message

  def __eq__(self, other: Any) -> bool:
    if type(self) is not type(other):
      return NotImplemented
    return self.payload == other.payload

  def __hash__(self) -> int:
    return hash((type(self), self.payload))

  def __repr__(self) -> str:
    args = ", ".join(repr(x) for x in self.payload)
    return f"{type(self).__name__}({args})"


class InvalidInputError(ConversionError):
  """Binary string is empty or contains a character other than 0 or 1."""

  @property
  def message(self) -> str:
    return "Invalid input: Enter only 0s and 1s."


class ParseError(ConversionError):
  """Binary digits are valid but the value exceeds the signed 32-bit range."""

  def __init__(self, cause: str):
    super().__init__(cause)
    self.cause = cause

  @property
  def message(self) -> str:
    return f"Error: Failed to parse binary input ({self.cause})."


class InvalidSizeError(ConversionError):
  """Requested bit width is not positive."""

  @property
  def message(self) -> str:
    return "Error: Size must be greater than 0."


class NumberOverflowError(ConversionError):
  """Value does not fit the two's-complement range of the bit width."""

  @property
  def message(self) -> str:
    return "Error: Number does not fit in the specified size."


class InvalidLatitudeError(ConversionError):

  def __init__(self, value: float):
    super().__init__(value)
    self.value = value

  @property
  def message(self) -> str:
    return f"Error: Invalid latitude: {self.value}."


class InvalidLongitudeError(ConversionError):

  def __init__(self, value: float):
    super().__init__(value)
    self.value = value

  @property
  def message(self) -> str:
    return f"Error: Invalid longitude: {self.value}."


class CalculationError(ConversionError):
  """Derived computation failed. Not raised by any current routine."""

  def __init__(self, message: str):
    super().__init__(message)
    self.reason = message

  @property
  def message(self) -> str:
    return f"Error: {self.reason}"


ERROR_TYPES = (
    InvalidInputError,
    ParseError,
    InvalidSizeError,
    NumberOverflowError,
    InvalidLatitudeError,
    InvalidLongitudeError,
    CalculationError,
)
