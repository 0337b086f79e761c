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

"""Renders conversion results and errors as display strings.

These helpers are for callers that can only show text (eg. a web page). Both
results and errors become plain strings, so use the functions in
`twos_complement`, `geodesy` and `utm_zones` directly whenever the caller
needs to tell success from failure.
"""

from collections.abc import Callable
from typing import Any

from bitgeo import errors
from bitgeo import geodesy
from bitgeo import twos_complement
from bitgeo import utm_zones

INVALID_VALUES_TEXT = "Error: Please enter valid values."
INVALID_INPUT_TEXT = "Error: Invalid input."
UTM_ZONE_PREFIX = "UTM Zone: "

_ERROR_MESSAGES = frozenset([
    errors.InvalidInputError().message,
    errors.InvalidSizeError().message,
    errors.NumberOverflowError().message,
    INVALID_VALUES_TEXT,
    INVALID_INPUT_TEXT,
])


def render(fn: Callable[..., Any], *args, **kwargs) -> str:
  """Returns str() of fn's result, or the error message if it fails."""
  try:
    return str(fn(*args, **kwargs))
  except errors.ConversionError as e:
    return e.message


def twos_complement_to_decimal_text(binary: str) -> str:
  return render(twos_complement.twos_complement_to_decimal, binary)


def decimal_to_twos_complement_text(value: int, size: int) -> str:
  return render(twos_complement.decimal_to_twos_complement, value, size)


def cartesian_text(lat: float, lon: float, height: float,
                   precision: int = 6) -> tuple[str, str, str]:
  """Returns X, Y and Z formatted with `precision` decimals."""
  xyz = geodesy.geodetic_to_cartesian(lat, lon, height)
  return tuple(f"{v:.{precision}f}" for v in xyz)


def utm_zone_text(lat: float, lon: float) -> str:
  """Returns eg. "UTM Zone: 18T", or the error message."""
  try:
    locator = utm_zones.utm_zone_for(lat, lon)
  except errors.ConversionError as e:
    return e.message
  return f"{UTM_ZONE_PREFIX}{locator}"


def is_error_text(text: str) -> bool:
  """Whether a display string produced here is an error message."""
  return text in _ERROR_MESSAGES or text.startswith("Error: ")
