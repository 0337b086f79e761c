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

"""Utils for turning user text input into conversion arguments."""

import re

from bitgeo import display

# Leading numeric prefix, like the browser's parseInt/parseFloat.
_INT_PREFIX = re.compile(r"[+-]?\d+")
_FLOAT_PREFIX = re.compile(
    r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_int_text(text: str | None) -> int | None:
  """Parses the leading integer of a trimmed string, None if there is none."""
  m = _INT_PREFIX.match((text or "").strip())
  return int(m.group()) if m else None


def parse_float_text(text: str | None) -> float | None:
  """Parses the leading float of a trimmed string, None if there is none."""
  m = _FLOAT_PREFIX.match((text or "").strip())
  if not m:
    return None
  return float(m.group().replace("Infinity", "inf"))


def binary_text_to_decimal(binary_text: str) -> str:
  return display.twos_complement_to_decimal_text((binary_text or "").strip())


def decimal_text_to_binary(decimal_text: str, size_text: str) -> str:
  """Converts text inputs to a two's complement string (or error message)."""
  value = parse_int_text(decimal_text)
  size = parse_int_text(size_text)
  if value is None or size is None or size <= 0:
    return display.INVALID_VALUES_TEXT
  return display.decimal_to_twos_complement_text(value, size)


def latlon_text_to_cartesian(lat_text: str, lon_text: str, height_text: str,
                             precision: int = 6) -> tuple[str, str, str]:
  """Converts text inputs to formatted X, Y, Z (or three error messages)."""
  values = [parse_float_text(t) for t in (lat_text, lon_text, height_text)]
  if any(v is None for v in values):
    return (display.INVALID_INPUT_TEXT,) * 3
  return display.cartesian_text(*values, precision=precision)


def latlon_text_to_utm_zone(lat_text: str, lon_text: str) -> str:
  lat, lon = parse_float_text(lat_text), parse_float_text(lon_text)
  if lat is None or lon is None:
    return display.INVALID_INPUT_TEXT
  return display.utm_zone_text(lat, lon)
