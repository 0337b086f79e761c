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

"""A wrapper around UTM library to look up reference zones and bands.

The UTM library uses the full Norway/Svalbard exception areas, so its zones
differ from `utm_zones.zone_number` inside them; elsewhere they agree.
"""

from bitgeo import utm_zones
import utm as utm_lib


def reference_zone(lat: float, lon: float) -> utm_zones.UtmLocator | None:
  """Returns the zone and band from the UTM library, None if it has none."""
  letter = utm_lib.latitude_to_zone_letter(lat)
  if letter is None:
    return None
  return utm_zones.UtmLocator(
      int(utm_lib.latlon_to_zone_number(lat, lon)), letter)


def agrees(locator: utm_zones.UtmLocator, lat: float, lon: float) -> bool:
  """Whether `locator` matches the UTM library zone for (lat, lon)."""
  return reference_zone(lat, lon) == locator
