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

"""UTM zone numbers and MGRS latitude bands from lat-lon."""

import dataclasses
import math

from absl import logging
from bitgeo import errors

BAND_LETTERS = "CDEFGHJKLMNPQRSTUVWX"  # C to X without I and O.
BAND_HEIGHT_DEG = 8
MIN_BAND_LAT = -80.0
MAX_BAND_LAT = 84.0  # Exclusive.
ZONE_WIDTH_DEG = 6
NUM_ZONES = 60


@dataclasses.dataclass(frozen=True)
class UtmLocator:
  """UTM zone number with its MGRS latitude band, eg. 18T."""
  zone: int  # 1 to 60.
  band: str  # One of BAND_LETTERS.

  def __str__(self) -> str:
    return f"{self.zone}{self.band}"

  def as_tuple(self) -> tuple[int, str]:
    return (self.zone, self.band)

  @property
  def northern(self) -> bool:
    return self.band >= "N"

  @property
  def epsg(self) -> str:
    return f"EPSG:32{6 if self.northern else 7}{self.zone:02}"


def latitude_band(lat: float) -> str:
  """Returns the MGRS latitude band letter for lat in [-80, 84)."""
  if not MIN_BAND_LAT <= lat < MAX_BAND_LAT:
    raise errors.InvalidLatitudeError(lat)
  # Band X spans 12 degrees (72 to 84), all other bands 8.
  index = min(math.floor((lat - MIN_BAND_LAT) / BAND_HEIGHT_DEG),
              len(BAND_LETTERS) - 1)
  return BAND_LETTERS[index]


def _special_zone(lat: float, lon: float) -> int | None:
  """Zone exceptions for south-west Norway and Svalbard."""
  if 55 < lat < 64 and 2 < lon < 6:
    return 32
  if lat > 71:
    if 6 <= lon < 9:
      return 31
    if 9 <= lon < 12 or 18 <= lon < 21:
      return 33
    if 21 <= lon < 24 or 30 <= lon < 33:
      return 35
  return None


def zone_number(lat: float, lon: float) -> int:
  """Returns the UTM zone number (1-60) for lat in [-90, 90], lon [-180, 180].

  Latitude is validated before longitude.
  """
  if not -90 <= lat <= 90:
    raise errors.InvalidLatitudeError(lat)
  if not -180 <= lon <= 180:
    raise errors.InvalidLongitudeError(lon)
  zone = _special_zone(lat, lon)
  if zone is not None:
    return zone
  return math.floor((lon + 180) / ZONE_WIDTH_DEG) % NUM_ZONES + 1


def utm_zone_for(lat: float, lon: float) -> UtmLocator:
  """Returns the UTM zone with its latitude band, eg. UtmLocator(18, "T").

  The zone accepts latitudes in [-90, 90] but the band only [-80, 84), so
  eg. a latitude of 85 fails with the band's InvalidLatitudeError.
  """
  try:
    return UtmLocator(zone_number(lat, lon), latitude_band(lat))
  except errors.ConversionError as e:
    logging.debug("No UTM zone for (%s, %s): %r", lat, lon, e)
    raise
