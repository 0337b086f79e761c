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

"""Geodetic (WGS84) to Cartesian XYZ coordinates."""

from absl import logging
from bitgeo import errors
import numpy as np

WGS84_A = 6378137.0  # Semi-major axis, in meters.
WGS84_F = 1 / 298.257222101  # Flattening.
WGS84_E2 = 2 * WGS84_F - WGS84_F**2  # Eccentricity squared.

ArrayLike = float | np.ndarray


def check_latlon(lat: ArrayLike, lon: ArrayLike) -> None:
  """Raises if latitude is out of [-90, 90] or longitude of [-180, 180]."""
  lat_ok = np.all((np.asarray(lat) >= -90) & (np.asarray(lat) <= 90))
  if not lat_ok:
    raise errors.InvalidLatitudeError(lat)
  lon_ok = np.all((np.asarray(lon) >= -180) & (np.asarray(lon) <= 180))
  if not lon_ok:
    raise errors.InvalidLongitudeError(lon)


def prime_vertical_radius(lat: ArrayLike) -> ArrayLike:
  """Prime-vertical radius of curvature N at the given latitude (degrees)."""
  sin_lat = np.sin(np.deg2rad(lat))
  return WGS84_A / np.sqrt(1.0 - WGS84_E2 * sin_lat * sin_lat)


def geodetic_to_cartesian(
    lat: ArrayLike, lon: ArrayLike, height: ArrayLike, strict: bool = False
) -> tuple[ArrayLike, ArrayLike, ArrayLike]:
  """Converts latitude/longitude/height to Earth-centered XYZ, in meters.

  Inputs are not validated unless `strict` is set: out of range coordinates
  are converted as given (no clamping and no special-casing of the poles or
  the antimeridian). Works for scalars and numpy arrays of equal shape.

  Args:
    lat: Latitude in degrees.
    lon: Longitude in degrees.
    height: Height above the ellipsoid in meters.
    strict: Validate latitude in [-90, 90] and longitude in [-180, 180].

  Returns:
    (x, y, z) in meters.
  """
  if strict:
    check_latlon(lat, lon)
  lat_rad = np.deg2rad(np.asarray(lat, dtype=np.float64))
  lon_rad = np.deg2rad(np.asarray(lon, dtype=np.float64))
  h = np.asarray(height, dtype=np.float64)

  n = prime_vertical_radius(lat)
  cos_lat = np.cos(lat_rad)
  x = (n + h) * cos_lat * np.cos(lon_rad)
  y = (n + h) * cos_lat * np.sin(lon_rad)
  z = (n * (1.0 - WGS84_E2) + h) * np.sin(lat_rad)
  if x.ndim == 0:
    return float(x), float(y), float(z)
  logging.vlog(1, "Converted %d points to XYZ.", x.size)
  return x, y, z
