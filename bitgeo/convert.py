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

r"""Command line for the binary and coordinate conversions.

Example commands:
python -m bitgeo.convert --config.op=to_decimal --binary=1101
python -m bitgeo.convert --config.op=to_binary --decimal=-5 --size=8
python -m bitgeo.convert --config.op=to_xyz --lat=47.37 --lon=8.54 --height=408
python -m bitgeo.convert --config.op=utm_zone --lat=40 --lon=-75 \
--config.cross_check_utm
"""

from absl import app
from absl import flags
from absl import logging
from bitgeo import utils
from bitgeo import utm_lib
from bitgeo import utm_zones
from bitgeo.configs import default
import ml_collections
from ml_collections import config_flags

OPS = ("to_decimal", "to_binary", "to_xyz", "utm_zone")

_CONFIG = config_flags.DEFINE_config_dict(
    "config", default.get_config(), "Conversion config.")
flags.DEFINE_string("binary", "", "Two's complement binary input.")
flags.DEFINE_string("decimal", "", "Decimal input.")
flags.DEFINE_string("size", "", "Bit width, config.default_size if empty.")
flags.DEFINE_string("lat", "", "Latitude in degrees.")
flags.DEFINE_string("lon", "", "Longitude in degrees.")
flags.DEFINE_string("height", "0", "Height in meters.")
FLAGS = flags.FLAGS


def run(config: ml_collections.ConfigDict,
        inputs: dict[str, str]) -> list[str]:
  """Runs config.op on text inputs, returns the lines to display."""
  op = config.op
  if op not in OPS:
    raise ValueError(f"Unsupported op: {op}")
  if op == "to_decimal":
    return [utils.binary_text_to_decimal(inputs.get("binary", ""))]
  if op == "to_binary":
    size = inputs.get("size") or str(config.default_size)
    return [utils.decimal_text_to_binary(inputs.get("decimal", ""), size)]
  if op == "to_xyz":
    xyz = utils.latlon_text_to_cartesian(
        inputs.get("lat", ""), inputs.get("lon", ""),
        inputs.get("height", "0"), precision=config.precision)
    return [f"{k}: {v}" for k, v in zip("XYZ", xyz)]
  if op == "utm_zone":
    text = utils.latlon_text_to_utm_zone(
        inputs.get("lat", ""), inputs.get("lon", ""))
    if config.get("cross_check_utm") and text.startswith("UTM Zone: "):
      _cross_check(inputs["lat"], inputs["lon"])
    return [text]
  raise NotImplementedError(op)


def _cross_check(lat_text: str, lon_text: str) -> None:
  lat = utils.parse_float_text(lat_text)
  lon = utils.parse_float_text(lon_text)
  locator = utm_zones.utm_zone_for(lat, lon)
  reference = utm_lib.reference_zone(lat, lon)
  if reference != locator:
    logging.warning("UTM library zone for (%s, %s) is %s, got %s.",
                    lat, lon, reference, locator)


def main(argv):
  if len(argv) > 1:
    raise app.UsageError("Too many command-line arguments.")
  config = _CONFIG.value
  logging.info("Running %s with config:\n%s", config.op, config)
  inputs = dict(binary=FLAGS.binary, decimal=FLAGS.decimal, size=FLAGS.size,
                lat=FLAGS.lat, lon=FLAGS.lon, height=FLAGS.height)
  for line in run(config, inputs):
    print(line)


def run_main():
  app.run(main)


if __name__ == "__main__":
  run_main()
