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

"""Default conversion config.

See bitgeo/convert.py for example command.
"""

from ml_collections import config_dict as cd


def get_config():
  """Returns the default config."""
  c = cd.ConfigDict()
  c.op = "to_decimal"  # One of convert.OPS.
  c.precision = 6  # Decimals shown for X, Y, Z.
  c.default_size = 8  # Bit width when no size is given.
  c.cross_check_utm = False  # Compare zones against the UTM library.
  return c
