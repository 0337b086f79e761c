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

"""Tests for display strings."""

from absl.testing import absltest
from absl.testing import parameterized
from bitgeo import display
from bitgeo import errors


class DisplayTest(parameterized.TestCase):

  @parameterized.parameters(
      ("1101", "-3"),
      ("0101", "5"),
      ("", "Invalid input: Enter only 0s and 1s."),
      ("12", "Invalid input: Enter only 0s and 1s."),
  )
  def test_twos_complement_to_decimal_text(self, binary, expected):
    self.assertEqual(display.twos_complement_to_decimal_text(binary), expected)

  @parameterized.parameters(
      (5, 8, "00000101"),
      (-5, 8, "11111011"),
      (1, 0, "Error: Size must be greater than 0."),
      (128, 8, "Error: Number does not fit in the specified size."),
  )
  def test_decimal_to_twos_complement_text(self, value, size, expected):
    self.assertEqual(
        display.decimal_to_twos_complement_text(value, size), expected)

  def test_cartesian_text(self):
    self.assertEqual(display.cartesian_text(0, 0, 0),
                     ("6378137.000000", "0.000000", "0.000000"))
    self.assertEqual(display.cartesian_text(0, 0, 1.5, precision=1),
                     ("6378138.5", "0.0", "0.0"))

  @parameterized.parameters(
      (40.0, -75.0, "UTM Zone: 18T"),
      (72.0, 7.0, "UTM Zone: 31X"),
      (84.0, 15.0, "Error: Invalid latitude: 84.0."),
      (0.0, 181.0, "Error: Invalid longitude: 181.0."),
  )
  def test_utm_zone_text(self, lat, lon, expected):
    self.assertEqual(display.utm_zone_text(lat, lon), expected)

  def test_render(self):
    self.assertEqual(display.render(lambda x: x * 2, 21), "42")

    def fail():
      raise errors.CalculationError("no solution")
    self.assertEqual(display.render(fail), "Error: no solution")

  def test_render_propagates_other_errors(self):
    def fail():
      raise KeyError("x")
    with self.assertRaises(KeyError):
      display.render(fail)

  @parameterized.parameters(
      ("-3", False),
      ("00000101", False),
      ("UTM Zone: 18T", False),
      ("Invalid input: Enter only 0s and 1s.", True),
      ("Error: Number does not fit in the specified size.", True),
      ("Error: Invalid latitude: 84.0.", True),
  )
  def test_is_error_text(self, text, expected):
    self.assertEqual(display.is_error_text(text), expected)


if __name__ == "__main__":
  absltest.main()
