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

from absl.testing import absltest
from bitgeo import errors


class ErrorsTest(absltest.TestCase):

  def test_equality_by_type_and_payload(self):
    self.assertEqual(errors.InvalidLatitudeError(85.0),
                     errors.InvalidLatitudeError(85.0))
    self.assertNotEqual(errors.InvalidLatitudeError(85.0),
                        errors.InvalidLatitudeError(86.0))
    self.assertNotEqual(errors.InvalidLatitudeError(85.0),
                        errors.InvalidLongitudeError(85.0))
    self.assertEqual(errors.InvalidInputError(), errors.InvalidInputError())
    self.assertNotEqual(errors.InvalidSizeError(),
                        errors.NumberOverflowError())
    self.assertLen({errors.ParseError("a"), errors.ParseError("a")}, 1)

  def test_messages(self):
    self.assertEqual(str(errors.InvalidInputError()),
                     "Invalid input: Enter only 0s and 1s.")
    self.assertEqual(str(errors.InvalidSizeError()),
                     "Error: Size must be greater than 0.")
    self.assertEqual(str(errors.NumberOverflowError()),
                     "Error: Number does not fit in the specified size.")
    self.assertEqual(str(errors.InvalidLongitudeError(181.0)),
                     "Error: Invalid longitude: 181.0.")
    self.assertEqual(str(errors.ParseError("too large")),
                     "Error: Failed to parse binary input (too large).")
    self.assertEqual(repr(errors.InvalidLatitudeError(85.0)),
                     "InvalidLatitudeError(85.0)")

  def test_closed_taxonomy(self):
    self.assertLen(errors.ERROR_TYPES, 7)
    for error_type in errors.ERROR_TYPES:
      self.assertTrue(issubclass(error_type, errors.ConversionError))
      self.assertTrue(issubclass(error_type, ValueError))


if __name__ == "__main__":
  absltest.main()
