# Copyright 2023 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
"""Options of colbridge core lib."""

from dataclasses import dataclass
from typing import Optional

# Default max number of values pulled from a row group per batch.
DEFAULT_READ_BATCH_SIZE = 8192

# Default number of rows per row group in written files.
DEFAULT_ROW_GROUP_SIZE = 64 * 1024


@dataclass
class ReadOptions:
  """Options of reading a column."""
  # The max number of values per batch pulled from a row group.
  #
  # A batch can be smaller than batch_size at the end of a row group; the
  # reader advances by the number of values actually returned.
  batch_size: Optional[int] = None

  # If true, log a summary of the operation at info level.
  verbose: bool = False

  def __post_init__(self):
    if self.batch_size is None:
      self.batch_size = DEFAULT_READ_BATCH_SIZE


@dataclass
class WriteOptions:
  """Options of writing a column."""
  # Number of rows per row group; the last row group holds the remainder.
  row_group_size: Optional[int] = None

  # If true, log a summary of the operation at info level.
  verbose: bool = False

  def __post_init__(self):
    if self.row_group_size is None:
      self.row_group_size = DEFAULT_ROW_GROUP_SIZE
