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
"""Type codes, status codes and dtype flags shared across the bridge."""

from enum import IntEnum


class Status(IntEnum):
  """Status codes returned by transfer entry points."""
  # The operation has succeeded.
  OK = 0
  # The operation has failed, the error slot holds a message.
  ERROR = -1
  # The column type is not transfer-eligible; the error slot is not touched.
  UNDEFINED = -2


class TypeCode(IntEnum):
  """On-disk column types known to the bridge."""
  INT64 = 0
  INT32 = 1
  UINT64 = 2
  # Recognized but not transferable.
  TIMESTAMP = 3
  UNDEFINED = Status.UNDEFINED.value


# Type codes that can be moved into or out of an int64 transfer buffer.
TRANSFER_ELIGIBLE_TYPES = frozenset(
    [TypeCode.INT64, TypeCode.INT32, TypeCode.UINT64])

# Writer dtype flags. Any flag other than `DTYPE_INT64` writes an unsigned
# column.
DTYPE_INT64 = 1
DTYPE_UINT64 = 2
