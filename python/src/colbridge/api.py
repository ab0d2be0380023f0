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
"""Entry points of the bridge.

Each entry point is synchronous and self-contained. Failures never propagate
as exceptions: they are translated at the call into a status code plus an
owned message placed into the caller's `ErrorSlot`. The caller releases every
returned string through `release_string`.
"""

import dataclasses
from typing import Optional

from absl import logging  # type: ignore[import-untyped]
import pyarrow as pa

from colbridge.core import inspector
from colbridge.core.error_channel import ErrorSlot, OwnedString
from colbridge.core.error_channel import release_string as _release_string
from colbridge.core.options import ReadOptions, WriteOptions
from colbridge.core.ops.base import TransferBuffer
from colbridge.core.ops.read import ColumnReadOp
from colbridge.core.ops.write import ColumnWriteOp
from colbridge.core.schema.constants import Status
from colbridge.core.utils import errors
from colbridge.core.utils.versions import library_version

# Failures reported through the error slot.
_REPORTED_ERRORS = (errors.UserInputError, errors.BridgeRuntimeError,
                    pa.ArrowException, OSError)


def _report(err: ErrorSlot, operation: str, error: Exception) -> Status:
  logging.warning(f"{operation} failed: {error}")
  err.fail(str(error))
  return Status.ERROR


def get_row_count(file_path: str, err: ErrorSlot) -> int:
  """Return the total number of rows of a file, or `Status.ERROR`."""
  try:
    return inspector.get_row_count(file_path)
  except _REPORTED_ERRORS as e:
    return _report(err, "get_row_count", e)


def get_column_type(file_path: str, column: str, err: ErrorSlot) -> int:
  """Return the `TypeCode` of a column, or `Status.ERROR`.

  An unsupported column type is `TypeCode.UNDEFINED`, which is not an error.
  """
  try:
    return inspector.get_column_type(file_path, column)
  except _REPORTED_ERRORS as e:
    return _report(err, "get_column_type", e)


# pylint: disable=too-many-arguments
def read_column(file_path: str,
                dest: TransferBuffer,
                column: str,
                declared_length: int,
                batch_size: int,
                err: ErrorSlot,
                options: Optional[ReadOptions] = None) -> Status:
  """Read all values of a column into `dest`.

  Args:
    file_path: path of the Parquet file.
    dest: caller-owned 1-D int64 array, sized to at least the row count.
    column: exact name of the column.
    declared_length: number of slots of `dest` available to the read.
    batch_size: max number of values pulled per batch.
    err: receives the message on failure.
    options: other read options; `batch_size` overrides its batch size.

  Returns:
    `Status.OK`, `Status.ERROR` with `err` populated, or `Status.UNDEFINED`
    for a column type that cannot be transferred (`err` untouched). After a
    failure the content of `dest` is undefined.
  """
  try:
    read_options = dataclasses.replace(options or ReadOptions(),
                                       batch_size=batch_size)
    return ColumnReadOp(file_path, column,
                        read_options).read_into(dest, declared_length)
  except _REPORTED_ERRORS as e:
    return _report(err, "read_column", e)


# pylint: disable=too-many-arguments
def write_column(file_path: str,
                 src: TransferBuffer,
                 column_index: int,
                 column: str,
                 total_elems: int,
                 row_group_size: int,
                 dtype_flag: int,
                 err: ErrorSlot,
                 options: Optional[WriteOptions] = None) -> Status:
  """Write the first `total_elems` values of `src` into a new file.

  Args:
    file_path: path of the file to create; an existing file is truncated.
    src: caller-owned 1-D int64 array.
    column_index: position of the column in the caller's request, only used
      in log records.
    column: name of the only column.
    total_elems: number of values to write; zero creates a file without row
      groups.
    row_group_size: number of rows per row group.
    dtype_flag: `DTYPE_INT64` for signed values, otherwise the values are
      annotated as unsigned.
    err: receives the message on failure.
    options: other write options; `row_group_size` overrides its row group
      size.
  """
  try:
    write_options = dataclasses.replace(options or WriteOptions(),
                                        row_group_size=row_group_size)
    if write_options.verbose:
      logging.info(f"Writing column #{column_index} ({column}) to {file_path}")

    return ColumnWriteOp(file_path, column, dtype_flag,
                         write_options).write(src, total_elems)
  except _REPORTED_ERRORS as e:
    return _report(err, f"write_column #{column_index}", e)


def get_library_version() -> OwnedString:
  """Return a new owned string of the linked Arrow library version."""
  return OwnedString(library_version())


def release_string(string: OwnedString) -> None:
  """Release an error message or version string returned by the bridge."""
  _release_string(string)
