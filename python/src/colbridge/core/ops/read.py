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
"""Local column read operation implementation."""

from __future__ import annotations
from contextlib import nullcontext
from typing import ContextManager, Optional

import numpy as np
import pyarrow as pa
import pyarrow.parquet as pq

from colbridge.core import inspector
from colbridge.core.options import ReadOptions
from colbridge.core.ops import utils
from colbridge.core.ops.base import BaseColumnOp, TransferBuffer
from colbridge.core.schema import arrow
from colbridge.core.schema.constants import Status
from colbridge.core.utils import errors


class ColumnReadOp(BaseColumnOp):
  """Read all values of a column into a caller-owned int64 buffer.

  Row groups are visited in file order and values are appended in that order,
  so positions stay aligned with sibling columns read from the same file.

  Not thread safe.
  """

  def __init__(self,
               file_path: str,
               column: str,
               options: Optional[ReadOptions] = None):
    self._options = options or ReadOptions()
    super().__init__(file_path, column, self._options.verbose)

    batch_size = self._options.batch_size
    assert batch_size is not None
    if batch_size < 1:
      raise errors.UserInputError(
          f"Batch size must be positive, got {batch_size}")

    self._batch_size = batch_size

  def read_into(self,
                dest: TransferBuffer,
                declared_length: Optional[int] = None) -> Status:
    """Fill `dest` with the values of the column.

    Args:
      dest: a 1-D int64 array; it must hold at least as many values as the
        file has rows.
      declared_length: the number of slots of `dest` the caller makes
        available, defaults to the length of `dest`.

    Returns:
      `Status.OK` after all row groups are read, or `Status.UNDEFINED` without
      touching `dest` if the column type is not transfer-eligible.
    """
    if declared_length is None:
      declared_length = len(dest)

    utils.check_transfer_buffer(dest, declared_length, writable=True)

    type_code = inspector.get_column_type(self._file_path, self._column)
    transfer = arrow.TRANSFERS.get(type_code)
    if transfer is None:
      self._log_summary(
          f"Column {self._column} in {self._file_path} has type "
          f"{type_code.name}, which cannot be transferred")
      return Status.UNDEFINED

    with inspector.open_parquet_file(self._file_path) as f:
      num_rows = f.metadata.num_rows
      if num_rows > declared_length:
        raise errors.BufferTooSmallError(
            f"File {self._file_path} has {num_rows} rows, more than the "
            f"declared buffer length {declared_length}")

      # Only the declared slots are writable.
      dest = dest[:declared_length]

      num_row_groups = f.num_row_groups
      cursor = 0
      for row_group in range(num_row_groups):
        cursor = self._read_row_group(f, row_group, transfer, dest, cursor)

    self._log_summary(
        f"Read {cursor} values of {type_code.name} column {self._column} "
        f"from {num_row_groups} row groups of {self._file_path}")
    return Status.OK

  def _read_row_group(self, f: pq.ParquetFile, row_group: int,
                      transfer: arrow.ColumnTransfer, dest: TransferBuffer,
                      cursor: int) -> int:
    """Append the values of one row group at `cursor`; return the new
    cursor."""
    row_group_metadata = f.metadata.row_group(row_group)
    self._check_column_exists(row_group_metadata)

    with self._staging_buffer(transfer,
                              row_group_metadata.num_rows) as scratch:
      for batch in f.iter_batches(batch_size=self._batch_size,
                                  row_groups=[row_group],
                                  columns=[self._column],
                                  use_threads=False):
        values = self._batch_values(batch.column(0))
        num_values = values.shape[0]
        if cursor + num_values > dest.shape[0]:
          raise errors.BufferTooSmallError(
              f"Column {self._column} in {self._file_path} has more values "
              f"than the declared buffer length {dest.shape[0]}")

        if scratch is not None:
          scratch[:num_values] = values
          values = scratch[:num_values]

        transfer.copy(values, dest[cursor:cursor + num_values])
        cursor += num_values

    return cursor

  def _check_column_exists(self,
                           row_group_metadata: pq.RowGroupMetaData) -> None:
    for i in range(row_group_metadata.num_columns):
      if row_group_metadata.column(i).path_in_schema == self._column:
        return

    raise errors.ColumnNotFoundError(self._file_path, self._column)

  def _staging_buffer(self, transfer: arrow.ColumnTransfer,
                      num_rows: int) -> ContextManager[Optional[np.ndarray]]:
    if not transfer.widen:
      return nullcontext()

    return utils.scratch_buffer(max(min(self._batch_size, num_rows), 1),
                                transfer.source_dtype)

  def _batch_values(self, array: pa.Array) -> np.ndarray:
    if array.null_count > 0:
      raise errors.ParquetIoError(
          f"Column {self._column} in {self._file_path} contains "
          f"{array.null_count} nulls")

    return array.to_numpy()
