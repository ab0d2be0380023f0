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
"""Local column write operation implementation."""

from __future__ import annotations
from typing import Callable, Optional

from absl import logging  # type: ignore[import-untyped]
import numpy as np
import pyarrow as pa
import pyarrow.parquet as pq

from colbridge.core.fs.arrow import create_fs
from colbridge.core.options import WriteOptions
from colbridge.core.ops import utils
from colbridge.core.ops.base import BaseColumnOp, TransferBuffer
from colbridge.core.schema import arrow
from colbridge.core.schema.constants import DTYPE_INT64, Status
from colbridge.core.utils import errors

# Codec selection is not supported; pages are written uncompressed.
_COMPRESSION = "NONE"


class ColumnWriteOp(BaseColumnOp):
  """Write an int64 buffer into a new single-column Parquet file.

  The file has one required 64-bit integer column. The buffer is split into
  row groups of `row_group_size` rows, the last one holding the remainder.
  Each row group is written as one batch.
  """

  def __init__(self,
               file_path: str,
               column: str,
               dtype_flag: int = DTYPE_INT64,
               options: Optional[WriteOptions] = None):
    self._options = options or WriteOptions()
    super().__init__(file_path, column, self._options.verbose)

    row_group_size = self._options.row_group_size
    assert row_group_size is not None
    if row_group_size < 1:
      raise errors.UserInputError(
          f"Row group size must be positive, got {row_group_size}")

    self._row_group_size = row_group_size

    self._schema = arrow.column_schema(column, dtype_flag)
    self._type = self._schema.field(0).type
    # TODO: to confirm whether out of range producer values need a check,
    # they are currently stored bit-for-bit.
    self._unsigned = dtype_flag != DTYPE_INT64

  @property
  def schema(self) -> pa.Schema:
    """Return the schema of the written file."""
    return self._schema

  def write(self,
            src: TransferBuffer,
            total_elems: Optional[int] = None) -> Status:
    """Write the first `total_elems` values of `src`.

    Raises:
      FileOpenError: if the file cannot be created.
      ParquetIoError: if a row group fails to be written.
      FileCloseError: if flushing the footer or closing the file fails; the
        file may be truncated.
    """
    if total_elems is None:
      total_elems = len(src)

    utils.check_transfer_buffer(src, total_elems)

    sink = create_fs(self._file_path).open_output_stream(self._file_path)
    try:
      writer = self._open_writer(sink)
      try:
        num_row_groups = self._write_row_groups(writer, src[:total_elems])
      except Exception:
        self._close_after_failure(writer.close, "Parquet writer")
        raise

      self._close(writer.close, "Parquet writer")
    except Exception:
      self._close_after_failure(sink.close, "output stream")
      raise

    self._close(sink.close, "output stream")

    self._log_summary(
        f"Wrote {total_elems} values of {self._type} column {self._column} "
        f"in {num_row_groups} row groups to {self._file_path}")
    return Status.OK

  def _open_writer(self, sink: pa.NativeFile) -> pq.ParquetWriter:
    try:
      return pq.ParquetWriter(sink, self._schema, compression=_COMPRESSION)
    except (pa.ArrowException, OSError) as e:
      raise errors.ParquetIoError(f"{self._file_path}: {e}") from e

  def _write_row_groups(self, writer: pq.ParquetWriter,
                        values: TransferBuffer) -> int:
    num_row_groups = 0
    for start, stop in utils.row_group_ranges(values.shape[0],
                                              self._row_group_size):
      try:
        writer.write_table(self._row_group_table(values[start:stop]),
                           row_group_size=stop - start)
      except (pa.ArrowException, OSError) as e:
        raise errors.ParquetIoError(
            f"Failed to write rows [{start}, {stop}) to {self._file_path}: "
            f"{e}") from e

      num_row_groups += 1

    return num_row_groups

  def _row_group_table(self, values: TransferBuffer) -> pa.Table:
    values = np.ascontiguousarray(values)
    if self._unsigned:
      values = values.view(np.uint64)

    return pa.Table.from_arrays([pa.array(values, type=self._type)],
                                schema=self._schema)

  def _close(self, close_fn: Callable[[], None], name: str) -> None:
    try:
      close_fn()
    except (pa.ArrowException, OSError) as e:
      raise errors.FileCloseError(
          f"Failed to close {name} of {self._file_path}: {e}") from e

  def _close_after_failure(self, close_fn: Callable[[], None],
                           name: str) -> None:
    # The earlier failure is the one reported to the caller.
    try:
      close_fn()
    except (pa.ArrowException, OSError) as e:
      logging.warning(
          f"Failed to close {name} of {self._file_path} after an earlier "
          f"failure: {e}")
