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
"""Inspect row counts and column types from Parquet footer metadata."""

from contextlib import contextmanager
from typing import Iterator

import pyarrow as pa
import pyarrow.parquet as pq

from colbridge.core.fs.arrow import create_fs
from colbridge.core.schema import arrow
from colbridge.core.schema.constants import TypeCode
from colbridge.core.utils import errors


@contextmanager
def open_parquet_file(file_path: str) -> Iterator[pq.ParquetFile]:
  """Open a Parquet file for reading; the file is closed on every exit path.

  Raises:
    FileOpenError: if the file cannot be opened.
    ParquetIoError: if the footer metadata cannot be parsed.
  """
  with create_fs(file_path).open_input_file(file_path) as f:
    try:
      parquet_file = pq.ParquetFile(f)
    except (pa.ArrowException, OSError) as e:
      raise errors.ParquetIoError(f"{file_path}: {e}") from e

    yield parquet_file


def read_metadata(file_path: str) -> pq.FileMetaData:
  """Read the footer metadata of a Parquet file."""
  with open_parquet_file(file_path) as f:
    return f.metadata


def get_row_count(file_path: str) -> int:
  """Return the total number of rows across all row groups of a file."""
  metadata = read_metadata(file_path)
  return sum(
      metadata.row_group(i).num_rows for i in range(metadata.num_row_groups))


def get_num_row_groups(file_path: str) -> int:
  """Return the number of row groups of a file."""
  return read_metadata(file_path).num_row_groups


def get_column_type(file_path: str, column: str) -> TypeCode:
  """Return the type code of a column matched by its exact name.

  Raises:
    ColumnNotFoundError: if the file has no column of the name.
  """
  with open_parquet_file(file_path) as f:
    schema = f.schema_arrow

  # Missing (or ambiguous) names give -1 rather than an error.
  field_index = schema.get_field_index(column)
  if field_index < 0:
    raise errors.ColumnNotFoundError(file_path, column)

  return arrow.type_code(schema.field(field_index).type)
