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

import pyarrow as pa
import pyarrow.parquet as pq
import pytest

from colbridge.core import inspector
from colbridge.core.schema.constants import TypeCode
from colbridge.core.utils import errors


class TestGetRowCount:

  def test_multiple_row_groups(self, all_types_file, int64_file):
    assert inspector.get_row_count(all_types_file) == 5
    assert inspector.get_num_row_groups(all_types_file) == 3

    assert inspector.get_row_count(int64_file) == 25
    assert inspector.get_num_row_groups(int64_file) == 4

  def test_empty_table(self, tmp_path):
    file_path = str(tmp_path / "empty.parquet")
    pq.write_table(pa.table({"int64": pa.array([], pa.int64())}), file_path)
    assert inspector.get_row_count(file_path) == 0

  def test_missing_file(self, tmp_path):
    with pytest.raises(errors.FileOpenError, match="missing.parquet"):
      inspector.get_row_count(str(tmp_path / "missing.parquet"))

  def test_not_parquet_file(self, not_parquet_file):
    with pytest.raises(errors.ParquetIoError, match="not_parquet.parquet"):
      inspector.get_row_count(not_parquet_file)


class TestGetColumnType:

  @pytest.mark.parametrize("column,expected", [
      ("int64", TypeCode.INT64),
      ("int32", TypeCode.INT32),
      ("uint64", TypeCode.UINT64),
      ("timestamp", TypeCode.TIMESTAMP),
      ("float64", TypeCode.UNDEFINED),
      ("string", TypeCode.UNDEFINED),
  ])
  def test_column_types(self, all_types_file, column, expected):
    assert inspector.get_column_type(all_types_file, column) == expected

  def test_missing_column(self, all_types_file):
    with pytest.raises(errors.ColumnNotFoundError) as excinfo:
      inspector.get_column_type(all_types_file, "nosuchcol")

    assert str(excinfo.value) == (
        f"Dataset: nosuchcol does not exist in file: {all_types_file}")

  def test_name_match_is_exact(self, all_types_file):
    with pytest.raises(errors.ColumnNotFoundError):
      inspector.get_column_type(all_types_file, "INT64")

    with pytest.raises(errors.ColumnNotFoundError):
      inspector.get_column_type(all_types_file, "int6")

  def test_missing_file(self, tmp_path):
    with pytest.raises(errors.FileOpenError):
      inspector.get_column_type(str(tmp_path / "missing.parquet"), "int64")


def test_read_metadata(int64_file):
  metadata = inspector.read_metadata(int64_file)
  assert metadata.num_rows == 25
  assert metadata.num_row_groups == 4
  assert [metadata.row_group(i).num_rows for i in range(4)] == [7, 7, 7, 4]
