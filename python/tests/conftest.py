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

import numpy as np
import pyarrow as pa
import pyarrow.parquet as pq
import pytest

INT32_MIN = np.iinfo(np.int32).min
INT32_MAX = np.iinfo(np.int32).max
INT64_MIN = np.iinfo(np.int64).min
INT64_MAX = np.iinfo(np.int64).max
UINT64_MAX = np.iinfo(np.uint64).max


@pytest.fixture
def all_types_table() -> pa.Table:
  return pa.Table.from_pydict(
      {
          "int64": [INT64_MIN, -1, 0, 1, INT64_MAX],
          "int32": [INT32_MIN, -1, 0, INT32_MAX, 7],
          "uint64": [0, 1, 2**63, UINT64_MAX, 42],
          "timestamp": [0, 1, 2, 3, 4],
          "float64": [0.1, 0.2, 0.3, 0.4, 0.5],
          "string": ["a", "b", "c", "d", "e"],
      },
      schema=pa.schema([
          ("int64", pa.int64()),
          ("int32", pa.int32()),
          ("uint64", pa.uint64()),
          ("timestamp", pa.timestamp("us")),
          ("float64", pa.float64()),
          ("string", pa.string()),
      ]))


@pytest.fixture
def all_types_file(tmp_path, all_types_table) -> str:
  # Row groups of 2 rows give 3 row groups, the last one holding 1 row.
  file_path = str(tmp_path / "all_types.parquet")
  pq.write_table(all_types_table, file_path, row_group_size=2)
  return file_path


@pytest.fixture
def int64_file(tmp_path) -> str:
  file_path = str(tmp_path / "int64.parquet")
  pq.write_table(pa.Table.from_pydict({"int64": list(range(100, 125))}),
                 file_path,
                 row_group_size=7)
  return file_path


@pytest.fixture
def not_parquet_file(tmp_path) -> str:
  file_path = tmp_path / "not_parquet.parquet"
  file_path.write_text("this is not a parquet file, not even close")
  return str(file_path)
