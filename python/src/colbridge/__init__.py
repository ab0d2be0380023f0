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
"""colbridge moves numeric columns between flat buffers and Parquet files."""

from colbridge.api import (get_column_type, get_library_version, get_row_count,
                           read_column, release_string, write_column)
from colbridge.core.error_channel import ErrorSlot, OwnedString
from colbridge.core.options import ReadOptions, WriteOptions
from colbridge.core.schema.constants import (DTYPE_INT64, DTYPE_UINT64, Status,
                                             TypeCode)
