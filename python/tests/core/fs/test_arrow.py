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

import os

import pytest

from colbridge.core.fs.arrow import ArrowLocalFileSystem, create_fs
from colbridge.core.utils import errors


class TestArrowLocalFileSystem:

  @pytest.fixture
  def fs(self):
    return ArrowLocalFileSystem()

  def test_write_read_file(self, tmp_path, fs):
    file_path = str(tmp_path / "output.bin")
    with fs.open_output_stream(file_path) as f:
      f.write(b"some bytes")

    with fs.open_input_file(file_path) as f:
      assert f.readall() == b"some bytes"

  def test_output_stream_truncates(self, tmp_path, fs):
    file_path = str(tmp_path / "output.bin")
    with fs.open_output_stream(file_path) as f:
      f.write(b"a longer content")

    with fs.open_output_stream(file_path) as f:
      f.write(b"short")

    with fs.open_input_file(file_path) as f:
      assert f.readall() == b"short"

  def test_compressed_extension_is_written_as_is(self, tmp_path, fs):
    file_path = str(tmp_path / "output.gz")
    with fs.open_output_stream(file_path) as f:
      f.write(b"plain")

    with open(file_path, "rb") as f:
      assert f.read() == b"plain"

  def test_relative_path(self, tmp_path, fs, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with fs.open_output_stream("relative.bin") as f:
      f.write(b"data")

    assert (tmp_path / "relative.bin").exists()
    assert fs.normalize_path("relative.bin") == os.path.join(
        os.getcwd(), "relative.bin")

  def test_open_missing_file(self, tmp_path, fs):
    file_path = str(tmp_path / "missing.bin")
    with pytest.raises(errors.FileOpenError, match="missing.bin"):
      fs.open_input_file(file_path)

  def test_create_in_missing_dir(self, tmp_path, fs):
    file_path = str(tmp_path / "no_such_dir" / "output.bin")
    with pytest.raises(errors.FileOpenError):
      fs.open_output_stream(file_path)


def test_create_fs():
  assert isinstance(create_fs("/tmp/file.parquet"), ArrowLocalFileSystem)
