# Copyright 2020 The netcon Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
import numpy as np
import pytest

torch = pytest.importorskip("torch")
# pylint: disable=wrong-import-position
from netcon.backends.pytorch import pytorch_backend


def test_contract_pair():
  backend = pytorch_backend.PyTorchBackend()
  np.random.seed(10)
  a = np.random.rand(2, 3, 4)
  b = np.random.rand(4, 3, 5)
  result, labels = backend.contract_pair(
      torch.tensor(a), [-1, 1, 2], torch.tensor(b), [2, 1, -2])
  assert labels == [-1, -2]
  np.testing.assert_allclose(result.numpy(), np.einsum('xyz,zyw->xw', a, b))


def test_trace_self():
  backend = pytorch_backend.PyTorchBackend()
  np.random.seed(10)
  a = np.random.rand(3, 2, 3)
  result, labels = backend.trace_self(torch.tensor(a), [1, -1, 1])
  assert labels == [-1]
  np.testing.assert_allclose(result.numpy(), np.einsum('xax->a', a))


def test_numpy_dtype():
  backend = pytorch_backend.PyTorchBackend()
  assert backend.numpy_dtype(torch.float32) == np.float32
  assert backend.numpy_dtype(torch.complex128) == np.complex128


def test_supports_fast_path():
  backend = pytorch_backend.PyTorchBackend()
  assert backend.supports_fast_path(torch.float64)
  assert not backend.supports_fast_path(torch.int64)
  assert not backend.supports_fast_path(torch.bfloat16)


def test_copy():
  backend = pytorch_backend.PyTorchBackend()
  a = torch.ones(2)
  b = backend.copy(a)
  b[0] = 5.0
  assert a[0] == 1.0
