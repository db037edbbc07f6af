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
from netcon.assembler import multiply_final
from netcon.backends.backend_factory import get_backend


def test_single_tensor_is_permuted_copy():
  backend_obj = get_backend("numpy")
  np.random.seed(10)
  a = np.random.rand(2, 3, 4)
  result = multiply_final([a], [[-3, -1, -2]], [-1, -2, -3], backend_obj)
  np.testing.assert_allclose(result, a.transpose(1, 2, 0))
  assert not np.shares_memory(result, a)


def test_outer_products_in_forder():
  backend_obj = get_backend("numpy")
  np.random.seed(10)
  a, b, c = np.random.rand(2), np.random.rand(3, 4), np.random.rand(5)
  result = multiply_final([a, b, c], [[-2], [-4, -1], [-3]],
                          [-1, -2, -3, -4], backend_obj)
  np.testing.assert_allclose(result, np.einsum('b,da,c->abcd', a, b, c))


def test_smallest_tensors_first():
  backend_obj = get_backend("shell")
  tensors = [
      backend_obj.convert_to_tensor(s) for s in [(7,), (2,), (6,), (3,)]
  ]
  steps = []
  multiply_final(tensors, [[-1], [-2], [-3], [-4]], [-1, -2, -3, -4],
                 backend_obj, steps)
  assert [s.labels for s in steps] == [((-2,), (-4,)), ((-3,), (-2, -4)),
                                       ((-1,), (-2, -3, -4))]
  assert steps[-1].result_labels == (-1, -2, -3, -4)
  assert steps[-1].result_shape == (7, 2, 6, 3)


def test_ties_take_first_found():
  backend_obj = get_backend("shell")
  tensors = [backend_obj.convert_to_tensor(s) for s in [(2,), (2,), (2,)]]
  steps = []
  multiply_final(tensors, [[-1], [-2], [-3]], [-1, -2, -3], backend_obj,
                 steps)
  assert steps[0].operands == (0, 1)
  assert steps[0].labels == ((-1,), (-2,))
