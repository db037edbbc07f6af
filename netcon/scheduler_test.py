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
import pytest
import numpy as np
from netcon import errors
from netcon import scheduler
from netcon.backends.backend_factory import get_backend
from netcon.backends.shell.shell_backend import ShellTensor


def test_get_tcon():
  network = [[-1, 1, 2], [2, -2], [1, 3, 3]]
  assert scheduler.get_tcon(network, 1) == [0, 2]
  assert scheduler.get_tcon(network, 3) == [2]
  assert scheduler.get_tcon(network, 4) == []


def test_get_icon_trace():
  network = [[1, -1, 2, 1, 2, 3], [3, -2]]
  assert scheduler.get_icon(network, [0]) == [1, 2]


def test_get_icon_pair():
  network = [[-1, 1, 2, 3], [3, 2, 1, -2]]
  assert scheduler.get_icon(network, [0, 1]) == [1, 2, 3]


def test_get_icon_pair_with_pending_trace():
  network = [[1, -1, 2, 1], [2, -2]]
  assert scheduler.get_icon(network, [0, 1]) == [2]


def test_find_newv():
  network = [[-1, 1, 2, 4, 4], [-3, 2, 1, -2]]
  assert scheduler.find_newv(network, [0, 1], [1, 2]) == [-1, 4, 4, -3, -2]
  assert scheduler.find_newv(network, [0], [4]) == [-1, 1, 2]


def test_renew_order():
  assert scheduler.renew_order([1, 2, 3, 4], [3, 1]) == [2, 4]


def test_remove_entries_descending():
  tensors = ["a", "b", "c", "d"]
  network = [[1], [2], [3], [4]]
  scheduler._remove_entries(tensors, network, [0, 2])
  assert tensors == ["b", "d"]
  assert network == [[2], [4]]
  tensors = ["a", "b", "c", "d"]
  network = [[1], [2], [3], [4]]
  scheduler._remove_entries(tensors, network, [3, 1])
  assert tensors == ["a", "c"]
  assert network == [[1], [3]]


def test_shared_labels_are_fused():
  backend_obj = get_backend("shell")
  tensors = [ShellTensor((2, 3, 4)), ShellTensor((4, 3, 5))]
  steps = []
  result = scheduler.contract_network(tensors, [[-1, 1, 2], [2, 1, -2]],
                                      [2, 1], [-1, -2], backend_obj, steps)
  assert result.shape == (2, 5)
  assert len(steps) == 2
  assert steps[0].kind == "contract"
  # both labels are resolved by one operation, 2 came first in `order`
  assert set(steps[0].contracted) == {1, 2}


def test_trace_resolves_all_repeated_labels():
  backend_obj = get_backend("shell")
  steps = []
  scheduler.contract_network([ShellTensor((2, 3, 2, 3, 4))],
                             [[1, 2, 1, 2, -1]], [1, 2], [-1], backend_obj,
                             steps)
  assert [s.kind for s in steps] == ["trace", "permute"]
  assert steps[0].contracted == (1, 2)
  assert steps[0].result_shape == (4,)


def test_new_tensor_is_appended():
  backend_obj = get_backend("shell")
  tensors = [ShellTensor((2, 3)), ShellTensor((5,)), ShellTensor((3, 4))]
  steps = []
  scheduler.contract_network(tensors, [[-1, 1], [-3], [1, -2]], [1],
                             [-1, -2, -3], backend_obj, steps)
  assert steps[0].operands == (0, 2)
  assert steps[0].result_labels == (-1, -2)
  # network is now [(5,), (2, 4)]
  assert steps[1].kind == "outer_product"
  assert steps[1].labels == ((-3,), (-1, -2))
  assert steps[1].operands == (0, 1)
  assert steps[1].result_shape == (2, 4, 5)


def test_caller_lists_are_left_alone():
  backend_obj = get_backend("numpy")
  tensors = [np.ones((2, 2)), np.ones((2, 2))]
  network = [[-1, 1], [1, -2]]
  order = [1]
  scheduler.contract_network(tensors, network, order, [-1, -2], backend_obj)
  assert len(tensors) == 2
  assert network == [[-1, 1], [1, -2]]
  assert order == [1]


def test_unknown_label_raises():
  backend_obj = get_backend("numpy")
  with pytest.raises(errors.InconsistentNetwork):
    scheduler.contract_network([np.ones((2, 2))], [[-1, -2]], [1], [-1, -2],
                               backend_obj)


def test_dangling_contracted_label_raises():
  backend_obj = get_backend("numpy")
  with pytest.raises(errors.InconsistentNetwork):
    scheduler.contract_network([np.ones((2, 2))], [[1, -1]], [1], [-1],
                               backend_obj)


def test_label_on_three_tensors_raises():
  backend_obj = get_backend("numpy")
  with pytest.raises(errors.InconsistentNetwork):
    scheduler.contract_network([np.ones(2)] * 3, [[1], [1], [1]], [1], [],
                               backend_obj)
