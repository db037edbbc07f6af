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
from netcon.checks import check_indices, is_label


def test_well_formed_network():
  assert check_indices([[-1, 1], [1, -2]], [(3, 4), (4, 5)], [1], [-1, -2])


def test_well_formed_trace():
  assert check_indices([[1, -1, 1]], [(3, 2, 3)], [1], [-1])


def test_count_mismatch():
  with pytest.raises(errors.ShapeMismatch, match="number of tensors"):
    check_indices([[-1], [-2]], [(2,)], [], [-1, -2])


def test_rank_mismatch():
  with pytest.raises(errors.ShapeMismatch, match="tensor 1"):
    check_indices([[-1, 1], [1]], [(2, 2), (2, 2)], [1], [-1])


def test_sign_violations():
  with pytest.raises(errors.SignViolation, match="order"):
    check_indices([[-1, 1], [1, -2]], [(2, 2), (2, 2)], [1, -1], [-2])
  with pytest.raises(errors.SignViolation, match="forder"):
    check_indices([[-1, 1], [1, -2]], [(2, 2), (2, 2)], [], [-1, -2, 1])


def test_sign_is_checked_before_labels():
  with pytest.raises(errors.SignViolation):
    check_indices([[0, 1], [1, -2]], [(2, 2), (2, 2)], [0, 1], [-2])


def test_zero_label():
  with pytest.raises(errors.InvalidLabel, match="0"):
    check_indices([[-1, -2, 0], [0, -3]], [(3, 2, 5), (5, 6)], [],
                  [-1, -2, -3])


def test_non_integer_labels():
  with pytest.raises(errors.InvalidLabel):
    check_indices([[1, 2], [2, 't']], [(2, 2), (2, 2)], [2], [])
  with pytest.raises(errors.InvalidLabel):
    check_indices([[1, 2], [2, 0.1]], [(2, 2), (2, 2)], [2], [])


def test_label_set_mismatch():
  shapes = [(2, 2), (2, 2)]
  network = [[-1, 1], [1, -2]]
  with pytest.raises(errors.LabelSetMismatch, match=r"\[-2\] are in neither"):
    check_indices(network, shapes, [1], [-1])
  with pytest.raises(errors.LabelSetMismatch, match="do not appear"):
    check_indices(network, shapes, [1, 2], [-1, -2])
  with pytest.raises(errors.LabelSetMismatch, match="more than once"):
    check_indices(network, shapes, [1, 1], [-1, -2])
  with pytest.raises(errors.LabelSetMismatch, match="more than once"):
    check_indices(network, shapes, [1], [-1, -2, -1])


def test_contracted_label_arity():
  with pytest.raises(errors.ArityViolation, match="occurs 3 times"):
    check_indices([[-1, 1, 1], [1, -3]], [(3, 2, 5), (5, 6)], [1], [-1, -3])
  with pytest.raises(errors.ArityViolation, match="occurs 1 times"):
    check_indices([[-1, 1], [-2, -3]], [(2, 2), (2, 2)], [1],
                  [-1, -2, -3])


def test_free_label_arity():
  with pytest.raises(errors.ArityViolation, match="free label -1"):
    check_indices([[-1, -1, 1], [1, -3]], [(3, 2, 5), (5, 6)], [1],
                  [-1, -3])


def test_dimension_mismatch():
  with pytest.raises(errors.DimensionMismatch) as excinfo:
    check_indices([[-1, -2, 1], [-3, 1]], [(3, 2, 5), (5, 6)], [1],
                  [-1, -2, -3])
  message = str(excinfo.value)
  assert "axis 2 of tensor 0" in message
  assert "axis 1 of tensor 1" in message
  assert "5" in message and "6" in message


def test_errors_are_value_errors():
  with pytest.raises(ValueError):
    check_indices([[-1]], [(2, 2)], [], [-1])


def test_is_label():
  assert is_label(1)
  assert is_label(np.int64(-3))
  assert not is_label(1.0)
  assert not is_label("1")
  assert not is_label(True)
