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
"""Pre-flight validation of a labelled tensor network."""

import numbers
from typing import Any, Dict, List, Sequence, Tuple
from netcon import errors


def is_label(label: Any) -> bool:
  """Labels are plain or numpy integers; bools are not accepted."""
  return isinstance(label, numbers.Integral) and not isinstance(label, bool)


def _label_positions(
    network_structure: Sequence[Sequence[int]]
) -> Dict[int, List[Tuple[int, int]]]:
  """Map every label to its (tensor position, axis position) slots."""
  positions = {}
  for m, labels in enumerate(network_structure):
    for n, label in enumerate(labels):
      positions.setdefault(label, []).append((m, n))
  return positions


def _repeated(values: Sequence[int]) -> List[int]:
  repeated = []
  for n, value in enumerate(values):
    if value in values[:n] and value not in repeated:
      repeated.append(value)
  return repeated


def check_indices(network_structure: Sequence[Sequence[int]],
                  shapes: Sequence[Tuple[int, ...]], order: Sequence[int],
                  forder: Sequence[int]) -> bool:
  """Check that a network, a contraction order and an output order agree.

  The checks are run in a fixed sequence and the first violation raises:

  1. the number of tensors matches the number of label lists,
  2. every label list is as long as its tensor has axes,
  3. `order` holds only positive and `forder` only negative labels,
  4. every label is a nonzero integer,
  5. `order` and `forder` together hold every label of the network exactly
     once,
  6. every contracted label sits on exactly two axes of equal dimension,
  7. every free label sits on exactly one axis.

  Args:
    network_structure: One label list per tensor.
    shapes: The shapes of the tensors.
    order: The contraction order.
    forder: The order of the free labels of the result.
  Returns:
    `True` if the network is well formed.
  Raises:
    ShapeMismatch, SignViolation, InvalidLabel, LabelSetMismatch,
    ArityViolation, DimensionMismatch: see `netcon.errors`.
  """
  if len(network_structure) != len(shapes):
    raise errors.ShapeMismatch(
        f"number of tensors ({len(shapes)}) does not match the number of "
        f"label lists ({len(network_structure)}).")

  for n, shape in enumerate(shapes):
    if len(shape) != len(network_structure[n]):
      raise errors.ShapeMismatch(
          f"tensor {n} has {len(shape)} axes but {len(network_structure[n])} "
          f"labels {list(network_structure[n])}.")

  labels = [o for o in order if not is_label(o) or o <= 0]
  if len(labels) > 0:
    raise errors.SignViolation(
        f"all labels in `order` have to be positive, found {labels}")
  labels = [o for o in forder if not is_label(o) or o >= 0]
  if len(labels) > 0:
    raise errors.SignViolation(
        f"all labels in `forder` have to be negative, found {labels}")

  flat_labels = [l for sublist in network_structure for l in sublist]
  labels = [l for l in flat_labels if not is_label(l)]
  if len(labels) > 0:
    raise errors.InvalidLabel(f"labels have to be integers, found {labels}")
  if 0 in flat_labels:
    raise errors.InvalidLabel("0 is not a valid label.")

  order, forder = list(order), list(forder)
  labels = _repeated(order)
  if len(labels) > 0:
    raise errors.LabelSetMismatch(
        f"labels {labels} appear more than once in `order`.")
  labels = _repeated(forder)
  if len(labels) > 0:
    raise errors.LabelSetMismatch(
        f"labels {labels} appear more than once in `forder`.")
  labels = sorted(set(order) & set(forder))
  if len(labels) > 0:
    raise errors.LabelSetMismatch(
        f"labels {labels} appear in both `order` and `forder`.")
  missing = sorted(set(flat_labels) - set(order) - set(forder))
  unknown = sorted(set(order + forder) - set(flat_labels))
  if len(missing) > 0 or len(unknown) > 0:
    raise errors.LabelSetMismatch(
        f"`order` and `forder` do not match the labels of the network: "
        f"labels {missing} are in neither, labels {unknown} do not appear in "
        f"the network.\norder: {order}\nforder: {forder}\n"
        f"network: {[list(l) for l in network_structure]}")

  positions = _label_positions(network_structure)
  for label in order:
    slots = positions[label]
    if len(slots) != 2:
      raise errors.ArityViolation(
          f"contracted label {label} occurs {len(slots)} times instead of "
          f"twice.")
    (m0, n0), (m1, n1) = slots
    if shapes[m0][n0] != shapes[m1][n1]:
      raise errors.DimensionMismatch(
          f"for contracted label {label}, axis {n0} of tensor {m0} has "
          f"dimension {shapes[m0][n0]} but axis {n1} of tensor {m1} has "
          f"dimension {shapes[m1][n1]}.")
  for label in forder:
    slots = positions[label]
    if len(slots) != 1:
      raise errors.ArityViolation(
          f"free label {label} occurs {len(slots)} times instead of once.")
  return True
