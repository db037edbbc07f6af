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
"""The contraction loop.

The network is held as two parallel lists, `tensors` and
`network_structure`. Each step resolves the first label of the remaining
contraction order: if it sits on a single tensor that tensor is traced,
otherwise the two tensors carrying it are contracted over *all* labels they
share. The consumed entries are removed, the result is appended, and every
label eliminated by the step is dropped from the order.
"""

import logging
from typing import Any, List, Optional, Sequence
from netcon import errors
from netcon.assembler import multiply_final
from netcon.backends import pairwise
from netcon.backends.abstract_backend import AbstractBackend
from netcon.steps import ContractionStep

Tensor = Any

logger = logging.getLogger(__name__)


def get_tcon(network_structure: Sequence[Sequence[int]], label: int) -> List[int]:
  """Positions of the tensors that have `label` on one of their axes."""
  return [n for n, labels in enumerate(network_structure) if label in labels]


def get_icon(network_structure: Sequence[Sequence[int]],
             tcon: Sequence[int]) -> List[int]:
  """The labels eliminated when the tensors at positions `tcon` are combined.

  For a single tensor these are all labels it carries twice. For two
  tensors these are all labels they share.
  """
  if len(tcon) == 1:
    labels = network_structure[tcon[0]]
    seen = set()
    icon = []
    for label in labels:
      if label in seen:
        icon.append(label)
      else:
        seen.add(label)
    return icon
  labels_1, labels_2 = (network_structure[t] for t in tcon)
  icon = []
  for label in labels_1:
    if label in labels_2 and label not in icon:
      icon.append(label)
  return icon


def find_newv(network_structure: Sequence[Sequence[int]], tcon: Sequence[int],
              icon: Sequence[int]) -> List[int]:
  """Labels of the tensor formed by combining the tensors at `tcon`."""
  return [
      l for t in tcon for l in network_structure[t] if l not in icon
  ]


def renew_order(order: Sequence[int], icon: Sequence[int]) -> List[int]:
  """`order` with the eliminated labels `icon` removed."""
  return [o for o in order if o not in icon]


def _remove_entries(tensors: List[Tensor], network_structure: List[List[int]],
                    positions: Sequence[int]) -> None:
  # deleting from the back keeps the remaining positions valid
  for n in sorted(positions, reverse=True):
    del tensors[n]
    del network_structure[n]


def contract_network(tensors: Sequence[Tensor],
                     network_structure: Sequence[Sequence[int]],
                     order: Sequence[int],
                     forder: Sequence[int],
                     backend_obj: AbstractBackend,
                     steps: Optional[List[ContractionStep]] = None) -> Tensor:
  """Contract a network down to a single tensor.

  The input sequences are copied, the caller's lists are left untouched.

  Args:
    tensors: The tensors of the network.
    network_structure: One label list per tensor.
    order: The order in which the positive labels are resolved.
    forder: The order of the free labels of the result.
    backend_obj: The backend doing the numerical work.
    steps: If given, a `ContractionStep` is appended for every operation.
  Returns:
    The contracted tensor, its axes ordered as in `forder`.
  Raises:
    InconsistentNetwork: If a label of `order` is not carried by one or two
      tensors. Only reachable for networks that were not checked.
  """
  tensors = list(tensors)
  network_structure = [list(labels) for labels in network_structure]
  order = list(order)

  while len(order) > 0:
    label = order[0]
    tcon = get_tcon(network_structure, label)
    icon = get_icon(network_structure, tcon) if len(tcon) in (1, 2) else []
    if label not in icon:
      raise errors.InconsistentNetwork(
          f"contracted label {label} is carried by {len(tcon)} tensors "
          f"({tcon}) and cannot be resolved; the network is ill-formed.")
    if len(tcon) == 1:
      kind = "trace"
      t = tcon[0]
      new_tensor, _ = pairwise.trace(backend_obj, tensors[t],
                                     network_structure[t])
    else:
      kind = "contract"
      t1, t2 = tcon
      new_tensor, _ = pairwise.contract_pair(backend_obj, tensors[t1],
                                             network_structure[t1],
                                             tensors[t2],
                                             network_structure[t2])
    new_labels = find_newv(network_structure, tcon, icon)
    logger.debug("%s of tensors %s over labels %s -> labels %s", kind, tcon,
                 icon, new_labels)
    if steps is not None:
      steps.append(
          ContractionStep(kind, tuple(tcon),
                          tuple(tuple(network_structure[t]) for t in tcon),
                          tuple(icon), tuple(new_labels),
                          tuple(backend_obj.shape_tuple(new_tensor))))
    tensors.append(new_tensor)
    network_structure.append(new_labels)
    _remove_entries(tensors, network_structure, tcon)
    del new_tensor
    order = renew_order(order, icon)

  return multiply_final(tensors, network_structure, forder, backend_obj,
                        steps)
