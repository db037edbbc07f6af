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
"""Label-aware wrappers around the pairwise backend primitives.

`AbstractBackend.contract_pair` contracts every axis pair sharing a label,
so it cannot be handed a label list in which one tensor repeats a label of
its own: such a repetition marks a trace that is scheduled for a later
step. `contract_pair` below hides these repetitions behind fresh labels for
the duration of the backend call and restores them in the result, so the
trace is carried over to the new tensor and resolved once it comes up.
"""

import logging
from typing import Any, List, Sequence, Tuple
from netcon.backends.abstract_backend import AbstractBackend

Tensor = Any

logger = logging.getLogger(__name__)


def change_duplicates(labels: Sequence[int], m: int) -> Tuple[List[int], int]:
  """Replace repeated labels by fresh ones.

  The first occurrence of every value is kept; each later occurrence of an
  already-seen value is replaced by `m + 1`, `m + 2`, ...

  Args:
    labels: A label list.
    m: The largest absolute label value in use.
  Returns:
    List[int]: A new label list without repeated labels.
    int: The largest label value in use after the replacements.
  """
  seen = set()
  new_labels = []
  for label in labels:
    if label in seen:
      m += 1
      new_labels.append(m)
    else:
      seen.add(label)
      new_labels.append(label)
  return new_labels, m


def _max_abs_label(*label_lists: Sequence[int]) -> int:
  return max((abs(l) for labels in label_lists for l in labels), default=0)


def contract_pair(backend: AbstractBackend, a: Tensor, labels_a: Sequence[int],
                  b: Tensor,
                  labels_b: Sequence[int]) -> Tuple[Tensor, List[int]]:
  """Contract all labels shared by `a` and `b`.

  Labels repeated within `labels_a` or `labels_b` are left untouched and show
  up twice in the labels of the result.

  Args:
    backend: The backend doing the numerical work.
    a: A tensor.
    labels_a: The labels of `a`.
    b: A tensor.
    labels_b: The labels of `b`.
  Returns:
    Tensor: The contracted tensor.
    List[int]: Its labels; the remaining labels of `a` followed by the
      remaining labels of `b`.
  """
  m = _max_abs_label(labels_a, labels_b)
  new_labels_a, m = change_duplicates(labels_a, m)
  new_labels_b, _ = change_duplicates(labels_b, m)
  minted = {
      new: old for new, old in zip(new_labels_a + new_labels_b,
                                   list(labels_a) + list(labels_b))
      if new != old
  }
  if minted:
    logger.debug("deferring traces over labels %s",
                 sorted(set(minted.values())))
  result, implied_labels = backend.contract_pair(a, new_labels_a, b,
                                                 new_labels_b)
  return result, [minted.get(l, l) for l in implied_labels]


def trace(backend: AbstractBackend, a: Tensor,
          labels: Sequence[int]) -> Tuple[Tensor, List[int]]:
  """Trace out every label repeated within `labels`."""
  return backend.trace_self(a, labels)
