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
"""NCON interface: contraction of labelled tensor networks."""

import logging
from typing import Any, Sequence, List, Optional, Union, Text, Tuple
import numpy as np
from netcon import checks
from netcon import config
from netcon import errors
from netcon.backend_contextmanager import get_default_backend
from netcon.backends import backend_factory
from netcon.backends.abstract_backend import AbstractBackend
from netcon.orders import default_order, default_forder
from netcon.scheduler import contract_network
from netcon.steps import ContractionStep
Tensor = Any

logger = logging.getLogger(__name__)

_CACHED_JITTED_NCONS = {}


def _is_label_list(obj: Any) -> bool:
  return isinstance(obj, (list, tuple)) or getattr(obj, "ndim", None) == 1


def _normalize_network_structure(
    network_structure: Any, num_tensors: int) -> List[List[Any]]:
  """Bring `network_structure` into the form of a list of label lists.

  A single flat label list (or a 1d integer array) is wrapped into a list.
  Integer labels are turned into python ints, anything else is kept as is
  so that the network check can report it.
  """
  if getattr(network_structure, "ndim", None) == 1:
    network_structure = [network_structure]
  network_structure = list(network_structure)
  if len(network_structure) == 0:
    # the labels of a single scalar
    network_structure = [[]] if num_tensors == 1 else []
  elif not _is_label_list(network_structure[0]):
    network_structure = [network_structure]
  return [[int(l) if checks.is_label(l) else l
           for l in labels]
          for labels in network_structure]


def _normalize_tensors(tensors: Any) -> List[Tensor]:
  if hasattr(tensors, "shape"):
    tensors = [tensors]
  tensors = list(tensors)
  if len(tensors) == 0:
    raise errors.ShapeMismatch("ncon needs at least one tensor.")
  return tensors


def _prepare(network_structure: List[List[Any]], shapes: List[Tuple[int, ...]],
             order: Optional[Sequence], forder: Optional[Sequence],
             check_indices: Optional[bool]) -> Tuple[List, List]:
  """Fill in default orders and check the network."""
  if order is not None and len(order) == 0:  #allow empty list as input
    order = None
  if forder is not None and len(forder) == 0:  #allow empty list as input
    forder = None
  if check_indices is None:
    check_indices = config.check_indices
  # labels the checks will reject must not break the default orders
  valid_structure = [[l for l in labels if checks.is_label(l)]
                     for labels in network_structure]
  order = default_order(valid_structure) if order is None else list(order)
  forder = default_forder(valid_structure) if forder is None else list(forder)
  if check_indices:
    checks.check_indices(network_structure, shapes, order, forder)
  order = [int(o) if checks.is_label(o) else o for o in order]
  forder = [int(o) if checks.is_label(o) else o for o in forder]
  return order, forder


def _jittable_ncon(tensors: List[Tensor], flat_labels: Tuple[int],
                   sizes: Tuple[int], order: Tuple[int],
                   forder: Tuple[int], backend_obj: AbstractBackend) -> Tensor:
  """
  Jittable Ncon function. Performs the contraction of `tensors`.
  Args:
    tensors: List of tensors.
    flat_labels: A Tuple of integers.
    sizes: Tuple of int used to reconstruct `network_structure` from
      `flat_labels`.
    order: Order of the contraction.
    forder: Order of the final axis order.
    backend_obj: A backend object.

  Returns:
    The final tensor after contraction.
  """
  # some jax-juggling to avoid retracing ...
  slices = np.append(0, np.cumsum(sizes)).astype(int)
  network_structure = [
      list(flat_labels[slices[n]:slices[n + 1]])
      for n in range(len(slices) - 1)
  ]
  return contract_network(tensors, network_structure, list(order),
                          list(forder), backend_obj)


def ncon(tensors: Union[Tensor, Sequence[Tensor]],
         network_structure: Union[Sequence[int], Sequence[Sequence[int]]],
         order: Optional[Sequence[int]] = None,
         forder: Optional[Sequence[int]] = None,
         check_indices: Optional[bool] = None,
         backend: Optional[Union[Text, AbstractBackend]] = None) -> Tensor:
  r"""Contracts a list of tensors according to a tensor network
    given in ncon notation.

    The network is provided as a list of lists, one for each
    tensor, specifying the labels for the axes of that tensor.
    Positive labels are contracted, negative labels remain open and
    become the axes of the result. `0` is not a valid label.

    If `order = None`, positive labels are resolved in ascending order.
    Whenever a label shared by two tensors comes up, all labels shared
    by these two tensors are contracted at once, even if some of them only
    appear later in `order`. A label carried twice by the same tensor is
    traced out.

    If `forder = None`, the axes of the result are ordered -1, -2, -3, ...

    For example, matrix multiplication:

    .. code-block:: python

      A = np.array([[1.0, 2.0], [3.0, 4.0]])
      B = np.array([[1.0, 1.0], [0.0, 1.0]])
      ncon([A,B], [(-1, 1), (1, -2)])

    Matrix trace:

    .. code-block:: python

      A = np.array([[1.0, 2.0], [3.0, 4.0]])
      ncon(A, [1, 1]) # 5.0

    Args:
      tensors: List of backend-tensors, or a single tensor.
      network_structure: List of label lists, or a single label list.
      order: List of positive labels specifying the contraction order.
      forder: List of negative labels specifying the output order.
      check_indices: If `True` check the network before contracting it.
        Defaults to `netcon.config.check_indices`.
      backend: String or backend object specifying the backend to use.
        Defaults to `netcon.backend_contextmanager.get_default_backend`.

    Returns:
      The result of the contraction.

    Raises:
      ShapeMismatch, SignViolation, InvalidLabel, LabelSetMismatch,
      ArityViolation, DimensionMismatch: If the network is checked and
        found to be ill-formed. All of these are `ValueError`s.
    """
  if backend is None:
    backend = get_default_backend()
  backend_obj = backend_factory.get_backend(backend)

  tensors = _normalize_tensors(tensors)
  network_structure = _normalize_network_structure(network_structure,
                                                   len(tensors))
  tensors = [backend_obj.convert_to_tensor(t) for t in tensors]
  order, forder = _prepare(network_structure,
                           [tuple(backend_obj.shape_tuple(t)) for t in tensors],
                           order, forder, check_indices)
  logger.debug("contracting %d tensors with the %s backend, order=%s, "
               "forder=%s", len(tensors), backend_obj.name, order, forder)

  if backend_obj not in _CACHED_JITTED_NCONS:
    _CACHED_JITTED_NCONS[backend_obj] = backend_obj.jit(
        _jittable_ncon, static_argnums=(1, 2, 3, 4, 5))
  flat_labels = tuple(l for sublist in network_structure for l in sublist)
  sizes = tuple(len(l) for l in network_structure)
  return _CACHED_JITTED_NCONS[backend_obj](tensors, flat_labels, sizes,
                                           tuple(order), tuple(forder),
                                           backend_obj)


contract = ncon


def _is_shape(obj: Any) -> bool:
  return isinstance(obj, (tuple, list)) and len(obj) > 0 and all(
      checks.is_label(d) for d in obj)


def plan(tensors: Union[Tensor, Tuple[int, ...], Sequence[Any]],
         network_structure: Union[Sequence[int], Sequence[Sequence[int]]],
         order: Optional[Sequence[int]] = None,
         forder: Optional[Sequence[int]] = None,
         check_indices: Optional[bool] = None) -> List[ContractionStep]:
  """Work out the operations `ncon` would perform, without doing them.

  The network is contracted with the shell backend, which only tracks
  shapes. `tensors` may hold real tensors, shape tuples or a mix of both;
  a single tensor or a single shape tuple is accepted as well.

  Args:
    tensors: Tensors or shapes of the network.
    network_structure: List of label lists, or a single label list.
    order: As in `ncon`.
    forder: As in `ncon`.
    check_indices: As in `ncon`.
  Returns:
    The `ContractionStep`s in the order they would be executed.
  """
  if _is_shape(tensors):
    tensors = [tuple(tensors)]
  tensors = _normalize_tensors(tensors)
  network_structure = _normalize_network_structure(network_structure,
                                                   len(tensors))
  backend_obj = backend_factory.get_backend("shell")
  tensors = [backend_obj.convert_to_tensor(t) for t in tensors]
  order, forder = _prepare(network_structure,
                           [backend_obj.shape_tuple(t) for t in tensors],
                           order, forder, check_indices)
  steps = []
  contract_network(tensors, network_structure, order, forder, backend_obj,
                   steps)
  return steps
