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
from typing import (Any, Callable, List, Optional, Sequence, Tuple,
                    Union)
import numpy as np
import opt_einsum
from netcon import config
# This might seem bad, but pytype treats tf.Tensor as Any anyway, so
# we don't actually lose anything by doing this.
Tensor = Any


def _einsum_expression(input_labels: Sequence[Sequence[int]],
                       output_labels: Sequence[int]) -> str:
  """Translate integer label lists into an einsum subscript string."""
  symbols = {}
  for labels in input_labels:
    for label in labels:
      if label not in symbols:
        symbols[label] = opt_einsum.get_symbol(len(symbols))
  inputs = [''.join(symbols[l] for l in labels) for labels in input_labels]
  output = ''.join(symbols[l] for l in output_labels)
  return ','.join(inputs) + '->' + output


class AbstractBackend:
  """Numeric collaborator of the contraction scheduler.

  Concrete backends implement a handful of low-level primitives
  (`tensordot`, `transpose`, `reshape`, `trace`, ...). The label-aware
  operations used by the scheduler (`contract_pair`, `trace_self`,
  `outer_product_permute` and `copy_permute`) are built on top of these and
  normally need no overriding.
  """

  def __init__(self) -> None:
    self.name = 'abstract backend'
    self.fast_path_dtypes = {np.dtype(d) for d in config.fast_path_dtypes}

  def tensordot(self, a: Tensor, b: Tensor,
                axes: Union[int, Sequence[Sequence[int]]]) -> Tensor:
    """Do a tensordot of tensors `a` and `b` over the given axes.

    Args:
      a: A tensor.
      b: Another tensor.
      axes: Two lists of integers. These values are the contraction
        axes.
    """
    raise NotImplementedError(
        "Backend '{}' has not implemented tensordot.".format(self.name))

  # We use `Tensor` for the shape type here since the shape could
  # be a tensor.
  def reshape(self, tensor: Tensor, shape: Sequence[Tensor]) -> Tensor:
    """Reshape tensor to the given shape.

    Args:
      tensor: A tensor.
    Returns:
      The reshaped tensor.
    """
    raise NotImplementedError(
        "Backend '{}' has not implemented reshape.".format(self.name))

  def transpose(self,
                tensor: Tensor,
                perm: Optional[Sequence[int]] = None) -> Tensor:
    """Transpose a tensor according to a given permutation. By default
    the axes are reversed.
    Args:
      tensor: A tensor.
      perm: The permutation of the axes.
    Returns:
      The transposed tensor
    """
    raise NotImplementedError(
        "Backend '{}' has not implemented transpose.".format(self.name))

  def shape_tuple(self, tensor: Tensor) -> Tuple[Optional[int], ...]:
    """Get the shape of a tensor as a tuple of integers.

    Args:
      tensor: A tensor.

    Returns:
      The shape of the input tensor returned as a tuple of ints.
    """
    raise NotImplementedError(
        "Backend '{}' has not implemented shape_tuple.".format(self.name))

  def convert_to_tensor(self, tensor: Tensor) -> Tensor:
    """Convert a np.array or a tensor to a tensor type for the backend."""
    raise NotImplementedError(
        "Backend '{}' has not implemented convert_to_tensor.".format(self.name))

  def outer_product(self, tensor1: Tensor, tensor2: Tensor) -> Tensor:
    """Calculate the outer product of the two given tensors."""
    raise NotImplementedError(
        "Backend '{}' has not implemented outer_product.".format(self.name))

  def einsum(self,
             expression: str,
             *tensors: Tensor,
             optimize: bool = True) -> Tensor:
    """Calculate sum of products of tensors according to expression."""
    raise NotImplementedError("Backend '{}' has not implemented einsum.".format(
        self.name))

  def trace(self,
            tensor: Tensor,
            offset: int = 0,
            axis1: int = -2,
            axis2: int = -1) -> Tensor:
    """Return summed entries along diagonals.

    If tensor is 2-D, the sum is over the
    diagonal of tensor with the given offset,
    i.e., the collection of elements of the form a[i, i+offset].
    If a has more than two dimensions, then the axes specified by
    axis1 and axis2 are used to determine the 2-D sub-array whose diagonal is
    summed.

    Args:
      tensor: A tensor.
      offset: Offset of the diagonal from the main diagonal.
      axis1, axis2: Axis to be used as the first/second axis of the 2D
                    sub-arrays from which the diagonals should be taken.
                    Defaults to second-last/last axis.
    Returns:
      array_of_diagonals: The batched summed diagonals.
    """
    raise NotImplementedError("Backend '{}' has not implemented trace.".format(
        self.name))

  def copy(self, tensor: Tensor) -> Tensor:
    """Return a tensor that shares no memory with `tensor`."""
    raise NotImplementedError("Backend '{}' has not implemented copy.".format(
        self.name))

  def jit(self, fun: Callable, *args: Any, **kwargs: Any) -> Callable:
    """
    Return a jitted or graph-compiled version of `fun`
    for JAX backend. For all other backends returns `fun`.
    Args:
      fun: Callable
      args: Arguments to `fun`.
      kwargs: Keyword arguments to `fun`.
    Returns:
      Callable: jitted/graph-compiled version of `fun`, or just `fun`.
    """
    raise NotImplementedError("Backend '{}' has not implemented `jit`.".format(
        self.name))

  def dtype(self, tensor: Tensor) -> Any:
    """The element type of `tensor`, in the backend's own dtype flavour."""
    return tensor.dtype

  def numpy_dtype(self, dtype: Any) -> np.dtype:
    """Map a backend dtype to a `np.dtype`.

    Raises:
      TypeError: If `dtype` has no numpy counterpart.
    """
    return np.dtype(dtype)

  def supports_fast_path(self, dtype: Any) -> bool:
    """Whether tensors of `dtype` may take the `tensordot` fast path.

    The answer is looked up in `self.fast_path_dtypes`, which can be
    extended with `register_fast_path_dtype`. Dtypes without a numpy
    counterpart never take the fast path.
    """
    try:
      return self.numpy_dtype(dtype) in self.fast_path_dtypes
    except TypeError:
      return False

  def register_fast_path_dtype(self, dtype: Any) -> None:
    self.fast_path_dtypes.add(self.numpy_dtype(dtype))

  def contract_pair(self, a: Tensor, labels_a: Sequence[int], b: Tensor,
                    labels_b: Sequence[int]) -> Tuple[Tensor, List[int]]:
    """Contract every pair of axes of `a` and `b` sharing a label.

    Neither label list may contain a label twice. The axes of the result are
    the remaining axes of `a` followed by the remaining axes of `b`.

    Args:
      a: A tensor.
      labels_a: The labels of the axes of `a`.
      b: A tensor.
      labels_b: The labels of the axes of `b`.
    Returns:
      Tensor: The contracted tensor.
      List[int]: The labels of the result.
    """
    labels_a, labels_b = list(labels_a), list(labels_b)
    common_labels = [l for l in labels_a if l in labels_b]
    axes_a = tuple(labels_a.index(l) for l in common_labels)
    axes_b = tuple(labels_b.index(l) for l in common_labels)
    new_labels = [l for l in labels_a if l not in common_labels
                 ] + [l for l in labels_b if l not in common_labels]
    if (self.supports_fast_path(self.dtype(a)) and
        self.supports_fast_path(self.dtype(b))):
      result = self.tensordot(a, b, axes=(axes_a, axes_b))
    else:
      expression = _einsum_expression([labels_a, labels_b], new_labels)
      result = self.einsum(expression, a, b, optimize=False)
    return result, new_labels

  def trace_self(self, tensor: Tensor,
                 labels: Sequence[int]) -> Tuple[Tensor, List[int]]:
    """Trace out every pair of axes of `tensor` sharing a label.

    Args:
      tensor: A tensor.
      labels: The labels of the axes of `tensor`.
    Returns:
      Tensor: The result of the tracing.
      List[int]: The labels of the remaining axes, in their original order.
    """
    labels = list(labels)
    second_pos = [n for n, l in enumerate(labels) if l in labels[:n]]
    if len(second_pos) == 0:
      return tensor, labels
    first_pos = [labels.index(labels[n]) for n in second_pos]
    free_pos = [
        n for n in range(len(labels)) if n not in first_pos + second_pos
    ]
    shape = self.shape_tuple(tensor)
    traced_dimension = int(np.prod([shape[n] for n in first_pos]))
    temp_shape = tuple([shape[n] for n in free_pos] +
                       [traced_dimension, traced_dimension])
    result = self.trace(
        self.reshape(
            self.transpose(tensor, tuple(free_pos + first_pos + second_pos)),
            temp_shape))
    return result, [labels[n] for n in free_pos]

  def outer_product_permute(self, a: Tensor, labels_a: Sequence[int],
                            b: Tensor, labels_b: Sequence[int],
                            target: Sequence[int]) -> Tensor:
    """Outer product of `a` and `b`, with axes arranged as in `target`.

    `labels_a` and `labels_b` must be disjoint and `target` must be a
    permutation of their union.
    """
    labels = list(labels_a) + list(labels_b)
    result = self.outer_product(a, b)
    perm = tuple(labels.index(l) for l in target)
    if perm == tuple(range(len(labels))):
      return result
    return self.transpose(result, perm)

  def copy_permute(self, tensor: Tensor, labels: Sequence[int],
                   target: Sequence[int]) -> Tensor:
    """Copy of `tensor` with its axes arranged as in `target`."""
    labels = list(labels)
    perm = tuple(labels.index(l) for l in target)
    if perm == tuple(range(len(labels))):
      return self.copy(tensor)
    return self.copy(self.transpose(tensor, perm))
