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

default_backend = "numpy"

# `ncon` validates its input unless told otherwise. Switching this off
# trades descriptive errors for speed; malformed networks then fail inside
# the backend or silently give wrong results.
check_indices = True

# dtypes for which pairwise contractions go through `tensordot` (BLAS on
# numpy). Every other dtype is contracted with a generic `einsum`.
fast_path_dtypes = (np.float32, np.float64, np.complex64, np.complex128)
