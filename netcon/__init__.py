from netcon.ncon_interface import ncon, contract, plan
from netcon.orders import default_order, default_forder
from netcon.checks import check_indices
from netcon.steps import ContractionStep
from netcon.errors import (NetworkError, ShapeMismatch, SignViolation,
                           InvalidLabel, LabelSetMismatch, ArityViolation,
                           DimensionMismatch, InconsistentNetwork)
from netcon.backends.abstract_backend import AbstractBackend
from netcon.backends.backend_factory import get_backend
from netcon.backend_contextmanager import DefaultBackend
from netcon.backend_contextmanager import set_default_backend
from netcon.version import __version__
