"""Template binding: the binder chain and its orchestration."""

from view_binding.binding.binders import (
    MasterPageBinder,
    ReachableBindingsBinder,
    ViewDescriptorBinder,
    ViewModelBinder,
)
from view_binding.binding.pipeline import BinderPipeline, default_binders
from view_binding.binding.request import BindRequest

__all__ = [
    "BindRequest",
    "BinderPipeline",
    "MasterPageBinder",
    "ReachableBindingsBinder",
    "ViewDescriptorBinder",
    "ViewModelBinder",
    "default_binders",
]
