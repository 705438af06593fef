"""Optional template features and their removal logic.

Modules:
    registry: Static table of optional features
    cleanup_rules: Cross-feature edits of shared files
    resolution: Selection to removal plan
"""

from .registry import DEFAULT_REGISTRY, FeatureDescriptor, FeatureRegistry, build_registry
from .resolution import ResolutionResult, resolve

__all__ = [
    "DEFAULT_REGISTRY",
    "FeatureDescriptor",
    "FeatureRegistry",
    "ResolutionResult",
    "build_registry",
    "resolve",
]
