"""
Domain models — Pydantic types for constant generation.

All models are re-exported here for convenient access:

    from constgen.core.models import ConstantEntry, ScopeGroup, GeneratorSettings
"""

from constgen.core.models.constants import ConstantEntry, ExtractionResult, ScopeGroup
from constgen.core.models.settings import (
    CLASS_NAMES,
    DOMAIN_LABELS,
    DOMAINS,
    GeneratorSettings,
    OutputSettings,
)
from constgen.core.models.sources import (
    LAYER_COUNT,
    AnimatorControllerAsset,
    MixerAsset,
    SceneRef,
    SortingLayerRef,
)
from constgen.core.models.template import GeneratedFile

__all__ = [
    # sources.py
    "AnimatorControllerAsset",
    # settings.py
    "CLASS_NAMES",
    # constants.py
    "ConstantEntry",
    "DOMAINS",
    "DOMAIN_LABELS",
    "ExtractionResult",
    # template.py
    "GeneratedFile",
    "GeneratorSettings",
    "LAYER_COUNT",
    "MixerAsset",
    "OutputSettings",
    "SceneRef",
    "ScopeGroup",
    "SortingLayerRef",
]
