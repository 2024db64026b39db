"""Capability tags derived from raw catalog metadata."""
from __future__ import annotations

from modelprices.model.entry import RawCatalogEntry

VISION = "Vision"
FUNCTION_CALLING = "Function calling"
LONG_CONTEXT = "Long context"
MULTIMODAL = "Multimodal"

LONG_CONTEXT_THRESHOLD = 100_000
_TOOL_PARAMETERS = ("tools", "function_call")


def extract_features(entry: RawCatalogEntry) -> tuple[str, ...]:
    """Return the applicable tags, always in the same order."""
    features: list[str] = []
    if "image" in entry.architecture.input_modalities:
        features.append(VISION)
    if any(p in entry.supported_parameters for p in _TOOL_PARAMETERS):
        features.append(FUNCTION_CALLING)
    if entry.context_length >= LONG_CONTEXT_THRESHOLD:
        features.append(LONG_CONTEXT)
    if entry.architecture.modality == "multimodal":
        features.append(MULTIMODAL)
    return tuple(features)
