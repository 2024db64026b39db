from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from modelprices.errors import ParseError


@dataclass(frozen=True)
class Architecture:
    modality: str = ""
    input_modalities: tuple[str, ...] = ()
    output_modalities: tuple[str, ...] = ()
    tokenizer: str = ""


@dataclass(frozen=True)
class Pricing:
    """Per-token rates as decimal strings, exactly as the upstream sends them."""

    prompt: str
    completion: str
    image: str | None = None
    input_cache_read: str | None = None
    input_cache_write: str | None = None


@dataclass(frozen=True)
class RawCatalogEntry:
    id: str
    name: str
    context_length: int
    architecture: Architecture
    pricing: Pricing
    description: str = ""
    supported_parameters: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> RawCatalogEntry:
        """Build an entry from one element of the catalog's ``data`` list.

        Raises :class:`ParseError` when a required field is missing or has
        the wrong type.
        """
        if not isinstance(data, dict):
            raise ParseError(f"Catalog entry is not an object: {data!r}")
        model_id = _require(data, "id", str, "<unknown>")
        arch = _require(data, "architecture", dict, model_id)
        pricing = _require(data, "pricing", dict, model_id)
        context_length = _require(data, "context_length", int, model_id)
        if isinstance(context_length, bool):
            raise ParseError(f"Catalog entry {model_id}: 'context_length' must be int")

        return cls(
            id=model_id,
            name=_require(data, "name", str, model_id),
            context_length=context_length,
            architecture=Architecture(
                modality=arch.get("modality") or "",
                input_modalities=tuple(arch.get("input_modalities") or ()),
                output_modalities=tuple(arch.get("output_modalities") or ()),
                tokenizer=arch.get("tokenizer") or "",
            ),
            pricing=Pricing(
                prompt=_require(pricing, "prompt", str, model_id),
                completion=_require(pricing, "completion", str, model_id),
                image=pricing.get("image"),
                input_cache_read=pricing.get("input_cache_read"),
                input_cache_write=pricing.get("input_cache_write"),
            ),
            description=data.get("description") or "",
            supported_parameters=tuple(data.get("supported_parameters") or ()),
        )


def _require(data: dict[str, Any], key: str, kind: type, model_id: str) -> Any:
    if key not in data or data[key] is None:
        raise ParseError(f"Catalog entry {model_id}: missing '{key}'")
    value = data[key]
    if not isinstance(value, kind):
        raise ParseError(
            f"Catalog entry {model_id}: '{key}' must be {kind.__name__}"
        )
    return value
