from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DisplayRecord:
    """One row of the pricing table.

    Cost and size fields are already formatted labels (``"$0.5"``, ``"128K"``
    or ``"N/A"``). ``keep`` is UI-only state and never leaves the process.
    """

    id: str
    name: str
    url: str
    provider: str
    context_window: str
    input_cost: str
    output_cost: str
    image_cost: str = "N/A"
    cache_read_cost: str = "N/A"
    cache_write_cost: str = "N/A"
    features: tuple[str, ...] = ()
    modalities: tuple[str, ...] = ()
    description: str = ""
    keep: bool = False

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "url": self.url,
            "provider": self.provider,
            "context_window": self.context_window,
            "input_cost": self.input_cost,
            "output_cost": self.output_cost,
            "image_cost": self.image_cost,
            "cache_read_cost": self.cache_read_cost,
            "cache_write_cost": self.cache_write_cost,
            "features": list(self.features),
            "modalities": list(self.modalities),
            "description": self.description,
            "keep": self.keep,
        }
