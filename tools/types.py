from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class ToolRecord:
    id: str
    name: str
    category: str
    description: str
    url: str

    def as_dict(self) -> dict[str, str]:
        return asdict(self)
