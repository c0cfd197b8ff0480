from dataclasses import dataclass, asdict


@dataclass
class Category:
    id: str
    name: str
    color: str          # one of COLOR_PALETTE
    order: int = 0

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, raw: dict) -> "Category":
        return cls(
            id=str(raw["id"]),
            name=str(raw["name"]),
            color=str(raw.get("color", "")),
            order=int(raw.get("order", 0)),
        )
