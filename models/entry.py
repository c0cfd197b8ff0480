from dataclasses import dataclass


@dataclass(frozen=True)
class Entry:
    id: str
    category_id: str    # weak reference; the category may no longer exist
    timestamp: int      # epoch milliseconds

    def to_dict(self) -> dict:
        # Stored field names match the persisted layout
        return {"id": self.id, "categoryId": self.category_id, "timestamp": self.timestamp}

    @classmethod
    def from_dict(cls, raw: dict) -> "Entry":
        return cls(
            id=str(raw["id"]),
            category_id=str(raw["categoryId"]),
            timestamp=int(raw["timestamp"]),
        )
