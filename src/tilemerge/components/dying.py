from dataclasses import dataclass

@dataclass(slots=True)
class Dying:
    """Marks a merged-away tile; the entity is deleted once its shrink finishes."""
    merged_into: int
