from dataclasses import dataclass

@dataclass(slots=True)
class Scale:
    value: float = 1.0
