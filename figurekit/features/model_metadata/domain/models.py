from dataclasses import dataclass, field
from typing import List

@dataclass
class ModelMetadata:
    """
    Motion group and expression names a rig exposes, in first-seen order.
    """
    motions: List[str] = field(default_factory=list)
    expressions: List[str] = field(default_factory=list)

    def merge(self, other: "ModelMetadata") -> None:
        for name in other.motions:
            self.add_motion(name)
        for name in other.expressions:
            self.add_expression(name)

    def add_motion(self, name) -> None:
        if isinstance(name, str) and name and name not in self.motions:
            self.motions.append(name)

    def add_expression(self, name) -> None:
        if isinstance(name, str) and name and name not in self.expressions:
            self.expressions.append(name)
