from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass
class PlotParams:
    values: List[float]
    labels: List[str]
    ylabel: str
    title: str
    output_path: str
    errors: Optional[List[float]] = None
    colors: List[str] = field(default_factory=list)
    figsize: Tuple[float, float] = (8.0, 4.5)
    rotation: int = 30
    annotate: bool = True
