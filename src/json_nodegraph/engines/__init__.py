"""Classification, selection and repair engines used by the decoder."""

from .array_classifier import ArrayClassifier
from .subgraph_selector import SubgraphSelector
from .repair_stage import RepairStage

__all__ = ["ArrayClassifier", "SubgraphSelector", "RepairStage"]
