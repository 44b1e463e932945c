"""Flight booking validation and route profitability reports."""

from .index import ReferenceIndex
from .runner import PlanningReport, PlanningRunner, evaluate_booking

__all__ = ["PlanningReport", "PlanningRunner", "ReferenceIndex", "evaluate_booking"]
