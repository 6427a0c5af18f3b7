"""
Built-in plan sessions.

Each module here may define IPlanSession implementations; they are
registered under their ``name`` when plugins are discovered.
"""

from .json_plan import JsonPlan, JsonPlanSession

__all__ = ["JsonPlan", "JsonPlanSession"]
