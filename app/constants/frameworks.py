"""
Description:
Answering frameworks and the ordered steps each one expects.

Author: @kcaparas1630
"""
from typing import Dict, List

FRAMEWORK_STEPS: Dict[str, List[str]] = {
    "STAR": ["Situation", "Task", "Action", "Result"],
    "PARADE": ["Problem", "Action", "Result", "Analysis", "Decision", "Experience"],
    "CAR": ["Context", "Action", "Result"],
    "CIRCLE": ["Comprehend", "Identify", "Report", "Cut", "List", "Evaluate"],
}

DEFAULT_CATEGORY = "General"
DEFAULT_DIFFICULTY = "Medium"


def get_framework_steps(framework_name: str) -> List[str]:
    """Return the ordered step names for a framework, or an empty list if unknown."""
    return list(FRAMEWORK_STEPS.get(framework_name or "", []))
