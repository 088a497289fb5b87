from pod_generator.services.assignment_engine import generate
from pod_generator.services.pod_reporter import report_pod, report_result
from pod_generator.services.pod_size_planner import plan_pod_sizes
from pod_generator.services.roster import Roster, RosterEntry, build_roster

__all__ = [
    "Roster",
    "RosterEntry",
    "build_roster",
    "generate",
    "plan_pod_sizes",
    "report_pod",
    "report_result",
]
