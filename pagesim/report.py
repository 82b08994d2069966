from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence

from .simulator import SimulationResult


@dataclass
class ReportConfig:
    references: Sequence[int]
    capacities: Sequence[int]
    policies: Sequence[str]
    trace_capacity: Optional[int] = None


class ReportBuilder:
    """generate trial and summary tables for simulation results"""

    def __init__(self, config: ReportConfig):
        self.config = config

    def _build_table(self, headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
        if not rows:
            return "(No data)"
        widths = [
            max(len(str(headers[i])), *(len(str(row[i])) for row in rows)) for i in range(len(headers))
        ]

        def _format_row(row: Sequence[str]) -> str:
            cells = [str(row[0]).ljust(widths[0])]
            cells.extend(str(row[i]).rjust(widths[i]) for i in range(1, len(headers)))
            return "| " + " | ".join(cells) + " |"

        header_line = _format_row(headers)
        separator = "|-" + "-|-".join("-" * widths[i] for i in range(len(headers))) + "-|"
        body_lines = [_format_row(row) for row in rows]
        return "\n".join([header_line, separator, *body_lines])

    def build_trial_table(self, result: SimulationResult) -> str:
        rows = [
            (
                f"Trial {step.index}",
                str(step.page),
                step.result.describe(),
                ", ".join(str(page) for page in step.resident),
            )
            for step in result.steps
        ]
        table = self._build_table(("", "New Page", "Page Replaced", "Current Page List"), rows)
        return f"Data Set: {result.policy}, RSS = {result.capacity}\n{table}"

    def build_summary_table(self, results: Iterable[SimulationResult]) -> str:
        by_capacity: Dict[int, Dict[str, SimulationResult]] = {}
        policies: List[str] = []
        for result in results:
            by_capacity.setdefault(result.capacity, {})[result.policy] = result
            if result.policy not in policies:
                policies.append(result.policy)

        headers = ["Resident Set Size"]
        for policy in policies:
            headers.append(f"# Faults using {policy}")
            headers.append(f"{policy} Page Fault Frequency")

        rows = []
        for capacity, row_results in by_capacity.items():
            row = [str(capacity)]
            for policy in policies:
                result = row_results.get(policy)
                if result is None:
                    row.extend(["-", "-"])
                else:
                    row.extend([str(result.faults), f"{result.fault_ratio:.6f}"])
            rows.append(row)
        return self._build_table(headers, rows)

    def build_report(self, results: Iterable[SimulationResult]) -> str:
        result_list = list(results)
        header = [
            "[Simulation Configuration]",
            f"- References: {len(self.config.references)}",
            f"- Resident Set Sizes: {', '.join(str(c) for c in self.config.capacities)}",
            f"- Policies: {', '.join(self.config.policies)}",
            "",
        ]

        trials = [
            self.build_trial_table(r) for r in result_list if r.capacity == self.config.trace_capacity
        ]
        summary = [
            "",
            "[Summary]",
            self.build_summary_table(result_list),
        ]
        return "\n".join(header + ["\n\n".join(trials)] + summary)
