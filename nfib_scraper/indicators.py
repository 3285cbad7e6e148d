"""NFIB Small Business Economic Trends indicator codes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, Sequence


@dataclass(frozen=True)
class Indicator:
    code: str
    name: str


INDICATORS: Sequence[Indicator] = (
    Indicator("OPT_INDEX", "Small Business Optimism Index"),
    Indicator("emp_count_change_expect", "Plans to Increase Employment"),
    Indicator("cap_ex_expect", "Plans to Make Capital Outlays"),
    Indicator("inventory_expect", "Plans to Increase Inventories"),
    Indicator("bus_cond_expect", "Expect Economy to Improve"),
    Indicator("sales_expect", "Expect Real Sales Higher"),
    Indicator("inventory_current", "Current Inventory"),
    Indicator("job_opening_unfilled", "Current Job Openings"),
    Indicator("credit_access_expect", "Expected Credit Conditions"),
    Indicator("expand_good", "Now a Good Time to Expand"),
    Indicator("earn_change", "Earnings Trends"),
    Indicator("sales_change", "Actual Sales Changes"),
    Indicator("price_change", "Actual Price Changes"),
    Indicator("price_change_plan", "Price Plans"),
    Indicator("emp_count_change", "Actual Employment Changes"),
    Indicator("emp_comp_change", "Actual Compensation Changes"),
    Indicator("emp_comp_change_expect", "Compensation Plans"),
    Indicator("rate_change", "Relative Interest Rate Paid by Regular Borrowers"),
    Indicator("inventory_change", "Actual Inventory Changes"),
    Indicator("qualified_appl", "Qualified Applicants for Job Openings"),
    Indicator("un_index", "Uncertainty Index"),
)

# Aggregate indices recompute across every component series and load slowest.
SLOW_INDICATORS: FrozenSet[str] = frozenset({"OPT_INDEX", "un_index"})

INDICATOR_NAMES: Dict[str, str] = {indicator.code: indicator.name for indicator in INDICATORS}


def as_dicts() -> list[dict]:
    return [{"code": indicator.code, "name": indicator.name} for indicator in INDICATORS]
