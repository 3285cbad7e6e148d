"""Reading the plotted series out of the NFIB Kendo chart.

The site exposes no API for the seasonally adjusted values; they only exist in
the data source of the in-page chart widget. Depending on the indicator the
widget is registered either as a Kendo stock chart or a plain Kendo chart, so
the lookup tries each jQuery data handle in turn. Every page-internal name
lives in ``ChartLayout`` so a redesign of the page only touches this module.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Iterable, Sequence

from playwright.async_api import Page
from playwright.async_api import Error as PlaywrightError

from nfib_scraper import config
from nfib_scraper.scraper.errors import ChartNotFound
from nfib_scraper.scraper.models import IndicatorSeries, ObservationRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChartLayout:
    container: str = config.CHART_CONTAINER_SEL
    handles: Sequence[str] = config.CHART_HANDLES
    date_field: str = config.CHART_DATE_FIELD
    value_field: str = config.CHART_VALUE_FIELD

    def as_js_arg(self) -> dict:
        arg = asdict(self)
        arg["handles"] = list(self.handles)
        return arg


# Shared by both scripts: try each handle, first match wins.
_FIND_CHART_JS = """
const findChart = (layout) => {
  const $ = window.jQuery;
  if (!$) return [null, null];
  const el = $(layout.container);
  for (const handle of layout.handles) {
    const chart = el.data(handle);
    if (chart && chart.dataSource) return [handle, chart];
  }
  return [null, null];
};
"""

READY_PROBE_JS = (
    "(layout) => {"
    + _FIND_CHART_JS
    + """
  const [handle, chart] = findChart(layout);
  if (!handle) return false;
  const rows = chart.dataSource.data();
  if (!rows || rows.length === 0) return false;
  return rows[0][layout.value_field] !== undefined;
}"""
)

EXTRACT_JS = (
    "(layout) => {"
    + _FIND_CHART_JS
    + """
  const [handle, chart] = findChart(layout);
  if (!handle) return { handle: null, rows: [] };
  const rows = [];
  chart.dataSource.data().forEach((item) => {
    rows.push({ date: item[layout.date_field], value: item[layout.value_field] });
  });
  return { handle, rows };
}"""
)


def to_series(rows: Iterable[dict]) -> IndicatorSeries:
    """Map projected chart rows to records, keeping the data source order."""
    return tuple(ObservationRecord(date=row["date"], value=row.get("value")) for row in rows)


class ChartExtractor:
    def __init__(self, layout: ChartLayout | None = None) -> None:
        self.layout = layout or ChartLayout()

    async def has_fresh_data(self, page: Page) -> bool:
        """True once the chart holds rows shaped like a "show results" load."""
        try:
            return bool(await page.evaluate(READY_PROBE_JS, self.layout.as_js_arg()))
        except PlaywrightError as exc:
            # execution context is torn down while the page re-renders
            logger.debug("Readiness probe failed: %s", exc)
            return False

    async def extract(self, page: Page) -> IndicatorSeries:
        payload = await page.evaluate(EXTRACT_JS, self.layout.as_js_arg())
        handle = payload.get("handle") if payload else None
        if not handle:
            raise ChartNotFound(
                f"Chart not found at {self.layout.container} "
                f"(handles: {', '.join(self.layout.handles)})"
            )
        series = to_series(payload.get("rows") or [])
        logger.debug("Read %d rows from %s", len(series), handle)
        return series
