"""Functional tests for the HTTP API with a fake scrape service."""

from __future__ import annotations

import pytest

from nfib_scraper import config
from nfib_scraper.api import create_app
from nfib_scraper.scraper.errors import ReadinessTimeout, ScrapeFailed
from nfib_scraper.scraper.models import ObservationRecord, ScrapeFailure, ScrapeResult
from nfib_scraper.scraper.series import ALL_MONTHS


class FakeScrapeService:
    def __init__(self, series=(), fail=False):
        self.series = tuple(series)
        self.fail = fail
        self.calls = []

    def scrape(self, code, months):
        self.calls.append(("scrape", code, months))
        if self.fail:
            raise ScrapeFailed(code, ReadinessTimeout(code, 90_000))
        return ScrapeResult(indicator=code, data=self.series)

    def scrape_many(self, codes, months):
        self.calls.append(("scrape_many", list(codes), months))
        results = {}
        for code in codes:
            if code == "bad":
                results[code] = ScrapeFailure(code, "Failed to scrape NFIB data: boom", "ChartNotFound")
            else:
                results[code] = ScrapeResult(indicator=code, data=self.series[-months:])
        return results


@pytest.fixture
def service(sample_series):
    return FakeScrapeService(sample_series)


@pytest.fixture
def client(service):
    app = create_app("testing", scrape_service=service)
    return app.test_client()


@pytest.mark.unit
class TestScrapeEndpoint:
    def test_missing_indicator(self, client) -> None:
        resp = client.get("/scrape")
        assert resp.status_code == 400
        body = resp.get_json()
        assert body == {
            "success": False,
            "error": "Missing required parameter: indicator",
            "indicator": None,
            "date": None,
            "value": None,
        }

    def test_whole_series(self, client, service) -> None:
        resp = client.get("/scrape?indicator=expand_good")
        assert resp.status_code == 200
        body = resp.get_json()
        assert body["success"] is True
        assert body["indicator"] == "expand_good"
        assert body["count"] == 4
        assert body["data"][-1] == {"date": "10/1/2025", "value": 98.2}
        assert "scraped_at" in body
        assert service.calls == [("scrape", "expand_good", ALL_MONTHS)]

    def test_known_date(self, client) -> None:
        resp = client.get("/scrape?indicator=expand_good&date=10/1/2025")
        assert resp.status_code == 200
        body = resp.get_json()
        assert body["success"] is True
        assert body["date"] == "10/1/2025"
        assert body["value"] == 98.2

    def test_absent_date(self, client) -> None:
        resp = client.get("/scrape?indicator=expand_good&date=1/1/2030")
        assert resp.status_code == 404
        body = resp.get_json()
        assert body["success"] is False
        assert body["value"] is None
        assert body["date"] == "1/1/2030"
        assert body["error"] == "No data found for date: 1/1/2030"

    def test_scrape_failure_is_structured(self, sample_series) -> None:
        app = create_app("testing", scrape_service=FakeScrapeService(sample_series, fail=True))
        resp = app.test_client().get("/scrape?indicator=OPT_INDEX&date=10/1/2025")
        assert resp.status_code == 500
        body = resp.get_json()
        assert body["success"] is False
        assert body["indicator"] == "OPT_INDEX"
        assert body["date"] == "10/1/2025"
        assert body["value"] is None
        assert body["error_type"] == "ReadinessTimeout"
        assert body["error"].startswith("Failed to scrape NFIB data: ")
        assert "scraped_at" in body

    def test_unexpected_error_keeps_request_context(self) -> None:
        class Broken:
            def scrape(self, code, months):
                raise RuntimeError("kaboom")

        app = create_app("testing", scrape_service=Broken())
        resp = app.test_client().get("/scrape?indicator=x&date=10/1/2025")
        assert resp.status_code == 500
        body = resp.get_json()
        assert body["success"] is False
        assert body["indicator"] == "x"
        assert body["date"] == "10/1/2025"
        assert body["value"] is None
        assert body["error"] == "kaboom"
        assert body["error_type"] == "RuntimeError"
        assert "scraped_at" in body

    def test_unexpected_batch_error_still_json(self) -> None:
        class Broken:
            def scrape_many(self, codes, months):
                raise RuntimeError("kaboom")

        resp = create_app("testing", scrape_service=Broken()).test_client().post(
            "/scrape-multiple", json={}
        )
        assert resp.status_code == 500
        assert resp.get_json() == {"success": False, "code": "internal_error", "error": "kaboom"}


@pytest.mark.unit
class TestScrapeMultipleEndpoint:
    def test_defaults(self, client, service) -> None:
        resp = client.post("/scrape-multiple", json={})
        assert resp.status_code == 200
        assert list(resp.get_json()) == ["OPT_INDEX"]
        assert service.calls == [("scrape_many", ["OPT_INDEX"], config.DEFAULT_MONTHS)]

    def test_zero_months_falls_back_to_default(self, client, service) -> None:
        client.post("/scrape-multiple", json={"indicators": ["expand_good"], "months": 0})
        assert service.calls[-1] == ("scrape_many", ["expand_good"], 12)

    def test_partial_failure_keeps_order(self, client) -> None:
        resp = client.post(
            "/scrape-multiple", json={"indicators": ["expand_good", "bad", "OPT_INDEX"], "months": 2}
        )
        assert resp.status_code == 200
        body = resp.get_json()
        assert list(body) == ["expand_good", "bad", "OPT_INDEX"]
        assert body["bad"] == {"error": "Failed to scrape NFIB data: boom", "error_type": "ChartNotFound"}
        assert len(body["expand_good"]["data"]) == 2
        assert body["OPT_INDEX"]["indicator"] == "OPT_INDEX"

    def test_invalid_body(self, client) -> None:
        resp = client.post("/scrape-multiple", json={"indicators": "OPT_INDEX", "months": -3})
        assert resp.status_code == 400
        assert resp.get_json()["success"] is False


@pytest.mark.unit
class TestStaticEndpoints:
    def test_indicators(self, client) -> None:
        body = client.get("/indicators").get_json()
        assert len(body["indicators"]) == 21
        assert body["indicators"][0] == {"code": "OPT_INDEX", "name": "Small Business Optimism Index"}
        assert {"code": "un_index", "name": "Uncertainty Index"} in body["indicators"]

    def test_health(self, client) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.get_json()["status"] == "ok"

    def test_debug_reports_cache(self, client, monkeypatch, tmp_path) -> None:
        chrome = tmp_path / "chromium-1091" / "chrome-linux" / "chrome"
        chrome.parent.mkdir(parents=True)
        chrome.write_text("")
        chrome.chmod(0o755)
        monkeypatch.setattr(config, "BROWSER_CACHE_DIR", tmp_path)
        monkeypatch.setattr(config, "IS_HOSTED", True)

        body = client.get("/debug").get_json()

        assert body["environment"] == "Render"
        assert body["chromePath"] == str(chrome)
        assert body["cacheDirectory"] == ["chromium-1091"]

    def test_unknown_route(self, client) -> None:
        resp = client.get("/nope")
        assert resp.status_code == 404
        assert resp.get_json()["success"] is False
