# tests/integration/test_full_pipeline.py

import importlib.util
import json
from pathlib import Path

import pytest

from crowdcred.core import ConfidencePipeline, CrowdCredConfig, calculate_confidence
from crowdcred.core.config import SerpApiConfig
from crowdcred.credibility.scorer import DEFAULT_REASON
from crowdcred.ingest.serpapi import SerpApiSource
from crowdcred.ingest.static import StaticVerificationSource
from crowdcred.normalize.schema import ReportStatus

SCRIPT_PATH = Path(__file__).resolve().parents[2] / "scripts" / "crowdcred_score.py"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ("SERPAPI_KEY", "SERPAPI_ENABLED", "SERPAPI_MOCK_MODE"):
        monkeypatch.delenv(var, raising=False)


def load_cli():
    spec = importlib.util.spec_from_file_location("crowdcred_score", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestFullPipeline:
    """Integration tests for the complete CrowdCred scoring pipeline."""

    @pytest.fixture
    def payload(self):
        """Raw submission as it arrives from the contribute form."""
        return {
            "description": "multi car pileup near central junction",
            "category": "Traffic",
            "location": json.dumps([77.5946, 12.9716]),
            "locationName": "Central Ave",
            "photoPath": "",
            "userId": "u-1001",
        }

    def test_mock_sources_end_to_end(self, payload):
        pipeline = ConfidencePipeline(source=StaticVerificationSource.demo())

        result = pipeline.score_report(payload)

        assert result.breakdown == {
            "news_verification": 25,
            "search_validation": 10,
            "location_context": 15,
            "image_authenticity": 0,
            "trending_events": 8,
            "user_reputation": 3,
            "total": 81,
        }
        assert result.score == 81
        assert pipeline.classify(result) == ReportStatus.VERIFIED
        assert result.reason.startswith("News verification: Recent news confirms incident")
        assert len(result.evidence) == 5

    def test_news_query_built_from_report(self, payload):
        source = StaticVerificationSource.demo()
        ConfidencePipeline(source=source).score_report(payload)

        queries = dict(source.calls)
        assert queries["news"] == "traffic Central Ave multi pileup near central junction"
        assert queries["places"] == "Central Ave"

    def test_unconfigured_sources_degrade_gracefully(self, payload):
        pipeline = ConfidencePipeline(config=CrowdCredConfig())
        assert isinstance(pipeline.source, SerpApiSource)

        result = pipeline.score_report(payload)

        assert result.breakdown == {
            "news_verification": 5,
            "search_validation": 5,
            "location_context": 5,
            "image_authenticity": 0,
            "trending_events": 2,
            "user_reputation": 3,
            "total": 40,
        }
        assert pipeline.classify(result) == ReportStatus.UNVERIFIED
        assert all("error" in e for e in result.evidence if e["source"] != "User History")

    def test_mock_mode_config_selects_static_source(self):
        config = CrowdCredConfig(serpapi=SerpApiConfig(mock_mode=True))
        pipeline = ConfidencePipeline(config=config)
        assert isinstance(pipeline.source, StaticVerificationSource)

    def test_explicit_config_not_overridden_by_environment(self, monkeypatch):
        monkeypatch.setenv("SERPAPI_KEY", "ambient-key")
        monkeypatch.setenv("SERPAPI_MOCK_MODE", "true")
        config = CrowdCredConfig(
            serpapi=SerpApiConfig(api_key="explicit-key", mock_mode=False)
        )

        pipeline = ConfidencePipeline(config=config)

        assert isinstance(pipeline.source, SerpApiSource)
        assert pipeline.source.api_key == "explicit-key"

    def test_malformed_payload_gets_default_result(self):
        result = calculate_confidence(
            {"description": "", "category": "Traffic", "location": "garbage"},
            source=StaticVerificationSource.demo(),
        )
        assert result.score == 25
        assert result.reason == DEFAULT_REASON
        assert result.evidence == []

    def test_photo_fingerprint_in_evidence(self, payload, tmp_path):
        photo = tmp_path / "crash.jpg"
        photo.write_bytes(b"\xff\xd8\xff" + b"\x01" * (300 * 1024))
        payload["photoPath"] = str(photo)

        result = calculate_confidence(payload, source=StaticVerificationSource.demo())

        assert result.breakdown["image_authenticity"] == 15
        image_evidence = [e for e in result.evidence if e["source"] == "Image Analysis"]
        assert len(image_evidence) == 1
        assert len(image_evidence[0]["sha256"]) == 64
        assert result.score == 96


class TestScoringScript:
    """Test the crowdcred_score.py command line entry point."""

    def test_scores_report_file(self, tmp_path):
        report_file = tmp_path / "report.json"
        report_file.write_text(
            json.dumps(
                {
                    "description": "multi car pileup near central junction",
                    "category": "Traffic",
                    "location": {"lng": 77.5946, "lat": 12.9716},
                    "locationName": "Central Ave",
                    "userId": "u-1001",
                }
            ),
            encoding="utf-8",
        )
        output_file = tmp_path / "out" / "result.json"

        load_cli().main(
            [
                "--input", str(report_file),
                "--output", str(output_file),
                "--config", str(tmp_path / "missing.yaml"),
                "--mock",
            ]
        )

        output = json.loads(output_file.read_text(encoding="utf-8"))
        assert output["status"] == "verified"
        assert output["score"] == 81
        assert output["breakdown"]["total"] == 81

    def test_missing_input_exits(self, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            load_cli().main(["--input", str(tmp_path / "nope.json"), "--mock"])
        assert exc_info.value.code == 1

    def test_non_object_input_exits(self, tmp_path):
        report_file = tmp_path / "report.json"
        report_file.write_text("[1, 2, 3]", encoding="utf-8")
        with pytest.raises(SystemExit) as exc_info:
            load_cli().main(["--input", str(report_file), "--mock"])
        assert exc_info.value.code == 1
