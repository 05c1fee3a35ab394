import time

import pytest
from prometheus_client import REGISTRY

from quickmed.engines.analysis_kinds import (
    BLOOD_PROMPT, BLOOD_SCHEMA, URINE_PREGNANCY_PROMPT, URINE_STANDARD_PROMPT
)
from quickmed.engines.errors import AnalysisProviderError, CredentialMissingError
from quickmed.schemas.internal_models import UrineMode, UrineSeverity, SkinSeverity
from quickmed.services.audit_logger import AuditLogger


def fallback_count(kind, reason):
    return REGISTRY.get_sample_value(
        "quickmed_analysis_fallbacks_total", {"kind": kind, "reason": reason}
    ) or 0.0


def urine_item(**overrides):
    item = {
        "parameter": "Glucose",
        "finding": "Negative",
        "interpretation": "No sugar in urine.",
        "severity": "Normal",
        "advice": "No action needed."
    }
    item.update(overrides)
    return item


class TestProviderRequest:
    def test_single_call_with_image_prompt_schema_and_temperature(self, make_gateway, blood_reply):
        gateway, client = make_gateway(reply=blood_reply)
        gateway.analyze_blood_slide(b"\x89PNG-bytes", "image/png")

        assert len(client.models.calls) == 1
        call = client.models.calls[0]
        image_part, prompt = call["contents"]
        assert image_part.inline_data.data == b"\x89PNG-bytes"
        assert image_part.inline_data.mime_type == "image/png"
        assert prompt == BLOOD_PROMPT
        assert call["config"].temperature == pytest.approx(0.4)
        assert call["config"].response_mime_type == "application/json"
        assert call["config"].response_schema == BLOOD_SCHEMA

    def test_failed_call_is_not_retried(self, make_gateway):
        gateway, client = make_gateway(error=ConnectionError("network down"))
        gateway.analyze_blood_slide(b"img")
        assert len(client.models.calls) == 1

    def test_urine_mode_selects_prompt_and_item_limit(self, make_gateway):
        gateway, client = make_gateway(reply=[urine_item(parameter="HCG Pregnancy Test", severity="Positive")])
        gateway.analyze_urine(b"img", UrineMode.PREGNANCY)
        gateway.analyze_urine(b"img", UrineMode.STANDARD)

        pregnancy_call, standard_call = client.models.calls
        assert pregnancy_call["contents"][1] == URINE_PREGNANCY_PROMPT
        assert pregnancy_call["config"].response_schema.max_items == 1
        assert standard_call["contents"][1] == URINE_STANDARD_PROMPT
        assert standard_call["config"].response_schema.max_items is None


class TestBloodSlide:
    def test_parses_result(self, make_gateway, blood_reply):
        gateway, _ = make_gateway(reply=blood_reply)
        result = gateway.analyze_blood_slide(b"img")
        assert result.blood_group == "AB+"
        assert result.confidence == 87
        assert result.agglutination_details.startswith("Clumping")

    @pytest.mark.parametrize("raw, expected", [(150, 100), (-20, 0), (55.5, 55.5)])
    def test_confidence_is_clamped(self, make_gateway, blood_reply, raw, expected):
        blood_reply["confidence"] = raw
        gateway, _ = make_gateway(reply=blood_reply)
        assert gateway.analyze_blood_slide(b"img").confidence == expected

    def test_missing_blood_group_becomes_unknown(self, make_gateway, blood_reply):
        del blood_reply["bloodGroup"]
        gateway, _ = make_gateway(reply=blood_reply)
        assert gateway.analyze_blood_slide(b"img").blood_group == "Unknown"

    def test_code_fenced_reply_is_accepted(self, make_gateway):
        fenced = '```json\n{"bloodGroup": "o-", "confidence": 40, "antibodies": "Anti-A, Anti-B", ' \
                 '"agglutinationDetails": "No clumping.", "recommendation": "Retest."}\n```'
        gateway, _ = make_gateway(reply=fenced)
        assert gateway.analyze_blood_slide(b"img").blood_group == "O-"

    def test_no_credential_returns_placeholder_without_calling(self, make_gateway):
        gateway, client = make_gateway(api_key="")
        result = gateway.analyze_blood_slide(b"img")
        assert result.blood_group == "Unknown"
        assert result.confidence == 0
        assert "API Key" in result.antibodies
        assert client.models.calls == []

    def test_no_credential_placeholder_resolves_after_bounded_delay(self, make_gateway):
        gateway, _ = make_gateway(api_key="", fallback_delay=0.05)
        start = time.monotonic()
        gateway.analyze_blood_slide(b"img")
        elapsed = time.monotonic() - start
        assert 0.05 <= elapsed < 2.0

    def test_provider_failure_returns_error_shaped_result(self, make_gateway):
        gateway, _ = make_gateway(error=TimeoutError("deadline exceeded"))
        result = gateway.analyze_blood_slide(b"img")
        assert result.blood_group == "Unknown"
        assert result.confidence == 0
        assert result.agglutination_details == "Analysis failed. Please try again."

    @pytest.mark.parametrize("reply", ["", "   ", "not json", '{"bloodGroup": "A+"}'])
    def test_unusable_reply_is_a_provider_failure(self, make_gateway, reply):
        gateway, _ = make_gateway(reply=reply)
        result = gateway.analyze_blood_slide(b"img")
        assert result.agglutination_details == "Analysis failed. Please try again."


class TestUrine:
    def test_standard_findings_keep_order(self, make_gateway):
        reply = [urine_item(), urine_item(parameter="Protein", finding="++", severity="Moderate")]
        gateway, _ = make_gateway(reply=reply)
        findings = gateway.analyze_urine(b"img", UrineMode.STANDARD)
        assert [f.parameter for f in findings] == ["Glucose", "Protein"]
        assert findings[1].severity == UrineSeverity.MODERATE

    def test_pregnancy_yields_single_item(self, make_gateway):
        reply = [urine_item(parameter="HCG Pregnancy Test", finding="Positive",
                            interpretation="Pregnant", severity="Positive")]
        gateway, _ = make_gateway(reply=reply)
        findings = gateway.analyze_urine(b"img", "pregnancy")
        assert len(findings) == 1
        assert findings[0].severity == UrineSeverity.POSITIVE

    def test_pregnancy_with_several_items_is_rejected(self, make_gateway):
        gateway, _ = make_gateway(reply=[urine_item(), urine_item()])
        findings = gateway.analyze_urine(b"img", UrineMode.PREGNANCY)
        assert [f.parameter for f in findings] == ["Error"]

    def test_empty_list_is_rejected(self, make_gateway):
        gateway, _ = make_gateway(reply=[])
        assert gateway.analyze_urine(b"img")[0].parameter == "Error"

    def test_unknown_severity_is_rejected(self, make_gateway):
        gateway, _ = make_gateway(reply=[urine_item(severity="Critical")])
        findings = gateway.analyze_urine(b"img")
        assert findings[0].finding == "Failed"
        assert findings[0].interpretation == "Could not process image."

    def test_no_credential_returns_placeholder(self, make_gateway):
        gateway, client = make_gateway(api_key="")
        findings = gateway.analyze_urine(b"img", UrineMode.PREGNANCY)
        assert len(findings) == 1
        assert findings[0].parameter == "General"
        assert findings[0].interpretation == "API Key missing"
        assert client.models.calls == []


class TestSkinAndXray:
    def test_skin_result(self, make_gateway, skin_reply):
        skin_reply["probability"] = 140
        gateway, _ = make_gateway(reply=skin_reply)
        result = gateway.analyze_skin(b"img")
        assert result.severity == SkinSeverity.MILD
        assert result.probability == 100

    def test_xray_result(self, make_gateway, xray_reply):
        gateway, _ = make_gateway(reply=xray_reply)
        result = gateway.analyze_xray(b"img")
        assert result.body_part == "Hand"
        assert result.abnormality_detected is True

    @pytest.mark.parametrize("method", ["analyze_skin", "analyze_xray"])
    def test_no_credential_raises(self, make_gateway, method):
        gateway, client = make_gateway(api_key="")
        with pytest.raises(CredentialMissingError):
            getattr(gateway, method)(b"img")
        assert client.models.calls == []

    @pytest.mark.parametrize("method", ["analyze_skin", "analyze_xray"])
    def test_network_failure_raises_provider_error(self, make_gateway, method):
        gateway, _ = make_gateway(error=ConnectionError("reset by peer"))
        with pytest.raises(AnalysisProviderError) as excinfo:
            getattr(gateway, method)(b"img")
        assert isinstance(excinfo.value.__cause__, ConnectionError)

    def test_skin_severity_outside_enum_raises(self, make_gateway, skin_reply):
        skin_reply["severity"] = "Critical"
        gateway, _ = make_gateway(reply=skin_reply)
        with pytest.raises(AnalysisProviderError):
            gateway.analyze_skin(b"img")

    def test_xray_missing_field_raises(self, make_gateway, xray_reply):
        del xray_reply["abnormalityDetected"]
        gateway, _ = make_gateway(reply=xray_reply)
        with pytest.raises(AnalysisProviderError):
            gateway.analyze_xray(b"img")

    def test_empty_reply_raises(self, make_gateway):
        gateway, _ = make_gateway(reply="")
        with pytest.raises(AnalysisProviderError, match="No response text"):
            gateway.analyze_xray(b"img")


class TestNonFiniteScores:
    @pytest.mark.parametrize("raw", [float("nan"), float("inf")])
    def test_blood_confidence_is_rejected(self, make_gateway, blood_reply, raw):
        blood_reply["confidence"] = raw
        gateway, _ = make_gateway(reply=blood_reply)
        result = gateway.analyze_blood_slide(b"img")
        assert result.confidence == 0
        assert result.agglutination_details == "Analysis failed. Please try again."

    def test_skin_probability_nan_raises(self, make_gateway, skin_reply):
        skin_reply["probability"] = float("nan")
        gateway, _ = make_gateway(reply=skin_reply)
        with pytest.raises(AnalysisProviderError):
            gateway.analyze_skin(b"img")


class TestFallbackMetrics:
    def test_missing_credential_counts_only_for_degrading_kinds(self, make_gateway):
        gateway, _ = make_gateway(api_key="")
        before = {kind: fallback_count(kind, "missing_credential") for kind in ("blood-slide", "skin", "xray")}

        gateway.analyze_blood_slide(b"img")
        for method in ("analyze_skin", "analyze_xray"):
            with pytest.raises(CredentialMissingError):
                getattr(gateway, method)(b"img")

        assert fallback_count("blood-slide", "missing_credential") == before["blood-slide"] + 1
        assert fallback_count("skin", "missing_credential") == before["skin"]
        assert fallback_count("xray", "missing_credential") == before["xray"]

    def test_provider_failure_counts_for_urine(self, make_gateway):
        gateway, _ = make_gateway(reply="not json")
        before = fallback_count("urine", "provider_failure")
        gateway.analyze_urine(b"img")
        assert fallback_count("urine", "provider_failure") == before + 1


class TestFormatViolationAudit:
    def test_outside_a_request_the_record_has_no_correlation(self, make_gateway, monkeypatch):
        records = []
        monkeypatch.setattr(AuditLogger, "log_action",
                            lambda correlation_id, action, metadata: records.append((correlation_id, action)))
        gateway, _ = make_gateway(reply="not json")
        gateway.analyze_blood_slide(b"img")
        assert records == [("N/A", "llm_format_violation")]
