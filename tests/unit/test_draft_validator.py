import pytest

from listing_compliance.config.settings import ValidatorConfig
from listing_compliance.services.models import LLMResponse
from listing_compliance.services.validator import (
    DraftValidator,
    basic_validation,
    build_user_prompt,
    parse_validation_payload,
)


class FakeClient:
    def __init__(self, text: str = "", error: Exception | None = None):
        self.text = text
        self.error = error
        self.calls = []

    def chat(self, model, system, prompt, *, temperature=0.1, max_tokens=None, timeout=60):
        self.calls.append({"model": model, "system": system, "prompt": prompt, "max_tokens": max_tokens})
        if self.error:
            raise self.error
        return LLMResponse(text=self.text, model=model, temperature=temperature, max_tokens=max_tokens)


FACTS = {"bedrooms": 3, "bathrooms": 2, "features": ["Heat pump", "Double garage"]}


def test_basic_validation_flags_claims_not_in_features():
    draft = "Stunning 3 bedroom home with heat pump and dishwasher."
    result = basic_validation(FACTS, draft)
    assert result.risky_phrases == ['Subjective claim: "stunning"']
    assert result.unsupported == ['"dishwasher" not listed in property features']
    assert result.suggestions == ["Ensure bathroom count matches the facts"]
    assert result.compliance_score == 75
    assert result.source == "fallback"


def test_basic_validation_score_floors_at_zero():
    draft = "fantastic excellent outstanding magnificent alarm dishwasher double glazing"
    result = basic_validation({}, draft)
    assert len(result.unsupported) == 7
    assert result.compliance_score == 0


def test_parse_payload_accepts_fenced_json():
    text = '```json\n{"unsupported": [], "risky_phrases": ["best"], "suggestions": [], "compliance_score": 88}\n```'
    result = parse_validation_payload(text)
    assert result.risky_phrases == ["best"]
    assert result.compliance_score == 88
    assert result.source == "ai"


@pytest.mark.parametrize(
    "text",
    [
        "not json at all",
        '{"unsupported": [], "risky_phrases": [], "suggestions": [], "compliance_score": 120}',
        '{"unsupported": "none", "compliance_score": 50}',
    ],
)
def test_parse_payload_rejects_bad_replies(text):
    with pytest.raises(ValueError):
        parse_validation_payload(text)


def test_user_prompt_contains_facts_and_draft():
    prompt = build_user_prompt(FACTS, "Sunny home.")
    assert '"bedrooms": 3' in prompt
    assert "DRAFT:\nSunny home." in prompt


def test_validator_uses_model_reply():
    client = FakeClient('{"unsupported": [], "risky_phrases": [], "suggestions": ["Add floor area"], "compliance_score": 92}')
    validator = DraftValidator(ValidatorConfig(max_tokens=800), client=client)
    result = validator.validate(FACTS, "Sunny 3 bedroom home.")
    assert result.compliance_score == 92
    assert result.suggestions == ["Add floor area"]
    assert client.calls[0]["model"] == "gpt-4o-mini"
    assert client.calls[0]["max_tokens"] == 800
    assert "compliance validator" in client.calls[0]["system"]


def test_validator_falls_back_when_provider_fails():
    client = FakeClient(error=RuntimeError("HTTP 500"))
    validator = DraftValidator(ValidatorConfig(), client=client)
    result = validator.validate(FACTS, "Amazing 3 bedroom, 2 bathroom home.")
    assert result.source == "fallback"
    assert result.risky_phrases == ['Subjective claim: "amazing"']


def test_validator_falls_back_on_invalid_reply():
    validator = DraftValidator(ValidatorConfig(), client=FakeClient("Sorry, I cannot help."))
    result = validator.validate({}, "Tidy home.")
    assert result.source == "fallback"
    assert result.compliance_score == 100


def test_validator_without_api_key_skips_model():
    validator = DraftValidator(ValidatorConfig(api_mode="openai", endpoint="https://example.test/v1", api_key=None))
    assert validator.client is None
    assert validator.validate(None, "").source == "fallback"
