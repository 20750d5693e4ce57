from listing_compliance.services.models import LLMResponse


class StaticReplyClient:
    """LLM client stub that always returns the same reply."""

    def __init__(self, text: str):
        self.text = text
        self.prompts: list[str] = []

    def chat(self, model, system, prompt, *, temperature=0.1, max_tokens=None, timeout=60):
        self.prompts.append(prompt)
        return LLMResponse(text=self.text, model=model, temperature=temperature, max_tokens=max_tokens)


COMPLIANT_DRAFT = "A well-presented 3 bedroom house in a popular suburb, close to local schools."
CLAIM_HEAVY_DRAFT = "This stunning 3 bedroom house is the best deal, won't last long!"
