"""Recipe analysis combining hosted inference with the impact heuristic."""

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass

import httpx

from savefarm.adapters.huggingface_client import InferenceClient, InferenceReply
from savefarm.domain.errors import BadRequestError
from savefarm.domain.impact import ImpactFinding, ImpactResult, MatchPolicy
from savefarm.services.impact import analyze_text, parse_amount

FALLBACK_MODELS = (
    "facebook/bart-large-cnn",
    "google/flan-t5-small",
    "distilgpt2",
    "sshleifer/tiny-gpt2",
)

PROMPT_TEMPLATE = (
    "Analyze this recipe and determine if it's vegan. "
    "Return JSON with animals_saved and comment.\nRecipe: {recipe}"
)

_logger = logging.getLogger(__name__)


@dataclass
class AnalysisService:
    """Classify a recipe and estimate the animals it saves.

    Without an inference client the heuristic reads the recipe text itself.
    With one, the model's output is what the heuristic reads, matching the
    behaviour users saw when the analysis ran in the browser.
    """

    client: InferenceClient | None
    model: str
    fallback_models: tuple[str, ...] = FALLBACK_MODELS
    match_policy: MatchPolicy = MatchPolicy.SUBSTRING

    async def analyze(self, recipe_text: str | None) -> ImpactResult:
        """Analyse a pasted recipe."""
        if not recipe_text or not recipe_text.strip():
            raise BadRequestError("Recipe text required")
        if self.client is None:
            return analyze_text(recipe_text, self.match_policy)

        prompt = PROMPT_TEMPLATE.format(recipe=recipe_text)
        try:
            reply = await self._generate(prompt)
            if not reply.ok:
                _logger.warning(
                    "Inference failed: status=%s body=%s", reply.status_code, reply.text
                )
                return _message_result(f"API error: {reply.status_code} - {reply.text}")
            payload = reply.json()
        except (httpx.HTTPError, ValueError) as exc:
            _logger.exception("Inference call failed")
            return _message_result(f"AI error: {exc}")

        raw_text = _extract_text(payload)
        if raw_text is None and _is_structured(payload):
            return _coerce_result(payload)
        if raw_text is None and isinstance(payload, list | Mapping) and payload:
            raw_text = json.dumps(payload)
        if raw_text:
            return analyze_text(raw_text.strip(), self.match_policy)
        return _message_result("No valid AI output")

    async def _generate(self, prompt: str) -> InferenceReply:
        """Call the primary model, walking the fallbacks while models are missing."""
        reply = await self.client.generate(self.model, prompt)
        if reply.status_code != 404:
            return reply
        _logger.warning("Model %s not available, trying fallbacks", self.model)
        for fallback in self.fallback_models:
            reply = await self.client.generate(fallback, prompt)
            if reply.status_code != 404:
                return reply
        return reply


def _extract_text(payload: object) -> str | None:
    """Normalise the text-bearing response shapes of different model families."""
    if isinstance(payload, list) and payload:
        first = payload[0]
        if isinstance(first, Mapping) and first.get("generated_text"):
            return str(first["generated_text"])
    if isinstance(payload, Mapping) and payload.get("summary_text"):
        return str(payload["summary_text"])
    if isinstance(payload, str):
        return payload
    return None


def _is_structured(payload: object) -> bool:
    return isinstance(payload, Mapping) and {"animals_saved", "comment"} <= set(
        payload
    )


def _coerce_result(payload: Mapping[str, object]) -> ImpactResult:
    """Build a result from a model's own JSON answer.

    Values the model got wrong are zeroed and findings without a usable
    yearly impact are dropped, so the tally never sees them.
    """
    raw_details = payload.get("details")
    details = [
        ImpactFinding(
            ingredient=str(item.get("ingredient", "")),
            animal=str(item.get("animal", "")),
            yearly_impact=item.get("yearly_impact", 0),
        )
        for item in (raw_details if isinstance(raw_details, list) else [])
        if isinstance(item, Mapping)
        and parse_amount(item.get("yearly_impact", 0)) is not None
    ]
    potential = payload.get("potential_yearly_impact", 0)
    return ImpactResult(
        animals_saved=int(parse_amount(payload.get("animals_saved")) or 0),
        potential_yearly_impact=potential if parse_amount(potential) is not None else 0,
        comment=str(payload.get("comment", "")),
        details=details,
    )


def _message_result(comment: str) -> ImpactResult:
    return ImpactResult(
        animals_saved=0, potential_yearly_impact=0, comment=comment, details=[]
    )
