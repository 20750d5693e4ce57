"""
Pattern catalogs for NZ Fair Trading Act checks on listing copy.

Three families are defined: prohibited claims (reported once per match as
errors), claims needing substantiation (once per match as warnings) and
disclosure triggers (once per trigger, however many times it matches).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Tuple

RULESET_VERSION = "2024.1"

PROHIBITED = "prohibited"
WARNING = "warning"


def _compile(expression: str) -> re.Pattern[str]:
    return re.compile(expression, re.IGNORECASE | re.ASCII)


@dataclass(frozen=True, slots=True)
class PatternRule:
    """Claim pattern reported once for every occurrence in the text."""

    rule_id: str
    family: str  # "prohibited" or "warning"
    pattern: re.Pattern[str]
    description: str

    def find_all(self, text: str) -> List[str]:
        """Return each literal match, left to right."""
        return [match.group(0) for match in self.pattern.finditer(text)]


@dataclass(frozen=True, slots=True)
class DisclosureRule:
    """Property characteristic that calls for a disclosure statement."""

    rule_id: str
    trigger: re.Pattern[str]
    message: str

    def is_triggered(self, text: str) -> bool:
        return self.trigger.search(text) is not None


PROHIBITED_RULES: Tuple[PatternRule, ...] = (
    PatternRule(
        rule_id="superlative.unevidenced",
        family=PROHIBITED,
        pattern=_compile(r"\b(best|perfect|amazing|stunning|incredible|unbeatable|ultimate|premier|exclusive)\b"),
        description="Superlatives without evidence.",
    ),
    PatternRule(
        rule_id="investment.guaranteed_return",
        family=PROHIBITED,
        pattern=_compile(r"\b(guaranteed|sure|certain|definite|proven) (return|investment|profit|gain)\b"),
        description="Guaranteed investment outcomes.",
    ),
    PatternRule(
        rule_id="investment.lifetime_opportunity",
        family=PROHIBITED,
        pattern=_compile(r"\binvestment opportunity of a lifetime\b"),
        description="Investment opportunity of a lifetime.",
    ),
    PatternRule(
        rule_id="investment.cant_go_wrong",
        family=PROHIBITED,
        pattern=_compile(r"\bcan't go wrong\b"),
        description="Risk-free investment language.",
    ),
    PatternRule(
        rule_id="urgency.must_sell",
        family=PROHIBITED,
        pattern=_compile(r"\bmust sell\b"),
        description="Misleading urgency.",
    ),
    PatternRule(
        rule_id="urgency.wont_last_long",
        family=PROHIBITED,
        pattern=_compile(r"\bwon't last long\b"),
        description="Misleading urgency.",
    ),
    PatternRule(
        rule_id="urgency.act_fast",
        family=PROHIBITED,
        pattern=_compile(r"\bact fast\b"),
        description="Misleading urgency.",
    ),
    PatternRule(
        rule_id="urgency.once_in_a_lifetime",
        family=PROHIBITED,
        pattern=_compile(r"\bonce in a lifetime\b"),
        description="Misleading urgency.",
    ),
    PatternRule(
        rule_id="area.best_location",
        family=PROHIBITED,
        pattern=_compile(r"\bbest (location|area|neighbourhood|street)\b"),
        description="Unverifiable neighbourhood superiority.",
    ),
    PatternRule(
        rule_id="area.most_sought_after",
        family=PROHIBITED,
        pattern=_compile(r"\bmost sought.?after\b"),
        description="Unverifiable neighbourhood demand.",
    ),
    PatternRule(
        rule_id="area.tightly_held",
        family=PROHIBITED,
        pattern=_compile(r"\btightly held\b"),
        description="Unverifiable neighbourhood demand.",
    ),
    PatternRule(
        rule_id="price.prediction",
        family=PROHIBITED,
        pattern=_compile(r"\b(prices? )?(will|going to|set to|bound to) (rise|increase|go up|double|triple)\b"),
        description="Price predictions without evidence.",
    ),
    PatternRule(
        rule_id="price.only_up",
        family=PROHIBITED,
        pattern=_compile(r"\bcan only go up\b"),
        description="Price predictions without evidence.",
    ),
    PatternRule(
        rule_id="scarcity.last_one",
        family=PROHIBITED,
        pattern=_compile(r"\blast (one|property|house|home|unit)\b"),
        description="False scarcity.",
    ),
    PatternRule(
        rule_id="scarcity.only_one_left",
        family=PROHIBITED,
        pattern=_compile(r"\bonly one (left|available|remaining)\b"),
        description="False scarcity.",
    ),
)


WARNING_RULES: Tuple[PatternRule, ...] = (
    PatternRule(
        rule_id="yield.percentage",
        family=WARNING,
        pattern=_compile(r"\b\d+(\.\d+)?%\s*(rental\s*)?(yield|return)\b"),
        description="Rental yield claims.",
    ),
    PatternRule(
        rule_id="market.comparison",
        family=WARNING,
        pattern=_compile(r"\b(above|below|under|over)\s*market\s*(value|price)\b"),
        description="Market value comparisons.",
    ),
    PatternRule(
        rule_id="market.great_value",
        family=WARNING,
        pattern=_compile(r"\bgreat\s*value\b"),
        description="Market value comparisons.",
    ),
    PatternRule(
        rule_id="market.well_priced",
        family=WARNING,
        pattern=_compile(r"\bwell\s*priced\b"),
        description="Market value comparisons.",
    ),
    PatternRule(
        rule_id="development.potential",
        family=WARNING,
        pattern=_compile(r"\b(development|subdivision)\s*(potential|opportunity)\b"),
        description="Development potential claims.",
    ),
    PatternRule(
        rule_id="development.subdivided",
        family=WARNING,
        pattern=_compile(r"\bcould be subdivided\b"),
        description="Development potential claims.",
    ),
    PatternRule(
        rule_id="school.zone",
        family=WARNING,
        pattern=_compile(r"\b(zoned|in\s*zone)\s*(for|to)\s*[\w\s]*(school|college)\b"),
        description="School zone claims.",
    ),
    PatternRule(
        rule_id="transport.travel_time",
        family=WARNING,
        pattern=_compile(r"\b\d+\s*min(utes?)?\s*(walk|drive|bus|train)\s*(to|from)\b"),
        description="Travel time claims.",
    ),
)


DISCLOSURE_RULES: Tuple[DisclosureRule, ...] = (
    DisclosureRule(
        rule_id="disclosure.weathertightness",
        trigger=_compile(r"\b(leaky|weathertight|weather.?tight|monolithic|plaster)\b"),
        message="Properties with weathertightness concerns must include appropriate disclosure statements",
    ),
    DisclosureRule(
        rule_id="disclosure.body_corporate",
        trigger=_compile(r"\b(apartment|unit|body\s*corporate|owners\s*corporation)\b"),
        message="Body corporate/strata properties should disclose fees and any special levies",
    ),
    DisclosureRule(
        rule_id="disclosure.heritage",
        trigger=_compile(r"\b(heritage|historic|protected|character|villa|bungalow)\b"),
        message="Heritage or character properties should disclose any council protections or restrictions",
    ),
    DisclosureRule(
        rule_id="disclosure.tenure",
        trigger=_compile(r"\b(cross.?lease|company\s*share|licence\s*to\s*occupy)\b"),
        message="Non-standard tenure types require clear explanation and disclosure",
    ),
)


PROMOTIONAL_PATTERN = _compile(
    r"\b(amazing|incredible|stunning|perfect|dream|paradise|luxury|executive|prestigious)\b"
)
PROMOTIONAL_LIMIT = 3

CV_RV_UPPER_RATIO = 1.5
CV_RV_LOWER_RATIO = 0.5


__all__ = [
    "RULESET_VERSION",
    "PatternRule",
    "DisclosureRule",
    "PROHIBITED_RULES",
    "WARNING_RULES",
    "DISCLOSURE_RULES",
    "PROMOTIONAL_PATTERN",
    "PROMOTIONAL_LIMIT",
    "CV_RV_UPPER_RATIO",
    "CV_RV_LOWER_RATIO",
]
