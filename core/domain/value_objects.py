"""
Value objects holding the raw inputs of an assessment and the rules that classify them.

Every value object is immutable and knows how to classify itself into a
HealthStatus. Numeric values use closed ranges and accept any integer,
including negatives. Free-text values are classified by an ordered table of
keyword rules:

- a rule matches when any of its clauses has all of its keywords in the text
- matching is case-sensitive substring containment
- the first matching rule wins, rules are listed worst status first
- text that matches no rule is Optimal
"""

from dataclasses import dataclass
from typing import ClassVar

from pydantic import BaseModel, ConfigDict

from core.domain.models import HealthStatus


@dataclass(frozen=True)
class KeywordRule:
    """A status and the keyword clauses (OR of ANDs) that select it."""

    status: HealthStatus
    clauses: tuple[tuple[str, ...], ...]

    def matches(self, text: str) -> bool:
        return any(all(keyword in text for keyword in clause) for clause in self.clauses)


def classify_text(
    text: str,
    rules: tuple[KeywordRule, ...],
    default: HealthStatus = HealthStatus.OPTIMAL,
) -> HealthStatus:
    """Return the status of the first rule matching `text`, or `default`."""
    for rule in rules:
        if rule.matches(text):
            return rule.status
    return default


class BloodPressure(BaseModel):
    model_config = ConfigDict(frozen=True)

    systolic: int
    diastolic: int

    def is_optimal(self) -> bool:
        return self.systolic < 120 and self.diastolic < 80

    def is_high(self) -> bool:
        return self.systolic >= 130 or self.diastolic >= 80

    def needs_attention(self) -> bool:
        return not self.is_optimal() and not self.is_high()

    def is_serious_issue(self) -> bool:
        return self.is_high()

    def health_status(self) -> HealthStatus:
        if self.is_optimal():
            return HealthStatus.OPTIMAL
        if self.is_high():
            return HealthStatus.SERIOUS_ISSUE
        return HealthStatus.NEEDS_ATTENTION


class CholesterolTotal(BaseModel):
    """Total cholesterol in mg/dL."""

    model_config = ConfigDict(frozen=True)

    value: int

    def is_optimal(self) -> bool:
        return self.value < 200

    def needs_attention(self) -> bool:
        return 200 <= self.value < 240

    def is_serious_issue(self) -> bool:
        return self.value >= 240

    def health_status(self) -> HealthStatus:
        if self.is_optimal():
            return HealthStatus.OPTIMAL
        if self.needs_attention():
            return HealthStatus.NEEDS_ATTENTION
        return HealthStatus.SERIOUS_ISSUE


class BloodSugar(BaseModel):
    """Fasting blood sugar in mg/dL. Anything outside 70-125 is serious, low values included."""

    model_config = ConfigDict(frozen=True)

    value: int

    def is_optimal(self) -> bool:
        return 70 <= self.value <= 99

    def needs_attention(self) -> bool:
        return 100 <= self.value <= 125

    def is_serious_issue(self) -> bool:
        return not self.is_optimal() and not self.needs_attention()

    def health_status(self) -> HealthStatus:
        if self.is_optimal():
            return HealthStatus.OPTIMAL
        if self.needs_attention():
            return HealthStatus.NEEDS_ATTENTION
        return HealthStatus.SERIOUS_ISSUE


class ExerciseMinutes(BaseModel):
    model_config = ConfigDict(frozen=True)

    weekly_minutes: int

    def is_optimal(self) -> bool:
        return self.weekly_minutes >= 150

    def needs_attention(self) -> bool:
        return 75 <= self.weekly_minutes < 150

    def is_serious_issue(self) -> bool:
        return self.weekly_minutes < 75

    def health_status(self) -> HealthStatus:
        if self.is_optimal():
            return HealthStatus.OPTIMAL
        if self.needs_attention():
            return HealthStatus.NEEDS_ATTENTION
        return HealthStatus.SERIOUS_ISSUE


class KeywordClassifiedText(BaseModel):
    """Base for self-reported descriptions classified through `rules`."""

    model_config = ConfigDict(frozen=True)

    rules: ClassVar[tuple[KeywordRule, ...]] = ()

    description: str

    def _rule_matches(self, status: HealthStatus) -> bool:
        return any(rule.matches(self.description) for rule in self.rules if rule.status == status)

    def is_optimal(self) -> bool:
        return self._rule_matches(HealthStatus.OPTIMAL)

    def needs_attention(self) -> bool:
        return self._rule_matches(HealthStatus.NEEDS_ATTENTION)

    def is_serious_issue(self) -> bool:
        return self._rule_matches(HealthStatus.SERIOUS_ISSUE)

    def health_status(self) -> HealthStatus:
        return classify_text(self.description, self.rules)


class SleepQuality(KeywordClassifiedText):
    # "7" and "8" qualify on their own while "9" also needs "restful".
    rules: ClassVar[tuple[KeywordRule, ...]] = (
        KeywordRule(HealthStatus.SERIOUS_ISSUE, (("4",), ("severe",), ("<5",))),
        KeywordRule(
            HealthStatus.NEEDS_ATTENTION,
            (("5",), ("6",), ("frequent disturbances",), ("mild disturbances",)),
        ),
        KeywordRule(HealthStatus.OPTIMAL, (("7",), ("8",), ("9", "restful"))),
    )


class StressLevel(KeywordClassifiedText):
    rules: ClassVar[tuple[KeywordRule, ...]] = (
        KeywordRule(HealthStatus.SERIOUS_ISSUE, (("High", "chronic", "affecting"),)),
        KeywordRule(HealthStatus.NEEDS_ATTENTION, (("Moderate", "stress"),)),
        KeywordRule(HealthStatus.OPTIMAL, (("Low", "stress"),)),
    )


class DietQuality(KeywordClassifiedText):
    rules: ClassVar[tuple[KeywordRule, ...]] = (
        KeywordRule(HealthStatus.SERIOUS_ISSUE, (("Poor", "deficiencies"),)),
        KeywordRule(HealthStatus.NEEDS_ATTENTION, (("Processed",), ("high-sugar",))),
        KeywordRule(HealthStatus.OPTIMAL, (("Balanced", "nutrient-rich"),)),
    )
