"""Keyword heuristic estimating the animal impact of a recipe."""

import math
from collections.abc import Iterable, Mapping

from savefarm.domain.impact import (
    AnimalImpact,
    ImpactFinding,
    ImpactResult,
    MatchPolicy,
)

# Animals affected per year by regularly eating the ingredient.
ANIMAL_IMPACTS: dict[str, AnimalImpact] = {
    "milk": AnimalImpact("cow", 0.1),
    "butter": AnimalImpact("cow", 0.05),
    "cheese": AnimalImpact("cow", 0.15),
    "cream": AnimalImpact("cow", 0.05),
    "yogurt": AnimalImpact("cow", 0.05),
    "whey": AnimalImpact("cow", 0.02),
    "egg": AnimalImpact("chicken", 0.07),
    "eggs": AnimalImpact("chicken", 0.07),
    "chicken": AnimalImpact("chicken", 1),
    "beef": AnimalImpact("cow", 0.5),
    "pork": AnimalImpact("pig", 0.5),
    "fish": AnimalImpact("fish", 12),
    "shrimp": AnimalImpact("shrimp", 50),
    "anchovy": AnimalImpact("fish", 20),
    "meat": AnimalImpact("various", 0.5),
    "bacon": AnimalImpact("pig", 0.2),
    "honey": AnimalImpact("bee colony", 0.1),
    "gelatin": AnimalImpact("various", 0.1),
    "lard": AnimalImpact("pig", 0.1),
}

PROTEIN_SUBSTITUTES = (
    "tofu",
    "seitan",
    "tempeh",
    "plant-based",
    "meat alternative",
    "vegan meat",
    "vegan chicken",
    "vegan beef",
    "vegan fish",
    "plant-based meat",
    "plant-based minced meat",
)
DAIRY_SUBSTITUTES = (
    "plant milk",
    "almond milk",
    "soy milk",
    "oat milk",
    "vegan cheese",
    "nutritional yeast",
    "plant-based cream",
)
EGG_SUBSTITUTES = ("flax egg", "chia egg", "just egg", "vegan egg", "egg replacer")

# (dish keywords, finding) pairs checked when a protein substitute is present.
PROTEIN_DISHES: tuple[tuple[tuple[str, ...], ImpactFinding], ...] = (
    (
        ("chicken", "poultry", "wings", "nugget", "drumstick"),
        ImpactFinding("chicken alternative", "chicken", 1.0),
    ),
    (
        ("beef", "steak", "burger", "meatball"),
        ImpactFinding("beef alternative", "cow", 0.5),
    ),
    (
        ("fish", "seafood", "tuna", "salmon", "fillet"),
        ImpactFinding("fish alternative", "fish", 12.0),
    ),
    (
        ("pork", "ham", "bacon"),
        ImpactFinding("pork alternative", "pig", 0.5),
    ),
)
DAIRY_DISHES = ("cream", "cheese", "milk", "butter", "dairy")
EGG_DISHES = ("egg", "omelette", "quiche", "frittata")

DAIRY_FINDING = ImpactFinding("dairy alternative", "cow", 0.25)
EGG_FINDING = ImpactFinding("egg alternative", "chicken", 0.2)
GENERIC_PROTEIN_FINDING = ImpactFinding("meat alternative", "chicken", 0.5)

EMPTY_COMMENT = "Empty model output"
VEGAN_ALTERNATIVES_COMMENT = "Recipe uses vegan alternatives that help save animals! 🌱"
NATURALLY_VEGAN_COMMENT = "Naturally vegan recipe! No animal alternatives needed."


def analyze_text(
    text: object, match_policy: MatchPolicy = MatchPolicy.SUBSTRING
) -> ImpactResult:
    """Estimate the animal impact of a recipe or a model's description of one.

    Animal products present in the text make the recipe non-vegan and the
    result reports what avoiding them would save. Otherwise vegan substitutes
    paired with a dish context count as animals saved.
    """
    if not text or not isinstance(text, str):
        return ImpactResult(
            animals_saved=0,
            potential_yearly_impact=0,
            comment=EMPTY_COMMENT,
            details=[],
        )

    lower = text.lower()
    matched = _match_animal_products(lower, match_policy)
    if matched:
        return _animal_product_result(matched)
    return _substitute_result(lower)


def parse_amount(value: object) -> float | None:
    """Return ``value`` as a finite non-negative float, or None if it is not one."""
    if isinstance(value, bool) or not isinstance(value, int | float | str):
        return None
    try:
        amount = float(value)
    except ValueError:
        return None
    if not math.isfinite(amount) or amount < 0:
        return None
    return amount


def fold_findings(
    animals: Mapping[str, float], details: Iterable[ImpactFinding | Mapping]
) -> dict[str, float]:
    """Add each finding's yearly impact to the per-animal running totals.

    Findings without an animal or with an unusable impact are skipped.
    """
    totals = {
        animal: parse_amount(count) or 0.0 for animal, count in animals.items()
    }
    for detail in details:
        if isinstance(detail, ImpactFinding):
            animal, impact = detail.animal, detail.yearly_impact
        else:
            animal, impact = detail.get("animal"), detail.get("yearly_impact")
        amount = parse_amount(impact if impact is not None else 0)
        if not animal or amount is None:
            continue
        totals[animal] = totals.get(animal, 0.0) + amount
    return totals


def _match_animal_products(
    lower: str, match_policy: MatchPolicy
) -> list[tuple[str, AnimalImpact]]:
    matched = [
        (ingredient, impact)
        for ingredient, impact in ANIMAL_IMPACTS.items()
        if ingredient in lower
    ]
    if match_policy is MatchPolicy.LONGEST:
        keywords = [ingredient for ingredient, _ in matched]
        matched = [
            (ingredient, impact)
            for ingredient, impact in matched
            if not any(
                ingredient != other and ingredient in other for other in keywords
            )
        ]
    return matched


def _animal_product_result(matched: list[tuple[str, AnimalImpact]]) -> ImpactResult:
    by_animal: dict[str, tuple[float, list[str]]] = {}
    total_saved = 0.0
    for ingredient, impact in matched:
        subtotal, ingredients = by_animal.get(impact.animal, (0.0, []))
        by_animal[impact.animal] = (subtotal + impact.count, [*ingredients, ingredient])
        total_saved += impact.count

    parts = [
        f"{subtotal:.2f} {animal}{'' if subtotal == 1 else 's'} "
        f"(from {', '.join(ingredients)})"
        for animal, (subtotal, ingredients) in by_animal.items()
    ]
    comment = (
        "Recipe contains animal products. If made vegan, you could save "
        f"approximately {' and '.join(parts)} per year."
    )
    return ImpactResult(
        animals_saved=0,
        potential_yearly_impact=f"{total_saved:.2f}",
        comment=comment,
        details=[
            ImpactFinding(ingredient, impact.animal, f"{impact.count:.2f}")
            for ingredient, impact in matched
        ],
    )


def _substitute_result(lower: str) -> ImpactResult:
    has_protein_sub = _contains_any(lower, PROTEIN_SUBSTITUTES)
    has_dairy_sub = _contains_any(lower, DAIRY_SUBSTITUTES)
    has_egg_sub = _contains_any(lower, EGG_SUBSTITUTES)

    findings: list[ImpactFinding] = []
    if has_protein_sub:
        findings.extend(
            finding
            for dishes, finding in PROTEIN_DISHES
            if _contains_any(lower, dishes)
        )
    if has_dairy_sub and _contains_any(lower, DAIRY_DISHES):
        findings.append(DAIRY_FINDING)
    if has_egg_sub and _contains_any(lower, EGG_DISHES):
        findings.append(EGG_FINDING)
    if not findings and has_protein_sub:
        findings.append(GENERIC_PROTEIN_FINDING)

    return ImpactResult(
        animals_saved=1 if findings else 0,
        potential_yearly_impact=sum(float(f.yearly_impact) for f in findings),
        comment=VEGAN_ALTERNATIVES_COMMENT if findings else NATURALLY_VEGAN_COMMENT,
        details=findings,
    )


def _contains_any(lower: str, keywords: Iterable[str]) -> bool:
    return any(keyword in lower for keyword in keywords)
