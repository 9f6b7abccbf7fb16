"""
Contextual follow-up questions for the chat panel.

Each policy family has its own pool; four questions are drawn at random
after every run.
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np

QUESTIONS_SHOWN = 4


@dataclass(frozen=True)
class QuickQuestion:
    """A button label and the prompt it sends."""
    label: str
    prompt: str


TAX_QUESTIONS = (
    QuickQuestion("Why this outcome?", "Why did the results change in this direction?"),
    QuickQuestion("Consumer impact?", "How are consumers affected by this tax policy?"),
    QuickQuestion("Producer burden?", "Who bears more of the tax burden - consumers or producers?"),
    QuickQuestion("Revenue gained?", "Is the government revenue gain worth the economic cost?"),
    QuickQuestion("If rate doubles?", "What would happen if we doubled the tax rate?"),
    QuickQuestion("Elasticity effect?", "How does elasticity affect who bears the tax burden?"),
    QuickQuestion("Employment impact?", "Why does employment change with this tax?"),
    QuickQuestion(
        "Alternative policies?",
        "What alternative policies could achieve similar revenue without as much economic impact?",
    ),
)

SUBSIDY_QUESTIONS = (
    QuickQuestion("Who benefits?", "Who benefits most from this subsidy - consumers or producers?"),
    QuickQuestion("Cost to govt?", "What is the government cost of providing this subsidy?"),
    QuickQuestion("Market distortion?", "Does this subsidy cause market distortions?"),
    QuickQuestion("Consumer savings?", "How much do consumers save from this subsidy?"),
    QuickQuestion("If subsidy ends?", "What happens to prices and quantity if the subsidy is removed?"),
    QuickQuestion("Employment gain?", "Why does employment increase with producer subsidies?"),
    QuickQuestion("Efficiency loss?", "Is there economic efficiency loss from this subsidy?"),
    QuickQuestion("Long-term effects?", "What are the long-term effects of subsidizing this good?"),
)

PRICE_CONTROL_QUESTIONS = (
    QuickQuestion("Shortage/surplus?", "Does this price control create shortages or surpluses?"),
    QuickQuestion("Black market?", "Could black markets emerge from this price control?"),
    QuickQuestion("Quality impact?", "How does price control affect product quality?"),
    QuickQuestion("Producer response?", "How do producers respond to controlled prices?"),
    QuickQuestion("Binding control?", "Is this price control binding on the market?"),
    QuickQuestion("Consumer welfare?", "Does this price control improve overall consumer welfare?"),
    QuickQuestion("If control removed?", "What would prices and quantities be without this control?"),
    QuickQuestion("Wage dynamics?", "How does minimum wage affect different skill levels?"),
)

TRADE_QUESTIONS = (
    QuickQuestion("Trade effect?", "How does this policy affect international trade?"),
    QuickQuestion("Domestic impact?", "How are domestic producers and consumers affected differently?"),
    QuickQuestion("Retaliation risk?", "Could other countries retaliate against this trade policy?"),
    QuickQuestion("Price impact?", "Why do import/export prices change with this policy?"),
    QuickQuestion("Consumer choice?", "How does this affect consumer choice of goods?"),
    QuickQuestion("Export market?", "Does this policy help domestic exporters?"),
    QuickQuestion("GDP effect?", "Why does this trade policy affect overall GDP?"),
    QuickQuestion("Comparative advantage?", "Does this policy distort comparative advantage?"),
)

GENERIC_QUESTIONS = (
    QuickQuestion("Why this outcome?", "Why did the results change in this direction?"),
    QuickQuestion("Key insights?", "What are the key economic insights from this simulation?"),
    QuickQuestion("Policy trade-offs?", "What are the main trade-offs of this policy?"),
    QuickQuestion("Affected groups?", "Which groups are most affected by this policy?"),
    QuickQuestion("Better alternatives?", "Are there better alternative policies?"),
    QuickQuestion("Long-term effects?", "What are the long-term effects of this policy?"),
)

# Matched as substrings of the category value, first match wins.
# "trade_export_subsidy" therefore draws from the subsidy pool.
QUESTION_POOLS = (
    ("tax", TAX_QUESTIONS),
    ("subsidy", SUBSIDY_QUESTIONS),
    ("price", PRICE_CONTROL_QUESTIONS),
    ("trade", TRADE_QUESTIONS),
)


def question_pool(policy_category) -> tuple[QuickQuestion, ...]:
    """Return the question pool for a category (enum or string value)."""
    category = getattr(policy_category, "value", policy_category)
    category = str(category) if category is not None else ""
    for keyword, pool in QUESTION_POOLS:
        if keyword in category:
            return pool
    return GENERIC_QUESTIONS


def generate_quick_questions(
    result,
    rng: Optional[np.random.Generator] = None,
    count: int = QUESTIONS_SHOWN,
) -> list[QuickQuestion]:
    """
    Draw follow-up questions for a simulation result.

    Args:
        result: SimulationResult whose category selects the pool
        rng: Random generator (a fresh unseeded one by default)
        count: Number of questions to return

    Returns:
        Up to ``count`` distinct questions in random order
    """
    rng = rng if rng is not None else np.random.default_rng()
    pool = question_pool(result.policy_category)
    order = rng.permutation(len(pool))
    return [pool[i] for i in order[:count]]
