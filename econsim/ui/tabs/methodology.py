"""
Methodology tab renderer.
"""

from __future__ import annotations

from typing import Any


def render_methodology_tab(st_module: Any) -> None:
    """
    Render methodology/reference tab content.
    """
    st_module.header("ℹ️ Methodology")
    st_module.markdown(
        """
        ## How This Simulator Works

        **1. Impact classification.** Each policy instrument has a fixed rule set.
        The rules look at demand and supply elasticities (below 1 is *low*, 1 or
        above is *high*), whether the market is an essential good (fuel, food) or
        a high-elasticity good (electronics), and whether the rate exceeds a
        policy-specific threshold. The result is a labeled narrative for
        consumers, producers, workers and the macro economy.

        **2. Numeric projection.** Every label has a score
        (strong positive = +2 ... strong negative = -2). Macro effects that mention
        GDP, employment, inflation or revenue feed the matching indicator; worker
        effects about jobs feed employment; consumer effects feed welfare at half
        weight. Totals are scaled by `min(rate / 100, 1)` and a per-indicator factor.

        **3. Charts.** Time series are straight-line ramps from fixed baselines to
        baseline + delta over 12 periods. Supply and demand curves are illustrative
        linear curves shifted by policy type.

        **Limitations:** this is an educational, rule-based tool. It does not solve
        for market equilibria, is not calibrated to data, and the magnitudes are
        indicative only.
        """
    )
