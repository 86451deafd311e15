"""Plain-language guidance derived from risk and return results."""

from dataclasses import dataclass, field

from defi_sim.position.returns import ReturnResult
from defi_sim.risk.metrics import RiskLevel, RiskResult

TARGET_HEALTH_FACTOR = 2.0

PLACEHOLDER_ANALYSIS = "Run a simulation to see personalized guidance based on your strategy."


@dataclass(frozen=True)
class Guidance:
    risk_analysis: str
    parameter_suggestions: list[str] = field(default_factory=list)
    key_insights: list[str] = field(default_factory=list)


def _risk_section(risk: RiskResult, suggestions: list[str], insights: list[str]) -> str:
    if risk.risk_level is RiskLevel.LIQUIDATION:
        suggestions.extend(
            [
                "Add more collateral to increase your health factor above 1.0",
                "Reduce your borrow amount to lower liquidation risk",
                "Consider closing risky positions and rebalancing your portfolio",
            ]
        )
        return (
            "Critical Risk: Your position is at or below the liquidation threshold. "
            "Immediate action is required to avoid liquidation."
        )
    if risk.risk_level is RiskLevel.AT_RISK:
        suggestions.extend(
            [
                "Increase collateral to improve your health factor to at least 2.0",
                "Monitor price movements closely and be prepared to adjust positions",
                "Consider reducing leverage to create a safety buffer",
            ]
        )
        return (
            "Elevated Risk: Your health factor is below 1.5, which means you are "
            "vulnerable to liquidation if asset prices move against you."
        )
    insights.append("Your current collateral ratio provides a good safety margin")
    return (
        "Safe Position: Your health factor is healthy, indicating good "
        "collateralization. Continue monitoring market conditions."
    )


def generate_guidance(
    risk: RiskResult | None,
    returns: ReturnResult | None,
) -> Guidance:
    """Build guidance text from the latest results.

    Args:
        risk: Output of compute_risk, or None if nothing has been run.
        returns: Output of compute_returns, or None.

    Returns:
        Guidance with a risk summary, suggestions and insights.
    """
    if risk is None or returns is None:
        return Guidance(risk_analysis=PLACEHOLDER_ANALYSIS)

    suggestions: list[str] = []
    insights: list[str] = []
    risk_analysis = _risk_section(risk, suggestions, insights)

    if returns.net_return < 0:
        insights.append(
            f"Your borrow costs ({returns.total_borrow_interest:.2f} USD) exceed deposit "
            f"earnings ({returns.total_deposit_interest:.2f} USD)"
        )
        suggestions.append(
            "Review if your borrowing strategy is generating sufficient returns elsewhere"
        )
        suggestions.append(
            "Consider reducing borrow amounts or finding higher-yield deposit opportunities"
        )
    else:
        insights.append(
            f"Your strategy generates a net positive return of {returns.net_return:.2f} USD "
            "over the simulation period"
        )
        insights.append(f"Annualized APR: {returns.apr:.2f}%, APY: {returns.apy:.2f}%")

    if 1.0 <= risk.health_factor < TARGET_HEALTH_FACTOR:
        suggestions.append(
            f"Your health factor is {risk.health_factor:.2f}. "
            f"Aim for at least {TARGET_HEALTH_FACTOR:.1f} for better safety"
        )

    if risk.price_sensitivity > 0:
        insights.append(
            "A 10% price drop would reduce your health factor by approximately "
            f"{risk.price_sensitivity * 10:.2f}"
        )

    return Guidance(
        risk_analysis=risk_analysis,
        parameter_suggestions=suggestions,
        key_insights=insights,
    )
