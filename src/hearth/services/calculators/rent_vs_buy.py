# src/hearth/services/calculators/rent_vs_buy.py

from __future__ import annotations

from hearth.adapters.config import config
from hearth.domain.calculator import CalculatorConfig, CalculatorResult, InputField
from hearth.domain.rent_vs_buy import RentVsBuyInputs, compare_rent_vs_buy

from .common import MAX_PRICE, price_field, rate_pct_field, require_down_payment_within, result, term_years_field


def _owner_cost(home_price: float, annual_pct: float) -> float:
    return home_price * annual_pct / 100 / 12


def calculate(inputs: dict[str, float]) -> list[CalculatorResult]:
    """
    Total cost of renting vs buying over the holding period. Property tax,
    insurance, maintenance and closing costs are estimated from the home
    price using the configured owner-cost rates.
    """
    home_price = inputs["homePrice"]
    down_payment = inputs["downPayment"]
    require_down_payment_within(home_price, down_payment)

    years = int(inputs["yearsToStay"])
    rent_inflation_pct = inputs.get("rentInflationRate", config.RENT_INFLATION_PCT)
    closing_costs_buy = home_price * config.BUY_CLOSING_COST_PCT / 100

    rvb = compare_rent_vs_buy(
        RentVsBuyInputs(
            home_price=home_price,
            down_payment=down_payment,
            annual_rate=inputs["interestRate"] / 100,
            term_months=int(inputs.get("loanTerm", config.DEFAULT_LOAN_TERM_YEARS)) * 12,
            years=years,
            monthly_rent=inputs["rentAmount"],
            rent_increase_rate=rent_inflation_pct / 100,
            appreciation_rate=inputs["appreciationRate"] / 100,
            monthly_tax=_owner_cost(home_price, config.OWNER_TAX_RATE_PCT),
            monthly_insurance=_owner_cost(home_price, config.OWNER_INSURANCE_RATE_PCT),
            monthly_hoa=inputs.get("hoa", 0.0),
            monthly_maintenance=_owner_cost(home_price, config.OWNER_MAINTENANCE_RATE_PCT),
            closing_costs_buy=closing_costs_buy,
            sell_closing_cost_rate=config.SELL_CLOSING_COST_PCT / 100,
        )
    )

    if rvb.net_difference > 0:
        verdict = "Buying is more cost-effective"
    elif rvb.net_difference < 0:
        verdict = "Renting is more cost-effective"
    else:
        verdict = "Costs are equal"

    if rvb.recommendation == "buy":
        break_even_note = "Buying is already more cost-effective"
    elif rvb.break_even_years > 0:
        break_even_note = "Years until buying becomes more cost-effective"
    else:
        break_even_note = "Buying does not catch up within the loan term"

    return [
        result(
            "Total Cost of Buying",
            rvb.total_buy_cost,
            description=f"Net cost of buying over {years} years (after equity and appreciation)",
            highlight=True,
        ),
        result(
            "Total Cost of Renting",
            rvb.total_rent_cost,
            description=f"Total rent paid over {years} years (with {rent_inflation_pct:g}% annual increases)",
            highlight=True,
        ),
        result(
            "Net Difference",
            abs(rvb.net_difference),
            description="Buying saves you this amount" if rvb.net_difference > 0 else "Renting saves you this amount",
            highlight=True,
        ),
        # 1 = buy, 0 = rent; the text carries the verdict
        result("Recommendation", 1 if rvb.recommendation == "buy" else 0, fmt="number", description=verdict),
        result("Monthly Mortgage Payment", rvb.monthly_pi, description="Principal and interest payment"),
        result(
            "Total Monthly Homeownership Cost",
            rvb.monthly_ownership_cost,
            description="Includes P&I, taxes, insurance, HOA, and maintenance",
        ),
        result("Current Monthly Rent", inputs["rentAmount"], description="Your current monthly rent payment"),
        result("Equity Built", rvb.equity_built, description="Principal paid down plus home appreciation"),
        result("Home Value After Period", rvb.home_value_after, description=f"Estimated home value after {years} years"),
        result(
            "Total Appreciation",
            rvb.home_value_after - home_price,
            description=f"Home value change over {years} years",
        ),
        result(
            "Closing Costs",
            closing_costs_buy,
            description=f"Estimated closing costs ({config.BUY_CLOSING_COST_PCT:g}% of home price)",
        ),
        result("Selling Costs", rvb.closing_costs_sell, description="Estimated cost to sell at the end of the period"),
        result("Break-Even Point", rvb.break_even_years, fmt="number", description=break_even_note),
    ]


CONFIG = CalculatorConfig(
    id="rent-vs-buy",
    title="Rent vs Buy Calculator",
    description="Compare the total cost of renting with buying a home over the time you plan to stay.",
    inputs=[
        price_field("homePrice", "Home Price", "350000", "The purchase price of the home"),
        InputField(
            name="downPayment",
            label="Down Payment",
            type="currency",
            min=0,
            max=MAX_PRICE,
            step=1000,
            placeholder="70000",
            help_text="Amount you plan to put down on the home",
        ),
        rate_pct_field("interestRate", "Interest Rate (%)", config.DEFAULT_INTEREST_RATE_PCT),
        term_years_field("loanTerm", "Loan Term (years)", config.DEFAULT_LOAN_TERM_YEARS),
        InputField(
            name="rentAmount",
            label="Monthly Rent",
            type="currency",
            min=0,
            max=100000,
            step=50,
            placeholder="2000",
            help_text="What you pay in rent today",
        ),
        InputField(
            name="yearsToStay",
            label="Years to Stay",
            type="number",
            min=1,
            max=30,
            step=1,
            integer=True,
            placeholder="7",
            help_text="How long you expect to live in the home",
        ),
        InputField(
            name="appreciationRate",
            label="Home Appreciation Rate (%)",
            type="percentage",
            min=-10,
            max=20,
            step=0.1,
            placeholder=f"{config.APPRECIATION_RATE_PCT:.1f}",
            default_value=config.APPRECIATION_RATE_PCT,
            help_text="Expected yearly change in home value; may be negative",
        ),
        InputField(
            name="rentInflationRate",
            label="Rent Increase Rate (%)",
            type="percentage",
            min=-10,
            max=20,
            step=0.1,
            required=False,
            placeholder=f"{config.RENT_INFLATION_PCT:.1f}",
            default_value=config.RENT_INFLATION_PCT,
            help_text="Expected yearly rent increase",
        ),
        InputField(
            name="hoa",
            label="Monthly HOA Fees",
            type="currency",
            min=0,
            max=10000,
            step=50,
            required=False,
            placeholder="0",
            default_value=0,
        ),
    ],
    calculate=calculate,
    keywords=("rent vs buy calculator", "should I buy a house", "renting vs buying"),
)
