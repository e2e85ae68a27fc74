"""Black-Scholes option pricing, sensitivities and implied volatility."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from .root_finding import RootFinder

__all__ = [
    "OptionType",
    "CashPhysical",
    "GreeksResult",
    "bs_price",
    "bs_delta",
    "bs_gamma",
    "bs_price_cqs",
    "bs_delta_cqs",
    "implied_volatility",
    "generalized_black_scholes",
]

_SQRT_2 = math.sqrt(2.0)
_SQRT_2PI = math.sqrt(2.0 * math.pi)
_DAY = 1.0 / 365.0


class OptionType(Enum):
    """Whether the option is a call or a put."""

    CALL = "call"
    PUT = "put"


class CashPhysical(Enum):
    """How the option settles."""

    CASH = "cash"
    PHYSICAL = "physical"


@dataclass(frozen=True)
class GreeksResult:
    """Premium and sensitivities of an option."""

    premium: float = 0.0
    delta: float = 0.0
    gamma: float = 0.0
    vega: float = 0.0
    theta: float = 0.0
    rho: float = 0.0
    theta_mart: float = 0.0
    volga: float = 0.0
    vanna: float = 0.0
    speed: float = 0.0
    charm: float = 0.0


def _norm_cdf(x: float) -> float:
    return 0.5 * math.erfc(-x / _SQRT_2)


def _norm_pdf(x: float) -> float:
    return math.exp(-0.5 * x * x) / _SQRT_2PI


def _divide(numerator: float, denominator: float) -> float:
    """Divide following floating-point rules, so a zero denominator gives inf or nan."""
    if denominator == 0.0:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def _d1(
    spot: float,
    strike: float,
    time_to_expiry: float,
    rate: float,
    dividend_yield: float,
    volatility: float,
) -> float:
    numerator = math.log(spot / strike) + (
        (rate - dividend_yield) + volatility * volatility / 2.0
    ) * time_to_expiry
    return _divide(numerator, volatility * math.sqrt(time_to_expiry))


def _check_type(option_type: OptionType) -> None:
    if option_type not in (OptionType.CALL, OptionType.PUT):
        raise ValueError("Invalid Option Type")


def bs_price(
    option_type: OptionType,
    spot: float,
    strike: float,
    time_to_expiry: float,
    rate: float,
    dividend_yield: float,
    volatility: float,
) -> float:
    """Return the Black-Scholes premium of a European option."""
    _check_type(option_type)
    d1 = _d1(spot, strike, time_to_expiry, rate, dividend_yield, volatility)
    d2 = d1 - volatility * math.sqrt(time_to_expiry)
    spot_df = math.exp(-dividend_yield * time_to_expiry)
    strike_df = math.exp(-rate * time_to_expiry)
    if option_type is OptionType.CALL:
        return spot * spot_df * _norm_cdf(d1) - strike * strike_df * _norm_cdf(d2)
    return strike * strike_df * _norm_cdf(-d2) - spot * spot_df * _norm_cdf(-d1)


def bs_delta(
    option_type: OptionType,
    spot: float,
    strike: float,
    time_to_expiry: float,
    rate: float,
    dividend_yield: float,
    volatility: float,
) -> float:
    """Return the Black-Scholes delta."""
    _check_type(option_type)
    d1 = _d1(spot, strike, time_to_expiry, rate, dividend_yield, volatility)
    spot_df = math.exp(-dividend_yield * time_to_expiry)
    if option_type is OptionType.CALL:
        return spot_df * _norm_cdf(d1)
    return spot_df * (_norm_cdf(d1) - 1.0)


def bs_gamma(
    option_type: OptionType,
    spot: float,
    strike: float,
    time_to_expiry: float,
    rate: float,
    dividend_yield: float,
    volatility: float,
) -> float:
    """Return the Black-Scholes gamma, which is the same for calls and puts."""
    _check_type(option_type)
    d1 = _d1(spot, strike, time_to_expiry, rate, dividend_yield, volatility)
    return _divide(
        math.exp(-dividend_yield * time_to_expiry) * _norm_pdf(d1),
        spot * volatility * math.sqrt(time_to_expiry),
    )


def _cqs_inputs(
    spot: float,
    pv_divs: float,
    t: float,
    stock_borrow: float,
    borrow_time: float,
    disc_settle_v: float,
    disc_settle_e: float,
) -> tuple[float, float, float]:
    cqs_rate = -math.log(disc_settle_e / disc_settle_v) / t
    spot_adj = spot - pv_divs / disc_settle_v
    cqs_borrow = stock_borrow * borrow_time
    return cqs_rate, spot_adj, cqs_borrow


def _settlement_factor(
    cash_physical: CashPhysical,
    disc_settle_v: float,
    disc_settle_e: float,
    disc_spot_e: float,
) -> float:
    if cash_physical is CashPhysical.PHYSICAL:
        return disc_settle_v
    if cash_physical is CashPhysical.CASH:
        return disc_settle_v * disc_spot_e / disc_settle_e
    raise ValueError("Invalid Settlement Type")


def bs_price_cqs(
    spot: float,
    pv_divs: float,
    strike: float,
    volatility: float,
    t: float,
    stock_borrow: float,
    borrow_time: float,
    disc_settle_v: float,
    disc_settle_e: float,
    disc_spot_e: float,
    option_type: OptionType,
    cash_physical: CashPhysical,
) -> float:
    """Price an option from settlement discount factors, dividends and stock borrow."""
    factor = _settlement_factor(cash_physical, disc_settle_v, disc_settle_e, disc_spot_e)
    cqs_rate, spot_adj, cqs_borrow = _cqs_inputs(
        spot, pv_divs, t, stock_borrow, borrow_time, disc_settle_v, disc_settle_e
    )
    return bs_price(option_type, spot_adj, strike, t, cqs_rate, cqs_borrow, volatility) * factor


def bs_delta_cqs(
    spot: float,
    pv_divs: float,
    strike: float,
    volatility: float,
    t: float,
    stock_borrow: float,
    borrow_time: float,
    disc_settle_v: float,
    disc_settle_e: float,
    disc_spot_e: float,
    option_type: OptionType,
    cash_physical: CashPhysical,
) -> float:
    """Delta of bs_price_cqs from a 0.1% bump of the spot."""
    factor = _settlement_factor(cash_physical, disc_settle_v, disc_settle_e, disc_spot_e)
    cqs_rate, spot_adj, cqs_borrow = _cqs_inputs(
        spot, pv_divs, t, stock_borrow, borrow_time, disc_settle_v, disc_settle_e
    )
    bumped_spot_adj = spot * 1.001 - pv_divs / disc_settle_v
    raw = bs_price(option_type, spot_adj, strike, t, cqs_rate, cqs_borrow, volatility) * factor
    bumped = (
        bs_price(option_type, bumped_spot_adj, strike, t, cqs_rate, cqs_borrow, volatility)
        * factor
    )
    return (bumped - raw) / (spot * 0.001)


def implied_volatility(
    option_type: OptionType,
    spot: float,
    strike: float,
    time_to_expiry: float,
    rate: float,
    dividend_yield: float,
    market_price: float,
) -> float:
    """Return the volatility at which the Black-Scholes premium equals market_price."""

    def objective(volatility: float) -> float:
        model = bs_price(
            option_type, spot, strike, time_to_expiry, rate, dividend_yield, volatility
        )
        return model - market_price

    finder = RootFinder()
    lower, upper = finder.find_bracket(objective, 0.2, 0.3)
    return finder.find_root(objective, lower, upper)


def generalized_black_scholes(
    option_type: OptionType,
    spot: float,
    pv_div: float,
    strike: float,
    time_to_expiry: float,
    rate: float,
    dividend_yield: float,
    volatility: float,
) -> GreeksResult:
    """Return the premium and sensitivities of an option on a dividend-paying stock.

    Expired options (time_to_expiry <= 0) have all values zero.
    """
    _check_type(option_type)
    if time_to_expiry <= 0:
        return GreeksResult()

    h = 0.0001
    hs = 0.0001
    hv = 0.0001
    s = spot - pv_div

    def price(
        spot_: float = s,
        t: float = time_to_expiry,
        r: float = rate,
        q: float = dividend_yield,
        vol: float = volatility,
    ) -> float:
        return bs_price(option_type, spot_, strike, t, r, q, vol)

    def delta(spot_: float = s, t: float = time_to_expiry, vol: float = volatility) -> float:
        return bs_delta(option_type, spot_, strike, t, rate, dividend_yield, vol)

    def gamma(spot_: float) -> float:
        return bs_gamma(
            option_type, spot_, strike, time_to_expiry, rate, dividend_yield, volatility
        )

    d1 = _d1(s, strike, time_to_expiry, rate, dividend_yield, volatility)
    d2 = d1 - volatility * math.sqrt(time_to_expiry)
    spot_df = math.exp(-dividend_yield * time_to_expiry)
    strike_df = math.exp(-rate * time_to_expiry)
    if option_type is OptionType.CALL:
        premium = s * spot_df * _norm_cdf(d1) - strike * strike_df * _norm_cdf(d2)
        first_delta = spot_df * _norm_cdf(d1)
    else:
        premium = strike * strike_df * _norm_cdf(-d2) - s * spot_df * _norm_cdf(-d1)
        first_delta = spot_df * (_norm_cdf(d1) - 1.0)

    bumped_spot = spot * 1.00001 - pv_div
    spot_step = spot * 1.00001 - spot

    gamma_fd = (delta(bumped_spot) - delta(s)) / spot_step
    vega = (price(vol=volatility + 2.0 * h) - price(vol=volatility - 2.0 * h)) / (4.0 * h)

    forward_spot = s * math.exp((rate - dividend_yield) * time_to_expiry)
    if time_to_expiry <= _DAY:
        theta = price(vol=0.0) - premium
        theta_mart = strike_df * price(forward_spot, r=0.0, q=0.0, vol=0.0) - premium
        charm = delta(vol=0.0) - delta()
    else:
        theta = price(t=time_to_expiry - _DAY) - premium
        theta_mart = (
            strike_df * price(forward_spot, t=time_to_expiry - _DAY, r=0.0, q=0.0) - premium
        )
        charm = delta(t=time_to_expiry - _DAY) - delta()

    rho = price(r=rate - 0.0001) - premium
    volga = (
        price(vol=volatility - 2.0 * h)
        + 4.0 * price(vol=volatility - h)
        - 10.0 * price()
        + 4.0 * price(vol=volatility + h)
        + price(vol=volatility + 2.0 * h)
    ) / (8.0 * h * h)
    vanna = (
        price(s + hs, vol=volatility + hv)
        - price(s - hs, vol=volatility + hv)
        - price(s + hs, vol=volatility - hv)
        + price(s - hs, vol=volatility - hv)
    ) / (4.0 * hs * hv)
    speed = (gamma(bumped_spot) - gamma(s)) / spot_step

    return GreeksResult(
        premium=premium,
        delta=first_delta,
        gamma=gamma_fd,
        vega=vega,
        theta=theta,
        rho=rho,
        theta_mart=theta_mart,
        volga=volga,
        vanna=vanna,
        speed=speed,
        charm=charm,
    )