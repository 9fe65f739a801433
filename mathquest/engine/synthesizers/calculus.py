"""
Calculus synthesizer.

Levels 1-3: derivatives by the power rule.
Levels 4-5: definite integrals of linear functions from 0 to an upper bound.
"""

import random

from mathquest.core.answers import FractionAnswer, SymbolicAnswer
from mathquest.core.models import BilingualText, MasteryDomain

from . import register
from .base import QuestionDraft, format_signed, format_term, hints, pick_template

DOMAIN = MasteryDomain.CALCULUS


@register(DOMAIN)
class CalculusSynthesizer:
    """Power-rule derivatives and definite integrals."""

    def build(self, level: int, rng: random.Random) -> QuestionDraft:
        if level <= 3:
            templates = (self._monomial_derivative, self._binomial_derivative)
        else:
            templates = (self._area_under_t, self._water_flow)
        return pick_template(rng, templates)(level, rng)

    def _monomial_derivative(self, level: int, rng: random.Random) -> QuestionDraft:
        a = rng.randint(2, 9)
        n = rng.randint(2, 4 + level)
        derivative = format_term(a * n, n - 1)
        return QuestionDraft(
            prompt=BilingualText(
                f"Find the derivative of f(x) = {format_term(a, n)}.",
                f"求 f(x) = {format_term(a, n)} 的导数。",
            ),
            answer=SymbolicAnswer(derivative),
            hints=hints(
                ("Power rule: bring the exponent down and lower it by one.", "幂法则：把指数移到前面作系数，指数减一。"),
                (f"d/dx x^{n} = {n}x^{n - 1}; then multiply by {a}.", f"d/dx x^{n} = {n}x^{n - 1}，再乘以 {a}。"),
            ),
            explanation=BilingualText(
                f"f'(x) = {a} · {n}x^{n - 1} = {derivative}. Constant factors ride along unchanged through differentiation.",
                f"f'(x) = {a} · {n}x^{n - 1} = {derivative}。常数因子在求导时保持不变。",
            ),
            domain=DOMAIN,
            knowledge_point_slug="derivatives-power-rule",
            level=level,
            template="calculus.monomial_derivative",
        )

    def _binomial_derivative(self, level: int, rng: random.Random) -> QuestionDraft:
        a = rng.randint(2, 9)
        n = rng.randint(2, 3 + level)
        b = rng.randint(1, 12)
        derivative = f"{format_term(a * n, n - 1)}{format_signed(b)}"
        return QuestionDraft(
            prompt=BilingualText(
                f"Differentiate f(x) = {format_term(a, n)} + {format_term(b, 1)}.",
                f"求 f(x) = {format_term(a, n)} + {format_term(b, 1)} 的导数。",
            ),
            answer=SymbolicAnswer(derivative),
            hints=hints(
                ("Differentiate each term separately and add the results.", "逐项求导，再把结果相加。"),
                (f"The derivative of {format_term(b, 1)} is {b}.", f"{format_term(b, 1)} 的导数是 {b}。"),
            ),
            explanation=BilingualText(
                f"f'(x) = {derivative}. The derivative of a sum is the sum of the derivatives.",
                f"f'(x) = {derivative}。和的导数等于导数的和。",
            ),
            domain=DOMAIN,
            knowledge_point_slug="derivatives-power-rule",
            level=level,
            template="calculus.binomial_derivative",
        )

    def _area_under_t(self, level: int, rng: random.Random) -> QuestionDraft:
        upper = rng.randint(2, 6 + 2 * (level - 4))
        result = FractionAnswer.of(upper * upper, 2)
        return QuestionDraft(
            prompt=BilingualText(
                f"Evaluate the definite integral of t dt from 0 to {upper}.",
                f"计算定积分 ∫₀^{upper} t dt。",
            ),
            answer=result,
            hints=hints(
                ("An antiderivative of t is t²/2.", "t 的一个原函数是 t²/2。"),
                (f"Compute {upper}²/2 - 0²/2.", f"计算 {upper}²/2 - 0²/2。"),
            ),
            explanation=BilingualText(
                f"[t²/2] from 0 to {upper} = {upper * upper}/2 = {result.render()}. "
                f"Geometrically this is a right triangle with base and height {upper}.",
                f"[t²/2] 从 0 到 {upper} = {upper * upper}/2 = {result.render()}。几何上这是底和高都为 {upper} 的直角三角形面积。",
            ),
            domain=DOMAIN,
            knowledge_point_slug="definite-integrals",
            level=level,
            template="calculus.area_under_t",
        )

    def _water_flow(self, level: int, rng: random.Random) -> QuestionDraft:
        a = rng.randint(1, 5)
        b = rng.randint(1, 9)
        upper = rng.randint(2, 5 + level)
        result = FractionAnswer.of(a * upper * upper + 2 * b * upper, 2)
        return QuestionDraft(
            prompt=BilingualText(
                f"Water flows into a tank at a rate of r(t) = {a}t + {b} liters per minute. "
                f"How many liters flow in from t = 0 to t = {upper}? Give an exact answer.",
                f"水以 r(t) = {a}t + {b} 升/分钟的速度流入水箱。从 t = 0 到 t = {upper} 共流入多少升？给出精确值。",
            ),
            answer=result,
            hints=hints(
                ("Total amount is the integral of the rate.", "总量等于速率的积分。"),
                (f"An antiderivative is {a}t²/2 + {b}t; evaluate it at {upper}.", f"原函数是 {a}t²/2 + {b}t，代入 {upper}。"),
            ),
            explanation=BilingualText(
                f"{a}·{upper}²/2 + {b}·{upper} = {result.render()}. Integrating a rate accumulates the quantity it measures.",
                f"{a}·{upper}²/2 + {b}·{upper} = {result.render()}。对变化率积分就得到累积的总量。",
            ),
            domain=DOMAIN,
            knowledge_point_slug="definite-integrals",
            level=level,
            template="calculus.water_flow",
        )
