"""Fraction addition, fraction of a whole and fraction times integer."""

import random

from mathquest.core.answers import FractionAnswer, IntegerAnswer
from mathquest.core.models import BilingualText, MasteryDomain

from . import register
from .base import QuestionDraft, euclid_gcd, hints, lcm, pick_template

DOMAIN = MasteryDomain.FRACTIONS


@register(DOMAIN)
class FractionsSynthesizer:

    def build(self, level: int, rng: random.Random) -> QuestionDraft:
        if level <= 3:
            templates = (self._same_denominator, self._fraction_of_whole)
        else:
            templates = (self._different_denominator, self._fraction_times_integer)
        return pick_template(rng, templates)(level, rng)

    def _same_denominator(self, level: int, rng: random.Random) -> QuestionDraft:
        den = rng.randint(4, 12)
        a = rng.randint(1, den - 1)
        b = rng.randint(1, den - 1)
        result = FractionAnswer.of(a + b, den)
        return QuestionDraft(
            prompt=BilingualText(
                f"Leo eats {a}/{den} of a pizza and Ana eats {b}/{den} of the same size pizza. "
                f"How much pizza did they eat together? Give a fraction in lowest terms.",
                f"小乐吃了 {a}/{den} 个披萨，安娜吃了 {b}/{den} 个同样大小的披萨。他们一共吃了多少个披萨？用最简分数表示。",
            ),
            answer=result,
            hints=hints(
                ("The pieces are the same size, so only the count of pieces changes.", "每块大小相同，所以只有块数在变化。"),
                (f"Add the numerators: ({a} + {b})/{den}, then simplify.", f"分子相加：({a} + {b})/{den}，再约分。"),
            ),
            explanation=BilingualText(
                f"{a}/{den} + {b}/{den} = {a + b}/{den} = {result.render()}. "
                f"The denominator names the piece size, so it stays the same when adding.",
                f"{a}/{den} + {b}/{den} = {a + b}/{den} = {result.render()}。分母表示每份的大小，相加时保持不变。",
            ),
            domain=DOMAIN,
            knowledge_point_slug="same-denominator",
            level=level,
            template="fractions.same_denominator",
        )

    def _fraction_of_whole(self, level: int, rng: random.Random) -> QuestionDraft:
        den = rng.randint(2, 10)
        num = rng.randint(1, den - 1)
        whole = den * rng.randint(2, 12)
        part = whole // den * num
        return QuestionDraft(
            prompt=BilingualText(
                f"A class has {whole} students and {num}/{den} of them walk to school. How many students walk?",
                f"一个班有 {whole} 名学生，其中 {num}/{den} 步行上学。有多少名学生步行上学？",
            ),
            answer=IntegerAnswer(part),
            hints=hints(
                ("Split the class into equal groups first.", "先把全班平均分成若干组。"),
                (f"{whole} ÷ {den} = {whole // den} per group; take {num} groups.", f"{whole} ÷ {den} = {whole // den}（每组人数），取 {num} 组。"),
            ),
            explanation=BilingualText(
                f"{whole} ÷ {den} × {num} = {part}. Finding a fraction of a number is dividing by the denominator "
                f"and multiplying by the numerator.",
                f"{whole} ÷ {den} × {num} = {part}。求一个数的几分之几，就是先除以分母再乘以分子。",
            ),
            domain=DOMAIN,
            knowledge_point_slug="same-denominator",
            level=level,
            template="fractions.fraction_of_whole",
        )

    def _different_denominator(self, level: int, rng: random.Random) -> QuestionDraft:
        b = rng.randint(2, 9)
        d = rng.randint(2, 9)
        while d == b:
            d = rng.randint(2, 9)
        a = rng.randint(1, b - 1)
        c = rng.randint(1, d - 1)
        result = FractionAnswer.of(a * d + c * b, b * d)
        common = lcm(b, d)
        return QuestionDraft(
            prompt=BilingualText(
                f"Compute {a}/{b} + {c}/{d}. Give a fraction in lowest terms.",
                f"计算 {a}/{b} + {c}/{d}，结果用最简分数表示。",
            ),
            answer=result,
            hints=hints(
                ("You can only add pieces of the same size; find a common denominator.", "只有大小相同的份才能相加，先通分。"),
                (f"The least common denominator of {b} and {d} is {common}.", f"{b} 和 {d} 的最小公分母是 {common}。"),
            ),
            explanation=BilingualText(
                f"{a}/{b} + {c}/{d} = {a * common // b}/{common} + {c * common // d}/{common} = {result.render()}. "
                f"Rewriting over a common denominator changes the name of each fraction, not its value.",
                f"{a}/{b} + {c}/{d} = {a * common // b}/{common} + {c * common // d}/{common} = {result.render()}。"
                f"通分只改变分数的写法，不改变它的大小。",
            ),
            domain=DOMAIN,
            knowledge_point_slug="different-denominator",
            level=level,
            template="fractions.different_denominator",
        )

    def _fraction_times_integer(self, level: int, rng: random.Random) -> QuestionDraft:
        den = rng.randint(3, 12)
        num = rng.randint(1, den - 1)
        k = rng.randint(2, 15)
        result = FractionAnswer.of(num * k, den)
        cancel = euclid_gcd(num * k, den)
        return QuestionDraft(
            prompt=BilingualText(
                f"Each bottle holds {num}/{den} liter of juice. How many liters do {k} bottles hold? "
                f"Give a fraction in lowest terms.",
                f"每瓶装 {num}/{den} 升果汁。{k} 瓶一共装多少升？结果用最简分数表示。",
            ),
            answer=result,
            hints=hints(
                ("Repeated addition of the same fraction is multiplication.", "相同分数的连加就是乘法。"),
                (f"{num}/{den} × {k} = {num * k}/{den}; divide top and bottom by {cancel}.",
                 f"{num}/{den} × {k} = {num * k}/{den}；分子分母同时除以 {cancel}。"),
            ),
            explanation=BilingualText(
                f"{num}/{den} × {k} = {num * k}/{den} = {result.render()}. "
                f"Multiplying by a whole number scales the numerator only.",
                f"{num}/{den} × {k} = {num * k}/{den} = {result.render()}。乘以整数只放大分子。",
            ),
            domain=DOMAIN,
            knowledge_point_slug="different-denominator",
            level=level,
            template="fractions.fraction_times_integer",
        )
