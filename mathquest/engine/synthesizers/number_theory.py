"""
Number theory synthesizer.

Levels 1-3: GCD and LCM told as ribbon-cutting and bus-schedule stories.
Levels 4-5: primality by trial division, asked as a yes/no "valid code" question.
"""

import random

from mathquest.core.answers import ChoiceAnswer, IntegerAnswer
from mathquest.core.models import BilingualText, MasteryDomain

from . import register
from .base import QuestionDraft, euclid_gcd, hints, is_prime, lcm, pick_template, smallest_factor

DOMAIN = MasteryDomain.NUMBER_THEORY


def _prime_in(rng: random.Random, lo: int, hi: int) -> int:
    candidates = [n for n in range(lo, hi + 1) if is_prime(n)]
    return rng.choice(candidates)


def _composite_in(rng: random.Random, lo: int, hi: int) -> int:
    # Odd composites only; even numbers make the question trivial.
    candidates = [n for n in range(lo, hi + 1) if n % 2 and not is_prime(n)]
    return rng.choice(candidates)


@register(DOMAIN)
class NumberTheorySynthesizer:
    """GCD/LCM and primality questions."""

    def build(self, level: int, rng: random.Random) -> QuestionDraft:
        if level <= 3:
            templates = (self._ribbon_gcd, self._bus_lcm)
        else:
            templates = (self._vault_code, self._robot_badge)
        return pick_template(rng, templates)(level, rng)

    def _ribbon_gcd(self, level: int, rng: random.Random) -> QuestionDraft:
        g = rng.randint(2, 6 + 2 * level)
        m1 = rng.randint(2, 9)
        m2 = rng.randint(2, 9)
        while euclid_gcd(m1, m2) != 1:
            m2 = rng.randint(2, 9)
        a, b = g * m1, g * m2
        answer = euclid_gcd(a, b)
        return QuestionDraft(
            prompt=BilingualText(
                f"Two ribbons are {a} cm and {b} cm long. They are cut into pieces that are all the same length "
                f"with nothing left over. What is the longest possible piece, in cm?",
                f"两根丝带分别长 {a} 厘米和 {b} 厘米。把它们剪成同样长的小段且没有剩余，每段最长是多少厘米？",
            ),
            answer=IntegerAnswer(answer),
            hints=hints(
                ("The piece length must divide both ribbon lengths.", "每段的长度必须同时整除两根丝带的长度。"),
                (f"Find the greatest common divisor of {a} and {b}: {max(a, b)} mod {min(a, b)} = {max(a, b) % min(a, b)}.",
                 f"求 {a} 和 {b} 的最大公约数：{max(a, b)} 除以 {min(a, b)} 余 {max(a, b) % min(a, b)}。"),
            ),
            explanation=BilingualText(
                f"gcd({a}, {b}) = {answer}. The Euclidean algorithm repeats 'divide and keep the remainder' until it is 0.",
                f"gcd({a}, {b}) = {answer}。辗转相除法不断用除数除以余数，直到余数为 0。",
            ),
            domain=DOMAIN,
            knowledge_point_slug="gcd-lcm",
            level=level,
            template="number_theory.ribbon_gcd",
        )

    def _bus_lcm(self, level: int, rng: random.Random) -> QuestionDraft:
        a = rng.randint(4, 8 + 2 * level)
        b = rng.randint(4, 8 + 2 * level)
        while b == a:
            b = rng.randint(4, 8 + 2 * level)
        answer = lcm(a, b)
        g = euclid_gcd(a, b)
        return QuestionDraft(
            prompt=BilingualText(
                f"Bus A leaves the station every {a} minutes and bus B every {b} minutes. "
                f"They just left together. In how many minutes will they next leave together?",
                f"A 路公交车每 {a} 分钟发一班，B 路每 {b} 分钟发一班。它们刚刚同时发车，再过多少分钟会再次同时发车？",
            ),
            answer=IntegerAnswer(answer),
            hints=hints(
                ("You need a time that is a multiple of both intervals.", "需要一个同时是两个间隔倍数的时间。"),
                (f"lcm({a}, {b}) = {a} × {b} ÷ gcd({a}, {b}), and gcd({a}, {b}) = {g}.",
                 f"lcm({a}, {b}) = {a} × {b} ÷ gcd({a}, {b})，而 gcd({a}, {b}) = {g}。"),
            ),
            explanation=BilingualText(
                f"{a} × {b} ÷ {g} = {answer}. Dividing by the GCD removes the shared factor that was counted twice.",
                f"{a} × {b} ÷ {g} = {answer}。除以最大公约数，去掉被重复计算的公因数。",
            ),
            domain=DOMAIN,
            knowledge_point_slug="gcd-lcm",
            level=level,
            template="number_theory.bus_lcm",
        )

    @staticmethod
    def _draw_candidate(level: int, rng: random.Random) -> int:
        lo, hi = (50, 150) if level == 4 else (100, 400)
        if rng.random() < 0.5:
            return _prime_in(rng, lo, hi)
        return _composite_in(rng, lo, hi)

    @staticmethod
    def _primality_explanation(n: int) -> BilingualText:
        factor = smallest_factor(n)
        if factor is None:
            return BilingualText(
                f"{n} has no divisor between 2 and √{n}, so it is prime. "
                f"Checking up to the square root is enough because factors come in pairs.",
                f"{n} 在 2 到 √{n} 之间没有因数，所以是质数。只需检查到平方根，因为因数总是成对出现。",
            )
        return BilingualText(
            f"{n} = {factor} × {n // factor}, so it is not prime. "
            f"Checking up to the square root is enough because factors come in pairs.",
            f"{n} = {factor} × {n // factor}，所以不是质数。只需检查到平方根，因为因数总是成对出现。",
        )

    def _vault_code(self, level: int, rng: random.Random) -> QuestionDraft:
        n = self._draw_candidate(level, rng)
        return QuestionDraft(
            prompt=BilingualText(
                f"A vault only opens for prime codes. Is {n} a valid code? Answer yes or no.",
                f"保险库只接受质数密码。{n} 是有效密码吗？请回答“是”或“否”。",
            ),
            answer=ChoiceAnswer(is_prime(n)),
            hints=hints(
                ("A prime has exactly two divisors: 1 and itself.", "质数恰好有两个因数：1 和它本身。"),
                (f"Try dividing {n} by primes up to √{n} ≈ {int(n**0.5)}.", f"用不超过 √{n} ≈ {int(n**0.5)} 的质数去除 {n}。"),
            ),
            explanation=self._primality_explanation(n),
            domain=DOMAIN,
            knowledge_point_slug="primality",
            level=level,
            template="number_theory.vault_code",
        )

    def _robot_badge(self, level: int, rng: random.Random) -> QuestionDraft:
        n = self._draw_candidate(level, rng)
        return QuestionDraft(
            prompt=BilingualText(
                f"Robots in the prime squad wear badges with prime numbers. Can a robot wear badge {n}? Answer yes or no.",
                f"质数小队的机器人佩戴质数编号的徽章。机器人可以佩戴 {n} 号徽章吗？请回答“是”或“否”。",
            ),
            answer=ChoiceAnswer(is_prime(n)),
            hints=hints(
                ("Rule out small divisors first: 3, 5, 7, ...", "先排除小的因数：3、5、7……"),
                (f"You only need to test divisors up to {int(n**0.5)}.", f"只需检验不超过 {int(n**0.5)} 的因数。"),
            ),
            explanation=self._primality_explanation(n),
            domain=DOMAIN,
            knowledge_point_slug="primality",
            level=level,
            template="number_theory.robot_badge",
        )
