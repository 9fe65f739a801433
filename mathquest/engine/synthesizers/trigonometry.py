"""Trigonometry: special-angle values and SOH-CAH-TOA ratios."""

import math
import random
from dataclasses import dataclass

from mathquest.core.answers import Answer, FractionAnswer, IntegerAnswer, SymbolicAnswer
from mathquest.core.models import BilingualText, MasteryDomain

from . import register
from .base import QuestionDraft, hints, pick_template

DOMAIN = MasteryDomain.TRIGONOMETRY


@dataclass(frozen=True)
class SpecialAngle:
    function: str
    degrees: int
    answer: Answer
    triangle_en: str
    triangle_zh: str


SPECIAL_ANGLES: tuple[SpecialAngle, ...] = (
    SpecialAngle("sin", 30, FractionAnswer.of(1, 2),
                 "a 30-60-90 triangle has sides 1 : √3 : 2", "30-60-90 三角形的三边之比为 1 : √3 : 2"),
    SpecialAngle("cos", 60, FractionAnswer.of(1, 2),
                 "a 30-60-90 triangle has sides 1 : √3 : 2", "30-60-90 三角形的三边之比为 1 : √3 : 2"),
    SpecialAngle("tan", 45, IntegerAnswer(1),
                 "a 45-45-90 triangle has two equal legs", "45-45-90 三角形的两条直角边相等"),
    SpecialAngle("sin", 60, SymbolicAnswer("sqrt(3)/2", approx=math.sqrt(3) / 2),
                 "a 30-60-90 triangle has sides 1 : √3 : 2", "30-60-90 三角形的三边之比为 1 : √3 : 2"),
    SpecialAngle("cos", 45, SymbolicAnswer("sqrt(2)/2", approx=math.sqrt(2) / 2),
                 "a 45-45-90 triangle has sides 1 : 1 : √2", "45-45-90 三角形的三边之比为 1 : 1 : √2"),
)


@register(DOMAIN)
class TrigonometrySynthesizer:

    def build(self, level: int, rng: random.Random) -> QuestionDraft:
        if level <= 3:
            templates = (self._exact_value, self._ramp_angle)
        else:
            templates = (self._sine_ratio, self._cosine_ratio)
        return pick_template(rng, templates)(level, rng)

    def _special_angle_draft(self, level, angle: SpecialAngle, prompt, template) -> QuestionDraft:
        value = angle.answer.render()
        return QuestionDraft(
            prompt=prompt,
            answer=angle.answer,
            hints=hints(
                ("Picture the special right triangle that contains this angle.", "想象包含这个角的特殊直角三角形。"),
                (f"Remember: {angle.triangle_en}.", f"记住：{angle.triangle_zh}。"),
            ),
            explanation=BilingualText(
                f"{angle.function}({angle.degrees}°) = {value}, because {angle.triangle_en}. "
                f"Special angles come from halving an equilateral triangle or a square.",
                f"{angle.function}({angle.degrees}°) = {value}，因为{angle.triangle_zh}。特殊角来自把等边三角形或正方形对半分。",
            ),
            domain=DOMAIN,
            knowledge_point_slug="special-angles",
            level=level,
            template=template,
        )

    def _exact_value(self, level: int, rng: random.Random) -> QuestionDraft:
        angle = SPECIAL_ANGLES[rng.randrange(len(SPECIAL_ANGLES))]
        prompt = BilingualText(
            f"What is the exact value of {angle.function}({angle.degrees}°)?",
            f"{angle.function}({angle.degrees}°) 的精确值是多少？",
        )
        return self._special_angle_draft(level, angle, prompt, "trigonometry.exact_value")

    def _ramp_angle(self, level: int, rng: random.Random) -> QuestionDraft:
        angle = SPECIAL_ANGLES[rng.randrange(len(SPECIAL_ANGLES))]
        prompt = BilingualText(
            f"A skateboard ramp rises at {angle.degrees}° from the ground. "
            f"What is the exact value of {angle.function}({angle.degrees}°)?",
            f"一个滑板坡道与地面成 {angle.degrees}° 角。{angle.function}({angle.degrees}°) 的精确值是多少？",
        )
        return self._special_angle_draft(level, angle, prompt, "trigonometry.ramp_angle")

    @staticmethod
    def _right_triangle(level: int, rng: random.Random) -> tuple[int, int, int]:
        """Two legs and a hypotenuse strictly longer than either leg."""
        opposite = rng.randint(3, 8 + 2 * level)
        adjacent = rng.randint(3, 8 + 2 * level)
        hypotenuse = max(opposite, adjacent) + rng.randint(2, 10)
        return opposite, adjacent, hypotenuse

    def _sine_ratio(self, level: int, rng: random.Random) -> QuestionDraft:
        opposite, adjacent, hypotenuse = self._right_triangle(level, rng)
        result = FractionAnswer.of(opposite, hypotenuse)
        return QuestionDraft(
            prompt=BilingualText(
                f"In a right triangle, the side opposite angle θ is {opposite} and the hypotenuse is {hypotenuse}. "
                f"What is sin θ as a fraction in lowest terms?",
                f"在直角三角形中，角 θ 的对边是 {opposite}，斜边是 {hypotenuse}。sin θ 等于多少？用最简分数表示。",
            ),
            answer=result,
            hints=hints(
                ("SOH: sine = opposite / hypotenuse.", "SOH：正弦 = 对边 / 斜边。"),
                (f"sin θ = {opposite}/{hypotenuse}; simplify if you can.", f"sin θ = {opposite}/{hypotenuse}，能约分就约分。"),
            ),
            explanation=BilingualText(
                f"sin θ = {opposite}/{hypotenuse} = {result.render()}. A ratio of sides does not depend on the triangle's size.",
                f"sin θ = {opposite}/{hypotenuse} = {result.render()}。边的比值与三角形的大小无关。",
            ),
            domain=DOMAIN,
            knowledge_point_slug="soh-cah-toa",
            level=level,
            template="trigonometry.sine_ratio",
        )

    def _cosine_ratio(self, level: int, rng: random.Random) -> QuestionDraft:
        opposite, adjacent, hypotenuse = self._right_triangle(level, rng)
        result = FractionAnswer.of(adjacent, hypotenuse)
        return QuestionDraft(
            prompt=BilingualText(
                f"A kite string is {hypotenuse} m long and the kite is {adjacent} m away horizontally from you. "
                f"What is the cosine of the string's angle with the ground, as a fraction in lowest terms?",
                f"风筝线长 {hypotenuse} 米，风筝与你的水平距离是 {adjacent} 米。风筝线与地面夹角的余弦值是多少？用最简分数表示。",
            ),
            answer=result,
            hints=hints(
                ("CAH: cosine = adjacent / hypotenuse.", "CAH：余弦 = 邻边 / 斜边。"),
                (f"cos θ = {adjacent}/{hypotenuse}; simplify if you can.", f"cos θ = {adjacent}/{hypotenuse}，能约分就约分。"),
            ),
            explanation=BilingualText(
                f"cos θ = {adjacent}/{hypotenuse} = {result.render()}. The string is the hypotenuse and the ground distance is adjacent to θ.",
                f"cos θ = {adjacent}/{hypotenuse} = {result.render()}。风筝线是斜边，地面距离是 θ 的邻边。",
            ),
            domain=DOMAIN,
            knowledge_point_slug="soh-cah-toa",
            level=level,
            template="trigonometry.cosine_ratio",
        )
