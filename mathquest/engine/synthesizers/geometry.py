"""
Geometry synthesizer.

Levels 1-2 ask for rectangle and composite (outer minus cut-out) areas.
Levels 3-5 apply the Pythagorean theorem; answers are rounded to 2 decimals.
"""

import math
import random

from mathquest.core.answers import DecimalAnswer, IntegerAnswer
from mathquest.core.models import BilingualText, MasteryDomain

from . import register
from .base import QuestionDraft, hints, pick_template

DOMAIN = MasteryDomain.GEOMETRY


@register(DOMAIN)
class GeometrySynthesizer:
    """Areas and right triangles."""

    def build(self, level: int, rng: random.Random) -> QuestionDraft:
        if level <= 2:
            templates = (self._rectangle_area, self._composite_area)
        else:
            templates = (self._hypotenuse, self._missing_leg)
        return pick_template(rng, templates)(level, rng)

    def _rectangle_area(self, level: int, rng: random.Random) -> QuestionDraft:
        length = rng.randint(4, 12 if level == 1 else 25)
        width = rng.randint(3, 10 if level == 1 else 18)
        area = length * width
        return QuestionDraft(
            prompt=BilingualText(
                f"A rectangular garden is {length} m long and {width} m wide. What is its area in square meters?",
                f"一个长方形花园长 {length} 米、宽 {width} 米。它的面积是多少平方米？",
            ),
            answer=IntegerAnswer(area),
            hints=hints(
                ("Area counts the unit squares that cover the shape.", "面积就是铺满图形所需的单位正方形个数。"),
                (f"Multiply length by width: {length} × {width}.", f"长乘宽：{length} × {width}。"),
            ),
            explanation=BilingualText(
                f"{length} × {width} = {area} m². Each row holds {length} squares and there are {width} rows.",
                f"{length} × {width} = {area} 平方米。每行有 {length} 个单位正方形，共有 {width} 行。",
            ),
            domain=DOMAIN,
            knowledge_point_slug="area-perimeter",
            level=level,
            template="geometry.rectangle_area",
        )

    def _composite_area(self, level: int, rng: random.Random) -> QuestionDraft:
        outer_l = rng.randint(10, 20 if level == 1 else 30)
        outer_w = rng.randint(8, 16 if level == 1 else 24)
        inner_l = rng.randint(2, outer_l - 3)
        inner_w = rng.randint(2, outer_w - 3)
        outer = outer_l * outer_w
        inner = inner_l * inner_w
        area = outer - inner
        return QuestionDraft(
            prompt=BilingualText(
                f"A {outer_l} m by {outer_w} m lawn has a {inner_l} m by {inner_w} m pond dug into it. "
                f"How many square meters of grass are left?",
                f"一块 {outer_l} 米 × {outer_w} 米的草坪中挖了一个 {inner_l} 米 × {inner_w} 米的池塘。还剩多少平方米草地？",
            ),
            answer=IntegerAnswer(area),
            hints=hints(
                ("Find the whole area, then take away the part that is missing.", "先求整体面积，再减去缺少的部分。"),
                (f"{outer_l} × {outer_w} - {inner_l} × {inner_w}.", f"{outer_l} × {outer_w} - {inner_l} × {inner_w}。"),
            ),
            explanation=BilingualText(
                f"{outer} - {inner} = {area} m². Composite areas are often easiest as a big shape minus a small one.",
                f"{outer} - {inner} = {area} 平方米。组合图形的面积常常用大图形减小图形来求最方便。",
            ),
            domain=DOMAIN,
            knowledge_point_slug="area-perimeter",
            level=level,
            template="geometry.composite_area",
        )

    def _hypotenuse(self, level: int, rng: random.Random) -> QuestionDraft:
        a = rng.randint(3, 12 + 4 * (level - 3))
        b = rng.randint(3, 12 + 4 * (level - 3))
        c = math.hypot(a, b)
        return QuestionDraft(
            prompt=BilingualText(
                f"A right triangle has legs {a} and {b}. How long is the hypotenuse? Round to 2 decimal places.",
                f"直角三角形的两条直角边分别为 {a} 和 {b}。斜边长是多少？保留两位小数。",
            ),
            answer=DecimalAnswer(c, places=2),
            hints=hints(
                ("Use a² + b² = c².", "使用 a² + b² = c²。"),
                (f"c = √({a}² + {b}²) = √{a * a + b * b}.", f"c = √({a}² + {b}²) = √{a * a + b * b}。"),
            ),
            explanation=BilingualText(
                f"c = √{a * a + b * b} ≈ {c:.2f}. The hypotenuse is always the longest side, so it must exceed {max(a, b)}.",
                f"c = √{a * a + b * b} ≈ {c:.2f}。斜边总是最长的边，所以一定大于 {max(a, b)}。",
            ),
            domain=DOMAIN,
            knowledge_point_slug="pythagorean-theorem",
            level=level,
            template="geometry.hypotenuse",
        )

    def _missing_leg(self, level: int, rng: random.Random) -> QuestionDraft:
        a = rng.randint(3, 12 + 4 * (level - 3))
        c = a + rng.randint(2, 10)
        b = math.sqrt(c * c - a * a)
        return QuestionDraft(
            prompt=BilingualText(
                f"A {c} ft ladder leans against a wall with its foot {a} ft from the wall. "
                f"How high up the wall does it reach? Round to 2 decimal places.",
                f"一架 {c} 英尺长的梯子靠在墙上，梯脚离墙 {a} 英尺。梯子顶端离地多高？保留两位小数。",
            ),
            answer=DecimalAnswer(b, places=2),
            hints=hints(
                ("The ladder is the hypotenuse of a right triangle.", "梯子是直角三角形的斜边。"),
                (f"b = √({c}² - {a}²) = √{c * c - a * a}.", f"b = √({c}² - {a}²) = √{c * c - a * a}。"),
            ),
            explanation=BilingualText(
                f"b = √{c * c - a * a} ≈ {b:.2f}. To find a leg, subtract squares instead of adding them.",
                f"b = √{c * c - a * a} ≈ {b:.2f}。求直角边时，平方要相减而不是相加。",
            ),
            domain=DOMAIN,
            knowledge_point_slug="pythagorean-theorem",
            level=level,
            template="geometry.missing_leg",
        )
