"""Algebra: one-step, two-step and proportion equations, then quadratics."""

import random

from mathquest.core.answers import IntegerAnswer
from mathquest.core.models import BilingualText, MasteryDomain

from . import register
from .base import QuestionDraft, hints, pick_template

DOMAIN = MasteryDomain.ALGEBRA


@register(DOMAIN)
class AlgebraSynthesizer:

    def build(self, level: int, rng: random.Random) -> QuestionDraft:
        if level <= 2:
            templates = (self._plus_equation, self._minus_equation)
        elif level <= 4:
            templates = (self._two_step_equation, self._proportion)
        else:
            templates = (self._sum_product_roots, self._completed_square)
        return pick_template(rng, templates)(level, rng)

    def _plus_equation(self, level: int, rng: random.Random) -> QuestionDraft:
        x = rng.randint(12, 40)
        k = rng.randint(3, 11)
        rhs = x + k
        return QuestionDraft(
            prompt=BilingualText(
                f"Solve for x: x + {k} = {rhs}",
                f"解方程：x + {k} = {rhs}",
            ),
            answer=IntegerAnswer(x),
            hints=hints(
                ("Undo the addition so x is alone.", "把加上的数去掉，让 x 单独留在一边。"),
                (f"Subtract {k} from both sides.", f"两边同时减去 {k}。"),
            ),
            explanation=BilingualText(
                f"x = {rhs} - {k} = {x}. Whatever you do to one side of an equation you must do to the other.",
                f"x = {rhs} - {k} = {x}。对方程一边做的运算，另一边也必须同样进行。",
            ),
            domain=DOMAIN,
            knowledge_point_slug="linear-equations-basic",
            level=level,
            template="algebra.plus_equation",
        )

    def _minus_equation(self, level: int, rng: random.Random) -> QuestionDraft:
        x = rng.randint(12, 40)
        k = rng.randint(3, 11)
        rhs = x - k
        return QuestionDraft(
            prompt=BilingualText(
                f"Solve for x: x - {k} = {rhs}",
                f"解方程：x - {k} = {rhs}",
            ),
            answer=IntegerAnswer(x),
            hints=hints(
                ("Subtraction is undone by addition.", "减法可以用加法抵消。"),
                (f"Add {k} to both sides.", f"两边同时加上 {k}。"),
            ),
            explanation=BilingualText(
                f"x = {rhs} + {k} = {x}. Check by substituting: {x} - {k} = {rhs}.",
                f"x = {rhs} + {k} = {x}。代入验算：{x} - {k} = {rhs}。",
            ),
            domain=DOMAIN,
            knowledge_point_slug="linear-equations-basic",
            level=level,
            template="algebra.minus_equation",
        )

    def _two_step_equation(self, level: int, rng: random.Random) -> QuestionDraft:
        a = rng.randint(2, 9)
        x = rng.randint(2, 15)
        b = rng.randint(1, 20)
        rhs = a * x + b
        return QuestionDraft(
            prompt=BilingualText(
                f"Solve for x: {a}x + {b} = {rhs}",
                f"解方程：{a}x + {b} = {rhs}",
            ),
            answer=IntegerAnswer(x),
            hints=hints(
                ("Peel off the operations in reverse order.", "按相反的顺序逐步去掉运算。"),
                (f"First subtract {b}, then divide by {a}.", f"先减去 {b}，再除以 {a}。"),
            ),
            explanation=BilingualText(
                f"{a}x = {rhs} - {b} = {rhs - b}, so x = {rhs - b} / {a} = {x}. "
                f"Undo addition before multiplication, the reverse of the order of operations.",
                f"{a}x = {rhs} - {b} = {rhs - b}，所以 x = {rhs - b} ÷ {a} = {x}。"
                f"先撤销加法再撤销乘法，正好与运算顺序相反。",
            ),
            domain=DOMAIN,
            knowledge_point_slug="linear-equations-multi",
            level=level,
            template="algebra.two_step_equation",
        )

    def _proportion(self, level: int, rng: random.Random) -> QuestionDraft:
        d2 = rng.randint(2, 9)
        n = rng.randint(1, 12)
        k = rng.randint(2, 6)
        d1 = d2 * k
        x = n * k
        return QuestionDraft(
            prompt=BilingualText(
                f"A recipe uses {n} cups of flour for every {d2} loaves. "
                f"Solve the proportion x / {d1} = {n} / {d2} to find the flour for {d1} loaves.",
                f"一个食谱每做 {d2} 个面包要用 {n} 杯面粉。解比例式 x / {d1} = {n} / {d2}，求做 {d1} 个面包需要的面粉。",
            ),
            answer=IntegerAnswer(x),
            hints=hints(
                ("Equal ratios scale by the same factor.", "相等的比按同一个倍数放大。"),
                (f"{d1} is {k} times {d2}, so x is {k} times {n}.", f"{d1} 是 {d2} 的 {k} 倍，所以 x 是 {n} 的 {k} 倍。"),
            ),
            explanation=BilingualText(
                f"x = {n} × {d1} / {d2} = {n} × {k} = {x}. Cross-multiplying gives the same result: {d2}x = {n} × {d1}.",
                f"x = {n} × {d1} ÷ {d2} = {n} × {k} = {x}。交叉相乘也得到同样的结果：{d2}x = {n} × {d1}。",
            ),
            domain=DOMAIN,
            knowledge_point_slug="linear-equations-multi",
            level=level,
            template="algebra.proportion",
        )

    def _sum_product_roots(self, level: int, rng: random.Random) -> QuestionDraft:
        r1 = rng.randint(2, 9)
        r2 = rng.randint(10, 18)
        total = r1 + r2
        product = r1 * r2
        larger = max(r1, r2)
        return QuestionDraft(
            prompt=BilingualText(
                f"Solve x^2 - {total}x + {product} = 0. Give the larger root.",
                f"解方程 x^2 - {total}x + {product} = 0，写出较大的根。",
            ),
            answer=IntegerAnswer(larger),
            hints=hints(
                (f"Look for two numbers that add to {total} and multiply to {product}.",
                 f"找两个和为 {total}、积为 {product} 的数。"),
                (f"Factor as (x - {r1})(x - {r2}) = 0.", f"因式分解为 (x - {r1})(x - {r2}) = 0。"),
            ),
            explanation=BilingualText(
                f"The roots are {r1} and {r2}, so the larger root is {larger}. "
                f"For x^2 - sx + p, the roots always add to s and multiply to p.",
                f"两个根是 {r1} 和 {r2}，较大的根是 {larger}。对于 x^2 - sx + p，两根之和是 s，两根之积是 p。",
            ),
            domain=DOMAIN,
            knowledge_point_slug="quadratic-equations",
            level=level,
            template="algebra.sum_product_roots",
        )

    def _completed_square(self, level: int, rng: random.Random) -> QuestionDraft:
        shift = rng.randint(-6, 9)
        r = rng.randint(2, 9)
        square = r * r
        root = shift + r
        if shift >= 0:
            binomial = f"(x - {shift})"
        else:
            binomial = f"(x + {-shift})"
        return QuestionDraft(
            prompt=BilingualText(
                f"Solve {binomial}^2 = {square}. Give the larger root.",
                f"解方程 {binomial}^2 = {square}，写出较大的根。",
            ),
            answer=IntegerAnswer(root),
            hints=hints(
                ("Take the square root of both sides; remember the ±.", "两边开平方，别忘了 ±。"),
                (f"x - ({shift}) = ±{r}; the larger root uses +{r}.", f"x - ({shift}) = ±{r}；较大的根取 +{r}。"),
            ),
            explanation=BilingualText(
                f"x = {shift} ± {r}, giving {shift - r} and {root}; the larger is {root}. "
                f"A perfect square form turns a quadratic into two linear equations.",
                f"x = {shift} ± {r}，得到 {shift - r} 和 {root}；较大的是 {root}。完全平方形式把二次方程化成两个一次方程。",
            ),
            domain=DOMAIN,
            knowledge_point_slug="quadratic-equations",
            level=level,
            template="algebra.completed_square",
        )
