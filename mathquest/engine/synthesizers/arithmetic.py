"""
Arithmetic synthesizer.

Levels 1-2: addition and subtraction with 2-digit (level 1) or 3-digit (level 2) operands
Levels 3-4: multiplication as a rows x columns array plus a bonus term
Level 5:    integer powers, optionally scaled by a coefficient
"""

import random

from mathquest.core.answers import IntegerAnswer
from mathquest.core.models import BilingualText, MasteryDomain

from . import register
from .base import QuestionDraft, hints, pick_template

DOMAIN = MasteryDomain.ARITHMETIC


@register(DOMAIN)
class ArithmeticSynthesizer:
    """Addition/subtraction, array multiplication and powers."""

    def build(self, level: int, rng: random.Random) -> QuestionDraft:
        if level <= 2:
            templates = (self._sticker_total, self._library_books)
        elif level <= 4:
            templates = (self._hall_chairs, self._tulip_garden)
        else:
            templates = (self._bacteria_growth, self._power_expression)
        return pick_template(rng, templates)(level, rng)

    # ------------------------------------------------------------------
    # Levels 1-2
    # ------------------------------------------------------------------

    @staticmethod
    def _operand_range(level: int) -> tuple[int, int]:
        return (10, 99) if level == 1 else (100, 999)

    def _sticker_total(self, level: int, rng: random.Random) -> QuestionDraft:
        lo, hi = self._operand_range(level)
        a = rng.randint(lo, hi)
        b = rng.randint(lo, hi)
        total = a + b
        return QuestionDraft(
            prompt=BilingualText(
                f"Mia has {a} stickers and her friend gives her {b} more. How many stickers does Mia have now?",
                f"小米有 {a} 张贴纸，朋友又送给她 {b} 张。小米现在一共有多少张贴纸？",
            ),
            answer=IntegerAnswer(total),
            hints=hints(
                ("Getting more means adding.", "又得到了更多，就用加法。"),
                (f"Add the ones first: {a % 10} + {b % 10}, then the tens.", f"先加个位：{a % 10} + {b % 10}，再加十位。"),
            ),
            explanation=BilingualText(
                f"{a} + {b} = {total}. Adding place by place and carrying keeps every digit in its column.",
                f"{a} + {b} = {total}。按数位相加并进位，每一位都不会错位。",
            ),
            domain=DOMAIN,
            knowledge_point_slug="addition-subtraction",
            level=level,
            template="arithmetic.sticker_total",
        )

    def _library_books(self, level: int, rng: random.Random) -> QuestionDraft:
        lo, hi = self._operand_range(level)
        a = rng.randint(lo + 1, hi)
        b = rng.randint(lo // 2 or 1, a - 1)
        left = a - b
        return QuestionDraft(
            prompt=BilingualText(
                f"A library has {a} books on a shelf and lends out {b} of them. How many books are left on the shelf?",
                f"图书馆书架上有 {a} 本书，借出了 {b} 本。书架上还剩多少本书？",
            ),
            answer=IntegerAnswer(left),
            hints=hints(
                ("Lending books out takes some away, so subtract.", "借出去就是拿走一部分，用减法。"),
                (f"Compute {a} - {b}; borrow from the next column when a digit is too small.", f"计算 {a} - {b}；某一位不够减时向前一位借一。"),
            ),
            explanation=BilingualText(
                f"{a} - {b} = {left}. Check: {left} + {b} = {a}, because subtraction undoes addition.",
                f"{a} - {b} = {left}。验算：{left} + {b} = {a}，因为减法是加法的逆运算。",
            ),
            domain=DOMAIN,
            knowledge_point_slug="addition-subtraction",
            level=level,
            template="arithmetic.library_books",
        )

    # ------------------------------------------------------------------
    # Levels 3-4
    # ------------------------------------------------------------------

    @staticmethod
    def _array_size(level: int, rng: random.Random) -> tuple[int, int]:
        if level == 3:
            return rng.randint(6, 12), rng.randint(6, 15)
        return rng.randint(12, 25), rng.randint(11, 29)

    def _hall_chairs(self, level: int, rng: random.Random) -> QuestionDraft:
        rows, cols = self._array_size(level, rng)
        extra = rng.randint(5, 30)
        product = rows * cols
        total = product + extra
        return QuestionDraft(
            prompt=BilingualText(
                f"A school hall has {rows} rows of chairs with {cols} chairs in each row. "
                f"The janitor adds {extra} folding chairs at the back. How many chairs are there in total?",
                f"学校礼堂有 {rows} 排椅子，每排 {cols} 把。管理员又在后面加了 {extra} 把折叠椅。一共有多少把椅子？",
            ),
            answer=IntegerAnswer(total),
            hints=hints(
                ("Count the rectangle of chairs first, then add the extras.", "先数出排成长方形的椅子，再加上额外的椅子。"),
                (f"Rows × chairs per row = {rows} × {cols}; then add {extra}.", f"排数 × 每排把数 = {rows} × {cols}，再加 {extra}。"),
            ),
            explanation=BilingualText(
                f"{rows} × {cols} = {product}, and {product} + {extra} = {total}. "
                f"An array of rows and columns is exactly what multiplication counts.",
                f"{rows} × {cols} = {product}，{product} + {extra} = {total}。行列排成的阵列正是乘法在计数。",
            ),
            domain=DOMAIN,
            knowledge_point_slug="multiplication",
            level=level,
            template="arithmetic.hall_chairs",
        )

    def _tulip_garden(self, level: int, rng: random.Random) -> QuestionDraft:
        rows, cols = self._array_size(level, rng)
        extra = rng.randint(5, 30)
        product = rows * cols
        total = product + extra
        return QuestionDraft(
            prompt=BilingualText(
                f"A gardener plants tulips in {rows} rows of {cols}, then plants {extra} more along the fence. "
                f"How many tulips did she plant?",
                f"园丁把郁金香种成 {rows} 行，每行 {cols} 株，又沿着篱笆种了 {extra} 株。她一共种了多少株郁金香？",
            ),
            answer=IntegerAnswer(total),
            hints=hints(
                ("The tulips in rows form an array; multiply for those.", "成行的郁金香组成一个阵列，用乘法计算。"),
                (f"Split {cols} by place value: {rows} × {cols} = {rows} × {cols - cols % 10} + {rows} × {cols % 10}.",
                 f"把 {cols} 按数位拆开：{rows} × {cols} = {rows} × {cols - cols % 10} + {rows} × {cols % 10}。"),
            ),
            explanation=BilingualText(
                f"{rows} × {cols} = {product}; {product} + {extra} = {total}. "
                f"The distributive law lets you multiply tens and ones separately and add the parts.",
                f"{rows} × {cols} = {product}；{product} + {extra} = {total}。分配律让你把十位和个位分开相乘再相加。",
            ),
            domain=DOMAIN,
            knowledge_point_slug="multiplication",
            level=level,
            template="arithmetic.tulip_garden",
        )

    # ------------------------------------------------------------------
    # Level 5
    # ------------------------------------------------------------------

    def _bacteria_growth(self, level: int, rng: random.Random) -> QuestionDraft:
        start = rng.randint(2, 5)
        base = rng.randint(2, 4)
        hours = rng.randint(3, 5)
        power = base**hours
        total = start * power
        return QuestionDraft(
            prompt=BilingualText(
                f"A dish starts with {start} bacteria. Every hour each bacterium splits into {base}. "
                f"How many bacteria are there after {hours} hours?",
                f"培养皿里开始有 {start} 个细菌。每过一小时，每个细菌分裂成 {base} 个。{hours} 小时后有多少个细菌？",
            ),
            answer=IntegerAnswer(total),
            hints=hints(
                ("Each hour multiplies the count by the same number.", "每过一小时，数量都乘以同一个数。"),
                (f"After {hours} hours the count is {start} × {base}^{hours}.", f"{hours} 小时后数量是 {start} × {base}^{hours}。"),
            ),
            explanation=BilingualText(
                f"{base}^{hours} = {power}, so {start} × {power} = {total}. "
                f"Repeated multiplication by the same factor is what an exponent records.",
                f"{base}^{hours} = {power}，所以 {start} × {power} = {total}。反复乘以同一个因数，正是指数所表示的。",
            ),
            domain=DOMAIN,
            knowledge_point_slug="exponentiation",
            level=level,
            template="arithmetic.bacteria_growth",
        )

    def _power_expression(self, level: int, rng: random.Random) -> QuestionDraft:
        base = rng.randint(4, 9)
        exponent = rng.randint(3, 5)
        power = base**exponent
        expansion = " × ".join([str(base)] * exponent)
        return QuestionDraft(
            prompt=BilingualText(
                f"Evaluate {base}^{exponent}.",
                f"计算 {base} 的 {exponent} 次方（{base}^{exponent}）。",
            ),
            answer=IntegerAnswer(power),
            hints=hints(
                ("The exponent tells you how many copies of the base to multiply.", "指数告诉你要把底数乘几次。"),
                (f"{base}^{exponent} = {expansion}.", f"{base}^{exponent} = {expansion}。"),
            ),
            explanation=BilingualText(
                f"{expansion} = {power}. Grouping helps: {base}^{exponent} = {base}^2 × {base}^{exponent - 2} = "
                f"{base**2} × {base ** (exponent - 2)}.",
                f"{expansion} = {power}。可以分组计算：{base}^{exponent} = {base}^2 × {base}^{exponent - 2} = "
                f"{base**2} × {base ** (exponent - 2)}。",
            ),
            domain=DOMAIN,
            knowledge_point_slug="exponentiation",
            level=level,
            template="arithmetic.power_expression",
        )
