"""
Knowledge point taxonomy.

Static catalog of the knowledge points the synthesizers exercise, each with
its domain and the inclusive level band it is active for, plus a short
bilingual concept note shown after an attempt.
"""

from __future__ import annotations

from mathquest.core.models import BilingualText, KnowledgePointDef, MasteryDomain

D = MasteryDomain

KNOWLEDGE_POINT_TAXONOMY: tuple[KnowledgePointDef, ...] = (
    KnowledgePointDef("addition-subtraction", D.ARITHMETIC, "Addition & Subtraction", "加减法", 1, 2),
    KnowledgePointDef("multiplication", D.ARITHMETIC, "Multiplication", "乘法", 3, 4),
    KnowledgePointDef("exponentiation", D.ARITHMETIC, "Exponentiation", "幂运算", 5, 5),
    KnowledgePointDef("linear-equations-basic", D.ALGEBRA, "Linear Equations (Basic)", "一元一次方程(基础)", 1, 2),
    KnowledgePointDef("linear-equations-multi", D.ALGEBRA, "Linear Equations (Multi-step)", "一元一次方程(进阶)", 3, 4),
    KnowledgePointDef("quadratic-equations", D.ALGEBRA, "Quadratic Equations", "一元二次方程", 5, 5),
    KnowledgePointDef("area-perimeter", D.GEOMETRY, "Area & Perimeter", "面积与周长", 1, 2),
    KnowledgePointDef("pythagorean-theorem", D.GEOMETRY, "Pythagorean Theorem", "勾股定理", 3, 5),
    KnowledgePointDef("same-denominator", D.FRACTIONS, "Same Denominator", "同分母分数", 1, 3),
    KnowledgePointDef("different-denominator", D.FRACTIONS, "Different Denominator", "异分母分数", 4, 5),
    KnowledgePointDef("gcd-lcm", D.NUMBER_THEORY, "GCD & LCM", "最大公约数与最小公倍数", 1, 3),
    KnowledgePointDef("primality", D.NUMBER_THEORY, "Primality Testing", "质数判断", 4, 5),
    KnowledgePointDef("basic-probability", D.PROBABILITY, "Basic Probability", "基础概率", 1, 3),
    KnowledgePointDef("conditional-probability", D.PROBABILITY, "Conditional Probability", "条件概率", 4, 5),
    KnowledgePointDef("mean", D.STATISTICS, "Mean", "平均数", 1, 3),
    KnowledgePointDef("median", D.STATISTICS, "Median", "中位数", 4, 5),
    KnowledgePointDef("special-angles", D.TRIGONOMETRY, "Special Angles", "特殊角", 1, 3),
    KnowledgePointDef("soh-cah-toa", D.TRIGONOMETRY, "SOH-CAH-TOA", "三角函数比", 4, 5),
    KnowledgePointDef("derivatives-power-rule", D.CALCULUS, "Derivatives (Power Rule)", "幂函数求导", 1, 3),
    KnowledgePointDef("definite-integrals", D.CALCULUS, "Definite Integrals", "定积分", 4, 5),
    KnowledgePointDef("distance-speed-time", D.WORD_PROBLEMS, "Distance, Speed & Time", "路程速度时间", 1, 3),
    KnowledgePointDef("simple-interest", D.WORD_PROBLEMS, "Simple Interest", "单利计算", 4, 5),
)

_BY_SLUG = {kp.slug: kp for kp in KNOWLEDGE_POINT_TAXONOMY}


def get_knowledge_point(slug: str) -> KnowledgePointDef | None:
    """Look up a knowledge point by slug."""
    return _BY_SLUG.get(slug)


def knowledge_points_for(domain: MasteryDomain, level: int | None = None) -> list[KnowledgePointDef]:
    """Knowledge points of a domain, optionally only those active at ``level``."""
    return [
        kp
        for kp in KNOWLEDGE_POINT_TAXONOMY
        if kp.domain == domain and (level is None or kp.covers(level))
    ]


CONCEPT_NOTES: dict[str, BilingualText] = {
    "addition-subtraction": BilingualText(
        "Addition and subtraction undo each other. Line up place values, work right to left, carry at 10 and borrow when the top digit is smaller.",
        "加法和减法互为逆运算。按数位对齐，从右往左算，满十进一，不够减时借一。",
    ),
    "multiplication": BilingualText(
        "Multiplication is repeated addition, or the area of a rows-by-columns array. Split a factor by place value and use a(b + c) = ab + ac.",
        "乘法是重复加法，也可以看成行乘列的点阵面积。按数位拆分因数，利用 a(b + c) = ab + ac。",
    ),
    "exponentiation": BilingualText(
        "a^n means n copies of a multiplied together. a^m × a^n = a^(m+n) and (a^m)^n = a^(mn).",
        "a^n 表示 n 个 a 相乘。a^m × a^n = a^(m+n)，(a^m)^n = a^(mn)。",
    ),
    "linear-equations-basic": BilingualText(
        "An equation is a balance: do the same operation to both sides until x stands alone.",
        "方程就像天平：两边做同样的运算，直到 x 单独留在一边。",
    ),
    "linear-equations-multi": BilingualText(
        "Undo operations in reverse order: first remove the constant, then divide by the coefficient. For proportions, cross-multiply.",
        "按相反顺序撤销运算：先去掉常数项，再除以系数。遇到比例式就交叉相乘。",
    ),
    "quadratic-equations": BilingualText(
        "x^2 - (r1 + r2)x + r1·r2 = (x - r1)(x - r2). Completing the square gives (x - h)^2 = c, so x = h ± sqrt(c).",
        "x^2 - (r1 + r2)x + r1·r2 = (x - r1)(x - r2)。配方得 (x - h)^2 = c，所以 x = h ± sqrt(c)。",
    ),
    "area-perimeter": BilingualText(
        "Area counts unit squares inside a shape: rectangle A = l × w. A shape with a hole is outer area minus inner area.",
        "面积是图形内部单位正方形的个数：长方形 A = 长 × 宽。挖去一块的图形面积等于外面积减去内面积。",
    ),
    "pythagorean-theorem": BilingualText(
        "In a right triangle a^2 + b^2 = c^2, where c is the side opposite the right angle.",
        "直角三角形中 a^2 + b^2 = c^2，c 是直角所对的斜边。",
    ),
    "same-denominator": BilingualText(
        "Same denominators mean same-sized pieces: add the numerators, keep the denominator, then simplify.",
        "分母相同说明每份一样大：分子相加，分母不变，最后约分。",
    ),
    "different-denominator": BilingualText(
        "Rewrite both fractions over a common denominator before adding: a/b + c/d = (ad + cb)/bd, then reduce.",
        "先通分再相加：a/b + c/d = (ad + cb)/bd，最后约分。",
    ),
    "gcd-lcm": BilingualText(
        "gcd(a, b) is the largest number dividing both; lcm(a, b) is the smallest number both divide. gcd × lcm = a × b.",
        "gcd(a, b) 是能同时整除两数的最大数；lcm(a, b) 是两数都能整除的最小数。gcd × lcm = a × b。",
    ),
    "primality": BilingualText(
        "A prime has exactly two divisors. Test divisors only up to sqrt(n): a larger factor always pairs with a smaller one.",
        "质数恰好有两个因数。只需检验到 sqrt(n)：大于它的因数一定和一个更小的因数配对。",
    ),
    "basic-probability": BilingualText(
        "P(E) = favorable outcomes / total equally likely outcomes, and P(not E) = 1 - P(E).",
        "P(E) = 有利结果数 / 等可能的总结果数，P(非E) = 1 - P(E)。",
    ),
    "conditional-probability": BilingualText(
        "P(A|B) = P(A∩B) / P(B): knowing B happened shrinks the sample space to B. Independent events multiply: P(A∩B) = P(A)·P(B).",
        "P(A|B) = P(A∩B) / P(B)：已知 B 发生，样本空间缩小为 B。独立事件概率相乘：P(A∩B) = P(A)·P(B)。",
    ),
    "mean": BilingualText(
        "Mean = sum of values / number of values. One extreme value can pull it a long way.",
        "平均数 = 数据总和 / 数据个数。一个极端值就能把它拉偏很多。",
    ),
    "median": BilingualText(
        "Sort the data; the median is the middle value, or the average of the two middle values when the count is even.",
        "先排序；中位数是正中间的数，数据个数为偶数时取中间两个数的平均。",
    ),
    "special-angles": BilingualText(
        "Memorize the 30-60-90 and 45-45-90 triangles: sin30° = cos60° = 1/2, tan45° = 1, sin60° = cos30° = sqrt(3)/2, sin45° = cos45° = sqrt(2)/2.",
        "记住 30-60-90 和 45-45-90 三角形：sin30° = cos60° = 1/2，tan45° = 1，sin60° = cos30° = sqrt(3)/2，sin45° = cos45° = sqrt(2)/2。",
    ),
    "soh-cah-toa": BilingualText(
        "SOH-CAH-TOA: sin = opposite/hypotenuse, cos = adjacent/hypotenuse, tan = opposite/adjacent.",
        "SOH-CAH-TOA：sin = 对边/斜边，cos = 邻边/斜边，tan = 对边/邻边。",
    ),
    "derivatives-power-rule": BilingualText(
        "Power rule: d/dx(a·x^n) = a·n·x^(n-1). Derivatives of sums are sums of derivatives.",
        "幂函数求导：d/dx(a·x^n) = a·n·x^(n-1)。和的导数等于导数的和。",
    ),
    "definite-integrals": BilingualText(
        "The integral of a rate over [a, b] is the total accumulated: find an antiderivative F and compute F(b) - F(a).",
        "速率在 [a, b] 上的积分就是累积总量：求原函数 F，再算 F(b) - F(a)。",
    ),
    "distance-speed-time": BilingualText(
        "d = v × t, v = d / t, t = d / v. Keep the units matched.",
        "路程 = 速度 × 时间，速度 = 路程 / 时间，时间 = 路程 / 速度。注意单位一致。",
    ),
    "simple-interest": BilingualText(
        "Simple interest I = P × r × t grows by the same amount every year; solve for t with t = I / (P × r).",
        "单利 I = P × r × t，每年增加的利息相同；求时间用 t = I / (P × r)。",
    ),
}

_GENERIC_NOTE = BilingualText(
    "Identify what is known and what is asked, pick the matching formula, solve step by step and check the result.",
    "先找出已知和所求，选出对应公式，一步步求解，最后检查结果。",
)


def concept_note(slug: str) -> BilingualText:
    """Concept note for a knowledge point, with a generic fallback."""
    note = CONCEPT_NOTES.get(slug)
    if note is not None:
        return note
    kp = get_knowledge_point(slug)
    if kp is None:
        return _GENERIC_NOTE
    return BilingualText(
        f"Knowledge point: {kp.name_en}. {_GENERIC_NOTE.en}",
        f"知识点：{kp.name_zh}。{_GENERIC_NOTE.zh}",
    )
