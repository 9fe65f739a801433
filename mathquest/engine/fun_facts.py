"""
Fun-fact annotator.

Facts are keyed by the draft's own domain and knowledge point: a
knowledge-point override wins when one exists, otherwise a fact is drawn
uniformly from the domain pool.
"""

import random

from mathquest.core.models import BilingualText, MasteryDomain

D = MasteryDomain
F = BilingualText

FUN_FACTS: dict[MasteryDomain, tuple[BilingualText, ...]] = {
    D.ARITHMETIC: (
        F("The equals sign '=' was invented in 1557 by Robert Recorde, who thought nothing could be more equal than two parallel lines.",
          "等号“=”由罗伯特·雷科德于 1557 年发明，他认为没有什么比两条平行线更相等了。"),
        F("Zero as a number in its own right was developed in India; Brahmagupta wrote rules for it around 628 AD.",
          "作为独立数字的“零”起源于印度，婆罗摩笈多约在公元 628 年写下了零的运算规则。"),
        F("The abacus was used for calculation for thousands of years before written digits became common.",
          "在书写数字普及之前，算盘已经被用来计算了几千年。"),
    ),
    D.ALGEBRA: (
        F("The word 'algebra' comes from al-jabr, part of the title of a 9th-century book by al-Khwarizmi.",
          "“代数”一词源自 9 世纪花拉子米著作书名中的 al-jabr。"),
        F("Using x for an unknown became popular through René Descartes in the 1600s.",
          "用 x 表示未知数，是 17 世纪笛卡尔让它流行起来的。"),
    ),
    D.GEOMETRY: (
        F("'Geometry' means 'earth measurement' in Greek; it began with surveying fields along the Nile.",
          "“几何”在希腊语中意为“测量土地”，起源于尼罗河沿岸的田地测量。"),
        F("Honeybees build hexagonal cells because hexagons tile the plane using the least wax for the area.",
          "蜜蜂把蜂巢做成六边形，因为六边形铺满平面时用蜡最少。"),
    ),
    D.FRACTIONS: (
        F("Ancient Egyptians wrote almost every fraction as a sum of different unit fractions like 1/2 + 1/4.",
          "古埃及人几乎把所有分数都写成不同单位分数之和，比如 1/2 + 1/4。"),
        F("The horizontal fraction bar became common in Europe through Fibonacci's Liber Abaci in 1202.",
          "分数横线是通过斐波那契 1202 年的《计算之书》在欧洲流行起来的。"),
    ),
    D.NUMBER_THEORY: (
        F("There are infinitely many primes; Euclid proved it more than 2,000 years ago.",
          "质数有无穷多个，欧几里得在两千多年前就证明了这一点。"),
        F("Modern internet encryption relies on how hard it is to factor the product of two huge primes.",
          "现代互联网加密依赖于分解两个巨大质数乘积的困难性。"),
    ),
    D.PROBABILITY: (
        F("Probability theory started with letters between Pascal and Fermat about a dice game in 1654.",
          "概率论起源于 1654 年帕斯卡与费马关于一个骰子游戏的通信。"),
        F("In a room of just 23 people, there is about a 50% chance that two share a birthday.",
          "只要 23 个人在一个房间里，就有约 50% 的概率有两人同一天生日。"),
    ),
    D.STATISTICS: (
        F("Florence Nightingale used statistical charts to convince the British army to improve hospital hygiene.",
          "南丁格尔用统计图表说服英国军队改善医院卫生。"),
        F("The word 'statistics' originally meant data about the state, such as population and taxes.",
          "“统计”一词最初指关于国家的数据，比如人口和税收。"),
    ),
    D.TRIGONOMETRY: (
        F("Hipparchus built one of the first trigonometric tables around 140 BC to study the stars.",
          "喜帕恰斯约在公元前 140 年为研究星体编制了最早的三角函数表之一。"),
        F("'Sine' comes from a mistranslation: the Arabic jiba was read as jaib, 'fold', which became Latin sinus.",
          "“正弦”来自误译：阿拉伯语 jiba 被读成 jaib（褶皱），后译成拉丁语 sinus。"),
    ),
    D.CALCULUS: (
        F("Newton and Leibniz developed calculus independently in the late 1600s and argued over who was first.",
          "牛顿和莱布尼茨在 17 世纪末各自独立发明了微积分，并为谁先发明争论不休。"),
        F("The integral sign ∫ is a stretched 'S', chosen by Leibniz for 'summa'.",
          "积分符号 ∫ 是拉长的“S”，莱布尼茨用它表示“求和”（summa）。"),
    ),
    D.WORD_PROBLEMS: (
        F("Word problems appear in the Rhind Papyrus, written in Egypt around 1650 BC.",
          "早在约公元前 1650 年的埃及莱因德纸草书中就有应用题。"),
        F("The Chinese classic 'Nine Chapters on the Mathematical Art' is built almost entirely from practical word problems.",
          "中国古典名著《九章算术》几乎全部由实际应用题组成。"),
    ),
}

KNOWLEDGE_POINT_FACTS: dict[str, BilingualText] = {
    "pythagorean-theorem": F(
        "The 3-4-5 right triangle was used by builders in ancient Egypt to lay out square corners with knotted rope.",
        "古埃及建筑工人用打结的绳子围出 3-4-5 直角三角形来确定直角。",
    ),
    "conditional-probability": F(
        "P(A|B) and P(B|A) are usually different; mixing them up is so common it is called the prosecutor's fallacy.",
        "P(A|B) 和 P(B|A) 通常并不相等，把它们混淆的错误常见到有个名字：检察官谬误。",
    ),
    "primality": F(
        "The largest known primes are Mersenne primes of the form 2^p - 1, with tens of millions of digits.",
        "已知最大的质数是形如 2^p - 1 的梅森素数，有几千万位。",
    ),
    "quadratic-equations": F(
        "Babylonian clay tablets from about 2000 BC already solve quadratic problems by completing the square.",
        "约公元前 2000 年的巴比伦泥板上已经用配方法解二次问题。",
    ),
    "special-angles": F(
        "An equilateral triangle cut in half gives the 30-60-90 triangle behind sin 30° = 1/2.",
        "把等边三角形对半分，就得到 sin 30° = 1/2 背后的 30-60-90 三角形。",
    ),
    "exponentiation": F(
        "Folding a sheet of paper in half 42 times would, in theory, make it thick enough to reach the Moon.",
        "理论上，一张纸对折 42 次，厚度就能到达月球。",
    ),
}


def pick_fun_fact(domain: MasteryDomain, knowledge_point_slug: str, rng: random.Random) -> BilingualText:
    """Fact for a knowledge point, falling back to a random fact from its domain."""
    override = KNOWLEDGE_POINT_FACTS.get(knowledge_point_slug)
    if override is not None:
        return override
    pool = FUN_FACTS[domain]
    return pool[rng.randrange(len(pool))]
