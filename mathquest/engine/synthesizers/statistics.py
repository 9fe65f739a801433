"""
Statistics synthesizer.

Levels 1-3 ask for the mean of 4-5 values, rounded to 2 decimals.
Levels 4-5 ask for the median of 6-7 values; an even count averages the two middle values.
"""

import random

from mathquest.core.answers import DecimalAnswer, IntegerAnswer
from mathquest.core.models import BilingualText, MasteryDomain

from . import register
from .base import QuestionDraft, hints, pick_template

DOMAIN = MasteryDomain.STATISTICS


def _listing(values: list[int]) -> str:
    return ", ".join(str(v) for v in values)


def _median_answer(values: list[int]) -> tuple[IntegerAnswer | DecimalAnswer, str]:
    """Median of sorted ``values`` and a short working line."""
    n = len(values)
    mid = n // 2
    if n % 2:
        return IntegerAnswer(values[mid]), f"{values[mid]}"
    low, high = values[mid - 1], values[mid]
    pair_sum = low + high
    if pair_sum % 2 == 0:
        return IntegerAnswer(pair_sum // 2), f"({low} + {high}) / 2"
    return DecimalAnswer(pair_sum / 2, places=1), f"({low} + {high}) / 2"


@register(DOMAIN)
class StatisticsSynthesizer:
    """Mean and median of small datasets."""

    def build(self, level: int, rng: random.Random) -> QuestionDraft:
        if level <= 3:
            templates = (self._test_scores_mean, self._temperature_mean)
        else:
            templates = (self._shoe_sizes_median, self._commute_median)
        return pick_template(rng, templates)(level, rng)

    @staticmethod
    def _mean_draft(level, values, prompt, template) -> QuestionDraft:
        total = sum(values)
        mean = total / len(values)
        return QuestionDraft(
            prompt=prompt,
            answer=DecimalAnswer(mean, places=2),
            hints=hints(
                ("The mean shares the total equally among all values.", "平均数就是把总和平均分给每个数。"),
                (f"Add the values ({total}) and divide by {len(values)}.", f"先求和（{total}），再除以 {len(values)}。"),
            ),
            explanation=BilingualText(
                f"{total} / {len(values)} = {mean:.2f}. The mean is the balance point: "
                f"deviations above it cancel deviations below it.",
                f"{total} ÷ {len(values)} = {mean:.2f}。平均数是平衡点：高出部分与低于部分正好抵消。",
            ),
            domain=DOMAIN,
            knowledge_point_slug="mean",
            level=level,
            template=template,
        )

    def _test_scores_mean(self, level: int, rng: random.Random) -> QuestionDraft:
        values = [rng.randint(60, 100) for _ in range(rng.randint(4, 5))]
        prompt = BilingualText(
            f"Sam's quiz scores are {_listing(values)}. What is the mean score? Round to 2 decimal places.",
            f"小山的测验成绩是 {_listing(values)}。平均分是多少？保留两位小数。",
        )
        return self._mean_draft(level, values, prompt, "statistics.test_scores_mean")

    def _temperature_mean(self, level: int, rng: random.Random) -> QuestionDraft:
        values = [rng.randint(12, 35) for _ in range(rng.randint(4, 5))]
        prompt = BilingualText(
            f"The noon temperatures this week were {_listing(values)} °C. "
            f"What was the mean temperature? Round to 2 decimal places.",
            f"本周中午的气温分别是 {_listing(values)} °C。平均气温是多少？保留两位小数。",
        )
        return self._mean_draft(level, values, prompt, "statistics.temperature_mean")

    @staticmethod
    def _median_draft(level, values, prompt, template) -> QuestionDraft:
        answer, working = _median_answer(values)
        n = len(values)
        if n % 2:
            position = BilingualText(f"With {n} values the middle one is value #{n // 2 + 1}.",
                                     f"共有 {n} 个数，中间的是第 {n // 2 + 1} 个。")
        else:
            position = BilingualText(f"With {n} values, average values #{n // 2} and #{n // 2 + 1}.",
                                     f"共有 {n} 个数，取第 {n // 2} 个和第 {n // 2 + 1} 个的平均数。")
        return QuestionDraft(
            prompt=prompt,
            answer=answer,
            hints=(
                BilingualText("The median is the middle value once the data is in order.", "把数据排好序后，中间的数就是中位数。"),
                position,
            ),
            explanation=BilingualText(
                f"Median = {working} = {answer.render()}. Unlike the mean, the median ignores how extreme the outer values are.",
                f"中位数 = {working} = {answer.render()}。与平均数不同，中位数不受两端极端值的影响。",
            ),
            domain=DOMAIN,
            knowledge_point_slug="median",
            level=level,
            template=template,
        )

    def _shoe_sizes_median(self, level: int, rng: random.Random) -> QuestionDraft:
        values = sorted(rng.randint(30, 45) for _ in range(rng.randint(6, 7)))
        prompt = BilingualText(
            f"The shoe sizes of a relay team, in order, are {_listing(values)}. What is the median size?",
            f"接力队队员的鞋码按顺序是 {_listing(values)}。中位数是多少？",
        )
        return self._median_draft(level, values, prompt, "statistics.shoe_sizes_median")

    def _commute_median(self, level: int, rng: random.Random) -> QuestionDraft:
        values = sorted(rng.randint(5, 60) for _ in range(rng.randint(6, 7)))
        prompt = BilingualText(
            f"Commute times in minutes, sorted: {_listing(values)}. What is the median commute time?",
            f"通勤时间（分钟）排序后是：{_listing(values)}。通勤时间的中位数是多少？",
        )
        return self._median_draft(level, values, prompt, "statistics.commute_median")
