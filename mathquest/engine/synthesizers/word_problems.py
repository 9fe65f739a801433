"""Word problems: distance/speed/time and simple interest."""

import random

from mathquest.core.answers import DecimalAnswer, FractionAnswer, IntegerAnswer
from mathquest.core.models import BilingualText, MasteryDomain

from . import register
from .base import QuestionDraft, hints, pick_template

DOMAIN = MasteryDomain.WORD_PROBLEMS


@register(DOMAIN)
class WordProblemsSynthesizer:

    def build(self, level: int, rng: random.Random) -> QuestionDraft:
        if level <= 3:
            templates = (self._train_distance, self._cyclist_speed)
        else:
            templates = (self._savings_interest, self._interest_years)
        return pick_template(rng, templates)(level, rng)

    def _train_distance(self, level: int, rng: random.Random) -> QuestionDraft:
        speed = rng.randint(4, 12) * 10
        hours = rng.randint(2, 3 + level)
        distance = speed * hours
        return QuestionDraft(
            prompt=BilingualText(
                f"A train travels at {speed} km/h for {hours} hours. How many kilometers does it cover?",
                f"一列火车以每小时 {speed} 千米的速度行驶了 {hours} 小时。它行驶了多少千米？",
            ),
            answer=IntegerAnswer(distance),
            hints=hints(
                ("Distance = speed × time.", "路程 = 速度 × 时间。"),
                (f"{speed} × {hours}.", f"{speed} × {hours}。"),
            ),
            explanation=BilingualText(
                f"{speed} × {hours} = {distance} km. Speed tells you the distance per hour, so multiply by the hours.",
                f"{speed} × {hours} = {distance} 千米。速度是每小时的路程，所以乘以小时数。",
            ),
            domain=DOMAIN,
            knowledge_point_slug="distance-speed-time",
            level=level,
            template="word_problems.train_distance",
        )

    def _cyclist_speed(self, level: int, rng: random.Random) -> QuestionDraft:
        speed = rng.randint(8, 25)
        hours = rng.randint(2, 3 + level)
        distance = speed * hours
        return QuestionDraft(
            prompt=BilingualText(
                f"A cyclist rides {distance} km in {hours} hours at a steady pace. What is her speed in km/h?",
                f"一位骑行者匀速骑行，{hours} 小时骑了 {distance} 千米。她的速度是每小时多少千米？",
            ),
            answer=IntegerAnswer(speed),
            hints=hints(
                ("Speed = distance ÷ time.", "速度 = 路程 ÷ 时间。"),
                (f"{distance} ÷ {hours}.", f"{distance} ÷ {hours}。"),
            ),
            explanation=BilingualText(
                f"{distance} ÷ {hours} = {speed} km/h. Check: {speed} × {hours} = {distance}.",
                f"{distance} ÷ {hours} = 每小时 {speed} 千米。验算：{speed} × {hours} = {distance}。",
            ),
            domain=DOMAIN,
            knowledge_point_slug="distance-speed-time",
            level=level,
            template="word_problems.cyclist_speed",
        )

    def _savings_interest(self, level: int, rng: random.Random) -> QuestionDraft:
        principal = rng.randint(5, 50) * 100
        rate = rng.choice((2, 2.5, 3, 3.5, 4, 4.5, 5, 6))
        years = rng.randint(2, 6)
        interest = principal * rate * years / 100
        if float(interest).is_integer():
            answer = IntegerAnswer(int(interest))
        else:
            answer = DecimalAnswer(interest, places=2)
        return QuestionDraft(
            prompt=BilingualText(
                f"You deposit ${principal} in a savings account paying {rate}% simple interest per year. "
                f"How much interest, in dollars, do you earn after {years} years?",
                f"你在储蓄账户存入 {principal} 美元，年单利率为 {rate}%。{years} 年后获得多少美元利息？",
            ),
            answer=answer,
            hints=hints(
                ("Simple interest: I = P × r × t.", "单利公式：I = P × r × t。"),
                (f"Write {rate}% as {rate}/100, then compute {principal} × {rate}/100 × {years}.",
                 f"把 {rate}% 写成 {rate}/100，再计算 {principal} × {rate}/100 × {years}。"),
            ),
            explanation=BilingualText(
                f"I = {principal} × {rate}/100 × {years} = {answer.render()}. "
                f"Simple interest is earned only on the original principal, so it grows by the same amount every year.",
                f"I = {principal} × {rate}/100 × {years} = {answer.render()}。单利只按本金计息，所以每年增加的利息相同。",
            ),
            domain=DOMAIN,
            knowledge_point_slug="simple-interest",
            level=level,
            template="word_problems.savings_interest",
        )

    def _interest_years(self, level: int, rng: random.Random) -> QuestionDraft:
        principal = 400 * rng.randint(1, 10)
        rate = rng.randint(2, 8)
        t_den = rng.choice((1, 2, 4))
        t_num = rng.randint(t_den + 1, 8 * t_den)
        years = FractionAnswer.of(t_num, t_den)
        # P is a multiple of 400, so P * r * t / 100 is a whole number for t in quarters.
        interest = principal * rate * t_num // (100 * t_den)
        return QuestionDraft(
            prompt=BilingualText(
                f"A loan of ${principal} at {rate}% simple interest per year costs ${interest} in interest. "
                f"For how many years was the money borrowed? Give an exact answer.",
                f"一笔 {principal} 美元的贷款，年单利率为 {rate}%，共付利息 {interest} 美元。借款期限是多少年？给出精确值。",
            ),
            answer=years,
            hints=hints(
                ("Rearrange I = P × r × t to solve for t.", "把 I = P × r × t 变形，求 t。"),
                (f"t = I ÷ (P × r) = {interest} ÷ ({principal} × {rate}/100).",
                 f"t = I ÷ (P × r) = {interest} ÷ ({principal} × {rate}/100)。"),
            ),
            explanation=BilingualText(
                f"Each year costs {principal} × {rate}/100 = {principal * rate // 100}, "
                f"so t = {interest}/{principal * rate // 100} = {years.render()} years. "
                f"Dividing the total interest by one year's interest counts the years.",
                f"每年利息是 {principal} × {rate}/100 = {principal * rate // 100}，"
                f"所以 t = {interest}/{principal * rate // 100} = {years.render()} 年。用总利息除以每年的利息就得到年数。",
            ),
            domain=DOMAIN,
            knowledge_point_slug="simple-interest",
            level=level,
            template="word_problems.interest_years",
        )
