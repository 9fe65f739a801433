"""Probability: counting outcomes, complements, conditional and independent events."""

import random

from mathquest.core.answers import FractionAnswer
from mathquest.core.models import BilingualText, MasteryDomain

from . import register
from .base import QuestionDraft, hints, pick_template

DOMAIN = MasteryDomain.PROBABILITY


@register(DOMAIN)
class ProbabilitySynthesizer:

    def build(self, level: int, rng: random.Random) -> QuestionDraft:
        if level <= 3:
            templates = (self._marble_draw, self._spinner_complement)
        else:
            templates = (self._class_survey, self._die_and_spinner)
        return pick_template(rng, templates)(level, rng)

    def _marble_draw(self, level: int, rng: random.Random) -> QuestionDraft:
        red = rng.randint(1, 9)
        blue = rng.randint(1, 9)
        green = rng.randint(0, 6)
        total = red + blue + green
        result = FractionAnswer.of(red, total)
        return QuestionDraft(
            prompt=BilingualText(
                f"A bag holds {red} red, {blue} blue and {green} green marbles. "
                f"One marble is drawn at random. What is the probability it is red? Give a fraction.",
                f"袋子里有 {red} 颗红弹珠、{blue} 颗蓝弹珠和 {green} 颗绿弹珠。随机摸出一颗，摸到红弹珠的概率是多少？用分数表示。",
            ),
            answer=result,
            hints=hints(
                ("Probability = favorable outcomes / all outcomes.", "概率 = 有利结果数 / 所有结果数。"),
                (f"There are {red} red marbles out of {total} in total.", f"一共 {total} 颗弹珠，其中红色 {red} 颗。"),
            ),
            explanation=BilingualText(
                f"P(red) = {red}/{total} = {result.render()}. Each marble is equally likely, so counting is enough.",
                f"P(红) = {red}/{total} = {result.render()}。每颗弹珠被摸到的可能性相同，所以数一数就够了。",
            ),
            domain=DOMAIN,
            knowledge_point_slug="basic-probability",
            level=level,
            template="probability.marble_draw",
        )

    def _spinner_complement(self, level: int, rng: random.Random) -> QuestionDraft:
        sections = rng.randint(4, 12)
        star = rng.randint(1, sections - 1)
        result = FractionAnswer.of(sections - star, sections)
        return QuestionDraft(
            prompt=BilingualText(
                f"A spinner has {sections} equal sections and {star} of them show a star. "
                f"What is the probability of NOT landing on a star? Give a fraction.",
                f"一个转盘分成 {sections} 个相等的区域，其中 {star} 个画着星星。转到不是星星区域的概率是多少？用分数表示。",
            ),
            answer=result,
            hints=hints(
                ("'Not' means the complement: 1 minus the probability of the event.", "“不是”表示对立事件：1 减去该事件的概率。"),
                (f"P(star) = {star}/{sections}, so compute 1 - {star}/{sections}.", f"P(星星) = {star}/{sections}，计算 1 - {star}/{sections}。"),
            ),
            explanation=BilingualText(
                f"1 - {star}/{sections} = {sections - star}/{sections} = {result.render()}. "
                f"An event and its complement always add up to 1.",
                f"1 - {star}/{sections} = {sections - star}/{sections} = {result.render()}。一个事件与它的对立事件概率之和总是 1。",
            ),
            domain=DOMAIN,
            knowledge_point_slug="basic-probability",
            level=level,
            template="probability.spinner_complement",
        )

    def _class_survey(self, level: int, rng: random.Random) -> QuestionDraft:
        both = rng.randint(2, 12)
        b_count = both + rng.randint(2, 15)
        total = b_count + rng.randint(5, 20)
        result = FractionAnswer.of(both, b_count)
        return QuestionDraft(
            prompt=BilingualText(
                f"In a survey of {total} students, {b_count} play an instrument and {both} of those also sing in the choir. "
                f"A student who plays an instrument is picked at random. What is the probability they sing in the choir? "
                f"Give a fraction.",
                f"在对 {total} 名学生的调查中，{b_count} 人会演奏乐器，其中 {both} 人也参加合唱团。"
                f"从会演奏乐器的学生中随机选一人，他参加合唱团的概率是多少？用分数表示。",
            ),
            answer=result,
            hints=hints(
                ("The condition shrinks the sample space to instrument players only.", "条件把样本空间缩小到只包含会演奏乐器的学生。"),
                (f"P(choir | instrument) = {both}/{b_count}.", f"P(合唱 | 乐器) = {both}/{b_count}。"),
            ),
            explanation=BilingualText(
                f"P(A|B) = P(A∩B)/P(B) = ({both}/{total}) / ({b_count}/{total}) = {both}/{b_count} = {result.render()}. "
                f"The {total} overall students cancel out once you condition on B.",
                f"P(A|B) = P(A∩B)/P(B) = ({both}/{total}) / ({b_count}/{total}) = {both}/{b_count} = {result.render()}。"
                f"在 B 发生的条件下，总人数 {total} 被约掉了。",
            ),
            domain=DOMAIN,
            knowledge_point_slug="conditional-probability",
            level=level,
            template="probability.class_survey",
        )

    def _die_and_spinner(self, level: int, rng: random.Random) -> QuestionDraft:
        k = rng.randint(1, 5)
        sections = rng.randint(3, 8)
        green = rng.randint(1, sections - 1)
        result = FractionAnswer.of(k * green, 6 * sections)
        return QuestionDraft(
            prompt=BilingualText(
                f"You roll a fair six-sided die and spin a spinner with {sections} equal sections, {green} of them green. "
                f"What is the probability of rolling a number no greater than {k} AND landing on green? Give a fraction.",
                f"掷一枚均匀的六面骰子，再转一个分成 {sections} 个相等区域的转盘，其中 {green} 个是绿色。"
                f"掷出不大于 {k} 的点数并且转到绿色的概率是多少？用分数表示。",
            ),
            answer=result,
            hints=hints(
                ("The die and the spinner do not affect each other.", "骰子和转盘互不影响。"),
                (f"Multiply: {k}/6 × {green}/{sections}.", f"相乘：{k}/6 × {green}/{sections}。"),
            ),
            explanation=BilingualText(
                f"{k}/6 × {green}/{sections} = {k * green}/{6 * sections} = {result.render()}. "
                f"For independent events, P(A and B) = P(A) · P(B).",
                f"{k}/6 × {green}/{sections} = {k * green}/{6 * sections} = {result.render()}。对于独立事件，P(A 且 B) = P(A) · P(B)。",
            ),
            domain=DOMAIN,
            knowledge_point_slug="conditional-probability",
            level=level,
            template="probability.die_and_spinner",
        )
