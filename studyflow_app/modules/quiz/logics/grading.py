"""
Quiz grading - pure logic, no database access.

Each answer is an option index (or None for a skipped question) matched
against the question's ``correct_answer``.
"""
from dataclasses import dataclass
from typing import List, Optional, Sequence


@dataclass(frozen=True)
class QuizResult:
    correct: int
    total: int
    score: int
    results: List[bool]


def grade(questions: Sequence[dict], answers: Sequence[Optional[int]]) -> QuizResult:
    """
    Grade one attempt. ``score`` is the rounded percentage of correct answers.

    Examples:
        >>> grade([{'correct_answer': 1}, {'correct_answer': 0}], [1, None]).score
        50
    """
    if len(answers) != len(questions):
        raise ValueError(f'Expected {len(questions)} answers, got {len(answers)}')

    results = [
        answer is not None and answer == question.get('correct_answer')
        for question, answer in zip(questions, answers)
    ]
    correct = sum(results)
    total = len(questions)
    score = round(100 * correct / total) if total else 0
    return QuizResult(correct=correct, total=total, score=score, results=results)
