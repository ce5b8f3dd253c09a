from .grading import QuizResult, grade
