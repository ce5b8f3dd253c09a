from .quiz_service import QuizService
