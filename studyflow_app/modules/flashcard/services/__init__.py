from .flashcard_service import FlashcardService
