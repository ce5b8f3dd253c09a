from .chat_service import ChatService
