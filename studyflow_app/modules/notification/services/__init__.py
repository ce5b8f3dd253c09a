from .notification_service import NotificationService
