"""
Factory Method - Notification senders

Q: The code that sends alerts should not care whether the alert goes out
by email, SMS or push. How do you let subclasses decide which notification
object gets created?
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Type


class Notification(ABC):
    channel: str = ""

    @abstractmethod
    def send(self, recipient: str, message: str) -> str:
        pass


class EmailNotification(Notification):
    channel = "email"

    def send(self, recipient: str, message: str) -> str:
        text = f"Email to {recipient}: {message}"
        print(text)
        return text


class SMSNotification(Notification):
    channel = "sms"

    def send(self, recipient: str, message: str) -> str:
        text = f"SMS to {recipient}: {message[:160]}"
        print(text)
        return text


class PushNotification(Notification):
    channel = "push"

    def send(self, recipient: str, message: str) -> str:
        text = f"Push to device of {recipient}: {message}"
        print(text)
        return text


class NotificationCreator(ABC):
    """Creator: ``notify`` works against whatever ``create_notification`` returns"""

    @abstractmethod
    def create_notification(self) -> Notification:
        pass

    def notify(self, recipient: str, message: str) -> str:
        notification = self.create_notification()
        return notification.send(recipient, message)


class EmailCreator(NotificationCreator):
    def create_notification(self) -> Notification:
        return EmailNotification()


class SMSCreator(NotificationCreator):
    def create_notification(self) -> Notification:
        return SMSNotification()


class PushCreator(NotificationCreator):
    def create_notification(self) -> Notification:
        return PushNotification()


CREATORS: Dict[str, Type[NotificationCreator]] = {
    "email": EmailCreator,
    "sms": SMSCreator,
    "push": PushCreator,
}


def get_creator(channel: str) -> NotificationCreator:
    """Look up the creator for a channel name"""
    try:
        return CREATORS[channel.lower()]()
    except KeyError:
        raise ValueError(f"Unknown notification channel: {channel}") from None


def demo() -> List[str]:
    sent = []
    for channel in ("email", "sms", "push"):
        creator = get_creator(channel)
        sent.append(creator.notify("alice", "Your order has shipped"))
    return sent
