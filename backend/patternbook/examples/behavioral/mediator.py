"""
Mediator - Chat room

Q: Users in a chat should not keep references to every other user. How do
you centralize their communication in one object?
"""

from typing import Dict, List


class ChatRoom:
    """Mediator: users only talk to the room"""

    def __init__(self, name: str):
        self.name = name
        self._users: Dict[str, "User"] = {}

    def join(self, user: "User") -> None:
        self._users[user.name] = user
        user.room = self
        print(f"{user.name} joined #{self.name}")

    def broadcast(self, sender: "User", message: str) -> int:
        delivered = 0
        for name, user in self._users.items():
            if name != sender.name:
                user.receive(sender.name, message)
                delivered += 1
        return delivered

    def direct(self, sender: "User", recipient: str, message: str) -> bool:
        user = self._users.get(recipient)
        if user is None:
            print(f"No user named {recipient} in #{self.name}")
            return False
        user.receive(sender.name, message)
        return True


class User:
    def __init__(self, name: str):
        self.name = name
        self.room = None
        self.inbox: List[str] = []

    def send(self, message: str) -> int:
        if self.room is None:
            raise RuntimeError(f"{self.name} has not joined a room")
        return self.room.broadcast(self, message)

    def send_to(self, recipient: str, message: str) -> bool:
        if self.room is None:
            raise RuntimeError(f"{self.name} has not joined a room")
        return self.room.direct(self, recipient, message)

    def receive(self, sender: str, message: str) -> None:
        entry = f"{sender}: {message}"
        self.inbox.append(entry)
        print(f"[{self.name}'s screen] {entry}")


def demo() -> dict:
    room = ChatRoom("design-patterns")
    alice, bob, carol = User("alice"), User("bob"), User("carol")
    for user in (alice, bob, carol):
        room.join(user)

    alice.send("Anyone read the GoF book?")
    bob.send_to("alice", "Twice!")
    return {"alice": alice.inbox, "bob": bob.inbox, "carol": carol.inbox}
