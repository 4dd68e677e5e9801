# backend/patternbook/examples/behavioral/chain_of_responsibility.py
"""
Chain of Responsibility - Support ticket escalation

Q: Tickets should go to the front desk first and escalate to tech support
or engineering only when they are too severe. How do you pass a request
along a chain until someone handles it?
"""

from dataclasses import dataclass
from typing import List, Optional


@dataclass
class Ticket:
    id: str
    severity: int  # 1 (trivial) .. 5 (outage)
    summary: str = ""


class SupportHandler:
    """Handles tickets up to ``max_severity``; anything above goes to the next handler"""

    def __init__(self, name: str, max_severity: int):
        self.name = name
        self.max_severity = max_severity
        self._next: Optional["SupportHandler"] = None

    def set_next(self, handler: "SupportHandler") -> "SupportHandler":
        self._next = handler
        return handler

    def handle(self, ticket: Ticket) -> Optional[str]:
        if ticket.severity <= self.max_severity:
            print(f"{self.name} handled ticket {ticket.id} (severity {ticket.severity})")
            return self.name
        if self._next is not None:
            print(f"{self.name} escalates ticket {ticket.id}")
            return self._next.handle(ticket)
        print(f"Ticket {ticket.id} (severity {ticket.severity}) was not handled")
        return None


def build_support_chain() -> SupportHandler:
    front_desk = SupportHandler("Front Desk", 1)
    front_desk.set_next(SupportHandler("Tech Support", 3)).set_next(SupportHandler("Engineering", 4))
    return front_desk


def demo() -> List[Optional[str]]:
    chain = build_support_chain()
    tickets = [
        Ticket("T-1", 1, "Password reset"),
        Ticket("T-2", 3, "VPN drops"),
        Ticket("T-3", 4, "Data corruption"),
        Ticket("T-4", 5, "Datacenter fire"),
    ]
    return [chain.handle(t) for t in tickets]
