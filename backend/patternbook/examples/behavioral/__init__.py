"""
Behavioral patterns: Chain of Responsibility, Command, Iterator, Mediator,
Memento, Observer, State, Strategy, Template Method, Visitor.
"""
