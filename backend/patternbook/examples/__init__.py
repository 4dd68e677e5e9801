"""
Illustrative design pattern examples.

Each module is standalone: it defines the pattern's participants and a
``demo()`` function that walks through the scenario with console messages
and returns a small result value.

    creational/   object creation
    structural/   object composition
    behavioral/   object interaction
"""
