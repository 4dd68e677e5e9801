# backend/patternbook/patterns/catalog.py
"""
Pattern Catalog - The 22 built-in design pattern entries

Each entry pairs a question prompt with the example module that answers it
and the bullet-point rationale.
"""

import sys

from patternbook.examples.behavioral import (
    chain_of_responsibility,
    command,
    iterator,
    mediator,
    memento,
    observer,
    state,
    strategy,
    template_method,
    visitor,
)
from patternbook.examples.creational import (
    abstract_factory,
    builder,
    factory_method,
    prototype,
    singleton,
)
from patternbook.examples.structural import (
    adapter,
    bridge,
    composite,
    decorator,
    facade,
    flyweight,
    proxy,
)
from patternbook.patterns.registry import Pattern, PatternCategory, PatternRegistry


# ============================================================
# CREATIONAL PATTERNS
# ============================================================

SINGLETON_PATTERN = Pattern(
    id="singleton",
    name="Singleton",
    question="How do you guarantee that an application shares exactly one database connection pool, even when several threads request it at once?",
    description="Ensure a class has only one instance and provide a global point of access to it.",
    category=PatternCategory.CREATIONAL,
    rationale=[
        "A private class-level instance plus a get_instance() accessor is the single access point",
        "Double-checked locking keeps concurrent first access from creating two pools",
        "Direct construction after creation fails loudly instead of silently duplicating state",
        "The pool itself bounds how many fake connections can be handed out",
    ],
    participants=["ConnectionPool", "Connection"],
    tags=["creational", "global-state", "thread-safety", "resource-sharing"],
    applicable_when=["only one instance", "single instance", "global access", "shared resource", "connection pool"],
    trade_offs={
        "pros": "Controlled access to a sole instance, lazy initialization",
        "cons": "Hidden global state, harder to test, concurrency concerns on creation",
    },
    related=["factory_method", "facade", "flyweight"],
    module=singleton.__name__,
    demo=singleton.demo,
)


FACTORY_METHOD_PATTERN = Pattern(
    id="factory_method",
    name="Factory Method",
    question="The alerting code must send notifications without caring whether they go out by email, SMS or push. How do you let subclasses decide which object is created?",
    description="Define an interface for creating an object but let subclasses decide which class to instantiate.",
    category=PatternCategory.CREATIONAL,
    rationale=[
        "NotificationCreator.notify() depends only on the abstract Notification",
        "Each concrete creator overrides create_notification() to pick the product",
        "Adding a channel means adding a product and a creator, not editing notify()",
        "get_creator() maps channel names to creators and rejects unknown channels",
    ],
    participants=["NotificationCreator", "Notification", "EmailCreator", "EmailNotification"],
    tags=["creational", "subclassing", "decoupling"],
    applicable_when=["subclasses decide", "which class to instantiate", "create objects", "notification", "factory"],
    trade_offs={
        "pros": "Decouples client code from concrete products, open for new products",
        "cons": "Parallel class hierarchies of creators and products",
    },
    related=["abstract_factory", "template_method", "prototype"],
    module=factory_method.__name__,
    demo=factory_method.demo,
)


ABSTRACT_FACTORY_PATTERN = Pattern(
    id="abstract_factory",
    name="Abstract Factory",
    question="A settings screen must render buttons and checkboxes that always belong to the same theme. How do you create families of related objects without naming their concrete classes?",
    description="Provide an interface for creating families of related or dependent objects without specifying their concrete classes.",
    category=PatternCategory.CREATIONAL,
    rationale=[
        "The screen receives one WidgetFactory and never mixes themes",
        "Each factory produces a consistent family of widgets",
        "Switching theme means swapping a single factory object",
    ],
    participants=["WidgetFactory", "LightThemeFactory", "DarkThemeFactory", "Button", "Checkbox"],
    tags=["creational", "families", "theming", "consistency"],
    applicable_when=["family of related objects", "families", "theme", "consistent products", "look and feel"],
    trade_offs={
        "pros": "Guarantees product compatibility, isolates concrete classes",
        "cons": "Adding a new kind of product changes every factory",
    },
    related=["factory_method", "singleton", "prototype"],
    module=abstract_factory.__name__,
    demo=abstract_factory.demo,
)


BUILDER_PATTERN = Pattern(
    id="builder",
    name="Builder",
    question="A computer has a required CPU and RAM and several optional parts. How do you assemble it step by step and refuse to produce an invalid configuration?",
    description="Separate the construction of a complex object from its representation so the same process can create different configurations.",
    category=PatternCategory.CREATIONAL,
    rationale=[
        "Fluent with_* steps replace a constructor with many optional arguments",
        "build() validates the CPU and RAM strings and raises ValueError on bad input",
        "is_valid() answers the same question without raising",
        "A Director captures common recipes such as office and gaming machines",
    ],
    participants=["ComputerBuilder", "Computer", "Director"],
    tags=["creational", "validation", "fluent-interface", "step-by-step"],
    applicable_when=["step by step", "many optional", "complex object", "telescoping constructor", "configuration"],
    trade_offs={
        "pros": "Readable construction, validation in one place, reusable recipes",
        "cons": "More classes, builder and product can drift apart",
    },
    related=["abstract_factory", "composite"],
    module=builder.__name__,
    demo=builder.demo,
)


PROTOTYPE_PATTERN = Pattern(
    id="prototype",
    name="Prototype",
    question="Setting up a report document takes many steps. How do you create new documents by copying a preconfigured one?",
    description="Specify the kinds of objects to create using a prototypical instance and create new objects by copying it.",
    category=PatternCategory.CREATIONAL,
    rationale=[
        "Documents clone themselves with a deep copy plus attribute overrides",
        "Mutating a clone's nested lists never leaks back into the prototype",
        "A registry hands out clones by name",
    ],
    participants=["Document", "PrototypeRegistry"],
    tags=["creational", "cloning", "copy"],
    applicable_when=["clone", "copy", "expensive to create", "preconfigured", "template object"],
    trade_offs={
        "pros": "Avoids repeated setup, adds and removes prototypes at runtime",
        "cons": "Deep copying objects with cycles or external resources is tricky",
    },
    related=["abstract_factory", "memento"],
    module=prototype.__name__,
    demo=prototype.demo,
)


# ============================================================
# STRUCTURAL PATTERNS
# ============================================================

ADAPTER_PATTERN = Pattern(
    id="adapter",
    name="Adapter",
    question="Checkout expects a PaymentProcessor that takes dollars, but the only gateway available is a legacy class that charges cents through a different method. How do you use it without changing either side?",
    description="Convert the interface of a class into another interface clients expect.",
    category=PatternCategory.STRUCTURAL,
    rationale=[
        "PaymentAdapter implements the target interface and wraps the legacy gateway",
        "Unit conversion (dollars to cents) lives in the adapter only",
        "Neither the checkout code nor the legacy gateway changes",
    ],
    participants=["PaymentProcessor", "PaymentAdapter", "LegacyPaymentGateway"],
    tags=["structural", "legacy", "interface", "integration", "payment"],
    applicable_when=["incompatible interface", "legacy", "third party", "wrap", "payment gateway"],
    trade_offs={
        "pros": "Reuses existing classes, keeps conversions in one place",
        "cons": "Extra indirection, one adapter per adaptee",
    },
    related=["bridge", "decorator", "proxy", "facade"],
    module=adapter.__name__,
    demo=adapter.demo,
)


BRIDGE_PATTERN = Pattern(
    id="bridge",
    name="Bridge",
    question="There are basic and advanced remotes, and TVs and radios. How do you avoid writing a class for every remote and device combination?",
    description="Decouple an abstraction from its implementation so that the two can vary independently.",
    category=PatternCategory.STRUCTURAL,
    rationale=[
        "Remotes hold a reference to a Device instead of inheriting from it",
        "New remotes and new devices extend separate hierarchies",
        "Any remote works with any device at runtime",
    ],
    participants=["RemoteControl", "AdvancedRemoteControl", "Device", "TV", "Radio"],
    tags=["structural", "composition-over-inheritance", "abstraction"],
    applicable_when=["vary independently", "class explosion", "combination", "platform", "abstraction and implementation"],
    trade_offs={
        "pros": "Avoids combinatorial subclassing, hides implementation details",
        "cons": "More moving parts for simple cases",
    },
    related=["adapter", "abstract_factory"],
    module=bridge.__name__,
    demo=bridge.demo,
)


COMPOSITE_PATTERN = Pattern(
    id="composite",
    name="Composite",
    question="Files and folders both have a size and can be searched, but a folder's size is the total of its contents. How do you treat single objects and compositions uniformly?",
    description="Compose objects into tree structures and let clients treat individual objects and compositions uniformly.",
    category=PatternCategory.STRUCTURAL,
    rationale=[
        "File and Folder share the FileSystemComponent interface",
        "Folder.size() recursively sums its children; an empty folder is 0",
        "Folder.find() searches depth-first and returns the first match or None",
        "Clients never check whether they hold a leaf or a folder",
    ],
    participants=["FileSystemComponent", "File", "Folder"],
    tags=["structural", "tree", "recursion", "hierarchy"],
    applicable_when=["tree", "hierarchy", "part-whole", "recursive", "nested", "folder"],
    trade_offs={
        "pros": "Uniform treatment of leaves and composites, easy to add node types",
        "cons": "Hard to restrict which children a composite accepts",
    },
    related=["decorator", "iterator", "visitor"],
    module=composite.__name__,
    demo=composite.demo,
)


DECORATOR_PATTERN = Pattern(
    id="decorator",
    name="Decorator",
    question="Milk, mocha and whipped cream can be added to any coffee in any combination. How do you add responsibilities dynamically instead of creating a subclass per combination?",
    description="Attach additional responsibilities to an object dynamically as a flexible alternative to subclassing.",
    category=PatternCategory.STRUCTURAL,
    rationale=[
        "Each condiment wraps a Beverage and is itself a Beverage",
        "cost() and description() delegate inward and add their own part",
        "Decorators stack in any order and any number",
    ],
    participants=["Beverage", "CondimentDecorator", "Milk", "Mocha", "WhippedCream"],
    tags=["structural", "wrapping", "extension", "runtime"],
    applicable_when=["add responsibilities", "dynamically", "combination", "wrap", "extend behavior"],
    trade_offs={
        "pros": "Avoids subclass explosion, responsibilities composed at runtime",
        "cons": "Many small objects, identity checks see the wrapper",
    },
    related=["adapter", "composite", "proxy", "strategy"],
    module=decorator.__name__,
    demo=decorator.demo,
)


FACADE_PATTERN = Pattern(
    id="facade",
    name="Facade",
    question="Watching a movie means dimming lights, starting the projector and amplifier and the player in the right order. How do you give clients one simple entry point into that subsystem?",
    description="Provide a unified interface to a set of interfaces in a subsystem.",
    category=PatternCategory.STRUCTURAL,
    rationale=[
        "HomeTheaterFacade exposes watch_movie() and end_movie()",
        "The facade knows the correct start-up and shut-down order",
        "Subsystem classes stay available for clients needing fine control",
    ],
    participants=["HomeTheaterFacade", "Amplifier", "Projector", "TheaterLights", "StreamingPlayer"],
    tags=["structural", "simplification", "subsystem"],
    applicable_when=["simple interface", "complex subsystem", "simplify", "entry point", "orchestrate"],
    trade_offs={
        "pros": "Simpler client code, fewer dependencies on subsystem internals",
        "cons": "The facade can grow into a god object",
    },
    related=["adapter", "mediator", "singleton"],
    module=facade.__name__,
    demo=facade.demo,
)


FLYWEIGHT_PATTERN = Pattern(
    id="flyweight",
    name="Flyweight",
    question="A forest has thousands of trees but only a few species. How do you avoid storing the same species data for every tree?",
    description="Use sharing to support large numbers of fine-grained objects efficiently.",
    category=PatternCategory.STRUCTURAL,
    rationale=[
        "TreeType holds the intrinsic state and is immutable",
        "TreeFactory caches one TreeType per distinct combination",
        "Each Tree keeps only its extrinsic position",
    ],
    participants=["TreeType", "TreeFactory", "Tree", "Forest"],
    tags=["structural", "memory", "sharing", "cache"],
    applicable_when=["large number of objects", "memory", "shared state", "many similar objects"],
    trade_offs={
        "pros": "Large memory savings when intrinsic state repeats",
        "cons": "Extrinsic state must be passed around, more complex code",
    },
    related=["composite", "singleton"],
    module=flyweight.__name__,
    demo=flyweight.demo,
)


PROXY_PATTERN = Pattern(
    id="proxy",
    name="Proxy",
    question="Loading a high-resolution image is slow and most gallery images are never opened. How do you defer the load until the image is shown, and log access?",
    description="Provide a surrogate or placeholder for another object to control access to it.",
    category=PatternCategory.STRUCTURAL,
    rationale=[
        "ImageProxy implements Image and creates RealImage only on first display",
        "The real image is loaded at most once",
        "Access logging is added without touching RealImage",
    ],
    participants=["Image", "ImageProxy", "RealImage"],
    tags=["structural", "lazy-loading", "access-control", "logging"],
    applicable_when=["lazy", "defer", "expensive object", "access control", "placeholder"],
    trade_offs={
        "pros": "Controls access, defers cost, transparent to clients",
        "cons": "Extra indirection, first access may be slow",
    },
    related=["adapter", "decorator"],
    module=proxy.__name__,
    demo=proxy.demo,
)


# ============================================================
# BEHAVIORAL PATTERNS
# ============================================================

CHAIN_OF_RESPONSIBILITY_PATTERN = Pattern(
    id="chain_of_responsibility",
    name="Chain of Responsibility",
    question="Support tickets should go to the front desk first and escalate only when too severe. How do you pass a request along a chain until someone handles it?",
    description="Avoid coupling the sender of a request to its receiver by giving more than one object a chance to handle it.",
    category=PatternCategory.BEHAVIORAL,
    rationale=[
        "Each handler either handles the ticket or forwards it to its successor",
        "The sender only knows the head of the chain",
        "A ticket nobody can handle ends the chain as unhandled (None)",
    ],
    participants=["SupportHandler", "Ticket"],
    tags=["behavioral", "escalation", "pipeline", "decoupling"],
    applicable_when=["escalate", "more than one handler", "pass along", "handler chain", "support ticket"],
    trade_offs={
        "pros": "Decouples sender and receivers, chain configurable at runtime",
        "cons": "Requests may go unhandled, harder to trace",
    },
    related=["command", "composite", "decorator"],
    module=chain_of_responsibility.__name__,
    demo=chain_of_responsibility.demo,
)


COMMAND_PATTERN = Pattern(
    id="command",
    name="Command",
    question="A remote should trigger actions without knowing how they work, and every action should be undoable. How do you turn a request into an object?",
    description="Encapsulate a request as an object, allowing parameterization, queuing and undoable operations.",
    category=PatternCategory.BEHAVIORAL,
    rationale=[
        "Each command knows its receiver and how to execute and undo",
        "The invoker keeps a history and undoes in last-in, first-out order",
        "Undo with an empty history is a harmless no-op",
    ],
    participants=["Command", "LightOnCommand", "LightOffCommand", "RemoteInvoker", "Light"],
    tags=["behavioral", "undo", "history", "request-object"],
    applicable_when=["undo", "queue requests", "history", "macro", "request as object"],
    trade_offs={
        "pros": "Undo/redo, logging, queuing and macro commands",
        "cons": "One class per action",
    },
    related=["memento", "chain_of_responsibility"],
    module=command.__name__,
    demo=command.demo,
)


ITERATOR_PATTERN = Pattern(
    id="iterator",
    name="Iterator",
    question="How do you let callers walk through a playlist's songs without exposing how the playlist stores them?",
    description="Provide a way to access the elements of an aggregate sequentially without exposing its representation.",
    category=PatternCategory.BEHAVIORAL,
    rationale=[
        "Playlist.__iter__ returns a fresh PlaylistIterator each time",
        "The iterator keeps its own position so traversals are independent",
        "Python's iterator protocol lets a for-loop drive the traversal",
    ],
    participants=["Playlist", "PlaylistIterator", "Song"],
    tags=["behavioral", "traversal", "collection"],
    applicable_when=["traverse", "iterate", "collection", "sequential access", "hide representation"],
    trade_offs={
        "pros": "Uniform traversal, multiple simultaneous traversals",
        "cons": "Overkill for simple lists",
    },
    related=["composite", "memento"],
    module=iterator.__name__,
    demo=iterator.demo,
)


MEDIATOR_PATTERN = Pattern(
    id="mediator",
    name="Mediator",
    question="Chat users should not hold references to every other user. How do you centralize their communication in one object?",
    description="Define an object that encapsulates how a set of objects interact.",
    category=PatternCategory.BEHAVIORAL,
    rationale=[
        "Users only know the ChatRoom they joined",
        "The room routes broadcasts and direct messages",
        "Adding a user never changes the other users",
    ],
    participants=["ChatRoom", "User"],
    tags=["behavioral", "communication", "decoupling", "hub"],
    applicable_when=["many-to-many", "centralize communication", "chat", "coordinate objects", "tight coupling"],
    trade_offs={
        "pros": "Reduces coupling between colleagues, central interaction logic",
        "cons": "The mediator can become complex",
    },
    related=["facade", "observer"],
    module=mediator.__name__,
    demo=mediator.demo,
)


MEMENTO_PATTERN = Pattern(
    id="memento",
    name="Memento",
    question="How do you capture an editor's state so it can be restored later, without exposing the editor's internals to the undo history?",
    description="Capture and externalize an object's internal state so it can be restored later without violating encapsulation.",
    category=PatternCategory.BEHAVIORAL,
    rationale=[
        "TextEditor creates immutable snapshots of its own state",
        "History stores snapshots but never inspects them",
        "Restoring a snapshot brings back the exact text and cursor",
    ],
    participants=["TextEditor", "EditorMemento", "History"],
    tags=["behavioral", "undo", "snapshot", "state"],
    applicable_when=["snapshot", "restore", "undo", "rollback", "save state"],
    trade_offs={
        "pros": "Undo without breaking encapsulation",
        "cons": "Memory cost of many snapshots",
    },
    related=["command", "iterator", "prototype"],
    module=memento.__name__,
    demo=memento.demo,
)


OBSERVER_PATTERN = Pattern(
    id="observer",
    name="Observer",
    question="Several displays must update whenever a stock price changes, and new displays can be attached at runtime. How do you notify dependents without coupling the stock to them?",
    description="Define a one-to-many dependency so that when one object changes state all its dependents are notified.",
    category=PatternCategory.BEHAVIORAL,
    rationale=[
        "StockTicker keeps a list of observers behind a small interface",
        "set_price() notifies every attached observer",
        "Detached observers stop receiving updates",
    ],
    participants=["StockTicker", "StockObserver", "PriceDisplay", "PriceAlert"],
    tags=["behavioral", "events", "publish-subscribe", "notification"],
    applicable_when=["notify", "subscribe", "state changes", "one-to-many", "event", "listeners"],
    trade_offs={
        "pros": "Loose coupling between subject and observers",
        "cons": "Unexpected update cascades, notification order not guaranteed by design",
    },
    related=["mediator", "singleton"],
    module=observer.__name__,
    demo=observer.demo,
)


STATE_PATTERN = Pattern(
    id="state",
    name="State",
    question="A vending machine behaves differently with and without a coin, and when sold out. How do you let behavior change with the internal state without a tangle of conditionals?",
    description="Allow an object to alter its behavior when its internal state changes.",
    category=PatternCategory.BEHAVIORAL,
    rationale=[
        "Each state class handles insert_coin, eject_coin and press_button",
        "States switch the machine to the next state",
        "Dispensing without a coin is refused; zero stock leads to sold out",
    ],
    participants=["VendingMachine", "MachineState", "NoCoinState", "HasCoinState", "SoldOutState"],
    tags=["behavioral", "state-machine", "transitions"],
    applicable_when=["state machine", "behavior depends on state", "transitions", "conditionals", "mode"],
    trade_offs={
        "pros": "State-specific behavior localized, explicit transitions",
        "cons": "More classes for simple machines",
    },
    related=["strategy", "flyweight", "singleton"],
    module=state.__name__,
    demo=state.demo,
)


STRATEGY_PATTERN = Pattern(
    id="strategy",
    name="Strategy",
    question="Orders can ship standard, express or free, and new options keep appearing. How do you swap the cost algorithm without touching the order code?",
    description="Define a family of algorithms, encapsulate each one and make them interchangeable.",
    category=PatternCategory.BEHAVIORAL,
    rationale=[
        "Each ShippingStrategy implements calculate(weight)",
        "ShippingCalculator delegates to its current strategy",
        "Strategies can be swapped at runtime with set_strategy()",
    ],
    participants=["ShippingCalculator", "ShippingStrategy", "StandardShipping", "ExpressShipping", "FreeShipping"],
    tags=["behavioral", "algorithm", "interchangeable", "pricing"],
    applicable_when=["interchangeable algorithms", "swap algorithm", "pricing", "family of algorithms", "at runtime"],
    trade_offs={
        "pros": "Open for new algorithms, removes conditionals",
        "cons": "Clients must know which strategy to choose",
    },
    related=["state", "template_method", "decorator"],
    module=strategy.__name__,
    demo=strategy.demo,
)


TEMPLATE_METHOD_PATTERN = Pattern(
    id="template_method",
    name="Template Method",
    question="CSV, JSON and Markdown exports all follow the same steps but format them differently. How do you fix the algorithm and let subclasses fill in the details?",
    description="Define the skeleton of an algorithm in an operation, deferring some steps to subclasses.",
    category=PatternCategory.BEHAVIORAL,
    rationale=[
        "DataExporter.export() fixes the order: header, records, footer",
        "format_record() is abstract; header() and footer() are optional hooks",
        "Subclasses never re-implement the overall algorithm",
    ],
    participants=["DataExporter", "CsvExporter", "JsonLinesExporter", "MarkdownTableExporter"],
    tags=["behavioral", "skeleton", "hooks", "inheritance", "export"],
    applicable_when=["same steps", "skeleton", "algorithm structure", "hooks", "export"],
    trade_offs={
        "pros": "Reuses the invariant part of the algorithm",
        "cons": "Inheritance-based, skeleton is hard to change later",
    },
    related=["factory_method", "strategy"],
    module=template_method.__name__,
    demo=template_method.demo,
)


VISITOR_PATTERN = Pattern(
    id="visitor",
    name="Visitor",
    question="You keep adding operations over a stable set of shapes. How do you add an operation without editing every shape class?",
    description="Represent an operation to be performed on the elements of an object structure without changing their classes.",
    category=PatternCategory.BEHAVIORAL,
    rationale=[
        "Each shape's accept() calls the matching visit_* method (double dispatch)",
        "New operations are new visitor classes",
        "Visitors can accumulate results across the whole structure",
    ],
    participants=["ShapeVisitor", "AreaCalculator", "DescriptionExporter", "Shape", "Circle", "Rectangle"],
    tags=["behavioral", "double-dispatch", "operations"],
    applicable_when=["new operations", "without changing classes", "double dispatch", "object structure", "operation"],
    trade_offs={
        "pros": "Easy to add operations, related behavior kept together",
        "cons": "Adding a new element class changes every visitor",
    },
    related=["composite", "iterator"],
    module=visitor.__name__,
    demo=visitor.demo,
)


# ============================================================
# CATALOG AGGREGATION
# ============================================================

PATTERN_CATALOG = [
    # Creational
    SINGLETON_PATTERN,
    FACTORY_METHOD_PATTERN,
    ABSTRACT_FACTORY_PATTERN,
    BUILDER_PATTERN,
    PROTOTYPE_PATTERN,
    # Structural
    ADAPTER_PATTERN,
    BRIDGE_PATTERN,
    COMPOSITE_PATTERN,
    DECORATOR_PATTERN,
    FACADE_PATTERN,
    FLYWEIGHT_PATTERN,
    PROXY_PATTERN,
    # Behavioral
    CHAIN_OF_RESPONSIBILITY_PATTERN,
    COMMAND_PATTERN,
    ITERATOR_PATTERN,
    MEDIATOR_PATTERN,
    MEMENTO_PATTERN,
    OBSERVER_PATTERN,
    STATE_PATTERN,
    STRATEGY_PATTERN,
    TEMPLATE_METHOD_PATTERN,
    VISITOR_PATTERN,
]


def register_all_patterns(registry: PatternRegistry) -> None:
    """Register all patterns from the catalog"""
    for pattern in PATTERN_CATALOG:
        registry.register(pattern)
    print(f"[CATALOG] Registered {len(PATTERN_CATALOG)} patterns", file=sys.stderr)
