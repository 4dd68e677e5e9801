import dataclasses
import json

import pytest

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


# ------------------------------------------------------------
# Chain of Responsibility / Command
# ------------------------------------------------------------

@pytest.mark.parametrize(
    "severity, handler",
    [(1, "Front Desk"), (2, "Tech Support"), (3, "Tech Support"), (4, "Engineering"), (5, None)],
)
def test_ticket_escalation(severity, handler):
    chain = chain_of_responsibility.build_support_chain()
    assert chain.handle(chain_of_responsibility.Ticket("T", severity)) == handler


def test_chain_demo():
    assert chain_of_responsibility.demo() == ["Front Desk", "Tech Support", "Engineering", None]


def test_undo_runs_in_reverse_order():
    light = command.Light("Hall")
    remote = command.RemoteInvoker()
    remote.press(command.LightOnCommand(light))
    remote.press(command.LightOffCommand(light))

    assert remote.undo() is True
    assert light.is_on is True
    assert remote.undo() is True
    assert light.is_on is False


def test_undo_with_empty_history_is_noop():
    remote = command.RemoteInvoker()
    assert remote.undo() is False


def test_command_demo():
    assert command.demo() == {"after_one_undo": True, "final": False, "extra_undo": False}


# ------------------------------------------------------------
# Iterator / Mediator / Memento
# ------------------------------------------------------------

def test_playlist_traversals_are_independent():
    playlist = iterator.Playlist("mix")
    for title in ("a", "b", "c"):
        playlist.add(iterator.Song(title, "x"))

    first = iter(playlist)
    next(first)
    assert [s.title for s in playlist] == ["a", "b", "c"]
    assert next(first).title == "b"
    assert len(playlist) == 3


def test_iterator_exhaustion():
    it = iterator.PlaylistIterator([])
    assert it.has_next() is False
    with pytest.raises(StopIteration):
        next(it)


def test_chat_room_routes_messages():
    room = mediator.ChatRoom("general")
    alice, bob, carol = mediator.User("alice"), mediator.User("bob"), mediator.User("carol")
    for user in (alice, bob, carol):
        room.join(user)

    assert alice.send("hi") == 2
    assert bob.inbox == ["alice: hi"]
    assert alice.inbox == []
    assert carol.send_to("alice", "hey") is True
    assert carol.send_to("dave", "hello?") is False
    assert alice.inbox == ["carol: hey"]


def test_user_outside_room_cannot_send():
    with pytest.raises(RuntimeError):
        mediator.User("lonely").send("anyone?")


def test_memento_restores_exact_state():
    editor = memento.TextEditor()
    history = memento.History()
    editor.write("abc")
    history.backup(editor)
    editor.write("def")

    assert history.undo(editor) is True
    assert editor.content == "abc"
    assert history.undo(editor) is False


def test_memento_is_immutable():
    snapshot = memento.TextEditor().save()
    with pytest.raises(dataclasses.FrozenInstanceError):
        snapshot.content = "changed"


def test_memento_demo():
    assert memento.demo() == ["Hello, World", "Hello", ""]


# ------------------------------------------------------------
# Observer / State / Strategy
# ------------------------------------------------------------

def test_detached_observer_stops_receiving():
    ticker = observer.StockTicker("XYZ")
    display = observer.PriceDisplay("d")
    ticker.attach(display)
    ticker.attach(display)
    ticker.set_price(1.0)
    ticker.detach(display)
    ticker.set_price(2.0)
    assert display.seen == [1.0]


def test_observer_demo():
    result = observer.demo()
    assert result["display_seen"] == [100.0, 125.5]
    assert len(result["alerts"]) == 2


def test_vending_machine_refuses_without_coin():
    machine = state.VendingMachine(stock=1)
    assert machine.press_button() is False
    assert machine.dispensed == 0
    assert machine.state.name == "no_coin"


def test_vending_machine_sells_out():
    machine = state.VendingMachine(stock=1)
    machine.insert_coin()
    assert machine.state.name == "has_coin"
    assert machine.press_button() is True
    assert machine.state.name == "sold_out"
    assert machine.insert_coin() is False


def test_vending_machine_ejects_coin():
    machine = state.VendingMachine(stock=1)
    machine.insert_coin()
    assert machine.eject_coin() is True
    assert machine.state.name == "no_coin"


def test_empty_machine_starts_sold_out():
    assert state.VendingMachine(stock=0).state.name == "sold_out"


def test_state_demo():
    assert state.demo() == {"dispensed": 2, "state": "sold_out"}


def test_strategy_swap_at_runtime():
    calc = strategy.ShippingCalculator(strategy.StandardShipping())
    assert calc.quote(10) == 17.0
    calc.set_strategy(strategy.ExpressShipping())
    assert calc.quote(10) == 35.0


def test_strategy_rejects_negative_weight():
    with pytest.raises(ValueError):
        strategy.ShippingCalculator(strategy.FreeShipping()).quote(-1)


def test_strategy_demo():
    assert strategy.demo() == {"standard": 9.8, "express": 20.0, "free": 0.0}


# ------------------------------------------------------------
# Template Method / Visitor
# ------------------------------------------------------------

RECORDS = [{"sku": "A-1", "qty": 3}, {"sku": "B-7", "qty": 1}]


def test_csv_export():
    assert template_method.CsvExporter().export(RECORDS) == "sku,qty\nA-1,3\nB-7,1"


def test_json_lines_export():
    lines = template_method.JsonLinesExporter().export(RECORDS).splitlines()
    assert [json.loads(line) for line in lines] == RECORDS


def test_markdown_export_has_footer():
    output = template_method.MarkdownTableExporter().export(RECORDS)
    assert output.startswith("| sku | qty |")
    assert output.endswith("_2 rows_")


def test_visitor_accumulates_area():
    calc = visitor.AreaCalculator()
    for shape in (visitor.Rectangle(2, 3), visitor.Rectangle(1, 1)):
        shape.accept(calc)
    assert calc.total == 7


def test_visitor_demo():
    result = visitor.demo()
    assert result["total_area"] == pytest.approx(9.927, abs=1e-3)
    assert result["exported"] == ["<circle r=1.0/>", "<rect w=2.0 h=3.0/>", "<circle r=0.5/>"]
