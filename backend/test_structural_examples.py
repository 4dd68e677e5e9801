import pytest

from patternbook.examples.structural import adapter, bridge, composite, decorator, facade, flyweight, proxy
from patternbook.examples.structural.composite import File, Folder


# ------------------------------------------------------------
# Composite
# ------------------------------------------------------------

@pytest.fixture
def tree():
    root = Folder("root")
    a = Folder("a").add(File("one.txt", 10)).add(File("two.txt", 20))
    b = Folder("b").add(Folder("nested").add(File("deep.txt", 5)))
    root.add(a).add(b).add(File("top.txt", 1))
    return root


def test_size_is_recursive_sum(tree):
    assert tree.size() == 36
    assert tree.find("b").size() == 5


def test_empty_folder_has_zero_size():
    assert Folder("empty").size() == 0


def test_find_depth_first(tree):
    assert tree.find("deep.txt").size() == 5
    assert tree.find("nested").name == "nested"
    assert tree.find("root") is tree
    assert tree.find("missing.txt") is None


def test_find_returns_first_match():
    first = File("dup", 1)
    root = Folder("root").add(Folder("x").add(first)).add(File("dup", 2))
    assert root.find("dup") is first


def test_negative_file_size_rejected():
    with pytest.raises(ValueError):
        File("bad", -1)


def test_remove_child(tree):
    top = tree.find("top.txt")
    tree.remove(top)
    assert tree.size() == 35


def test_composite_demo():
    assert composite.demo() == {"total_size": 2400, "src_size": 2000, "found": "utils.py", "missing": None}


# ------------------------------------------------------------
# Adapter / Bridge
# ------------------------------------------------------------

def test_adapter_converts_dollars_to_cents():
    gateway = adapter.LegacyPaymentGateway()
    assert adapter.PaymentAdapter(gateway).pay(12.34) is True
    assert gateway.charged_cents == [1234]


def test_adapter_refuses_non_positive_amounts():
    gateway = adapter.LegacyPaymentGateway()
    assert adapter.PaymentAdapter(gateway).pay(-5) is False
    assert gateway.charged_cents == []


def test_bridge_any_remote_with_any_device():
    remote = bridge.AdvancedRemoteControl(bridge.TV())
    remote.toggle_power()
    for _ in range(10):
        remote.volume_up()
    assert remote.device.get_volume() == 100
    remote.mute()
    assert remote.device.get_volume() == 0
    remote.volume_down()
    assert remote.device.get_volume() == 0


def test_bridge_demo():
    result = bridge.demo()
    assert result["tv"] == "TV enabled=True volume=40"
    assert result["radio"] == "Radio enabled=True volume=0"


# ------------------------------------------------------------
# Decorator / Facade / Flyweight / Proxy
# ------------------------------------------------------------

def test_decorators_stack_cost_and_description():
    drink = decorator.WhippedCream(decorator.Mocha(decorator.Milk(decorator.Espresso())))
    assert drink.cost() == pytest.approx(3.65)
    assert drink.description() == "Espresso, Milk, Mocha, Whipped Cream"


def test_facade_orders_subsystem_calls(capsys):
    theater = facade.HomeTheaterFacade(
        facade.Amplifier(), facade.Projector(), facade.TheaterLights(), facade.StreamingPlayer()
    )
    steps = theater.watch_movie("Alien")
    assert steps[0] == "Lights dimmed to 10%"
    assert steps[-1] == 'Playing "Alien"'
    assert theater.end_movie()[-1] == "Lights on"
    assert "Get ready to watch a movie..." in capsys.readouterr().out


def test_flyweight_shares_tree_types():
    factory = flyweight.TreeFactory()
    forest = flyweight.Forest(factory)
    a = forest.plant_tree(0, 0, "Oak", "green", "rough")
    b = forest.plant_tree(1, 1, "Oak", "green", "rough")
    forest.plant_tree(2, 2, "Pine", "green", "needles")
    assert a.tree_type is b.tree_type
    assert factory.type_count == 2
    assert flyweight.demo() == {"trees": 30, "tree_types": 3}


def test_proxy_loads_lazily_and_once(capsys):
    image = proxy.ImageProxy("cat.png")
    assert not image.is_loaded
    assert capsys.readouterr().out == ""

    image.display()
    image.display()
    out = capsys.readouterr().out
    assert out.count("Loading cat.png") == 1
    assert image.load_count == 1
    assert image.access_log == ["cat.png", "cat.png"]


def test_proxy_demo():
    assert proxy.demo() == {"loads": 1, "accesses": 2, "second_loaded": False}
