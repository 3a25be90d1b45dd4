"""Tests for matching/interfaces.py and matching/predicates.py."""

from typescan.application.matching.interfaces import implements_interface, is_interface_equal
from typescan.application.matching.predicates import implements
from tests.factories import make_class, make_interface


class TestImplementsInterface:
    """Tests for implements_interface()."""

    def test_direct(self) -> None:
        plugin = make_interface("Plugin")
        foo = make_class("FooPlugin", plugin)

        assert implements_interface(foo, plugin)

    def test_via_ancestor(self) -> None:
        plugin = make_interface("Plugin")
        base = make_class("BasePlugin", plugin, is_abstract=True)
        foo = make_class("FooPlugin", parent=base)

        assert implements_interface(foo, plugin)

    def test_via_extension_chain(self) -> None:
        plugin = make_interface("Plugin")
        extended = make_interface("Extended", plugin)
        deeper = make_interface("Deeper", extended)
        bar = make_class("BarPlugin", deeper)

        assert implements_interface(bar, plugin)
        assert implements_interface(bar, extended)

    def test_ancestor_declares_sub_interface(self) -> None:
        plugin = make_interface("Plugin")
        extended = make_interface("Extended", plugin)
        base = make_class("Base", extended)
        leaf = make_class("Leaf", parent=make_class("Middle", parent=base))

        assert implements_interface(leaf, plugin)

    def test_unrelated(self) -> None:
        plugin = make_interface("Plugin")
        other = make_interface("Other")
        foo = make_class("Foo", other)

        assert not implements_interface(foo, plugin)

    def test_super_interface_does_not_imply_sub(self) -> None:
        plugin = make_interface("Plugin")
        extended = make_interface("Extended", plugin)
        foo = make_class("Foo", plugin)

        assert not implements_interface(foo, extended)

    def test_interface_does_not_implement_itself(self) -> None:
        plugin = make_interface("Plugin")

        assert not implements_interface(plugin, plugin)

    def test_sub_interface_implements_super(self) -> None:
        plugin = make_interface("Plugin")
        extended = make_interface("Extended", plugin)

        assert implements_interface(extended, plugin)

    def test_non_interface_target(self) -> None:
        base = make_class("Base", is_abstract=True)
        foo = make_class("Foo", parent=base)

        assert not implements_interface(foo, base)

    def test_none_inputs(self) -> None:
        plugin = make_interface("Plugin")
        foo = make_class("Foo", plugin)

        assert not implements_interface(None, plugin)
        assert not implements_interface(foo, None)
        assert not implements_interface(None, None)

    def test_cyclic_class_chain_terminates(self) -> None:
        plugin = make_interface("Plugin")
        a = make_class("A")
        b = make_class("B", parent=a)
        a.parent = b

        assert not implements_interface(a, plugin)

    def test_cyclic_extension_terminates(self) -> None:
        plugin = make_interface("Plugin")
        x = make_interface("X")
        y = make_interface("Y", x)
        x.interfaces.append(y)
        foo = make_class("Foo", x)

        assert not implements_interface(foo, plugin)


class TestIsInterfaceEqual:
    """Tests for is_interface_equal()."""

    def test_identity(self) -> None:
        plugin = make_interface("Plugin")

        assert is_interface_equal(plugin, plugin)

    def test_extends(self) -> None:
        plugin = make_interface("Plugin")
        extended = make_interface("Extended", plugin)

        assert is_interface_equal(extended, plugin)
        assert not is_interface_equal(plugin, extended)

    def test_same_name_different_identity(self) -> None:
        """Two loaded copies of one interface are different types."""
        assert not is_interface_equal(make_interface("Plugin"), make_interface("Plugin"))

    def test_none(self) -> None:
        assert not is_interface_equal(None, make_interface("Plugin"))


class TestImplementsPredicate:
    """Tests for implements() predicate factory."""

    def test_filters_types(self) -> None:
        plugin = make_interface("Plugin")
        foo = make_class("Foo", plugin)
        bar = make_class("Bar")

        predicate = implements(plugin)

        assert [t.name for t in (foo, bar) if predicate(t)] == ["Foo"]
