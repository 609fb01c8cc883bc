import unittest

from keytensor.domain.utils import create_path_builder


class TestCreatePathBuilder(unittest.TestCase):
    def setUp(self) -> None:
        # Fresh builder per test to avoid map-sharing across tests.
        self.decorator = create_path_builder("mode")

    def test_state_must_be_hashable(self) -> None:
        class C:
            mode = "A"

            def foo(self, x: int) -> int:
                return x

        with self.assertRaises(TypeError) as ctx:
            self.decorator(C, C.foo, ["not-hashable"])(lambda self, x: x)

        self.assertIn("must be hashable", str(ctx.exception))

    def test_dispatch_selects_registered_control_path(self) -> None:
        class C:
            def __init__(self, mode):
                self.mode = mode

            def foo(self, x: int) -> int:
                return -999

        @self.decorator(C, C.foo, "A")
        def foo_A(self, x: int) -> int:
            return x + 10

        @self.decorator(C, C.foo, "B")
        def foo_B(self, x: int) -> int:
            return x + 20

        self.assertEqual(C("A").foo(1), 11)
        self.assertEqual(C("B").foo(1), 21)

    def test_implementation_receives_instance(self) -> None:
        class C:
            mode = "A"

            def __init__(self, base):
                self.base = base

            def foo(self, x: int) -> int:
                return -999

        @self.decorator(C, C.foo, "A")
        def foo_A(self, x: int) -> int:
            return self.base + x

        self.assertEqual(C(100).foo(5), 105)

    def test_dispatch_supports_none_state(self) -> None:
        class C:
            mode = None

            def foo(self, x: int) -> int:
                return -999

        @self.decorator(C, C.foo, None)
        def foo_none(self, x: int) -> int:
            return x * 2

        self.assertEqual(C().foo(3), 6)

    def test_missing_state_attribute_raises_not_implemented(self) -> None:
        class C:
            def foo(self, x: int) -> int:
                return x

        @self.decorator(C, C.foo, "A")
        def foo_A(self, x: int) -> int:
            return x + 1

        with self.assertRaises(NotImplementedError) as ctx:
            C().foo(1)

        self.assertIn("missing attribute", str(ctx.exception))
        self.assertIn("'mode'", str(ctx.exception))

    def test_missing_control_path_raises_not_implemented(self) -> None:
        class C:
            mode = "B"

            def foo(self, x: int) -> int:
                return x

        @self.decorator(C, C.foo, "A")
        def foo_A(self, x: int) -> int:
            return x + 1

        with self.assertRaises(NotImplementedError) as ctx:
            C().foo(1)

        self.assertIn("Missing control path", str(ctx.exception))
        self.assertIn("mode='B'", str(ctx.exception))

    def test_on_missing_builds_raised_exception(self) -> None:
        class MissingPathError(Exception):
            pass

        seen = []

        def on_missing(method, state):
            seen.append((method.__name__, state))
            return MissingPathError(state)

        class C:
            mode = "B"

            def foo(self, x: int) -> int:
                return x

        @self.decorator(C, C.foo, "A", on_missing)
        def foo_A(self, x: int) -> int:
            return x + 1

        with self.assertRaises(MissingPathError):
            C().foo(123)
        self.assertEqual(seen, [("foo", "B")])

    def test_wrapper_preserves_original_method_metadata(self) -> None:
        class C:
            mode = "A"

            def foo(self, x: int) -> int:
                """Original foo docstring."""
                return x

        @self.decorator(C, C.foo, "A")
        def foo_A(self, x: int) -> int:
            return x + 1

        self.assertEqual(C.foo.__name__, "foo")
        self.assertEqual(C.foo.__doc__, "Original foo docstring.")

    def test_subclass_inherits_dispatch(self) -> None:
        class Base:
            def foo(self) -> str:
                return "base"

        class Child(Base):
            mode = "A"

        @self.decorator(Base, Base.foo, "A")
        def foo_A(self) -> str:
            return type(self).__name__

        self.assertEqual(Child().foo(), "Child")

    def test_two_builders_do_not_share_control_paths(self) -> None:
        deco1 = create_path_builder("mode")
        deco2 = create_path_builder("mode")

        class C:
            def __init__(self, mode):
                self.mode = mode

            def foo(self, x: int) -> int:
                return -999

        @deco1(C, C.foo, "A")
        def foo_A_1(self, x: int) -> int:
            return 111

        # deco2 installs its own wrapper, which only consults deco2's map.
        @deco2(C, C.foo, "B")
        def foo_B_2(self, x: int) -> int:
            return 222

        with self.assertRaises(NotImplementedError):
            C("A").foo(0)

        self.assertEqual(C("B").foo(0), 222)


if __name__ == "__main__":
    unittest.main()
