import pytest

from functions import FunctionValue, function, positional_arity
from people import grow_up, make_person
from utils import ArityError


class TestFunctionValue:
    """Test arity enforcement on function values"""

    def test_arity_from_signature(self):
        """Arity counts required positional parameters"""
        assert FunctionValue(lambda a, b: a + b).arity == 2
        assert FunctionValue(lambda: 0).arity == 0

    def test_defaults_not_counted(self):
        """Parameters with defaults are not part of the arity"""
        assert positional_arity(lambda x, k=1: x + k) == 1

    def test_variadic_needs_explicit_arity(self):
        """Variadic callables must state their arity"""
        with pytest.raises(TypeError):
            FunctionValue(lambda *args: args)
        assert FunctionValue(lambda *args: args, arity=3)(1, 2, 3) == (1, 2, 3)

    def test_wrong_argument_count(self):
        """Calls with too few or too many arguments raise ArityError"""
        add = FunctionValue(lambda a, b: a + b, name="add")
        assert add(1, 2) == 3
        with pytest.raises(ArityError) as exc_info:
            add(1)
        assert exc_info.value.expected == 2
        assert exc_info.value.got == 1
        with pytest.raises(ArityError):
            add(1, 2, 3)

    def test_no_implicit_currying(self):
        """Fewer arguments never produce a partially applied function"""
        add = FunctionValue(lambda a, b: a + b)
        with pytest.raises(ArityError):
            add(1)

    def test_arity_error_is_type_error(self):
        """ArityError can be caught as TypeError"""
        with pytest.raises(TypeError):
            FunctionValue(lambda a: a)()

    def test_function_values_are_distinct(self):
        """Structurally identical function values are distinct objects"""
        fn = lambda x: x
        assert FunctionValue(fn) != FunctionValue(fn)

    def test_decorator(self):
        """@function and @function(arity=n) build function values"""
        @function
        def double(x):
            return x * 2

        @function(arity=2)
        def pair(*args):
            return args

        assert isinstance(double, FunctionValue)
        assert double(4) == 8
        assert double.__name__ == "double"
        assert pair(1, 2) == (1, 2)
        with pytest.raises(ArityError):
            pair(1)


class TestClosures:
    """Test captured environments and partial application"""

    def test_outer_returns_inner(self):
        """An outer function fixes a value for the inner closure"""
        def adder(n):
            return FunctionValue(lambda x: x + n)

        add_two = adder(2)
        add_five = adder(5)
        assert add_two.arity == 1
        assert add_two(1) == 3
        assert add_five(1) == 6

    def test_capture_by_binding(self):
        """Later changes to captured mutable state are visible"""
        state = {"step": 1}
        step = FunctionValue(lambda x: x + state["step"])
        assert step(1) == 2
        state["step"] = 10
        assert step(1) == 11

    def test_partial(self):
        """partial() narrows the arity by the supplied arguments"""
        volume = FunctionValue(lambda w, h, d: w * h * d, name="volume")
        flat = volume.partial(2, 3)
        assert flat.arity == 1
        assert flat(4) == 24
        assert volume.partial().arity == 3
        with pytest.raises(ArityError):
            flat(4, 5)

    def test_partial_too_many(self):
        """Supplying more arguments than the arity is an error"""
        with pytest.raises(ArityError):
            FunctionValue(lambda a: a).partial(1, 2)

    def test_partial_is_a_new_value(self):
        """Each partial application is its own function value"""
        add = FunctionValue(lambda a, b: a + b)
        assert add.partial(1) is not add.partial(1)
        assert add.partial(1)(1) == add.partial(1)(1)

    def test_rewrapping_keeps_arity_and_name(self):
        """Wrapping a function value again keeps its arity and name"""
        add = FunctionValue(lambda a, b: a + b, name="add")
        inc = FunctionValue(add.partial(1))
        assert inc.arity == 1
        assert inc.__name__ == "add"
        assert inc(2) == 3

        pair = function(FunctionValue(lambda *args: args, arity=2, name="pair"))
        assert pair.arity == 2
        assert pair(1, 2) == (1, 2)

    def test_rewrapping_bound_method(self):
        """Bound methods and curried values can be wrapped again"""
        ben = make_person("Ben", 19)
        is_adult = function(ben.is_adult)
        assert is_adult.arity == 0
        assert is_adult() is True
        assert FunctionValue(grow_up(2)).__name__ == "grow_up(2)"

    def test_rewrapping_with_explicit_name(self):
        """An explicit name overrides the wrapped value's name"""
        add = FunctionValue(lambda a, b: a + b, name="add")
        assert FunctionValue(add, name="plus").__name__ == "plus"
