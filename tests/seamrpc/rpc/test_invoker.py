"""
Tests for the method registry and parameter binding
"""
import pytest

from seamrpc.errors import InvocationError
from seamrpc.rpc.envelope import Named, Positional
from seamrpc.rpc.invoker import MethodRegistry, bind_arguments, required_arity


class Target:
    def ping(self):
        return "pong"

    def add(self, a, b):
        return a + b

    def greet(self, name, greeting="Hello"):
        return f"{greeting}, {name}"

    def options(self, opts):
        return opts

    def variadic(self, *values):
        return list(values)

    def _secret(self):
        return "hidden"

    label = "not callable"


@pytest.fixture
def registry():
    return MethodRegistry(Target())


class TestRequiredArity:
    """Test minimum arity detection"""

    def test_counts_only_required_positionals(self):
        target = Target()
        assert required_arity(target.ping) == 0
        assert required_arity(target.add) == 2
        assert required_arity(target.greet) == 1
        assert required_arity(target.variadic) == 0

    def test_builtin_without_signature(self):
        assert required_arity(dict.fromkeys) >= 0


class TestBindArguments:
    """Test params to argument conversion"""

    def test_absent(self):
        assert bind_arguments(None) == []

    def test_positional(self):
        assert bind_arguments(Positional((1, 2))) == [1, 2]

    def test_named_is_one_aggregate_argument(self):
        assert bind_arguments(Named({"a": 1, "b": 2})) == [{"a": 1, "b": 2}]


class TestMethodRegistry:
    """Test exposure rules and invocation"""

    def test_public_methods_exposed(self, registry):
        assert registry.names() == ["add", "greet", "options", "ping", "variadic"]
        assert "_secret" not in registry
        assert "label" not in registry

    def test_exists_includes_private(self, registry):
        assert registry.exists("ping")
        assert registry.exists("_secret")
        assert not registry.exists("missing")
        assert not registry.exists("label")

    def test_invoke_positional(self, registry):
        assert registry.invoke("add", Positional((2, 3))) == 5
        assert registry.invoke("greet", Positional(("Ada",))) == "Hello, Ada"

    def test_invoke_named(self, registry):
        assert registry.invoke("options", Named({"depth": 2})) == {"depth": 2}

    def test_invoke_without_params(self, registry):
        assert registry.invoke("ping", None) == "pong"

    def test_private_not_accessible(self, registry):
        with pytest.raises(InvocationError, match="not publicly accessible"):
            registry.invoke("_secret", None)

    def test_too_few_parameters(self, registry):
        with pytest.raises(InvocationError, match="Too few parameters passed."):
            registry.invoke("add", Positional((1,)))

    def test_named_counts_as_one_argument(self, registry):
        with pytest.raises(InvocationError, match="Too few parameters"):
            registry.invoke("add", Named({"a": 1, "b": 2}))

    def test_register_extra_handler(self, registry):
        registry.register("double", lambda x: x * 2)
        assert registry.invoke("double", Positional((4,))) == 8

    @pytest.mark.parametrize("name", ["rpc.discover", "_hidden"])
    def test_register_rejects_unexposable_names(self, registry, name):
        with pytest.raises(ValueError):
            registry.register(name, lambda: None)

    def test_register_rejects_non_callable(self, registry):
        with pytest.raises(TypeError):
            registry.register("value", 42)
