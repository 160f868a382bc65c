from xinject.attributes import ExpressionAttributeRegistry, normalize_attribute_name
from xinject.config.model import Settings


def test_normalization():
    assert normalize_attribute_name("data-ng-if") == "ng-if"
    assert normalize_attribute_name("x-ng:show") == "ng-show"
    assert normalize_attribute_name("NG_CLICK") == "ng-click"
    assert normalize_attribute_name("class") == "class"


def test_builtin_expression_attributes():
    registry = ExpressionAttributeRegistry()
    assert registry.is_expression_attribute("ng-if")
    assert registry.is_expression_attribute("data-ng-repeat")
    assert not registry.is_expression_attribute("class")
    assert not registry.is_expression_attribute("ng-app")


def test_settings_extend_registry():
    registry = ExpressionAttributeRegistry.from_settings(
        Settings(expression_attributes=["my-expr", "data-other_expr", "  "])
    )
    assert "my-expr" in registry
    assert "other-expr" in registry
    assert "ng-if" in registry
    assert registry.names() == sorted(registry.names())
