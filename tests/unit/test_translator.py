"""Tests for the UI AST translator."""

import pytest
from hypothesis import given, strategies as st

from flutterexpo.mapping import MappingEntry, MappingRegistry, WidgetKind
from flutterexpo.models import UIASTDocument, UIASTNode
from flutterexpo.translator import UITranslator, translate_props, translate_style

REGISTRY = MappingRegistry()

widget_names = st.from_regex(r"[A-Z][A-Za-z0-9]{0,15}", fullmatch=True)
unmapped_names = widget_names.filter(lambda name: REGISTRY.resolve(name) is None)
style_keys = st.from_regex(r"[a-z][A-Za-z]{0,12}", fullmatch=True)
style_values = st.one_of(st.text(max_size=10), st.integers(), st.floats(allow_nan=False))


def node(widget_type, **fields):
    return UIASTNode(type=widget_type, **fields)


# ============================================================================
# Prop and Style Mapping
# ============================================================================

@pytest.mark.unit
def test_translate_props_defaults_first(registry):
    props = translate_props({"tooltip": "Add"}, registry.resolve("Button"))
    assert props == {"type": "button", "className": "flutter-button", "tooltip": "Add"}


@pytest.mark.unit
def test_translate_props_source_overrides_default(registry):
    props = translate_props({"className": "custom"}, registry.resolve("Row"))
    assert props == {"className": "custom"}


@pytest.mark.unit
def test_translate_props_rename(registry):
    props = translate_props({"data": "hello"}, registry.resolve("Text"))
    assert props == {"className": "flutter-text", "children": "hello"}
    assert "data" not in props


@pytest.mark.unit
def test_translate_props_rename_wins_over_verbatim_copy():
    entry = MappingEntry(
        source_type="Label",
        target_tag="label",
        kind=WidgetKind.TEXT,
        prop_renames={"data": "children"},
    )
    props = translate_props({"children": "verbatim", "data": "renamed"}, entry)
    assert props == {"children": "renamed"}


@pytest.mark.unit
def test_translate_style_none(registry):
    assert translate_style(None, registry.resolve("Row")) is None


@pytest.mark.unit
def test_translate_style_passes_unknown_keys(registry):
    style = translate_style({"gap": "8px", "alignItems": "center"}, registry.resolve("Row"))
    assert style == {"gap": "8px", "alignItems": "center"}


@pytest.mark.unit
def test_translate_style_without_rename_table():
    entry = MappingEntry(source_type="Card", target_tag="section", kind=WidgetKind.CONTAINER)
    source = {"padding": 4}
    style = translate_style(source, entry)
    assert style == source
    assert style is not source


@pytest.mark.unit
def test_translate_style_applies_renames():
    entry = MappingEntry(
        source_type="Card",
        target_tag="section",
        kind=WidgetKind.CONTAINER,
        style_renames={"elevation": "boxShadow"},
    )
    assert translate_style({"elevation": "2px", "margin": 0}, entry) == {
        "margin": 0,
        "boxShadow": "2px",
    }


# ============================================================================
# Node Translation
# ============================================================================

@pytest.mark.unit
def test_text_node(translator):
    spec = translator.translate_node(node("Text", text="Hi"))
    assert spec.to_wire() == {
        "type": "span",
        "props": {"className": "flutter-text", "children": "Hi"},
    }


@pytest.mark.unit
def test_text_field_wins_over_data_prop(translator):
    spec = translator.translate_node(node("Text", props={"data": "old"}, text="new"))
    assert spec.props["children"] == "new"


@pytest.mark.unit
def test_text_without_text_keeps_data(translator):
    spec = translator.translate_node(node("Text", props={"data": "from props"}))
    assert spec.props["children"] == "from props"


@pytest.mark.unit
def test_empty_text_is_projected(translator):
    spec = translator.translate_node(node("Text", text=""))
    assert spec.props["children"] == ""


@pytest.mark.unit
@pytest.mark.parametrize("widget_type", ["Button", "FloatingActionButton"])
def test_button_enabled_negated(translator, widget_type):
    spec = translator.translate_node(node(widget_type, props={"enabled": False}))
    assert spec.type == "button"
    assert spec.props["disabled"] is True
    assert "enabled" not in spec.props


@pytest.mark.unit
def test_button_without_enabled(translator):
    spec = translator.translate_node(node("Button"))
    assert "disabled" not in spec.props


@pytest.mark.unit
def test_button_non_bool_enabled_copied_through_rename(translator):
    spec = translator.translate_node(node("Button", props={"enabled": "yes"}))
    assert spec.props["disabled"] == "yes"


@pytest.mark.unit
def test_unmapped_widget_fallback(translator):
    spec = translator.translate_node(
        node("CustomPaint", props={"painter": "x"}, style={"width": 10})
    )
    assert spec.to_wire() == {"type": "div", "props": {"className": "unknown-custompaint"}}


@pytest.mark.unit
def test_markup_only_widget_falls_back_live(translator):
    spec = translator.translate_node(node("Image", props={"src": "a.png"}))
    assert spec.type == "div"
    assert spec.props == {"className": "unknown-image"}


@pytest.mark.unit
def test_unmapped_widget_children_translated(translator):
    spec = translator.translate_node(
        node("Stack", children=[node("Text", text="a"), node("Positioned")])
    )
    assert [child.type for child in spec.children] == ["span", "div"]
    assert spec.children[1].props == {"className": "unknown-positioned"}


@pytest.mark.unit
def test_children_preserve_order_and_absence(translator):
    spec = translator.translate_node(
        node("Column", children=[node("Text", text=str(i)) for i in range(5)])
    )
    assert [child.props["children"] for child in spec.children] == ["0", "1", "2", "3", "4"]
    assert spec.children[0].children is None


@pytest.mark.unit
def test_empty_children_kept(translator):
    spec = translator.translate_node(node("Row", children=[]))
    assert spec.children == []
    assert spec.to_wire()["children"] == []


@pytest.mark.unit
def test_translate_document(translator, sample_document):
    document = UIASTDocument.model_validate(sample_document)
    spec = translator.translate(document)

    assert spec.type == "div"
    assert spec.props == {"className": "flutter-scaffold"}
    assert spec.style == {"backgroundColor": "#ffffff"}

    header, column, fab = spec.children
    assert header.type == "header"
    assert header.children[0].props["children"] == "Counter"
    assert [child.props["children"] for child in column.children] == ["You pressed", "0"]
    assert fab.props["disabled"] is False
    assert fab.props["tooltip"] == "Increment"
    assert fab.style == {"position": "fixed", "bottom": "16px"}


@pytest.mark.unit
def test_translation_does_not_mutate_input(translator):
    source = node("Button", props={"enabled": True}, style={"color": "red"})
    before = source.model_dump()
    translator.translate_node(source)
    assert source.model_dump() == before


@pytest.mark.unit
def test_diagnostics_list_unmapped_types(translator):
    document = UIASTDocument(
        screen_id="s",
        route="/s",
        tree=node("Scaffold", children=[node("Stack"), node("Text"), node("Stack")]),
    )
    result = translator.translate_with_diagnostics(document)
    assert result.unmapped_types == ["Stack", "Stack"]
    assert result.spec.children[1].type == "span"


@pytest.mark.unit
def test_custom_registry_translation():
    registry = MappingRegistry(
        [
            MappingEntry(
                source_type="Card",
                target_tag="section",
                kind=WidgetKind.CONTAINER,
                default_props={"className": "card"},
            )
        ]
    )
    spec = UITranslator(registry).translate_node(node("Card", children=[node("Text")]))
    assert spec.type == "section"
    assert spec.children[0].props == {"className": "unknown-text"}


# ============================================================================
# Properties
# ============================================================================

@pytest.mark.unit
@given(unmapped_names)
def test_unmapped_always_falls_back(widget_type):
    spec = UITranslator(REGISTRY).translate_node(node(widget_type))
    assert spec.type == "div"
    assert spec.props == {"className": f"unknown-{widget_type.lower()}"}
    assert spec.style is None


@pytest.mark.unit
@given(st.booleans())
def test_enabled_always_negated(enabled):
    spec = UITranslator(REGISTRY).translate_node(node("Button", props={"enabled": enabled}))
    assert spec.props["disabled"] is (not enabled)


@pytest.mark.unit
@given(st.text(max_size=50))
def test_text_always_projected(text):
    spec = UITranslator(REGISTRY).translate_node(node("Text", text=text))
    assert spec.props["children"] == text


@pytest.mark.unit
@given(st.dictionaries(style_keys, style_values, max_size=8))
def test_style_keys_preserved(style):
    spec = UITranslator(REGISTRY).translate_node(node("Container", style=style))
    assert spec.style == style
