"""
Tests for the element dispatch table.

Each element kind is checked for its HTML fragments, its generated field
and its extraction statement.
"""

import pytest

from mould.ast import Directive, ElementKind, ExtractionSpec
from mould.codegen import ELEMENT_RULES, dispatch
from mould.parser import parse_line


def _dispatch_line(line):
    return dispatch(parse_line(line, 1))


class TestRuleTable:
    """Test the contents of ELEMENT_RULES."""

    def test_every_field_kind_has_a_rule(self):
        """Test that every field kind produces an answer field."""
        for kind in ("input", "textarea", "hidden", "email", "number", "range", "radio"):
            assert ELEMENT_RULES[kind].produces_field

    def test_paragraph_produces_no_field(self):
        """Test that paragraphs only contribute markup."""
        assert not ELEMENT_RULES[ElementKind.PARAGRAPH.value].produces_field

    def test_metadata_kinds_are_not_dispatched(self):
        """Test that page metadata has no dispatch rule."""
        assert "form-title" not in ELEMENT_RULES
        assert dispatch(Directive(element="form-title", value="x")) is None

    def test_unknown_element(self):
        """Test that an unknown tag dispatches to nothing."""
        assert _dispatch_line("checkbox[Agree] = yes") is None


class TestTextInputs:
    """Test text inputs and textareas."""

    def test_input(self):
        """Test the fragments, field and extraction of a text input."""
        output = _dispatch_line("input[Name] = First and last name")
        assert output.fragments == [
            "<div>",
            '<label for="name">Name</label>',
            '<input type="text" placeholder="First and last name" name="name"/>',
            "</div>",
        ]
        assert output.field_spec.key == "name"
        assert output.field_spec.title == "Name"
        assert output.field_spec.type_name == "str"
        assert output.extraction == ExtractionSpec(attribute="Name", key="name")

    def test_required_input(self):
        """Test that '!' adds the required attribute and flag."""
        output = _dispatch_line("!input[Name] = placeholder")
        assert output.field_spec.required is True
        assert '<input type="text" required placeholder="placeholder" name="name"/>' in output.fragments

    def test_optional_input_has_no_required_marker(self):
        """Test that optional fields carry no required marker."""
        output = _dispatch_line("input[Name] = placeholder")
        assert output.field_spec.required is False
        assert not any("required" in fragment for fragment in output.fragments)

    def test_textarea(self):
        """Test the textarea fragments."""
        output = _dispatch_line("textarea[Address] = your postal address")
        assert output.fragments == [
            "<div>",
            '<label for="address">Address</label>',
            '<textarea placeholder="your postal address" name="address"></textarea>',
            "</div>",
        ]

    def test_placeholder_is_escaped(self):
        """Test that attribute values are HTML-escaped."""
        output = _dispatch_line('input[Quote] = say "hi" & <wave>')
        assert 'placeholder="say &quot;hi&quot; &amp; &lt;wave&gt;"' in output.fragments[2]

    def test_label_uses_title_as_written(self):
        """Test that labels show the title while the field uses the key."""
        output = _dispatch_line("input[The rabbit boat but backwards]#access-token = you know it.")
        assert output.fragments[1] == '<label for="access-token">The rabbit boat but backwards</label>'
        assert output.field_spec.title == "AccessToken"
        assert output.field_spec.label == "The rabbit boat but backwards"


class TestHiddenAndEmail:
    """Test hidden and email inputs."""

    def test_hidden_has_no_label(self):
        """Test that hidden inputs carry their value and no label."""
        output = _dispatch_line("hidden[Campaign] = spring")
        assert output.fragments == [
            "<div>",
            '<input type="hidden" value="spring" name="campaign"/>',
            "</div>",
        ]
        assert output.field_spec.title == "Campaign"

    def test_email_uses_fixed_placeholder(self):
        """Test that the value becomes the email pattern."""
        output = _dispatch_line("!email[Email] = .+@.+")
        assert output.fragments[2] == (
            '<input type="email" required placeholder="email@provider.tld" pattern=".+@.+" name="email"/>'
        )

    def test_email_without_pattern(self):
        """Test that an empty value omits the pattern attribute."""
        output = _dispatch_line("email[Email] =")
        assert output.fragments[2] == '<input type="email" placeholder="email@provider.tld" name="email"/>'


class TestConstrainedInputs:
    """Test number and range inputs."""

    def test_number_attributes(self):
        """Test that constraint pairs become attributes in order."""
        output = _dispatch_line("number[Sticker sheet amount]#amount = min=1, max=5, value=1")
        assert output.fragments == [
            "<div>",
            '<label for="amount">Sticker sheet amount</label>',
            '<input type="number" min="1" max="5" value="1" name="amount"/>',
            "</div>",
        ]
        assert output.field_spec.title == "Amount"

    def test_range_is_number_with_other_type(self):
        """Test that range shares the number rules."""
        output = _dispatch_line("!range[Volume] = min=0, max=11")
        assert output.fragments[2] == '<input type="range" required min="0" max="11" name="volume"/>'

    def test_malformed_pairs_pass_through(self):
        """Test bare and empty constraint pairs."""
        output = _dispatch_line("number[Count] = min=1, bogus, , step = 2")
        assert output.fragments[2] == '<input type="number" min="1" bogus step="2" name="count"/>'


class TestRadio:
    """Test radio group expansion."""

    def test_radio_expansion(self):
        """Test one input and label per option and a single answer field."""
        output = _dispatch_line("radio[Size] = Small, Medium, Large")
        inputs = [fragment for fragment in output.fragments if fragment.startswith("<input")]
        assert inputs == [
            '<input type="radio" id="size-option-small" value="small" name="size"/>',
            '<input type="radio" id="size-option-medium" value="medium" name="size"/>',
            '<input type="radio" id="size-option-large" value="large" name="size"/>',
        ]
        assert '<label for="size-option-medium">Medium</label>' in output.fragments
        assert output.fragments[:2] == ["<div>", "<span>Size</span>"]
        assert output.fragments[-1] == "</div>"
        assert output.field_spec.title == "Size"
        assert output.extraction == ExtractionSpec(attribute="Size", key="size")

    def test_required_radio(self):
        """Test that required applies to every option."""
        output = _dispatch_line("!radio[Size] = S, M")
        inputs = [fragment for fragment in output.fragments if fragment.startswith("<input")]
        assert all(fragment.endswith(" required/>") for fragment in inputs)

    def test_radio_with_key(self):
        """Test that a custom key names the group and the ids."""
        output = _dispatch_line("radio[Pick a size]#shirt-size = XL")
        assert '<input type="radio" id="shirt-size-option-xl" value="xl" name="shirt-size"/>' in output.fragments
        assert output.field_spec.title == "ShirtSize"


class TestParagraph:
    """Test inline paragraphs."""

    def test_paragraph(self):
        """Test that paragraph text keeps its inline markup."""
        output = dispatch(Directive(element="form-paragraph", value="Read <a href='/faq'>the FAQ</a>"))
        assert output.fragments == ["<p>Read <a href='/faq'>the FAQ</a></p>"]
        assert output.field_spec is None
        assert output.extraction is None


@pytest.mark.parametrize("kind", ["input", "textarea", "hidden", "email", "number", "range", "radio"])
def test_every_field_kind_yields_field_and_extraction(kind):
    """Test that each field kind yields a matching field and extraction."""
    output = _dispatch_line(f"{kind}[Thing] = a=1")
    assert output.field_spec.key == "thing"
    assert output.extraction.attribute == output.field_spec.title == "Thing"
