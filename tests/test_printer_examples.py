from __future__ import annotations

import pytest

from htmlprint.ast import NodeRecord, Tree
from htmlprint.doc.builders import concat, group, line
from htmlprint.errors import NestingTooDeepError, UnexpectedNodeError
from htmlprint.models import PrintOptions
from htmlprint.printer import format_tree
from tree_helpers import GLUED, build, comment, inline_example, loc, tag, text


def test_inline_content_keeps_every_boundary_tight() -> None:
    assert format_tree(inline_example()) == "<div>a<span>b</span>c</div>\n"


def test_narrow_width_breaks_only_inside_tags() -> None:
    printed = format_tree(inline_example(), PrintOptions(print_width=10))

    assert printed == "<div>\n  a<span\n    >b</span\n  >c\n</div>\n"
    assert printed.replace("\n", "").replace(" ", "") == "<div>a<span>b</span>c</div>"


def test_self_closing_without_attributes() -> None:
    tree = build(tag("br", is_self_closing=True))
    assert format_tree(tree) == "<br />\n"


def test_self_closing_with_attribute() -> None:
    tree = build(tag("img", attrs=[("src", "a.png")], is_self_closing=True))
    assert format_tree(tree) == '<img src="a.png" />\n'


def test_dangling_space_needs_both_flags() -> None:
    both = build(tag("span", has_dangling_spaces=True, is_dangling_space_sensitive=True))
    assert format_tree(both) == "<span> </span>\n"

    assert format_tree(build(tag("span", has_dangling_spaces=True))) == "<span></span>\n"
    assert format_tree(build(tag("span", is_dangling_space_sensitive=True))) == "<span></span>\n"


def test_attributes_break_one_per_line() -> None:
    tree = build(tag("div", attrs=[("class", "container"), ("id", "main-content")]))

    assert format_tree(tree, PrintOptions(print_width=20)) == (
        '<div\n  class="container"\n  id="main-content"\n></div>\n'
    )
    assert format_tree(tree) == '<div class="container" id="main-content"></div>\n'


def test_attribute_values_are_escaped_and_valueless_keys_kept() -> None:
    tree = build(tag("button", attrs=[("disabled", None), ("title", 'say "hi"')]))
    assert format_tree(tree) == '<button disabled title="say &quot;hi&quot;"></button>\n'


def test_conditional_comment() -> None:
    tree = build({"type": "ieConditionalComment", "condition": "IE 9", "children": [text("x")]})
    assert format_tree(tree) == "<!--[if IE 9]>x<![endif]-->\n"


def test_comment_and_directive() -> None:
    tree = build(
        {"type": "directive", "name": "!DOCTYPE", "data": "html"},
        comment(" hello "),
        force_break_children=True,
    )
    assert format_tree(tree) == "<!DOCTYPE html>\n<!-- hello -->\n"


def test_multiline_comment_is_reindented() -> None:
    tree = build(tag("div", comment("\n      first\n        second\n    "), force_break_children=True))
    assert format_tree(tree) == "<div>\n  <!--\n    first\n      second\n  -->\n</div>\n"


def test_last_child_closing_end_is_borrowed_by_parent() -> None:
    tree = build(tag("p", tag("a", **GLUED)))
    assert format_tree(tree) == "<p><a></a></p>\n"


def test_runs_of_blank_lines_collapse_to_one() -> None:
    tree = build(
        tag("p", text("x"), end_location=loc(1, 8)),
        tag("p", text("y"), start_location=loc(5)),
    )
    assert format_tree(tree) == "<p>x</p>\n\n<p>y</p>\n"


def test_adjacent_lines_stay_adjacent() -> None:
    tree = build(
        tag("p", text("x"), end_location=loc(1, 8)),
        tag("p", text("y"), start_location=loc(2)),
        force_break_children=True,
    )
    assert format_tree(tree) == "<p>x</p>\n<p>y</p>\n"


def test_forced_empty_line_hint() -> None:
    tree = build(tag("p", text("x"), force_next_empty_line=True), tag("p", text("y")))
    assert format_tree(tree) == "<p>x</p>\n\n<p>y</p>\n"


def test_siblings_share_a_line_when_nothing_forces_a_break() -> None:
    tree = build(tag("p", text("x")), tag("p", text("y")))
    assert format_tree(tree) == "<p>x</p><p>y</p>\n"


def test_long_text_fills_lines() -> None:
    tree = build(tag("p", text("one two three four five six seven")))
    assert format_tree(tree, PrintOptions(print_width=20)) == (
        "<p>\n  one two three four\n  five six seven\n</p>\n"
    )


def test_indentation_sensitive_text_is_kept_verbatim() -> None:
    pre_text = text(
        "\n  line one\n    line two\n",
        is_white_space_sensitive=True,
        is_indentation_sensitive=True,
    )
    assert format_tree(build(tag("pre", pre_text))) == "<pre>\n  line one\n    line two\n</pre>\n"

    nested = build(tag("div", tag("pre", pre_text), force_break_children=True))
    assert format_tree(nested) == "<div>\n  <pre>\n  line one\n    line two\n  </pre>\n</div>\n"


def test_whitespace_sensitive_text_is_dedented() -> None:
    body = text("\n    alpha\n      beta\n  ", is_white_space_sensitive=True)
    assert format_tree(build(tag("textarea", body))) == "<textarea>\n  alpha\n    beta\n</textarea>\n"


def test_format_ignore_pragma_prints_source_verbatim() -> None:
    source = "<!-- format-ignore -->\n<table   ><tr><td>x</td></tr></table>\n"
    start = source.index("<table")
    end = source.index("</table>") + len("</table>")
    tree = build(
        comment(" format-ignore "),
        tag("table", start_location=loc(2, 0, start), end_location=loc(2, end - start, end)),
        source=source,
        force_break_children=True,
    )
    assert format_tree(tree) == source


def test_pragma_without_offsets_prints_normally() -> None:
    tree = build(comment(" format-ignore "), tag("table"), force_break_children=True)
    assert format_tree(tree) == "<!-- format-ignore -->\n<table></table>\n"


def test_custom_pragma_option() -> None:
    source = "<!-- keep -->\n<b >x</b >\n"
    start = source.index("<b")
    end = source.rindex(">") + 1
    tree = build(
        comment(" keep "),
        tag("b", text("x"), start_location=loc(2, 0, start), end_location=loc(2, end - start, end)),
        source=source,
        force_break_children=True,
    )
    assert format_tree(tree, PrintOptions(ignore_pragma="keep")) == source
    assert format_tree(tree) == "<!-- keep -->\n<b>x</b>\n"


def test_dynamic_attribute_is_printed_flat() -> None:
    def fake_text_to_doc(value, options):
        assert options["parser"] == "__js_expression"
        return group(concat(["a", line, "&&", line, "b"]), should_break=True)

    flat = build(tag("div", attrs=[(":key", "a&&b")]))
    assert format_tree(flat, text_to_doc=fake_text_to_doc) == '<div :key="a && b"></div>\n'

    multiline = build(tag("div", attrs=[(":key", "a\n&&\nb")]))
    assert format_tree(multiline, text_to_doc=fake_text_to_doc) == (
        '<div\n  :key="a\n  &&\n  b"\n></div>\n'
    )


def test_unknown_node_kind_is_rejected() -> None:
    tree = Tree([NodeRecord(kind="root", children=(1,)), NodeRecord(kind="bogus", parent=0, depth=1)])

    with pytest.raises(UnexpectedNodeError) as excinfo:
        format_tree(tree)

    assert "bogus" in str(excinfo.value)
    assert isinstance(excinfo.value, ValueError)


def test_nesting_limit() -> None:
    chain = tag("div", tag("div", tag("div", tag("div"))))

    with pytest.raises(NestingTooDeepError):
        format_tree(build(chain), PrintOptions(max_depth=3))

    assert format_tree(build(chain), PrintOptions(max_depth=4)) == (
        "<div><div><div><div></div></div></div></div>\n"
    )
