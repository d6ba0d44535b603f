"""End-to-end tests for the engine entry point."""

import io
import pytest
from rich.console import Console
from replacetmpl.lib.engine import CollectingSink, transform_create
from replacetmpl.lib.errors import InvalidPrefix, MissingReplacements
from replacetmpl.models.dataModel import EngineOptions

TABLE = {"title": "Boaty", "version": "1.0.0"}


@pytest.fixture
def sink():
    return CollectingSink()


def test_substitution(sink):
    transform = transform_create(TABLE, sink=sink)
    result = transform(
        "<title>@package.title@</title><v>@package.version@</v>", "index.html.tmpl"
    )
    assert result == "<title>Boaty</title><v>1.0.0</v>"
    assert sink.diagnostics == []


def test_missing_prefix(sink):
    transform = transform_create(TABLE, sink=sink)
    assert transform("@version@", "a.tmpl") == ""
    assert len(sink.diagnostics) == 1
    assert "must start with 'package.'" in sink.diagnostics[0].message


def test_unprefixed(sink):
    transform = transform_create({"x": "1"}, EngineOptions(unprefixed=True), sink=sink)
    assert transform("@x@-@y@", "a.tmpl") == "1-"
    assert len(sink.diagnostics) == 1
    assert sink.diagnostics[0].match == "@y@"
    assert sink.diagnostics[0].offset == 4


def test_unprefixed_overrides_prefix(sink):
    text = "@x@ @foo.x@ @y@"
    alone = transform_create({"x": "1"}, EngineOptions(unprefixed=True), sink=sink)
    expected = alone(text, "a.tmpl")
    expected_diagnostics = list(sink.diagnostics)
    sink.clear()

    both = transform_create(
        {"x": "1"}, EngineOptions(prefix="foo", unprefixed=True), sink=sink
    )
    assert both(text, "a.tmpl") == expected
    assert sink.diagnostics == expected_diagnostics


def test_missing_key_line_number(sink):
    transform = transform_create(TABLE, sink=sink)
    text = "first\nsecond\nthird @package.nope@ end\n"
    assert transform(text, "docs/a.tmpl") == "first\nsecond\nthird  end\n"
    assert len(sink.diagnostics) == 1
    assert sink.diagnostics[0].line == 3
    assert sink.diagnostics[0].path == "docs/a.tmpl"


def test_clean_text_unchanged(sink):
    transform = transform_create(TABLE, sink=sink)
    text = "no tokens here, mail me at a@b.c or @ stray @-sign"
    assert transform(text, "a.tmpl") == text
    assert sink.diagnostics == []


def test_foreign_prefix_passes_through(sink):
    transform = transform_create(TABLE, sink=sink)
    assert transform("@other.title@", "a.tmpl") == "@other.title@"
    assert sink.diagnostics == []


def test_precedence(sink):
    transform = transform_create([{"k": "A"}, {"k": "B"}], sink=sink)
    assert transform("@package.k@", "a.tmpl") == "A"


def test_empty_sequence_reports_every_token(sink):
    transform = transform_create([], sink=sink)
    assert transform("@package.a@@package.b@", "a.tmpl") == ""
    assert len(sink.diagnostics) == 2


def test_transform_is_reusable(sink):
    transform = transform_create(TABLE, sink=sink)
    assert transform("@package.title@", "a.tmpl") == "Boaty"
    assert transform("@package.version@", "b.tmpl") == "1.0.0"


def test_custom_prefix(sink):
    transform = transform_create(TABLE, EngineOptions(prefix="myPrefix2"), sink=sink)
    assert transform.prefix == "myPrefix2"
    assert transform("@myPrefix2.title@", "a.tmpl") == "Boaty"


def test_missing_replacements():
    with pytest.raises(MissingReplacements, match="Replacements missing"):
        transform_create(None)


def test_invalid_prefix():
    with pytest.raises(InvalidPrefix):
        transform_create(TABLE, EngineOptions(prefix="my-prefix"))


def test_debug_output(sink):
    buffer = io.StringIO()
    transform_create(
        TABLE, EngineOptions(debug=True), sink=sink, console=Console(file=buffer)
    )
    output = buffer.getvalue()
    assert "Prefix: package" in output
    assert "Replacements:" in output
    assert "Boaty" in output


def test_debug_output_unprefixed(sink):
    buffer = io.StringIO()
    transform_create(
        TABLE,
        EngineOptions(unprefixed=True, debug=True),
        sink=sink,
        console=Console(file=buffer),
    )
    assert "Prefix: unprefixed" in buffer.getvalue()


def test_no_debug_output_by_default(sink):
    buffer = io.StringIO()
    transform_create(TABLE, sink=sink, console=Console(file=buffer))
    assert buffer.getvalue() == ""
