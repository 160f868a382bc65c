from xinject.scanner import iter_candidates, scan, scan_attribute_value
from xinject.types import Region


def _comment_predicate(text: str):
    """Inert predicate covering every <!-- ... --> span of text."""
    spans = []
    pos = 0
    while True:
        s = text.find("<!--", pos)
        if s < 0:
            break
        e = text.find("-->", s + 4)
        e = len(text) if e < 0 else e + 3
        spans.append((s, e))
        pos = e
    return lambda offset: any(s <= offset < e for s, e in spans)


def test_two_expressions():
    text = "a {{x}} b {{y}} z"
    regions = scan(text, "{{", "}}")
    assert regions == [Region(4, 5), Region(12, 13)]
    assert [r.substring(text) for r in regions] == ["x", "y"]


def test_no_start_marker_yields_nothing():
    assert scan("plain text }} only", "{{", "}}") == []
    assert scan("", "{{", "}}") == []


def test_empty_delimiters_disable_scan():
    assert scan("a {{x}}", "", "}}") == []
    assert scan("a {{x}}", "{{", "") == []
    assert list(iter_candidates("a {{x}}", "", "")) == []


def test_unterminated_runs_to_end_of_buffer():
    assert scan("a {{x", "{{", "}}") == [Region(4, 5)]


def test_comment_inside_expression_is_skipped():
    text = "a {{ <!--{{z}}--> }}"
    regions = scan(text, "{{", "}}", _comment_predicate(text))
    assert regions == [Region(4, 18)]


def test_start_inside_comment_is_vetoed():
    text = "<!-- {{hidden}} --> {{shown}}"
    regions = scan(text, "{{", "}}", _comment_predicate(text))
    assert [r.substring(text) for r in regions] == ["shown"]


def test_vetoed_start_does_not_swallow_following_expression():
    # the start marker in the comment has no end of its own
    text = "<!-- {{ --> {{b}}"
    regions = scan(text, "{{", "}}", _comment_predicate(text))
    assert [r.substring(text) for r in regions] == ["b"]


def test_zero_width_candidates_are_dropped():
    text = "{{}} {{a}}"
    assert list(iter_candidates(text, "{{", "}}")) == [Region(2, 2), Region(7, 8)]
    assert scan(text, "{{", "}}") == [Region(7, 8)]


def test_trailing_start_marker_yields_nothing():
    assert scan("abc {{", "{{", "}}") == []


def test_regions_are_ordered_and_disjoint():
    text = "{{a}}{{b}} x [[c]] {{d}}{{"
    regions = scan(text, "{{", "}}")
    assert [r.substring(text) for r in regions] == ["a", "b", "d"]
    for left, right in zip(regions, regions[1:]):
        assert left.end <= right.start
    assert all(0 <= r.start < r.end <= len(text) for r in regions)


def test_custom_delimiters():
    text = "Hello [[ user.name ]]!"
    assert [r.substring(text) for r in scan(text, "[[", "]]")] == [" user.name "]


def test_rescanning_is_idempotent():
    text = "x {{a}} <!-- {{b}} --> {{c"
    pred = _comment_predicate(text)
    first = scan(text, "{{", "}}", pred)
    assert scan(text, "{{", "}}", pred) == first
    assert len(first) == 2


def test_attribute_value_whole_region():
    assert scan_attribute_value('"a.b + c"') == [Region(1, 8)]


def test_attribute_value_too_short():
    assert scan_attribute_value("") == []
    assert scan_attribute_value('"') == []
    # only the quotes
    assert scan_attribute_value('""') == []


def test_symmetric_delimiters_alternate_open_and_close():
    text = "a %%x%% b %%y%%"
    regions = scan(text, "%%", "%%")
    assert regions == [Region(4, 5), Region(12, 13)]
    assert [r.substring(text) for r in regions] == ["x", "y"]


def test_symmetric_delimiters_unterminated_and_empty():
    assert [r.substring("%%%% %%tail") for r in scan("%%%% %%tail", "%%", "%%")] == ["tail"]
    assert list(iter_candidates("%%%%", "%%", "%%")) == [Region(2, 2)]
