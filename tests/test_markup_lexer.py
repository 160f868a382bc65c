from xinject.markup import MarkupLexer, MarkupTokenType, tokenize_markup


def _types(text):
    return [t.type for t in tokenize_markup(text)]


def test_basic_document():
    text = '<div class="a">Hi {{name}}</div><!-- c -->'
    tokens = tokenize_markup(text)
    assert [t.type for t in tokens] == [
        MarkupTokenType.TAG_START,
        MarkupTokenType.ATTR_NAME,
        MarkupTokenType.ATTR_VALUE,
        MarkupTokenType.TAG_END,
        MarkupTokenType.TEXT,
        MarkupTokenType.TAG_START,
        MarkupTokenType.TAG_END,
        MarkupTokenType.COMMENT,
    ]
    assert tokens[0].name == "div"
    assert tokens[2].value == '"a"' and tokens[2].name == "class"
    assert tokens[4].value == "Hi {{name}}"
    assert tokens[-1].value == "<!-- c -->"


def test_tokens_cover_their_text():
    text = "<p a='1' b=2 c>x</p>"
    for t in tokenize_markup(text):
        assert text[t.start:t.end] == t.value


def test_lone_angle_bracket_is_text():
    text = "a < b and c > d"
    tokens = tokenize_markup(text)
    assert len(tokens) == 1
    assert tokens[0].type is MarkupTokenType.TEXT
    assert tokens[0].value == text


def test_unterminated_comment_runs_to_end():
    text = "x <!-- never closed {{a}}"
    tokens = tokenize_markup(text)
    assert tokens[-1].type is MarkupTokenType.COMMENT
    assert tokens[-1].end == len(text)


def test_unterminated_attribute_value_runs_to_end():
    text = '<a href="oops'
    tokens = tokenize_markup(text)
    assert tokens[-1].type is MarkupTokenType.ATTR_VALUE
    assert tokens[-1].value == '"oops'


def test_script_contents_are_raw():
    text = "<script>if (a < b) { x = '{{y}}'; }</script>"
    types = _types(text)
    assert MarkupTokenType.RAW_TEXT in types
    assert MarkupTokenType.TEXT not in types


def test_doctype_cdata_and_pi():
    text = "<?xml version='1.0'?><!DOCTYPE html><![CDATA[ {{x}} ]]>"
    assert _types(text) == [MarkupTokenType.PI, MarkupTokenType.DOCTYPE, MarkupTokenType.CDATA]


def test_element_at_and_is_comment():
    text = "ab<!--c-->d"
    lexer = MarkupLexer(text)
    assert lexer.element_at(0).type is MarkupTokenType.TEXT
    assert lexer.element_at(5).type is MarkupTokenType.COMMENT
    assert lexer.is_comment(2)
    assert lexer.is_comment(9)
    assert not lexer.is_comment(10)
    assert lexer.element_at(len(text)) is None
    assert lexer.element_at(-1) is None


def test_element_at_whitespace_inside_tag():
    lexer = MarkupLexer('<a  href="x">')
    assert lexer.element_at(2) is None


def test_hosts_merge_text_and_comments():
    text = 'a {{ <!--{{z}}--> }}<b title="{{t}}">c</b>'
    hosts = MarkupLexer(text).hosts()
    assert [(h.kind, h.text) for h in hosts] == [
        ("text", "a {{ <!--{{z}}--> }}"),
        ("attribute", '"{{t}}"'),
        ("text", "c"),
    ]
    assert hosts[1].attribute == "title"
    assert hosts[1].quoted
    assert hosts[0].range.start == 0
