from krtools.define import expand_defines


def test_plain_text_unchanged():
    text = "int x = y + 2; /* comment */ // line\nchar c = 'a'; s = \"q\\\"z\";\n"
    assert expand_defines(text) == text


def test_define_substitutes():
    assert expand_defines("#define A B\nA A\n") == "#define A B\nB B\n"


def test_undef_stops_substitution():
    text = "#define A B\n#undef A\nA\n"
    assert expand_defines(text) == text


def test_chained_definition():
    out = expand_defines("#define A 1\n#define B A\nB\n")
    assert out.splitlines()[-1] == "1"


def test_not_replaced_inside_strings_and_comments():
    text = '#define A B\n"A" /* A */\n'
    assert expand_defines(text) == text


def test_invalid_directive_reports_error():
    out = expand_defines("#1\n")
    assert "Error: expected preprocessor directive." in out