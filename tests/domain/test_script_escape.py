"""script_escape.py のテスト。"""

from bundle_inliner.domain.script_escape import (
    count_script_close,
    describe_missing_placeholder,
    escape_script_close,
    escape_string_literal,
    find_module_placeholder,
    parse_attributes,
)


class TestEscapeScriptClose:
    def test_escapes_closing_tag(self) -> None:
        assert escape_script_close('console.log("</script>")') == 'console.log("<\\/script>")'

    def test_escapes_every_occurrence(self) -> None:
        source = "a</script>b</script c</scripts"
        escaped = escape_script_close(source)
        assert "</script" not in escaped
        assert escaped.count("<\\/script") == 3

    def test_only_slash_is_escaped(self) -> None:
        assert escape_script_close("</script>") == "<\\/script>"

    def test_any_letter_case_is_escaped(self) -> None:
        assert escape_script_close("</SCRIPT>") == "<\\/SCRIPT>"
        assert escape_script_close("a</Script b</sCrIpT") == "a<\\/Script b<\\/sCrIpT"

    def test_no_occurrence_unchanged(self) -> None:
        source = "const x = 1; // <script> opening only"
        assert escape_script_close(source) == source

    def test_count(self) -> None:
        assert count_script_close("</script></script>") == 2
        assert count_script_close("nothing") == 0
        assert count_script_close("</SCRIPT></Script>") == 2


class TestEscapeStringLiteral:
    def test_comment_open_and_close_tag(self) -> None:
        assert escape_string_literal('"<!--<script></SCRIPT>"') == '"<\\!--<script><\\/SCRIPT>"'

    def test_plain_literal_unchanged(self) -> None:
        assert escape_string_literal('"app-root"') == '"app-root"'


class TestParseAttributes:
    def test_quoted_and_bare_values(self) -> None:
        attrs = parse_attributes(' type="module" src=\'/a.js\' defer crossorigin=anonymous')
        assert attrs == {
            "type": "module",
            "src": "/a.js",
            "defer": "",
            "crossorigin": "anonymous",
        }

    def test_names_are_lowercased(self) -> None:
        assert parse_attributes(' TYPE="module"') == {"type": "module"}


class TestFindModulePlaceholder:
    SRC = "/assets/x.js"

    def test_exact_form(self) -> None:
        template = '<body><script type="module" src="/assets/x.js"></script></body>'
        span = find_module_placeholder(template, self.SRC)
        assert span is not None
        start, end = span
        assert template[start:end] == '<script type="module" src="/assets/x.js"></script>'

    def test_attribute_order_and_extra_attributes(self) -> None:
        tag = '<script crossorigin src="/assets/x.js" type="module" ></script>'
        template = f"<head>{tag}</head>"
        span = find_module_placeholder(template, self.SRC)
        assert span is not None
        assert template[span[0]:span[1]] == tag

    def test_different_src_not_matched(self) -> None:
        template = '<script type="module" src="/assets/y.js"></script>'
        assert find_module_placeholder(template, self.SRC) is None

    def test_classic_script_not_matched(self) -> None:
        template = '<script src="/assets/x.js"></script>'
        assert find_module_placeholder(template, self.SRC) is None

    def test_script_with_body_not_matched(self) -> None:
        template = '<script type="module" src="/assets/x.js">run()</script>'
        assert find_module_placeholder(template, self.SRC) is None


class TestDescribeMissingPlaceholder:
    SRC = "/assets/x.js"

    def test_template_drift(self) -> None:
        template = '<script type="module" src="/assets/other.js"></script>'
        reason = describe_missing_placeholder(template, self.SRC)
        assert "/assets/other.js" in reason
        assert "instead of /assets/x.js" in reason

    def test_already_inlined(self) -> None:
        template = '<script type="module">\nconsole.log(1)\n</script>'
        assert "inlined already" in describe_missing_placeholder(template, self.SRC)

    def test_no_script(self) -> None:
        reason = describe_missing_placeholder("<html></html>", self.SRC)
        assert "in template" in reason
