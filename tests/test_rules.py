"""
Tests for the rule validator.
"""
import pytest

from templatereview.core.rules import validate_template, AMBIGUOUS_TERMS


CANONICAL = (
    "ROLE: You are a careful reviewer.\n"
    "\n"
    "CONTEXT: The user provides a {{document}}.\n"
    "\n"
    "TASK: Summarize the {{document}} in three points.\n"
    "\n"
    "FORMAT: Return a numbered list.\n"
)


def rules_of(result, severity=None):
    return [
        v["rule"] for v in result["violations"]
        if severity is None or v["severity"] == severity
    ]


class TestValidateTemplate:
    """Tests for templatereview/core/rules.py"""

    def test_canonical_template_is_valid(self):
        result = validate_template(CANONICAL)
        assert result == {"isValid": True, "violations": []}

    def test_empty_content(self):
        result = validate_template("")
        assert result["isValid"] is False
        assert result["violations"][0] == {
            "rule": "schema",
            "message": "Template content cannot be empty",
            "severity": "error",
        }
        # Checks keep running after the schema failure
        assert rules_of(result, "error").count("required-sections") == 3
        assert rules_of(result, "warning") == ["required-sections"]

    def test_whitespace_only_content(self):
        result = validate_template("   \n  ")
        assert "schema" in rules_of(result, "error")
        assert "trailing-whitespace" in rules_of(result, "warning")

    def test_non_text_input(self):
        result = validate_template(None)
        assert result["isValid"] is False
        assert rules_of(result) == ["schema"]

    def test_missing_format_is_warning(self):
        text = CANONICAL.replace("FORMAT: Return a numbered list.\n", "")
        result = validate_template(text)
        assert result["violations"] == [{
            "rule": "required-sections",
            "message": "Missing FORMAT/OUTPUT section",
            "severity": "warning",
        }]

    def test_output_counts_as_format(self):
        result = validate_template(CANONICAL.replace("FORMAT:", "OUTPUT:"))
        assert result["isValid"] is True

    def test_section_order_is_a_warning(self):
        text = "TASK: do x\n\nROLE: helper\n\nCONTEXT: c\n\nFORMAT: f\n"
        result = validate_template(text)
        assert rules_of(result) == ["section-order"]
        assert rules_of(result, "error") == []
        assert "Section ROLE is out of order" in result["violations"][0]["message"]

    def test_mixed_variable_syntax_single_error(self):
        text = CANONICAL.replace("three points", "three points for [b]").replace("{{document}}", "{{a}}")
        result = validate_template(text)
        assert rules_of(result, "error") == ["variable-format"]

    def test_malformed_variables_each_reported(self):
        text = CANONICAL.replace("{{document}}", "{{ doc }}")
        result = validate_template(text)
        assert rules_of(result, "error") == ["variable-naming", "variable-naming"]
        assert "{{ doc }}" in result["violations"][0]["message"]

    def test_variable_usage_in_long_templates(self):
        text = (
            "ROLE: r\n\nCONTEXT: c\n\nTASK: "
            + "Keep the answer short and focused. " * 20
            + "\n\nFORMAT: f\n"
        )
        result = validate_template(text.replace(". \n", ".\n"))
        assert "variable-usage" in rules_of(result, "warning")

    def test_ambiguous_term(self):
        text = CANONICAL.replace("Return a numbered list.", "You might return a numbered list.")
        result = validate_template(text)
        assert rules_of(result) == ["ambiguous-language"]
        assert "might" in result["violations"][0]["message"]

    def test_ambiguous_term_needs_word_boundary(self):
        text = CANONICAL.replace("Return a numbered list.", "Return a mighty list.")
        assert validate_template(text)["isValid"] is True

    def test_one_warning_per_distinct_term(self):
        text = CANONICAL.replace("Return a numbered list.", "Maybe, maybe, probably a list.")
        assert rules_of(validate_template(text)) == ["ambiguous-language", "ambiguous-language"]

    def test_ambiguous_terms_catalogue(self):
        assert AMBIGUOUS_TERMS == ["maybe", "probably", "possibly", "might", "could", "should", "would"]

    def test_long_sentence(self):
        text = CANONICAL.replace("Return a numbered list.", "word " * 40)
        result = validate_template(text)
        assert rules_of(result) == ["sentence-length", "trailing-whitespace"]

    def test_nested_parentheses(self):
        text = CANONICAL.replace("Return a numbered list.", "Return a list (numbered (1, 2, 3)).")
        assert rules_of(validate_template(text)) == ["nested-instructions"]

    @pytest.mark.parametrize("replacement,rule", [
        ("FORMAT: f\n- one\n* two\n", "bullet-consistency"),
        ("format: f\n", "section-case"),
        ("FORMAT: f\n\n\n\nend\n", "section-spacing"),
        ("FORMAT: f  \n", "trailing-whitespace"),
    ])
    def test_format_rules(self, replacement, rule):
        text = CANONICAL.replace("FORMAT: Return a numbered list.\n", replacement)
        assert rules_of(validate_template(text)) == [rule]

    @pytest.mark.parametrize("text", [
        "",
        " ",
        CANONICAL,
        "Please summarize this document.",
        "TASK: x\nROLE: y",
        "{{a}} [b] ${c}",
    ])
    def test_is_valid_matches_violations(self, text):
        result = validate_template(text)
        assert result["isValid"] == (len(result["violations"]) == 0)
        for violation in result["violations"]:
            assert violation["severity"] in ("error", "warning")
