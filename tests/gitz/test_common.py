"""Tests for the document-editing primitives shared by the transforms."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from gitz.migration import common
from gitz.migration.document import ConfigDocument

TEMPLATE = """\
{{ type }}: {{ description }}
See {{ ticket }} for details.
Refs: {{ ticket }}
{{ breaking_change }}
"""


class TestTemplateRewrites:
    def test_condition_wraps_only_the_first_ticket_line(self):
        assert common.add_ticket_condition_to_commit_template(TEMPLATE) == """\
{{ type }}: {{ description }}
{% if ticket %}See {{ ticket }} for details.{% endif %}
Refs: {{ ticket }}
{{ breaking_change }}
"""

    def test_condition_without_placeholder(self):
        template = "{{ type }}: {{ description }}\n"
        assert common.add_ticket_condition_to_commit_template(template) == template

    @given(
        before=st.lists(st.text(alphabet="abc {}%", max_size=10), max_size=4),
        after=st.lists(st.text(alphabet="abc {}%", max_size=10), max_size=4),
        line=st.text(alphabet="abc :#", max_size=10),
    )
    def test_adjacent_lines_are_untouched(self, before, after, line):
        ticket_line = line + "{{ ticket }}"
        template = "\n".join(before + [ticket_line] + after)

        result = common.add_ticket_condition_to_commit_template(template)

        assert result.split("\n") == (
            before + ["{% if ticket %}" + ticket_line + "{% endif %}"] + after
        )

    def test_remove_hash_prefix(self):
        template = "Refs: #{{ ticket }}\nAlso #{{ ticket }}\nKeep # {{ ticket }}\n"
        assert common.remove_hash_ticket_prefix_from_commit_template(template) == (
            "Refs: {{ ticket }}\nAlso {{ ticket }}\nKeep # {{ ticket }}\n"
        )

    def test_wrap_line_escapes_the_placeholder(self):
        assert common.wrap_line_containing("x (a+b) y\n(a+b)\n", "(a+b)", "[", "]") == (
            "[x (a+b) y]\n(a+b)\n"
        )


class TestDecorHelpers:
    def _document(self):
        return ConfigDocument.parse(
            "version = \"0.2-dev.3\"\n"
            "\n"
            "# My own words.\n"
            "# The accepted scopes.\n"
            "[scopes]\n"
            "accept = \"list\"\n"
            "list = [\"a\"]\n"
        )

    def test_replace_in_decor_keeps_user_text(self):
        scopes = self._document().section("scopes")

        common.replace_in_decor(scopes, common.OLD_SCOPES_DOC, common.NEW_SCOPES_DOC)

        assert scopes.decor == "\n# My own words." + common.NEW_SCOPES_DOC

    def test_replace_in_decor_is_idempotent(self):
        scopes = self._document().section("scopes")

        common.replace_in_decor(scopes, common.OLD_SCOPES_DOC, common.NEW_SCOPES_DOC)
        common.replace_in_decor(scopes, common.OLD_SCOPES_DOC, common.NEW_SCOPES_DOC)

        assert scopes.decor.count("# The accepted scopes.") == 1

    def test_replace_in_decor_requires_exact_match(self):
        scopes = ConfigDocument.parse("#  The accepted scopes.\n[scopes]\naccept = \"any\"\n").section("scopes")

        common.replace_in_decor(scopes, common.OLD_SCOPES_DOC, common.NEW_SCOPES_DOC)

        assert scopes.decor == "#  The accepted scopes.\n"

    def test_set_decor_if_blank(self):
        scopes = self._document().section("scopes")
        accept = scopes.entry("accept")

        common.set_decor_if_blank(accept, common.SCOPES_ACCEPT_DOC)
        common.set_decor_if_blank(scopes, common.NEW_SCOPES_DOC)

        assert accept.decor == common.SCOPES_ACCEPT_DOC
        assert scopes.decor.startswith("\n# My own words.")

    def test_current_doc(self):
        assert common.current_doc("ticket.prefixes") == common.NEW_TICKET_PREFIXES_DOC
        with pytest.raises(KeyError):
            common.current_doc("version")


class TestValueHelpers:
    def test_update_version(self):
        document = ConfigDocument.parse('version = "0.1"\n')
        common.update_version(document)
        assert document.as_string() == 'version = "0.2"\n'

    def test_switch_scopes_to_any(self):
        document = ConfigDocument.parse('[scopes]\n# Doc.\naccept = "list"\n# List.\nlist = ["a"]\n')

        common.switch_scopes_to_any(document)

        assert document.as_string() == '[scopes]\n# Doc.\naccept = "any"\n'

    def test_switch_scopes_without_scopes(self):
        document = ConfigDocument.parse('version = "0.2-dev.2"\n')
        common.switch_scopes_to_any(document)
        assert document.as_string() == 'version = "0.2-dev.2"\n'

    @pytest.mark.parametrize(
        "prefixes, expected",
        [
            ('["", "GH-"]', '["#", "GH-"]'),
            ('["GH-", ""]', '["GH-", "#"]'),
            ('["", ""]', '["#", ""]'),
            ('["GH-"]', '["GH-"]'),
            ("[]", "[]"),
        ],
    )
    def test_empty_prefix_to_hash(self, prefixes, expected):
        document = ConfigDocument.parse(f"prefixes = {prefixes}\n")

        common.empty_prefix_to_hash(document.entry("prefixes").array())

        assert document.as_string() == f"prefixes = {expected}\n"
