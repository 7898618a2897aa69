import logging

import pytest

from doccomments.conf import FormatterConfig
from doccomments.cursor import Cursor
from doccomments.inline import InlineLink
from doccomments.relations import ClassDoc, MemberDoc, Relations


def href(target, text):
    return f'<a href="#!/api/{target}" rel="{target}" class="docClass">{text}</a>'


@pytest.fixture
def link(config):
    return InlineLink(
        FormatterConfig(
            relations=config.relations,
            class_context="Ext.Panel",
            doc_context={"filename": "Panel.js", "linenr": 12},
        )
    )


def consume(matcher, text):
    cursor = Cursor(text)
    return matcher.replace(cursor), cursor


class TestExplicitLinks:
    def test_declines_other_text_without_moving(self, link):
        result, cursor = consume(link, "{@img foo.png}")
        assert result is None
        assert cursor.pos == 0

    def test_consumes_only_the_tag(self, link):
        result, cursor = consume(link, "{@link Ext.Panel} rest")
        assert result == href("Ext.Panel", "Ext.Panel")
        assert cursor.rest == " rest"

    @pytest.mark.parametrize(
        "tag, expected",
        [
            ("{@link Ext.Panel}", href("Ext.Panel", "Ext.Panel")),
            ("{@link Ext.Panel the panel}", href("Ext.Panel", "the panel")),
            ("{@link Ext.Panel#title}", href("Ext.Panel-cfg-title", "title")),
            ("{@link Ext.Component#show}", href("Ext.Component-method-show", "Ext.Component.show")),
            ("{@link #collapse}", href("Ext.Panel-method-collapse", "collapse")),
            ("{@link #cfg-title The title}", href("Ext.Panel-cfg-title", "The title")),
            ("{@link #event-expand}", href("Ext.Panel-event-expand", "expand")),
            ("{@link Ext.Panel#static-method-create}", href("Ext.Panel-static-method-create", "create")),
            ("{@link Ext.Array#each}", href("Ext.Array-static-method-each", "Ext.Array.each")),
            ("{@link Ext.Panel\nthe   panel}", href("Ext.Panel", "the   panel")),
        ],
    )
    def test_link_forms(self, link, tag, expected):
        result, _ = consume(link, tag)
        assert result == expected

    def test_inherited_member(self, link):
        result, _ = consume(link, "{@link #show}")
        assert result == href("Ext.Panel-method-show", "show")

    def test_unknown_class_degrades_to_text(self, link, caplog):
        with caplog.at_level(logging.WARNING, logger="doccomments.inline.link"):
            result, cursor = consume(link, "{@link Ext.Window the window}")
        assert result == "the window"
        assert cursor.eos
        assert "{@link Ext.Window the window} links to non-existing class" in caplog.text
        assert "Panel.js:12" in caplog.text

    def test_unknown_member_degrades_to_text(self, link, caplog):
        with caplog.at_level(logging.WARNING, logger="doccomments.inline.link"):
            result, _ = consume(link, "{@link Ext.Panel#nothing}")
        assert result == "nothing"
        assert "links to non-existing member" in caplog.text

    def test_unknown_member_of_other_class_keeps_class_in_text(self, link):
        result, _ = consume(link, "{@link Ext.Component#nothing}")
        assert result == "Ext.Component.nothing"

    def test_anchor_text_markup_is_kept(self, link):
        result, _ = consume(link, "{@link Ext.Panel the <code>panel</code>}")
        assert result == href("Ext.Panel", "the <code>panel</code>")

    def test_wrong_member_type_is_not_found(self, link):
        result, _ = consume(link, "{@link #event-title}")
        assert result == "title"

    def test_instance_member_preferred_over_static(self):
        relations = Relations.from_classes(
            [ClassDoc("Foo", members=(MemberDoc("get", static=True), MemberDoc("get")))]
        )
        result, _ = consume(InlineLink(FormatterConfig(relations=relations)), "{@link Foo#get}")
        assert result == href("Foo-method-get", "Foo.get")

    def test_ambiguous_member_uses_first_and_warns(self, caplog):
        relations = Relations.from_classes(
            [ClassDoc("Foo", members=(MemberDoc("load"), MemberDoc("load", tagname="event")))]
        )
        matcher = InlineLink(FormatterConfig(relations=relations))
        with caplog.at_level(logging.WARNING, logger="doccomments.inline.link"):
            result, _ = consume(matcher, "{@link Foo#load}")
        assert result == href("Foo-method-load", "Foo.load")
        assert "is ambiguous" in caplog.text


class TestMagicLinks:
    def test_class_name(self, link):
        assert link.create_magic_links("See Ext.Panel.") == "See " + href("Ext.Panel", "Ext.Panel") + "."

    def test_class_and_member(self, link):
        assert link.create_magic_links("Call Ext.Panel#collapse now") == (
            "Call " + href("Ext.Panel-method-collapse", "Ext.Panel.collapse") + " now"
        )

    def test_dotted_member(self, link):
        assert link.create_magic_links("Set Ext.Panel.title first") == (
            "Set " + href("Ext.Panel-cfg-title", "title") + " first"
        )

    def test_member_of_class_context(self, link):
        assert link.create_magic_links("Then #hide it") == (
            "Then " + href("Ext.Panel-method-hide", "hide") + " it"
        )

    @pytest.mark.parametrize(
        "text",
        [
            "Plain CamelCase words like MyClass stay",
            "Load Main.js and Theme.css",
            "Colors #FFF and #00ff00 and #1st",
            "Unknown Ext.Window and Ext.Window#show",
            "Missing #nothing member",
            "lowercase ext.panel stays",
        ],
    )
    def test_unresolved_names_are_left_alone(self, link, text):
        assert link.create_magic_links(text) == text

    def test_skipped_links_are_logged_at_debug(self, link, caplog):
        with caplog.at_level(logging.DEBUG, logger="doccomments.inline.link"):
            link.create_magic_links("Ext.Window and #nothing and Main.js and #FFF")
        assert "Ext.Window links to non-existing class" in caplog.text
        assert "#nothing links to non-existing member" in caplog.text
        assert "Main.js" not in caplog.text
        assert "#FFF" not in caplog.text
        assert not [r for r in caplog.records if r.levelno >= logging.WARNING]


class TestLinkConstruction:
    def test_class_link(self, link):
        assert link.link("Ext.Panel", None, "panel") == href("Ext.Panel", "panel")

    def test_member_type_looked_up(self, link):
        assert link.link("Ext.Panel", "title", "t") == href("Ext.Panel-cfg-title", "t")

    def test_unknown_member_defaults_to_method(self, link):
        assert link.link("Other", "go", "go") == href("Other-method-go", "go")

    def test_explicit_type_and_static(self, link):
        assert link.link("Foo", "bar", "x", "property", True) == href("Foo-static-property-bar", "x")

    def test_custom_template(self, relations):
        matcher = InlineLink(
            FormatterConfig(relations=relations, link_template="<a href='%c.html%#%m'>%a</a>")
        )
        assert matcher.link("Ext.Panel", "title", "t") == "<a href='Ext.Panel.html#cfg-title'>t</a>"
        assert matcher.link("Ext.Panel", None, "p") == "<a href='Ext.Panel.html'>p</a>"
