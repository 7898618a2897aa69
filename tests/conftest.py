"""Shared fixtures for the doccomments test suite.

Django is configured once, in memory, before collection; individual tests
adjust DOC_COMMENTS with override_settings.
"""

import django
import pytest
from django.conf import settings

from doccomments.conf import FormatterConfig
from doccomments.formatter import DocFormatter
from doccomments.relations import ClassDoc, MemberDoc, Relations


def pytest_configure(config):
    if not settings.configured:
        settings.configure(
            INSTALLED_APPS=["doccomments"],
            TEMPLATES=[
                {
                    "BACKEND": "django.template.backends.django.DjangoTemplates",
                    "APP_DIRS": True,
                }
            ],
            DATABASES={},
            DOC_COMMENTS={},
        )
        django.setup()


@pytest.fixture
def relations():
    return Relations.from_classes(
        [
            ClassDoc(
                "Ext.Component",
                members=(
                    MemberDoc("show"),
                    MemberDoc("hide"),
                    MemberDoc("renderTo", tagname="cfg"),
                ),
            ),
            ClassDoc(
                "Ext.Panel",
                members=(
                    MemberDoc("title", tagname="cfg"),
                    MemberDoc("collapse"),
                    MemberDoc("expand", tagname="event"),
                    MemberDoc("create", static=True),
                ),
                extends="Ext.Component",
            ),
            ClassDoc("Ext.Array", members=(MemberDoc("each", static=True),)),
        ]
    )


@pytest.fixture
def config(relations):
    return FormatterConfig(relations=relations, class_context="Ext.Panel")


@pytest.fixture
def formatter(relations):
    formatter = DocFormatter(relations=relations)
    formatter.class_context = "Ext.Panel"
    formatter.doc_context = {"filename": "Panel.js", "linenr": 12}
    return formatter
