# doccomments/inline/link.py
"""
{@link} tags and automatic links to classes and members.

Explicit links:
    {@link Ext.Panel}                     →  link to the class
    {@link Ext.Panel#title}               →  link to a member, text "Ext.Panel.title"
    {@link Ext.Panel#cfg-title The title} →  link to the title config, custom text
    {@link #show}                         →  member of the current class context

Automatic links are created for recognised names found in plain text:
``Ext.Panel``, ``Ext.Panel#title``, ``Ext.Panel.title`` and ``#title``.
Names that don't resolve through the relations table are left untouched.
"""

import logging
import re
from typing import List, Optional

from ..conf import FormatterConfig
from ..cursor import Cursor
from ..relations import MEMBER_TYPES, MemberDoc
from .base import fill_template

logger = logging.getLogger(__name__)

LINK_RE = re.compile(r"\{@link\s+(\S*?)(?:\s+(.+?))?\}", re.DOTALL)

TARGET_RE = re.compile(
    r"\A(.*)#(static-)?(?:(" + "|".join(MEMBER_TYPES) + r")-)?(.*)\Z", re.DOTALL
)

_CLS_RE = r"([A-Z][A-Za-z0-9.]*[A-Za-z0-9])"
_MEMBER_RE = r"(?:#([A-Za-z0-9]+))"
MAGIC_LINK_RE = re.compile(rf"\b{_CLS_RE}{_MEMBER_RE}?\b|{_MEMBER_RE}\b")

# Dotted names that are file names rather than classes
IGNORED_FILE_RE = re.compile(r"\.(js|css|html|php)\Z")
# "#FFF" and "#1" look like members but never are
IGNORED_MEMBER_RE = re.compile(r"\A([A-F0-9]{3}|[A-F0-9]{6})\Z|\A[0-9]", re.IGNORECASE)


class InlineLink:
    def __init__(self, config: FormatterConfig):
        self.config = config

    @property
    def relations(self):
        return self.config.relations

    def replace(self, cursor: Cursor) -> Optional[str]:
        match = cursor.scan(LINK_RE)
        if match is None:
            return None
        return self.apply_template(match.group(1), match.group(2), match.group(0))

    def apply_template(self, target: str, text: Optional[str], full_link: str) -> str:
        """Resolve a {@link} target; unresolvable targets degrade to plain text."""
        class_context = self.config.class_context

        target_match = TARGET_RE.match(target)
        if target_match:
            cls = target_match.group(1) or class_context
            static = True if target_match.group(2) else None
            tagname = target_match.group(3)
            member = target_match.group(4)
        else:
            cls, static, tagname, member = target, None, None, None

        if not text:
            if member:
                text = member if cls == class_context else f"{cls}.{member}"
            else:
                text = cls

        if cls not in self.relations:
            logger.warning(
                f"{full_link} links to non-existing class ({self.config.location})"
            )
            return text

        if not member:
            return self.link(cls, None, text)

        members = self.relations.find_members(
            cls, name=member, tagname=tagname, static=static
        )
        if not members:
            logger.warning(
                f"{full_link} links to non-existing member ({self.config.location})"
            )
            return text

        found = self._pick_member(members, full_link)
        return self.link(cls, member, text, found.tagname, found.static)

    def _pick_member(self, members: List[MemberDoc], full_link: str) -> MemberDoc:
        if len(members) == 1:
            return members[0]

        # Instance members win over statics of the same name
        instance_members = [m for m in members if not m.static]
        if len(instance_members) == 1:
            return instance_members[0]

        logger.warning(f"{full_link} is ambiguous ({self.config.location})")
        return members[0]

    def create_magic_links(self, text: str) -> str:
        """Link recognised class and member names found in plain text."""
        return MAGIC_LINK_RE.sub(self._replace_magic_link, text)

    def _replace_magic_link(self, match: re.Match) -> str:
        cls = match.group(1)
        member = match.group(2) or match.group(3)
        original = match.group(0)

        if cls and member:
            if cls in self.relations and self.relations.find_members(cls, name=member):
                return self.link(cls, member, f"{cls}.{member}")
            kind = "member" if cls in self.relations else "class"
            self._skip_magic_link(f"{cls}#{member} links to non-existing {kind}")

        elif cls and "." in cls:
            if cls in self.relations:
                return self.link(cls, None, cls)

            owner, owner_member = cls.rsplit(".", 1)
            if owner in self.relations and self.relations.find_members(
                owner, name=owner_member
            ):
                return self.link(owner, owner_member, owner_member)
            if not IGNORED_FILE_RE.search(cls):
                self._skip_magic_link(f"{cls} links to non-existing class")

        elif not cls and member:
            class_context = self.config.class_context
            if class_context and self.relations.find_members(class_context, name=member):
                return self.link(class_context, member, member)
            if not IGNORED_MEMBER_RE.search(member):
                self._skip_magic_link(f"#{member} links to non-existing member")

        return original

    def _skip_magic_link(self, message: str) -> None:
        logger.debug(f"Auto-link skipped: {message} ({self.config.location})")

    def link(
        self,
        cls: str,
        member: Optional[str],
        anchor_text: str,
        tagname: Optional[str] = None,
        static: Optional[bool] = None,
    ) -> str:
        """Build a link to a class, or to one of its members, from the link template."""
        member_id = ""
        if member:
            if tagname is None:
                found = self.relations.find_members(cls, name=member)
                if found:
                    tagname = found[0].tagname
                    if static is None:
                        static = found[0].static
                else:
                    tagname = "method"
            member_id = f"{'static-' if static else ''}{tagname}-{member}"

        return fill_template(
            self.config.link_template,
            {
                "%c": cls,
                "%m": member_id,
                "%-": "-" if member else "",
                "%#": "#" if member else "",
                # Anchor text is comment HTML and may carry markup such as <code>
                "%a": anchor_text,
            },
        )
