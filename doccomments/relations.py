"""
Class-name lookup table used when resolving {@link} tags and auto-links.

Only the information the formatter needs is kept: which classes exist, which
members they declare, and which class each one extends.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

MEMBER_TYPES = ("cfg", "property", "method", "event", "css_var", "css_mixin")


@dataclass(frozen=True)
class MemberDoc:
    name: str
    tagname: str = "method"
    static: bool = False


@dataclass(frozen=True)
class ClassDoc:
    name: str
    members: tuple = ()
    extends: Optional[str] = None


@dataclass
class Relations:
    classes: Dict[str, ClassDoc] = field(default_factory=dict)

    @classmethod
    def from_classes(cls, classes: Iterable[ClassDoc]) -> "Relations":
        return cls({c.name: c for c in classes})

    @classmethod
    def from_dict(cls, data: dict) -> "Relations":
        """
        Build relations from plain data, e.g. a JSON export::

            {"Ext.Panel": {"extends": "Ext.Container",
                           "members": [{"name": "title", "tagname": "cfg"}]}}

        Members may also be given as bare names, which are taken as methods.
        """
        classes = []
        for name, entry in data.items():
            entry = entry or {}
            members = []
            for member in entry.get("members", []):
                if isinstance(member, str):
                    members.append(MemberDoc(member))
                else:
                    members.append(
                        MemberDoc(
                            name=member["name"],
                            tagname=member.get("tagname", "method"),
                            static=bool(member.get("static", False)),
                        )
                    )
            classes.append(ClassDoc(name, tuple(members), entry.get("extends")))
        return cls.from_classes(classes)

    def __contains__(self, name) -> bool:
        return name in self.classes

    def __getitem__(self, name: str) -> ClassDoc:
        return self.classes[name]

    def __len__(self) -> int:
        return len(self.classes)

    def get(self, name: str) -> Optional[ClassDoc]:
        return self.classes.get(name)

    def find_members(
        self,
        cls: str,
        name: Optional[str] = None,
        tagname: Optional[str] = None,
        static: Optional[bool] = None,
    ) -> List[MemberDoc]:
        """
        Find members of ``cls`` and its ancestors matching the given filters.

        ``None`` means "any" for every filter. Own members come before
        inherited ones; a member overridden in a subclass is returned once.
        """
        found = []
        seen_names = set()
        visited = set()
        current = self.get(cls)
        while current is not None and current.name not in visited:
            visited.add(current.name)
            for member in current.members:
                if name is not None and member.name != name:
                    continue
                if tagname is not None and member.tagname != tagname:
                    continue
                if static is not None and member.static != static:
                    continue
                key = (member.name, member.tagname, member.static)
                if key in seen_names:
                    continue
                seen_names.add(key)
                found.append(member)
            current = self.get(current.extends) if current.extends else None
        return found
