import re
from typing import Mapping, Optional, Protocol

from ..cursor import Cursor

PLACEHOLDER_RE = re.compile(r"%[\w#-]")


class InlineMatcher(Protocol):
    def replace(self, cursor: Cursor) -> Optional[str]:
        ...


def fill_template(template: str, values: Mapping[str, str]) -> str:
    """Substitute ``%x`` placeholders; unknown placeholders are left as they are."""
    return PLACEHOLDER_RE.sub(lambda m: values.get(m.group(0), m.group(0)), template)
