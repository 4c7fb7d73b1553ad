from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from os import PathLike

_CAMEL_CASE_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


class ScriptGenError(Exception):
    """Parent for all script generator errors (exceptions).

    Errors caused by an filesystem entry carry that entry as `path`.
    `repr` is an full user-facing report, `str` is its headline.
    """

    def __init__(self, path: str | PathLike[str] | None = None) -> None:
        super().__init__(path)
        self.path = path

    def __repr__(self) -> str:
        subject = f" (at '{self.path}')" if self.path is not None else ""
        return f"Script generation failed{subject}!\n\n{self.generic_error_name}"

    def __str__(self) -> str:
        return repr(self).split("\n", maxsplit=1)[0]

    @property
    def generic_error_name(self) -> str:
        return f"[{_CAMEL_CASE_BOUNDARY.sub('-', type(self).__name__).lower()}]"
