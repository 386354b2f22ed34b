"""Path grammars.

A grammar is any object providing the hooks of :class:`PathSyntax`.  The
engine in :mod:`pathnames.factory` only ever talks to a grammar through
these hooks and the two separator strings, so a filesystem with its own
naming rules only has to supply one of these.

 Copyright 2012 the original author or authors

 Licensed under the Apache License, Version 2.0 (the "License");
 you may not use this file except in compliance with the License.
 You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

 Unless required by applicable law or agreed to in writing,
 software distributed under the License is distributed on an
 "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY
 KIND, either express or implied.  See the License for the
 specific language governing permissions and limitations
 under the License.
"""
from typing import Optional, Protocol, Sequence, Tuple

from pathnames.names import NO_NAMES, PathNames


class PathSyntax(Protocol):
    """Hooks a grammar supplies to the engine.

    root_separator is written between the root and the first name, separator
    between two names.  All hooks must be free of side effects.
    """

    root_separator: str
    separator: str

    def root_and_names(self, path: str) -> Tuple[Optional[str], str]:
        """Split a raw path into its root (or None) and the unparsed rest."""
        ...

    def split_names(self, names_only: str) -> Sequence[str]:
        """Split the rest of a path into raw names."""
        ...

    def is_valid_name(self, name: str) -> bool:
        ...

    def is_self(self, name: str) -> bool:
        ...

    def is_parent(self, name: str) -> bool:
        ...

    def is_absolute(self, pathnames: PathNames) -> bool:
        ...


class UnixPathSyntax:
    """Unix style grammar: a single "/" root, "/" separated names."""

    root_separator = ""
    separator = "/"

    def root_and_names(self, path: str) -> Tuple[Optional[str], str]:
        if not path.startswith("/"):
            return None, path
        return "/", path.lstrip("/")

    def split_names(self, names_only: str) -> Sequence[str]:
        if not names_only:
            return NO_NAMES
        return tuple(name for name in names_only.split("/") if name)

    def is_valid_name(self, name: str) -> bool:
        return bool(name) and "/" not in name and "\0" not in name

    def is_self(self, name: str) -> bool:
        return name == "."

    def is_parent(self, name: str) -> bool:
        return name == ".."

    def is_absolute(self, pathnames: PathNames) -> bool:
        return pathnames.root is not None

    def __repr__(self):
        return "%s()" % self.__class__.__name__


UNIX = UnixPathSyntax()
