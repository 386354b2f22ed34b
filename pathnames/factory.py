"""
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
from pathnames.errors import InvalidPathError, UnsupportedCombinationError
from pathnames.names import NO_NAMES, PathNames
from pathnames.path import GenericPath
from pathnames.syntax import PathSyntax


class PathNamesFactory:
    """Parse, normalize, resolve and render paths for one grammar.

    None of these operations touch a filesystem.  Parsing keeps names
    verbatim; ``.`` and ``..`` only go away when :meth:`normalize` is
    called.
    """

    def __init__(self, syntax: PathSyntax):
        self.syntax = syntax
        self.root_separator = syntax.root_separator
        self.separator = syntax.separator

    def parse(self, path: str) -> PathNames:
        """Parse a path string.

        Raises InvalidPathError on the first name the grammar rejects.
        """
        root, names_only = self.syntax.root_and_names(path)
        names = self.syntax.split_names(names_only)

        for name in names:
            if not self.syntax.is_valid_name(name):
                raise InvalidPathError(path, name)

        return PathNames(root, names)

    def normalize(self, pathnames: PathNames) -> PathNames:
        """Remove self names and collapse parent names.

        A parent name with nothing left to remove is dropped, whether or not
        the path has a root: ``../a`` normalizes to ``a``.
        """
        new_names = []
        for name in pathnames.names:
            if self.syntax.is_parent(name):
                if new_names:
                    new_names.pop()
                continue
            if not self.syntax.is_self(name):
                new_names.append(name)

        return PathNames(pathnames.root, new_names if new_names else NO_NAMES)

    def resolve(self, first: PathNames, second: PathNames) -> PathNames:
        """Resolve second against first.

        An absolute second replaces first.  Raises
        UnsupportedCombinationError if second has a root but is not absolute.
        """
        if self.syntax.is_absolute(second):
            return second

        if second.root is not None:
            raise UnsupportedCombinationError(second.root)

        if not second.names:
            return first

        return PathNames(first.root, first.names + second.names)

    def resolve_sibling(self, first: PathNames, second: PathNames) -> PathNames:
        parent = first.parent()
        return second if parent is None else self.resolve(parent, second)

    def is_absolute(self, pathnames: PathNames) -> bool:
        return self.syntax.is_absolute(pathnames)

    def to_string(self, pathnames: PathNames) -> str:
        has_root = pathnames.root is not None
        parts = [pathnames.root] if has_root else []

        names = pathnames.names
        if not names:
            return "".join(parts)

        if has_root:
            parts.append(self.root_separator)
        parts.append(self.separator.join(names))

        return "".join(parts)

    def get_path(self, first: str, *more: str) -> GenericPath:
        """Join the non empty arguments with the separator, parse the result
        and wrap it in a GenericPath.
        """
        path = self.separator.join(part for part in (first,) + more if part)
        return GenericPath(self, self.parse(path))

    def __repr__(self):
        return "PathNamesFactory(%r)" % self.syntax
