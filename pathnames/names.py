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
from typing import Iterable, Optional, Tuple

NO_NAMES: Tuple[str, ...] = ()


class PathNames:
    """The parsed form of a path: an optional root and a tuple of names.

    A root of None means the path is relative.  Instances are immutable;
    every operation returns a new instance.
    """

    __slots__ = ("root", "names")

    root: Optional[str]
    names: Tuple[str, ...]

    def __init__(self, root: Optional[str], names: Iterable[str] = NO_NAMES):
        if root is not None and not root:
            raise ValueError("root must not be empty")
        if isinstance(names, str):
            raise TypeError("names must be an iterable of names, not a string")
        names = tuple(names)
        for name in names:
            if not name:
                raise ValueError("path names must not be empty")
        object.__setattr__(self, "root", root)
        object.__setattr__(self, "names", names)

    def __setattr__(self, key, value):
        raise AttributeError("%s is immutable" % self.__class__.__name__)

    def __delattr__(self, key):
        raise AttributeError("%s is immutable" % self.__class__.__name__)

    def __reduce__(self):
        return PathNames, (self.root, self.names)

    def __eq__(self, other):
        if not isinstance(other, PathNames):
            return NotImplemented
        return self.root == other.root and self.names == other.names

    def __hash__(self):
        return hash((self.root, self.names))

    def __repr__(self):
        return "PathNames(%r, %r)" % (self.root, self.names)

    def __len__(self):
        return len(self.names)

    @property
    def name_count(self) -> int:
        return len(self)

    def parent(self) -> Optional["PathNames"]:
        if not self.names:
            return None
        return PathNames(self.root, self.names[:-1])

    def file_name(self) -> Optional["PathNames"]:
        if not self.names:
            return None
        return PathNames(None, self.names[-1:])

    def name(self, index: int) -> "PathNames":
        """Return the name at ``index`` as a relative, single name path."""
        if index < 0 or index >= len(self.names):
            raise IndexError("name index %d out of range" % index)
        return PathNames(None, (self.names[index],))

    def subpath(self, begin: int, end: int) -> "PathNames":
        """Return names ``begin`` (inclusive) to ``end`` (exclusive) as a
        relative path.
        """
        if begin < 0 or end > len(self.names) or begin >= end:
            raise ValueError("invalid subpath range [%d, %d)" % (begin, end))
        return PathNames(None, self.names[begin:end])

    def starts_with(self, other: "PathNames") -> bool:
        if self.root != other.root:
            return False
        if not other.names:
            return other.root is not None or not self.names
        return self.names[:len(other.names)] == other.names

    def ends_with(self, other: "PathNames") -> bool:
        if other.root is not None:
            return self == other
        if not other.names:
            return self.root is None and not self.names
        count = len(other.names)
        return len(self.names) >= count and self.names[-count:] == other.names
