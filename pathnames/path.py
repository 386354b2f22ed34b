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
from functools import total_ordering
from typing import Optional, Tuple, Union

from pathnames.errors import ProviderMismatchError
from pathnames.names import PathNames


@total_ordering
class GenericPath:
    """A PathNames value bound to the factory that produced it.

    This is what a filesystem driver hands back to its callers: it renders
    with ``str()``, composes with ``/`` and compares by rendered form.
    """

    __slots__ = ("_factory", "_names")

    def __init__(self, factory, pathnames: PathNames):
        object.__setattr__(self, "_factory", factory)
        object.__setattr__(self, "_names", pathnames)

    def __setattr__(self, key, value):
        raise AttributeError("%s is immutable" % self.__class__.__name__)

    def __reduce__(self):
        return GenericPath, (self._factory, self._names)

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    @property
    def factory(self):
        return self._factory

    @property
    def pathnames(self) -> PathNames:
        return self._names

    @property
    def root(self) -> Optional[str]:
        return self._names.root

    @property
    def parts(self) -> Tuple[str, ...]:
        return self._names.names

    @property
    def parent(self) -> Optional["GenericPath"]:
        parent = self._names.parent()
        return None if parent is None else self._wrap(parent)

    @property
    def name(self) -> Optional["GenericPath"]:
        file_name = self._names.file_name()
        return None if file_name is None else self._wrap(file_name)

    def is_absolute(self) -> bool:
        return self._factory.is_absolute(self._names)

    def normalize(self) -> "GenericPath":
        return self._wrap(self._factory.normalize(self._names))

    def resolve(self, other: Union["GenericPath", str]) -> "GenericPath":
        return self._wrap(self._factory.resolve(self._names, self._coerce(other)))

    def resolve_sibling(self, other: Union["GenericPath", str]) -> "GenericPath":
        return self._wrap(self._factory.resolve_sibling(self._names, self._coerce(other)))

    def starts_with(self, other: Union["GenericPath", str]) -> bool:
        return self._names.starts_with(self._coerce(other))

    def ends_with(self, other: Union["GenericPath", str]) -> bool:
        return self._names.ends_with(self._coerce(other))

    def __truediv__(self, other):
        if not isinstance(other, (GenericPath, str)):
            return NotImplemented
        return self.resolve(other)

    def __str__(self):
        return self._factory.to_string(self._names)

    def __repr__(self):
        return "GenericPath(%r)" % str(self)

    def __eq__(self, other):
        if not isinstance(other, GenericPath):
            return NotImplemented
        return self._factory is other._factory and self._names == other._names

    def __lt__(self, other):
        if not isinstance(other, GenericPath):
            return NotImplemented
        self._check_factory(other)
        return str(self) < str(other)

    def __hash__(self):
        return hash(self._names)

    def _wrap(self, pathnames: PathNames) -> "GenericPath":
        return GenericPath(self._factory, pathnames)

    def _coerce(self, other) -> PathNames:
        if isinstance(other, str):
            return self._factory.parse(other)
        self._check_factory(other)
        return other._names

    def _check_factory(self, other: "GenericPath"):
        if other._factory is not self._factory:
            raise ProviderMismatchError("%r was not created by %r" % (other, self._factory))
