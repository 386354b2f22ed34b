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


class PathNamesError(ValueError):
    """Parent exception for all path name errors"""

    pass


class InvalidPathError(PathNamesError):
    """A path string could not be parsed by a grammar.

    Carries the full original input in ``path``, the offending element in
    ``name`` and a human readable ``reason``.
    """

    def __init__(self, path: str, name: str, reason: str = None):
        self.path = path
        self.name = name
        self.reason = reason if reason is not None else "invalid path element: %r" % name
        super(InvalidPathError, self).__init__("%s: %r" % (self.reason, path))


class UnsupportedCombinationError(PathNamesError):
    """A path with a root that its grammar does not consider absolute was
    resolved against another path.
    """

    def __init__(self, root: str):
        self.root = root
        super(UnsupportedCombinationError, self).__init__(
            "cannot resolve a non absolute path with root %r" % root
        )


class ProviderMismatchError(PathNamesError):
    """Two paths created by different factories were combined"""

    pass
