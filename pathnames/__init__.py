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

import logging

from pathnames.errors import InvalidPathError, PathNamesError, ProviderMismatchError, UnsupportedCombinationError
from pathnames.factory import PathNamesFactory
from pathnames.names import PathNames
from pathnames.path import GenericPath
from pathnames.syntax import UNIX, PathSyntax, UnixPathSyntax

__version__ = "0.1.0-dev"

__all__ = [
    "create_factory",
    "GenericPath",
    "InvalidPathError",
    "PathNames",
    "PathNamesError",
    "PathNamesFactory",
    "PathSyntax",
    "ProviderMismatchError",
    "UNIX",
    "UnixPathSyntax",
    "UnsupportedCombinationError",
]

LOGGER = logging.getLogger(__name__)


def create_factory(syntax: PathSyntax = None) -> PathNamesFactory:
    """Create a path names factory

    A factory turns path strings into PathNames values and back, and
    implements normalization and resolution on top of the hooks of a
    grammar.  No filesystem is ever consulted.

    Args:
        syntax: the grammar to use, any object providing the PathSyntax
            hooks and separators.  Defaults to the Unix grammar, where
            "/" is both the root and the separator.

    Returns:
        a PathNamesFactory bound to the grammar
    """
    if syntax is None:
        syntax = UNIX

    factory = PathNamesFactory(syntax)

    if LOGGER.isEnabledFor(logging.DEBUG):
        LOGGER.debug("Allocated factory %r, root separator %r, separator %r",
                     factory, syntax.root_separator, syntax.separator)

    return factory
