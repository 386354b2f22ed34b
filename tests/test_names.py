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
import copy
import pickle

import pytest

from pathnames.names import PathNames


def test_equality():
    assert PathNames("/", ["a", "b"]) == PathNames("/", ("a", "b"))
    assert PathNames(None, ["a"]) != PathNames("/", ["a"])
    assert PathNames(None) == PathNames(None, ())
    assert hash(PathNames("/", ["a"])) == hash(PathNames("/", ("a",)))


def test_immutable():
    pathnames = PathNames("/", ["a"])
    with pytest.raises(AttributeError):
        pathnames.root = None
    with pytest.raises(AttributeError):
        pathnames.names = ()
    assert pathnames.names == ("a",)


def test_rejects_empty_root():
    with pytest.raises(ValueError):
        PathNames("", ["a"])


def test_rejects_empty_name():
    with pytest.raises(ValueError):
        PathNames(None, ["a", "", "b"])


def test_parent():
    assert PathNames("/", ["a", "b"]).parent() == PathNames("/", ["a"])
    assert PathNames("/", ["a"]).parent() == PathNames("/")
    assert PathNames("/").parent() is None
    assert PathNames(None).parent() is None


def test_file_name():
    assert PathNames("/", ["a", "b"]).file_name() == PathNames(None, ["b"])
    assert PathNames("/").file_name() is None


def test_name_and_count():
    pathnames = PathNames("/", ["a", "b", "c"])
    assert pathnames.name_count == 3
    assert len(pathnames) == 3
    assert pathnames.name(0) == PathNames(None, ["a"])
    assert pathnames.name(2) == PathNames(None, ["c"])
    with pytest.raises(IndexError):
        pathnames.name(3)
    with pytest.raises(IndexError):
        pathnames.name(-1)


def test_subpath():
    pathnames = PathNames("/", ["a", "b", "c"])
    assert pathnames.subpath(0, 2) == PathNames(None, ["a", "b"])
    assert pathnames.subpath(1, 3) == PathNames(None, ["b", "c"])
    for begin, end in ((1, 1), (2, 1), (0, 4), (-1, 2)):
        with pytest.raises(ValueError):
            pathnames.subpath(begin, end)


@pytest.mark.parametrize("path, prefix, expected", [
    (PathNames("/", ["a", "b"]), PathNames("/", ["a"]), True),
    (PathNames("/", ["a", "b"]), PathNames("/"), True),
    (PathNames("/", ["a", "b"]), PathNames(None, ["a"]), False),
    (PathNames(None, ["a", "b"]), PathNames(None, ["a", "b"]), True),
    (PathNames(None, ["a", "b"]), PathNames(None, ["b"]), False),
    (PathNames(None, ["a"]), PathNames(None, ["a", "b"]), False),
    (PathNames(None, ["a"]), PathNames(None), False),
    (PathNames(None), PathNames(None), True),
])
def test_starts_with(path, prefix, expected):
    assert path.starts_with(prefix) == expected


@pytest.mark.parametrize("path, suffix, expected", [
    (PathNames("/", ["a", "b"]), PathNames(None, ["b"]), True),
    (PathNames("/", ["a", "b"]), PathNames(None, ["a", "b"]), True),
    (PathNames("/", ["a", "b"]), PathNames("/", ["b"]), False),
    (PathNames("/", ["a", "b"]), PathNames("/", ["a", "b"]), True),
    (PathNames(None, ["b"]), PathNames(None, ["a", "b"]), False),
    (PathNames(None, ["a"]), PathNames(None), False),
    (PathNames(None), PathNames(None), True),
])
def test_ends_with(path, suffix, expected):
    assert path.ends_with(suffix) == expected


def test_rejects_string_names():
    with pytest.raises(TypeError):
        PathNames(None, "abc")
    assert PathNames(None, ("abc",)).names == ("abc",)


def test_name_count_matches_len():
    assert PathNames(None).name_count == len(PathNames(None)) == 0
    assert PathNames("/", ["a", "b"]).name_count == len(PathNames("/", ["a", "b"])) == 2


@pytest.mark.parametrize("pathnames", [
    PathNames(None),
    PathNames("/"),
    PathNames("/", ["a", "b"]),
    PathNames(None, ["..", "a"]),
])
def test_copy_and_pickle(pathnames):
    assert copy.copy(pathnames) == pathnames
    assert copy.deepcopy(pathnames) == pathnames
    assert copy.deepcopy({"path": pathnames})["path"] == pathnames
    assert pickle.loads(pickle.dumps(pathnames)) == pathnames
