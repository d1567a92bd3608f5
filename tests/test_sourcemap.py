import pytest

from hotspotview.sourcemap import SourceMapLocation, SourceMapResolver


def _touch(path):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("int main() {}\n")
    return path


def test_empty_location_is_false():
    location = SourceMapLocation()
    assert not location
    assert location.line_number == -1


@pytest.mark.parametrize("text", ["no-separator", ":12", ""])
def test_unusable_separator_gives_empty_location(tmp_path, text):
    resolver = SourceMapResolver(sysroot=str(tmp_path))
    assert not resolver.resolve(text)


def test_resolves_below_sysroot(tmp_path):
    _touch(tmp_path / "src" / "a.cpp")
    resolver = SourceMapResolver(sysroot=str(tmp_path))
    result = resolver.resolve("/src/a.cpp:42")
    assert result
    assert result.path == str(tmp_path) + "/src/a.cpp"
    assert result.line_number == 42


def test_missing_file_gives_empty_location(tmp_path):
    resolver = SourceMapResolver(sysroot=str(tmp_path), app_path=str(tmp_path))
    result = resolver.resolve("/nowhere/missing.cpp:3")
    assert not result
    assert result == SourceMapLocation()


def test_relative_path_resolved_via_module_directory(tmp_path):
    _touch(tmp_path / "build" / "src" / "a.cpp")
    (tmp_path / "build" / "bin").mkdir(parents=True)
    resolver = SourceMapResolver(app_path=str(tmp_path))
    result = resolver.resolve("../src/a.cpp:7", module_path="/build/bin/app")
    assert result
    assert result.path == str(tmp_path) + "/build/bin/../src/a.cpp"
    assert result.line_number == 7


def test_sysroot_takes_precedence_over_app_path(tmp_path):
    sysroot = tmp_path / "sysroot"
    app = tmp_path / "app"
    _touch(sysroot / "main.cpp")
    _touch(app / "main.cpp")
    resolver = SourceMapResolver(sysroot=str(sysroot) + "/", app_path=str(app) + "/")
    result = resolver.resolve("main.cpp:10")
    assert result.path == str(sysroot) + "/main.cpp"


def test_app_path_used_when_sysroot_misses(tmp_path):
    app = tmp_path / "app"
    _touch(app / "main.cpp")
    resolver = SourceMapResolver(sysroot=str(tmp_path / "empty") + "/", app_path=str(app) + "/")
    result = resolver.resolve("main.cpp:10")
    assert result.path == str(app) + "/main.cpp"
    assert result.line_number == 10


def test_last_colon_separates_line_number(tmp_path):
    _touch(tmp_path / "a:b.cpp")
    resolver = SourceMapResolver(sysroot=str(tmp_path) + "/")
    result = resolver.resolve("a:b.cpp:5")
    assert result.path == str(tmp_path) + "/a:b.cpp"
    assert result.line_number == 5


def test_non_numeric_line_becomes_zero(tmp_path):
    _touch(tmp_path / "x.cpp")
    resolver = SourceMapResolver(sysroot=str(tmp_path) + "/")
    result = resolver.resolve("x.cpp:abc")
    assert result
    assert result.line_number == 0


def test_resolvers_keep_their_roots(tmp_path):
    _touch(tmp_path / "x.cpp")
    resolver = SourceMapResolver()
    assert not resolver.resolve("x.cpp:1")
    resolver.sysroot = str(tmp_path) + "/"
    assert resolver.resolve("x.cpp:1").path == str(tmp_path) + "/x.cpp"