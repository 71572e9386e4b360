from pathlib import Path

import pytest

from ddk_postinstall.config import Environment
from ddk_postinstall.files import ANDROID_LIBS, IOS_FRAMEWORK, REQUIRED_FILES


class FakeRunner:
    """Scripted stand-in for CommandRunner. Records every call.

    results maps a command prefix (tuple) to an exit code or an exception
    instance; the longest matching prefix wins, unmatched commands exit 0.
    """

    def __init__(self, results=None):
        self.results = results or {}
        self.calls = []

    def run(self, cmd, cwd=None, quiet=False):
        self.calls.append((list(cmd), cwd, quiet))
        best = None
        for prefix in self.results:
            if tuple(cmd[:len(prefix)]) == prefix and (best is None or len(prefix) > len(best)):
                best = prefix
        result = self.results.get(best, 0) if best is not None else 0
        if isinstance(result, BaseException):
            raise result
        return result

    @property
    def commands(self):
        return [c[0] for c in self.calls]

    @property
    def builds(self):
        return [c for c in self.commands if "build" in c]


def make_env(ci=False, build_native_libs=False, ndk_present=False, platform="linux"):
    return Environment(ci=ci, build_native_libs=build_native_libs,
                       ndk_present=ndk_present, platform=platform)


def touch(root: Path, rel: str, text: str = ""):
    path = root / rel
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def runner():
    return FakeRunner()


@pytest.fixture
def package_root(tmp_path):
    """A package root with every shipped source file in place."""
    for rel in REQUIRED_FILES:
        touch(tmp_path, rel)
    return tmp_path


@pytest.fixture
def built_root(package_root):
    """Shipped sources plus every platform artifact."""
    for rel in [IOS_FRAMEWORK] + ANDROID_LIBS:
        touch(package_root, rel)
    return package_root
