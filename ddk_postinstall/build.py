"""
Native library builds: uniffi-bindgen-react-native → iOS XCFramework + Android static libs.

iOS failures abort the install. Android failures only warn, since a missing NDK or
Rust target is common on machines that never ship Android.
"""

from pathlib import Path

from ddk_postinstall.config import Environment
from ddk_postinstall.runner import CommandRunner, format_cmd

GENERATOR = "uniffi-bindgen-react-native"
NPX_GENERATOR = ["npx", GENERATOR]


class BuildError(Exception):
    pass


def _succeeds(runner: CommandRunner, cmd: list, cwd: Path) -> bool:
    try:
        return runner.run(cmd, cwd=cwd, quiet=True) == 0
    except OSError:
        return False


def has_generator(runner: CommandRunner, root: Path) -> bool:
    """True if the generator answers --help, via npx first, then a global install."""
    if _succeeds(runner, NPX_GENERATOR + ["--help"], root):
        return True
    return _succeeds(runner, [GENERATOR, "--help"], root)


def generator_command(runner: CommandRunner, root: Path) -> list:
    """Prefer npx; fall back to the bare binary without checking it."""
    if _succeeds(runner, NPX_GENERATOR + ["--help"], root):
        return list(NPX_GENERATOR)
    return [GENERATOR]


def build_ios(runner: CommandRunner, root: Path, env: Environment):
    if not env.is_macos:
        print("\n  WARNING: Skipping iOS build (not on macOS)")
        return

    print("\n=== Building iOS Libraries ===")
    cmd = generator_command(runner, root) + ["build", "ios", "--and-generate"]
    try:
        code = runner.run(cmd, cwd=root)
    except OSError as e:
        raise BuildError(f"Failed to build iOS libraries: {e}") from e
    if code != 0:
        raise BuildError(f"Failed to build iOS libraries: command failed with exit code {code}: {format_cmd(cmd)}")
    print("  ✓ iOS libraries built")


def build_android(runner: CommandRunner, root: Path, env: Environment):
    print("\n=== Building Android Libraries ===")

    if not env.ndk_present:
        print("  WARNING: Android NDK not found. Skipping Android build.")
        print("  Set ANDROID_NDK_ROOT or NDK_HOME to build Android libraries.")
        return

    cmd = generator_command(runner, root) + ["build", "android", "--and-generate"]
    try:
        code = runner.run(cmd, cwd=root)
    except OSError as e:
        print(f"  WARNING: Android build failed: {e}")
        print("  This may be due to missing Android NDK or Rust toolchains.")
        return
    if code != 0:
        print(f"  WARNING: Android build failed with exit code {code}")
        print("  This may be due to missing Android NDK or Rust toolchains.")
        return
    print("  ✓ Android libraries built")
