#!/usr/bin/env python3
"""
DDK-RN — Post-install CLI

Runs from the package's npm postinstall hook. Builds native libraries with
uniffi-bindgen-react-native, fixes the generated C++ include, verifies the package.
Reads ddk.build.yaml (optional) for build-time config.

Usage:
  python3 -m ddk_postinstall                 # Build + verify (cwd is the package root)
  python3 -m ddk_postinstall --root /path    # Explicit package root
  python3 -m ddk_postinstall --no-android    # Skip a platform

Environment:
  CI                  Skip everything (exit 0) unless BUILD_NATIVE_LIBS is set
  BUILD_NATIVE_LIBS   Force builds in CI
  ANDROID_NDK_ROOT    Enables the Android build (NDK_HOME also accepted)
"""

import sys
import argparse
from pathlib import Path

from ddk_postinstall.build import build_android, build_ios, has_generator
from ddk_postinstall.config import Environment, load_build_config, platform_enabled
from ddk_postinstall.files import fix_cpp_include_path, missing_source_files, verify_all_files
from ddk_postinstall.runner import CommandRunner

ISSUES_URL = "https://github.com/bennyhodl/ddk-ffi/issues"


def error(msg=""):
    print(msg, file=sys.stderr)


def postinstall(root: Path, env: Environment, runner: CommandRunner,
                build_cfg: dict = None, overrides: dict = None):
    """Gate, build, verify. Exits 0/1 at the gates; returns normally on success.

    build_cfg defaults to ddk.build.yaml, read only once past the CI gate.
    overrides (from CLI flags) win over it.
    """
    print("DDK-RN Post-install: Building native libraries...")

    if env.skip_in_ci:
        print("  WARNING: Skipping native library builds in CI environment.")
        print("  Set BUILD_NATIVE_LIBS=1 to force builds in CI.")
        sys.exit(0)

    if build_cfg is None:
        build_cfg = load_build_config(root)
    build_cfg = {**build_cfg, **(overrides or {})}

    if not has_generator(runner, root):
        error("  ERROR: uniffi-bindgen-react-native not found!")
        error("  Install it with: npm install -g uniffi-bindgen-react-native")
        error("  Or add it as a dependency in your project.")
        sys.exit(1)

    print("\n=== Checking Source Files ===")
    missing = missing_source_files(root)
    if missing:
        error(f"  ERROR: Missing source file: {missing[0]}")
        error("  This indicates a problem with the NPM package.")
        sys.exit(1)
    print("  ✓ All source files present")

    try:
        fix_cpp_include_path(root)

        if platform_enabled(build_cfg, "ios"):
            build_ios(runner, root, env)
        else:
            print("\n  WARNING: Skipping iOS build (disabled in config)")

        if platform_enabled(build_cfg, "android"):
            build_android(runner, root, env)
        else:
            print("\n  WARNING: Skipping Android build (disabled in config)")

        if not verify_all_files(root, env):
            error("\n  ERROR: Some required files are missing!")
            error("  The installation may have failed.")
            sys.exit(1)

        print("\n" + "=" * 50)
        print("INSTALL COMPLETE")
        print("=" * 50)
        print("DDK-RN is ready to use!\n")

    except Exception as e:
        error(f"\n  ERROR: Failed to complete installation: {e}")
        error()
        error("  This may be due to:")
        error("    - Missing uniffi-bindgen-react-native (install globally)")
        error("    - Missing Android NDK (for Android builds)")
        error("    - Missing Xcode/iOS toolchain (for iOS builds on macOS)")
        error()
        error(f"  Report issues at: {ISSUES_URL}")
        sys.exit(1)


def main(argv=None):
    parser = argparse.ArgumentParser(description="DDK-RN post-install native build")
    parser.add_argument("--root", type=str, default=".",
                        help="Package root (default: current directory)")
    parser.add_argument("--no-ios", action="store_true", help="Skip iOS build")
    parser.add_argument("--no-android", action="store_true", help="Skip Android build")
    args = parser.parse_args(argv)

    try:
        root = Path(args.root).resolve()
        # CLI overrides > config > defaults
        overrides = {}
        if args.no_ios:
            overrides["ios"] = False
        if args.no_android:
            overrides["android"] = False
        postinstall(root, Environment.capture(), CommandRunner(), overrides=overrides)
    except Exception as e:
        error(f"  ERROR: Unexpected error: {e!r}")
        sys.exit(1)


if __name__ == "__main__":
    main()
