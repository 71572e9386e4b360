"""
Package file checks: the shipped FFI sources, the generated platform artifacts,
and the one-line fix for the bad include uniffi-bindgen-react-native emits.
"""

from dataclasses import dataclass
from pathlib import Path

from ddk_postinstall.config import Environment

# Shipped in the npm tarball; absence means a broken package, not a skipped build
REQUIRED_FILES = [
    # Core JSI bindings
    "src/ddk_ffi.ts",
    "src/ddk_ffi-ffi.ts",
    "src/NativeDdkRn.ts",
    "src/index.tsx",
    # Turbo module
    "cpp/ddk_ffi.hpp",
    "cpp/ddk_ffi.cpp",
    "cpp/bennyblader-ddk-rn.cpp",
    "cpp/bennyblader-ddk-rn.h",
]

IOS_FRAMEWORK = "ios/DdkRn.xcframework/Info.plist"

ANDROID_ABIS = ["arm64-v8a", "armeabi-v7a", "x86", "x86_64"]
ANDROID_LIBS = [f"android/src/main/{abi}/libddk_ffi.a" for abi in ANDROID_ABIS]

CPP_BINDINGS = "cpp/bennyblader-ddk-rn.cpp"
BAD_INCLUDE = '#include "/ddk_ffi.hpp"'
GOOD_INCLUDE = '#include "ddk_ffi.hpp"'


@dataclass(frozen=True)
class ManifestEntry:
    path: str
    present: bool
    required: bool


def fix_cpp_include_path(root: Path) -> bool:
    """Rewrite the absolute-root include to a relative one. Returns True if the file changed."""
    cpp_file = root / CPP_BINDINGS
    if not cpp_file.exists():
        return False
    # Bytes, so CRLF line endings come back unchanged
    content = cpp_file.read_bytes()
    bad, good = BAD_INCLUDE.encode(), GOOD_INCLUDE.encode()
    if bad not in content:
        return False
    cpp_file.write_bytes(content.replace(bad, good, 1))
    print("  Fixed include path in C++ bindings")
    return True


def missing_source_files(root: Path) -> list:
    return [f for f in REQUIRED_FILES if not (root / f).exists()]


def check_manifest(root: Path, env: Environment) -> list:
    """Existence of every checked path, required files first.

    The iOS framework is only expected on macOS, where it can be built.
    """
    entries = [ManifestEntry(f, (root / f).exists(), True) for f in REQUIRED_FILES]
    platform_files = ([IOS_FRAMEWORK] if env.is_macos else []) + ANDROID_LIBS
    entries += [ManifestEntry(f, (root / f).exists(), False) for f in platform_files]
    return entries


def verify_all_files(root: Path, env: Environment) -> bool:
    print("\n=== Verifying Installation ===")
    entries = check_manifest(root, env)
    by_path = {e.path: e for e in entries}

    print("\nRequired files:")
    all_present = True
    for e in entries:
        if not e.required:
            continue
        if e.present:
            print(f"  ✓ {e.path}")
        else:
            print(f"  ✗ Missing: {e.path}")
            all_present = False

    ios = by_path.get(IOS_FRAMEWORK)
    if ios is not None:
        print("\niOS framework:")
        if ios.present:
            print(f"  ✓ {ios.path}")
        else:
            print(f"  - {ios.path} (not built yet, will be built on first use)")

    print("\nAndroid libraries:")
    found = 0
    for lib in ANDROID_LIBS:
        if by_path[lib].present:
            found += 1
            print(f"  ✓ {lib}")
        else:
            print(f"  - {lib} (not built)")
    if found == 0:
        print("  Android libraries not built yet (may be due to missing NDK)")
    else:
        print(f"  Found {found}/{len(ANDROID_LIBS)} Android libraries")

    return all_present
