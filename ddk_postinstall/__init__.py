"""
DDK-RN — post-install native build.

Builds the iOS XCFramework and Android static libraries for @bennyblader/ddk-rn
with uniffi-bindgen-react-native, then verifies the installed package.
"""

__version__ = "0.1.0"
