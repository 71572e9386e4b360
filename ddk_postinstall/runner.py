import shutil
import subprocess


def format_cmd(cmd) -> str:
    return " ".join(str(c) for c in cmd) if isinstance(cmd, list) else cmd


def resolve(cmd: list) -> list:
    """Resolve the executable on PATH. Picks up npm's .cmd shims on Windows."""
    exe = shutil.which(cmd[0])
    return [exe] + list(cmd[1:]) if exe else list(cmd)


def run(cmd, cwd=None, check=False, quiet=False):
    """Run a command. Build commands are echoed and inherit stdio, probes are silent."""
    if quiet:
        return subprocess.run(cmd, cwd=cwd, check=check,
                              stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
    print(f"  $ {format_cmd(cmd)}")
    return subprocess.run(cmd, cwd=cwd, check=check)


class CommandRunner:
    """Spawns external commands. Swap for a scripted runner in tests."""

    def run(self, cmd: list, cwd=None, quiet=False) -> int:
        """Run cmd to completion and return its exit status.

        A binary that is not on PATH raises OSError (FileNotFoundError) rather
        than returning a status, the same as subprocess does.
        """
        return run(resolve(cmd), cwd=cwd, quiet=quiet).returncode
