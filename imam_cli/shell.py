import logging, subprocess
from typing import List, NamedTuple

from imam_cli.cfg import EnvironmentContext
from imam_cli.errors import ImportAreaError


class CommandResult(NamedTuple):
    code: int
    stdout: str


def run(cmd: List[str]) -> CommandResult:
    logging.info("Running: %s", " ".join(cmd))
    proc = subprocess.run(cmd, capture_output=True, text=True)
    if proc.returncode != 0:
        logging.error("Command exited with %s: %s", proc.returncode, proc.stderr.strip())
    return CommandResult(proc.returncode, proc.stdout)


def call_cli(env: EnvironmentContext, *args: str) -> CommandResult:
    """imam.sh -af <auth file> [-mn <engine>] <args...>"""
    cmd = [env.imam, "-af", env.auth_file]
    if args[:2] == ("-a", "import"):
        cmd += ["-mn", env.engine.lower()]
    return run(cmd + list(args))


def encrypt(env: EnvironmentContext, value: str) -> str:
    result = subprocess.run([env.encrypt, value], capture_output=True, text=True)
    if result.returncode != 0:
        logging.error("encrypt.sh exited with %s: %s", result.returncode, result.stderr.strip())
        raise ImportAreaError(f"Unable to encrypt value (encrypt.sh exited with {result.returncode}).")
    return result.stdout.replace("\n", "", 1)
