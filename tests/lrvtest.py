import os
import subprocess
import sys
from pathlib import Path

import lrvalues


ROOT = Path(__file__).parent.parent
EXAMPLES = ROOT / "examples"


def run_cli(*args, cwd=None) -> subprocess.CompletedProcess:
    """Run `python -m lrvalues` with the source tree importable."""
    env = dict(os.environ)
    paths = [str(ROOT / "src")]
    if env.get("PYTHONPATH"):
        paths.append(env["PYTHONPATH"])
    env["PYTHONPATH"] = os.pathsep.join(paths)
    return subprocess.run(
        [sys.executable, "-m", "lrvalues", *args],
        capture_output=True,
        text=True,
        env=env,
        cwd=cwd,
    )


def statuses(source, dialect=None) -> list[bool]:
    """Check source and return whether each statement was legal."""
    return [verdict.ok for verdict in lrvalues.check_source(source, dialect)]


def legal(source, dialect=None) -> bool:
    """Whether the last statement of source is legal."""
    return statuses(source, dialect)[-1]
