from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path


def _run(cmd: list[str], env: dict[str, str], cwd: Path) -> None:
    result = subprocess.run(
        cmd,
        check=False,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
        env=env,
        cwd=cwd,
    )
    if result.returncode != 0:
        print(result.stdout)
        raise SystemExit(result.returncode)


def main() -> None:
    root = Path(__file__).resolve().parents[1]
    env = os.environ.copy()
    env["PYTHONPATH"] = str(root / "src")
    cli = [sys.executable, "-m", "osu_ui_cli.cli"]

    _run(cli + ["--help"], env, root)
    _run(cli + ["validate", "case_files/latency_case.yaml"], env, root)
    _run(
        cli + [
            "raw",
            "case_files/osu_latency.out",
            "case_files/osu_latency_ucx.out",
            "--output",
            "output/smoke/raw.xlsx",
            "--quiet",
        ],
        env,
        root,
    )
    _run(
        cli + [
            "export",
            "case_files/latency_case.yaml",
            "--output",
            "output/smoke/latency.xlsx",
        ],
        env,
        root,
    )


if __name__ == "__main__":
    main()
