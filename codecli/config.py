from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class CliConfig:
    output_dir: Path = field(default_factory=Path.cwd)
    assume_yes: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "CliConfig":
        output_dir = Path(args.output_dir).expanduser() if args.output_dir else Path.cwd()
        return cls(output_dir=output_dir, assume_yes=args.yes)
