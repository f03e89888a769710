from __future__ import annotations

import argparse
from pathlib import Path

from termclip.reflow import classify, clean
from termclip.utils.logging import setup_logger


SAMPLES = {
    "wrapped-command": "  scp -o IdentitiesOnly=yes -i ~/.ssh/id_ed25519 ~/.claude/settings.json\n  user@host.local:~/.claude/",
    "continued": "docker run \\\n  -v /host:/container \\\n  -p 8080:80 \\\n  nginx",
    "commands": "git add .\ngit commit -m \"fix\"\ngit push",
    "markdown": "  ## Section Title\n\n  - bullet one\n  - bullet two",
    "code": "  def hello():\n      if True:\n          return 1",
    "prose": "First paragraph that wraps\nacross two lines.\n\nSecond paragraph also\nwrapping here.",
}


def main():
    p = argparse.ArgumentParser(description="Show how termclip reflows sample pastes")
    p.add_argument("--file", action="append", help="Extra text file to run through the cleaner (repeatable)")
    p.add_argument("--log-level", default="INFO", help="Log level")
    args = p.parse_args()

    setup_logger(args.log_level)
    samples = dict(SAMPLES)
    for f in args.file or []:
        samples[f] = Path(f).read_text(encoding="utf-8")

    for name, text in samples.items():
        print(f"[demo] {name} ({classify(text).value})")
        print(clean(text))
        print()


if __name__ == "__main__":
    main()
