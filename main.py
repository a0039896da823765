"""Entry script for resolving a schema file, optionally after the dev checks."""

import subprocess
import sys
from pathlib import Path

from schema_resolver.resolve_schema_file import main as resolve_main


def main() -> None:
    """Run the development checks if asked, then the resolver CLI."""
    argv = sys.argv[1:]
    if "--dev" in argv:
        argv.remove("--dev")
        print("--- Running Development Checks ---")
        dev_script = Path(__file__).parent / "dev.py"
        try:
            subprocess.run([sys.executable, str(dev_script), "--ci"], check=True)
        except subprocess.CalledProcessError as e:
            print("Development checks failed.")
            sys.exit(e.returncode)
        print("\nDevelopment checks passed. Resolving schema.\n")

    sys.exit(resolve_main(argv))


if __name__ == "__main__":
    main()
