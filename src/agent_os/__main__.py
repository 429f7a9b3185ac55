"""Allow running as ``python -m agent_os``."""

import agent_os.cli as cli

if __name__ == "__main__":
    cli.main()
