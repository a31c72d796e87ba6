# SPDX-License-Identifier: MIT

from tandem.cleanup import register_cleanup
from tandem.initialize import initialize
from tandem.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
