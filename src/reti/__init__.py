# SPDX-License-Identifier: MIT

from reti.cleanup import register_cleanup
from reti.initialize import initialize
from reti.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
