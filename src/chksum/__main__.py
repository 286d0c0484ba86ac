"""Allow ``python -m chksum``."""

from chksum.cli import run

if __name__ == "__main__":
    run()
